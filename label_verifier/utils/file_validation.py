def file_extension(filename: str) -> str:
    """Lowercased extension including the dot ("Label.JPG" -> ".jpg"), or "".

    Used only to name the temporary copy of an upload. Uploads are not
    filtered by extension: browser Blob uploads arrive as "blob", and files
    Pillow cannot decode fail in the OCR provider instead.
    """
    return "." + filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
