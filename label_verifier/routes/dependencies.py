from fastapi import Request

from label_verifier.services.ocr_service import OCRProvider


def get_ocr_provider(request: Request) -> OCRProvider:
    """Return the OCR provider the app was created with."""
    return request.app.state.ocr_provider
