"""Transient storage for uploaded label images.

Each upload is written to its own file in the upload directory for the
duration of one request and removed afterwards, whether processing
succeeded or not.
"""

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager

from label_verifier.utils.file_validation import file_extension

logger = logging.getLogger(__name__)


@contextmanager
def stored_upload(image_bytes: bytes, filename: str, upload_dir: str) -> Iterator[str]:
    """Write an uploaded image to a temporary file and yield its path.

    The file keeps the upload's extension so image readers can sniff the
    format. It is deleted on exit; a failed delete is logged, not raised.
    """
    os.makedirs(upload_dir, exist_ok=True)
    fd, path = tempfile.mkstemp(suffix=file_extension(filename), dir=upload_dir)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(image_bytes)
        yield path
    finally:
        try:
            os.remove(path)
        except OSError as e:
            logger.warning("Failed to delete temp file %s: %s", path, e)
