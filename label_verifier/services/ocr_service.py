import logging
import threading
from typing import Protocol

import numpy as np
from PIL import Image, ImageFilter, UnidentifiedImageError
from rapidocr_onnxruntime import RapidOCR

from label_verifier.config import Settings

logger = logging.getLogger(__name__)


class OCRProviderError(Exception):
    """Raised when the OCR provider cannot process an image."""


class OCRProvider(Protocol):
    """What the HTTP layer needs from an OCR backend.

    extract_text returns the full recognized text of the image, or None when
    nothing was detected. Any failure is raised, never returned.
    """

    name: str

    def extract_text(self, image_path: str) -> str | None: ...

    def is_available(self) -> bool: ...


class RapidOCRProvider:
    """Wraps RapidOCR to extract text from label images.

    RapidOCR uses PaddleOCR's neural network models but runs them through
    ONNX Runtime — more accurate than Tesseract, lighter than full PaddlePaddle.

    The engine is loaded on first use and reused across requests. Requests
    run OCR on worker threads, so loading is guarded by a lock.
    """

    name = "RapidOCR (ONNX Runtime)"

    def __init__(
        self,
        config_path: str | None = None,
        max_image_dimension: int = 1024,
        rotations: list[int] | None = None,
    ):
        self.config_path = config_path
        self.max_image_dimension = max_image_dimension
        self.rotations = rotations if rotations is not None else [0, 90]
        self._engine: RapidOCR | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "RapidOCRProvider":
        return cls(
            config_path=settings.ocr_config_path,
            max_image_dimension=settings.ocr_max_image_dimension,
            rotations=settings.ocr_rotations,
        )

    def _get_engine(self) -> RapidOCR:
        """Lazy-initialize the RapidOCR engine on first use."""
        with self._lock:
            if self._engine is None:
                logger.info("Loading RapidOCR engine")
                if self.config_path:
                    self._engine = RapidOCR(config_path=self.config_path)
                else:
                    self._engine = RapidOCR()
            return self._engine

    def is_available(self) -> bool:
        try:
            self._get_engine()
        except Exception:
            logger.exception("RapidOCR engine failed to load")
            return False
        return True

    def _preprocess(self, image: Image.Image) -> Image.Image:
        """Resize and sharpen an image for OCR."""
        image = image.convert("RGB")
        w, h = image.size
        if max(w, h) > self.max_image_dimension:
            ratio = self.max_image_dimension / max(w, h)
            image = image.resize((int(w * ratio), int(h * ratio)), Image.LANCZOS)
        image = image.filter(ImageFilter.SHARPEN)
        return image

    def _ocr_image(self, image: Image.Image) -> str:
        """Run OCR on a preprocessed PIL image."""
        result, _ = self._get_engine()(np.array(image))
        if not result:
            return ""
        return "\n".join(detection[1] for detection in result)

    def extract_text(self, image_path: str) -> str | None:
        """Run OCR on an image file at each configured rotation and aggregate.

        Rotated passes catch vertical/sideways text (common on bottle labels).
        Lines seen in an earlier pass are dropped, ignoring case.

        Returns:
            The aggregated text, or None if no text was detected.

        Raises:
            OCRProviderError: If the file is not a readable image.
        """
        try:
            with Image.open(image_path) as opened:
                image = self._preprocess(opened)
        except (UnidentifiedImageError, OSError) as e:
            raise OCRProviderError(f"Could not read image: {e}") from e

        all_lines = []
        seen = set()

        for angle in self.rotations:
            rotated = image if angle == 0 else image.rotate(angle, expand=True)

            for line in self._ocr_image(rotated).split("\n"):
                line_stripped = line.strip()
                line_lower = line_stripped.lower()
                if line_lower and line_lower not in seen:
                    seen.add(line_lower)
                    all_lines.append(line_stripped)

        if not all_lines:
            return None
        return "\n".join(all_lines)
