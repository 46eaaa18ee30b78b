from fastapi import APIRouter, Depends

from label_verifier.routes.dependencies import get_ocr_provider
from label_verifier.services.ocr_service import OCRProvider

router = APIRouter()


@router.get("/health")
def health_check(ocr_provider: OCRProvider = Depends(get_ocr_provider)):
    """Health endpoint — confirms FastAPI is running and the OCR engine loads."""
    return {
        "status": "healthy",
        "ocr_engine": {
            "available": ocr_provider.is_available(),
            "engine": ocr_provider.name,
        },
    }
