import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from label_verifier.config import Settings, get_settings
from label_verifier.models.schemas import DeclaredLabel, ErrorResponse, VerifyResponse
from label_verifier.routes.dependencies import get_ocr_provider
from label_verifier.services.ocr_service import OCRProvider
from label_verifier.services.upload_service import stored_upload
from label_verifier.services.verification_service import verify_label
from label_verifier.utils.text_normalization import excerpt

logger = logging.getLogger(__name__)

router = APIRouter()

NO_FILE_MESSAGE = "No image file uploaded."
NO_TEXT_MESSAGE = "Could not read any text from the label image. Please use a clearer image."
PROCESSING_ERROR_MESSAGE = "A server error occurred during OCR processing. Check the OCR provider setup."

# Thread pool for OCR, which is CPU-bound
_executor = ThreadPoolExecutor(max_workers=4)


def _error(status_code: int, message: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/api/verify",
    response_model=VerifyResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def verify_label_image(
    label_image: UploadFile | None = File(None, alias="labelImage"),
    brand_name: str | None = Form(None, alias="brandName"),
    product_class: str | None = Form(None, alias="productClass"),
    alcohol_content: str | None = Form(None, alias="alcoholContent"),
    net_contents: str | None = Form(None, alias="netContents"),
    ocr_provider: OCRProvider = Depends(get_ocr_provider),
    settings: Settings = Depends(get_settings),
):
    """Verify an uploaded label image against the declared label fields.

    The image is stored temporarily, read by the OCR provider on a worker
    thread, and the recognized text is checked field by field. The stored
    file is removed whatever happens.
    """
    if label_image is None or not label_image.filename:
        return _error(400, NO_FILE_MESSAGE)

    # Echo back only the fields the client actually sent
    form_input = {
        key: value
        for key, value in (
            ("brandName", brand_name),
            ("productClass", product_class),
            ("alcoholContent", alcohol_content),
            ("netContents", net_contents),
        )
        if value is not None
    }
    declared = DeclaredLabel.model_validate(form_input)

    try:
        image_bytes = await label_image.read()
        with stored_upload(image_bytes, label_image.filename, settings.upload_dir) as image_path:
            loop = asyncio.get_event_loop()
            extracted_text = await loop.run_in_executor(
                _executor, ocr_provider.extract_text, image_path
            )

        if not extracted_text:
            logger.info("No text detected in %s", label_image.filename)
            return VerifyResponse(
                overall_match=False,
                error=NO_TEXT_MESSAGE,
                extracted_text="",
                form_input=form_input,
            )

        report = verify_label(extracted_text, declared)
    except Exception as e:
        logger.exception("OCR/verification failed for %s", label_image.filename)
        return _error(500, PROCESSING_ERROR_MESSAGE, details=str(e))

    logger.info(
        "Verified %s: overall_match=%s", label_image.filename, report.overall_match
    )
    return VerifyResponse(
        overall_match=report.overall_match,
        discrepancies=report.discrepancies,
        extracted_text=excerpt(extracted_text, settings.extracted_text_excerpt_length),
        form_input=form_input,
    )
