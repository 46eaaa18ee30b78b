import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve paths relative to the project root (one level up from label_verifier/).
# This keeps the upload directory in one place regardless of where uvicorn is invoked.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseSettings):
    """Service settings loaded from environment variables or a .env file.

    Only the HTTP layer and the OCR provider read these; the verification
    engine does not depend on configuration.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Label Verification API"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # CORS - allow all origins by default (frontend runs on its own dev server)
    cors_origins: list[str] = ["*"]

    # Uploaded label images are written here and deleted after each request
    upload_dir: str = os.path.join(BASE_DIR, "uploads")

    # Length of the OCR text echoed back in responses
    extracted_text_excerpt_length: int = 300

    # OCR provider settings. RapidOCR runs locally and needs no API key; a
    # config file can point it at custom model files.
    ocr_config_path: str | None = None
    ocr_max_image_dimension: int = 1024  # larger images are scaled down
    ocr_rotations: list[int] = [0, 90]  # 90 catches vertical text on labels


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
