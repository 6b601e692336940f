import os
from dotenv import load_dotenv

from raah.core.catalog import ocr_language_hint

load_dotenv()

DEFAULT_ENDPOINT = "https://aksharamukha.appspot.com/api/convert"


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    PORT: int = int(os.environ.get("PORT", 8080))
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
    MAX_TEXT_LEN: int = int(os.environ.get("MAX_TEXT_LEN", 5000))
    # base64 characters; about 7.5 MB of image data
    MAX_IMAGE_CHARS: int = int(os.environ.get("MAX_IMAGE_CHARS", 10_000_000))
    RATE_LIMIT_PER_MIN: int = int(os.environ.get("RATE_LIMIT_PER_MIN", 60))
    TRANSLITERATOR_ENDPOINT: str = os.environ.get("TRANSLITERATOR_ENDPOINT", DEFAULT_ENDPOINT)
    TRANSLITERATOR_TIMEOUT_SECONDS: float = float(os.environ.get("TRANSLITERATOR_TIMEOUT_SECONDS", 15))
    TRANSLITERATOR_RETRY_DATA_PARAM: bool = env_flag("TRANSLITERATOR_RETRY_DATA_PARAM")
    TRANSLITERATOR_ENABLED: bool = bool(TRANSLITERATOR_ENDPOINT.strip())
    # sanscript | aksharamukha | none
    LOCAL_ENGINE: str = os.environ.get("LOCAL_ENGINE", "sanscript").strip().lower()
    CACHE_TTL_SECONDS: int = int(os.environ.get("CACHE_TTL_SECONDS", 600))
    CACHE_MAX_SIZE: int = int(os.environ.get("CACHE_MAX_SIZE", 5000))
    OCR_LANGUAGES: str = os.environ.get("OCR_LANGUAGES") or ocr_language_hint()
    TESSERACT_CMD: str = os.environ.get("TESSERACT_CMD", "")


settings = Settings()
