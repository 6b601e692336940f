import io
import logging
try:
    import pytesseract
except ImportError:
    pytesseract = None
from PIL import Image, UnidentifiedImageError

from raah.core.errors import OCRProcessingFailed


class TesseractAdapter:
    name = "tesseract"

    def __init__(self, tesseract_cmd: str = ""):
        if pytesseract is not None and tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_bytes: bytes, languages: str) -> str:
        """Blocking; run it in a worker thread from async code."""
        if pytesseract is None:
            logging.error("[TESSERACT] pytesseract missing")
            raise OCRProcessingFailed("OCR engine is not installed")
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                return pytesseract.image_to_string(image.convert("RGB"), lang=languages)
        except UnidentifiedImageError as e:
            raise OCRProcessingFailed("image could not be decoded") from e
        except Image.DecompressionBombError as e:
            logging.warning("[TESSERACT] oversized image rejected err=%s", e)
            raise OCRProcessingFailed("image is too large") from e
        except pytesseract.TesseractNotFoundError as e:
            logging.error("[TESSERACT] binary not found err=%s", e)
            raise OCRProcessingFailed("OCR engine is not installed") from e
        except (pytesseract.TesseractError, OSError) as e:
            logging.error("[TESSERACT] recognition failed err=%s", e)
            raise OCRProcessingFailed("OCR processing failed") from e
