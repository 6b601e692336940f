import base64
import binascii
import logging
import re
import time
from dataclasses import dataclass
from typing import Optional

from starlette.concurrency import run_in_threadpool

from raah.adapters.tesseract import TesseractAdapter
from raah.core.config import settings
from raah.core.errors import InvalidImage

DATA_URI_RE = re.compile(r"^data:image/[\w.+-]+(?:;[\w.+-]+=[\w.+-]+)*;base64,(?P<payload>.+)$", re.DOTALL)


@dataclass(frozen=True)
class Recognition:
    text: str

    @property
    def detected(self) -> bool:
        return bool(self.text)


def decode_data_uri(data_uri: str) -> bytes:
    match = DATA_URI_RE.match((data_uri or "").strip())
    if not match:
        raise InvalidImage("image must be a base64 data URI")
    try:
        payload = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImage("image payload is not valid base64") from e
    if not payload:
        raise InvalidImage("image payload is empty")
    return payload


class OCRService:
    def __init__(self, engine=None, languages: Optional[str] = None):
        self.engine = engine if engine is not None else TesseractAdapter(settings.TESSERACT_CMD)
        self.languages = languages or settings.OCR_LANGUAGES

    async def recognize(self, data_uri: str, languages: Optional[str] = None, request_id: str = "n/a") -> Recognition:
        image_bytes = decode_data_uri(data_uri)
        langs = languages or self.languages
        start = time.perf_counter()
        raw = await run_in_threadpool(self.engine.recognize, image_bytes, langs)
        text = (raw or "").strip()
        logging.info(
            "ocr_complete request_id=%s langs=%s bytes=%d chars=%d latency_ms=%.2f",
            request_id,
            langs,
            len(image_bytes),
            len(text),
            (time.perf_counter() - start) * 1000,
        )
        return Recognition(text)
