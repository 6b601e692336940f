import asyncio
import base64
import io

import pytest
from PIL import Image
from pydantic import ValidationError

from conftest import FakeEngine
import raah.adapters.tesseract as tesseract_adapter
from raah.adapters.tesseract import TesseractAdapter
from raah.api.schemas import OCRRequest
from raah.core.config import settings
from raah.core.errors import InvalidImage, OCRProcessingFailed
from raah.services.ocr import OCRService, decode_data_uri


def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), "white").save(buf, format="PNG")
    return buf.getvalue()


def data_uri(raw, mime="image/png"):
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


def test_decode_data_uri():
    raw = png_bytes()
    assert decode_data_uri(data_uri(raw)) == raw
    assert decode_data_uri(data_uri(b"jpeg", "image/jpeg")) == b"jpeg"


@pytest.mark.parametrize("value", ["", "not a uri", "data:text/plain;base64,aGk=", "data:image/png;base64,@@@"])
def test_decode_rejects_bad_input(value):
    with pytest.raises(InvalidImage):
        decode_data_uri(value)


def test_recognize_strips_text_and_passes_languages():
    engine = FakeEngine(text="  नमस्ते\n")
    service = OCRService(engine=engine, languages="eng+hin")
    result = asyncio.run(service.recognize(data_uri(b"img")))
    assert result.text == "नमस्ते"
    assert result.detected
    assert engine.calls == [(b"img", "eng+hin")]


def test_recognize_blank_is_not_an_error():
    service = OCRService(engine=FakeEngine(text=" \n "), languages="eng")
    result = asyncio.run(service.recognize(data_uri(b"img")))
    assert result.text == ""
    assert not result.detected


def test_recognize_engine_failure():
    service = OCRService(engine=FakeEngine(error="engine down"), languages="eng")
    with pytest.raises(OCRProcessingFailed):
        asyncio.run(service.recognize(data_uri(b"img")))


def test_tesseract_adapter_passes_image_and_languages(monkeypatch):
    seen = {}

    def fake_image_to_string(image, lang):
        seen["size"] = image.size
        seen["lang"] = lang
        return "ਸਤ ਸ੍ਰੀ ਅਕਾਲ"

    monkeypatch.setattr(tesseract_adapter.pytesseract, "image_to_string", fake_image_to_string)
    assert TesseractAdapter().recognize(png_bytes(), "eng+pan") == "ਸਤ ਸ੍ਰੀ ਅਕਾਲ"
    assert seen == {"size": (8, 8), "lang": "eng+pan"}


def test_tesseract_adapter_rejects_undecodable_image():
    with pytest.raises(OCRProcessingFailed):
        TesseractAdapter().recognize(b"definitely not an image", "eng")


def test_tesseract_adapter_wraps_engine_errors(monkeypatch):
    def broken(image, lang):
        raise tesseract_adapter.pytesseract.TesseractError(1, "failed loading language")

    monkeypatch.setattr(tesseract_adapter.pytesseract, "image_to_string", broken)
    with pytest.raises(OCRProcessingFailed):
        TesseractAdapter().recognize(png_bytes(), "eng+xyz")


def test_tesseract_adapter_rejects_oversized_image(monkeypatch):
    # Pillow refuses images above twice MAX_IMAGE_PIXELS outright
    monkeypatch.setattr(tesseract_adapter.Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(OCRProcessingFailed) as exc:
        TesseractAdapter().recognize(png_bytes(), "eng")
    assert exc.value.reason == "image is too large"


def test_ocr_request_caps_image_length():
    with pytest.raises(ValidationError):
        OCRRequest(image="a" * (settings.MAX_IMAGE_CHARS + 1))
