"""Shared fakes and fixtures for Raah tests."""

import httpx
import pytest
from fastapi.testclient import TestClient

from raah.api.routes import get_ocr_service, get_transliteration_service
from raah.clients.transliterator_client import TransliteratorClient
from raah.core.cache import LRUCache
from raah.core.errors import LocalConversionError, OCRProcessingFailed
from raah.services.ocr import OCRService
from raah.services.transliteration import TransliterationService

ENDPOINT = "https://translit.test/api/convert"


class FakeLocal:
    name = "fake"
    available = True

    def __init__(self, output=None, error=None):
        self.output = output
        self.error = error
        self.calls = []

    def convert(self, source, target, text):
        self.calls.append((source, target, text))
        if self.error:
            raise LocalConversionError(self.error)
        return self.output


class RecordingTransport:
    """Serves queued httpx responses and records every request."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.responses.pop(0)


class FakeEngine:
    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def recognize(self, image_bytes, languages):
        self.calls.append((image_bytes, languages))
        if self.error:
            raise OCRProcessingFailed(self.error)
        return self.text


def make_client(transport, **kwargs):
    return TransliteratorClient(ENDPOINT, transport=httpx.MockTransport(transport), **kwargs)


def make_service(local=None, transport=None, **client_kwargs):
    client = make_client(transport, **client_kwargs) if transport is not None else None
    return TransliterationService(local=local, client=client, cache=LRUCache(max_size=100, default_ttl=60))


@pytest.fixture
def api():
    """Return a factory building a TestClient around the given services."""
    from raah.main import create_app

    def build(service=None, ocr_service=None):
        app = create_app()
        app.dependency_overrides[get_transliteration_service] = lambda: service or make_service()
        app.dependency_overrides[get_ocr_service] = lambda: ocr_service or OCRService(engine=FakeEngine())
        return TestClient(app)

    return build
