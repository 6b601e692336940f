"""
HTTP client for the remote Aksharamukha transliteration service.
"""
import asyncio
import logging
import time
from typing import Optional

import httpx

from raah.core.config import settings
from raah.core.errors import TransliteratorError

logger = logging.getLogger(__name__)

EMPTY_RESPONSE = "empty response from service"


class TransliteratorClient:
    def __init__(
        self,
        endpoint: str,
        timeout_seconds: float = 15,
        retry_with_data_param: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout_seconds
        self.retry_with_data_param = retry_with_data_param
        self.transport = transport

    async def transliterate(self, source: str, target: str, text: str) -> str:
        """
        Convert `text` between two remote script names.
        Raises TransliteratorError on timeout, network failure, non-2xx or empty body.
        """
        timeout = httpx.Timeout(self.timeout)
        start = time.perf_counter()
        logger.info(
            "[TRANSCLIENT] event=start dependency=aksharamukha from=%s to=%s chars=%d",
            source,
            target,
            len(text),
        )
        async with httpx.AsyncClient(timeout=timeout, transport=self.transport) as client:
            try:
                body = await asyncio.wait_for(self._attempts(client, source, target, text), timeout=self.timeout)
            except asyncio.TimeoutError as e:
                logger.error("[TRANSCLIENT] event=timeout dependency=aksharamukha timeout_s=%s", self.timeout)
                raise TransliteratorError(f"request timed out after {self.timeout:g}s") from e
            except TransliteratorError as e:
                logger.error(
                    "[TRANSCLIENT] event=error dependency=aksharamukha status=%s latency_ms=%.2f err=%s",
                    e.status_code,
                    (time.perf_counter() - start) * 1000,
                    e.reason,
                )
                raise
        logger.info(
            "[TRANSCLIENT] event=ok dependency=aksharamukha latency_ms=%.2f",
            (time.perf_counter() - start) * 1000,
        )
        return body

    async def _attempts(self, client: httpx.AsyncClient, source: str, target: str, text: str) -> str:
        payload_keys = ["text", "data"] if self.retry_with_data_param else ["text"]
        for payload_key in payload_keys[:-1]:
            try:
                return await self._attempt(client, source, target, text, payload_key)
            except TransliteratorError as e:
                logger.warning("[TRANSCLIENT] event=retry payload_key=data after=%s", e.reason)
        return await self._attempt(client, source, target, text, payload_keys[-1])

    async def _attempt(self, client: httpx.AsyncClient, source: str, target: str, text: str, payload_key: str) -> str:
        params = {"from": source, "to": target, payload_key: text}
        try:
            resp = await client.get(self.endpoint, params=params, headers={"Accept": "text/plain, */*"})
        except httpx.HTTPError as e:
            raise TransliteratorError(f"network error: {e.__class__.__name__}") from e
        if not resp.is_success:
            raise TransliteratorError(f"API error ({resp.status_code})", status_code=resp.status_code)
        body = resp.text
        if not body:
            raise TransliteratorError(EMPTY_RESPONSE, status_code=resp.status_code)
        return body


def build_client() -> Optional[TransliteratorClient]:
    if not settings.TRANSLITERATOR_ENABLED:
        return None
    return TransliteratorClient(
        endpoint=settings.TRANSLITERATOR_ENDPOINT.strip(),
        timeout_seconds=settings.TRANSLITERATOR_TIMEOUT_SECONDS,
        retry_with_data_param=settings.TRANSLITERATOR_RETRY_DATA_PARAM,
    )
