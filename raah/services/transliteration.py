"""
Resolves a transliteration between two catalog scripts.

Resolution runs as a two-stage pipeline. Each stage returns an `Attempt`:
the offline tables go first, a failed local attempt maps to one call on the
remote service, and a failed remote attempt maps to TransliterationUnavailable.
"""
import logging
import time
from dataclasses import dataclass
from typing import Optional

from raah.adapters.aksharamukha import AksharaAdapter
from raah.adapters.sanscript import SanscriptAdapter
from raah.clients.transliterator_client import TransliteratorClient, build_client
from raah.core.cache import LRUCache, remote_result_key
from raah.core.catalog import script_key, to_remote_script_name
from raah.core.config import settings
from raah.core.errors import LocalConversionError, TransliterationUnavailable, TransliteratorError

NO_PATH = "no conversion path available"

LOCAL_ENGINES = {
    "sanscript": SanscriptAdapter,
    "aksharamukha": AksharaAdapter,
}


@dataclass(frozen=True)
class TransliterationRequest:
    source_script: str
    target_script: str
    text: str


@dataclass(frozen=True)
class Attempt:
    """Outcome of one resolution stage: either an output or a failure reason."""

    engine: str
    output: Optional[str] = None
    reason: Optional[str] = None
    cache_status: str = "none"

    @property
    def ok(self) -> bool:
        return self.output is not None

    @classmethod
    def success(cls, engine: str, output: str, cache_status: str = "none") -> "Attempt":
        return cls(engine=engine, output=output, cache_status=cache_status)

    @classmethod
    def failure(cls, engine: str, reason: str) -> "Attempt":
        return cls(engine=engine, reason=reason)


@dataclass(frozen=True)
class Transliteration:
    output: str
    engine: str
    cache_status: str = "none"

    @property
    def used_remote(self) -> bool:
        return self.engine == "remote"


def build_local_engine(name: str):
    engine_cls = LOCAL_ENGINES.get(name)
    if engine_cls is None:
        if name not in ("", "none"):
            logging.warning("unknown_local_engine name=%s local conversion disabled", name)
        return None
    return engine_cls()


class TransliterationService:
    """
    Local-first transliteration with a remote fallback and an in-memory cache
    of remote results.
    """

    def __init__(self, local=None, client: Optional[TransliteratorClient] = None, cache: Optional[LRUCache] = None):
        self.local = local
        self.client = client
        self.cache = cache if cache is not None else LRUCache(
            max_size=settings.CACHE_MAX_SIZE, default_ttl=settings.CACHE_TTL_SECONDS
        )

    @classmethod
    def from_settings(cls) -> "TransliterationService":
        return cls(local=build_local_engine(settings.LOCAL_ENGINE), client=build_client())

    async def resolve(self, source_script: str, target_script: str, text: str) -> str:
        result = await self.transliterate(TransliterationRequest(source_script, target_script, text))
        return result.output

    async def transliterate(self, req: TransliterationRequest, request_id: str = "n/a") -> Transliteration:
        if not req.text or not req.text.strip():
            return Transliteration("", "noop")
        if script_key(req.source_script) == script_key(req.target_script):
            return Transliteration(req.text, "identity")

        attempt = self._convert_locally(req, request_id)
        if not attempt.ok:
            logging.info(
                "local_conversion_failed request_id=%s from=%s to=%s reason=%s",
                request_id,
                req.source_script,
                req.target_script,
                attempt.reason,
            )
            attempt = await self._convert_remotely(req, request_id)
        if not attempt.ok:
            logging.error(
                "transliteration_unavailable request_id=%s from=%s to=%s reason=%s",
                request_id,
                req.source_script,
                req.target_script,
                attempt.reason,
            )
            raise TransliterationUnavailable(attempt.reason or NO_PATH)
        return Transliteration(attempt.output, attempt.engine, attempt.cache_status)

    def _convert_locally(self, req: TransliterationRequest, request_id: str) -> Attempt:
        if self.local is None:
            return Attempt.failure("local", "local conversion disabled")
        try:
            output = self.local.convert(req.source_script, req.target_script, req.text)
        except LocalConversionError as e:
            return Attempt.failure("local", str(e))
        if not output:
            return Attempt.failure("local", "local conversion produced no output")
        logging.info("local_conversion_success request_id=%s engine=%s", request_id, self.local.name)
        return Attempt.success("local", output)

    async def _convert_remotely(self, req: TransliterationRequest, request_id: str) -> Attempt:
        if self.client is None:
            logging.info("skipping_remote_transliteration request_id=%s reason=disabled", request_id)
            return Attempt.failure("remote", NO_PATH)

        source = to_remote_script_name(req.source_script)
        target = to_remote_script_name(req.target_script)
        key = remote_result_key(source, target, req.text)
        cached = self.cache.get(key)
        if cached is not None:
            return Attempt.success("remote", cached, cache_status="hit")

        start = time.perf_counter()
        try:
            output = await self.client.transliterate(source, target, req.text)
        except TransliteratorError as e:
            return Attempt.failure("remote", e.reason)
        logging.info(
            "remote_transliteration_success request_id=%s latency_ms=%.2f",
            request_id,
            (time.perf_counter() - start) * 1000,
        )
        self.cache.set(key, output)
        return Attempt.success("remote", output, cache_status="miss")
