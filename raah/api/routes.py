import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from raah.api.schemas import (
    OCRRequest,
    OCRResponse,
    ScriptsResponse,
    TransliterateRequest,
    TransliterateResponse,
)
from raah.core.catalog import catalog_entries, to_speech_locale
from raah.core.config import settings
from raah.core.errors import InvalidImage, OCRProcessingFailed, TransliterationUnavailable
from raah.services.ocr import OCRService
from raah.services.transliteration import TransliterationRequest, TransliterationService

router = APIRouter()


@lru_cache(maxsize=1)
def get_transliteration_service() -> TransliterationService:
    return TransliterationService.from_settings()


@lru_cache(maxsize=1)
def get_ocr_service() -> OCRService:
    return OCRService()


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "n/a")


@router.get("/health")
async def health(service: TransliterationService = Depends(get_transliteration_service)):
    cache_stats = service.cache.stats()
    return {
        "ok": True,
        "remote_enabled": service.client is not None,
        "local_engine": service.local.name if service.local is not None else "none",
        "local_engine_available": bool(service.local is not None and service.local.available),
        "cache_size": cache_stats["size"],
        "cache_hits": cache_stats["hits"],
        "cache_misses": cache_stats["misses"],
    }


@router.get("/scripts", response_model=ScriptsResponse)
async def scripts():
    return ScriptsResponse(scripts=catalog_entries())


async def _run_transliteration(
    service: TransliterationService, req: TransliterationRequest, request: Request, response: Response
) -> TransliterateResponse:
    try:
        result = await service.transliterate(req, _request_id(request))
    except TransliterationUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    response.headers["X-Transliterator-Used"] = "true" if result.used_remote else "false"
    response.headers["X-Transliterator-Cache"] = result.cache_status
    return TransliterateResponse(
        output=result.output,
        source_script=req.source_script,
        target_script=req.target_script,
        engine=result.engine,
        speech_locale=to_speech_locale(req.target_script),
    )


@router.post("/transliterate", response_model=TransliterateResponse)
async def transliterate(
    body: TransliterateRequest,
    request: Request,
    response: Response,
    service: TransliterationService = Depends(get_transliteration_service),
):
    req = TransliterationRequest(body.source_script, body.target_script, body.text)
    return await _run_transliteration(service, req, request, response)


@router.get("/transliterate", response_model=TransliterateResponse)
async def transliterate_query(
    request: Request,
    response: Response,
    source_script: str = Query(..., alias="from"),
    target_script: str = Query(..., alias="to"),
    text: str = Query("", max_length=settings.MAX_TEXT_LEN),
    service: TransliterationService = Depends(get_transliteration_service),
):
    req = TransliterationRequest(source_script, target_script, text)
    return await _run_transliteration(service, req, request, response)


@router.post("/ocr", response_model=OCRResponse)
async def ocr(body: OCRRequest, request: Request, service: OCRService = Depends(get_ocr_service)):
    rid = _request_id(request)
    try:
        recognition = await service.recognize(body.image, body.languages, rid)
    except InvalidImage as e:
        raise HTTPException(status_code=400, detail=e.reason) from e
    except OCRProcessingFailed as e:
        logging.error("ocr_failed request_id=%s reason=%s", rid, e.reason)
        raise HTTPException(status_code=502, detail="OCR processing failed") from e
    if not recognition.detected:
        return OCRResponse(text="", detected=False, message="Could not detect any text in the image")
    return OCRResponse(text=recognition.text, detected=True, message="Text has been extracted from the image")
