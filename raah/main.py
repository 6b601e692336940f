import logging
from fastapi import FastAPI
from raah.api.routes import router as api_router
from raah.core.config import settings
from raah.core.logging import configure_logging
from raah.middleware.request_id import RequestIDMiddleware
from raah.middleware.metrics import MetricsMiddleware
from raah.middleware.throttle import ThrottleMiddleware


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(title="Raah Transliteration", version="1.0.0")

    # last added runs first: request id is assigned before metrics and throttling see the request
    app.add_middleware(ThrottleMiddleware, max_per_minute=settings.RATE_LIMIT_PER_MIN)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    logging.info(
        "raah_startup remote_enabled=%s local_engine=%s rate_limit_per_min=%s",
        settings.TRANSLITERATOR_ENABLED,
        settings.LOCAL_ENGINE,
        settings.RATE_LIMIT_PER_MIN,
    )

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run("raah.main:app", host="0.0.0.0", port=settings.PORT)
