import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware


class MetricsMiddleware(BaseHTTPMiddleware):
    """Logs status and latency for every request."""

    async def dispatch(self, request, call_next):
        path = request.url.path
        start = time.perf_counter()
        rid = getattr(request.state, "request_id", "n/a")
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        except Exception:
            logging.exception("[METRICS] request_id=%s path=%s error", rid, path)
            raise
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            logging.info("[METRICS] request_id=%s path=%s status=%s latency_ms=%.2f", rid, path, status, elapsed)
