import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from raah.core.rate_limit import RateLimiter


class ThrottleMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, max_per_minute: int):
        super().__init__(app)
        self.rate_limiter = RateLimiter(max_per_minute=max_per_minute)

    async def dispatch(self, request, call_next):
        # health checks are never throttled
        if request.url.path.endswith("/health"):
            return await call_next(request)

        # keyed on the peer address; request headers are caller-controlled
        client_key = request.client.host if request.client else "unknown"
        if not self.rate_limiter.allow(client_key):
            rid = getattr(request.state, "request_id", "n/a")
            retry_after = self.rate_limiter.retry_after(client_key)
            logging.warning("[THROTTLE] request_id=%s client=%s retry_after=%s", rid, client_key, retry_after)
            return JSONResponse(
                {"detail": "Rate limit exceeded"},
                status_code=429,
                headers={"Retry-After": str(retry_after)},
            )
        return await call_next(request)
