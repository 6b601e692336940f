import uuid
from starlette.middleware.base import BaseHTTPMiddleware

MAX_REQUEST_ID_LEN = 128


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        incoming = request.headers.get("X-Request-Id", "")[:MAX_REQUEST_ID_LEN]
        rid = incoming or uuid.uuid4().hex
        request.state.request_id = rid
        response = await call_next(request)
        response.headers["X-Request-Id"] = rid
        return response
