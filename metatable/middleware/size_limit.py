from __future__ import annotations
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from ..errors import ErrorResponse
from ..config import settings

class SizeLimitMiddleware(BaseHTTPMiddleware):
    """
    Rechaza peticiones cuyo Content-Length excede MAX_BODY_BYTES.
    Los documentos se procesan enteros en memoria, así que el límite es el
    único tope de tamaño. Sin Content-Length, deja pasar.
    """
    def __init__(self, app, max_bytes: int | None = None):
        super().__init__(app)
        self.max_bytes = max_bytes or settings.max_body_bytes

    async def dispatch(self, request: Request, call_next):
        cl = request.headers.get("content-length")
        if cl and cl.isdigit() and int(cl) > self.max_bytes:
            err = ErrorResponse(code="payload_too_large", detail=f"Body too large (> {self.max_bytes} bytes)", meta={"max": self.max_bytes})
            return JSONResponse(status_code=413, content=err.model_dump())
        return await call_next(request)
