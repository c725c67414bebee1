from __future__ import annotations
from typing import Dict
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

class ErrorResponse(BaseModel):
    code: str = Field(examples=["bad_request"])
    detail: str = Field(examples=["Invalid input"])
    meta: dict | None = Field(default=None, examples=[{"field": "text"}])

CODE_MAP: Dict[int, str] = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    413: "payload_too_large",
    415: "unsupported_media_type",
    422: "validation_error",
    500: "internal_error",
}

def install_exception_handlers(app: FastAPI):
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        payload = ErrorResponse(code=CODE_MAP.get(exc.status_code, "error"), detail=str(exc.detail))
        return JSONResponse(status_code=exc.status_code, content=payload.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        payload = ErrorResponse(code="validation_error", detail="Validation failed", meta={"errors": jsonable_errors(exc)})
        return JSONResponse(status_code=422, content=payload.model_dump())

def jsonable_errors(exc: RequestValidationError) -> list:
    # exc.errors() puede traer objetos no serializables en "ctx"/"input"
    out = []
    for err in exc.errors():
        out.append({k: v for k, v in err.items() if k in ("type", "loc", "msg")})
    return out
