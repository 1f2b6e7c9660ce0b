from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any
import json
import logging

logger = logging.getLogger(__name__)

class EscapedJSONResponse(JSONResponse):
    """JSON with non-ASCII escaped, so line item fields and echoed ids holding lone surrogates still render"""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=True, allow_nan=False, indent=None, separators=(",", ":")).encode("utf-8")

async def http_error_handler(request: Request, exc: StarletteHTTPException) -> EscapedJSONResponse:
    """Every error body is {"error": message}"""
    if isinstance(exc, HTTPException):
        message = exc.detail
    elif exc.status_code == 404:
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    else:
        message = exc.detail
    return EscapedJSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)

async def body_error_handler(request: Request, exc: RequestValidationError) -> EscapedJSONResponse:
    logger.info("Unreadable body on %s %s: %s", request.method, request.url.path, exc.errors())
    return EscapedJSONResponse(status_code=400, content={"error": "Request body must be valid JSON"})

async def unhandled_error_handler(request: Request, exc: Exception) -> EscapedJSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return EscapedJSONResponse(status_code=500, content={"error": "Something went wrong!"})

def register_error_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, body_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
