# backend/trip_api/api/errors.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from trip_api.core.logger import logger


# every error body is a single human-readable "error" field
def register_exception_handlers(app: FastAPI):

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # loc + msg only, "input" may hold a password
        problems = [(err.get("loc"), err.get("msg")) for err in exc.errors()]
        logger.info(f"Rejected malformed body on {request.method} {request.url.path}: {problems}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})
