import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stock_hub.core.errors import StockHubError, StorageFailure

logger = logging.getLogger(__name__)


def _field_name(loc) -> str:
    # drop the "body"/"query"/"path" prefix pydantic puts in front
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(StockHubError)
    async def stock_hub_exception_handler(request: Request, exc: StockHubError):
        if isinstance(exc, StorageFailure):
            logger.error(
                "Storage failure on %s %s: %s (%r)",
                request.method, request.url.path, exc.message, exc.cause,
            )
        return JSONResponse(content=exc.to_body(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": _field_name(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
            for err in exc.errors()
        ]
        return JSONResponse(
            content={"message": "Validation failed", "errors": errors},
            status_code=400,
        )

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(content={"message": "Internal server error"}, status_code=500)
