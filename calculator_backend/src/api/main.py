"""FastAPI application for the calculator backend.

Usage:
    uvicorn src.api.main:app --port 3000
    python -m src.api.main          # honours PORT / HOST
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError

from src.core.config import get_settings
from src.core.errors import BODY_PARSE_ERROR_DETAIL, MALFORMED_JSON_MESSAGE, InvalidInputError
from src.core.log_config import setup_logging
from src.routers import calculate, health

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Calculator Backend",
    description="Arithmetic operations (sum, product) and a health check over JSON.",
    version=settings.app_version,
    openapi_tags=[
        {"name": "health", "description": "Service health and welcome banner"},
        {"name": "calculate", "description": "Arithmetic operations"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.warning("Rejected input on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


# Body validation failures surface as InvalidInput, never as FastAPI's default 422
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        invalid = InvalidInputError(MALFORMED_JSON_MESSAGE, details=errors)
    else:
        invalid = InvalidInputError(details=errors)
    return await invalid_input_handler(request, invalid)


@app.exception_handler(StarletteHTTPException)
async def http_exception_passthrough(request: Request, exc: StarletteHTTPException):
    # FastAPI reports body decode failures outside json.loads (e.g. int digit limit) this way
    if exc.status_code == 400 and exc.detail == BODY_PARSE_ERROR_DETAIL:
        return await invalid_input_handler(request, InvalidInputError(MALFORMED_JSON_MESSAGE))
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


# Catch-all for truly unhandled exceptions only
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Routers
app.include_router(health.router)
app.include_router(calculate.router)


# PUBLIC_INTERFACE
def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    current = get_settings()
    logger.info("Server is running on port %s", current.port)
    uvicorn.run(app, host=current.host, port=current.port, log_level=current.log_level.lower())


if __name__ == "__main__":
    run()
