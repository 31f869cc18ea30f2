import logging
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tf2sku.api import health_router, sku_router
from tf2sku.config import settings
from tf2sku.models.failure import (
    KnownError,
    RefusalError,
    create_unknown_failure,
    finalize_response,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("tf2sku"),
    debug=settings.debug,
)

app.include_router(health_router)
app.include_router(sku_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Known failures become finalized known_failure envelopes."""
    response = finalize_response(exc.to_response())
    return JSONResponse(status_code=exc.status_code, content=response.model_dump(mode="json"))


@app.exception_handler(RefusalError)
async def refusal_error_handler(_request: Request, exc: RefusalError) -> JSONResponse:
    """Constraint refusals become finalized refusal envelopes."""
    response = finalize_response(exc.to_response())
    return JSONResponse(status_code=400, content=response.model_dump(mode="json"))


@app.exception_handler(Exception)
async def unknown_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Anything else is an unknown failure; no raw 500 reaches the client."""
    logger.exception("Unhandled error: %s", exc)
    response = create_unknown_failure(exc)
    return JSONResponse(status_code=500, content=response.model_dump(mode="json"))
