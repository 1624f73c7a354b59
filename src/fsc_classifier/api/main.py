"""FastAPI application exposing FSC classification as a REST API.

Start the server with:
    uvicorn fsc_classifier.api.main:app --reload
"""
from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fsc_classifier import __version__
from fsc_classifier.api.routes.classify import router as classify_router
from fsc_classifier.api.routes.upload import router as upload_router
from fsc_classifier.errors import (
    ClassificationError,
    ConfigurationError,
    InputValidationError,
    SchemaError,
    TransportError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[ClassificationError], int] = {
    InputValidationError: 400,
    ConfigurationError: 500,
    TransportError: 502,
    SchemaError: 502,
}

app = FastAPI(
    title="FSC Classifier API",
    description="Classify companies into Federal Supply Classification codes",
    version=__version__,
)

# CORS middleware - origins from env, defaults to the local web UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("FSC_CORS_ORIGINS", "http://localhost:3000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(classify_router)
app.include_router(upload_router)


# ----------------------------------------------------------------------------
# Error handling
# ----------------------------------------------------------------------------

def status_for(exc: ClassificationError) -> int:
    for exc_type, status in ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            return status
    return 500


@app.exception_handler(ClassificationError)
async def classification_error_handler(request: Request, exc: ClassificationError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error(f"Classification failed on {request.url.path}: {exc}", exc_info=exc)
    else:
        logger.info(f"Rejected request on {request.url.path}: {exc}")
    return JSONResponse(status_code=status, content={"error": str(exc), "kind": exc.kind})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = [{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()]
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body.", "kind": InputValidationError.kind, "detail": detail},
    )


# ----------------------------------------------------------------------------
# Health Endpoint
# ----------------------------------------------------------------------------

class HealthResponse(BaseModel):
    """Response body for health endpoint."""

    status: str


@app.get("/api/v1/health", response_model=HealthResponse)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
