"""
FastAPI application for Self-Check Triage.

GOVERNANCE:
- Scores are self-assessment aids, not diagnoses
- Crisis answers always surface crisis resources
- No persistence: finished results are kept in memory only
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import assessment_router, symptoms_router
from assessment import (
    AssessmentError,
    CatalogShapeError,
    FlowStateError,
    InputRangeError,
    UnknownCategoryError,
    UnknownLanguageError,
    UnknownQuestionError,
)
from assessment.catalog.provider import get_catalog
from config import get_settings
from logging_config import setup_logging

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Self-Check Triage API",
    description="Weighted self-assessment and symptom scoring engine",
    version="1.0.0",
)

# CORS middleware for the UI collaborator
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict to specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(assessment_router)
app.include_router(symptoms_router)

_STATUS_BY_ERROR: list[tuple[type[AssessmentError], int]] = [
    (InputRangeError, 422),
    (UnknownQuestionError, 422),
    (UnknownCategoryError, 422),
    (UnknownLanguageError, 422),
    (FlowStateError, 409),
    (CatalogShapeError, 500),
]


@app.exception_handler(AssessmentError)
async def assessment_error_handler(request: Request, exc: AssessmentError):
    """Map engine errors to HTTP status codes."""
    status_code = 400
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = code
            break
    if status_code >= 500:
        logger.error("Catalog error while handling %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": type(exc).__name__},
    )


@app.get("/health")
def health_check():
    """Health check endpoint."""
    catalog = get_catalog()
    return {
        "status": "healthy",
        "service": "selfcheck_triage",
        "languages": list(catalog.languages),
    }


@app.get("/")
def root():
    """Root endpoint with API info."""
    return {
        "service": "Self-Check Triage API",
        "version": "1.0.0",
        "governance": "Self-assessment results are not a diagnosis",
        "endpoints": {
            "assessments": "/v1/assessments",
            "symptoms": "/v1/symptoms",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
