"""API routes."""

from api.routes.assessment import router as assessment_router
from api.routes.symptoms import router as symptoms_router

__all__ = ["assessment_router", "symptoms_router"]
