"""API routes module."""
from powerscore.api.routes.assessments import router as assessments_router
from powerscore.api.routes.standards import router as standards_router

__all__ = [
    "assessments_router",
    "standards_router",
]
