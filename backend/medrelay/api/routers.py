from fastapi import APIRouter

from .endpoints import analysis
from .endpoints import health
from .endpoints import reports

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(analysis.router, prefix="", tags=["analysis"])
api_router.include_router(reports.router, prefix="", tags=["reports"])
