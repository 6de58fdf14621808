"""
API routers module.
"""
from carbon_tracker.api.analytics import router as analytics_router
from carbon_tracker.api.businesses import router as businesses_router
from carbon_tracker.api.calculations import router as calculations_router
from carbon_tracker.api.categories import router as categories_router
from carbon_tracker.api.logs import router as logs_router

__all__ = [
    "analytics_router",
    "businesses_router",
    "calculations_router",
    "categories_router",
    "logs_router",
]
