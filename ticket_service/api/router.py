"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from ticket_service.api.routes import purchases

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(purchases.router)
