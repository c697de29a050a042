"""
Ticket Purchase API - Main Application Entry Point

HTTP wrapper around TicketService:
- Business-rule validation and pricing of ticket purchases
- Payment and seat reservation through swappable provider interfaces
- Structured logging with request correlation
- Prometheus metrics
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ticket_service.core.config import get_settings
from ticket_service.core.logging import setup_logging, get_logger
from ticket_service.core.metrics import metrics_endpoint
from ticket_service.api.router import api_router
from ticket_service.api.middleware import RequestLoggingMiddleware
from ticket_service.domain.errors import InvalidPurchaseError

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    yield

    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Validates, prices and settles ticket purchases",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


@app.exception_handler(InvalidPurchaseError)
async def invalid_purchase_handler(request: Request, exc: InvalidPurchaseError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "code": exc.kind.value},
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/metrics", include_in_schema=False)
def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
