"""FastAPI application - minimal setup with dependency injection."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace_backend.config import app_config
from marketplace_backend.api.dependencies import init_services
from marketplace_backend.api.routes import health, catalog, analytics
from marketplace_backend.infrastructure.scheduler import setup_scheduler

logging.basicConfig(
    level=app_config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting application...")

    # Initialize services with DI
    service = init_services(random_seed=app_config.RANDOM_SEED)

    # Generate and cache every product history up front
    service.warm_up()

    # Setup scheduler
    scheduler = setup_scheduler(service, hour=app_config.REFRESH_HOUR)
    scheduler.start()

    logger.info("Application started")
    yield

    # Shutdown
    logger.info("Shutting down...")
    scheduler.shutdown()
    logger.info("Shutdown complete")


# Create app
app = FastAPI(
    title="Marketplace Analytics API",
    description="Synthetic marketplace product metrics by platform and time window",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(analytics.router)
