# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Callable, Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import camera_router, dashboard_router, location_router, notifications_router
from .core.config import get_settings
from .di.session import DashboardSession

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], DashboardSession]


def _make_lifespan(session_factory: SessionFactory):
    @asynccontextmanager
    async def lifespan(application: FastAPI):
        """
        Lifespan context manager for startup/shutdown events.
        
        Opens the dashboard session (initial camera fetch included) on
        startup and closes it, HTTP client included, on shutdown.
        """
        session = session_factory()
        await session.start()
        application.state.session = session
        logger.info("Dashboard session attached to application")
        
        try:
            yield
        finally:
            application.state.session = None
            await session.close()
            logger.info("Application shutdown complete")
    
    return lifespan


def create_application(session_factory: Optional[SessionFactory] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging level
    - CORS middleware configuration
    - API route registration
    
    Args:
        session_factory: Builds the DashboardSession; defaults to one wired
            from environment settings
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    application = FastAPI(
        title="Camera Admin Dashboard API",
        version="1.0.0",
        description="Session camera state over the remote camera API",
        lifespan=_make_lifespan(session_factory or DashboardSession),
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Register API routers
    application.include_router(camera_router, prefix="/api/v1/cameras")
    application.include_router(dashboard_router, prefix="/api/v1/dashboard")
    application.include_router(location_router, prefix="/api/v1/locations")
    application.include_router(notifications_router, prefix="/api/v1/notifications")
    
    return application


# Create application instance
app = create_application()
