# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.exception_handlers import register_exception_handlers
from .api.v1 import user_router
from .core.logging import configure_logging
from .di.container import get_container

logger = logging.getLogger(__name__)

API_BASE_PATH = "/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Configures logging, builds the DI container (MongoDB client,
    repository, notifier) and ensures collection indexes; on shutdown
    releases the notifier and the MongoDB client.
    """
    configure_logging()
    
    container = get_container()
    await container.startup()
    logger.info("User API started")
    
    yield
    
    try:
        await container.shutdown()
    except Exception as e:
        logger.error(f"Error during container shutdown: {e}", exc_info=True)
    
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Domain error handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    application = FastAPI(
        title="User API",
        version="1.0.0",
        description="CRUD API for user records with update notifications",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    application.include_router(user_router, prefix=f"{API_BASE_PATH}/users")
    
    @application.get("/health", tags=["health"])
    async def health_check():
        """Liveness probe"""
        return {"status": "ok"}
    
    return application


# Create application instance
app = create_application()
