# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

# Local application imports
from .api.v1 import vendor_router, firm_router, product_router
from .core.config import get_settings
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Connections are opened lazily on first use; shutdown closes the shared
    HTTP client used for Cloudinary uploads and the MongoDB client.
    """
    settings = get_settings()
    if not settings.cloud_name:
        logger.warning("CLOUD_NAME is not set; image uploads will fail")
    logger.info("DineDash catalog backend started")
    
    yield
    
    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)
    
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    application = FastAPI(
        title="DineDash Catalog API",
        version="1.0.0",
        description="Vendor, firm and product catalog with Cloudinary image ingestion",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    application.include_router(vendor_router, prefix="/vendor")
    application.include_router(firm_router, prefix="/firm")
    application.include_router(product_router, prefix="/product")
    
    @application.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def home() -> str:
        return "<h1> Welcome to DineDash"
    
    return application


# Create application instance
app = create_application()
