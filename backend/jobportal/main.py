import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from jobportal.core.config import settings
from jobportal.core.logging import configure_logging
from jobportal.db.base import Base
from jobportal.db.session import engine

# Import all models so SQLAlchemy can discover them for table creation
from jobportal.models import User  # noqa: F401

from jobportal.api.api import api_router
from jobportal.api.errors import register_error_handlers

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables on startup."""
    Base.metadata.create_all(bind=engine)
    logger.info("%s started (upload backend: %s)", settings.APP_NAME, settings.UPLOAD_BACKEND)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Account registration, login sessions and profiles for the job portal",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS Middleware - allowlist from env (comma-separated)
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in settings.BACKEND_CORS_ORIGINS.split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

register_error_handlers(app)

if settings.UPLOAD_BACKEND.lower() == "local":
    # Serves files stored by the local uploader at UPLOAD_BASE_URL
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.APP_NAME} API"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Include API router with /api/v1 prefix
app.include_router(api_router, prefix="/api/v1")
