"""
FastAPI application entry point for the IR translator backend.
"""
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.auth import get_current_user
from app.config import settings
from app.database import init_db
from app.schemas.highlight import HealthResponse
from app.api import (
    highlight,
    dictionary,
    terms,
)

import logging

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="IR Translator Backend",
    description="International relations terminology highlighting with Japanese translations",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(highlight.router, prefix="/api", tags=["Highlight"])
app.include_router(dictionary.router, prefix="/api", tags=["Dictionary"])
app.include_router(terms.router, prefix="/api", tags=["Custom Terms"])


@app.on_event("startup")
async def startup_event():
    """Execute on application startup."""
    from app.core.ir_dictionary import BUILTIN_TERMS

    logger.info("IR Translator backend starting...")
    logger.info(f"Port: {settings.PORT}")
    logger.info(f"CORS origins: {settings.allowed_origins_list}")
    logger.info(f"Database: {settings.DATABASE_URL.split('@')[1] if '@' in settings.DATABASE_URL else settings.DATABASE_URL}")

    init_db()
    logger.info(f"Built-in dictionary: {len(BUILTIN_TERMS)} terms")


@app.on_event("shutdown")
async def shutdown_event():
    """Execute on application shutdown."""
    logger.info("IR Translator backend shutting down...")


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {
        "service": "IR Translator Backend",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/api/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        message="IR translator backend is running"
    )


@app.get("/api/me", tags=["Auth"])
async def me(user: dict = Depends(get_current_user)):
    """Claims of the current bearer token."""
    return {"user": user}
