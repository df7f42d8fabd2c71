"""
Route Terrain API

FastAPI application for route elevation profile analysis.

Run:
    uvicorn route_terrain.main:app --reload
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from route_terrain import __version__
from route_terrain.config import settings
from route_terrain.api.v1.router import api_router


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Route Terrain API...")
    if not settings.google_maps_api_key:
        logger.info("Route classification disabled (GOOGLE_MAPS_API_KEY not set)")

    yield

    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="Route Terrain API",
    description="Ascent, descent, grades and flat/hilly/mountainous classification for routes",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
