"""
tforth API - FastAPI Application

Run with: uvicorn api.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from tforth import __version__
from api.routes.sessions import router as sessions_router, sessions_db
from api.routes.health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("tforth API starting...")
    yield
    logger.info(f"tforth API shutting down, dropping {len(sessions_db)} sessions")
    sessions_db.clear()


app = FastAPI(
    title="tforth API",
    description="Stack-language interpreter sessions over HTTP",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(sessions_router, prefix="/api/v1", tags=["Sessions"])


@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "tforth API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
