"""Health check endpoint."""

from fastapi import APIRouter

from tforth import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "tforth-api"
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness check endpoint."""
    from api.routes.sessions import sessions_db

    return {
        "ready": True,
        "sessions": len(sessions_db),
    }
