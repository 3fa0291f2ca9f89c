"""
Health check endpoint
"""
from fastapi import APIRouter
from app.constants import SERVICE_NAME

router = APIRouter()


@router.get("/health")
async def health_check():
    """Liveness probe"""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
    }
