"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Depends

from api.dependencies import get_store
from database.repositories import Store

router = APIRouter()

@router.get("/health")
async def health_check(store: Store = Depends(get_store)):
    """Health check - verifies the store answers"""
    try:
        connected = await store.ping()
    except Exception as e:
        # Only report unhealthy for actual infrastructure issues
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    if not connected:
        raise HTTPException(status_code=503, detail="Health check failed: database not reachable")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected",
        "store": type(store).__name__
    }
