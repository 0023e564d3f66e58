"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...config import settings
from ...services.session import BookSession, get_session

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/store", status_code=status.HTTP_200_OK)
def health_store(session: BookSession = Depends(get_session)) -> dict:
    """Report which backend holds the collections and how large they are."""
    snapshot = session.snapshot()
    return {
        "backend": settings.storage_backend,
        "customers": len(snapshot.customers),
        "supplies": len(snapshot.supplies),
    }
