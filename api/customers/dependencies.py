"""
FastAPI dependencies for customer routes.
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from .repository import CustomerStore


def get_customer_store(request: Request) -> CustomerStore:
    store = getattr(request.app.state, "customer_store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Customer store is not initialized.",
        )
    return store
