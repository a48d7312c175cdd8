"""
Customer API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class CustomerRequest(BaseModel):
    # No constraints: values are stored exactly as submitted.
    name: str | None = None
    email: str | None = None
    age: int | None = None


class CustomerResponse(BaseModel):
    id: int
    name: str | None
    email: str | None
    age: int | None
