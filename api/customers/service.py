"""
Customer CRUD logic.

Every operation is a single call (or lookup + call) against the injected
`CustomerStore`; nothing is cached here.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import schemas
from .repository import Customer, CustomerStore

logger = logging.getLogger(__name__)


def _to_response(customer: Customer) -> schemas.CustomerResponse:
    return schemas.CustomerResponse(
        id=int(customer.id),
        name=customer.name,
        email=customer.email,
        age=customer.age,
    )


def _not_found(customer_id: int) -> HTTPException:
    logger.warning("customer_not_found id=%s", customer_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found.")


async def list_customers(store: CustomerStore) -> list[schemas.CustomerResponse]:
    return [_to_response(c) for c in await store.find_all()]


async def get_customer(store: CustomerStore, customer_id: int) -> schemas.CustomerResponse:
    customer = await store.find_by_id(customer_id)
    if customer is None:
        raise _not_found(customer_id)
    return _to_response(customer)


async def create_customer(store: CustomerStore, request: schemas.CustomerRequest) -> None:
    saved = await store.save(
        Customer(id=None, name=request.name, email=request.email, age=request.age)
    )
    logger.info("customer_created id=%s", saved.id)


async def update_customer(
    store: CustomerStore,
    customer_id: int,
    request: schemas.CustomerRequest,
) -> None:
    customer = await store.find_by_id(customer_id)
    if customer is None:
        raise _not_found(customer_id)

    # All three fields are overwritten, including with nulls.
    customer.name = request.name
    customer.email = request.email
    customer.age = request.age
    await store.save(customer)
    logger.info("customer_updated id=%s", customer_id)


async def delete_customer(store: CustomerStore, customer_id: int) -> None:
    # No existence check: deleting an unknown id is a no-op.
    await store.delete_by_id(customer_id)
    logger.info("customer_deleted id=%s", customer_id)
