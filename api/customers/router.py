"""
Customer API endpoints.

Routes are registered explicitly at the bottom of this module.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from . import schemas, service
from .dependencies import get_customer_store
from .repository import CustomerStore


async def get_customers(
    store: CustomerStore = Depends(get_customer_store),
) -> list[schemas.CustomerResponse]:
    return await service.list_customers(store)


async def get_customer(
    customer_id: int,
    store: CustomerStore = Depends(get_customer_store),
) -> schemas.CustomerResponse:
    return await service.get_customer(store, customer_id)


async def add_customer(
    request: schemas.CustomerRequest,
    store: CustomerStore = Depends(get_customer_store),
) -> Response:
    await service.create_customer(store, request)
    return Response(status_code=status.HTTP_201_CREATED)


async def update_customer(
    customer_id: int,
    request: schemas.CustomerRequest,
    store: CustomerStore = Depends(get_customer_store),
) -> Response:
    await service.update_customer(store, customer_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def delete_customer(
    customer_id: int,
    store: CustomerStore = Depends(get_customer_store),
) -> Response:
    await service.delete_customer(store, customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


router = APIRouter(prefix="/customers")

router.add_api_route(
    "",
    get_customers,
    methods=["GET"],
    response_model=list[schemas.CustomerResponse],
)
router.add_api_route(
    "",
    add_customer,
    methods=["POST"],
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
)
router.add_api_route(
    "/{customer_id}",
    get_customer,
    methods=["GET"],
    response_model=schemas.CustomerResponse,
)
router.add_api_route(
    "/{customer_id}",
    update_customer,
    methods=["PUT"],
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
router.add_api_route(
    "/{customer_id}",
    delete_customer,
    methods=["DELETE"],
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
