# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Customer CRUD endpoints.

Each endpoint delegates to ``CustomerService`` and turns its ``Result``
into a status code with ``handle_result``.
"""

from typing import Union

from beartype import beartype
from fastapi import APIRouter, Response, status

from ...models.customer import (
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
    CustomerView,
)
from ..dependencies import CustomerServiceDep
from ..response_patterns import ErrorResponse, handle_result

router = APIRouter()


@router.get("/")
@beartype
async def list_customers(
    response: Response,
    service: CustomerServiceDep,
) -> Union[list[CustomerView], ErrorResponse]:
    """List all customers."""
    result = await service.list_customers()
    return handle_result(result, response)


@router.get("/{customer_id}")
@beartype
async def get_customer(
    customer_id: int,
    response: Response,
    service: CustomerServiceDep,
) -> Union[CustomerView, ErrorResponse]:
    """Get customer by ID.

    Args:
        customer_id: Customer identifier
        response: Response whose status code is set from the result
        service: Customer service

    Returns:
        CustomerView on success, ErrorResponse (404) when missing
    """
    result = await service.get_customer(customer_id)
    return handle_result(result, response)


@router.post("/", status_code=status.HTTP_201_CREATED)
@beartype
async def register_customer(
    registration: CustomerRegistrationRequest,
    response: Response,
    service: CustomerServiceDep,
) -> Union[ErrorResponse, None]:
    """Register a new customer."""
    result = await service.register_customer(registration)
    return handle_result(result, response, success_status=status.HTTP_201_CREATED)


@router.put(
    "/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_model=None
)
@beartype
async def update_customer(
    customer_id: int,
    changes: CustomerUpdateRequest,
    response: Response,
    service: CustomerServiceDep,
) -> Union[ErrorResponse, None]:
    """Partially update a customer's name, email or age."""
    result = await service.update_customer(customer_id, changes)
    return handle_result(result, response, success_status=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_model=None
)
@beartype
async def delete_customer(
    customer_id: int,
    response: Response,
    service: CustomerServiceDep,
) -> Union[ErrorResponse, None]:
    """Delete customer by ID."""
    result = await service.delete_customer(customer_id)
    return handle_result(result, response, success_status=status.HTTP_204_NO_CONTENT)
