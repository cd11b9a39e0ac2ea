# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Customer business logic service."""

from collections.abc import Callable
from typing import Any

from beartype import beartype

from ..core.errors import Conflict, CustomerError, InvalidRequest, NotFound
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..dao.customer_dao import CustomerDao
from ..models.customer import (
    Customer,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
    CustomerView,
)

logger = get_logger(__name__)


class CustomerService:
    """Service for customer business logic.

    Business-rule rejections come back as ``Err`` values holding a
    ``NotFound``, ``Conflict`` or ``InvalidRequest``. Failures raised by the
    data-access layer are not caught here.
    """

    def __init__(
        self, customer_dao: CustomerDao, password_hasher: Callable[[str], str]
    ) -> None:
        """Initialize customer service with dependency validation."""
        if customer_dao is None or not hasattr(customer_dao, "select_customer_by_id"):
            raise ValueError("Customer data-access implementation required")
        if not callable(password_hasher):
            raise ValueError("Password hasher must be callable")

        self._dao = customer_dao
        self._hash_password = password_hasher

    @beartype
    async def list_customers(self) -> Result[list[CustomerView], CustomerError]:
        """List all customers in storage order."""
        customers = await self._dao.select_all_customers()
        return Ok([CustomerView.from_customer(c) for c in customers])

    @beartype
    async def get_customer(self, customer_id: int) -> Result[CustomerView, CustomerError]:
        """Get customer by ID."""
        customer = await self._dao.select_customer_by_id(customer_id)
        if customer is None:
            return Err(NotFound(customer_id))
        return Ok(CustomerView.from_customer(customer))

    @beartype
    async def register_customer(
        self, request: CustomerRegistrationRequest
    ) -> Result[None, CustomerError]:
        """Register a new customer with a hashed password."""
        if await self._dao.exists_customer_with_email(request.email):
            logger.info("Registration rejected: email already taken")
            return Err(Conflict("email"))

        customer = Customer(
            name=request.name,
            email=request.email,
            password=self._hash_password(request.password),
            age=request.age,
            gender=request.gender,
        )
        await self._dao.insert_customer(customer)
        logger.info("Registered new customer")
        return Ok(None)

    @beartype
    async def delete_customer(self, customer_id: int) -> Result[None, CustomerError]:
        """Delete customer by ID."""
        if not await self._dao.exists_customer_with_id(customer_id):
            return Err(NotFound(customer_id))

        await self._dao.delete_customer_by_id(customer_id)
        logger.info("Deleted customer %s", customer_id)
        return Ok(None)

    @beartype
    async def update_customer(
        self, customer_id: int, request: CustomerUpdateRequest
    ) -> Result[None, CustomerError]:
        """Apply a partial update to a customer.

        Only fields that are present in ``request`` and differ from the
        stored values count as changes. The email uniqueness check runs only
        when the email actually changes. A request with no effective change
        is rejected with ``InvalidRequest`` and nothing is written.
        """
        customer = await self._dao.select_customer_by_id(customer_id)
        if customer is None:
            return Err(NotFound(customer_id))

        changes: dict[str, Any] = {}

        if request.name is not None and request.name != customer.name:
            changes["name"] = request.name

        if request.age is not None and request.age != customer.age:
            changes["age"] = request.age

        if request.email is not None and request.email != customer.email:
            if await self._dao.exists_customer_with_email(request.email):
                logger.info("Update of customer %s rejected: email already taken", customer_id)
                return Err(Conflict("email"))
            changes["email"] = request.email

        if not changes:
            logger.debug("Update of customer %s carried no changes", customer_id)
            return Err(InvalidRequest())

        await self._dao.update_customer(customer.model_copy(update=changes))
        logger.info("Updated customer %s fields: %s", customer_id, sorted(changes))
        return Ok(None)
