# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""In-process customer store."""

import itertools

from beartype import beartype

from ..models.customer import Customer
from .customer_dao import CustomerDao


class InMemoryCustomerDao(CustomerDao):
    """Dictionary-backed ``CustomerDao``.

    Listing order is insertion order. Identifiers start at 1 and are never
    reused, even after deletion.
    """

    def __init__(self) -> None:
        self._customers: dict[int, Customer] = {}
        self._ids = itertools.count(1)

    @beartype
    async def select_all_customers(self) -> list[Customer]:
        return list(self._customers.values())

    @beartype
    async def select_customer_by_id(self, customer_id: int) -> Customer | None:
        return self._customers.get(customer_id)

    @beartype
    async def exists_customer_with_email(self, email: str) -> bool:
        return any(c.email == email for c in self._customers.values())

    @beartype
    async def exists_customer_with_id(self, customer_id: int) -> bool:
        return customer_id in self._customers

    @beartype
    async def insert_customer(self, customer: Customer) -> None:
        customer_id = next(self._ids)
        self._customers[customer_id] = customer.model_copy(update={"id": customer_id})

    @beartype
    async def update_customer(self, customer: Customer) -> None:
        if customer.id is None or customer.id not in self._customers:
            raise KeyError(f"No stored customer with id {customer.id}")
        self._customers[customer.id] = customer

    @beartype
    async def delete_customer_by_id(self, customer_id: int) -> None:
        self._customers.pop(customer_id, None)
