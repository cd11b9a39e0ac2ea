# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Data-access contract for customer records.

Implementations own durable storage and identifier assignment. The
customer service never catches their failures.
"""

from abc import ABC, abstractmethod

from ..models.customer import Customer


class CustomerDao(ABC):
    """Abstract persistence interface for ``Customer`` entities."""

    @abstractmethod
    async def select_all_customers(self) -> list[Customer]:
        """Return every stored customer."""

    @abstractmethod
    async def select_customer_by_id(self, customer_id: int) -> Customer | None:
        """Return the customer with the given id, or None when absent."""

    @abstractmethod
    async def exists_customer_with_email(self, email: str) -> bool:
        """Check whether any customer already uses ``email``."""

    @abstractmethod
    async def exists_customer_with_id(self, customer_id: int) -> bool:
        """Check whether a customer with ``customer_id`` is stored."""

    @abstractmethod
    async def insert_customer(self, customer: Customer) -> None:
        """Persist a new customer, assigning it a fresh identifier."""

    @abstractmethod
    async def update_customer(self, customer: Customer) -> None:
        """Overwrite every stored field of ``customer`` (matched by id)."""

    @abstractmethod
    async def delete_customer_by_id(self, customer_id: int) -> None:
        """Remove the customer with ``customer_id``."""
