# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Customer data-access interface and its implementations."""

from .customer_dao import CustomerDao
from .memory import InMemoryCustomerDao
from .postgres import PostgresCustomerDao, row_to_customer

__all__ = [
    "CustomerDao",
    "InMemoryCustomerDao",
    "PostgresCustomerDao",
    "row_to_customer",
]
