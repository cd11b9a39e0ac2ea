# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Domain models for the customer service."""

from .base import BaseModelConfig
from .customer import (
    Customer,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
    CustomerView,
    Gender,
)

__all__ = [
    "BaseModelConfig",
    "Customer",
    "CustomerRegistrationRequest",
    "CustomerUpdateRequest",
    "CustomerView",
    "Gender",
]
