# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Core infrastructure components for the customer service."""

from .config import Settings, get_settings
from .database import Database
from .errors import Conflict, CustomerError, InvalidRequest, NotFound
from .result_types import Err, Ok, Result
from .security import PasswordHasher

__all__ = [
    "Conflict",
    "CustomerError",
    "Database",
    "Err",
    "InvalidRequest",
    "NotFound",
    "Ok",
    "PasswordHasher",
    "Result",
    "Settings",
    "get_settings",
]
