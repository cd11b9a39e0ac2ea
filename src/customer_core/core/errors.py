# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Business-rule rejections returned by the customer service.

Every rejection is a small immutable value carried inside ``Err``. Callers
dispatch on the concrete class (or on ``code``) instead of catching
exceptions, and build user-facing text from ``message``.
"""

from typing import ClassVar, Union

from attrs import field, frozen


@frozen
class NotFound:
    """The requested customer identifier does not exist."""

    code: ClassVar[str] = "not_found"

    customer_id: int = field()

    @property
    def message(self) -> str:
        return f"Customer with id [{self.customer_id}] not found"


@frozen
class Conflict:
    """The requested email already belongs to a customer."""

    code: ClassVar[str] = "conflict"

    field_name: str = field(default="email")

    @property
    def message(self) -> str:
        return f"{self.field_name.capitalize()} already taken"


@frozen
class InvalidRequest:
    """The request carries no effective change."""

    code: ClassVar[str] = "invalid_request"

    reason: str = field(default="No data changes found")

    @property
    def message(self) -> str:
        return self.reason


CustomerError = Union[NotFound, Conflict, InvalidRequest]

__all__ = ["Conflict", "CustomerError", "InvalidRequest", "NotFound"]
