# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Ok/Err containers returned by the customer service.

Business-rule rejections travel back to the caller as ``Err(CustomerError)``
values. Only storage failures are raised.
"""

from typing import Generic, NoReturn, TypeVar, Union

from attrs import frozen
from beartype import beartype

T = TypeVar("T")
E = TypeVar("E")


@frozen
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @beartype
    def is_ok(self) -> bool:
        return True

    @beartype
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    @beartype
    def unwrap_err(self) -> NoReturn:
        """Raise ValueError; an Ok holds no error."""
        raise ValueError("Called unwrap_err on Ok value")


@frozen
class Err(Generic[E]):
    """Rejected outcome carrying the ``error`` that caused it."""

    error: E

    @beartype
    def is_ok(self) -> bool:
        return False

    @beartype
    def is_err(self) -> bool:
        return True

    @beartype
    def unwrap(self) -> NoReturn:
        """Raise ValueError naming the carried error."""
        raise ValueError(f"Called unwrap on Err value: {self.error}")

    def unwrap_err(self) -> E:
        return self.error


# Result[T, E] is Ok[T] | Err[E] both for type checkers and for beartype
Result = Union[Ok[T], Err[E]]
