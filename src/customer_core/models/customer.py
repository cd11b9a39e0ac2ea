# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Customer domain models.

``Customer`` is the stored entity and is the only model that carries the
password hash. Requests are consumed once by the service; ``CustomerView``
is what callers get back.
"""

from enum import Enum

from beartype import beartype
from pydantic import EmailStr, Field, field_validator

from ..core.security import MAX_PASSWORD_BYTES
from .base import BaseModelConfig

MAX_AGE = 150


class Gender(str, Enum):
    """Enumeration of customer genders."""

    MALE = "MALE"
    FEMALE = "FEMALE"


@beartype
class Customer(BaseModelConfig):
    """Registered customer entity."""

    id: int | None = Field(
        None, gt=0, description="Storage-assigned identifier, absent until inserted"
    )

    name: str = Field(..., min_length=1, max_length=255, description="Customer's name")

    email: EmailStr = Field(..., description="Customer's email address")

    password: str = Field(
        ..., min_length=1, repr=False, description="Hashed password, never plaintext"
    )

    age: int = Field(..., gt=0, le=MAX_AGE, description="Customer's age in years")

    gender: Gender = Field(..., description="Customer's gender")


@beartype
class CustomerRegistrationRequest(BaseModelConfig):
    """Input for registering a new customer."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(...)
    password: str = Field(..., min_length=8, repr=False)
    age: int = Field(..., gt=0, le=MAX_AGE)
    gender: Gender = Field(...)

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        """Reject passwords bcrypt cannot hash."""
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(
                f"password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded"
            )
        return v


@beartype
class CustomerUpdateRequest(BaseModelConfig):
    """Model for updating an existing customer.

    All fields are optional to support partial updates; ``None`` leaves the
    stored value untouched. An empty request is accepted here and rejected
    by the service.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = Field(None)
    age: int | None = Field(None, gt=0, le=MAX_AGE)


@beartype
class CustomerView(BaseModelConfig):
    """Customer as returned to callers, without the password hash."""

    id: int = Field(..., gt=0)
    name: str
    email: str
    age: int = Field(..., gt=0, le=MAX_AGE)
    gender: Gender

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerView":
        """Project a stored customer into its public view."""
        if customer.id is None:
            raise ValueError("Cannot build a view of a customer that was never stored")
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            age=customer.age,
            gender=customer.gender,
        )
