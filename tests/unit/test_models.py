"""Unit tests for customer Pydantic models.

Tests verify:
- Model immutability (frozen=True)
- Strict validation (extra="forbid")
- Field constraints
- The view never exposes the password hash
"""

import pytest
from pydantic import ValidationError

from customer_core.models.base import BaseModelConfig
from customer_core.models.customer import (
    Customer,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
    CustomerView,
    Gender,
)
from tests.fixtures.test_data import make_customer


class TestBaseModelConfig:
    """Test base model configuration."""

    def test_model_is_frozen(self) -> None:
        class TestModel(BaseModelConfig):
            value: str

        instance = TestModel(value="test")

        with pytest.raises(ValidationError) as exc_info:
            instance.value = "new_value"

        assert "frozen" in str(exc_info.value).lower()

    def test_no_extra_fields_allowed(self) -> None:
        class TestModel(BaseModelConfig):
            allowed_field: str

        with pytest.raises(ValidationError) as exc_info:
            TestModel(allowed_field="value", extra_field="not_allowed")  # type: ignore

        assert "Extra inputs are not permitted" in str(exc_info.value)

    def test_whitespace_stripping(self) -> None:
        class TestModel(BaseModelConfig):
            text: str

        assert TestModel(text="  test value  ").text == "test value"


class TestCustomer:
    """Test the stored customer entity."""

    def test_id_is_absent_before_insert(self) -> None:
        customer = make_customer(customer_id=None)
        assert customer.id is None

    def test_customer_is_immutable(self) -> None:
        customer = make_customer()
        with pytest.raises(ValidationError):
            customer.name = "Other"

    def test_password_hidden_from_repr(self) -> None:
        assert "hashed::password" not in repr(make_customer())

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"email": "not-an-email"},
            {"age": 0},
            {"age": -3},
            {"age": 2**31},
            {"gender": "OTHER"},
        ],
    )
    def test_invalid_fields_rejected(self, overrides: dict[str, object]) -> None:
        data = {
            "id": 1,
            "name": "Alex",
            "email": "alex@gmail.com",
            "password": "hash",
            "age": 19,
            "gender": "MALE",
        }
        data.update(overrides)

        with pytest.raises(ValidationError):
            Customer(**data)

    def test_gender_accepts_enum_value(self) -> None:
        customer = Customer(
            name="Jamila",
            email="jamila@gmail.com",
            password="hash",
            age=19,
            gender="FEMALE",
        )
        assert customer.gender is Gender.FEMALE


class TestRequests:
    """Test request value objects."""

    def test_registration_requires_min_password_length(self) -> None:
        with pytest.raises(ValidationError):
            CustomerRegistrationRequest(
                name="Alex",
                email="alex@gmail.com",
                password="short",
                age=19,
                gender=Gender.MALE,
            )

    def test_registration_counts_password_bytes_not_characters(self) -> None:
        with pytest.raises(ValidationError, match="72 bytes"):
            CustomerRegistrationRequest(
                name="Alex",
                email="alex@gmail.com",
                password="é" * 40,
                age=19,
                gender=Gender.MALE,
            )

    def test_registration_accepts_multibyte_password_within_limit(self) -> None:
        request = CustomerRegistrationRequest(
            name="Alex",
            email="alex@gmail.com",
            password="é" * 36,
            age=19,
            gender=Gender.MALE,
        )
        assert request.password == "é" * 36

    def test_empty_update_request_is_allowed(self) -> None:
        request = CustomerUpdateRequest()
        assert request.name is None
        assert request.email is None
        assert request.age is None

    def test_update_request_validates_present_fields(self) -> None:
        with pytest.raises(ValidationError):
            CustomerUpdateRequest(age=0)
        with pytest.raises(ValidationError):
            CustomerUpdateRequest(age=151)
        with pytest.raises(ValidationError):
            CustomerUpdateRequest(name="")


class TestCustomerView:
    """Test projection of a customer to its public view."""

    def test_view_matches_customer_without_password(self) -> None:
        customer = make_customer()

        view = CustomerView.from_customer(customer)

        assert view.model_dump() == {
            "id": 10,
            "name": "Alex",
            "email": "alex@gmail.com",
            "age": 19,
            "gender": Gender.MALE,
        }

    def test_view_requires_stored_customer(self) -> None:
        with pytest.raises(ValueError, match="never stored"):
            CustomerView.from_customer(make_customer(customer_id=None))
