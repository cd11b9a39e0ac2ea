"""Integration tests for the customer API.

These run the real FastAPI application, service and in-memory store
end to end through ``TestClient``.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

REGISTRATION: dict[str, Any] = {
    "name": "Alex",
    "email": "alex@gmail.com",
    "password": "password123",
    "age": 19,
    "gender": "MALE",
}


def register(client: TestClient, **overrides: Any) -> None:
    response = client.post("/api/v1/customers/", json={**REGISTRATION, **overrides})
    assert response.status_code == 201, response.text


class TestHealth:
    """Test liveness endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestCustomerLifecycle:
    """Test registration, reads, updates and deletion over HTTP."""

    def test_register_and_get(self, client: TestClient) -> None:
        register(client)

        response = client.get("/api/v1/customers/1")

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "name": "Alex",
            "email": "alex@gmail.com",
            "age": 19,
            "gender": "MALE",
        }

    def test_list_never_exposes_password(self, client: TestClient) -> None:
        register(client)
        register(client, name="Jamila", email="jamila@gmail.com", gender="FEMALE")

        response = client.get("/api/v1/customers/")

        assert response.status_code == 200
        body = response.json()
        assert [c["name"] for c in body] == ["Alex", "Jamila"]
        assert all("password" not in c for c in body)

    def test_duplicate_email_is_conflict(self, client: TestClient) -> None:
        register(client)

        response = client.post(
            "/api/v1/customers/", json={**REGISTRATION, "name": "Someone Else"}
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Email already taken"
        assert response.json()["error_code"] == "conflict"
        assert len(client.get("/api/v1/customers/").json()) == 1

    def test_get_missing_customer(self, client: TestClient) -> None:
        response = client.get("/api/v1/customers/10")

        assert response.status_code == 404
        assert response.json()["error"] == "Customer with id [10] not found"
        assert response.json()["error_code"] == "not_found"

    def test_update_all_fields(self, client: TestClient) -> None:
        register(client)

        response = client.put(
            "/api/v1/customers/1",
            json={"name": "Alexandro", "email": "alexandro@gmail.com", "age": 23},
        )

        assert response.status_code == 204
        assert client.get("/api/v1/customers/1").json() == {
            "id": 1,
            "name": "Alexandro",
            "email": "alexandro@gmail.com",
            "age": 23,
            "gender": "MALE",
        }

    def test_update_only_name_keeps_other_fields(self, client: TestClient) -> None:
        register(client)

        response = client.put("/api/v1/customers/1", json={"name": "Alexandro"})

        assert response.status_code == 204
        customer = client.get("/api/v1/customers/1").json()
        assert customer["name"] == "Alexandro"
        assert customer["email"] == "alex@gmail.com"
        assert customer["age"] == 19

    @pytest.mark.parametrize(
        "payload",
        [{}, {"name": "Alex", "email": "alex@gmail.com", "age": 19}],
        ids=["empty", "identical"],
    )
    def test_update_without_changes_is_rejected(
        self, client: TestClient, payload: dict[str, Any]
    ) -> None:
        register(client)

        response = client.put("/api/v1/customers/1", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "No data changes found"
        assert response.json()["error_code"] == "invalid_request"

    def test_update_to_taken_email_is_conflict(self, client: TestClient) -> None:
        register(client)
        register(client, name="Jamila", email="jamila@gmail.com", gender="FEMALE")

        response = client.put("/api/v1/customers/1", json={"email": "jamila@gmail.com"})

        assert response.status_code == 409
        assert client.get("/api/v1/customers/1").json()["email"] == "alex@gmail.com"

    def test_update_missing_customer(self, client: TestClient) -> None:
        response = client.put("/api/v1/customers/10", json={"age": 30})

        assert response.status_code == 404

    def test_delete(self, client: TestClient) -> None:
        register(client)

        response = client.delete("/api/v1/customers/1")

        assert response.status_code == 204
        assert client.get("/api/v1/customers/1").status_code == 404

    def test_delete_missing_customer(self, client: TestClient) -> None:
        response = client.delete("/api/v1/customers/10")

        assert response.status_code == 404
        assert response.json()["error"] == "Customer with id [10] not found"


class TestRequestValidation:
    """Test payload validation handled by FastAPI."""

    def test_invalid_registration_payload(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/customers/", json={**REGISTRATION, "age": 0, "password": "short"}
        )

        assert response.status_code == 422

    def test_password_over_72_bytes_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/customers/", json={**REGISTRATION, "password": "é" * 40}
        )

        assert response.status_code == 422
        assert client.get("/api/v1/customers/").json() == []

    def test_multibyte_password_within_limit_registers(self, client: TestClient) -> None:
        register(client, password="é" * 36)

        assert client.get("/api/v1/customers/1").status_code == 200

    def test_age_out_of_range_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/customers/", json={**REGISTRATION, "age": 2**31})

        assert response.status_code == 422

    def test_unknown_update_field_rejected(self, client: TestClient) -> None:
        register(client)

        response = client.put("/api/v1/customers/1", json={"gender": "FEMALE"})

        assert response.status_code == 422
