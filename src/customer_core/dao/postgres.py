# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""PostgreSQL-backed customer store using asyncpg."""

from typing import Any

from beartype import beartype

from ..core.database import Database
from ..models.customer import Customer, Gender
from .customer_dao import CustomerDao

_COLUMNS = "id, name, email, password, age, gender"


@beartype
def row_to_customer(row: Any) -> Customer:
    """Convert a ``customer`` table row (asyncpg.Record or mapping) to a Customer."""
    return Customer(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        password=row["password"],
        age=row["age"],
        gender=Gender(row["gender"]),
    )


class PostgresCustomerDao(CustomerDao):
    """``CustomerDao`` over the ``customer`` table.

    Email uniqueness is also enforced by the table's UNIQUE constraint; a
    violation raised by asyncpg is left to propagate.
    """

    def __init__(self, db: Database) -> None:
        """Initialize with a connected database wrapper."""
        if not db or not hasattr(db, "fetch"):
            raise ValueError("Database connection required and must be active")
        self._db = db

    @beartype
    async def select_all_customers(self) -> list[Customer]:
        rows = await self._db.fetch(f"SELECT {_COLUMNS} FROM customer ORDER BY id")
        return [row_to_customer(row) for row in rows]

    @beartype
    async def select_customer_by_id(self, customer_id: int) -> Customer | None:
        row = await self._db.fetchrow(
            f"SELECT {_COLUMNS} FROM customer WHERE id = $1", customer_id
        )
        if row is None:
            return None
        return row_to_customer(row)

    @beartype
    async def exists_customer_with_email(self, email: str) -> bool:
        count = await self._db.fetchval(
            "SELECT count(id) FROM customer WHERE email = $1", email
        )
        return bool(count)

    @beartype
    async def exists_customer_with_id(self, customer_id: int) -> bool:
        count = await self._db.fetchval(
            "SELECT count(id) FROM customer WHERE id = $1", customer_id
        )
        return bool(count)

    @beartype
    async def insert_customer(self, customer: Customer) -> None:
        await self._db.execute(
            """
            INSERT INTO customer (name, email, password, age, gender)
            VALUES ($1, $2, $3, $4, $5)
            """,
            customer.name,
            customer.email,
            customer.password,
            customer.age,
            customer.gender.value,
        )

    @beartype
    async def update_customer(self, customer: Customer) -> None:
        if customer.id is None:
            raise ValueError("Cannot update a customer without an id")
        await self._db.execute(
            """
            UPDATE customer
            SET name = $1, email = $2, password = $3, age = $4, gender = $5
            WHERE id = $6
            """,
            customer.name,
            customer.email,
            customer.password,
            customer.age,
            customer.gender.value,
            customer.id,
        )

    @beartype
    async def delete_customer_by_id(self, customer_id: int) -> None:
        await self._db.execute("DELETE FROM customer WHERE id = $1", customer_id)
