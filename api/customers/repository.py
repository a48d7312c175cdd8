"""
Customer persistence.

`CustomerStore` is the capability set the service depends on. Two
implementations exist:
- `PostgresCustomerStore`: raw SQL over the shared asyncpg pool (`core.db`).
- `InMemoryCustomerStore`: dict-backed, used by tests and local runs.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

from core import db


@dataclass
class Customer:
    id: int | None
    name: str | None
    email: str | None
    age: int | None


class CustomerStore(Protocol):
    async def find_all(self) -> list[Customer]: ...

    async def save(self, customer: Customer) -> Customer:
        """
        Insert when `customer.id` is None, otherwise overwrite that record.
        Raises RuntimeError when the id no longer exists.
        """
        ...

    async def find_by_id(self, customer_id: int) -> Customer | None: ...

    async def delete_by_id(self, customer_id: int) -> None: ...


def _row_to_customer(row: dict) -> Customer:
    return Customer(
        id=int(row["id"]),
        name=row["name"],
        email=row["email"],
        age=row["age"],
    )


class InMemoryCustomerStore:
    """
    Ids start at 1 and are never reused, like a database sequence.
    """

    def __init__(self) -> None:
        self._rows: dict[int, Customer] = {}
        self._next_id = 1

    async def find_all(self) -> list[Customer]:
        return [replace(c) for c in self._rows.values()]

    async def save(self, customer: Customer) -> Customer:
        if customer.id is None:
            stored = replace(customer, id=self._next_id)
            self._next_id += 1
        else:
            if customer.id not in self._rows:
                raise RuntimeError("Failed to save customer.")
            stored = replace(customer)
        self._rows[stored.id] = stored
        return replace(stored)

    async def find_by_id(self, customer_id: int) -> Customer | None:
        found = self._rows.get(customer_id)
        return replace(found) if found is not None else None

    async def delete_by_id(self, customer_id: int) -> None:
        self._rows.pop(customer_id, None)


CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS customers (
    id    SERIAL PRIMARY KEY,
    name  TEXT,
    email TEXT,
    age   INTEGER
)
"""


class PostgresCustomerStore:
    async def init_schema(self) -> None:
        await db.execute(CREATE_TABLE_SQL)

    async def find_all(self) -> list[Customer]:
        rows = await db.fetch_all(
            """
            SELECT id, name, email, age
            FROM customers
            ORDER BY id ASC
            """
        )
        return [_row_to_customer(r) for r in rows]

    async def save(self, customer: Customer) -> Customer:
        if customer.id is None:
            row = await db.fetch_one(
                """
                INSERT INTO customers (name, email, age)
                VALUES ($1, $2, $3)
                RETURNING id, name, email, age
                """,
                customer.name,
                customer.email,
                customer.age,
            )
        else:
            # Plain UPDATE: a row deleted since it was read is not recreated.
            row = await db.fetch_one(
                """
                UPDATE customers
                SET name = $2,
                    email = $3,
                    age = $4
                WHERE id = $1
                RETURNING id, name, email, age
                """,
                customer.id,
                customer.name,
                customer.email,
                customer.age,
            )
        if row is None:
            raise RuntimeError("Failed to save customer.")
        return _row_to_customer(row)

    async def find_by_id(self, customer_id: int) -> Customer | None:
        row = await db.fetch_one(
            """
            SELECT id, name, email, age
            FROM customers
            WHERE id = $1
            """,
            customer_id,
        )
        return _row_to_customer(row) if row is not None else None

    async def delete_by_id(self, customer_id: int) -> None:
        await db.execute(
            """
            DELETE FROM customers
            WHERE id = $1
            """,
            customer_id,
        )
