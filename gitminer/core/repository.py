"""
Shared resource-access base (raw SQL).

Each resource package subclasses `ResourceRepository` with its table, the
columns it serves, the single column its list endpoint filters on and how ids
are assigned on create. Instances are built per request around the shared
`Database`.
"""

from __future__ import annotations

import enum
from typing import Any, Mapping
from uuid import uuid4

from .db import Database
from .paging import PagingDirective


class IdPolicy(enum.Enum):
    # Id comes from the request body; creating twice with the same id overwrites.
    CALLER_ASSIGNED = "caller_assigned"
    # Id is generated on insert; any id in the request body is ignored.
    STORE_ASSIGNED = "store_assigned"


def new_id() -> str:
    return str(uuid4())


def assign_id(policy: IdPolicy, supplied: str | None = None) -> str:
    if policy is IdPolicy.STORE_ASSIGNED:
        return new_id()
    # Kept verbatim; only a blank id is refused.
    if supplied is None or not supplied.strip():
        raise ValueError("A caller-assigned id is required.")
    return supplied


def id_or_new(supplied: str | None) -> str:
    """
    Embedded (mined) records keep their id; a missing one is generated.
    """
    if supplied is None or not supplied.strip():
        return new_id()
    return supplied


class ResourceRepository:
    table: str = ""
    columns: tuple[str, ...] = ()
    filter_column: str = ""
    sortable: Mapping[str, str] = {}
    # Only resources with an HTTP create declare a policy.
    id_policy: IdPolicy | None = None

    def __init__(self, database: Database) -> None:
        self.database = database

    def _select(self) -> str:
        return f"SELECT {', '.join(self.columns)}\nFROM {self.table}"

    async def list_rows(self, value: Any | None, directive: PagingDirective) -> list[dict[str, Any]]:
        """
        Raw rows for one page, optionally restricted to `filter_column = value`.
        """
        if value is None:
            sql = f"{self._select()}\n{directive.sql(self.sortable, first_param=1)}"
            return await self.database.fetch_all(sql, *directive.limit_args())

        sql = (
            f"{self._select()}\n"
            f"WHERE {self.filter_column} = $1\n"
            f"{directive.sql(self.sortable, first_param=2)}"
        )
        return await self.database.fetch_all(sql, value, *directive.limit_args())

    async def hydrate(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """
        Attach nested collections to raw rows. Flat resources return rows as-is.
        """
        return rows

    async def list_all(self, value: Any | None, directive: PagingDirective) -> list[dict[str, Any]]:
        rows = await self.list_rows(value, directive)
        return await self.hydrate(rows)

    async def get_by_id(self, entity_id: str) -> dict[str, Any] | None:
        row = await self.database.fetch_one(
            f"{self._select()}\nWHERE id = $1",
            entity_id,
        )
        if row is None:
            return None
        hydrated = await self.hydrate([row])
        return hydrated[0]

    async def exists(self, entity_id: str) -> bool:
        row = await self.database.fetch_one(
            f"SELECT 1 AS ok FROM {self.table} WHERE id = $1 LIMIT 1",
            entity_id,
        )
        return row is not None

    async def delete_by_id(self, entity_id: str) -> bool:
        row = await self.database.fetch_one(
            f"DELETE FROM {self.table} WHERE id = $1 RETURNING id",
            entity_id,
        )
        return row is not None
