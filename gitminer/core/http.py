"""
HTTP-facing helpers shared by the resource services and routers.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, Request, status

from .db import Database
from .paging import PagingError, resolve_paging
from .repository import ResourceRepository

logger = logging.getLogger(__name__)


def get_database(request: Request) -> Database:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialized. Is the app lifespan running?")
    return database


def not_found(entity: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} not found.",
    )


def bad_request(exc: PagingError) -> HTTPException:
    logger.warning("paging_rejected reason=%s", exc)
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(exc),
    )


async def list_page(
    repo: ResourceRepository,
    value: Any | None,
    *,
    order: str | None,
    page: int,
    size: int,
) -> list[dict[str, Any]]:
    """
    One page of `repo`, filtered on its filter column when `value` is given.
    """
    directive = resolve_paging(order, page, size)
    try:
        return await repo.list_all(value, directive)
    except PagingError as exc:
        raise bad_request(exc) from exc
