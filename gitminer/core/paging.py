"""
Paging and sorting helpers shared by every list endpoint.

`resolve_paging` turns raw `order`/`page`/`size` query values into a
`PagingDirective`; repositories render it into SQL with `PagingDirective.sql`.

The comment window helpers page an in-memory sequence (an issue's comments).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 5
DEFAULT_SIZE = 5
# /projects historically defaults to page 0 while every other list defaults to 5.
PROJECTS_DEFAULT_PAGE = 0


class PagingError(ValueError):
    pass


@dataclass(frozen=True)
class PagingDirective:
    page: int
    size: int
    sort_field: str | None = None
    descending: bool = False

    @property
    def offset(self) -> int:
        return self.page * self.size

    def sql(self, sortable: Mapping[str, str], *, first_param: int = 1) -> str:
        """
        Render `[ORDER BY col ASC|DESC] LIMIT $n OFFSET $n+1`.

        `sortable` maps API field names to whitelisted column names. The caller
        passes `limit_args()` as the values for the two placeholders.
        """
        parts: list[str] = []
        if self.sort_field is not None:
            column = sortable.get(self.sort_field)
            if column is None:
                raise PagingError(f"Cannot sort by unknown field: {self.sort_field!r}.")
            direction = "DESC" if self.descending else "ASC"
            parts.append(f"ORDER BY {column} {direction}, id {direction}")
        parts.append(f"LIMIT ${first_param} OFFSET ${first_param + 1}")
        return "\n".join(parts)

    def limit_args(self) -> tuple[int, int]:
        return self.size, self.offset


def resolve_paging(order: str | None, page: int, size: int) -> PagingDirective:
    """
    `order="-field"` sorts descending, `order="field"` ascending, no order keeps
    the store's natural order. page/size are passed through unchanged.
    """
    if not order:
        return PagingDirective(page=page, size=size)
    if order.startswith("-"):
        return PagingDirective(page=page, size=size, sort_field=order[1:], descending=True)
    return PagingDirective(page=page, size=size, sort_field=order, descending=False)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(word.capitalize() for word in rest)


def sortable_fields(*columns: str) -> dict[str, str]:
    """
    Accept both the snake_case column name and its camelCase spelling.
    """
    fields: dict[str, str] = {}
    for column in columns:
        fields[column] = column
        fields[_camel(column)] = column
    return fields


def legacy_window(items: Sequence[T], *, page: int, size: int) -> list[T]:
    """
    Division-based window kept for API compatibility: start = len(items) // page.

    The end is clamped to the sequence length; page < 1 is rejected instead of
    dividing by zero.
    """
    if page < 1:
        raise PagingError("page must be a positive integer.")
    if size < 0:
        raise PagingError("size must not be negative.")
    total = len(items)
    start = min(total // page, total)
    end = min(start + size, total)
    return list(items[start:end])


def offset_window(items: Sequence[T], *, page: int, size: int) -> list[T]:
    """
    Conventional window: start = page * size.
    """
    if page < 0:
        raise PagingError("page must not be negative.")
    if size < 0:
        raise PagingError("size must not be negative.")
    total = len(items)
    start = min(page * size, total)
    end = min(start + size, total)
    return list(items[start:end])
