"""Shared request dependencies."""

from __future__ import annotations

from uuid import UUID

from fastapi import Header, HTTPException, Query, status

from recipe_tracker.domain.filters import FilterState, SortKey


async def require_user(x_user_id: str | None = Header(default=None)) -> UUID:
    """Return the caller's user id from the X-User-Id header."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from None


async def filter_state(
    sort_by: str = "name",
    q: str = "",
    calories_min: float | None = None,
    calories_max: float | None = None,
    restriction: list[str] | None = Query(default=None),
) -> FilterState:
    """Build list filters from query parameters."""
    return FilterState(
        sort_by=SortKey.parse(sort_by),
        search_query=q,
        calories_min=calories_min,
        calories_max=calories_max,
        dietary_restrictions=tuple(restriction or ()),
    )
