"""
States lookup/search business logic.

Errors raised here are domain errors; `router.py` turns them into HTTP
responses with fixed, non-leaking messages.
"""

from __future__ import annotations

from core.db import DataSourceError

from . import repository, schemas

__all__ = ["DataSourceError", "StateNotFoundError", "get_state", "list_states"]


class StateNotFoundError(LookupError):
    pass


def _to_state(row: dict) -> schemas.State:
    return schemas.State(
        id=int(row["id"]),
        name=str(row["name"]),
        abbreviation=str(row["abbreviation"]),
        capital=str(row["capital"]),
    )


async def list_states(search_term: str | None = None) -> list[schemas.State]:
    """
    All states ordered by name, optionally filtered by a substring search.

    An absent or empty term returns the full set.
    """
    if search_term:
        rows = await repository.search_states(search_term)
    else:
        rows = await repository.list_states()
    return [_to_state(row) for row in rows]


async def get_state(state_id: str | int) -> schemas.State:
    row = await repository.get_state_by_id(str(state_id))
    if row is None:
        raise StateNotFoundError(f"No state with id {state_id!r}.")
    return _to_state(row)
