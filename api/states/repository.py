"""
States persistence (raw SQL).

User input only ever reaches Postgres as a bound parameter ($1). The search
wildcards are part of the bound value, not of the SQL text.
"""

from __future__ import annotations

from typing import Any

from core import db

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """
    Escape LIKE metacharacters so `%` and `_` in a search term match literally.

    Postgres uses backslash as the default LIKE escape character.
    """
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(term: str) -> str:
    return f"%{escape_like(term)}%"


async def list_states() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, abbreviation, capital
        FROM states
        ORDER BY name ASC
        """
    )


async def search_states(term: str) -> list[dict[str, Any]]:
    """
    Case-insensitive substring match over name, abbreviation and capital.
    """
    return await db.fetch_all(
        """
        SELECT id, name, abbreviation, capital
        FROM states
        WHERE name ILIKE $1
           OR abbreviation ILIKE $1
           OR capital ILIKE $1
        ORDER BY name ASC
        """,
        contains_pattern(term),
    )


async def get_state_by_id(state_id: str) -> dict[str, Any] | None:
    # The id token is bound as text; Postgres does the integer cast.
    return await db.fetch_one(
        """
        SELECT id, name, abbreviation, capital
        FROM states
        WHERE id = $1::text::integer
        """,
        state_id,
    )
