"""
States API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/states", response_model=list[schemas.State])
async def list_states(
    search: str | None = Query(default=None),
) -> list[schemas.State]:
    try:
        return await service.list_states(search)
    except service.DataSourceError as exc:
        logger.exception("states_query_failed operation=list_states")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch states",
        ) from exc


@router.get("/api/states/{state_id}", response_model=schemas.State)
async def get_state(state_id: str) -> schemas.State:
    try:
        return await service.get_state(state_id)
    except service.StateNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="State not found",
        ) from exc
    except service.DataSourceError as exc:
        logger.exception("states_query_failed operation=get_state state_id=%r", state_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch state",
        ) from exc
