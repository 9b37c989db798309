"""
Greeting and health endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from . import schemas, service

router = APIRouter()


def get_hello_counter(request: Request) -> service.HelloCounter:
    return request.app.state.hello_counter


@router.get("/api/hello", response_model=schemas.Greeting)
async def hello(
    name: str | None = Query(default=None),
    counter: service.HelloCounter = Depends(get_hello_counter),
) -> schemas.Greeting:
    return service.hello(counter, name)


@router.get("/api/greetings", response_model=list[schemas.Greeting])
async def list_greetings() -> list[schemas.Greeting]:
    return service.list_greetings()


@router.get("/api/health", response_model=schemas.HealthResponse)
async def health() -> schemas.HealthResponse:
    return service.health()
