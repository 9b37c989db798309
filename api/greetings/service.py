"""
Greeting logic.

`HelloCounter` replaces a process-wide global: one instance is created per
app (see `main.create_app`) and handed to the hello endpoint.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone

from . import schemas

DEFAULT_NAME = "World"

GREETINGS: tuple[schemas.Greeting, ...] = (
    schemas.Greeting(id=1, message="Hello, World!"),
    schemas.Greeting(id=2, message="Hola, Mundo!"),
    schemas.Greeting(id=3, message="Bonjour, le Monde!"),
    schemas.Greeting(id=4, message="Hallo, Welt!"),
    schemas.Greeting(id=5, message="Ciao, Mondo!"),
)


class HelloCounter:
    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._value += 1
            return self._value


def hello(counter: HelloCounter, name: str | None = None) -> schemas.Greeting:
    name = name or DEFAULT_NAME
    return schemas.Greeting(id=counter.next(), message=f"Hello, {name}!")


def list_greetings() -> list[schemas.Greeting]:
    return list(GREETINGS)


def health() -> schemas.HealthResponse:
    return schemas.HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))
