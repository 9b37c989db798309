from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import config, db
from core.logging_config import setup_logging
from core.security_headers import SecurityHeadersMiddleware
from greetings import router as greetings_router
from greetings import service as greetings_service
from states import router as states_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Error bodies are {"error": "<message>"}.
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


def create_app() -> FastAPI:
    setup_logging(config.log_level())

    app = FastAPI(title="states-directory api", lifespan=lifespan)

    # Fresh per app, so the hello id sequence restarts with the process.
    app.state.hello_counter = greetings_service.HelloCounter()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(states_router.router, tags=["states"])
    app.include_router(greetings_router.router, tags=["greetings"])
    return app


app = create_app()
