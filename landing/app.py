from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .endpoints import ROUTERS
from .exceptions.api_exception import APIException
from .exceptions.request import InvalidRequestBodyError
from .logger import get_logger
from .settings import settings


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    if not settings.resend_api_key:
        logger.warning("RESEND_API_KEY is not set, contact form submissions will be rejected by the email provider")
    yield


async def handle_api_exception(_: Request, exc: APIException) -> JSONResponse:
    content: dict[str, str] = {"error": exc.detail}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(content, status_code=exc.status_code, headers=exc.headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return await handle_api_exception(request, InvalidRequestBodyError())


def mount_static(app: FastAPI, directory: str | Path) -> None:
    """Serve the built landing page; must run after the api routes have been added."""

    app.mount("/", StaticFiles(directory=directory, html=True), name="static")


def create_app(static_dir: str | Path | None = None) -> FastAPI:
    app = FastAPI(
        title="DC Infrastructures Landing Page",
        version=__version__,
        root_path=settings.root_path,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_tags=[{"name": name, "description": doc} for name, (_, doc) in ROUTERS.items()],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIException, handle_api_exception)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]

    for router, _ in ROUTERS.values():
        app.include_router(router, prefix="/api")

    if static_dir:
        mount_static(app, static_dir)

    return app


app = create_app(settings.static_dir)
