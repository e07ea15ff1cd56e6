"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svgpathinfo import __version__
from svgpathinfo.config import settings
from svgpathinfo.errors import PathError, UnsupportedForOperationError
from svgpathinfo.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgpathinfo_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgpathinfo",
        description="SVG path data parser — typed segments, normalization, serialization",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import the transform modules to trigger registration
    _register_transforms()

    app.add_exception_handler(PathError, _path_error_handler)

    from svgpathinfo.api.router import api_router

    app.include_router(api_router)

    return app


def _register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("svgpathinfo.engine.normalize")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")


async def _path_error_handler(request: Request, exc: PathError) -> JSONResponse:
    status = 400 if isinstance(exc, UnsupportedForOperationError) else 422
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=status, content={"detail": body.model_dump()})


app = create_app()
