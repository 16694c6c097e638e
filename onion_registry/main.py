from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from onion_registry import __version__
from onion_registry.config import Settings, get_settings
from onion_registry.registry import NodeRegistry
from onion_registry.routes import private_key_router, router
from onion_registry.routes.registry import INTERNAL_ERROR, REGISTRATION_ERROR

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[NodeRegistry] = None,
) -> FastAPI:
    """Build the registry API around its own NodeRegistry instance"""
    if settings is None:
        settings = get_settings()
    if registry is None:
        registry = NodeRegistry(duplicate_policy=settings.duplicate_policy)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Registry is listening on port %s", settings.port)
        if settings.expose_private_keys:
            logger.warning("GET /getPrivateKey is enabled: any caller can read any node's private key")
        yield
        logger.info(
            "Shutting down registry (%d nodes, %d issued keys discarded)",
            len(registry.nodes), len(registry.private_keys),
        )

    app = FastAPI(
        title=settings.app_name,
        description="Node registry and key issuance for the onion overlay",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry

    app.include_router(router)
    if settings.expose_private_keys:
        app.include_router(private_key_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError):
        # The only request body is /registerNode; a missing or mistyped
        # field is reported like any other missing field.
        logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": REGISTRATION_ERROR},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR},
        )

    return app


def main() -> None:
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(
        "onion_registry.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
