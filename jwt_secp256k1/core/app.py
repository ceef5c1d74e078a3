"""FastAPI application factory exposing the secp256k1 JWKS and introspection."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from jwt_secp256k1.api.routes_introspect import router as introspect_router
from jwt_secp256k1.api.routes_jwks import router as jwks_router
from jwt_secp256k1.core.settings import Secp256k1Settings
from jwt_secp256k1.crypto.pyjwt_algorithm import install_global_algorithms


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = Secp256k1Settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        install_global_algorithms()
        yield

    app = FastAPI(
        title="secp256k1 JWT",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(jwks_router)
    app.include_router(introspect_router)

    return app
