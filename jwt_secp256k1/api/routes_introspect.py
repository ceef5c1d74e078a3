"""Bearer token introspection for ES256K / ES256K-R tokens."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, Request
from starlette.responses import JSONResponse

from jwt_secp256k1.api.deps import get_jwt_manager
from jwt_secp256k1.crypto.jwt_manager import JWTManager

logger = logging.getLogger(__name__)

router = APIRouter()

HTTP_UNAUTHORIZED = 401
HTTP_SERVICE_UNAVAILABLE = 503


def _extract_bearer(request: Request) -> str | None:
    """Extract Bearer token from Authorization header."""
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[len("Bearer ") :]
    return None


@router.get("/token/introspect")
async def introspect(
    request: Request,
    jwt_mgr: Annotated[JWTManager | None, Depends(get_jwt_manager)],
) -> JSONResponse:
    """GET /token/introspect -- return the claims of a valid Bearer token."""
    if jwt_mgr is None:
        return JSONResponse(
            {"error": "server_error"},
            status_code=HTTP_SERVICE_UNAVAILABLE,
        )

    token = _extract_bearer(request)
    if not token:
        return JSONResponse(
            {"error": "invalid_token"},
            status_code=HTTP_UNAUTHORIZED,
        )

    try:
        claims = jwt_mgr.verify_token(token)
    except (jwt.PyJWTError, ValueError) as exc:
        logger.info("Rejected bearer token: %s", type(exc).__name__)
        return JSONResponse(
            {"error": "invalid_token"},
            status_code=HTTP_UNAUTHORIZED,
        )

    return JSONResponse(
        {"active": True, "alg": jwt_mgr.algorithm, **claims.model_dump()}
    )
