"""JWKS endpoint publishing the configured secp256k1 public key."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from jwt_secp256k1.api.deps import load_settings
from jwt_secp256k1.core.settings import Secp256k1Settings
from jwt_secp256k1.crypto.keys import pem_to_jwk_entry
from jwt_secp256k1.crypto.types import JWKSResponse

router = APIRouter()

JWKS_CACHE_CONTROL = "public, max-age=3600"


@router.get("/.well-known/jwks.json")
async def jwks(
    response: Response,
    settings: Annotated[Secp256k1Settings, Depends(load_settings)],
) -> JWKSResponse:
    """JSON Web Key Set endpoint."""
    entries = []
    if settings.public_key_pem:
        entries.append(
            pem_to_jwk_entry(
                settings.public_key_pem,
                settings.kid,
                alg=settings.default_algorithm,
            )
        )
    response.headers["Cache-Control"] = JWKS_CACHE_CONTROL
    return JWKSResponse(keys=entries)
