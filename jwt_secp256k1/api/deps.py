"""FastAPI dependencies for settings and the configured signing key."""

from typing import Annotated

from fastapi import Depends

from jwt_secp256k1.core.settings import Secp256k1Settings
from jwt_secp256k1.crypto.jwt_manager import JWTManager
from jwt_secp256k1.crypto.keys import decrypt_private_key


def load_settings() -> Secp256k1Settings:
    return Secp256k1Settings()


def build_jwt_manager(settings: Secp256k1Settings) -> JWTManager | None:
    """Build a JWTManager from settings, or None when no key is configured."""
    if not settings.has_signing_key():
        return None
    private_pem = settings.private_key_pem
    if settings.signing_key_encryption_key:
        private_pem = decrypt_private_key(
            private_pem, settings.signing_key_encryption_key
        )
    return JWTManager(
        private_key_pem=private_pem,
        public_key_pem=settings.public_key_pem,
        kid=settings.kid,
        issuer=settings.issuer_url,
        algorithm=settings.default_algorithm,
        default_ttl=settings.token_ttl,
    )


async def get_jwt_manager(
    settings: Annotated[Secp256k1Settings, Depends(load_settings)],
) -> JWTManager | None:
    return build_jwt_manager(settings)
