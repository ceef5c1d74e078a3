"""Shared test fixtures for jwt-secp256k1."""

from collections.abc import AsyncIterator

import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from httpx import ASGITransport, AsyncClient

from jwt_secp256k1.core.app import create_app

ISSUER = "http://localhost:8000"


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for test settings."""
    monkeypatch.setenv("JWT_SECP256K1_ISSUER_URL", ISSUER)


@pytest.fixture
def private_key() -> ec.EllipticCurvePrivateKey:
    """A fresh secp256k1 private key."""
    return ec.generate_private_key(ec.SECP256K1())


@pytest.fixture
def public_key(private_key: ec.EllipticCurvePrivateKey) -> ec.EllipticCurvePublicKey:
    return private_key.public_key()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create an httpx test client for the app."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
