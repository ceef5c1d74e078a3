"""Tests for the JWKS and token introspection endpoints."""

import pytest
from cryptography.fernet import Fernet
from httpx import AsyncClient

from jwt_secp256k1.crypto.jwt_manager import JWTManager
from jwt_secp256k1.crypto.keys import encrypt_private_key, generate_secp256k1_keypair
from jwt_secp256k1.crypto.types import SigningKeyData, TokenClaims

ISSUER = "http://localhost:8000"
FERNET_KEY = Fernet.generate_key().decode()


@pytest.fixture
def signing_key(monkeypatch: pytest.MonkeyPatch) -> SigningKeyData:
    kp = generate_secp256k1_keypair()
    monkeypatch.setenv("JWT_SECP256K1_KID", kp.kid)
    monkeypatch.setenv(
        "JWT_SECP256K1_PRIVATE_KEY_PEM",
        encrypt_private_key(kp.private_key_pem, FERNET_KEY),
    )
    monkeypatch.setenv("JWT_SECP256K1_SIGNING_KEY_ENCRYPTION_KEY", FERNET_KEY)
    monkeypatch.setenv("JWT_SECP256K1_PUBLIC_KEY_PEM", kp.public_key_pem)
    monkeypatch.setenv("JWT_SECP256K1_DEFAULT_ALGORITHM", "ES256K-R")
    return kp


@pytest.fixture
def jwt_mgr(signing_key: SigningKeyData) -> JWTManager:
    return JWTManager(
        private_key_pem=signing_key.private_key_pem,
        public_key_pem=signing_key.public_key_pem,
        kid=signing_key.kid,
        issuer=ISSUER,
        algorithm="ES256K-R",
    )


class TestJWKS:
    """Tests for GET /.well-known/jwks.json."""

    async def test_returns_empty_keys(self, client: AsyncClient) -> None:
        resp = await client.get("/.well-known/jwks.json")
        assert resp.status_code == 200
        assert resp.json()["keys"] == []

    async def test_returns_configured_key(
        self, client: AsyncClient, signing_key: SigningKeyData
    ) -> None:
        resp = await client.get("/.well-known/jwks.json")
        assert resp.status_code == 200
        body = resp.json()
        assert len(body["keys"]) == 1
        assert body["keys"][0]["kty"] == "EC"
        assert body["keys"][0]["crv"] == "secp256k1"
        assert body["keys"][0]["alg"] == "ES256K-R"
        assert body["keys"][0]["kid"] == signing_key.kid
        assert "public" in resp.headers.get("cache-control", "")


class TestIntrospect:
    """Tests for GET /token/introspect."""

    async def test_returns_claims(
        self, client: AsyncClient, jwt_mgr: JWTManager
    ) -> None:
        token = jwt_mgr.create_token(
            TokenClaims(sub="user-1", aud="client-1", scope="read")
        )
        resp = await client.get(
            "/token/introspect",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["active"] is True
        assert body["alg"] == "ES256K-R"
        assert body["sub"] == "user-1"
        assert body["scope"] == "read"
        assert body["iss"] == ISSUER

    async def test_missing_bearer_returns_401(
        self, client: AsyncClient, signing_key: SigningKeyData
    ) -> None:
        resp = await client.get("/token/introspect")
        assert resp.status_code == 401
        assert resp.json()["error"] == "invalid_token"

    async def test_invalid_token_returns_401(
        self, client: AsyncClient, signing_key: SigningKeyData
    ) -> None:
        resp = await client.get(
            "/token/introspect",
            headers={"Authorization": "Bearer bad-jwt-token"},
        )
        assert resp.status_code == 401
        assert resp.json()["error"] == "invalid_token"

    async def test_token_from_other_key_returns_401(
        self, client: AsyncClient, signing_key: SigningKeyData
    ) -> None:
        other = generate_secp256k1_keypair()
        other_mgr = JWTManager(
            private_key_pem=other.private_key_pem,
            public_key_pem=other.public_key_pem,
            kid=other.kid,
            issuer=ISSUER,
            algorithm="ES256K-R",
        )
        token = other_mgr.create_token(TokenClaims(sub="user-1", aud="c"))
        resp = await client.get(
            "/token/introspect",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert resp.status_code == 401

    async def test_no_signing_key_returns_503(self, client: AsyncClient) -> None:
        resp = await client.get(
            "/token/introspect",
            headers={"Authorization": "Bearer some-token"},
        )
        assert resp.status_code == 503
        assert resp.json()["error"] == "server_error"
