"""Type definitions for signing keys, JWKS, and JWT operations."""

from pydantic import BaseModel, ConfigDict


class SigningKeyData(BaseModel):
    """A secp256k1 keypair for JWT signing."""

    kid: str
    private_key_pem: str
    public_key_pem: str


class JWKEntry(BaseModel):
    """Single secp256k1 JWK entry in a JWKS response."""

    kty: str = "EC"
    crv: str = "secp256k1"
    use: str = "sig"
    alg: str = "ES256K"
    kid: str
    x: str
    y: str


class JWKSResponse(BaseModel):
    """JSON Web Key Set response."""

    keys: list[JWKEntry]


class TokenClaims(BaseModel):
    """Claims bundle for JWT token creation."""

    sub: str
    aud: str
    scope: str = ""
    ttl_seconds: int | None = None


class DecodedToken(BaseModel):
    """Decoded and verified JWT token claims."""

    model_config = ConfigDict(extra="allow")

    sub: str = ""
    iss: str = ""
    aud: str = ""
    scope: str = ""
    exp: int = 0
    iat: int = 0
