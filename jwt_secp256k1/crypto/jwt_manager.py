"""JWT creation and verification using ES256K or ES256K-R."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.types import Options

from jwt_secp256k1.core.settings import TOKEN_TTL_DEFAULT
from jwt_secp256k1.crypto.keys import load_private_key, load_public_key
from jwt_secp256k1.crypto.pyjwt_algorithm import install_global_algorithms
from jwt_secp256k1.crypto.registry import get_signing_method
from jwt_secp256k1.crypto.types import DecodedToken, TokenClaims


class JWTManager:
    """Creates and verifies secp256k1-signed JWT tokens."""

    def __init__(
        self,
        private_key_pem: str,
        public_key_pem: str,
        kid: str,
        issuer: str,
        algorithm: str = "ES256K",
        default_ttl: int = TOKEN_TTL_DEFAULT,
    ) -> None:
        self._method = get_signing_method(algorithm)
        install_global_algorithms()
        self._private_key = load_private_key(private_key_pem)
        self._public_key = load_public_key(public_key_pem)
        self._kid = kid
        self._issuer = issuer
        self._default_ttl = default_ttl

    @property
    def algorithm(self) -> str:
        return self._method.alg

    def create_token(self, claims: TokenClaims) -> str:
        """Create a signed JWT.

        ``claims.ttl_seconds`` overrides the manager's default lifetime.
        """
        now = datetime.now(UTC)
        ttl = claims.ttl_seconds
        if ttl is None:
            ttl = self._default_ttl
        payload = {
            "iss": self._issuer,
            "sub": claims.sub,
            "aud": claims.aud,
            "exp": now + timedelta(seconds=ttl),
            "iat": now,
            "scope": claims.scope,
        }
        return jwt.encode(
            payload,
            self._private_key,
            algorithm=self._method.alg,
            headers={"kid": self._kid},
        )

    def verify_token(self, token: str, audience: str | None = None) -> DecodedToken:
        """Verify and decode a JWT signed with this manager's algorithm."""
        opts: Options = {}
        if audience is None:
            opts["verify_aud"] = False
        raw = jwt.decode(
            token,
            self._public_key,
            algorithms=[self._method.alg],
            issuer=self._issuer,
            audience=audience,
            options=opts,
        )
        return DecodedToken.model_validate(raw)
