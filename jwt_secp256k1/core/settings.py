"""Settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

TOKEN_TTL_DEFAULT = 3600


class Secp256k1Settings(BaseSettings):
    """Signing key, issuer and PyJWT integration settings."""

    model_config = SettingsConfigDict(env_prefix="JWT_SECP256K1_")

    issuer_url: str = "http://localhost:8000"
    default_algorithm: str = "ES256K"
    token_ttl: int = TOKEN_TTL_DEFAULT
    kid: str = ""
    private_key_pem: str = ""
    public_key_pem: str = ""
    signing_key_encryption_key: str = ""
    replace_builtin_es256k: bool = True
    log_level: str = "INFO"

    def has_signing_key(self) -> bool:
        return bool(self.private_key_pem and self.public_key_pem)
