"""secp256k1 signing methods for JWT: ES256K and ES256K-R.

ES256K produces and verifies signatures in R || S form. ES256K-R appends the
recovery byte V (R || S || V), which makes it possible to recover the signer's
public key from a signature. Verification of either form uses only R and S.
"""

from enum import Enum

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from pydantic import BaseModel, ConfigDict

from jwt_secp256k1.crypto.errors import BadSignatureError, VerificationFailedError
from jwt_secp256k1.crypto.keys import require_secp256k1
from jwt_secp256k1.crypto.primitives import (
    SECP256K1_SIZE,
    hash_digest,
    resolve_hash,
    sign_digest,
    verify_digest,
)
from jwt_secp256k1.crypto.segments import decode_segment, encode_segment

class SignatureFormat(Enum):
    """Output shape of a signature; the value is its byte length."""

    R_S = 64
    R_S_V = 65

    def shape(self, raw_sig: bytes) -> bytes:
        """Truncate a raw R || S || V signature to this format."""
        return raw_sig[: self.value]


class SigningMethodConfig(BaseModel):
    """Static configuration of one signing method variant."""

    model_config = ConfigDict(frozen=True)

    alg: str
    hash_name: str = "SHA256"
    signature_format: SignatureFormat

    @property
    def signature_length(self) -> int:
        return self.signature_format.value


def _to_bytes(signing_input: str | bytes) -> bytes:
    if isinstance(signing_input, str):
        return signing_input.encode("utf-8")
    return signing_input


class SigningMethodSecp256k1:
    """A JWT signing method on the secp256k1 curve.

    Instances are stateless; every call depends only on its arguments and
    the configuration given at construction.
    """

    def __init__(self, config: SigningMethodConfig) -> None:
        self._config = config

    def __repr__(self) -> str:
        return f"SigningMethodSecp256k1(alg={self._config.alg!r})"

    @property
    def alg(self) -> str:
        """Algorithm name used in the JWT ``alg`` header."""
        return self._config.alg

    @property
    def config(self) -> SigningMethodConfig:
        return self._config

    def sign_raw(
        self, signing_input: str | bytes, key: ec.EllipticCurvePrivateKey
    ) -> bytes:
        """Sign and return the shaped signature bytes, unencoded."""
        require_secp256k1(key, ec.EllipticCurvePrivateKey)
        hash_alg = resolve_hash(self._config.hash_name)
        digest = hash_digest(hash_alg, _to_bytes(signing_input))
        raw_sig = sign_digest(digest, key)
        return self._config.signature_format.shape(raw_sig)

    def sign(
        self, signing_input: str | bytes, key: ec.EllipticCurvePrivateKey
    ) -> bytes:
        """Sign and return the base64url JWT signature segment."""
        return encode_segment(self.sign_raw(signing_input, key))

    def verify(
        self,
        signing_input: str | bytes,
        signature: str | bytes,
        key: ec.EllipticCurvePublicKey,
    ) -> None:
        """Verify a base64url JWT signature segment.

        Raises WrongKeyFormatError, HashUnavailableError, BadSignatureError or
        VerificationFailedError. Malformed base64 raises ``binascii.Error``.
        """
        require_secp256k1(key, ec.EllipticCurvePublicKey)
        hash_alg = resolve_hash(self._config.hash_name)
        sig = decode_segment(signature)
        self._verify_decoded(_to_bytes(signing_input), sig, key, hash_alg)

    def verify_raw(
        self,
        signing_input: str | bytes,
        sig: bytes,
        key: ec.EllipticCurvePublicKey,
    ) -> None:
        """Verify signature bytes that are already base64url-decoded."""
        require_secp256k1(key, ec.EllipticCurvePublicKey)
        hash_alg = resolve_hash(self._config.hash_name)
        self._verify_decoded(_to_bytes(signing_input), sig, key, hash_alg)

    def _verify_decoded(
        self,
        data: bytes,
        sig: bytes,
        key: ec.EllipticCurvePublicKey,
        hash_alg: type[hashes.HashAlgorithm],
    ) -> None:
        if len(sig) != self._config.signature_length:
            raise BadSignatureError()

        r = int.from_bytes(sig[:SECP256K1_SIZE], byteorder="big")
        s = int.from_bytes(sig[SECP256K1_SIZE : 2 * SECP256K1_SIZE], byteorder="big")

        if not verify_digest(r, s, hash_digest(hash_alg, data), key, hash_alg):
            raise VerificationFailedError()


SIGNING_METHOD_ES256K = SigningMethodSecp256k1(
    SigningMethodConfig(alg="ES256K", signature_format=SignatureFormat.R_S)
)
SIGNING_METHOD_ES256KR = SigningMethodSecp256k1(
    SigningMethodConfig(alg="ES256K-R", signature_format=SignatureFormat.R_S_V)
)
