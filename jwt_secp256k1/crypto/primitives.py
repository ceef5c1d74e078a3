"""Hash, sign and verify primitives for the secp256k1 curve.

Signing goes through coincurve because it returns the recovery byte along
with R and S. Hashing and verification use cryptography, which also owns the
key objects handed to us by PyJWT callers.
"""

import logging

import coincurve
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    encode_dss_signature,
)

from jwt_secp256k1.crypto.errors import HashUnavailableError, SigningFailedError

logger = logging.getLogger(__name__)

# Byte length of a secp256k1 scalar or field coordinate.
SECP256K1_SIZE = 32


def resolve_hash(name: str) -> type[hashes.HashAlgorithm]:
    """Look up a cryptography hash by name and check the backend supports it."""
    hash_cls = getattr(hashes, name, None)
    if not isinstance(hash_cls, type) or not issubclass(
        hash_cls, hashes.HashAlgorithm
    ):
        raise HashUnavailableError(f"hasher unavailable: {name}")
    try:
        hashes.Hash(hash_cls())
    except (UnsupportedAlgorithm, TypeError):
        raise HashUnavailableError(f"hasher unavailable: {name}") from None
    return hash_cls


def hash_digest(hash_alg: type[hashes.HashAlgorithm], data: bytes) -> bytes:
    """Return the digest of ``data``."""
    hasher = hashes.Hash(hash_alg())
    hasher.update(data)
    return hasher.finalize()


def sign_digest(digest: bytes, private_key: ec.EllipticCurvePrivateKey) -> bytes:
    """Sign a 32-byte digest, returning R || S || V."""
    secret = private_key.private_numbers().private_value.to_bytes(
        SECP256K1_SIZE, byteorder="big"
    )
    try:
        return coincurve.PrivateKey(secret).sign_recoverable(digest, hasher=None)
    except (ValueError, TypeError) as exc:
        logger.warning("secp256k1 signing primitive failed: %s", type(exc).__name__)
        raise SigningFailedError() from None


def verify_digest(
    r: int,
    s: int,
    digest: bytes,
    public_key: ec.EllipticCurvePublicKey,
    hash_alg: type[hashes.HashAlgorithm],
) -> bool:
    """Check an (R, S) pair against a digest and public key."""
    der_sig = encode_dss_signature(r, s)
    try:
        public_key.verify(der_sig, digest, ec.ECDSA(Prehashed(hash_alg())))
    except InvalidSignature:
        return False
    return True
