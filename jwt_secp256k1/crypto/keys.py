"""secp256k1 key generation, loading, encryption, and JWK conversion."""

import uuid_utils
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.fernet import Fernet
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from jwt_secp256k1.crypto.errors import WrongKeyFormatError
from jwt_secp256k1.crypto.primitives import SECP256K1_SIZE
from jwt_secp256k1.crypto.segments import encode_segment
from jwt_secp256k1.crypto.types import JWKEntry, SigningKeyData

AllowedSecp256k1Keys = ec.EllipticCurvePrivateKey | ec.EllipticCurvePublicKey


def generate_secp256k1_keypair() -> SigningKeyData:
    """Generate a new secp256k1 keypair for JWT signing."""
    private_key = ec.generate_private_key(ec.SECP256K1())
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
    kid = str(uuid_utils.uuid7())
    return SigningKeyData(
        kid=kid, private_key_pem=private_pem, public_key_pem=public_pem
    )


def _as_bytes(pem: str | bytes) -> bytes:
    return pem.encode() if isinstance(pem, str) else pem


def require_secp256k1(
    key: object,
    key_type: type | tuple[type, ...] = (
        ec.EllipticCurvePrivateKey,
        ec.EllipticCurvePublicKey,
    ),
) -> AllowedSecp256k1Keys:
    """Return ``key`` if it is a ``key_type`` on secp256k1, else raise."""
    if not isinstance(key, key_type):
        raise WrongKeyFormatError()
    if not isinstance(key.curve, ec.SECP256K1):
        raise WrongKeyFormatError(f"expected a secp256k1 key, got {key.curve.name}")
    return key


def load_private_key(pem: str | bytes) -> ec.EllipticCurvePrivateKey:
    """Load an unencrypted PEM private key on the secp256k1 curve."""
    try:
        loaded = serialization.load_pem_private_key(_as_bytes(pem), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm):
        raise WrongKeyFormatError("invalid PEM private key") from None
    return require_secp256k1(loaded, ec.EllipticCurvePrivateKey)


def load_public_key(pem: str | bytes) -> ec.EllipticCurvePublicKey:
    """Load a PEM public key on the secp256k1 curve."""
    try:
        loaded = serialization.load_pem_public_key(_as_bytes(pem))
    except (ValueError, UnsupportedAlgorithm):
        raise WrongKeyFormatError("invalid PEM public key") from None
    return require_secp256k1(loaded, ec.EllipticCurvePublicKey)


def encrypt_private_key(private_pem: str, fernet_key: str) -> str:
    """Encrypt a PEM private key with Fernet for storage in configuration."""
    cipher = Fernet(fernet_key.encode())
    return cipher.encrypt(private_pem.encode()).decode()


def decrypt_private_key(encrypted: str, fernet_key: str) -> str:
    """Decrypt a Fernet-encrypted PEM private key."""
    cipher = Fernet(fernet_key.encode())
    return cipher.decrypt(encrypted.encode()).decode()


def _int_to_base64url(value: int) -> str:
    """Encode a curve coordinate as fixed-width base64url without padding."""
    return encode_segment(value.to_bytes(SECP256K1_SIZE, byteorder="big")).decode()


def pem_to_jwk_entry(public_key_pem: str, kid: str, alg: str = "ES256K") -> JWKEntry:
    """Convert a PEM public key to JWK format."""
    numbers = load_public_key(public_key_pem).public_numbers()
    return JWKEntry(
        kid=kid,
        alg=alg,
        x=_int_to_base64url(numbers.x),
        y=_int_to_base64url(numbers.y),
    )
