"""PyJWT algorithm plugin backed by the secp256k1 signing methods.

Importing this module installs ES256K-R into PyJWT's global algorithm table
and, when ``JWT_SECP256K1_REPLACE_BUILTIN_ES256K`` is set (the default),
swaps PyJWT's own ES256K handler for ours. The installation runs once per
process.
"""

import logging
import threading
from typing import Any

import jwt
from cryptography.hazmat.primitives.asymmetric import ec
from jwt.algorithms import Algorithm, ECAlgorithm

from jwt_secp256k1.core.settings import Secp256k1Settings
from jwt_secp256k1.crypto.errors import (
    BadSignatureError,
    VerificationFailedError,
    WrongKeyFormatError,
)
from jwt_secp256k1.crypto.keys import (
    AllowedSecp256k1Keys,
    load_private_key,
    load_public_key,
    require_secp256k1,
)
from jwt_secp256k1.crypto.registry import get_signing_method, registered_algorithms
from jwt_secp256k1.crypto.signing_method import SigningMethodSecp256k1

logger = logging.getLogger(__name__)

_install_lock = threading.RLock()
_installed_globally = False


class Secp256k1Algorithm(Algorithm):
    """Adapts a SigningMethodSecp256k1 to PyJWT's Algorithm interface.

    PyJWT base64url-encodes and decodes the signature segment itself, so this
    class works with the raw shaped signature bytes.
    """

    def __init__(self, method: SigningMethodSecp256k1) -> None:
        self.method = method

    def prepare_key(
        self, key: AllowedSecp256k1Keys | str | bytes
    ) -> AllowedSecp256k1Keys:
        if isinstance(key, (ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey)):
            return require_secp256k1(key)

        if not isinstance(key, (str, bytes)):
            raise WrongKeyFormatError("Expecting a PEM-formatted key.")

        key_bytes = key.encode() if isinstance(key, str) else key
        if b"PRIVATE KEY" in key_bytes:
            return load_private_key(key_bytes)
        return load_public_key(key_bytes)

    def sign(self, msg: bytes, key: ec.EllipticCurvePrivateKey) -> bytes:
        return self.method.sign_raw(msg, key)

    def verify(self, msg: bytes, key: AllowedSecp256k1Keys, sig: bytes) -> bool:
        public_key = (
            key.public_key() if isinstance(key, ec.EllipticCurvePrivateKey) else key
        )
        try:
            self.method.verify_raw(msg, sig, public_key)
        except (BadSignatureError, VerificationFailedError):
            return False
        return True

    @staticmethod
    def to_jwk(key_obj: AllowedSecp256k1Keys, as_dict: bool = False) -> Any:
        return ECAlgorithm.to_jwk(require_secp256k1(key_obj), as_dict=as_dict)

    @staticmethod
    def from_jwk(jwk: str | dict[str, Any]) -> AllowedSecp256k1Keys:
        return require_secp256k1(ECAlgorithm.from_jwk(jwk))


def install_algorithms(
    jws: jwt.PyJWS | None = None, replace_builtin: bool = False
) -> list[str]:
    """Install every registered secp256k1 method into a PyJWS instance.

    Uses PyJWT's global instance when ``jws`` is None. Handlers that are
    already ours are left alone. Returns the names that were installed.
    """
    if jws is None:
        lookup = jwt.get_algorithm_by_name
        register = jwt.register_algorithm
        unregister = jwt.unregister_algorithm
    else:
        lookup = jws.get_algorithm_by_name
        register = jws.register_algorithm
        unregister = jws.unregister_algorithm

    installed: list[str] = []
    with _install_lock:
        for alg in registered_algorithms():
            try:
                existing = lookup(alg)
            except (KeyError, NotImplementedError):
                existing = None

            if isinstance(existing, Secp256k1Algorithm):
                continue
            if existing is not None:
                if not replace_builtin:
                    logger.info("Keeping PyJWT's built-in handler for %s", alg)
                    continue
                unregister(alg)
                logger.info("Replacing PyJWT's built-in handler for %s", alg)

            register(alg, Secp256k1Algorithm(get_signing_method(alg)))
            installed.append(alg)
            logger.debug("Installed %s into PyJWT", alg)
    return installed


def install_global_algorithms() -> None:
    """Install into PyJWT's global algorithm table, once per process."""
    global _installed_globally
    with _install_lock:
        if _installed_globally:
            return
        settings = Secp256k1Settings()
        install_algorithms(replace_builtin=settings.replace_builtin_es256k)
        _installed_globally = True


install_global_algorithms()
