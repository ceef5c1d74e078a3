"""Process-wide registry of secp256k1 signing methods, keyed by alg name."""

import logging
import threading
from collections.abc import Callable

import jwt

from jwt_secp256k1.crypto.signing_method import (
    SIGNING_METHOD_ES256K,
    SIGNING_METHOD_ES256KR,
    SigningMethodSecp256k1,
)

logger = logging.getLogger(__name__)

SigningMethodFactory = Callable[[], SigningMethodSecp256k1]

_lock = threading.Lock()
_signing_methods: dict[str, SigningMethodFactory] = {}
_defaults_registered = False


def register_signing_method(alg: str, factory: SigningMethodFactory) -> None:
    """Register a factory for ``alg``, replacing any previous entry."""
    with _lock:
        _signing_methods[alg] = factory
    logger.debug("Registered signing method %s", alg)


def get_signing_method(alg: str) -> SigningMethodSecp256k1:
    """Return the signing method registered under ``alg``."""
    with _lock:
        factory = _signing_methods.get(alg)
    if factory is None:
        raise jwt.InvalidAlgorithmError(f"Algorithm not supported: {alg}")
    return factory()


def registered_algorithms() -> list[str]:
    """Return the registered algorithm names."""
    with _lock:
        return sorted(_signing_methods)


def register_default_methods() -> None:
    """Register ES256K and ES256K-R. Runs at most once per process."""
    global _defaults_registered
    with _lock:
        if _defaults_registered:
            return
        _defaults_registered = True
    for method in (SIGNING_METHOD_ES256K, SIGNING_METHOD_ES256KR):
        register_signing_method(method.alg, lambda m=method: m)


register_default_methods()
