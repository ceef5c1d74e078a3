"""Errors raised by the secp256k1 signing methods."""

import jwt


class SigningMethodError(jwt.PyJWTError):
    """Base class for secp256k1 signing method failures."""


class WrongKeyFormatError(SigningMethodError, jwt.InvalidKeyError):
    """The key is not a secp256k1 key of the expected kind."""

    def __init__(self, message: str = "wrong key type") -> None:
        super().__init__(message)


class HashUnavailableError(SigningMethodError):
    """The configured hash algorithm is not available in this runtime."""

    def __init__(self, message: str = "hasher unavailable") -> None:
        super().__init__(message)


class BadSignatureError(SigningMethodError, jwt.InvalidSignatureError):
    """The decoded signature has the wrong length for the algorithm."""

    def __init__(self, message: str = "bad signature") -> None:
        super().__init__(message)


class SigningFailedError(SigningMethodError):
    """The curve signing primitive failed."""

    def __init__(self, message: str = "failed generating signature") -> None:
        super().__init__(message)


class VerificationFailedError(SigningMethodError, jwt.InvalidSignatureError):
    """The signature does not validate against the digest and public key."""

    def __init__(self, message: str = "signature verification failed") -> None:
        super().__init__(message)
