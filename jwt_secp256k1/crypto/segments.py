"""JWT segment codec: base64url with padding stripped."""

import base64
import binascii
import re

_SEGMENT_ALPHABET = re.compile(rb"[A-Za-z0-9_-]*")


def encode_segment(data: bytes) -> bytes:
    """Encode bytes as unpadded base64url."""
    return base64.urlsafe_b64encode(data).rstrip(b"=")


def decode_segment(segment: str | bytes) -> bytes:
    """Decode an unpadded base64url segment.

    Malformed input, including characters outside the base64url alphabet,
    raises ``binascii.Error``.
    """
    if isinstance(segment, str):
        try:
            segment = segment.encode("ascii")
        except UnicodeEncodeError:
            raise binascii.Error("Non-base64url character in segment") from None
    if _SEGMENT_ALPHABET.fullmatch(segment) is None:
        raise binascii.Error("Non-base64url character in segment")
    padding = (4 - len(segment) % 4) % 4
    return base64.b64decode(segment + b"=" * padding, altchars=b"-_", validate=True)
