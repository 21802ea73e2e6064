"""Binary/text conversion helpers.

Signatures and ciphertexts travel as standard base64 (padded). JWK numeric
members travel as unpadded base64url big-endian integers.
"""
from __future__ import annotations

import base64
import binascii
import re
from typing import Optional

from .errors import DataError

_B64URL_RE = re.compile(r"^[A-Za-z0-9_-]*$")


def bytes_to_text(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def text_to_bytes(text: str) -> bytes:
    """Strict inverse of bytes_to_text; raises DataError on anything else."""
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, AttributeError) as e:
        raise DataError("invalid base64 text") from e


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    if not isinstance(text, str) or not _B64URL_RE.match(text) or len(text) % 4 == 1:
        raise DataError("invalid base64url member")
    pad = (4 - (len(text) % 4)) % 4
    return base64.urlsafe_b64decode(text + ("=" * pad))


def is_b64url(text: str) -> bool:
    return bool(_B64URL_RE.match(text)) and len(text) % 4 != 1


def int_to_b64url(value: int, length: Optional[int] = None) -> str:
    # length pins the octet count (EC coordinates); otherwise minimal big-endian
    if length is None:
        length = max(1, (value.bit_length() + 7) // 8)
    return b64url_encode(value.to_bytes(length, "big"))


def b64url_to_int(text: str) -> int:
    raw = b64url_decode(text)
    if not raw:
        raise DataError("empty integer member")
    return int.from_bytes(raw, "big")


__all__ = [
    "bytes_to_text",
    "text_to_bytes",
    "b64url_encode",
    "b64url_decode",
    "is_b64url",
    "int_to_b64url",
    "b64url_to_int",
]
