"""URL-safe base64 codec without padding."""

from __future__ import annotations

import base64
import binascii
import re

from .errors import FormatError

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def encode(data: bytes | str) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(value: str) -> bytes:
    """Decode an unpadded base64url string.

    Characters outside the URL-safe alphabet, padding, impossible lengths and
    non-zero trailing bits are rejected, so every byte string has exactly one
    accepted encoding.
    """
    if not isinstance(value, str) or _ALPHABET.fullmatch(value) is None:
        raise FormatError("Segment is not valid base64url")
    if len(value) % 4 == 1:
        raise FormatError("Segment has an invalid base64url length")
    padding = "=" * (-len(value) % 4)
    try:
        data = base64.urlsafe_b64decode(value + padding)
    except binascii.Error as exc:  # pragma: no cover - guarded by the checks above
        raise FormatError("Segment is not valid base64url") from exc
    if encode(data) != value:
        raise FormatError("Segment has non-canonical base64url trailing bits")
    return data


def from_base64(value: str) -> str:
    """Convert standard base64 output to the URL-safe unpadded alphabet."""
    return value.rstrip("=").replace("+", "-").replace("/", "_")


def to_base64(value: str) -> str:
    """Convert base64url text back to standard padded base64."""
    padding = "=" * (-len(value) % 4)
    return value.replace("-", "+").replace("_", "/") + padding


__all__ = ["decode", "encode", "from_base64", "to_base64"]
