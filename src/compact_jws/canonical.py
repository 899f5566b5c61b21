"""JSON serialization rules shared by signer and verifier.

Both sides must derive byte-identical segments from the same values, so the
rules are fixed here rather than left to serializer defaults:

* compact separators (``,`` and ``:``) with no whitespace,
* object keys in insertion order (never sorted),
* non-ASCII characters emitted verbatim and encoded as UTF-8,
* ``NaN`` and infinities rejected.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import FormatError, JWSErrorCode


def canonical_json(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise FormatError(
            "Payload is not JSON serializable",
            code=JWSErrorCode.INVALID_PAYLOAD,
            details={"reason": str(exc)},
        ) from exc


def serialize_payload(payload: Any) -> bytes:
    """Return the payload bytes that get base64url-encoded into the token."""
    if isinstance(payload, bytes):
        return payload
    text = payload if isinstance(payload, str) else canonical_json(payload)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise FormatError(
            "Payload is not valid Unicode text",
            code=JWSErrorCode.INVALID_PAYLOAD,
            details={"reason": str(exc)},
        ) from exc


__all__ = ["canonical_json", "serialize_payload"]
