"""Error types raised by the JWS engine."""

from __future__ import annotations

import re
from enum import Enum

_SENSITIVE_PATTERN = re.compile(r"(?i)(token|secret|password|key)=([^\s]+)")
_PEM_PATTERN = re.compile(r"-----BEGIN ([A-Z ]+)-----.*?-----END \1-----", re.DOTALL)


class JWSErrorCode(str, Enum):
    INVALID_FORMAT = "InvalidFormat"
    INVALID_PAYLOAD = "InvalidPayload"
    UNSUPPORTED_ALGORITHM = "UnsupportedAlgorithm"
    ALGORITHM_NOT_ALLOWED = "AlgorithmNotAllowed"
    CRYPTO_FAILURE = "CryptoFailure"


class JWSError(RuntimeError):
    """Base error for signing and verification failures."""

    default_code = JWSErrorCode.INVALID_FORMAT

    def __init__(
        self,
        message: str,
        *,
        code: JWSErrorCode | None = None,
        details: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        base = f"{self.code.value}: {self.args[0]}"
        if self.details:
            return f"{base} ({self.details})"
        return base


class FormatError(JWSError):
    """Token or payload cannot be parsed into a JWS structure."""

    default_code = JWSErrorCode.INVALID_FORMAT


class UnsupportedAlgorithmError(JWSError):
    """Header names an algorithm outside the supported or permitted set."""

    default_code = JWSErrorCode.UNSUPPORTED_ALGORITHM


class CryptoError(JWSError):
    """Key material was rejected by the cryptographic primitives."""

    default_code = JWSErrorCode.CRYPTO_FAILURE


def redact_sensitive(text: str) -> str:
    """Mask obvious secrets and PEM blocks in messages."""
    text = _PEM_PATTERN.sub(lambda m: f"-----{m.group(1)} ***-----", text)
    return _SENSITIVE_PATTERN.sub(lambda m: f"{m.group(1)}=***", text)


__all__ = [
    "CryptoError",
    "FormatError",
    "JWSError",
    "JWSErrorCode",
    "UnsupportedAlgorithmError",
    "redact_sensitive",
]
