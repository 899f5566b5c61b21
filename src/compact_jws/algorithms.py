"""Supported JWS signature algorithms."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from .errors import JWSErrorCode, UnsupportedAlgorithmError


class Algorithm(str, Enum):
    HS256 = "HS256"
    RS256 = "RS256"

    @classmethod
    def parse(cls, value: Any) -> Algorithm:
        """Resolve a header ``alg`` value; matching is exact and case-sensitive."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise UnsupportedAlgorithmError(
            f"Unsupported algorithm {value!r}",
            details={"alg": str(value)},
        )


def ensure_allowed(alg: Algorithm, allowed: Iterable[Algorithm | str] | None) -> None:
    """Raise when ``alg`` falls outside a caller-pinned algorithm set."""
    if allowed is None:
        return
    permitted = {Algorithm.parse(item) for item in allowed}
    if alg not in permitted:
        raise UnsupportedAlgorithmError(
            f"Algorithm {alg.value} is not permitted",
            code=JWSErrorCode.ALGORITHM_NOT_ALLOWED,
            details={"alg": alg.value, "allowed": ",".join(sorted(a.value for a in permitted))},
        )


__all__ = ["Algorithm", "ensure_allowed"]
