"""Config-driven facade over the JWS engine."""

from __future__ import annotations

from typing import Any, Optional

from . import engine
from .algorithms import Algorithm, ensure_allowed
from .config import JWSConfig, load_config
from .errors import JWSError, JWSErrorCode, UnsupportedAlgorithmError, redact_sensitive
from .keys import KeyMaterial, select_algorithm
from .logging import get_logger, setup_logging


class JWSService:
    """Signs and verifies compact JWS tokens under a configured policy.

    The policy restricts algorithms to ``config.allowed_algorithms`` on both
    sides and, when ``require_explicit_algorithm`` is set, refuses to infer
    the signing algorithm from key text.
    """

    def __init__(self, config: JWSConfig | None = None) -> None:
        self._config = config or load_config()
        self._logger = get_logger(__name__)

    @classmethod
    def from_env(cls) -> JWSService:
        """Build a service from environment configuration and set up logging."""
        config = load_config()
        setup_logging(config.log_level)
        return cls(config)

    @property
    def config(self) -> JWSConfig:
        return self._config

    def sign(
        self, payload: Any, key: KeyMaterial, *, algorithm: Optional[Algorithm | str] = None
    ) -> str:
        if algorithm is None:
            if self._config.require_explicit_algorithm:
                raise UnsupportedAlgorithmError(
                    "An explicit signing algorithm is required",
                    code=JWSErrorCode.ALGORITHM_NOT_ALLOWED,
                )
            alg = select_algorithm(key)
        else:
            alg = Algorithm.parse(algorithm)
        ensure_allowed(alg, self._config.allowed_algorithms)
        token = engine.sign(payload, key, algorithm=alg)
        self._logger.info("jws.signed", alg=alg.value, length=len(token))
        return token

    def verify(self, token: str, key: KeyMaterial) -> bool:
        try:
            valid = engine.verify(token, key, algorithms=self._config.allowed_algorithms)
        except JWSError as exc:
            self._logger.warning(
                "jws.verify_failed",
                code=exc.code.value,
                error=redact_sensitive(exc.args[0]),
            )
            raise
        self._logger.info("jws.verified", valid=valid)
        return valid

    def decode(self, token: str) -> engine.DecodedToken:
        decoded = engine.decode(token)
        ensure_allowed(decoded.alg, self._config.allowed_algorithms)
        return decoded


__all__ = ["JWSService"]
