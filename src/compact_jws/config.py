"""Configuration for the JWS service facade."""

from __future__ import annotations

import os
from typing import Any, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .algorithms import Algorithm
from .errors import UnsupportedAlgorithmError
from .logging import DEFAULT_LOG_LEVEL


class ConfigError(RuntimeError):
    """Raised when JWS configuration is invalid."""


class JWSConfig(BaseModel):
    """Validated service configuration loaded from environment variables."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Root log level")
    allowed_algorithms: Tuple[Algorithm, ...] = Field(
        default=(Algorithm.HS256, Algorithm.RS256),
        description="Algorithms accepted when signing and verifying",
    )
    require_explicit_algorithm: bool = Field(
        default=False,
        description="Refuse to infer the signing algorithm from the key text",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        from logging import getLevelName

        candidate = value.upper()
        if isinstance(getLevelName(candidate), int):
            return candidate
        raise ValueError(f"Unsupported log level '{value}'")

    @field_validator("allowed_algorithms", mode="before")
    @classmethod
    def _parse_algorithms(cls, value: Any) -> Tuple[Algorithm, ...]:
        if isinstance(value, str):
            value = [item.strip() for item in value.split(",") if item.strip()]
        try:
            parsed = tuple(dict.fromkeys(Algorithm.parse(item) for item in value))
        except UnsupportedAlgorithmError as exc:
            raise ValueError(exc.args[0]) from exc
        if not parsed:
            raise ValueError("At least one algorithm must be allowed")
        return parsed

    @classmethod
    def from_env(cls) -> JWSConfig:
        """Load configuration from environment variables (respecting .env)."""
        load_dotenv()
        try:
            raw: dict[str, Any] = {
                "log_level": os.getenv("JWS_LOG_LEVEL", cls.model_fields["log_level"].default),
                "allowed_algorithms": os.getenv(
                    "JWS_ALLOWED_ALGORITHMS",
                    cls.model_fields["allowed_algorithms"].default,
                ),
                "require_explicit_algorithm": cls._env_to_bool(
                    "JWS_REQUIRE_EXPLICIT_ALGORITHM",
                    cls.model_fields["require_explicit_algorithm"].default,
                ),
            }
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise ConfigError("Invalid JWS configuration") from exc

    @staticmethod
    def _env_to_bool(name: str, default: bool) -> bool:
        raw = os.getenv(name)
        if raw is None:
            return default
        lowered = raw.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"Environment variable {name} must be a boolean expression")


def load_config() -> JWSConfig:
    """Convenience helper to load configuration with error propagation."""
    return JWSConfig.from_env()
