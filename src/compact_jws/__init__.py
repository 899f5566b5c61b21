"""JSON Web Signature compact serialization for HS256 and RS256."""

from importlib import metadata

from .algorithms import Algorithm
from .config import ConfigError, JWSConfig
from .constants import PACKAGE_NAME
from .engine import DecodedToken, Header, decode, sign, verify
from .errors import CryptoError, FormatError, JWSError, JWSErrorCode, UnsupportedAlgorithmError
from .service import JWSService

__all__ = [
    "Algorithm",
    "ConfigError",
    "CryptoError",
    "DecodedToken",
    "FormatError",
    "Header",
    "JWSConfig",
    "JWSError",
    "JWSErrorCode",
    "JWSService",
    "UnsupportedAlgorithmError",
    "__version__",
    "decode",
    "sign",
    "verify",
]


try:
    __version__ = metadata.version(PACKAGE_NAME)
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
