"""Key material classification and PEM loading."""

from __future__ import annotations

from typing import Union

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .algorithms import Algorithm
from .constants import CERTIFICATE_MARKER, RSA_PRIVATE_KEY_MARKER
from .errors import CryptoError

KeyMaterial = Union[str, bytes]


def key_to_text(key: KeyMaterial) -> str:
    if isinstance(key, bytes):
        try:
            text = key.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CryptoError("Key material must be UTF-8 text") from exc
    elif isinstance(key, str):
        text = key
    else:
        raise CryptoError(f"Unsupported key type {type(key).__name__}")
    if not text:
        raise CryptoError("Key material must not be empty")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CryptoError("Key material must be valid Unicode text") from exc
    return text


def key_to_bytes(key: KeyMaterial) -> bytes:
    return key_to_text(key).encode("utf-8")


def is_rsa_private_key(key: KeyMaterial) -> bool:
    """Return True when the key text starts with the PKCS#1 private key marker.

    The check is a plain prefix match at offset zero. Leading whitespace or a
    PKCS#8 ``BEGIN PRIVATE KEY`` block classifies the key as an HMAC secret.
    """
    return key_to_text(key).startswith(RSA_PRIVATE_KEY_MARKER)


def select_algorithm(key: KeyMaterial) -> Algorithm:
    if is_rsa_private_key(key):
        return Algorithm.RS256
    return Algorithm.HS256


def load_private_key(key: KeyMaterial) -> rsa.RSAPrivateKey:
    data = key_to_bytes(key)
    try:
        private_key = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise CryptoError("Unable to load RSA private key", details={"reason": str(exc)}) from exc
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise CryptoError("Private key is not an RSA key")
    return private_key


def load_verifying_key(key: KeyMaterial) -> rsa.RSAPublicKey:
    """Load the RSA public key used for RS256 verification.

    Accepts a public key PEM, an X.509 certificate, or a private key PEM
    whose public half is used.
    """
    text = key_to_text(key)
    data = text.encode("utf-8")
    try:
        if text.lstrip().startswith(CERTIFICATE_MARKER):
            public_key = x509.load_pem_x509_certificate(data).public_key()
        elif "PRIVATE KEY-----" in text:
            public_key = load_private_key(data).public_key()
        else:
            public_key = serialization.load_pem_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise CryptoError("Unable to load RSA public key", details={"reason": str(exc)}) from exc
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise CryptoError("Verification key is not an RSA key")
    return public_key


__all__ = [
    "KeyMaterial",
    "is_rsa_private_key",
    "key_to_bytes",
    "key_to_text",
    "load_private_key",
    "load_verifying_key",
    "select_algorithm",
]
