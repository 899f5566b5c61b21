"""Signature computation and validation for HS256 and RS256."""

from __future__ import annotations

import hashlib
import hmac

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from . import base64url
from .algorithms import Algorithm
from .errors import CryptoError, UnsupportedAlgorithmError
from .keys import KeyMaterial, key_to_bytes, load_private_key, load_verifying_key


def create_signature(alg: Algorithm, signing_input: bytes, key: KeyMaterial) -> str:
    """Return the base64url signature segment for ``signing_input``."""
    match alg:
        case Algorithm.HS256:
            return _hs256_sign(signing_input, key)
        case Algorithm.RS256:
            return _rs256_sign(signing_input, key)
        case _:
            raise _unsupported(alg)


def verify_signature(
    alg: Algorithm, signing_input: bytes, signature: str, key: KeyMaterial
) -> bool:
    match alg:
        case Algorithm.HS256:
            return _hs256_verify(signing_input, signature, key)
        case Algorithm.RS256:
            return _rs256_verify(signing_input, signature, key)
        case _:
            raise _unsupported(alg)


def _unsupported(alg: object) -> UnsupportedAlgorithmError:
    return UnsupportedAlgorithmError(f"Unsupported algorithm {alg!r}", details={"alg": str(alg)})


def _hs256_sign(signing_input: bytes, secret: KeyMaterial) -> str:
    digest = hmac.new(key_to_bytes(secret), signing_input, hashlib.sha256).digest()
    return base64url.encode(digest)


def _hs256_verify(signing_input: bytes, signature: str, secret: KeyMaterial) -> bool:
    expected = _hs256_sign(signing_input, secret)
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))


def _rs256_sign(signing_input: bytes, key: KeyMaterial) -> str:
    private_key = load_private_key(key)
    try:
        raw = private_key.sign(signing_input, padding.PKCS1v15(), hashes.SHA256())
    except ValueError as exc:
        raise CryptoError("RSA signing failed", details={"reason": str(exc)}) from exc
    return base64url.encode(raw)


def _rs256_verify(signing_input: bytes, signature: str, key: KeyMaterial) -> bool:
    public_key = load_verifying_key(key)
    raw = base64url.decode(signature)
    try:
        public_key.verify(raw, signing_input, padding.PKCS1v15(), hashes.SHA256())
    except InvalidSignature:
        return False
    return True


__all__ = ["create_signature", "verify_signature"]
