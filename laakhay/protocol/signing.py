"""HMAC signing primitive and wall-clock helpers used by auth patterns."""

from __future__ import annotations

import base64
import hashlib
import hmac
import time

from .core.enums import HashAlgorithm, SignatureEncoding

_DIGESTS = {
    HashAlgorithm.SHA256: hashlib.sha256,
    HashAlgorithm.SHA384: hashlib.sha384,
    HashAlgorithm.SHA512: hashlib.sha512,
}


def hmac_digest(
    secret: str,
    payload: str,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA256,
) -> bytes:
    """Compute a raw HMAC digest.

    Args:
        secret: Signing key (UTF-8 text)
        payload: Message to sign (UTF-8 text)
        algorithm: Hash function (sha256, sha384, sha512)

    Returns:
        Raw digest bytes
    """
    digestmod = _DIGESTS[HashAlgorithm.parse(algorithm)]
    return hmac.new(secret.encode("utf-8"), payload.encode("utf-8"), digestmod).digest()


def encode_hex(digest: bytes) -> str:
    return digest.hex()


def encode_base64(digest: bytes) -> str:
    return base64.b64encode(digest).decode("ascii")


def sign(
    secret: str,
    payload: str,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA256,
    encoding: SignatureEncoding | str = SignatureEncoding.HEX,
) -> str:
    """Sign a payload and render the digest as text.

    Args:
        secret: Signing key
        payload: Message to sign
        algorithm: Hash function
        encoding: Digest text encoding (hex or base64)

    Returns:
        Encoded signature
    """
    digest = hmac_digest(secret, payload, algorithm)
    if SignatureEncoding.parse(encoding) == SignatureEncoding.BASE64:
        return encode_base64(digest)
    return encode_hex(digest)


def hmac_hex(secret: str, payload: str, algorithm: HashAlgorithm | str = HashAlgorithm.SHA256) -> str:
    """HMAC digest as lowercase hex."""
    return sign(secret, payload, algorithm, SignatureEncoding.HEX)


def hmac_base64(secret: str, payload: str, algorithm: HashAlgorithm | str = HashAlgorithm.SHA256) -> str:
    """HMAC digest as standard base64."""
    return sign(secret, payload, algorithm, SignatureEncoding.BASE64)


def timestamp_ms() -> int:
    """Current wall-clock time in milliseconds since epoch."""
    return int(time.time() * 1000)


def timestamp_seconds() -> int:
    """Current wall-clock time in whole seconds since epoch."""
    return int(time.time())
