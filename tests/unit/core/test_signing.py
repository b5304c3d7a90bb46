"""Unit tests for HMAC signing helpers."""

import base64
import hashlib
import hmac
import time

import pytest

from laakhay.protocol.signing import hmac_base64, hmac_hex, sign, timestamp_ms, timestamp_seconds


@pytest.mark.parametrize(
    ("algorithm", "digestmod"),
    [("sha256", hashlib.sha256), ("sha384", hashlib.sha384), ("sha512", hashlib.sha512)],
)
def test_hex_signature_matches_hmac(algorithm, digestmod):
    """Test hex signatures for each supported hash."""
    expected = hmac.new(b"secret", b"payload", digestmod).hexdigest()

    assert hmac_hex("secret", "payload", algorithm) == expected


def test_base64_signature_matches_hmac():
    """Test base64 signature encoding."""
    digest = hmac.new(b"secret", b"payload", hashlib.sha256).digest()

    assert hmac_base64("secret", "payload") == base64.b64encode(digest).decode()


def test_sign_encoding_tag():
    """Test that sign honors an encoding tag string."""
    assert sign("s", "p", "sha256", "base64") == hmac_base64("s", "p")
    assert sign("s", "p", "sha256", "hex") == hmac_hex("s", "p")


def test_timestamps_track_wall_clock():
    """Test that timestamps are in the expected units."""
    now = time.time()

    assert abs(timestamp_seconds() - now) < 5
    assert abs(timestamp_ms() / 1000 - now) < 5
