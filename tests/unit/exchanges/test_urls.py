"""Unit tests for stream URL resolution."""

import pytest

from laakhay.protocol.exchanges import interpolate_hostname, resolve_url

URLS = {
    "public": {
        "spot": "wss://stream.{hostname}/public/spot",
        "linear": "wss://stream.{hostname}/public/linear",
    },
    "private": "wss://stream.{hostname}/private",
}
TEST_URLS = {"public": {"spot": "wss://testnet.{hostname}/public/spot"}}


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (("public", "linear"), "wss://stream.{hostname}/public/linear"),
        ("public", "wss://stream.{hostname}/public/spot"),
        ((), "wss://stream.{hostname}/public/spot"),
        ("private", "wss://stream.{hostname}/private"),
        (("private", "spot"), "wss://stream.{hostname}/private"),
        (("public", "option"), None),
        ("missing", None),
    ],
)
def test_paths(path, expected):
    """Test navigation, first-URL fallback and short-circuits."""
    assert resolve_url(URLS, path) == expected


def test_plain_url():
    """Test a single URL instead of a map."""
    assert resolve_url("wss://a", ("public", "spot")) == "wss://a"


def test_hostname():
    """Test placeholder interpolation."""
    assert resolve_url(URLS, "private", hostname="example.com") == "wss://stream.example.com/private"


def test_sandbox():
    """Test testnet selection."""
    assert resolve_url(URLS, "public", sandbox=True, test_urls=TEST_URLS) == "wss://testnet.{hostname}/public/spot"


def test_sandbox_without_test_urls():
    """Test falling back to production when there is no testnet map."""
    assert resolve_url(URLS, "private", sandbox=True) == "wss://stream.{hostname}/private"


def test_none_urls():
    """Test absent URL maps."""
    assert resolve_url(None, "public") is None


def test_interpolate_without_hostname():
    """Test that URLs are unchanged without a hostname."""
    assert interpolate_hostname("wss://{hostname}/ws", None) == "wss://{hostname}/ws"
