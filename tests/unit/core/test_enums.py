"""Unit tests for core enums."""

import pytest

from laakhay.protocol.core import (
    ArgsFormat,
    AuthPattern,
    CoercionKind,
    MarketIdFormat,
    SubscriptionPattern,
)


def test_pattern_counts():
    """Test the closed pattern sets."""
    assert len(SubscriptionPattern) == 14
    assert len(AuthPattern) == 8
    assert len(CoercionKind) == 10


@pytest.mark.parametrize("tag", ["object_list", ":object_list", " OBJECT_LIST ", ArgsFormat.OBJECT_LIST])
def test_parse_lenient(tag):
    """Test colon-prefixed, padded and member tags."""
    assert ArgsFormat.parse(tag) is ArgsFormat.OBJECT_LIST


@pytest.mark.parametrize("tag", ["objects", "", None, 3])
def test_parse_rejects(tag):
    """Test unknown tags."""
    with pytest.raises(ValueError):
        ArgsFormat.parse(tag)


def test_str_is_value():
    """Test that members render as their wire tag."""
    assert str(MarketIdFormat.DASHED) == "dashed"
    assert f"{SubscriptionPattern.JSONRPC}" == "jsonrpc"
    assert SubscriptionPattern.OP_SUBSCRIBE == "op_subscribe"
