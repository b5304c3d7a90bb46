"""Unit tests for configuration records."""

import pytest

from laakhay.protocol.core import (
    ArgsFormat,
    AuthConfig,
    AuthPattern,
    ChannelTemplate,
    ConfigurationError,
    MarketIdFormat,
    ParseInstruction,
    PatternConfig,
    PreAuthEndpoint,
    SignatureEncoding,
    SymbolContext,
    TemplateParam,
    TimestampUnit,
)


class TestPatternConfig:
    """Test PatternConfig validation and loading."""

    def test_empty_config_leaves_defaults_to_pattern(self):
        """Test that an empty config carries no overrides."""
        config = PatternConfig()

        assert config.op_field is None
        assert config.separator is None
        assert config.market_id_format is None

    def test_string_tags_coerced_to_enums(self):
        """Test that tag strings, with or without a leading colon, become enums."""
        config = PatternConfig(args_format=":object_list", market_id_format="lowercase")

        assert config.args_format is ArgsFormat.OBJECT_LIST
        assert config.market_id_format is MarketIdFormat.LOWERCASE

    def test_unknown_tag_raises(self):
        """Test that an unknown market id format is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            PatternConfig(market_id_format="camelcase")

        assert exc_info.value.field == "market_id_format"

    def test_non_string_field_raises(self):
        """Test that a non-string separator is rejected."""
        with pytest.raises(ConfigurationError):
            PatternConfig(separator=1)

    def test_from_mapping_rejects_unknown_keys(self):
        """Test that from_mapping refuses keys it does not know."""
        with pytest.raises(ConfigurationError) as exc_info:
            PatternConfig.from_mapping({"op_field": "op", "bogus": True})

        assert exc_info.value.field == "bogus"

    def test_from_mapping_rejects_non_mapping(self):
        """Test that from_mapping refuses a list."""
        with pytest.raises(ConfigurationError):
            PatternConfig.from_mapping(["op"])

    def test_symbol_context_mapping_converted(self):
        """Test that a plain symbol table becomes a SymbolContext."""
        config = PatternConfig.from_mapping({"symbol_context": {"BTC/USD": "tBTCUSD"}})

        assert isinstance(config.symbol_context, SymbolContext)
        assert config.symbol_context.lookup("BTC/USD") == "tBTCUSD"

    def test_with_symbol_context_returns_copy(self):
        """Test that binding a context leaves the original untouched."""
        config = PatternConfig(separator=".")
        bound = config.with_symbol_context(SymbolContext({"BTC/USDT": "BTC-USDT"}))

        assert config.symbol_context is None
        assert bound.symbol_context is not None
        assert bound.separator == "."


class TestChannelTemplate:
    """Test ChannelTemplate construction."""

    def test_params_from_mappings(self):
        """Test that params given as mappings become TemplateParam records."""
        template = ChannelTemplate.from_mapping(
            {"channel_name": "ticker", "params": [{"name": "interval", "default": "100ms"}]}
        )

        assert template.params == (TemplateParam("interval", "100ms"),)

    def test_channel_name_required(self):
        """Test that a template without a channel name is rejected."""
        with pytest.raises(ConfigurationError):
            ChannelTemplate(channel_name=None)

    def test_market_id_format_override(self):
        """Test that a template-level format tag is parsed."""
        template = ChannelTemplate("trade", market_id_format="uppercase")

        assert template.market_id_format is MarketIdFormat.UPPERCASE


class TestAuthConfig:
    """Test AuthConfig validation."""

    def test_defaults(self):
        """Test default signature options."""
        config = AuthConfig(pattern="direct_hmac_expiry")

        assert config.pattern is AuthPattern.DIRECT_HMAC_EXPIRY
        assert config.expires_offset_ms == 10_000
        assert config.encoding is SignatureEncoding.HEX
        assert config.timestamp_unit is TimestampUnit.SECONDS

    def test_unknown_pattern_raises(self):
        """Test that an unknown auth pattern is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            AuthConfig(pattern="magic_link")

        assert exc_info.value.field == "pattern"

    @pytest.mark.parametrize("ttl", [0, -5, True, "600000"])
    def test_invalid_ttl_raises(self, ttl):
        """Test that non-positive or non-integer TTLs are rejected."""
        with pytest.raises(ConfigurationError):
            AuthConfig(pattern="listen_key", auth_ttl_ms=ttl)

    def test_pre_auth_from_mapping(self):
        """Test that nested pre-auth endpoints load from mappings."""
        config = AuthConfig.from_mapping(
            {
                "pattern": "listen_key",
                "pre_auth": {"endpoints": [{"market_type": "spot", "endpoint": "https://x/listenKey"}]},
            }
        )

        assert config.pre_auth is not None
        assert config.pre_auth.endpoints == (PreAuthEndpoint("spot", "https://x/listenKey"),)

    def test_with_token(self):
        """Test that with_token returns a copy carrying the token."""
        config = AuthConfig(pattern="rest_token")

        assert config.with_token("abc").token == "abc"
        assert config.token is None


class TestParseInstruction:
    """Test ParseInstruction normalization."""

    def test_single_key_becomes_tuple(self):
        """Test that a single source key string is wrapped."""
        instruction = ParseInstruction("ask", "number", "askPrice")

        assert instruction.source_keys == ("askPrice",)

    def test_coerce_from_tuple(self):
        """Test building an instruction from a plain triple."""
        instruction = ParseInstruction.coerce(("bid", "number", ["bidPrice", "b"]))

        assert instruction == ParseInstruction("bid", "number", ("bidPrice", "b"))
