"""Tests for factory addresses and the resolver."""

import pytest

from clanker_predictor import (
    CLANKER_FACTORY_ADDRESSES,
    SUPPORTED_CHAIN_IDS,
    ChainNotSupportedError,
    FactoryResolver,
    get_factory_address,
    is_supported_chain,
)


class TestConstants:
    """Tests for address and chain constants."""

    def test_get_factory_address_base_mainnet(self) -> None:
        """Test factory address for Base mainnet."""
        address = get_factory_address(8453)
        assert address == "0xE85A59c628F7d27878ACeB4bf3b35733630083a9"

    def test_get_factory_address_unsupported_chain(self) -> None:
        """Test factory address for unsupported chain raises error."""
        with pytest.raises(ChainNotSupportedError) as exc_info:
            get_factory_address(42161)

        assert exc_info.value.chain_id == 42161
        assert "42161" in str(exc_info.value)

    def test_get_factory_address_custom_map(self) -> None:
        """An explicit map replaces the defaults entirely."""
        addresses = {84532: "0x" + "11" * 20}

        assert get_factory_address(84532, addresses) == "0x" + "11" * 20
        with pytest.raises(ChainNotSupportedError):
            get_factory_address(8453, addresses)

    def test_is_supported_chain(self) -> None:
        """Test chain support detection."""
        assert is_supported_chain(8453) is True
        assert is_supported_chain(1) is False
        assert is_supported_chain(1, {1: "0x" + "22" * 20}) is True

    def test_supported_chain_ids(self) -> None:
        """Supported chains are exactly the chains with a factory."""
        assert SUPPORTED_CHAIN_IDS == sorted(CLANKER_FACTORY_ADDRESSES)
        assert 8453 in SUPPORTED_CHAIN_IDS


class TestFactoryResolver:
    """Tests for FactoryResolver."""

    def test_defaults(self) -> None:
        resolver = FactoryResolver()
        assert resolver.resolve(8453) == CLANKER_FACTORY_ADDRESSES[8453]
        assert resolver.chain_ids == SUPPORTED_CHAIN_IDS

    def test_explicit_map(self) -> None:
        resolver = FactoryResolver({10: "0x" + "33" * 20})

        assert resolver.supports(10)
        assert not resolver.supports(8453)
        with pytest.raises(ChainNotSupportedError):
            resolver.resolve(8453)

    def test_with_chain_does_not_mutate(self) -> None:
        """Adding a chain returns a new resolver and leaves the module map alone."""
        resolver = FactoryResolver()
        extended = resolver.with_chain(84532, "0x" + "44" * 20)

        assert extended.resolve(84532) == "0x" + "44" * 20
        assert not resolver.supports(84532)
        assert 84532 not in CLANKER_FACTORY_ADDRESSES

    def test_copies_input_map(self) -> None:
        addresses = {10: "0x" + "55" * 20}
        resolver = FactoryResolver(addresses)
        addresses[11] = "0x" + "66" * 20

        assert not resolver.supports(11)
