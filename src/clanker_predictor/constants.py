"""Factory addresses and token constants for clanker-predictor."""

from collections.abc import Mapping

from ._exceptions import ChainNotSupportedError

# Deployed Clanker v4 factory addresses per chain.
# The factory is the CREATE2 deployer of every token it launches.
CLANKER_FACTORY_ADDRESSES: dict[int, str] = {
    8453: "0xE85A59c628F7d27878ACeB4bf3b35733630083a9",  # Base mainnet
}

# Supported chain IDs
SUPPORTED_CHAIN_IDS: list[int] = sorted(CLANKER_FACTORY_ADDRESSES)

DEFAULT_CHAIN_ID = 8453

# Fixed total supply minted by every token (100 billion, 18 decimals).
# Part of the hashed init code, must match the factory exactly.
TOKEN_SUPPLY = 100_000_000_000 * 10**18

# Token constructor signature, in argument order.
TOKEN_CONSTRUCTOR_TYPES: tuple[str, ...] = (
    "string",  # name
    "string",  # symbol
    "uint256",  # maxSupply
    "address",  # tokenAdmin
    "string",  # image
    "string",  # metadata
    "string",  # context
    "uint256",  # originatingChainId
)

# Embedded creation code, captured from the factory listed above.
CREATION_CODE_VERSION = "clanker-token-v4.0.0"
CREATION_CODE_RESOURCE = "clanker_token_v4.hex"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
ZERO_SALT = bytes(32)


def get_factory_address(chain_id: int, addresses: Mapping[int, str] | None = None) -> str:
    """Get the Clanker factory address for a given chain ID."""
    table = CLANKER_FACTORY_ADDRESSES if addresses is None else addresses
    address = table.get(chain_id)
    if not address:
        raise ChainNotSupportedError(chain_id)
    return address


def is_supported_chain(chain_id: int, addresses: Mapping[int, str] | None = None) -> bool:
    """Check if a chain has a known factory."""
    table = CLANKER_FACTORY_ADDRESSES if addresses is None else addresses
    return chain_id in table


class FactoryResolver:
    """
    Resolve the deployer address for a chain from an explicit address map.

    Example:
        >>> resolver = FactoryResolver({8453: "0xE85A...", 84532: "0x..."})
        >>> resolver.resolve(84532)
        '0x...'
    """

    def __init__(self, addresses: Mapping[int, str] | None = None) -> None:
        self.addresses: dict[int, str] = dict(
            CLANKER_FACTORY_ADDRESSES if addresses is None else addresses
        )

    def resolve(self, chain_id: int) -> str:
        """Get the factory address for ``chain_id``. Raises ChainNotSupportedError."""
        return get_factory_address(chain_id, self.addresses)

    def supports(self, chain_id: int) -> bool:
        return is_supported_chain(chain_id, self.addresses)

    def with_chain(self, chain_id: int, address: str) -> "FactoryResolver":
        """Return a new resolver with ``chain_id`` added or replaced."""
        return FactoryResolver({**self.addresses, chain_id: address})

    @property
    def chain_ids(self) -> list[int]:
        return sorted(self.addresses)
