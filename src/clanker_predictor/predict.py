"""
Off-chain prediction of Clanker token addresses.

The factory deploys each token with CREATE2, so its address is fixed by the
factory address, a salt derived from the token config, and the hash of the
token's init code (creation code followed by ABI-encoded constructor args).
"""

from collections.abc import Mapping

from eth_abi import encode
from eth_typing import ChecksumAddress
from eth_utils import keccak, to_checksum_address

from ._fields import to_address_bytes, to_bytes32
from .constants import TOKEN_CONSTRUCTOR_TYPES, TOKEN_SUPPLY, get_factory_address
from .creation_code import load_creation_code
from .types import Prediction, TokenConfig

CREATE2_PREFIX = b"\xff"


def derive_salt(token_admin: str | bytes, salt: str | bytes) -> bytes:
    """
    Derive the salt the factory actually passes to CREATE2.

    Equivalent to ``keccak256(abi.encode(tokenAdmin, salt))``.
    """
    admin = to_address_bytes(token_admin, "token_admin")
    return keccak(encode(["address", "bytes32"], [admin, to_bytes32(salt)]))


def encode_constructor_args(config: TokenConfig) -> bytes:
    """ABI-encode the token constructor arguments in the factory's order."""
    return encode(
        list(TOKEN_CONSTRUCTOR_TYPES),
        [
            config.name,
            config.symbol,
            TOKEN_SUPPLY,
            config.token_admin,
            config.image,
            config.metadata,
            config.context,
            config.originating_chain_id,
        ],
    )


def compute_init_code_hash(creation_code: bytes, constructor_args: bytes) -> bytes:
    """keccak256 of the creation code concatenated with the constructor args."""
    return keccak(creation_code + constructor_args)


def compute_create2_address(
    deployer: str | bytes,
    salt: str | bytes,
    init_code_hash: str | bytes,
) -> ChecksumAddress:
    """
    Compute an EIP-1014 CREATE2 address.

    ``keccak256(0xff ++ deployer ++ salt ++ init_code_hash)[12:]``

    Raises:
        InvalidFieldError: If deployer is not 20 bytes, or salt / hash not 32 bytes
    """
    raw = b"".join(
        [
            CREATE2_PREFIX,
            to_address_bytes(deployer, "deployer"),
            to_bytes32(salt, "salt"),
            to_bytes32(init_code_hash, "init_code_hash"),
        ]
    )
    return to_checksum_address(keccak(raw)[12:])


def predict(
    deployer: str | bytes,
    config: TokenConfig,
    creation_code: bytes | None = None,
) -> Prediction:
    """
    Predict a token address and return the intermediate values with it.

    Args:
        deployer: The factory contract address (20 bytes)
        config: Token configuration
        creation_code: Token creation code (defaults to the embedded one)

    Returns:
        Prediction with address, deployer, derived salt and init code hash
    """
    deployer_address = to_checksum_address(to_address_bytes(deployer, "deployer"))
    code = load_creation_code() if creation_code is None else creation_code

    salt = derive_salt(config.token_admin, config.salt)
    init_code_hash = compute_init_code_hash(code, encode_constructor_args(config))

    return Prediction(
        address=compute_create2_address(deployer_address, salt, init_code_hash),
        deployer=deployer_address,
        salt=salt,
        init_code_hash=init_code_hash,
        config=config,
    )


def predict_token_address(
    deployer: str | bytes,
    config: TokenConfig,
    creation_code: bytes | None = None,
) -> ChecksumAddress:
    """
    Predict the address the factory will deploy a token to.

    Example:
        >>> predict_token_address(
        ...     "0xE85A59c628F7d27878ACeB4bf3b35733630083a9",
        ...     TokenConfig(
        ...         token_admin="0x052DCF6cB9dDD12C3F1350344CF6cE64E61bCd38",
        ...         name="hullo",
        ...         symbol="hullo",
        ...         salt="0x000000000000000000000000000000005e95d213a71de2a3918637b124818091",
        ...         originating_chain_id=1,
        ...     ),
        ... )
        '0xd1A89f9B07a5170EDC02CE4019d300e095b11B07'
    """
    return ChecksumAddress(predict(deployer, config, creation_code).address)


def predict_token_address_for_chain(
    chain_id: int,
    config: TokenConfig,
    addresses: Mapping[int, str] | None = None,
    creation_code: bytes | None = None,
) -> ChecksumAddress:
    """
    Predict a token address, resolving the factory from ``chain_id``.

    Raises:
        ChainNotSupportedError: If no factory is known for the chain
    """
    deployer = get_factory_address(chain_id, addresses)
    return predict_token_address(deployer, config, creation_code)
