"""Strict fixed-width field coercion shared by the models and the core."""

from eth_typing import ChecksumAddress
from eth_utils import is_0x_prefixed, remove_0x_prefix, to_checksum_address

from ._exceptions import InvalidFieldError

ADDRESS_SIZE = 20
BYTES32_SIZE = 32


def to_fixed_bytes(value: str | bytes, size: int, field: str) -> bytes:
    """
    Convert a hex string or raw bytes to exactly ``size`` bytes.

    Never pads or truncates: a value of any other width is rejected.

    Raises:
        InvalidFieldError: If the value is not hex or has the wrong width
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        digits = remove_0x_prefix(value) if is_0x_prefixed(value) else value
        if len(digits) != size * 2:
            raise InvalidFieldError(
                field, f"expected {size} bytes ({size * 2} hex digits), got {len(digits)} hex digits"
            )
        try:
            raw = bytes.fromhex(digits)
        except ValueError as e:
            raise InvalidFieldError(field, f"not a hex string: {value!r}") from e
    else:
        raise InvalidFieldError(field, f"expected hex string or bytes, got {type(value).__name__}")

    if len(raw) != size:
        raise InvalidFieldError(field, f"expected {size} bytes, got {len(raw)}")
    return raw


def to_address_bytes(value: str | bytes, field: str = "address") -> bytes:
    return to_fixed_bytes(value, ADDRESS_SIZE, field)


def to_address(value: str | bytes, field: str = "address") -> ChecksumAddress:
    """Validate a 20-byte address and return it checksummed."""
    return to_checksum_address(to_address_bytes(value, field))


def to_bytes32(value: str | bytes, field: str = "salt") -> bytes:
    return to_fixed_bytes(value, BYTES32_SIZE, field)
