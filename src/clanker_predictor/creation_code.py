"""
Embedded Clanker token creation code.

The factory prepends this bytecode to the ABI-encoded constructor arguments
when it deploys a token, so it is part of every init code hash. It is frozen
per factory version and lives in ``data/`` as a hex file. Re-capture it with
``clanker-predict capture`` whenever the factory is redeployed or upgraded.
"""

import logging
from functools import lru_cache
from importlib import resources

from eth_utils import keccak

from ._exceptions import CreationCodeNotCapturedError
from .constants import CREATION_CODE_RESOURCE, CREATION_CODE_VERSION

logger = logging.getLogger(__name__)


def parse_creation_code(text: str) -> bytes:
    """Decode a hex dump (optional 0x prefix, whitespace ignored) into bytes."""
    digits = "".join(text.split())
    if digits[:2] in ("0x", "0X"):
        digits = digits[2:]
    return bytes.fromhex(digits)


def format_creation_code(code: bytes, width: int = 128) -> str:
    """Render bytecode as a wrapped hex dump suitable for the data resource."""
    digits = code.hex()
    lines = [digits[i : i + width] for i in range(0, len(digits), width)]
    return "0x" + "\n".join(lines) + "\n"


def _read_resource() -> str:
    data = resources.files(__package__).joinpath("data")
    return data.joinpath(CREATION_CODE_RESOURCE).read_text(encoding="ascii")


@lru_cache(maxsize=1)
def _load() -> bytes:
    code = parse_creation_code(_read_resource())
    if code:
        logger.debug(
            "Loaded %s creation code: %d bytes, keccak %s",
            CREATION_CODE_VERSION,
            len(code),
            keccak(code).hex(),
        )
    return code


def is_creation_code_captured() -> bool:
    """Check if the embedded resource holds bytecode."""
    return bool(_load())


def load_creation_code() -> bytes:
    """
    Get the embedded token creation code.

    Raises:
        CreationCodeNotCapturedError: If the resource is empty
    """
    code = _load()
    if not code:
        raise CreationCodeNotCapturedError(
            f"{CREATION_CODE_RESOURCE} is empty; capture the {CREATION_CODE_VERSION} "
            "creation code with `clanker-predict capture` before predicting"
        )
    return code
