"""Environment-based configuration for clanker-predictor."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ValidationError

from ._exceptions import ConfigurationError
from ._fields import to_address
from .constants import DEFAULT_CHAIN_ID, ZERO_SALT, get_factory_address
from .types import TokenConfig

ENV_PREFIX = "CLANKER_"


class Settings(BaseModel):
    """Where to predict: target chain, factory and (optionally) an RPC endpoint."""

    chain_id: int = DEFAULT_CHAIN_ID
    factory_address: str
    rpc_url: str | None = None

    model_config = {"frozen": True}


def _get(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return None
    return value


def _require(environ: Mapping[str, str], name: str) -> str:
    value = _get(environ, name)
    if value is None:
        raise ConfigurationError(f"{ENV_PREFIX}{name} is required")
    return value


def _get_int(environ: Mapping[str, str], name: str) -> int | None:
    value = _get(environ, name)
    if value is None:
        return None
    value = value.strip()
    base = 16 if value[:2].lower() == "0x" else 10
    try:
        return int(value, base)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from e


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Load chain settings from CLANKER_CHAIN_ID, CLANKER_FACTORY_ADDRESS and CLANKER_RPC_URL.

    The factory falls back to the known address for the chain.

    Raises:
        ConfigurationError: If a value is malformed
        ChainNotSupportedError: If no factory is configured or known for the chain
    """
    env = os.environ if environ is None else environ

    chain_id = _get_int(env, "CHAIN_ID")
    if chain_id is None:
        chain_id = DEFAULT_CHAIN_ID

    factory = _get(env, "FACTORY_ADDRESS") or get_factory_address(chain_id)
    try:
        factory = to_address(factory, "CLANKER_FACTORY_ADDRESS")
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    return Settings(chain_id=chain_id, factory_address=factory, rpc_url=_get(env, "RPC_URL"))


def load_token_config(environ: Mapping[str, str] | None = None) -> TokenConfig:
    """
    Load a TokenConfig from CLANKER_* environment variables.

    Required: CLANKER_TOKEN_ADMIN, CLANKER_TOKEN_NAME, CLANKER_TOKEN_SYMBOL.
    Optional: CLANKER_SALT (zero salt), CLANKER_TOKEN_IMAGE, CLANKER_TOKEN_METADATA,
    CLANKER_TOKEN_CONTEXT, CLANKER_ORIGINATING_CHAIN_ID (defaults to CLANKER_CHAIN_ID).

    Raises:
        ConfigurationError: If a required variable is missing or a value is malformed
    """
    env = os.environ if environ is None else environ

    originating_chain_id = _get_int(env, "ORIGINATING_CHAIN_ID")
    if originating_chain_id is None:
        originating_chain_id = _get_int(env, "CHAIN_ID")
    if originating_chain_id is None:
        originating_chain_id = DEFAULT_CHAIN_ID

    # Name and symbol must be set but may be empty.
    for name in ("TOKEN_NAME", "TOKEN_SYMBOL"):
        if ENV_PREFIX + name not in env:
            raise ConfigurationError(f"{ENV_PREFIX}{name} is required")

    try:
        return TokenConfig(
            token_admin=_require(env, "TOKEN_ADMIN"),
            name=env[ENV_PREFIX + "TOKEN_NAME"],
            symbol=env[ENV_PREFIX + "TOKEN_SYMBOL"],
            salt=_get(env, "SALT") or ZERO_SALT,
            image=env.get(ENV_PREFIX + "TOKEN_IMAGE", ""),
            metadata=env.get(ENV_PREFIX + "TOKEN_METADATA", ""),
            context=env.get(ENV_PREFIX + "TOKEN_CONTEXT", ""),
            originating_chain_id=originating_chain_id,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid token configuration: {e}") from e
