#!/usr/bin/env python3
"""CLI interface for clanker-predictor."""

import logging
import os
import sys
from pathlib import Path

import click
from web3 import Web3

from ._exceptions import ClankerPredictorError
from ._version import __version__
from .config import ENV_PREFIX, load_settings, load_token_config
from .creation_code import (
    format_creation_code,
    is_creation_code_captured,
    load_creation_code,
    parse_creation_code,
)
from .formatters import (
    format_capture,
    format_prediction_json,
    format_prediction_text,
    format_verification,
)
from .predict import predict
from .verify import capture_creation_code, verify_prediction

logger = logging.getLogger(__name__)

# CLI option name -> environment variable suffix
OPTION_ENV = {
    "admin": "TOKEN_ADMIN",
    "name": "TOKEN_NAME",
    "symbol": "TOKEN_SYMBOL",
    "salt": "SALT",
    "image": "TOKEN_IMAGE",
    "metadata": "TOKEN_METADATA",
    "context": "TOKEN_CONTEXT",
    "originating_chain_id": "ORIGINATING_CHAIN_ID",
    "chain_id": "CHAIN_ID",
    "factory": "FACTORY_ADDRESS",
    "rpc": "RPC_URL",
}


def token_options(func):
    """Options shared by every command that needs a token configuration."""
    options = [
        click.option("-a", "--admin", help="Token admin address (CLANKER_TOKEN_ADMIN)"),
        click.option("-n", "--name", help="Token name (CLANKER_TOKEN_NAME)"),
        click.option("-s", "--symbol", help="Token symbol (CLANKER_TOKEN_SYMBOL)"),
        click.option("--salt", help="32-byte hex salt (CLANKER_SALT)"),
        click.option("--image", help="Image URI (CLANKER_TOKEN_IMAGE)"),
        click.option("--metadata", help="Metadata string (CLANKER_TOKEN_METADATA)"),
        click.option("--context", help="Context string (CLANKER_TOKEN_CONTEXT)"),
        click.option(
            "--originating-chain-id",
            help="Chain the deployment request came from (CLANKER_ORIGINATING_CHAIN_ID)",
        ),
        click.option("-c", "--chain-id", help="Target chain ID (CLANKER_CHAIN_ID)"),
        click.option("-f", "--factory", help="Factory address override (CLANKER_FACTORY_ADDRESS)"),
        click.option(
            "--creation-code",
            "creation_code_path",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Hex file with token creation code (defaults to the embedded one)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_environ(**overrides: str | None) -> dict[str, str]:
    """Overlay CLI options on the process environment."""
    env = dict(os.environ)
    for option, value in overrides.items():
        if value is not None and option in OPTION_ENV:
            env[ENV_PREFIX + OPTION_ENV[option]] = value
    return env


def read_creation_code(path: Path | None) -> bytes | None:
    if path is None:
        return None
    try:
        return parse_creation_code(path.read_text(encoding="ascii"))
    except ValueError as e:
        raise click.BadParameter(f"{path} is not a hex file: {e}", param_hint="--creation-code") from e


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def cli(log_level: str):
    """Predict Clanker token addresses before deployment."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("predict")
@token_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "address"]),
    default="text",
    show_default=True,
)
def predict_command(creation_code_path, output_format, **options):
    """Predict the address of a token before it is deployed."""
    try:
        env = build_environ(**options)
        settings = load_settings(env)
        config = load_token_config(env)
        creation_code = read_creation_code(creation_code_path)
        prediction = predict(settings.factory_address, config, creation_code)
    except ClankerPredictorError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(format_prediction_json(prediction, settings.chain_id))
    elif output_format == "address":
        click.echo(prediction.address)
    else:
        click.echo(format_prediction_text(prediction, settings.chain_id))


@cli.command("verify")
@token_options
@click.option("-r", "--rpc", help="RPC endpoint URL (CLANKER_RPC_URL)")
def verify_command(creation_code_path, **options):
    """Check a prediction against a live chain."""
    try:
        env = build_environ(**options)
        settings = load_settings(env)
        config = load_token_config(env)
        if not settings.rpc_url:
            raise click.UsageError("--rpc or CLANKER_RPC_URL is required")

        w3 = Web3(Web3.HTTPProvider(settings.rpc_url))
        result = verify_prediction(
            w3, settings.factory_address, config, read_creation_code(creation_code_path)
        )
    except ClankerPredictorError as e:
        raise click.ClickException(str(e)) from e

    click.echo(format_verification(result))
    if result.status == "MISMATCH":
        sys.exit(1)


@cli.command("capture")
@click.argument("tx_hash")
@token_options
@click.option("-r", "--rpc", help="RPC endpoint URL (CLANKER_RPC_URL)")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=True,
    help="Where to write the captured creation code (hex)",
)
def capture_command(tx_hash, creation_code_path, output, **options):
    """Capture token creation code from a deployment transaction."""
    try:
        env = build_environ(**options)
        settings = load_settings(env)
        config = load_token_config(env)
        if not settings.rpc_url:
            raise click.UsageError("--rpc or CLANKER_RPC_URL is required")

        w3 = Web3(Web3.HTTPProvider(settings.rpc_url))
        captured = capture_creation_code(w3, tx_hash, config)
        if captured.deployer != settings.factory_address:
            logger.warning(
                "Token was deployed by %s, not the configured factory %s",
                captured.deployer,
                settings.factory_address,
            )
    except ClankerPredictorError as e:
        raise click.ClickException(str(e)) from e

    output.write_text(format_creation_code(captured.creation_code), encoding="ascii")
    logger.info("Wrote %s", output)
    click.echo(format_capture(captured))

    current = read_creation_code(creation_code_path)
    if current is None and is_creation_code_captured():
        current = load_creation_code()
    if current is not None:
        same = current == captured.creation_code
        click.echo(f"Matches current creation code: {'yes' if same else 'NO'}")
    click.echo(f"Written to {output}")


def main():
    cli()


if __name__ == "__main__":
    main()
