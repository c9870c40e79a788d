"""Output formatters for the clanker-predict CLI."""

import json

from .types import CapturedCreationCode, Prediction, VerificationResult


def _config_fields(prediction: Prediction) -> list[tuple[str, str]]:
    config = prediction.config
    return [
        ("Token Admin", config.token_admin),
        ("Name", config.name),
        ("Symbol", config.symbol),
        ("Salt", "0x" + config.salt.hex()),
        ("Image", config.image),
        ("Metadata", config.metadata),
        ("Context", config.context),
        ("Originating Chain", str(config.originating_chain_id)),
    ]


def format_prediction_text(prediction: Prediction, chain_id: int | None = None) -> str:
    """Format a prediction with the configuration it was derived from."""
    lines = []
    divider = "─" * 70

    lines.append(divider)
    lines.append(f"PREDICTED TOKEN: {prediction.address}")
    lines.append(divider)

    lines.append("Deployment:")
    if chain_id is not None:
        lines.append(f"  Chain ID:           {chain_id}")
    lines.append(f"  Factory:            {prediction.deployer}")
    lines.append(f"  CREATE2 Salt:       0x{prediction.salt.hex()}")
    lines.append(f"  Init Code Hash:     0x{prediction.init_code_hash.hex()}")

    lines.append("")
    lines.append("Token Configuration:")
    for label, value in _config_fields(prediction):
        lines.append(f"  {label + ':':<20}{value}")

    lines.append(divider)
    return "\n".join(lines)


def prediction_to_dict(prediction: Prediction, chain_id: int | None = None) -> dict:
    config = prediction.config
    return {
        "address": prediction.address,
        "chain_id": chain_id,
        "factory": prediction.deployer,
        "create2_salt": "0x" + prediction.salt.hex(),
        "init_code_hash": "0x" + prediction.init_code_hash.hex(),
        "config": {
            "token_admin": config.token_admin,
            "name": config.name,
            "symbol": config.symbol,
            "salt": "0x" + config.salt.hex(),
            "image": config.image,
            "metadata": config.metadata,
            "context": config.context,
            "originating_chain_id": config.originating_chain_id,
        },
    }


def format_prediction_json(prediction: Prediction, chain_id: int | None = None) -> str:
    return json.dumps(prediction_to_dict(prediction, chain_id), indent=2)


def format_verification(result: VerificationResult) -> str:
    """One-line summary of a verification result."""
    if result.status == "MATCH":
        return f"MATCH: {result.predicted} is {result.name} ({result.symbol})"
    if result.status == "NOT_DEPLOYED":
        return f"NOT_DEPLOYED: no contract at {result.predicted} yet"
    return f"MISMATCH: {result.message}"


def format_capture(captured: CapturedCreationCode) -> str:
    lines = [
        f"Transaction:        {captured.tx_hash}",
        f"Factory:            {captured.deployer}",
        f"Token:              {captured.token_address}",
        f"Creation Code:      {len(captured.creation_code)} bytes",
        f"Init Code Hash:     0x{captured.init_code_hash.hex()}",
    ]
    return "\n".join(lines)
