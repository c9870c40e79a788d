"""Live-chain checks for predicted token addresses (sync Web3)."""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from eth_utils import to_bytes
from web3 import Web3

from ._exceptions import CaptureError
from .abi import CLANKER_TOKEN_ABI
from .predict import encode_constructor_args, predict, predict_token_address
from .types import CapturedCreationCode, TokenConfig, VerificationResult

logger = logging.getLogger(__name__)

TRACE_METHOD = "debug_traceTransaction"
TRACE_OPTIONS = {"tracer": "callTracer"}


def is_token_deployed(w3: Web3, address: str) -> bool:
    """Check if there is contract code at ``address``."""
    code = w3.eth.get_code(Web3.to_checksum_address(address))
    return bool(code and len(code) > 0)


def compare_metadata(
    predicted: str,
    config: TokenConfig,
    name: str,
    symbol: str,
) -> VerificationResult:
    """Build a VerificationResult from the name/symbol read at ``predicted``."""
    if name != config.name or symbol != config.symbol:
        return VerificationResult(
            status="MISMATCH",
            predicted=predicted,
            name=name,
            symbol=symbol,
            message=(
                f"Contract at {predicted} is {name!r}/{symbol!r}, "
                f"expected {config.name!r}/{config.symbol!r}"
            ),
        )
    return VerificationResult(status="MATCH", predicted=predicted, name=name, symbol=symbol)


def verify_prediction(
    w3: Web3,
    deployer: str,
    config: TokenConfig,
    creation_code: bytes | None = None,
) -> VerificationResult:
    """
    Check a prediction against the chain ``w3`` is connected to.

    Returns:
        VerificationResult with status MATCH, NOT_DEPLOYED, or MISMATCH
    """
    predicted = predict_token_address(deployer, config, creation_code)
    logger.info("Checking predicted address %s", predicted)

    if not is_token_deployed(w3, predicted):
        return VerificationResult(status="NOT_DEPLOYED", predicted=predicted)

    token = w3.eth.contract(address=predicted, abi=CLANKER_TOKEN_ABI)
    name = token.functions.name().call()
    symbol = token.functions.symbol().call()

    return compare_metadata(predicted, config, name, symbol)


def iter_frames(frame: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    """Walk a callTracer frame tree depth-first."""
    yield frame
    for child in frame.get("calls") or []:
        yield from iter_frames(child)


def extract_creation_code(
    trace: Mapping[str, Any],
    config: TokenConfig,
    tx_hash: str,
) -> CapturedCreationCode:
    """
    Pull the token creation code out of a callTracer result.

    Looks for the CREATE2 frame whose init code ends with the encoded
    constructor args of ``config``, strips the args, and checks that predicting
    with the stripped bytes lands on the frame's created address.

    Raises:
        CaptureError: If no frame matches or the re-prediction disagrees
    """
    args = encode_constructor_args(config)

    for frame in iter_frames(trace):
        if frame.get("type") != "CREATE2":
            continue

        init_code = to_bytes(hexstr=frame["input"])
        if len(init_code) <= len(args) or not init_code.endswith(args):
            logger.debug("Skipping CREATE2 frame to %s: constructor args differ", frame.get("to"))
            continue

        creation_code = init_code[: -len(args)]
        prediction = predict(frame["from"], config, creation_code)
        created = frame.get("to")

        if not created or Web3.to_checksum_address(created) != prediction.address:
            raise CaptureError(
                f"CREATE2 frame in {tx_hash} created {created}, "
                f"but the stripped creation code predicts {prediction.address}"
            )

        logger.info(
            "Captured %d bytes of creation code from %s (deployer %s)",
            len(creation_code),
            tx_hash,
            prediction.deployer,
        )
        return CapturedCreationCode(
            creation_code=creation_code,
            deployer=prediction.deployer,
            token_address=prediction.address,
            init_code_hash=prediction.init_code_hash,
            tx_hash=tx_hash,
        )

    raise CaptureError(f"No CREATE2 frame in {tx_hash} matches the token configuration")


def unwrap_trace_response(response: Mapping[str, Any], tx_hash: str) -> Mapping[str, Any]:
    if response.get("error"):
        raise CaptureError(f"{TRACE_METHOD} failed for {tx_hash}: {response['error']}")
    result = response.get("result")
    if not result:
        raise CaptureError(f"{TRACE_METHOD} returned no trace for {tx_hash}")
    return result


def capture_creation_code(w3: Web3, tx_hash: str, config: TokenConfig) -> CapturedCreationCode:
    """
    Re-capture the token creation code from a real deployment transaction.

    Requires an RPC endpoint that serves ``debug_traceTransaction`` with the
    ``callTracer`` (an Anvil fork works).

    Args:
        w3: Web3 instance
        tx_hash: Hash of a transaction in which the factory deployed a token
        config: The configuration that token was deployed with

    Returns:
        CapturedCreationCode, verified to reproduce the deployed address
    """
    logger.info("Tracing deployment %s", tx_hash)
    response = w3.provider.make_request(TRACE_METHOD, [tx_hash, TRACE_OPTIONS])
    return extract_creation_code(unwrap_trace_response(response, tx_hash), config, tx_hash)
