"""Live-chain checks for predicted token addresses (AsyncWeb3)."""

import logging

from web3 import AsyncWeb3

from .abi import CLANKER_TOKEN_ABI
from .predict import predict_token_address
from .types import CapturedCreationCode, TokenConfig, VerificationResult
from .verify import (
    TRACE_METHOD,
    TRACE_OPTIONS,
    compare_metadata,
    extract_creation_code,
    unwrap_trace_response,
)

logger = logging.getLogger(__name__)


async def is_token_deployed(w3: AsyncWeb3, address: str) -> bool:
    """Check if there is contract code at ``address``."""
    code = await w3.eth.get_code(AsyncWeb3.to_checksum_address(address))
    return bool(code and len(code) > 0)


async def verify_prediction(
    w3: AsyncWeb3,
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

    if not await is_token_deployed(w3, predicted):
        return VerificationResult(status="NOT_DEPLOYED", predicted=predicted)

    token = w3.eth.contract(address=predicted, abi=CLANKER_TOKEN_ABI)
    name = await token.functions.name().call()
    symbol = await token.functions.symbol().call()

    return compare_metadata(predicted, config, name, symbol)


async def capture_creation_code(
    w3: AsyncWeb3,
    tx_hash: str,
    config: TokenConfig,
) -> CapturedCreationCode:
    """Async version of verify.capture_creation_code."""
    logger.info("Tracing deployment %s", tx_hash)
    response = await w3.provider.make_request(TRACE_METHOD, [tx_hash, TRACE_OPTIONS])
    return extract_creation_code(unwrap_trace_response(response, tx_hash), config, tx_hash)
