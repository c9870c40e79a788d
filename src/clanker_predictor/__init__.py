# Suppress websockets deprecation warning from web3.py (ethereum/web3.py#3530)
# web3.py unconditionally imports LegacyWebSocketProvider even for HTTP-only usage.
# This will be fixed in web3.py v8. Remove this filter after upgrading.
import warnings

warnings.filterwarnings(
    "ignore",
    message="websockets.legacy is deprecated",
    category=DeprecationWarning,
    module=r"websockets\.legacy",
)

"""
Clanker Token Address Predictor

Predict the address a Clanker v4 factory will deploy a token to, off-chain
and before the deployment transaction is sent.

Usage:
    from clanker_predictor import TokenConfig, get_factory_address, predict_token_address

    config = TokenConfig(
        token_admin="0x052DCF6cB9dDD12C3F1350344CF6cE64E61bCd38",
        name="hullo",
        symbol="hullo",
        salt="0x" + "00" * 32,
        originating_chain_id=1,
    )
    address = predict_token_address(get_factory_address(8453), config)

Checking a prediction on-chain:
    from web3 import Web3
    from clanker_predictor import verify_prediction

    w3 = Web3(Web3.HTTPProvider("https://mainnet.base.org"))
    result = verify_prediction(w3, get_factory_address(8453), config)
"""

# Async verifier (for use with AsyncWeb3)
from . import async_verify
from ._exceptions import (
    CaptureError,
    ChainNotSupportedError,
    ClankerPredictorError,
    ConfigurationError,
    CreationCodeNotCapturedError,
    InvalidFieldError,
)
from ._version import __version__

# ABIs (for advanced usage)
from .abi import CLANKER_TOKEN_ABI

# Configuration
from .config import Settings, load_settings, load_token_config

# Constants
from .constants import (
    CLANKER_FACTORY_ADDRESSES,
    CREATION_CODE_VERSION,
    SUPPORTED_CHAIN_IDS,
    TOKEN_SUPPLY,
    FactoryResolver,
    get_factory_address,
    is_supported_chain,
)

# Embedded creation code
from .creation_code import is_creation_code_captured, load_creation_code

# Core prediction
from .predict import (
    compute_create2_address,
    compute_init_code_hash,
    derive_salt,
    encode_constructor_args,
    predict,
    predict_token_address,
    predict_token_address_for_chain,
)

# Types
from .types import (
    CapturedCreationCode,
    Prediction,
    TokenConfig,
    VerificationResult,
    VerificationStatus,
)

# Sync verifier (for use with sync Web3)
from .verify import capture_creation_code, is_token_deployed, verify_prediction

__all__ = [
    # Version
    "__version__",
    # Core prediction
    "predict_token_address",
    "predict_token_address_for_chain",
    "predict",
    "derive_salt",
    "encode_constructor_args",
    "compute_init_code_hash",
    "compute_create2_address",
    # Types
    "TokenConfig",
    "Prediction",
    "VerificationResult",
    "VerificationStatus",
    "CapturedCreationCode",
    # Constants
    "CLANKER_FACTORY_ADDRESSES",
    "SUPPORTED_CHAIN_IDS",
    "TOKEN_SUPPLY",
    "CREATION_CODE_VERSION",
    "FactoryResolver",
    "get_factory_address",
    "is_supported_chain",
    # Creation code
    "load_creation_code",
    "is_creation_code_captured",
    # Configuration
    "Settings",
    "load_settings",
    "load_token_config",
    # Verifier
    "is_token_deployed",
    "verify_prediction",
    "capture_creation_code",
    "async_verify",
    # ABIs
    "CLANKER_TOKEN_ABI",
    # Exceptions
    "ClankerPredictorError",
    "InvalidFieldError",
    "CreationCodeNotCapturedError",
    "ConfigurationError",
    "ChainNotSupportedError",
    "CaptureError",
]
