"""Custom exceptions for clanker-predictor."""


class ClankerPredictorError(Exception):
    """Base exception for clanker-predictor."""


class InvalidFieldError(ClankerPredictorError, ValueError):
    """A fixed-width field (address, salt) has the wrong byte length or is not hex."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class CreationCodeNotCapturedError(ClankerPredictorError):
    """The embedded token creation code has not been captured yet."""


class ConfigurationError(ClankerPredictorError):
    """Invalid configuration (missing token admin, malformed salt, etc.)."""


class ChainNotSupportedError(ClankerPredictorError):
    """No factory address is known for the chain ID."""

    def __init__(self, chain_id: int) -> None:
        super().__init__(f"Chain {chain_id} is not supported")
        self.chain_id = chain_id


class CaptureError(ClankerPredictorError):
    """Creation code could not be extracted from a deployment trace."""
