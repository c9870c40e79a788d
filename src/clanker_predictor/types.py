"""Type definitions for clanker-predictor."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ._fields import to_address, to_bytes32

UINT256_MAX = 2**256 - 1


class TokenConfig(BaseModel):
    """
    Description of a token to be deployed by the Clanker factory.

    ``token_admin`` and ``salt`` accept hex strings or raw bytes and must be
    exactly 20 and 32 bytes wide. The string fields are encoded as-is, with no
    length limits; the factory may still reject them at deployment time.

    Example:
        TokenConfig(
            token_admin="0x052DCF6cB9dDD12C3F1350344CF6cE64E61bCd38",
            name="hullo",
            symbol="hullo",
            salt="0x" + "00" * 32,
            originating_chain_id=1,
        )
    """

    token_admin: str
    name: str
    symbol: str
    salt: bytes
    image: str = ""
    metadata: str = ""
    context: str = ""
    originating_chain_id: int = Field(ge=0, le=UINT256_MAX)

    model_config = {"frozen": True}

    @field_validator("token_admin", mode="before")
    @classmethod
    def _check_token_admin(cls, value: str | bytes) -> str:
        return to_address(value, "token_admin")

    @field_validator("salt", mode="before")
    @classmethod
    def _check_salt(cls, value: str | bytes) -> bytes:
        return to_bytes32(value, "salt")


class Prediction(BaseModel):
    """A predicted token address together with the values it was derived from."""

    address: str
    deployer: str
    salt: bytes
    init_code_hash: bytes
    config: TokenConfig

    model_config = {"frozen": True}


VerificationStatus = Literal["MATCH", "NOT_DEPLOYED", "MISMATCH"]


class VerificationResult(BaseModel):
    """
    Result of checking a prediction against a live chain.

    status: MATCH | NOT_DEPLOYED | MISMATCH
    """

    status: VerificationStatus
    predicted: str
    name: str | None = None
    symbol: str | None = None
    message: str | None = None

    model_config = {"frozen": True}


class CapturedCreationCode(BaseModel):
    """Token creation code extracted from a real deployment trace."""

    creation_code: bytes
    deployer: str
    token_address: str
    init_code_hash: bytes
    tx_hash: str

    model_config = {"frozen": True}
