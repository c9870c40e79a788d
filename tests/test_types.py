"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from clanker_predictor import InvalidFieldError, TokenConfig, VerificationResult

ADMIN = "0x052DCF6cB9dDD12C3F1350344CF6cE64E61bCd38"


def _config(**overrides) -> TokenConfig:
    fields = {
        "token_admin": ADMIN,
        "name": "hullo",
        "symbol": "hullo",
        "salt": bytes(32),
        "originating_chain_id": 1,
    }
    fields.update(overrides)
    return TokenConfig(**fields)


class TestTokenConfig:
    """Tests for TokenConfig validation."""

    def test_defaults(self) -> None:
        """Image, metadata and context default to empty strings."""
        config = _config()
        assert config.image == ""
        assert config.metadata == ""
        assert config.context == ""

    def test_admin_is_checksummed(self) -> None:
        """Lowercase and raw-byte admins normalise to the checksum form."""
        assert _config(token_admin=ADMIN.lower()).token_admin == ADMIN
        assert _config(token_admin=bytes.fromhex(ADMIN[2:])).token_admin == ADMIN

    def test_zero_admin_allowed(self) -> None:
        config = _config(token_admin="0x" + "00" * 20)
        assert config.token_admin == "0x0000000000000000000000000000000000000000"

    def test_salt_from_hex(self) -> None:
        """Salt accepts 0x-prefixed and bare hex."""
        assert _config(salt="0x" + "ab" * 32).salt == b"\xab" * 32
        assert _config(salt="cd" * 32).salt == b"\xcd" * 32

    @pytest.mark.parametrize(
        "salt",
        [
            b"\x00" * 31,
            b"\x00" * 33,
            "0x" + "00" * 31,
            "0x" + "00" * 33,
            "0x" + "0" * 63,
            "0x" + "zz" * 32,
            "",
        ],
    )
    def test_salt_wrong_width_rejected(self, salt) -> None:
        """Salts are never padded or truncated."""
        with pytest.raises(ValidationError):
            _config(salt=salt)

    @pytest.mark.parametrize(
        "admin",
        [
            "0x1234",
            "0x" + "00" * 21,
            "0x" + "0" * 39,
            b"\x00" * 19,
            "not-an-address",
        ],
    )
    def test_admin_wrong_width_rejected(self, admin) -> None:
        with pytest.raises(ValidationError):
            _config(token_admin=admin)

    def test_invalid_field_error_is_value_error(self) -> None:
        """Field errors can be caught as ValueError."""
        assert issubclass(InvalidFieldError, ValueError)

    def test_negative_chain_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _config(originating_chain_id=-1)

    def test_chain_id_above_uint256_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _config(originating_chain_id=2**256)

    def test_max_chain_id_allowed(self) -> None:
        assert _config(originating_chain_id=2**256 - 1).originating_chain_id == 2**256 - 1

    def test_frozen(self) -> None:
        """TokenConfig is immutable."""
        config = _config()
        with pytest.raises(ValidationError):
            config.name = "other"  # type: ignore[misc]

    def test_equal_configs_compare_equal(self) -> None:
        assert _config(token_admin=ADMIN.lower()) == _config()


class TestVerificationResult:
    """Tests for VerificationResult."""

    def test_status_validation(self) -> None:
        with pytest.raises(ValidationError):
            VerificationResult(status="UNKNOWN", predicted=ADMIN)  # type: ignore[arg-type]

    def test_optional_fields(self) -> None:
        result = VerificationResult(status="NOT_DEPLOYED", predicted=ADMIN)
        assert result.name is None
        assert result.message is None
