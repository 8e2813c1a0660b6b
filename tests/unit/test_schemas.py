"""Tests for pydantic models."""

import pytest
from pydantic import ValidationError

from hexadecoder import decode
from hexadecoder.exceptions import DecodeError, DecodeErrorKind, InvalidCharacterError, OddLengthError
from hexadecoder.models.schemas import DecodeErrorDetail, HexPayload


class TestHexBytesField:
    """Tests for the HexBytes field type."""

    def test_decodes_hex_string(self):
        """Test str input is decoded."""
        payload = HexPayload(data="48656c6c6f")
        assert payload.data == b"Hello"

    def test_accepts_raw_bytes(self):
        """Test bytes input passes through unchanged."""
        payload = HexPayload(data=b"\x00\xff")
        assert payload.data == b"\x00\xff"

    def test_accepts_bytearray(self):
        """Test bytearray input becomes bytes."""
        payload = HexPayload(data=bytearray(b"ab"))
        assert payload.data == b"ab"

    def test_empty_string(self):
        """Test empty hex string."""
        assert HexPayload(data="").data == b""

    def test_odd_length_rejected(self):
        """Test odd length becomes a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            HexPayload(data="abc")
        error = exc_info.value.errors()[0]
        assert error["type"] == "hex_decode"
        assert error["msg"] == "Hex string contains an odd number of characters."
        assert error["ctx"]["kind"] == "odd_length"

    def test_invalid_character_rejected(self):
        """Test invalid character becomes a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            HexPayload(data="4g")
        error = exc_info.value.errors()[0]
        assert error["type"] == "hex_decode"
        assert error["msg"] == "Invalid hex character: g"
        assert error["ctx"]["character"] == "g"

    def test_wrong_type_rejected(self):
        """Test non-text, non-bytes input is rejected."""
        with pytest.raises(ValidationError):
            HexPayload(data=123)

    def test_from_json(self):
        """Test decoding from JSON."""
        payload = HexPayload.model_validate_json('{"data": "deadbeef"}')
        assert payload.data == b"\xde\xad\xbe\xef"

    def test_dump_json_as_hex(self):
        """Test JSON dumps encode the bytes as lowercase hex."""
        assert HexPayload(data="4142").model_dump_json() == '{"data":"4142"}'
        assert HexPayload(data="DEADbeef").model_dump(mode="json") == {"data": "deadbeef"}

    def test_dump_python_keeps_bytes(self):
        """Test Python-mode dumps keep raw bytes."""
        assert HexPayload(data="4142").model_dump() == {"data": b"AB"}

    @pytest.mark.parametrize("data", [b"", b"AB", b"\xff", b"\x00\x80\xfe", bytes(range(256))])
    def test_json_round_trip(self, data):
        """Test dumped JSON validates back to the same payload, including non-UTF-8 bytes."""
        payload = HexPayload(data=data)
        restored = HexPayload.model_validate_json(payload.model_dump_json())
        assert restored == payload
        assert restored.data == data


class TestDecodeErrorDetail:
    """Tests for DecodeErrorDetail."""

    def test_from_odd_length(self):
        """Test detail for OddLengthError."""
        detail = DecodeErrorDetail.from_error(OddLengthError())
        assert detail.kind is DecodeErrorKind.ODD_LENGTH
        assert detail.character is None
        assert detail.message == "Hex string contains an odd number of characters."

    def test_from_invalid_character(self):
        """Test detail for InvalidCharacterError."""
        detail = DecodeErrorDetail.from_error(InvalidCharacterError("z"))
        assert detail.kind is DecodeErrorKind.INVALID_CHARACTER
        assert detail.character == "z"
        assert detail.message == "Invalid hex character: z"

    def test_from_raised_error(self):
        """Test detail built from an error raised by decode."""
        with pytest.raises(DecodeError) as exc_info:
            decode("zz")
        detail = DecodeErrorDetail.from_error(exc_info.value)
        assert detail.model_dump(mode="json") == {
            "kind": "invalid_character",
            "character": "z",
            "message": "Invalid hex character: z",
        }

    def test_frozen(self):
        """Test detail is immutable."""
        detail = DecodeErrorDetail.from_error(OddLengthError())
        with pytest.raises(ValidationError):
            detail.message = "changed"
