"""Pydantic data models for hex decoding."""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic_core import PydanticCustomError

from hexadecoder.core.decoder import decode
from hexadecoder.exceptions import DecodeError, DecodeErrorKind


def _decode_hex_field(value: Any) -> Any:
    """Decode str input strictly; let bytes through unchanged."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return decode(value)
        except DecodeError as err:
            raise PydanticCustomError(
                "hex_decode",
                "{message}",
                {"message": str(err), "kind": err.kind.value, "character": err.character},
            )
    return value


def _encode_hex_field(value: bytes) -> str:
    """Dump bytes as lowercase hex in JSON mode."""
    return value.hex()


HexBytes = Annotated[
    bytes,
    BeforeValidator(_decode_hex_field),
    PlainSerializer(_encode_hex_field, return_type=str, when_used="json"),
]


class HexPayload(BaseModel):
    """Request model carrying hex-encoded binary data."""
    data: HexBytes = Field(..., description="Binary data (hex)")


class DecodeErrorDetail(BaseModel):
    """Response model describing a rejected hex string."""
    kind: DecodeErrorKind = Field(..., description="Error kind")
    character: Optional[str] = Field(default=None, description="Offending character, if any")
    message: str = Field(..., description="Human-readable description")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_error(cls, err: DecodeError) -> "DecodeErrorDetail":
        """Build the detail model from a raised DecodeError."""
        return cls(kind=err.kind, character=err.character, message=str(err))
