"""Data models."""

from hexadecoder.models.schemas import DecodeErrorDetail, HexBytes, HexPayload

__all__ = [
    "DecodeErrorDetail",
    "HexBytes",
    "HexPayload",
]
