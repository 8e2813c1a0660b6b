"""Core decoding logic."""

from hexadecoder.core.decoder import HexDecoder, decode, decode_into, hexa

__all__ = [
    "HexDecoder",
    "decode",
    "decode_into",
    "hexa",
]
