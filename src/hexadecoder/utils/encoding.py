"""Encoding and decoding utilities."""

from typing import Union

from hexadecoder.core.decoder import decode

HEX_PREFIXES = ("0x", "0X")


def hex_to_bytes(hex_str: Union[str, bytes], *, allow_prefix: bool = True) -> bytes:
    """
    Convert hexadecimal string to bytes.

    Args:
        hex_str: Hexadecimal text (with or without '0x' prefix)
        allow_prefix: Strip a single leading '0x'/'0X' before decoding

    Returns:
        bytes: Decoded bytes

    Raises:
        OddLengthError: If the hex digits are odd in number
        InvalidCharacterError: If a non-hex character is present
    """
    hex_str = ensure_text(hex_str)
    if allow_prefix and hex_str.startswith(HEX_PREFIXES):
        hex_str = hex_str[2:]
    return decode(hex_str)


def ensure_text(data: Union[bytes, bytearray, str]) -> str:
    """
    Ensure hex input is in text format.

    Bytes map one character per byte (latin-1), so a stray non-hex byte is
    reported by the decoder as the matching character.

    Args:
        data: Bytes or string

    Returns:
        str: Data as text
    """
    if isinstance(data, str):
        return data
    elif isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("latin-1")
    else:
        raise TypeError(f"Expected bytes or str, got {type(data)}")
