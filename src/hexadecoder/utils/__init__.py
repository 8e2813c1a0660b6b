"""Utility helpers."""

from hexadecoder.utils.sequences import HEX_DIGITS, is_hex_digit, unfold_subsequences

__all__ = [
    "HEX_DIGITS",
    "is_hex_digit",
    "unfold_subsequences",
]
