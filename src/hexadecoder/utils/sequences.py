"""Sequence chunking and character class helpers."""

from typing import Iterator, Sequence, TypeVar

S = TypeVar("S", bound=Sequence)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_hex_digit(ch: str) -> bool:
    """
    Check whether a single character is an ASCII hex digit.

    Args:
        ch: Character to check

    Returns:
        bool: True for one of 0-9, a-f, A-F
    """
    return ch in HEX_DIGITS


def unfold_subsequences(seq: S, max_length: int) -> Iterator[S]:
    """
    Lazily split a sequence into consecutive slices.

    Every slice holds ``max_length`` items except possibly the last one,
    which holds whatever remains.

    Args:
        seq: Any sliceable sequence (str, bytes, list, ...)
        max_length: Maximum slice length (>= 1)

    Yields:
        Consecutive, non-overlapping slices of ``seq`` in order

    Raises:
        ValueError: If max_length is less than 1
    """
    if max_length < 1:
        raise ValueError("max_length must be at least 1")

    lower = 0
    end = len(seq)
    while lower < end:
        upper = min(lower + max_length, end)
        yield seq[lower:upper]
        lower = upper
