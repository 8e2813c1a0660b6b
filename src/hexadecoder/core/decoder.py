"""Strict hexadecimal string decoding."""

import logging
from typing import Callable, Optional, TypeVar

from hexadecoder.config import get_container_settings
from hexadecoder.exceptions import InvalidCharacterError, OddLengthError
from hexadecoder.utils.sequences import HEX_DIGITS, is_hex_digit, unfold_subsequences

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTAINERS = {
    "bytes": bytes,
    "bytearray": bytearray,
}


class HexDecoder:
    """
    Decode hex text into raw bytes.

    Every two hex digits form one byte (most significant digit first), the
    input must hold an even number of characters and every character must
    be one of 0-9, a-f, A-F. Decoding is all-or-nothing: the first problem
    found is raised and no partial output is returned.
    """

    PAIR_SIZE = 2

    NIBBLES = {ch: int(ch, 16) for ch in HEX_DIGITS}

    @staticmethod
    def decode(hex_string: str) -> bytes:
        """
        Decode a hex string.

        Args:
            hex_string: Hex text, case-insensitive, no prefix or separators

        Returns:
            bytes: Decoded bytes, half as many as input characters

        Raises:
            OddLengthError: If the input has an odd number of characters
            InvalidCharacterError: If a character is not a hex digit
            TypeError: If hex_string is not a str
        """
        if not isinstance(hex_string, str):
            raise TypeError(f"Expected str, got {type(hex_string)}")

        if len(hex_string) % HexDecoder.PAIR_SIZE != 0:
            logger.debug("Rejected hex input: odd length %d", len(hex_string))
            raise OddLengthError()

        output = bytearray(len(hex_string) // HexDecoder.PAIR_SIZE)
        for index, pair in enumerate(unfold_subsequences(hex_string, HexDecoder.PAIR_SIZE)):
            byte = HexDecoder.parse_pair(pair)
            if byte is None:
                raise HexDecoder._invalid_pair(pair, index * HexDecoder.PAIR_SIZE)
            output[index] = byte

        return bytes(output)

    @staticmethod
    def parse_pair(pair: str) -> Optional[int]:
        """
        Parse one byte pair as a base-16 value in [0, 255].

        Returns:
            Optional[int]: The byte value, or None if the pair is not two hex digits
        """
        if len(pair) != HexDecoder.PAIR_SIZE:
            return None
        high = HexDecoder.NIBBLES.get(pair[0])
        low = HexDecoder.NIBBLES.get(pair[1])
        if high is None or low is None:
            return None
        return (high << 4) | low

    @staticmethod
    def _invalid_pair(pair: str, offset: int) -> InvalidCharacterError:
        # A pair only fails to parse when one of its characters is not a hex digit.
        for position, ch in enumerate(pair):
            if not is_hex_digit(ch):
                logger.debug("Rejected hex input: invalid character %r at offset %d", ch, offset + position)
                return InvalidCharacterError(ch)
        raise RuntimeError(f"Pair {pair!r} failed to parse but holds only hex digits")

    @staticmethod
    def decode_into(hex_string: str, container: Callable[[bytes], T] = bytes) -> T:
        """
        Decode a hex string and convert the result into another container.

        Args:
            hex_string: Hex text
            container: Callable building the target from bytes
                       (bytes, bytearray, list, memoryview, ...)

        Returns:
            The decoded value in the requested container
        """
        decoded = HexDecoder.decode(hex_string)
        if container is bytes:
            return decoded
        return container(decoded)


def decode(hex_string: str) -> bytes:
    """Decode a hex string into bytes. See HexDecoder.decode."""
    return HexDecoder.decode(hex_string)


def decode_into(hex_string: str, container: Callable[[bytes], T] = bytes) -> T:
    """Decode a hex string into the given container type."""
    return HexDecoder.decode_into(hex_string, container)


def hexa(hex_string: str, container: Optional[Callable[[bytes], T]] = None):
    """
    Decode a hex string into the configured default container.

    Without an explicit container the first call reads
    HEXADECODER_DEFAULT_CONTAINER from the environment or a .env file in the
    working directory. An invalid value there raises pydantic.ValidationError;
    the logging settings are not consulted.

    Args:
        hex_string: Hex text
        container: Explicit container; falls back to settings.default_container

    Returns:
        Decoded bytes in the chosen container
    """
    if container is None:
        container = CONTAINERS[get_container_settings().default_container]
    return HexDecoder.decode_into(hex_string, container)
