"""Main package initialization."""

import logging

__version__ = "0.1.0"
__author__ = "HexaDecoder Team"
__description__ = "Strict hexadecimal string to bytes decoding"

from .core.decoder import HexDecoder, decode, decode_into, hexa
from .exceptions import (
    DecodeError,
    DecodeErrorKind,
    HexaDecoderException,
    InvalidCharacterError,
    OddLengthError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HexDecoder",
    "decode",
    "decode_into",
    "hexa",
    "DecodeError",
    "DecodeErrorKind",
    "HexaDecoderException",
    "InvalidCharacterError",
    "OddLengthError",
]
