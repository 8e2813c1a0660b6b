"""Custom exceptions for the hex decoder."""

from enum import Enum
from typing import Optional


class DecodeErrorKind(str, Enum):
    """Decode error kind enumeration."""
    ODD_LENGTH = "odd_length"
    INVALID_CHARACTER = "invalid_character"


class HexaDecoderException(Exception):
    """Base exception for all hex decoder errors."""
    pass


class DecodeError(HexaDecoderException, ValueError):
    """
    Base exception for malformed hex input.

    Subclasses ValueError so callers written against ``bytes.fromhex``
    keep catching it. Abstract: raise OddLengthError or InvalidCharacterError.
    """

    kind: DecodeErrorKind

    MESSAGES = {
        DecodeErrorKind.ODD_LENGTH: "Hex string contains an odd number of characters.",
        DecodeErrorKind.INVALID_CHARACTER: "Invalid hex character: {character}",
    }

    def __init__(self, character: Optional[str] = None):
        if not hasattr(type(self), "kind"):
            raise TypeError(
                f"{type(self).__name__} is abstract; raise OddLengthError or InvalidCharacterError"
            )
        self.character = character
        super().__init__(self.message_for(self.kind, character))

    @classmethod
    def message_for(cls, kind: DecodeErrorKind, character: Optional[str] = None) -> str:
        """
        Look up the fixed English message for an error kind.

        Args:
            kind: Error kind
            character: Offending character (invalid character errors only)

        Returns:
            str: Human-readable description
        """
        return cls.MESSAGES[kind].format(character=character)

    @property
    def message(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeError):
            return NotImplemented
        return self.kind == other.kind and self.character == other.character

    def __hash__(self) -> int:
        return hash((self.kind, self.character))

    def __repr__(self) -> str:
        if self.character is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.character!r})"


class OddLengthError(DecodeError):
    """Raised when the hex string has an odd number of characters."""

    kind = DecodeErrorKind.ODD_LENGTH

    def __init__(self):
        super().__init__(None)

    def __reduce__(self):
        return OddLengthError, ()


class InvalidCharacterError(DecodeError):
    """Raised when a character outside [0-9a-fA-F] appears in the input."""

    kind = DecodeErrorKind.INVALID_CHARACTER

    def __init__(self, character: str):
        super().__init__(character)

    def __reduce__(self):
        return InvalidCharacterError, (self.character,)


__all__ = [
    "DecodeErrorKind",
    "HexaDecoderException",
    "DecodeError",
    "OddLengthError",
    "InvalidCharacterError",
]
