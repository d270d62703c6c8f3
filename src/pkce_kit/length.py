"""Validated verifier lengths and random byte counts."""

from dataclasses import dataclass
from typing import ClassVar

from pkce_kit.encoding import encoded_length
from pkce_kit.exceptions import InvalidLengthError

# RFC 7636 §4.1 mandates 43-128 characters.
MIN_LENGTH = 43
MAX_LENGTH = 128

# Raw byte counts whose base64url encodings span exactly that range.
MIN_BYTES = 32
DEFAULT_BYTES = 64
MAX_BYTES = 96

DEFAULT_LENGTH = encoded_length(DEFAULT_BYTES)


def _parse_int(string: str, minimum: int, maximum: int, unit: str) -> int:
    # ASCII digits only: no sign, whitespace or underscores
    if not isinstance(string, str) or not (string.isascii() and string.isdecimal()):
        raise InvalidLengthError(string, minimum, maximum, unit)
    return int(string)


@dataclass(frozen=True, slots=True, order=True)
class Length:
    """Verifier length in characters, always within [43, 128]."""

    value: int

    MIN: ClassVar["Length"]
    DEFAULT: ClassVar["Length"]
    MAX: ClassVar["Length"]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidLengthError(self.value, MIN_LENGTH, MAX_LENGTH)
        if not MIN_LENGTH <= self.value <= MAX_LENGTH:
            raise InvalidLengthError(self.value, MIN_LENGTH, MAX_LENGTH)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, string: str) -> "Length":
        """Parse a decimal string into a Length."""
        return cls(_parse_int(string, MIN_LENGTH, MAX_LENGTH, "characters"))

    @classmethod
    def of(cls, value: "Length | int") -> "Length":
        """Coerce an int (validating it) or pass a Length through."""
        return value if isinstance(value, Length) else cls(value)


@dataclass(frozen=True, slots=True, order=True)
class Bytes:
    """Count of random bytes to encode into a verifier, within [32, 96]."""

    value: int

    MIN: ClassVar["Bytes"]
    DEFAULT: ClassVar["Bytes"]
    MAX: ClassVar["Bytes"]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidLengthError(self.value, MIN_BYTES, MAX_BYTES, "bytes")
        if not MIN_BYTES <= self.value <= MAX_BYTES:
            raise InvalidLengthError(self.value, MIN_BYTES, MAX_BYTES, "bytes")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def encoded(self) -> int:
        """Length of the base64url encoding of this many bytes."""
        return encoded_length(self.value)

    def to_length(self) -> Length:
        return Length(self.encoded())

    @classmethod
    def parse(cls, string: str) -> "Bytes":
        """Parse a decimal string into a Bytes count."""
        return cls(_parse_int(string, MIN_BYTES, MAX_BYTES, "bytes"))

    @classmethod
    def of(cls, value: "Bytes | int") -> "Bytes":
        """Coerce an int (validating it) or pass a Bytes through."""
        return value if isinstance(value, Bytes) else cls(value)


Length.MIN = Length(MIN_LENGTH)
Length.DEFAULT = Length(DEFAULT_LENGTH)
Length.MAX = Length(MAX_LENGTH)

Bytes.MIN = Bytes(MIN_BYTES)
Bytes.DEFAULT = Bytes(DEFAULT_BYTES)
Bytes.MAX = Bytes(MAX_BYTES)
