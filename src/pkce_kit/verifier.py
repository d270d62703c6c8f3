"""PKCE code verifiers."""

import hmac
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pkce_kit import chars, encoding, generate
from pkce_kit.exceptions import InvalidLengthError
from pkce_kit.length import DEFAULT_BYTES, DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH, Bytes, Length
from pkce_kit.method import Method

if TYPE_CHECKING:
    from pkce_kit.challenge import Challenge

logger = logging.getLogger(__name__)


def check(value: str) -> None:
    """Validate a verifier string.

    Length is checked before the alphabet, so a string that is both too short
    and contains bad characters reports the length problem.

    Raises:
        TypeError: If `value` is not a string.
        InvalidLengthError: If the length is outside [43, 128].
        InvalidCharacterError: On the first character outside the unreserved alphabet.
    """
    if not isinstance(value, str):
        raise TypeError(f"verifier must be a string, not {type(value).__name__}")
    if not MIN_LENGTH <= len(value) <= MAX_LENGTH:
        raise InvalidLengthError(len(value), MIN_LENGTH, MAX_LENGTH)
    chars.check(value)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Verifier:
    """A high-entropy secret held by the client.

    Every instance is valid: the initializer validates, and generation goes
    through it as well. Equality is constant-time and the repr never
    includes the secret.
    """

    value: str

    def __post_init__(self) -> None:
        check(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Verifier(<{len(self.value)} characters>)"

    def __len__(self) -> int:
        return len(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Verifier):
            return NotImplemented
        return hmac.compare_digest(self.value.encode("ascii"), other.value.encode("ascii"))

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def parse(cls, string: str) -> "Verifier":
        """Accept an externally supplied verifier after validating it."""
        return cls(string)

    @classmethod
    def generate(cls, length: Length | int = DEFAULT_LENGTH) -> "Verifier":
        """Generate a random verifier of exactly `length` characters.

        Args:
            length: Number of characters, 43-128. Defaults to DEFAULT_LENGTH (86).

        Raises:
            InvalidLengthError: If `length` is out of range.
        """
        length = Length.of(length)
        verifier = cls(generate.string(length))
        logger.debug("Generated verifier of %d characters", length.value)
        return verifier

    @classmethod
    def generate_default(cls) -> "Verifier":
        """Generate a verifier of DEFAULT_LENGTH characters."""
        return cls.generate(DEFAULT_LENGTH)

    @classmethod
    def generate_encode(cls, count: Bytes | int = DEFAULT_BYTES) -> "Verifier":
        """Generate `count` random bytes and base64url-encode them into a verifier."""
        count = Bytes.of(count)
        verifier = cls.encode(generate.random_bytes(count))
        logger.debug("Generated verifier from %d random bytes", count.value)
        return verifier

    @classmethod
    def encode(cls, data: bytes) -> "Verifier":
        """Build a verifier by base64url-encoding 32-96 caller supplied bytes."""
        Bytes.of(len(data))
        return cls(encoding.encode(data))

    def challenge(self, method: Method | str = Method.S256) -> "Challenge":
        """Derive the code challenge for this verifier."""
        from pkce_kit.challenge import Challenge

        return Challenge.derive(self, method)

    def verify(self, challenge: "Challenge") -> bool:
        """Check in constant time whether `challenge` was derived from this verifier."""
        return challenge.verify(self)
