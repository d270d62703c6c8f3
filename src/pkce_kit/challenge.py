"""PKCE code challenges.

A challenge is derived from a verifier with one of two methods:

- `S256` hashes the verifier with SHA-256 and base64url-encodes the digest
  without padding. The result is always 43 characters.
- `plain` uses the verifier string as-is. RFC 7636 only allows it for
  clients that cannot do SHA-256.
"""

import hmac
import logging
from dataclasses import dataclass

from pkce_kit import chars, encoding
from pkce_kit.exceptions import InvalidEncodingError, InvalidLengthError
from pkce_kit.method import Method
from pkce_kit.verifier import Verifier
from pkce_kit.verifier import check as check_verifier

logger = logging.getLogger(__name__)


def _derive_value(verifier: Verifier, method: Method) -> str:
    if method is Method.PLAIN:
        return verifier.value
    return encoding.encode(encoding.sha256(verifier.value.encode("ascii")))


def check(value: str, method: Method | str = Method.S256) -> None:
    """Validate a challenge string for the given method.

    Raises:
        UnknownMethodError: If `method` is not a known method.
        InvalidLengthError: If an S256 value is not exactly 43 characters.
        InvalidCharacterError: If the value contains characters outside the alphabet.
        InvalidEncodingError: If an S256 value is not a canonical 32-byte encoding.
    """
    method = Method.parse(method)
    if method is Method.PLAIN:
        check_verifier(value)
        return

    if not isinstance(value, str):
        raise TypeError(f"challenge must be a string, not {type(value).__name__}")
    if len(value) != encoding.CHALLENGE_LENGTH:
        raise InvalidLengthError(len(value), encoding.CHALLENGE_LENGTH, encoding.CHALLENGE_LENGTH)
    chars.check_encoded(value)
    digest = encoding.decode(value)
    if len(digest) != encoding.DIGEST_SIZE:
        raise InvalidEncodingError(f"expected {encoding.DIGEST_SIZE} bytes, got {len(digest)}")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Challenge:
    """Public value sent to the authorization server in place of the verifier.

    Constructing a Challenge from a string only checks that it is well formed;
    it says nothing about which verifier produced it. Use `derive` to obtain a
    challenge from a verifier and `verify` to check a candidate.
    """

    value: str
    method: Method = Method.S256

    def __post_init__(self) -> None:
        method = Method.parse(self.method)
        object.__setattr__(self, "method", method)
        check(self.value, method)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        # a plain challenge is the verifier itself
        if self.method is Method.PLAIN:
            return f"Challenge(<{len(self.value)} characters>, method={self.method.value})"
        return f"Challenge({self.value!r}, method={self.method.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Challenge):
            return NotImplemented
        same_value = hmac.compare_digest(self.value.encode("ascii"), other.value.encode("ascii"))
        return same_value and self.method is other.method

    def __hash__(self) -> int:
        return hash((self.value, self.method))

    @classmethod
    def derive(cls, verifier: Verifier, method: Method | str = Method.S256) -> "Challenge":
        """Derive the challenge of `verifier`. Deterministic; never fails for a valid verifier."""
        method = Method.parse(method)
        return cls(_derive_value(verifier, method), method)

    @classmethod
    def parse(cls, string: str, method: Method | str = Method.S256) -> "Challenge":
        """Accept a stored or transmitted challenge after checking its shape."""
        return cls(string, method)

    @classmethod
    def from_parts(cls, value: str, method: Method | str) -> "Challenge":
        return cls(value, method)

    def into_parts(self) -> tuple[str, Method]:
        return self.value, self.method

    def to_params(self) -> dict[str, str]:
        """Authorization request parameters carrying this challenge."""
        return {
            "code_challenge": self.value,
            "code_challenge_method": self.method.value,
        }

    def verify(self, verifier: Verifier) -> bool:
        """Check whether `verifier` derives to this challenge.

        The comparison runs over the full encoded value regardless of where
        the first mismatch is.
        """
        expected = _derive_value(verifier, self.method)
        matched = hmac.compare_digest(expected.encode("ascii"), self.value.encode("ascii"))
        if not matched:
            logger.debug("PKCE verification failed (method=%s)", self.method.value)
        return matched


def verify(verifier: Verifier, challenge: Challenge) -> bool:
    """Check in constant time whether `challenge` was derived from `verifier`."""
    return challenge.verify(verifier)
