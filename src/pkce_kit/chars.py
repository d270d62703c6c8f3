"""Character sets used by verifiers and challenges."""

from pkce_kit.exceptions import InvalidCharacterError

# RFC 7636 §4.1: ALPHA / DIGIT / "-" / "." / "_" / "~"
CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"

# base64url alphabet (RFC 4648 §5)
ENCODED_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

_VALID = frozenset(CHARS)
_VALID_ENCODED = frozenset(ENCODED_CHARS)


def is_valid(character: str) -> bool:
    """Check whether a single character belongs to the unreserved alphabet."""
    return character in _VALID


def check(string: str, alphabet: frozenset[str] = _VALID) -> None:
    """Validate every character of a string.

    Args:
        string: String to check.
        alphabet: Allowed characters, the unreserved alphabet by default.

    Raises:
        InvalidCharacterError: On the first character outside the alphabet.
    """
    for position, character in enumerate(string):
        if character not in alphabet:
            raise InvalidCharacterError(character, position)


def check_encoded(string: str) -> None:
    """Validate a string against the base64url alphabet."""
    check(string, _VALID_ENCODED)
