"""Base64url (no padding) and SHA-256 helpers."""

import base64
import binascii
import hashlib

from pkce_kit.chars import check_encoded
from pkce_kit.exceptions import InvalidCharacterError, InvalidEncodingError

DIGEST_SIZE = hashlib.sha256().digest_size


def encoded_length(count: int) -> int:
    """Return the base64url-no-pad length of `count` bytes."""
    chunks, remainder = divmod(count, 3)
    length = chunks * 4
    if remainder:
        length += remainder + 1
    return length


CHALLENGE_LENGTH = encoded_length(DIGEST_SIZE)


def encode(data: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(string: str) -> bytes:
    """Decode base64url without padding.

    Rejects padding, foreign characters, impossible lengths and
    non-canonical trailing bits so that decode/encode round-trips exactly.

    Raises:
        InvalidEncodingError: If the string is not canonical base64url.
    """
    if "=" in string:
        raise InvalidEncodingError("padding is not allowed")
    try:
        check_encoded(string)
    except InvalidCharacterError as e:
        raise InvalidEncodingError(
            f"character {e.character!r} at position {e.position} is not base64url"
        ) from e
    if len(string) % 4 == 1:
        raise InvalidEncodingError(f"impossible encoded length {len(string)}")

    padded = string + "=" * (-len(string) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise InvalidEncodingError(str(e)) from e

    if encode(data) != string:
        raise InvalidEncodingError("non-canonical trailing bits")
    return data


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of `data`."""
    return hashlib.sha256(data).digest()
