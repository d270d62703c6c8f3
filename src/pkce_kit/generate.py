"""Secure random generation of verifier material."""

import secrets

from pkce_kit.chars import CHARS
from pkce_kit.length import Bytes, Length


def string(length: Length | int) -> str:
    """Random string of `length` characters drawn uniformly from the unreserved alphabet."""
    count = Length.of(length).value
    return "".join(secrets.choice(CHARS) for _ in range(count))


def random_bytes(count: Bytes | int) -> bytes:
    """Return `count` cryptographically secure random bytes."""
    return secrets.token_bytes(Bytes.of(count).value)
