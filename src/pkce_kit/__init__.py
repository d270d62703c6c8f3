"""Proof Key for Code Exchange (RFC 7636) for OAuth 2.0 clients and servers."""

from pkce_kit.challenge import Challenge, verify
from pkce_kit.chars import CHARS
from pkce_kit.code import Code
from pkce_kit.exceptions import (
    InvalidCharacterError,
    InvalidEncodingError,
    InvalidLengthError,
    PkceError,
    UnknownMethodError,
)
from pkce_kit.length import (
    DEFAULT_BYTES,
    DEFAULT_LENGTH,
    MAX_BYTES,
    MAX_LENGTH,
    MIN_BYTES,
    MIN_LENGTH,
    Bytes,
    Length,
)
from pkce_kit.method import Method
from pkce_kit.pkce import (
    derive_code_challenge,
    generate_code_verifier,
    generate_pkce,
    verify_code_challenge,
)
from pkce_kit.verifier import Verifier

__all__ = [
    "CHARS",
    "DEFAULT_BYTES",
    "DEFAULT_LENGTH",
    "MAX_BYTES",
    "MAX_LENGTH",
    "MIN_BYTES",
    "MIN_LENGTH",
    "Bytes",
    "Challenge",
    "Code",
    "InvalidCharacterError",
    "InvalidEncodingError",
    "InvalidLengthError",
    "Length",
    "Method",
    "PkceError",
    "UnknownMethodError",
    "Verifier",
    "derive_code_challenge",
    "generate_code_verifier",
    "generate_pkce",
    "verify",
    "verify_code_challenge",
]
