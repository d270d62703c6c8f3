"""String-level PKCE helpers for callers that keep verifiers and challenges as `str`."""

import logging

from pkce_kit.challenge import Challenge
from pkce_kit.code import Code
from pkce_kit.exceptions import PkceError
from pkce_kit.length import DEFAULT_LENGTH
from pkce_kit.method import Method
from pkce_kit.verifier import Verifier

logger = logging.getLogger(__name__)


def generate_pkce(
    length: int = DEFAULT_LENGTH,
    method: Method | str = Method.S256,
) -> tuple[str, str]:
    """Generate PKCE code verifier and challenge.

    Returns:
        Tuple of (code_verifier, code_challenge).
        With S256 the challenge is base64url(SHA256(verifier)) per RFC 7636.
    """
    verifier, challenge, _ = Code.generate(length, method).into_parts()
    return verifier, challenge


def generate_code_verifier(length: int = DEFAULT_LENGTH) -> str:
    """Generate a code verifier of `length` characters (43-128)."""
    return Verifier.generate(length).value


def derive_code_challenge(code_verifier: str, method: Method | str = Method.S256) -> str:
    """Derive the code challenge for a verifier string.

    Raises:
        PkceError: If the verifier string is malformed.
    """
    return Verifier.parse(code_verifier).challenge(method).value


def verify_code_challenge(
    code_verifier: str,
    code_challenge: str,
    method: Method | str = Method.S256,
) -> bool:
    """Verify that a presented verifier matches a stored challenge.

    A malformed verifier can't match anything and yields False. A malformed
    challenge or method is the caller's own data and raises.

    Raises:
        PkceError: If `code_challenge` or `method` is malformed.
    """
    challenge = Challenge.parse(code_challenge, method)
    try:
        verifier = Verifier.parse(code_verifier)
    except (PkceError, TypeError) as e:
        logger.debug("Rejected malformed code verifier: %s", type(e).__name__)
        return False
    return challenge.verify(verifier)
