"""Shared test fixtures."""

import pytest

from pkce_kit.challenge import Challenge
from pkce_kit.settings import get_settings
from pkce_kit.verifier import Verifier

# RFC 7636 Appendix B
RFC_VERIFIER = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"
RFC_CHALLENGE = "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"


@pytest.fixture
def rfc_verifier() -> Verifier:
    """The verifier from RFC 7636 Appendix B."""
    return Verifier.parse(RFC_VERIFIER)


@pytest.fixture
def rfc_challenge() -> Challenge:
    """The S256 challenge from RFC 7636 Appendix B."""
    return Challenge.parse(RFC_CHALLENGE)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
