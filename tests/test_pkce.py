"""Tests for string-level PKCE helpers."""

import base64
import hashlib
import re

import pytest

from pkce_kit.exceptions import InvalidCharacterError, InvalidLengthError, UnknownMethodError
from pkce_kit.pkce import (
    derive_code_challenge,
    generate_code_verifier,
    generate_pkce,
    verify_code_challenge,
)

RFC_VERIFIER = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"
RFC_CHALLENGE = "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"


class TestGeneratePkce:
    """Test generate_pkce function."""

    def test_returns_verifier_and_challenge(self):
        """generate_pkce returns verifier and challenge tuple."""
        verifier, challenge = generate_pkce()
        assert isinstance(verifier, str)
        assert isinstance(challenge, str)

    def test_verifier_length(self):
        """Verifier is between 43-128 characters (RFC 7636)."""
        verifier, _ = generate_pkce()
        assert 43 <= len(verifier) <= 128

    def test_verifier_uses_valid_characters(self):
        """Verifier uses only unreserved characters."""
        verifier, _ = generate_pkce()
        # RFC 7636: ALPHA / DIGIT / "-" / "." / "_" / "~"
        assert re.match(r"^[A-Za-z0-9\-._~]+$", verifier)

    def test_challenge_is_sha256_of_verifier(self):
        """Challenge is base64url(SHA256(verifier))."""
        verifier, challenge = generate_pkce()
        digest = hashlib.sha256(verifier.encode("ascii")).digest()
        expected = base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
        assert challenge == expected

    def test_generates_unique_values(self):
        """Each call generates unique verifier/challenge."""
        v1, c1 = generate_pkce()
        v2, c2 = generate_pkce()
        assert v1 != v2
        assert c1 != c2

    def test_plain_method(self):
        """With plain the challenge equals the verifier."""
        verifier, challenge = generate_pkce(method="plain")
        assert verifier == challenge


class TestGenerateCodeVerifier:
    """Test generate_code_verifier function."""

    def test_length(self):
        """Requested length is honoured."""
        assert len(generate_code_verifier(43)) == 43

    def test_rejects_bad_length(self):
        """Lengths outside [43, 128] raise."""
        with pytest.raises(InvalidLengthError):
            generate_code_verifier(129)


class TestDeriveCodeChallenge:
    """Test derive_code_challenge function."""

    def test_rfc_example(self):
        """RFC 7636 Appendix B vector."""
        assert derive_code_challenge(RFC_VERIFIER) == RFC_CHALLENGE

    def test_rejects_malformed_verifier(self):
        """Malformed verifiers raise instead of being hashed."""
        with pytest.raises(InvalidCharacterError):
            derive_code_challenge("a" * 50 + " ")


class TestVerifyCodeChallenge:
    """Test verify_code_challenge function."""

    def test_rfc_pair(self):
        """RFC example verifies."""
        assert verify_code_challenge(RFC_VERIFIER, RFC_CHALLENGE) is True

    def test_mismatch(self):
        """A different verifier does not verify."""
        assert verify_code_challenge(generate_code_verifier(), RFC_CHALLENGE) is False

    @pytest.mark.parametrize("verifier", ["", "short", "a" * 50 + "=", "a" * 200])
    def test_malformed_verifier_is_false(self, verifier):
        """Malformed candidate verifiers simply don't match."""
        assert verify_code_challenge(verifier, RFC_CHALLENGE) is False

    def test_malformed_challenge_raises(self):
        """Malformed stored challenges raise."""
        with pytest.raises(InvalidLengthError):
            verify_code_challenge(RFC_VERIFIER, "abc")

    def test_unknown_method_raises(self):
        """Unknown methods raise."""
        with pytest.raises(UnknownMethodError):
            verify_code_challenge(RFC_VERIFIER, RFC_CHALLENGE, "S512")
