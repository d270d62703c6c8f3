"""Pydantic models and field types for storing and transmitting PKCE values.

Verifiers and challenges serialize to their plain string form, so a value
read back from storage is byte-for-byte the value that was written.
"""

import logging
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    PlainSerializer,
    PlainValidator,
    WithJsonSchema,
    model_validator,
)

from pkce_kit.challenge import Challenge
from pkce_kit.code import Code
from pkce_kit.exceptions import PkceError
from pkce_kit.method import Method
from pkce_kit.verifier import Verifier

logger = logging.getLogger(__name__)


def _to_verifier(value: Any) -> Verifier:
    if isinstance(value, Verifier):
        return value
    if not isinstance(value, str):
        raise ValueError("verifier must be a string")
    return Verifier.parse(value)


def _to_challenge(value: Any) -> Challenge:
    if isinstance(value, Challenge):
        return value
    if not isinstance(value, str):
        raise ValueError("challenge must be a string")
    return Challenge.parse(value)


VerifierField = Annotated[
    Verifier,
    PlainValidator(_to_verifier),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "minLength": 43, "maxLength": 128}),
]

# S256 challenge carried as a bare string
ChallengeField = Annotated[
    Challenge,
    PlainValidator(_to_challenge),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "minLength": 43, "maxLength": 43}),
]


class ChallengeParams(BaseModel):
    """The `code_challenge` / `code_challenge_method` pair of an authorization request."""

    model_config = ConfigDict(frozen=True)

    code_challenge: str
    code_challenge_method: Method = Method.S256

    @model_validator(mode="after")
    def _check_challenge(self) -> "ChallengeParams":
        self.to_challenge()
        return self

    @classmethod
    def from_challenge(cls, challenge: Challenge) -> "ChallengeParams":
        value, method = challenge.into_parts()
        return cls(code_challenge=value, code_challenge_method=method)

    def to_challenge(self) -> Challenge:
        return Challenge.from_parts(self.code_challenge, self.code_challenge_method)


class CodeRecord(BaseModel):
    """Stored verifier and challenge for one authorization request.

    Validation rejects records whose challenge was not derived from the
    verifier, so a loaded record always satisfies the pair invariant.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    verifier: VerifierField
    challenge: str
    method: Method = Method.S256

    @model_validator(mode="after")
    def _check_pair(self) -> "CodeRecord":
        if not self.to_challenge().verify(self.verifier):
            raise ValueError("challenge was not derived from verifier")
        return self

    @classmethod
    def from_code(cls, code: Code) -> "CodeRecord":
        verifier, challenge, method = code.into_parts()
        return cls(verifier=verifier, challenge=challenge, method=method)

    def to_challenge(self) -> Challenge:
        return Challenge.from_parts(self.challenge, self.method)

    def to_code(self) -> Code:
        return Code(self.verifier, self.method)

    def verify(self, candidate: Verifier | str) -> bool:
        """Check a presented verifier against the stored challenge.

        A malformed candidate string can't match anything and yields False,
        the same as `verify_code_challenge`.
        """
        try:
            verifier = _to_verifier(candidate)
        except PkceError as e:
            logger.debug("Rejected malformed code verifier: %s", type(e).__name__)
            return False
        return self.to_challenge().verify(verifier)
