"""Verifier and challenge pairs."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pkce_kit.challenge import Challenge
from pkce_kit.length import DEFAULT_BYTES, DEFAULT_LENGTH, Bytes, Length
from pkce_kit.method import Method
from pkce_kit.verifier import Verifier

if TYPE_CHECKING:
    from pkce_kit.settings import Settings


@dataclass(frozen=True, slots=True)
class Code:
    """A verifier together with the challenge derived from it.

    The challenge is never passed in: it is computed from the verifier and
    method on construction, so a Code can't hold a mismatched pair.
    """

    verifier: Verifier
    method: Method = Method.S256
    challenge: Challenge = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.verifier, Verifier):
            raise TypeError(f"verifier must be a Verifier, not {type(self.verifier).__name__}")
        method = Method.parse(self.method)
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "challenge", self.verifier.challenge(method))

    def __iter__(self) -> Iterator[Verifier | Challenge]:
        return iter(self.into_pair())

    @classmethod
    def generate(
        cls,
        length: Length | int = DEFAULT_LENGTH,
        method: Method | str = Method.S256,
    ) -> "Code":
        """Generate a random verifier of `length` characters and derive its challenge."""
        return cls(Verifier.generate(length), method)

    @classmethod
    def generate_default(cls) -> "Code":
        return cls.generate()

    @classmethod
    def generate_encode(
        cls,
        count: Bytes | int = DEFAULT_BYTES,
        method: Method | str = Method.S256,
    ) -> "Code":
        """Generate a verifier from `count` random bytes and derive its challenge."""
        return cls(Verifier.generate_encode(count), method)

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "Code":
        """Generate a pair using the configured length and method.

        Args:
            settings: Settings to use. Defaults to the cached environment settings.
        """
        from pkce_kit.settings import get_settings

        settings = settings if settings is not None else get_settings()
        return cls.generate(settings.length, settings.method)

    def into_pair(self) -> tuple[Verifier, Challenge]:
        return self.verifier, self.challenge

    def into_parts(self) -> tuple[str, str, Method]:
        """Return (verifier string, challenge string, method)."""
        return self.verifier.value, self.challenge.value, self.method
