"""Exception hierarchy for pkce_kit."""

from typing import Any


class PkceError(Exception):
    """Base exception for all pkce_kit errors."""

    code = "pkce_kit"
    help = "see the error message for details"

    def details(self) -> dict[str, Any]:
        """Return structured, secret-free detail for diagnostics."""
        return {}


class InvalidLengthError(PkceError, ValueError):
    """Length (or byte count) outside the allowed range."""

    code = "pkce_kit.length"

    def __init__(self, value: object, minimum: int, maximum: int, unit: str = "characters") -> None:
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.unit = unit
        super().__init__(
            f"expected {unit} length in [{minimum}, {maximum}] range, got {value!r}"
        )

    @property
    def help(self) -> str:  # type: ignore[override]
        return f"make sure the length is at least {self.minimum} and at most {self.maximum} {self.unit}"

    def details(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "unit": self.unit,
        }


class InvalidCharacterError(PkceError, ValueError):
    """String contains a character outside the expected alphabet."""

    code = "pkce_kit.character"
    help = "make sure the string is composed of valid characters only"

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"invalid character {character!r} at position {position}")

    def details(self) -> dict[str, Any]:
        return {"character": self.character, "position": self.position}


class InvalidEncodingError(PkceError, ValueError):
    """String is not canonical base64url-no-pad data of the expected size."""

    code = "pkce_kit.encoding"
    help = "expected base64url without padding of a SHA-256 digest"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid encoding: {reason}")

    def details(self) -> dict[str, Any]:
        return {"reason": self.reason}


class UnknownMethodError(PkceError, ValueError):
    """Challenge method is neither `plain` nor `S256`."""

    code = "pkce_kit.method"
    help = "expected either `plain` (discouraged) or `S256` (recommended)"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"unknown method {method!r}")

    def details(self) -> dict[str, Any]:
        return {"method": self.method}
