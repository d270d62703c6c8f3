"""PKCE code challenge methods."""

from enum import Enum

from pkce_kit.exceptions import UnknownMethodError


class Method(str, Enum):
    """Supported code challenge transformations."""

    PLAIN = "plain"
    S256 = "S256"

    @classmethod
    def default(cls) -> "Method":
        """S256 is mandatory-to-implement and the recommended method."""
        return cls.S256

    @classmethod
    def parse(cls, value: "Method | str") -> "Method":
        """Parse a method name (case sensitive, as sent on the wire).

        Raises:
            UnknownMethodError: If the name is not `plain` or `S256`.
        """
        if isinstance(value, Method):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownMethodError(str(value)) from None

    def __str__(self) -> str:
        return self.value
