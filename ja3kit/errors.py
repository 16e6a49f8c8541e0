class Ja3KitError(Exception):
    """Base error for ja3kit."""


class MalformedFingerprintError(Ja3KitError, ValueError):
    """
    Raised when fingerprint text cannot be parsed.

    The message is always the same opaque "malformed fingerprint text". When
    known, ``field`` holds the index of the offending field and ``token`` the
    raw token that failed integer parsing.
    """

    def __init__(
        self,
        message: str = "malformed fingerprint text",
        field: int | None = None,
        token: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.token = token


class UnknownProfileError(Ja3KitError, KeyError):
    """Raised when a fingerprint profile name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
