"""Failure taxonomy shared by the dispatcher, provider adapters and API layer."""
from enum import Enum


class ErrorKind(str, Enum):
    """Classified failure kinds surfaced to callers."""

    AUTH_REQUIRED = "AUTH_REQUIRED"
    SAFETY_BLOCKED = "SAFETY_BLOCKED"
    NO_RESULT = "NO_RESULT"
    TRANSPORT = "TRANSPORT"
    STORAGE_FAILURE = "STORAGE_FAILURE"


class GenerationError(Exception):
    """A generation call failed with a classified kind.

    For AUTH_REQUIRED the string form is the bare kind name, which is what
    clients match on to start their re-authentication flow.
    """

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        self.kind = kind
        self.message = message or kind.value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.kind is ErrorKind.AUTH_REQUIRED:
            return ErrorKind.AUTH_REQUIRED.value
        return self.message
