from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ScholarLinkError(Exception):
    """Base class for every failure the record store reports."""

    default_message = "Operation failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class DuplicateAccount(ScholarLinkError):
    default_message = "An account with this email already exists."


class InvalidCredentials(ScholarLinkError):
    default_message = "Invalid email or password."


class NotAuthenticated(ScholarLinkError):
    default_message = "You must be logged in to do that."


class NotAuthorized(NotAuthenticated):
    default_message = "You do not have permission to do that."


class AlreadySubscribed(ScholarLinkError):
    default_message = "You are already subscribed."


class RetrievalFailure(ScholarLinkError):
    default_message = "Failed to retrieve baseline data."


class CorruptPersistedData(ScholarLinkError):
    default_message = "Stored data could not be parsed."


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a user-facing operation; failures carry the error instead of raising it."""

    success: bool
    value: T | None = None
    error: ScholarLinkError | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> Result[T]:
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: ScholarLinkError) -> Result[T]:
        return cls(success=False, error=error)

    @property
    def message(self) -> str | None:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> T | None:
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": self.success}
        if self.error is not None:
            payload["error"] = type(self.error).__name__
            payload["message"] = self.message
        return payload
