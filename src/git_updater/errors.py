"""Error types raised while updating files in a remote repository."""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus


class ErrorKind(str, Enum):
    """Classification of an upstream failure."""

    NOT_FOUND = "not_found"
    OTHER = "other"


class SCMError(RuntimeError):
    """Raised when the SCM service responds with an error status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_message: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_message = response_message

    @property
    def kind(self) -> ErrorKind:
        if self.status_code == HTTPStatus.NOT_FOUND:
            return ErrorKind.NOT_FOUND
        return ErrorKind.OTHER

    def __str__(self) -> str:
        return (
            f"{self.message}: response status {self.status_code}: "
            f"{self.response_message}"
        )


class TransportError(SCMError):
    """Raised when no response was received from the SCM service."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=None)

    def __str__(self) -> str:
        return self.message


class UpdateError(RuntimeError):
    """Wraps a failure with the step of the update that produced it."""

    def __init__(self, step: str, cause: BaseException) -> None:
        super().__init__(f"failed to {step}: {cause}")
        self.step = step
        self.cause = cause


class TransformError(UpdateError):
    """Raised when the content updater rejects the current file body."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__("apply update", cause)


class NothingToRemoveError(ValueError):
    """Raised when asked to remove a file that does not exist."""

    def __init__(self, filename: str, branch: str) -> None:
        super().__init__(
            f"removing a non-existing file {filename} in branch {branch} "
            "is not necessary"
        )
        self.filename = filename
        self.branch = branch


def is_not_found(exc: BaseException) -> bool:
    """Return True if the error represents a NotFound response from upstream."""
    return isinstance(exc, SCMError) and exc.kind is ErrorKind.NOT_FOUND
