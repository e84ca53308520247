"""Domain layer errors.

Every domain error carries a machine-readable code, a human-readable message
and the operation that raised it. Wrapping errors chain through ``__cause__``
(``raise DomainError(operation=op) from err``) so callers can resolve the
innermost code and message with :func:`error_code` and :func:`error_message`.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Application error codes."""

    CONFLICT = "conflict"  # Business rule conflict (e.g. uniqueness)
    INTERNAL = "internal"  # Unexpected failure, needs technical investigation
    INVALID = "invalid"  # Input or state failed validation
    FORBIDDEN = "forbidden"  # Actor lacks permission
    NOT_FOUND = "not_found"  # Entity does not exist


# Generic message for internal errors to avoid exposing system details.
INTERNAL_MESSAGE = "An internal error has occurred. Please contact technical support."


class DomainError(Exception):
    """Base domain error."""

    code: ErrorCode | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        operation: str | None = None,
        code: ErrorCode | None = None,
    ) -> None:
        super().__init__(message or "")
        if code is not None:
            self.code = code
        self.message = message
        self.operation = operation

    @property
    def cause(self) -> BaseException | None:
        """Underlying error, if this error wraps another one."""
        return self.__cause__

    def __str__(self) -> str:
        prefix = f"{self.operation}: " if self.operation else ""
        if self.__cause__ is not None:
            return prefix + str(self.__cause__)
        if self.code is not None:
            prefix += f"<{self.code.value}> "
        return prefix + (self.message or "")


class ValidationError(DomainError):
    """Domain validation error."""

    code = ErrorCode.INVALID


class ConflictError(DomainError):
    """Raised when an action conflicts with existing state."""

    code = ErrorCode.CONFLICT


class NotAuthorizedError(DomainError):
    """Raised when an actor is not allowed to perform an action."""

    code = ErrorCode.FORBIDDEN


class InternalError(DomainError):
    """Raised when a collaborator fails unexpectedly."""

    code = ErrorCode.INTERNAL


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = ErrorCode.NOT_FOUND

    def __init__(
        self, resource: str, identifier: str, *, operation: str | None = None
    ) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", operation=operation)


def error_code(err: BaseException | None) -> ErrorCode | None:
    """Resolve the most specific error code in the cause chain.

    Args:
        err: Error to inspect

    Returns:
        The first code found walking the chain, ``ErrorCode.INTERNAL`` when
        there is none, or None when ``err`` is None
    """
    if err is None:
        return None
    if isinstance(err, DomainError):
        if err.code is not None:
            return err.code
        if err.__cause__ is not None:
            return error_code(err.__cause__)
    return ErrorCode.INTERNAL


def error_message(err: BaseException | None) -> str | None:
    """Resolve the human-readable message in the cause chain.

    Args:
        err: Error to inspect

    Returns:
        The first message found walking the chain, the generic internal
        message when there is none, or None when ``err`` is None
    """
    if err is None:
        return None
    if isinstance(err, DomainError):
        if err.message:
            return err.message
        if err.__cause__ is not None:
            return error_message(err.__cause__)
    return INTERNAL_MESSAGE
