"""Unit tests for domain errors and cause-chain resolution."""

from fla.domain.error import (
    INTERNAL_MESSAGE,
    ConflictError,
    DomainError,
    ErrorCode,
    InternalError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
    error_code,
    error_message,
)


def _wrap(err: Exception, *operations: str) -> DomainError:
    """Wrap an error in one DomainError per operation, innermost first."""
    current: BaseException = err
    for operation in operations:
        try:
            raise DomainError(operation=operation) from current
        except DomainError as wrapped:
            current = wrapped
    return current  # type: ignore[return-value]


class TestErrorCodes:
    """Tests for fixed error codes."""

    def test_subclasses_carry_their_code(self):
        assert ValidationError("x").code is ErrorCode.INVALID
        assert ConflictError("x").code is ErrorCode.CONFLICT
        assert NotAuthorizedError("x").code is ErrorCode.FORBIDDEN
        assert InternalError("x").code is ErrorCode.INTERNAL
        assert NotFoundError("Post", "p1").code is ErrorCode.NOT_FOUND

    def test_not_found_message(self):
        err = NotFoundError("Category", "a1")

        assert err.message == "Category not found: a1"
        assert err.resource == "Category"
        assert err.identifier == "a1"

    def test_explicit_code(self):
        assert DomainError("x", code=ErrorCode.CONFLICT).code is ErrorCode.CONFLICT


class TestResolution:
    """Tests for error_code and error_message."""

    def test_none_yields_none(self):
        assert error_code(None) is None
        assert error_message(None) is None

    def test_walks_cause_chain(self):
        """The innermost code and message survive wrapping."""
        err = _wrap(
            ValidationError("Invalid status.", operation="PostStatus.parse"),
            "Post.check_transition_to",
            "Post.publish",
        )

        assert error_code(err) is ErrorCode.INVALID
        assert error_message(err) == "Invalid status."
        assert err.cause is not None

    def test_outer_code_wins(self):
        err = _wrap(ValidationError("inner"), "op")
        outer = NotAuthorizedError("outer")
        outer.__cause__ = err

        assert error_code(outer) is ErrorCode.FORBIDDEN
        assert error_message(outer) == "outer"

    def test_foreign_error_is_internal(self):
        err = _wrap(RuntimeError("database exploded"), "Repository.save")

        assert error_code(err) is ErrorCode.INTERNAL
        assert error_message(err) == INTERNAL_MESSAGE

    def test_plain_exception_is_internal(self):
        assert error_code(KeyError("x")) is ErrorCode.INTERNAL
        assert error_message(KeyError("x")) == INTERNAL_MESSAGE


class TestStr:
    """Tests for the human-readable operation trail."""

    def test_leaf_error(self):
        err = ValidationError("Missing title.", operation="Title.validate")

        assert str(err) == "Title.validate: <invalid> Missing title."

    def test_wrapped_error_accumulates_operations(self):
        err = _wrap(ValidationError("Missing title.", operation="Title.validate"), "Post.create")

        assert str(err) == "Post.create: Title.validate: <invalid> Missing title."
