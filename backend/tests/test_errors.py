"""Tests for operation results and API errors."""

import pytest

from ayush_api.core.errors import (
    REDACTED_ERROR,
    ApiError,
    ErrorKind,
    InternalError,
    NotFoundError,
    OperationResult,
    ValidationError,
    unwrap,
)


class TestErrorKind:
    """Tests for error kinds."""

    @pytest.mark.parametrize(
        ("kind", "status_code"),
        [(ErrorKind.VALIDATION, 400), (ErrorKind.NOT_FOUND, 404), (ErrorKind.INTERNAL, 500)],
    )
    def test_status_codes(self, kind: ErrorKind, status_code: int) -> None:
        """Test each kind maps to its HTTP status."""
        assert kind.status_code == status_code


class TestOperationResult:
    """Tests for OperationResult."""

    def test_success(self) -> None:
        """Test a successful result carries its value."""
        result = OperationResult.success("value")
        assert result.ok
        assert result.value == "value"
        assert result.error_kind is None

    def test_failure(self) -> None:
        """Test a failed result carries its kind and message."""
        result = OperationResult.failure(ErrorKind.NOT_FOUND, "Patient not found")
        assert not result.ok
        assert result.value is None
        assert result.message == "Patient not found"


class TestUnwrap:
    """Tests for turning results into exceptions."""

    def test_unwrap_success(self) -> None:
        """Test unwrap returns the value."""
        assert unwrap(OperationResult.success([1])) == [1]

    def test_unwrap_validation(self) -> None:
        """Test validation failures raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            unwrap(OperationResult.failure(ErrorKind.VALIDATION, "Bad input"))
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Bad input"

    def test_unwrap_not_found(self) -> None:
        """Test not-found failures raise NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            unwrap(OperationResult.failure(ErrorKind.NOT_FOUND, "Disease not found"))
        assert exc_info.value.status_code == 404

    def test_unwrap_internal(self) -> None:
        """Test internal failures raise a redacted 500 error."""
        with pytest.raises(ApiError) as exc_info:
            unwrap(OperationResult.failure(ErrorKind.INTERNAL, "Broken"))
        assert exc_info.value.status_code == 500
        assert exc_info.value.error == REDACTED_ERROR


class TestInternalError:
    """Tests for detail redaction."""

    def test_redacted_by_default(self) -> None:
        """Test the exception text is hidden outside debug mode."""
        error = InternalError("Error fetching diseases", RuntimeError("db down"))
        assert error.error == REDACTED_ERROR

    def test_detail_in_debug(self) -> None:
        """Test debug mode exposes the exception text."""
        error = InternalError("Error fetching diseases", RuntimeError("db down"), debug=True)
        assert error.error == "db down"
        assert error.message == "Error fetching diseases"
