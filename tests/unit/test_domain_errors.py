from __future__ import annotations

import pytest

from src.app.domain.errors import (
    AdminError,
    DraftValidationError,
    RecordNotFoundError,
    RecordValidationError,
    RecordWriteError,
)


class TestAdminError:
    def test_base_exception(self) -> None:
        error = AdminError("Base error")
        assert str(error) == "Base error"
        assert isinstance(error, Exception)


class TestRecordNotFoundError:
    def test_includes_entity_and_id(self) -> None:
        error = RecordNotFoundError("influencer", "abc-123")
        assert str(error) == "Influencer not found: abc-123"
        assert error.entity == "influencer"
        assert error.record_id == "abc-123"


class TestRecordWriteError:
    def test_includes_operation_and_entity(self) -> None:
        error = RecordWriteError("create", "influencer")
        assert str(error) == "Failed to create influencer - no data returned"
        assert error.operation == "create"
        assert error.entity == "influencer"


class TestRecordValidationError:
    def test_includes_record_id(self) -> None:
        error = RecordValidationError("recipe", "r-1")
        assert "Recipe validation failed" in str(error)
        assert "r-1" in str(error)
        assert error.record_id == "r-1"


class TestDraftValidationError:
    def test_lists_every_field(self) -> None:
        field_errors = {"servings": "expected a number", "title": "is required"}
        error = DraftValidationError(field_errors)
        assert "servings: expected a number" in str(error)
        assert "title: is required" in str(error)
        assert error.field_errors == field_errors


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "error_class",
        [RecordNotFoundError, RecordWriteError, RecordValidationError, DraftValidationError],
    )
    def test_all_errors_inherit_from_admin_error(self, error_class: type) -> None:
        assert issubclass(error_class, AdminError)
