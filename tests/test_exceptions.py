"""Tests for custom exception hierarchy."""

from crm_lite.exceptions import (
    ConfigurationError,
    CrmError,
    DuplicateError,
    DuplicatePhoneError,
    FormatError,
    NotFoundError,
    StorageError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_crm_error_is_exception(self) -> None:
        assert isinstance(CrmError("test"), Exception)

    def test_validation_error_is_crm_error(self) -> None:
        assert isinstance(ValidationError("test"), CrmError)

    def test_duplicate_phone_is_duplicate(self) -> None:
        err = DuplicatePhoneError("test")
        assert isinstance(err, DuplicateError)
        assert isinstance(err, CrmError)

    def test_not_found_is_crm_error(self) -> None:
        assert isinstance(NotFoundError("test"), CrmError)

    def test_format_error_is_crm_error(self) -> None:
        assert isinstance(FormatError("test"), CrmError)

    def test_storage_and_configuration_errors(self) -> None:
        assert isinstance(StorageError("test"), CrmError)
        assert isinstance(ConfigurationError("test"), CrmError)

    def test_exception_message(self) -> None:
        err = NotFoundError("Customer cust-001 not found")
        assert str(err) == "Customer cust-001 not found"
