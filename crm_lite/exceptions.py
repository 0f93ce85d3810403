"""Custom exception hierarchy for crm-lite."""


class CrmError(Exception):
    """Base exception for all crm-lite errors."""


class ValidationError(CrmError):
    """Raised when required input is missing or invalid."""


class DuplicateError(CrmError):
    """Raised when a uniqueness rule is violated on create."""


class DuplicatePhoneError(DuplicateError):
    """Raised when a customer with the same phone already exists."""


class NotFoundError(CrmError):
    """Raised when a referenced customer or category does not exist."""


class FormatError(CrmError):
    """Raised when an import or backup document is malformed."""


class StorageError(CrmError):
    """Raised when a blob cannot be read from or written to the store."""


class ConfigurationError(CrmError):
    """Raised when configuration is invalid or missing."""
