class DomainError(Exception):
    """Base exception for timesheet report failures."""


class AcquisitionError(DomainError):
    """Raised when time entries cannot be fetched or decoded."""


class ConfigurationError(DomainError):
    """Raised when settings are missing or invalid."""


class ReportWriteError(DomainError):
    """Raised when the rendered report cannot be written to storage."""
