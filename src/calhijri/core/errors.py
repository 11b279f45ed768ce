class CalhijriError(Exception):
    """Base error."""

class InvalidDateError(CalhijriError, ValueError):
    """Raised when a date is constructed with an out-of-domain component."""

class ConfigError(CalhijriError, ValueError):
    """Raised when a grid configuration is inconsistent."""

class RecordError(CalhijriError, ValueError):
    """Raised when a plain event record lacks a required field."""
