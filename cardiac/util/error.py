"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings hold a value the service cannot run with."""

    pass


class PasswordHashError(UtilError):
    """Raised when a stored credential hash cannot be parsed."""

    pass
