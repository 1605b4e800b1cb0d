"""
Error types and helpers for consistent error message extraction.
"""


class ConfigError(ValueError):
    """Raised when a budget configuration is malformed or invalid.

    The message names the offending field and, where helpful,
    the set of accepted values.
    """


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract an error message from an unknown error type.
    """
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return "Unknown error"
