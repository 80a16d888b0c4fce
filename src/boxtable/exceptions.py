"""Exceptions for boxtable."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class BoxTableError(Exception):
    """
    Base exception for all boxtable errors.

    Rendering itself never raises: every row shape and width budget
    produces some table. These exceptions cover the edges only, where
    configuration or input text is parsed.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(BoxTableError, ValueError):
    """
    Raised when a table or column configuration cannot be built.

    Attributes:
        field: Name of the offending setting (e.g., "align", "max_width")
        value: The rejected value
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


# ---------------------------------------------------------------------------
# Input Exceptions
# ---------------------------------------------------------------------------


class InputError(BoxTableError, ValueError):
    """
    Raised when row input text cannot be parsed.

    Attributes:
        fmt: Input format that was being read (csv, tsv, json, yaml)
    """

    def __init__(self, fmt: str, message: str) -> None:
        self.fmt = fmt
        super().__init__(f"Cannot read {fmt} input: {message}")
