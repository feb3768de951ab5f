"""Errors raised by the scope filter engine."""


class ScopeFilterError(Exception):
    """Base class for scope filter errors."""


class InvalidColumnError(ScopeFilterError):
    """Raised when a SQL column is not on the accept list for an attribute."""

    def __init__(self, column: str, attribute: str):
        self.column = column
        self.attribute = attribute
        super().__init__(
            f"Column {column!r} is not in the accept list for attribute {attribute!r}"
        )


class InvalidAttributeError(ScopeFilterError, ValueError):
    """Raised for an unknown scope attribute kind."""

    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(f"Unknown scope attribute: {attribute!r}")


class NoActionsError(ScopeFilterError, ValueError):
    """Raised when a filter is requested without any required action."""

    def __init__(self, detail: str = "At least one action is required"):
        super().__init__(detail)


class MissingPermissionsError(ScopeFilterError):
    """Raised when no signed-in user is available to filter for."""

    def __init__(self, detail: str = "Missing permissions"):
        super().__init__(detail)
