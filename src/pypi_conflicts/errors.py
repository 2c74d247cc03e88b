"""Errors raised when a conflict declaration is malformed."""


class ConflictError(ValueError):
    """A conflicting set or entry is invalid."""

    message = "Invalid conflicting entry"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ZeroItemsError(ConflictError):
    message = "Each set of conflicts must have at least two entries, but found none"


class OneItemError(ConflictError):
    message = "Each set of conflicts must have at least two entries, but found only one"


class MissingPackageError(ConflictError):
    """Only raised for the lock form; the declaration form allows no package."""

    message = "Expected `package` field in conflicting entry"


class MissingExtraAndGroupError(ConflictError):
    message = "Expected `extra` or `group` field in conflicting entry"


class FoundExtraAndGroupError(ConflictError):
    message = "Expected one of `extra` or `group` in conflicting entry, but found both"
