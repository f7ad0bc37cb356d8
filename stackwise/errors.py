"""Exception types raised by the decision engine."""


class StackwiseError(Exception):
    """Base class for all Stackwise errors."""


class InputError(StackwiseError, ValueError):
    """Architecture graph or project descriptor is malformed.

    Attributes:
        errors: One human-readable message per offending field
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class CatalogConfigurationError(StackwiseError):
    """Tool catalog is unreadable or leaves component categories uncovered.

    Attributes:
        missing_categories: Category ids with no catalog candidates
    """

    def __init__(self, message: str, missing_categories: list[str] | None = None):
        super().__init__(message)
        self.missing_categories = missing_categories or []
