"""Exceptions raised by modelcheck.

Validation failures are never raised; they are reported through validator
results. The exceptions here cover cache misses and resource lookups.
"""


class ModelcheckError(Exception):
    """Base class for modelcheck errors."""


class CacheRetrievalError(ModelcheckError):
    """Raised when no cached validation entry exists for a model."""

    def __init__(self, message: str, key: tuple[str, str] | None = None):
        self.key = key
        super().__init__(message)


class ResourceError(ModelcheckError):
    """Base class for child resource lookup failures."""

    def __init__(self, message: str, path: str = "", child_name: str = ""):
        self.path = path
        self.child_name = child_name
        super().__init__(message)


class ChildResourceNotFoundError(ResourceError):
    """Raised when a named child resource does not exist."""


class InvalidResourceTypeError(ResourceError):
    """Raised when a resource cannot be adapted to the requested model type."""

    def __init__(self, message: str, path: str = "", child_name: str = "",
                 resource_type: str | None = None):
        self.resource_type = resource_type
        super().__init__(message, path, child_name)
