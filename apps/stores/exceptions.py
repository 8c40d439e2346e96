"""
Domain exceptions for stores app.

Cities and stores are shared reference data. Removing one that is still
referenced is refused instead of cascading into purchase history.
"""


class StoresServiceError(Exception):
    """Base exception for stores service errors."""
    pass


class LocalityInUseError(StoresServiceError):
    """Raised when deleting a city that still has stores."""
    pass


class StoreInUseError(StoresServiceError):
    """Raised when deleting a store that still has purchases."""
    pass
