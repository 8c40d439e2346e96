"""Domain exceptions for categories app."""


class CategoriesServiceError(Exception):
    """Base exception for category service errors."""
    pass


class InactiveCategoryError(CategoriesServiceError):
    """Raised when a deactivated category is assigned to a new purchase."""
    pass
