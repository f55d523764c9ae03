"""
Service Errors

Exception types raised by the shopping list services. The web layer maps
each one to an HTTP status.
"""


class ShoppingListError(Exception):
    """Base class for shopping list service errors."""
    status_code = 500


class NotFound(ShoppingListError):
    """A household, plan week or referenced record is missing."""
    status_code = 404


class ReferentialGap(ShoppingListError):
    """
    A dinner entry points at a recipe that no longer exists.

    Aggregation logs it and skips the dinner; it is never raised from there.
    """

    def __init__(self, recipe_id, entry_date=None):
        self.recipe_id = recipe_id
        self.entry_date = entry_date
        super().__init__(f"Dinner on {entry_date} references missing recipe {recipe_id}")


class ValidationError(ShoppingListError):
    """User input rejected before it reaches the database."""
    status_code = 400


class PersistenceFailure(ShoppingListError):
    """The database failed during a read or write."""
    status_code = 503
