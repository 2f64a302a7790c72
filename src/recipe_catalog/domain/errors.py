"""Domain errors for the recipe catalog."""


class RecipeCatalogError(Exception):
    """Base class for recipe catalog failures."""


class InvalidInputError(RecipeCatalogError, ValueError):
    """Raised when a payload is missing fields or has malformed values."""


class UnauthorizedError(RecipeCatalogError):
    """Raised when a mutation is attempted with the wrong password."""


class RecipeConflictError(RecipeCatalogError):
    """Raised when a recipe name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Recipe with name '{name}' already exists.")
        self.name = name


class RecipeNotFoundError(RecipeCatalogError):
    """Raised when an edit targets a recipe that is not in the book."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Recipe with name '{name}' does not exist.")
        self.name = name


class RecipeStoreError(RecipeCatalogError):
    """Raised when the backing store rejects or fails an operation."""
