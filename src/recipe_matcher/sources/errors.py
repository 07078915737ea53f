"""Error kinds raised by recipe data sources."""


class RecipeSourceError(Exception):
    """Base class for failures talking to a recipe data source."""


class NetworkError(RecipeSourceError):
    """Transport failure: connection error, timeout, or non-200 status."""


class DecodeError(RecipeSourceError):
    """Response payload was not valid JSON or had an unexpected shape."""


class NotFoundError(RecipeSourceError):
    """No recipe record exists for the requested identifier."""

    def __init__(self, recipe_id: str) -> None:
        self.recipe_id = recipe_id
        super().__init__(f"Recipe not found: {recipe_id}")
