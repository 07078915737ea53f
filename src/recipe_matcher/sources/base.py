"""Recipe data source interface consumed by the suggestion engine."""

from abc import ABC, abstractmethod
from typing import List

from recipe_matcher.models.models import RecipeCandidate, RecipeSummary


class RecipeDataSource(ABC):
    """Supplies raw recipe records by ingredient search and by id lookup.

    Implementations raise ``NetworkError`` or ``DecodeError`` on failure and
    ``NotFoundError`` from ``get_by_id`` when no record exists.
    """

    name: str = "Unknown"

    @abstractmethod
    async def search_by_ingredient(self, ingredient: str) -> List[RecipeSummary]:
        """Return summaries of recipes using ``ingredient`` (empty list when none)."""

    @abstractmethod
    async def get_by_id(self, recipe_id: str) -> RecipeCandidate:
        """Return the full recipe record for ``recipe_id``."""
