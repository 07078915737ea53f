"""Category filter chips and ingredient selection helpers for the UI layer."""

from typing import Iterable, List, Sequence

from recipe_matcher.engine.normalize import normalize
from recipe_matcher.models.models import RecipeSuggestion

ALL_RECIPES = "All Recipes"

FILTER_OPTIONS = [ALL_RECIPES, "Quick Meals", "Vegetarian", "Breakfast", "Lunch", "Dinner"]

# Filter name -> source categories it keeps
FILTER_CATEGORIES: dict[str, frozenset[str]] = {
    "Quick Meals": frozenset({"Starter", "Side"}),
    "Vegetarian": frozenset({"Vegetarian"}),
    "Breakfast": frozenset({"Breakfast"}),
    "Lunch": frozenset({"Main dish", "Dinner"}),
    "Dinner": frozenset({"Main dish", "Dinner"}),
}


def filter_by_category(suggestions: Sequence[RecipeSuggestion], active_filter: str) -> List[RecipeSuggestion]:
    """Keep suggestions whose category belongs to the active filter.

    "All Recipes" and unrecognized filter names keep everything. Order is
    preserved.
    """
    categories = FILTER_CATEGORIES.get(active_filter)
    if categories is None:
        return list(suggestions)
    return [s for s in suggestions if s.recipe.category in categories]


def select_ingredient_names(names: Iterable[str]) -> List[str]:
    """Normalize shopping-list item names into a selection.

    Blank names are dropped and repeats collapse to their first occurrence.
    """
    selection: List[str] = []
    for name in names:
        normalized = normalize(name)
        if normalized and normalized not in selection:
            selection.append(normalized)
    return selection
