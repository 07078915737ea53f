"""Match scoring of a recipe candidate against the user's selection."""

from typing import List, Sequence, Tuple

from recipe_matcher.engine.normalize import ingredients_match, normalize
from recipe_matcher.models.models import IngredientMeasure, RecipeCandidate


def _usable_selection(selected_ingredients: Sequence[str]) -> List[str]:
    # "" is a substring of every name and would match everything
    return [name for name in (normalize(s) for s in selected_ingredients) if name]


def partition_ingredients(
    candidate: RecipeCandidate, selected_ingredients: Sequence[str]
) -> Tuple[List[IngredientMeasure], List[IngredientMeasure]]:
    """Split a recipe's ingredient lines into (matched, missing), keeping order.

    Each line lands in exactly one of the two lists.
    """
    selection = _usable_selection(selected_ingredients)
    matched: List[IngredientMeasure] = []
    missing: List[IngredientMeasure] = []
    for ingredient in candidate.ingredients:
        if any(ingredients_match(ingredient.name, selected) for selected in selection):
            matched.append(ingredient)
        else:
            missing.append(ingredient)
    return matched, missing


def match_percentage(matched_count: int, total_count: int) -> int:
    """Integer-truncated percentage, 0 when there is nothing to match."""
    if total_count == 0:
        return 0
    return int(100 * matched_count / total_count)


def score(candidate: RecipeCandidate, selected_ingredients: Sequence[str]) -> Tuple[int, List[str]]:
    """Score a candidate against the selected ingredients.

    Returns:
        (match_percentage, missing_ingredients) where missing entries are
        formatted "name" or "name (measure)".

    Example:
        >>> score(chicken_rice_recipe, ["chicken", "rice"])
        (66, ['Soy Sauce'])
    """
    matched, missing = partition_ingredients(candidate, selected_ingredients)
    return match_percentage(len(matched), len(candidate.ingredients)), [i.display() for i in missing]
