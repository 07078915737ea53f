"""Ordering of scored suggestions."""

from typing import List, Sequence

from recipe_matcher.models.models import RecipeSuggestion


def rank(scored: Sequence[RecipeSuggestion]) -> List[RecipeSuggestion]:
    """Sort by match percentage, highest first.

    ``sorted`` is stable, so equal percentages keep their aggregation order.
    No cap is applied here; aggregation already bounded the candidate set.
    """
    return sorted(scored, key=lambda suggestion: suggestion.match_percentage, reverse=True)
