"""Ingredient-based recipe suggestions on top of TheMealDB."""

from recipe_matcher.engine.suggestions import RecipeSuggestionEngine
from recipe_matcher.sources.errors import DecodeError, NetworkError, NotFoundError, RecipeSourceError
from recipe_matcher.sources.mealdb import MealDBSource

__all__ = [
    "RecipeSuggestionEngine",
    "MealDBSource",
    "RecipeSourceError",
    "NetworkError",
    "DecodeError",
    "NotFoundError",
]
