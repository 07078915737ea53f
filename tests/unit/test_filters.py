"""Unit tests for category filters and ingredient selection."""

import pytest

from fakes import make_candidate

from recipe_matcher.engine.detail import build_suggestion
from recipe_matcher.engine.filters import FILTER_OPTIONS, filter_by_category, select_ingredient_names


@pytest.fixture
def suggestions(estimator):
    categories = ["Side", "Vegetarian", "Breakfast", "Main dish", "Dinner", "Starter", "Seafood"]
    return [
        build_suggestion(make_candidate(str(i), [], category=category), 0, [], estimator)
        for i, category in enumerate(categories)
    ]


class TestFilterByCategory:
    """Test filter chips."""

    def test_all_recipes_keeps_everything(self, suggestions):
        assert filter_by_category(suggestions, "All Recipes") == suggestions

    def test_unknown_filter_keeps_everything(self, suggestions):
        assert filter_by_category(suggestions, "Midnight Snack") == suggestions

    @pytest.mark.parametrize(
        "active_filter,expected",
        [
            ("Quick Meals", ["Side", "Starter"]),
            ("Vegetarian", ["Vegetarian"]),
            ("Breakfast", ["Breakfast"]),
            ("Lunch", ["Main dish", "Dinner"]),
            ("Dinner", ["Main dish", "Dinner"]),
        ],
    )
    def test_filters(self, suggestions, active_filter, expected):
        result = filter_by_category(suggestions, active_filter)
        assert [s.recipe.category for s in result] == expected

    def test_every_option_is_handled(self, suggestions):
        for option in FILTER_OPTIONS:
            assert isinstance(filter_by_category(suggestions, option), list)


class TestSelectIngredientNames:
    """Test shopping-list name selection."""

    def test_normalizes_and_dedupes(self):
        names = ["Chicken", " rice ", "CHICKEN", "", "Onion", "rice"]
        assert select_ingredient_names(names) == ["chicken", "rice", "onion"]

    def test_empty(self):
        assert select_ingredient_names([]) == []
