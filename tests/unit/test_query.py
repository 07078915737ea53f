"""Unit tests for the ad hoc query runner."""

from unittest.mock import AsyncMock, patch

import pytest

from fakes import make_candidate

from recipe_matcher import query
from recipe_matcher.engine.detail import build_suggestion
from recipe_matcher.sources.errors import NotFoundError


@pytest.fixture
def teriyaki(chicken_rice, estimator):
    return build_suggestion(chicken_rice, 66, ["Soy Sauce (3 tbs)"], estimator)


class TestMarkdownFormatting:
    """Test markdown rendering helpers."""

    def test_suggestions_markdown(self, teriyaki):
        text = query.format_suggestions_markdown([teriyaki])
        assert "### 1. Teriyaki Chicken Rice (66% match)" in text
        assert "**Missing:** Soy Sauce (3 tbs)" in text

    def test_full_match_markdown(self, chicken_rice, estimator):
        suggestion = build_suggestion(chicken_rice, 100, [], estimator)
        assert "You have everything" in query.format_suggestions_markdown([suggestion])

    def test_empty_suggestions_markdown(self):
        assert "No recipes found" in query.format_suggestions_markdown([])

    def test_detail_markdown_numbers_steps(self, teriyaki):
        text = query.format_detail_markdown(teriyaki)
        assert "# Teriyaki Chicken Rice" in text
        assert "- Chicken Breast (2)" in text
        assert "1. Cook the rice." in text
        assert "3. Add the soy sauce." in text
        assert "Tags: Meat, Casserole" in text


class TestMain:
    """Test flag parsing and dispatch."""

    def test_no_arguments_prints_usage(self, capsys):
        assert query.main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_unknown_flag(self, capsys):
        assert query.main(["--verbose", "rice"]) == 1
        assert "Unknown flag" in capsys.readouterr().out

    def test_unknown_filter(self, capsys):
        assert query.main(["--filter", "Brunch", "rice"]) == 1
        assert "unknown filter" in capsys.readouterr().out

    def test_filter_requires_value(self, capsys):
        assert query.main(["--filter"]) == 1
        assert "requires a value" in capsys.readouterr().out

    def test_flags_without_ingredients(self, capsys):
        assert query.main(["--debug"]) == 1
        assert "No ingredients provided" in capsys.readouterr().out

    @patch("recipe_matcher.query.run_query")
    def test_dispatches_query(self, mock_run):
        assert query.main(["--filter", "Quick Meals", "chicken,", "rice"]) == 0
        mock_run.assert_called_once_with("chicken, rice", debug=False, active_filter="Quick Meals")

    @patch("recipe_matcher.query.run_detail")
    def test_dispatches_detail(self, mock_detail):
        assert query.main(["--debug", "--detail", "52772"]) == 0
        mock_detail.assert_called_once_with("52772", debug=True)

    @patch("recipe_matcher.query.run_detail", side_effect=NotFoundError("999"))
    def test_not_found_exit_code(self, mock_detail):
        assert query.main(["--detail", "999"]) == 1

    @patch("recipe_matcher.query._suggest", new_callable=AsyncMock)
    def test_run_query_selects_and_filters(self, mock_suggest, teriyaki):
        mock_suggest.return_value = [teriyaki]
        query.run_query("Chicken, rice, chicken", active_filter="Dinner")
        mock_suggest.assert_awaited_once_with(["chicken", "rice"], "Dinner")
