#!/usr/bin/env python3
"""Ad hoc query runner for the recipe suggestion engine.

Run suggestion or detail queries against TheMealDB from the terminal.

Usage:
    recipe-matcher "chicken, rice, onion"
    recipe-matcher --filter "Quick Meals" "chicken, rice"
    recipe-matcher --debug "chicken, rice"      # Show full JSON response
    recipe-matcher --detail 52772               # Step-by-step view of one recipe

Features:
- Comma-separated ingredient list, normalized and deduplicated
- Category filter chips (All Recipes, Quick Meals, Vegetarian, ...)
- Markdown or JSON output (OUTPUT_FORMAT)
- Debug mode to display full JSON with all fields
"""

import asyncio
import sys
from typing import List, Optional

from rich.console import Console
from rich.markdown import Markdown

from recipe_matcher.engine.filters import ALL_RECIPES, FILTER_OPTIONS, filter_by_category, select_ingredient_names
from recipe_matcher.engine.suggestions import RecipeSuggestionEngine
from recipe_matcher.models.models import RecipeSuggestion
from recipe_matcher.sources.errors import NotFoundError
from recipe_matcher.sources.mealdb import MealDBSource
from recipe_matcher.utils.config import config
from recipe_matcher.utils.logger import logger

console = Console()

USAGE = 'Usage: recipe-matcher [--debug] [--filter NAME] "<ingredient>, <ingredient>, ..." | --detail RECIPE_ID'


def format_suggestions_markdown(suggestions: List[RecipeSuggestion]) -> str:
    """Render a ranked suggestion list as markdown."""
    if not suggestions:
        return "_No recipes found for these ingredients._"

    lines = []
    for position, suggestion in enumerate(suggestions, start=1):
        recipe = suggestion.recipe
        estimates = suggestion.estimates
        lines.append(f"### {position}. {recipe.title} ({suggestion.match_percentage}% match)")
        lines.append(
            f"*{recipe.category} · {recipe.area} · ~{estimates.cook_time_min} mins · "
            f"serves {estimates.servings}*"
        )
        if suggestion.missing_ingredients:
            lines.append(f"**Missing:** {', '.join(suggestion.missing_ingredients)}")
        else:
            lines.append("**You have everything!**")
        lines.append("")
    return "\n".join(lines)


def format_detail_markdown(suggestion: RecipeSuggestion) -> str:
    """Render one recipe with ingredients and numbered steps as markdown."""
    recipe = suggestion.recipe
    estimates = suggestion.estimates
    lines = [
        f"# {recipe.title}",
        f"*{recipe.category} · {recipe.area}*",
        "",
        f"Prep ~{estimates.prep_time_min} mins · Cook ~{estimates.cook_time_min} mins · "
        f"Serves {estimates.servings} · ~{estimates.calories} kcal (estimates)",
    ]
    if suggestion.tags:
        lines.append(f"Tags: {', '.join(suggestion.tags)}")
    lines += ["", "## Ingredients"]
    lines += [f"- {ingredient.display()}" for ingredient in recipe.ingredients]
    lines += ["", "## Steps"]
    lines += [f"{number}. {step}" for number, step in enumerate(suggestion.steps, start=1)]
    if recipe.links.video:
        lines += ["", f"Video: {recipe.links.video}"]
    if recipe.links.source:
        lines.append(f"Source: {recipe.links.source}")
    return "\n".join(lines)


async def _suggest(ingredients: List[str], active_filter: str) -> List[RecipeSuggestion]:
    async with MealDBSource() as source:
        engine = RecipeSuggestionEngine(source)
        suggestions = await engine.get_suggestions(ingredients)
    return filter_by_category(suggestions, active_filter)


async def _detail(recipe_id: str) -> RecipeSuggestion:
    async with MealDBSource() as source:
        return await RecipeSuggestionEngine(source).get_detail(recipe_id)


def run_query(query: str, debug: bool = False, active_filter: str = ALL_RECIPES) -> None:
    """Fetch suggestions for a comma-separated ingredient list and print them.

    Args:
        query: Ingredients separated by commas, e.g. "chicken, rice".
        debug: If True, display full JSON response with all fields.
        active_filter: Category filter chip to apply after ranking.
    """
    ingredients = select_ingredient_names(query.split(","))
    logger.info(f"Selected ingredients: {ingredients} (filter: {active_filter})")

    suggestions = asyncio.run(_suggest(ingredients, active_filter))

    if debug or config.OUTPUT_FORMAT == "json":
        console.print_json(data=[s.model_dump(mode="json") for s in suggestions])
    else:
        console.print(Markdown(format_suggestions_markdown(suggestions)))


def run_detail(recipe_id: str, debug: bool = False) -> None:
    """Fetch one recipe and print its step-by-step view."""
    suggestion = asyncio.run(_detail(recipe_id))

    if debug or config.OUTPUT_FORMAT == "json":
        console.print_json(data=suggestion.model_dump(mode="json"))
    else:
        console.print(Markdown(format_detail_markdown(suggestion)))


def main(argv: Optional[List[str]] = None) -> int:
    """Parse flags and dispatch. Returns the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 1

    debug_mode = False
    active_filter = ALL_RECIPES
    recipe_id = None

    while args and args[0].startswith("--"):
        flag = args.pop(0)
        if flag == "--debug":
            debug_mode = True
        elif flag in ("--filter", "--detail"):
            if not args:
                print(f"Error: {flag} flag requires a value")
                return 1
            value = args.pop(0)
            if flag == "--detail":
                recipe_id = value
            elif value not in FILTER_OPTIONS:
                print(f"Error: unknown filter '{value}'. Options: {', '.join(FILTER_OPTIONS)}")
                return 1
            else:
                active_filter = value
        else:
            print(f"Unknown flag: {flag}")
            return 1

    try:
        if recipe_id is not None:
            run_detail(recipe_id, debug=debug_mode)
            return 0

        if not args:
            print("Error: No ingredients provided")
            print(USAGE)
            return 1

        # Join all arguments after flags (handles unquoted ingredient lists)
        run_query(" ".join(args), debug=debug_mode, active_filter=active_filter)
        return 0

    except NotFoundError as e:
        console.print(f"[red]✗ Recipe not found: {e.recipe_id}[/red]")
        return 1
    except KeyboardInterrupt:
        logger.info("Query interrupted by user.")
        return 0
    except Exception as e:
        logger.error(f"Query execution failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
