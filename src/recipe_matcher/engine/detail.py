"""Expansion of a recipe record into display-ready detail."""

from typing import List, Optional, Sequence

from recipe_matcher.engine.estimates import Estimator
from recipe_matcher.models.models import RecipeCandidate, RecipeSuggestion
from recipe_matcher.sources.base import RecipeDataSource
from recipe_matcher.utils.logger import logger

DESCRIPTION_LENGTH = 100


def split_steps(instructions: str) -> List[str]:
    """Split instruction text into trimmed, non-empty lines."""
    return [line.strip() for line in instructions.splitlines() if line.strip()]


def parse_tags(tags_text: Optional[str]) -> List[str]:
    """Split comma-separated tags, dropping blanks and repeats."""
    if not tags_text:
        return []
    tags: List[str] = []
    for tag in tags_text.split(","):
        tag = tag.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def describe(instructions: str) -> str:
    """Short preview of the instructions for recipe cards."""
    return instructions[:DESCRIPTION_LENGTH] + "..."


def build_suggestion(
    candidate: RecipeCandidate,
    match_percentage: int,
    missing_ingredients: Sequence[str],
    estimator: Estimator,
) -> RecipeSuggestion:
    """Wrap a candidate with its score and display fields."""
    return RecipeSuggestion(
        recipe=candidate,
        match_percentage=match_percentage,
        missing_ingredients=list(missing_ingredients),
        estimates=estimator.estimate(),
        tags=parse_tags(candidate.tags_text),
        steps=split_steps(candidate.instructions),
        description=describe(candidate.instructions),
    )


async def assemble_detail(source: RecipeDataSource, recipe_id: str, estimator: Estimator) -> RecipeSuggestion:
    """Fetch one recipe and expand it for the step-by-step view.

    Outside a selection there is nothing to match against, so the match
    percentage is fixed at 100 and nothing is reported missing.

    Raises:
        NotFoundError: If the source has no record for ``recipe_id``.
        NetworkError, DecodeError: On transport or payload failure.
    """
    candidate = await source.get_by_id(recipe_id)
    logger.info(f"Loaded recipe {candidate.id} '{candidate.title}'", extra={"recipe_id": candidate.id})
    return build_suggestion(candidate, 100, [], estimator)
