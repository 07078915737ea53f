"""Fan-out ingredient search and candidate deduplication."""

import asyncio
from typing import List, Sequence

from recipe_matcher.engine.normalize import query_term
from recipe_matcher.models.models import RecipeSummary
from recipe_matcher.sources.base import RecipeDataSource
from recipe_matcher.sources.errors import RecipeSourceError
from recipe_matcher.utils.helpers import safe_execute_async
from recipe_matcher.utils.logger import logger


def dedupe_summaries(result_lists: Sequence[Sequence[RecipeSummary]]) -> List[RecipeSummary]:
    """Flatten per-query results keeping the first occurrence of each id."""
    seen: set[str] = set()
    unique: List[RecipeSummary] = []
    for results in result_lists:
        for summary in results:
            if summary.id in seen:
                continue
            seen.add(summary.id)
            unique.append(summary)
    return unique


async def aggregate(
    source: RecipeDataSource,
    selected_ingredients: Sequence[str],
    max_ingredients_queried: int = 5,
    max_candidates: int = 10,
) -> List[RecipeSummary]:
    """Search the source once per selected ingredient and merge the results.

    Only the first ``max_ingredients_queried`` ingredients (input order) are
    searched, each by its first word. Searches run concurrently but results
    are merged in query order, so the output does not depend on which call
    finishes first. A failing search is logged and contributes nothing.

    Args:
        source: Recipe data source to query.
        selected_ingredients: Ingredient names chosen by the user.
        max_ingredients_queried: Cap on the number of search calls.
        max_candidates: Cap on the number of unique summaries returned.

    Returns:
        Unique recipe summaries in first-seen order, at most ``max_candidates``.
        Empty when every search fails or finds nothing.
    """
    terms = [query_term(name) for name in selected_ingredients[:max_ingredients_queried]]
    terms = [term for term in terms if term]
    if not terms:
        return []

    logger.debug(f"Searching {len(terms)} ingredient(s): {terms}")
    result_lists = await asyncio.gather(
        *(
            safe_execute_async(
                source.search_by_ingredient(term),
                f"Search by ingredient '{term}' failed, skipping",
                default_return=[],
                catch=(RecipeSourceError,),
                extra={"ingredient": term},
            )
            for term in terms
        )
    )

    candidates = dedupe_summaries(result_lists)[:max_candidates]
    logger.info(f"Aggregated {len(candidates)} unique candidate(s) from {len(terms)} search(es)")
    return candidates
