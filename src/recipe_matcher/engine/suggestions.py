"""Recipe suggestion engine.

Pipeline for one request (stateless, nothing cached between requests):

1. aggregate(): one search per selected ingredient (first 5), deduplicated,
   capped at 10 candidates
2. detail fetch: one lookup per candidate, at most MAX_CONCURRENT_FETCHES
   in flight, failures dropped
3. score(): match percentage and missing ingredients per candidate
4. rank(): stable sort by match percentage, highest first

Per-item failures (a search or a lookup) are logged and skipped; they never
abort the request. The worst outcome is an empty or partial list.
"""

import asyncio
from typing import List, Optional, Sequence

from recipe_matcher.engine.aggregate import aggregate
from recipe_matcher.engine.detail import assemble_detail, build_suggestion
from recipe_matcher.engine.estimates import Estimator
from recipe_matcher.engine.ranking import rank
from recipe_matcher.engine.scoring import score
from recipe_matcher.models.models import RecipeCandidate, RecipeSuggestion, RecipeSummary
from recipe_matcher.sources.base import RecipeDataSource
from recipe_matcher.sources.errors import RecipeSourceError
from recipe_matcher.utils.config import config
from recipe_matcher.utils.helpers import safe_execute_async
from recipe_matcher.utils.logger import logger


def _limit(name: str, value: Optional[int], default: int) -> int:
    """Resolve an engine limit, falling back to config only when unset."""
    if value is None:
        return default
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got: {value}")
    return value


class RecipeSuggestionEngine:
    """Turns a set of selected ingredients into ranked recipe suggestions."""

    def __init__(
        self,
        source: RecipeDataSource,
        max_ingredients_queried: Optional[int] = None,
        max_candidates: Optional[int] = None,
        max_concurrency: Optional[int] = None,
        estimator: Optional[Estimator] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            source: Recipe data source (TheMealDB client or a test fake).
            max_ingredients_queried: Search call cap. Defaults to MAX_INGREDIENTS_QUERIED.
            max_candidates: Candidate cap. Defaults to MAX_CANDIDATES.
            max_concurrency: Concurrent lookup cap. Defaults to MAX_CONCURRENT_FETCHES.
            estimator: Placeholder metadata sampler. Defaults to one seeded with ESTIMATE_SEED.

        Raises:
            ValueError: If an explicit limit is below 1.
        """
        self.source = source
        self.max_ingredients_queried = _limit(
            "max_ingredients_queried", max_ingredients_queried, config.MAX_INGREDIENTS_QUERIED
        )
        self.max_candidates = _limit("max_candidates", max_candidates, config.MAX_CANDIDATES)
        self.max_concurrency = _limit("max_concurrency", max_concurrency, config.MAX_CONCURRENT_FETCHES)
        self.estimator = estimator if estimator is not None else Estimator(seed=config.ESTIMATE_SEED)

    async def _fetch_candidates(self, summaries: Sequence[RecipeSummary]) -> List[RecipeCandidate]:
        """Look up every summary concurrently, keeping aggregation order."""
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _fetch(summary: RecipeSummary) -> Optional[RecipeCandidate]:
            async with semaphore:
                return await safe_execute_async(
                    self.source.get_by_id(summary.id),
                    f"Detail lookup for recipe {summary.id} failed, dropping candidate",
                    default_return=None,
                    catch=(RecipeSourceError,),
                    extra={"recipe_id": summary.id},
                )

        results = await asyncio.gather(*(_fetch(summary) for summary in summaries))
        return [candidate for candidate in results if candidate is not None]

    async def get_suggestions(self, selected_ingredients: Sequence[str]) -> List[RecipeSuggestion]:
        """Rank recipes by how many of their ingredients the user already has.

        Args:
            selected_ingredients: Ingredient names chosen by the user.

        Returns:
            Suggestions sorted by match percentage (descending, ties in
            aggregation order). Empty for an empty selection, without
            touching the data source.
        """
        if not selected_ingredients:
            return []

        summaries = await aggregate(
            self.source,
            selected_ingredients,
            max_ingredients_queried=self.max_ingredients_queried,
            max_candidates=self.max_candidates,
        )
        if not summaries:
            logger.info("No recipes found for the selected ingredients")
            return []

        candidates = await self._fetch_candidates(summaries)

        scored = []
        for candidate in candidates:
            percentage, missing = score(candidate, selected_ingredients)
            scored.append(build_suggestion(candidate, percentage, missing, self.estimator))

        suggestions = rank(scored)
        logger.info(
            f"Built {len(suggestions)} suggestion(s) from {len(summaries)} candidate(s)"
        )
        return suggestions

    async def get_detail(self, recipe_id: str) -> RecipeSuggestion:
        """Single-recipe detail view.

        Raises:
            NotFoundError: If the source has no record for ``recipe_id``.
        """
        return await assemble_detail(self.source, recipe_id, self.estimator)
