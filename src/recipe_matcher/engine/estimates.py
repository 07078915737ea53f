"""Placeholder cook time, prep time, servings and calorie estimates.

TheMealDB does not publish timing, serving or nutrition data. The values
produced here are uniform random samples inside fixed ranges so the UI has
plausible-looking metadata to show. They are not derived from the recipe.
"""

import random
from typing import Optional

from recipe_matcher.models.models import RecipeEstimates

COOK_TIME_RANGE = (15, 45)
PREP_TIME_RANGE = (5, 20)
SERVINGS_RANGE = (2, 4)
CALORIES_RANGE = (200, 700)


class Estimator:
    """Samples placeholder recipe metadata.

    Pass ``seed`` (or a prepared ``random.Random``) for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        self.rng = rng or random.Random(seed)

    def estimate(self) -> RecipeEstimates:
        """Return one set of estimates; every range is inclusive."""
        return RecipeEstimates(
            cook_time_min=self.rng.randint(*COOK_TIME_RANGE),
            prep_time_min=self.rng.randint(*PREP_TIME_RANGE),
            servings=self.rng.randint(*SERVINGS_RANGE),
            calories=self.rng.randint(*CALORIES_RANGE),
        )
