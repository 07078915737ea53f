"""TheMealDB client implementing the recipe data source interface.

Endpoints used (v1 JSON API):
- filter.php?i=<ingredient>: recipes using an ingredient (id, name, thumbnail)
- lookup.php?i=<id>: full recipe record with up to 20 ingredient/measure pairs

Both endpoints answer ``{"meals": null}`` when nothing matches.
"""

import asyncio
import json
from typing import Any, List, Optional

import aiohttp

from recipe_matcher.models.models import ExternalLinks, IngredientMeasure, RecipeCandidate, RecipeSummary
from recipe_matcher.sources.base import RecipeDataSource
from recipe_matcher.sources.errors import DecodeError, NetworkError, NotFoundError
from recipe_matcher.utils.config import config
from recipe_matcher.utils.logger import logger

MAX_INGREDIENT_SLOTS = 20


def _text(value: Any) -> str:
    """Coerce an optional payload field to a stripped string."""
    return value.strip() if isinstance(value, str) else ""


def parse_ingredients(meal: dict) -> List[IngredientMeasure]:
    """Collect the strIngredientN/strMeasureN pairs of a meal record.

    Slots with a blank ingredient name are skipped; a missing measure becomes
    an empty string. Order follows the slot number.
    """
    ingredients: List[IngredientMeasure] = []
    for slot in range(1, MAX_INGREDIENT_SLOTS + 1):
        name = _text(meal.get(f"strIngredient{slot}"))
        if not name:
            continue
        ingredients.append(IngredientMeasure(name=name, measure=_text(meal.get(f"strMeasure{slot}"))))
    return ingredients


def _meals(payload: Any) -> List[dict]:
    """Extract the ``meals`` array, treating ``null`` as empty."""
    if not isinstance(payload, dict) or "meals" not in payload:
        raise DecodeError("Response has no 'meals' field")
    meals = payload["meals"]
    if meals is None:
        return []
    if not isinstance(meals, list) or not all(isinstance(m, dict) for m in meals):
        raise DecodeError("'meals' is not a list of objects")
    return meals


def parse_summaries(payload: Any) -> List[RecipeSummary]:
    """Decode a filter.php response into recipe summaries."""
    try:
        return [
            RecipeSummary(
                id=_text(meal.get("idMeal")),
                title=_text(meal.get("strMeal")),
                thumbnail_url=_text(meal.get("strMealThumb")),
            )
            for meal in _meals(payload)
        ]
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        raise DecodeError(f"Invalid recipe summary: {e}") from e


def parse_candidate(meal: dict) -> RecipeCandidate:
    """Decode one lookup.php meal record into a recipe candidate."""
    try:
        return RecipeCandidate(
            id=_text(meal.get("idMeal")),
            title=_text(meal.get("strMeal")),
            thumbnail_url=_text(meal.get("strMealThumb")),
            category=_text(meal.get("strCategory")) or "Unknown",
            area=_text(meal.get("strArea")) or "Unknown",
            instructions=meal.get("strInstructions") or "",
            ingredients=parse_ingredients(meal),
            links=ExternalLinks(video=meal.get("strYoutube"), source=meal.get("strSource")),
            tags_text=meal.get("strTags"),
        )
    except ValueError as e:
        raise DecodeError(f"Invalid recipe record: {e}") from e


class MealDBSource(RecipeDataSource):
    """Async TheMealDB client.

    Holds one aiohttp session, created on first use. Use as an async context
    manager (or call ``close()``) to release it.
    """

    name = "TheMealDB"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root. Defaults to MEALDB_BASE_URL.
            timeout_seconds: Total per-call timeout. Defaults to REQUEST_TIMEOUT_SECONDS.
            session: Optional externally managed session (not closed by this client).
        """
        self.base_url = (base_url or config.MEALDB_BASE_URL).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds or config.REQUEST_TIMEOUT_SECONDS)
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "MealDBSource":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def _get_json(self, endpoint: str, params: dict[str, str]) -> Any:
        """GET an endpoint and decode its JSON body.

        Raises:
            NetworkError: On connection failure, timeout, or non-200 status.
            DecodeError: If the body is not valid UTF-8 JSON.
        """
        url = f"{self.base_url}/{endpoint}"
        logger.debug(f"GET {url} params={params}")
        try:
            async with self._get_session().get(url, params=params) as response:
                if response.status != 200:
                    raise NetworkError(f"{endpoint} returned HTTP {response.status}")
                body = await response.read()
        except asyncio.TimeoutError as e:
            raise NetworkError(f"{endpoint} timed out after {self.timeout.total}s") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"{endpoint} request failed: {e}") from e

        # Raw bytes go to json.loads so a bad encoding surfaces here, not in aiohttp
        try:
            return json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodeError(f"{endpoint} returned invalid JSON: {e}") from e

    async def search_by_ingredient(self, ingredient: str) -> List[RecipeSummary]:
        payload = await self._get_json("filter.php", {"i": ingredient})
        summaries = parse_summaries(payload)
        logger.debug(f"Found {len(summaries)} recipes for ingredient '{ingredient}'")
        return summaries

    async def get_by_id(self, recipe_id: str) -> RecipeCandidate:
        payload = await self._get_json("lookup.php", {"i": recipe_id})
        meals = _meals(payload)
        if not meals:
            raise NotFoundError(recipe_id)
        return parse_candidate(meals[0])
