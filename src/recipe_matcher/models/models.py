"""Data models for the recipe suggestion engine.

Defines Pydantic models for recipe records fetched from the data source and
for the ranked suggestions handed to the UI layer.
All models use Pydantic v2 for strict validation and JSON serialization.
"""

from typing import List, Optional, Annotated
from pydantic import BaseModel, Field, field_validator, ConfigDict


class IngredientMeasure(BaseModel):
    """One ingredient line of a recipe with its free-text quantity."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    name: Annotated[str, Field(min_length=1, description="Ingredient name as published by the source")]
    measure: Annotated[str, Field("", description="Free-text measure, e.g. '2 cups' (may be empty)")]

    def display(self) -> str:
        """Format as ``name`` or ``name (measure)`` when a measure exists."""
        return f"{self.name} ({self.measure})" if self.measure else self.name


class RecipeSummary(BaseModel):
    """Search result row: just enough to identify and preview a recipe."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: Annotated[str, Field(min_length=1, description="Source-system recipe identifier")]
    title: Annotated[str, Field(description="Recipe name")]
    thumbnail_url: Annotated[str, Field("", description="URL to recipe thumbnail")]


class ExternalLinks(BaseModel):
    """Optional links published alongside a recipe."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    video: Annotated[Optional[str], Field(None, description="Video walkthrough URL")]
    source: Annotated[Optional[str], Field(None, description="Original recipe page URL")]

    @field_validator("video", "source", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """The source publishes empty strings for absent links."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class RecipeCandidate(BaseModel):
    """Full recipe record as fetched from the data source.

    Immutable for the duration of a suggestion request and never cached
    across requests.
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: Annotated[str, Field(min_length=1, description="Source-system recipe identifier (unique per batch)")]
    title: Annotated[str, Field(description="Recipe name")]
    thumbnail_url: Annotated[str, Field("", description="URL to recipe thumbnail")]
    category: Annotated[str, Field("Unknown", description="Recipe category, e.g. 'Seafood' or 'Side'")]
    area: Annotated[str, Field("Unknown", description="Cuisine or area of origin")]
    instructions: Annotated[str, Field("", description="Instructions as one block of text")]
    ingredients: Annotated[
        List[IngredientMeasure],
        Field(default_factory=list, max_length=20, description="Ordered ingredient lines (max 20)"),
    ]
    links: Annotated[ExternalLinks, Field(default_factory=ExternalLinks, description="Video and source links")]
    tags_text: Annotated[Optional[str], Field(None, description="Raw comma-separated tags")]


class RecipeEstimates(BaseModel):
    """Placeholder recipe metadata absent from the source API.

    These values are sampled at random inside fixed ranges. They are
    illustrative only and are not nutritional facts.
    """

    cook_time_min: Annotated[int, Field(ge=15, le=45, description="Cook time in minutes (15-45)")]
    prep_time_min: Annotated[int, Field(ge=5, le=20, description="Prep time in minutes (5-20)")]
    servings: Annotated[int, Field(ge=2, le=4, description="Number of servings (2-4)")]
    calories: Annotated[int, Field(ge=200, le=700, description="Calories per serving (200-700)")]


class RecipeSuggestion(BaseModel):
    """A candidate annotated with match quality, ready for display.

    Computed fresh for every request and discarded after display.
    """

    recipe: RecipeCandidate
    match_percentage: Annotated[int, Field(ge=0, le=100, description="Share of recipe ingredients the user has")]
    missing_ingredients: Annotated[
        List[str], Field(default_factory=list, description="Unmatched ingredients as 'name' or 'name (measure)'")
    ]
    estimates: RecipeEstimates
    tags: Annotated[List[str], Field(default_factory=list, description="Unique tags in published order")]
    steps: Annotated[List[str], Field(default_factory=list, description="Instruction lines, trimmed and non-empty")]
    description: Annotated[str, Field("", description="Instruction preview (first 100 chars + '...')")]

    @property
    def id(self) -> str:
        return self.recipe.id

    @property
    def title(self) -> str:
        return self.recipe.title
