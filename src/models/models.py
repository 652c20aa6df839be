"""Data models and schemas for the SmartChef recipe service.

Defines Pydantic models for request/response validation and domain objects.
All models use Pydantic v2; JSON field names follow the web client's camelCase
(cookTime, surpriseMe) through aliases while Python code uses snake_case.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Provenance(str, Enum):
    """Which path produced a generation result."""

    MODEL = "model"
    FALLBACK = "fallback"

    @property
    def source(self) -> str:
        """Label rendered to the web client ("ai" or "mock")."""
        return "ai" if self is Provenance.MODEL else "mock"


class Recipe(BaseModel):
    """Canonical recipe produced by the generator.

    Every field is always present: the normalizer and the fallback generator
    fill defaults for anything the source data lacks.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, description="Recipe name")
    description: str = Field("A delicious recipe", description="Short description of the dish")
    ingredients: List[str] = Field(default_factory=list, description="Ingredients with quantities")
    steps: List[str] = Field(default_factory=list, description="Ordered cooking steps")
    cook_time: str = Field("30 minutes", alias="cookTime", description="Total cooking time")
    difficulty: str = Field("Medium", description="Easy, Medium or Hard by convention")
    tips: str = Field("Enjoy your cooking!", description="Tips or substitutions")


class GenerationRequest(BaseModel):
    """Request schema for recipe generation.

    Ingredients are trimmed and blank entries dropped; at least one must remain.
    Duplicates are kept as given.
    """

    model_config = ConfigDict(populate_by_name=True)

    ingredients: List[str] = Field(
        default_factory=list, validate_default=True, description="Available ingredients (at least one)"
    )
    dietary: str = Field("none", description='Dietary preference; "none" means unconstrained')
    surprise_me: bool = Field(
        False, alias="surpriseMe", description="Return one unconventional recipe instead of three"
    )

    @field_validator("ingredients", mode="before")
    @classmethod
    def clean_ingredients(cls, value) -> list[str]:
        """Reject missing/empty lists, then trim entries and drop blanks."""
        if not value or not isinstance(value, list):
            raise ValueError("Please provide at least one ingredient")

        cleaned = [item.strip() for item in value if isinstance(item, str) and item.strip()]
        if not cleaned:
            raise ValueError("Please provide valid ingredients")
        return cleaned

    @field_validator("dietary", mode="before")
    @classmethod
    def default_dietary(cls, value: Optional[str]) -> str:
        """Treat a missing or empty dietary tag as "none"."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return "none"
        return value

    @field_validator("surprise_me", mode="before")
    @classmethod
    def default_surprise(cls, value) -> bool:
        """Treat null as False."""
        return False if value is None else value


class GenerationResult(BaseModel):
    """Recipes plus the provenance of the path that produced them."""

    recipes: List[Recipe]
    provenance: Provenance

    @property
    def source(self) -> str:
        return self.provenance.source


class RecipeOut(Recipe):
    """Recipe as returned over HTTP, with a caller-assigned identifier."""

    id: int = Field(description="Identifier assigned by the API layer")


class GenerationResponse(BaseModel):
    """Response schema for POST /api/generate-recipes."""

    recipes: List[RecipeOut]
    source: str = Field(description='"ai" for model output, "mock" for fallback recipes')


class ErrorResponse(BaseModel):
    """Error body returned on 4xx/5xx."""

    error: str
