"""Error taxonomy for recipe generation.

Only RemoteServiceError is meant to reach callers of the generator; every other
RecipeGenerationError is recovered by serving fallback recipes.
"""

from typing import Optional


class RecipeGenerationError(Exception):
    """Base class for failures inside the generation pipeline."""


class RemoteServiceError(RecipeGenerationError):
    """The completion endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.message = message or "Unknown error"
        super().__init__(f"OpenRouter API error: {status_code} - {self.message}")


class EmptyResponseError(RecipeGenerationError):
    """The completion endpoint succeeded but returned no usable content."""


class ParseError(RecipeGenerationError):
    """A reply could not be parsed into recipe data."""


class MissingCredentialError(RecipeGenerationError):
    """The model client was asked to call out without an API key."""
