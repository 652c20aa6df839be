"""Recipe generation orchestrator.

Routes each request down one of two paths and reports which one produced the
result:

- No API key: fallback recipes, provenance FALLBACK (the network is never touched)
- API key: prompt -> OpenRouter -> normalizer, provenance MODEL

RemoteServiceError from OpenRouter is re-raised so callers can tell a broken
upstream apart from demo content. Every other failure is recovered with
fallback recipes.
"""

import time
from typing import Optional, Sequence

from src.clients.openrouter import OpenRouterClient
from src.fallback.mock_recipes import synthesize_recipes
from src.models.models import GenerationResult, Provenance
from src.parsers.recipe_parser import normalize_recipes
from src.prompts.prompts import build_recipe_prompt
from src.utils.errors import EmptyResponseError, RemoteServiceError
from src.utils.logger import logger


class RecipeGenerator:
    """Single-request orchestrator over the model client and fallback generator."""

    def __init__(self, client: OpenRouterClient) -> None:
        self.client = client

    @property
    def mode(self) -> str:
        """Source label this generator produces when the model path succeeds."""
        return Provenance.MODEL.source if self.client.has_credential else Provenance.FALLBACK.source

    def _fallback(self, ingredients: Sequence[str], surprise: bool) -> GenerationResult:
        recipes = synthesize_recipes(ingredients, surprise=surprise)
        logger.debug(f"Synthesized {len(recipes)} fallback recipe(s)", extra={"provenance": Provenance.FALLBACK.value})
        return GenerationResult(recipes=recipes, provenance=Provenance.FALLBACK)

    async def generate(
        self,
        ingredients: Sequence[str],
        dietary: str = "none",
        surprise: bool = False,
    ) -> GenerationResult:
        """Generate recipes for a list of ingredients.

        Args:
            ingredients: Trimmed, non-blank ingredient names (at least one).
            dietary: Dietary tag, "none" for no restriction.
            surprise: If True, request one unconventional recipe instead of three.

        Returns:
            GenerationResult with recipes and provenance.

        Raises:
            ValueError: If ingredients is empty.
            RemoteServiceError: If OpenRouter answered with a non-2xx status.
        """
        if not ingredients:
            raise ValueError("At least one ingredient is required")

        start = time.perf_counter()

        if not self.client.has_credential:
            logger.info(f"No OpenRouter key configured, serving fallback recipes (surprise={surprise})")
            return self._fallback(ingredients, surprise)

        prompt = build_recipe_prompt(ingredients, dietary, surprise=surprise)

        try:
            raw = await self.client.complete(prompt, surprise=surprise)
            recipes = normalize_recipes(raw)
            if not recipes:
                raise EmptyResponseError("AI response contained no recipes")
        except RemoteServiceError as e:
            logger.error(f"OpenRouter request failed: {e}")
            raise
        except Exception as e:
            logger.warning(f"Falling back to mock recipes due to error: {e}")
            return self._fallback(ingredients, surprise)

        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            f"Generated {len(recipes)} recipe(s) with {self.client.model} in {elapsed_ms}ms",
            extra={"provenance": Provenance.MODEL.value},
        )
        return GenerationResult(recipes=recipes, provenance=Provenance.MODEL)


def initialize_recipe_generator(client: Optional[OpenRouterClient] = None) -> RecipeGenerator:
    """Factory function wiring a RecipeGenerator from configuration.

    Args:
        client: Optional pre-built client (tests inject one with a stub transport).

    Returns:
        RecipeGenerator ready to serve requests.
    """
    client = client or OpenRouterClient.from_config()
    mode = "model" if client.has_credential else "fallback-only"
    logger.info(f"Recipe generator initialized ({mode} mode, model={client.model})")
    return RecipeGenerator(client)
