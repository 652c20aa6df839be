"""Unit tests for the recipe generation orchestrator.

Tests cover:
- Fallback-only mode (no key, no network)
- Model path success and provenance
- Recovery to fallback for parse, empty and transport failures
- RemoteServiceError propagation
"""

import json

import httpx
import pytest

from src.models.models import Provenance
from src.services.recipe_generator import RecipeGenerator, initialize_recipe_generator
from src.utils.errors import RemoteServiceError


@pytest.fixture
def make_generator(make_client):
    def _make(api_key: str = "test-key") -> RecipeGenerator:
        return RecipeGenerator(make_client(api_key=api_key))

    return _make


class TestFallbackOnlyMode:
    """Test generation without an API key."""

    @pytest.mark.asyncio
    async def test_no_key_serves_fallback_without_network(self, make_generator, openrouter_stub):
        """Test three fallback recipes and zero outbound calls."""
        result = await make_generator(api_key="").generate(["eggs", "tomatoes"])

        assert openrouter_stub.call_count == 0
        assert result.provenance == Provenance.FALLBACK
        assert result.source == "mock"
        assert result.recipes[0].name == "Classic eggs, tomatoes Skillet"
        assert len(result.recipes) == 3

    @pytest.mark.asyncio
    async def test_no_key_surprise_serves_single_recipe(self, make_generator, openrouter_stub):
        result = await make_generator(api_key="").generate(["eggs"], surprise=True)

        assert openrouter_stub.call_count == 0
        assert [r.name for r in result.recipes] == ["Fusion eggs Delight"]

    def test_mode_reflects_credential(self, make_generator):
        assert make_generator(api_key="").mode == "mock"
        assert make_generator().mode == "ai"


class TestModelPath:
    """Test generation through OpenRouter."""

    @pytest.mark.asyncio
    async def test_success_returns_model_recipes(self, make_generator, openrouter_stub, recipe_payload):
        """Test a fenced array reply becomes model-provenance recipes."""
        openrouter_stub.reply_with_content(f"```json\n{json.dumps(recipe_payload)}\n```")

        result = await make_generator().generate(["eggs", "tomatoes"], "vegetarian")

        assert openrouter_stub.call_count == 1
        assert result.provenance == Provenance.MODEL
        assert result.source == "ai"
        assert [r.name for r in result.recipes] == ["Shakshuka", "Tomato Omelette", "Baked Eggs in Tomatoes"]

    @pytest.mark.asyncio
    async def test_prompt_carries_ingredients_and_dietary(self, make_generator, openrouter_stub, recipe_payload):
        openrouter_stub.reply_with_content(json.dumps(recipe_payload))

        await make_generator().generate(["eggs", "tomatoes"], "vegetarian")

        prompt = openrouter_stub.last_payload()["messages"][0]["content"]
        assert "eggs, tomatoes" in prompt
        assert "vegetarian" in prompt
        assert openrouter_stub.last_payload()["temperature"] == 0.7

    @pytest.mark.asyncio
    async def test_surprise_object_reply_wrapped(self, make_generator, openrouter_stub, recipe_payload):
        """Test a single object reply in surprise mode yields one recipe."""
        openrouter_stub.reply_with_content(json.dumps(recipe_payload[0]))

        result = await make_generator().generate(["eggs"], surprise=True)

        assert openrouter_stub.last_payload()["temperature"] == 0.9
        assert len(result.recipes) == 1
        assert result.provenance == Provenance.MODEL

    @pytest.mark.asyncio
    async def test_model_count_is_not_enforced(self, make_generator, openrouter_stub, recipe_payload):
        """Test an array reply in surprise mode is returned as-is."""
        openrouter_stub.reply_with_content(json.dumps(recipe_payload))

        result = await make_generator().generate(["eggs"], surprise=True)

        assert len(result.recipes) == 3

    @pytest.mark.asyncio
    async def test_partial_recipe_defaulted(self, make_generator, openrouter_stub):
        openrouter_stub.reply_with_content('[{"name": "Soup"}]')

        result = await make_generator().generate(["water"])

        assert result.recipes[0].difficulty == "Medium"
        assert result.provenance == Provenance.MODEL


class TestRecovery:
    """Test recoverable failures are replaced by fallback recipes."""

    @pytest.mark.asyncio
    async def test_unparseable_reply_falls_back(self, make_generator, openrouter_stub):
        """Test a prose reply yields fallback recipes tagged as such."""
        openrouter_stub.reply_with_content("Sorry, I cannot help with that.")

        result = await make_generator().generate(["eggs", "tomatoes"])

        assert result.provenance == Provenance.FALLBACK
        assert result.recipes[0].name == "Classic eggs, tomatoes Skillet"

    @pytest.mark.asyncio
    async def test_empty_choices_fall_back(self, make_generator, openrouter_stub):
        openrouter_stub.reply_with_status(200, {"choices": []})

        result = await make_generator().generate(["eggs"])

        assert result.provenance == Provenance.FALLBACK
        assert len(result.recipes) == 3

    @pytest.mark.asyncio
    async def test_empty_array_falls_back(self, make_generator, openrouter_stub):
        """Test a reply with zero recipes is treated as unusable."""
        openrouter_stub.reply_with_content("[]")

        result = await make_generator().generate(["eggs"], surprise=True)

        assert result.provenance == Provenance.FALLBACK
        assert [r.name for r in result.recipes] == ["Fusion eggs Delight"]

    @pytest.mark.asyncio
    async def test_transport_error_falls_back(self, make_generator, openrouter_stub):
        openrouter_stub.error = httpx.ReadTimeout("timed out")

        result = await make_generator().generate(["eggs"])

        assert openrouter_stub.call_count == 1
        assert result.provenance == Provenance.FALLBACK


class TestPropagation:
    """Test failures that reach the caller."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 429, 500, 503])
    async def test_remote_service_error_propagates(self, make_generator, openrouter_stub, status):
        """Test non-2xx statuses are not masked by fallback recipes."""
        openrouter_stub.reply_with_status(status, {"error": {"message": "upstream says no"}})

        with pytest.raises(RemoteServiceError) as exc:
            await make_generator().generate(["eggs"])

        assert exc.value.status_code == status
        assert openrouter_stub.call_count == 1

    @pytest.mark.asyncio
    async def test_empty_ingredients_rejected(self, make_generator, openrouter_stub):
        with pytest.raises(ValueError):
            await make_generator().generate([])
        assert openrouter_stub.call_count == 0


class TestInitializeRecipeGenerator:
    """Test the factory function."""

    def test_uses_injected_client(self, make_client):
        client = make_client()
        assert initialize_recipe_generator(client).client is client

    def test_builds_client_from_config(self, monkeypatch):
        from src.utils.config import config

        monkeypatch.setattr(config, "OPENROUTER_API_KEY", "")
        generator = initialize_recipe_generator()

        assert generator.client.has_credential is False
        assert generator.mode == "mock"
