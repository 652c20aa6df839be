"""Shared fixtures for unit tests.

Network access is replaced by httpx.MockTransport; `openrouter_stub` records
every request so tests can assert on call counts and payloads.
"""

import json
from typing import Callable, List

import httpx
import pytest

from src.clients.openrouter import OpenRouterClient


class OpenRouterStub:
    """Programmable stand-in for the OpenRouter completion endpoint."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: object = {"choices": [{"message": {"content": "[]"}}]}
        self.raw_body: bytes | None = None
        self.error: Exception | None = None

    def reply_with_content(self, content: str) -> None:
        self.status_code = 200
        self.body = {"choices": [{"message": {"content": content}}]}
        self.raw_body = None

    def reply_with_status(self, status_code: int, body: object = None, raw_body: bytes | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.raw_body = raw_body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def openrouter_stub() -> OpenRouterStub:
    return OpenRouterStub()


@pytest.fixture
def make_client(openrouter_stub) -> Callable[..., OpenRouterClient]:
    """Factory for clients wired to the stub transport."""

    def _make(api_key: str = "test-key", **kwargs) -> OpenRouterClient:
        return OpenRouterClient(
            api_key=api_key,
            base_url="https://openrouter.test/api/v1",
            transport=httpx.MockTransport(openrouter_stub.handler),
            **kwargs,
        )

    return _make


@pytest.fixture
def recipe_payload() -> list[dict]:
    """Three well-formed recipes as a model would return them."""
    return [
        {
            "name": "Shakshuka",
            "description": "Eggs poached in spiced tomato sauce",
            "ingredients": ["4 eggs", "400g tomatoes", "1 onion"],
            "steps": ["Soften the onion", "Add tomatoes and simmer", "Crack in eggs and cover"],
            "cookTime": "25 minutes",
            "difficulty": "Easy",
            "tips": "Serve with crusty bread",
        },
        {
            "name": "Tomato Omelette",
            "description": "A quick folded omelette",
            "ingredients": ["3 eggs", "1 tomato"],
            "steps": ["Whisk eggs", "Cook with diced tomato", "Fold and serve"],
            "cookTime": "10 minutes",
            "difficulty": "Easy",
            "tips": "Keep the heat moderate",
        },
        {
            "name": "Baked Eggs in Tomatoes",
            "description": "Hollowed tomatoes filled with egg",
            "ingredients": ["4 large tomatoes", "4 eggs"],
            "steps": ["Hollow the tomatoes", "Crack an egg into each", "Bake for 20 minutes"],
            "cookTime": "30 minutes",
            "difficulty": "Medium",
            "tips": "Pick firm tomatoes",
        },
    ]
