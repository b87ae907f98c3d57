"""
Shared fixtures: a recording fake provider and an app wired to it.
"""

from __future__ import annotations

import base64
from typing import Any

import pytest
from fastapi.testclient import TestClient

from design_studio.api.app import create_app
from design_studio.config import Settings
from design_studio.providers.base import ContentPart, InlineImage


class FakeProvider:
    """Stands in for Gemini. Canned answers are set per test; every call is recorded."""

    name = "fake"

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.text = "plain answer"
        self.structured_text = '{"a": 1}'
        # Answers for multimodal calls, consumed in order; "{}" once exhausted.
        self.multimodal_texts: list[str] = []
        self.images: list[InlineImage] = [InlineImage(data="AAAA", mime_type="image/jpeg")]
        self.edit_parts: list[ContentPart] = [
            ContentPart(text="done"),
            ContentPart(inline_data=InlineImage(data="BBBB", mime_type="image/png")),
        ]
        self.error: Exception | None = None

    def _record(self, method: str, **kwargs: Any) -> None:
        self.calls.append((method, kwargs))
        if self.error is not None:
            raise self.error

    def calls_to(self, method: str) -> list[dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == method]

    async def text_completion(self, prompt: str) -> str:
        self._record("text_completion", prompt=prompt)
        return self.text

    async def structured_completion(self, prompt: str, schema: dict[str, Any]) -> str:
        self._record("structured_completion", prompt=prompt, schema=schema)
        return self.structured_text

    async def multimodal_completion(
        self,
        prompt: str,
        images: list[InlineImage],
        *,
        json_output: bool = False,
        schema: dict[str, Any] | None = None,
    ) -> str:
        self._record("multimodal_completion", prompt=prompt, images=images, json_output=json_output, schema=schema)
        if self.multimodal_texts:
            return self.multimodal_texts.pop(0)
        return "{}"

    async def image_edit_completion(self, prompt: str, image: InlineImage) -> list[ContentPart]:
        self._record("image_edit_completion", prompt=prompt, image=image)
        return list(self.edit_parts)

    async def text_to_image(self, prompt: str, count: int, aspect_ratio: str) -> list[InlineImage]:
        self._record("text_to_image", prompt=prompt, count=count, aspect_ratio=aspect_ratio)
        return list(self.images)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, api_key="test-key")


@pytest.fixture
def app(test_settings, provider):
    return create_app(settings=test_settings, provider_factory=lambda cfg: provider)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def wire_image() -> dict[str, str]:
    return {"data": base64.b64encode(b"\x89PNG fake").decode("ascii"), "mimeType": "image/png"}


def post_action(client: TestClient, action: str, payload: Any):
    return client.post("/api/gemini", json={"action": action, "payload": payload})
