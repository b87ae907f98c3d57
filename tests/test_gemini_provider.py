"""
Tests for the google-genai backed provider, with the SDK client mocked out.
"""

import asyncio
import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from design_studio.config import Settings
from design_studio.providers.base import ContentPart, InlineImage
from design_studio.providers.gemini_provider import GeminiProvider


@pytest.fixture
def sdk_client():
    client = Mock()
    client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text="ok"))
    client.aio.models.generate_images = AsyncMock()
    return client


@pytest.fixture
def gemini(sdk_client):
    return GeminiProvider(api_key="k", settings=Settings(_env_file=None, api_key="k"), client=sdk_client)


def _run(coro):
    return asyncio.run(coro)


class TestTextCalls:
    def test_text_completion(self, gemini, sdk_client):
        assert _run(gemini.text_completion("hello")) == "ok"
        kwargs = sdk_client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "hello"

    def test_missing_text_becomes_empty_string(self, gemini, sdk_client):
        sdk_client.aio.models.generate_content.return_value = SimpleNamespace(text=None)
        assert _run(gemini.text_completion("hello")) == ""

    def test_structured_completion_requests_json(self, gemini, sdk_client):
        sdk_client.aio.models.generate_content.return_value = SimpleNamespace(text='  {"a": 1}\n')
        schema = {"type": "OBJECT", "properties": {"a": {"type": "INTEGER"}}}

        assert _run(gemini.structured_completion("give a", schema)) == '{"a": 1}'
        config = sdk_client.aio.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"
        assert config.response_schema is not None

    def test_multimodal_puts_images_before_text(self, gemini, sdk_client):
        image = InlineImage(data=base64.b64encode(b"pixels").decode(), mime_type="image/png")
        _run(gemini.multimodal_completion("describe", [image]))

        kwargs = sdk_client.aio.models.generate_content.call_args.kwargs
        first, second = kwargs["contents"]
        assert first.inline_data.data == b"pixels"
        assert first.inline_data.mime_type == "image/png"
        assert second.text == "describe"
        assert kwargs["config"] is None

    def test_multimodal_json_mode(self, gemini, sdk_client):
        _run(gemini.multimodal_completion("tag", [], json_output=True))
        config = sdk_client.aio.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"


class TestImageCalls:
    def test_text_to_image_encodes_bytes(self, gemini, sdk_client):
        sdk_client.aio.models.generate_images.return_value = SimpleNamespace(
            generated_images=[
                SimpleNamespace(image=SimpleNamespace(image_bytes=b"\x00\x00\x00")),
                SimpleNamespace(image=SimpleNamespace(image_bytes=None)),
            ]
        )

        images = _run(gemini.text_to_image("a red circle", 2, "16:9"))

        assert images == [InlineImage(data="AAAA", mime_type="image/jpeg")]
        kwargs = sdk_client.aio.models.generate_images.call_args.kwargs
        assert kwargs["model"] == "imagen-4.0-generate-001"
        assert kwargs["config"].number_of_images == 2
        assert kwargs["config"].aspect_ratio == "16:9"
        assert kwargs["config"].output_mime_type == "image/jpeg"

    def test_text_to_image_without_results(self, gemini, sdk_client):
        sdk_client.aio.models.generate_images.return_value = SimpleNamespace(generated_images=None)
        assert _run(gemini.text_to_image("x", 1, "1:1")) == []

    def test_image_edit_reads_first_candidate_parts(self, gemini, sdk_client):
        parts = [
            SimpleNamespace(text="Here you go", inline_data=None),
            SimpleNamespace(text=None, inline_data=SimpleNamespace(data=b"\x00\x00\x00", mime_type="image/png")),
            SimpleNamespace(text=None, inline_data=None),
        ]
        sdk_client.aio.models.generate_content.return_value = SimpleNamespace(
            candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))]
        )
        image = InlineImage(data=base64.b64encode(b"src").decode(), mime_type="image/jpeg")

        result = _run(gemini.image_edit_completion("make it blue", image))

        assert result == [
            ContentPart(text="Here you go"),
            ContentPart(inline_data=InlineImage(data="AAAA", mime_type="image/png")),
        ]
        kwargs = sdk_client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash-image"
        assert [str(m).upper() for m in kwargs["config"].response_modalities] == ["IMAGE", "TEXT"]

    def test_image_edit_without_candidates(self, gemini, sdk_client):
        sdk_client.aio.models.generate_content.return_value = SimpleNamespace(candidates=[])
        image = InlineImage(data="AAAA", mime_type="image/png")
        assert _run(gemini.image_edit_completion("p", image)) == []
