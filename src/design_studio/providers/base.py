from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class InlineImage:
    # Base64 payload only, never a data URL.
    data: str
    mime_type: str

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


@dataclass(frozen=True)
class ContentPart:
    text: str | None = None
    inline_data: InlineImage | None = None


class GenerativeProvider(Protocol):
    name: str

    async def text_completion(self, prompt: str) -> str: ...

    async def structured_completion(self, prompt: str, schema: dict[str, Any]) -> str: ...

    async def multimodal_completion(
        self,
        prompt: str,
        images: list[InlineImage],
        *,
        json_output: bool = False,
        schema: dict[str, Any] | None = None,
    ) -> str: ...

    async def image_edit_completion(self, prompt: str, image: InlineImage) -> list[ContentPart]: ...

    async def text_to_image(self, prompt: str, count: int, aspect_ratio: str) -> list[InlineImage]: ...
