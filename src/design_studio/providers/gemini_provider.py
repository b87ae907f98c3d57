from __future__ import annotations

import base64
from typing import Any

from design_studio.config import Settings, settings as default_settings
from design_studio.providers.base import ContentPart, InlineImage


class GeminiProvider:
    name = "gemini"

    def __init__(self, api_key: str, settings: Settings | None = None, client: Any | None = None) -> None:
        # Imported lazily so the app can start without the dependency installed.
        from google import genai  # type: ignore
        from google.genai import types  # type: ignore

        self._types = types
        self.settings = settings or default_settings
        self.client = client if client is not None else genai.Client(api_key=api_key)

    async def text_completion(self, prompt: str) -> str:
        resp = await self.client.aio.models.generate_content(
            model=self.settings.gemini_text_model,
            contents=prompt,
        )
        return getattr(resp, "text", "") or ""

    async def structured_completion(self, prompt: str, schema: dict[str, Any]) -> str:
        resp = await self.client.aio.models.generate_content(
            model=self.settings.gemini_text_model,
            contents=prompt,
            config=self._types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        return (getattr(resp, "text", "") or "").strip()

    async def multimodal_completion(
        self,
        prompt: str,
        images: list[InlineImage],
        *,
        json_output: bool = False,
        schema: dict[str, Any] | None = None,
    ) -> str:
        """
        Image parts go first, followed by the instruction text. A schema implies JSON output.
        """
        contents: list[Any] = [self._image_part(img) for img in images]
        contents.append(self._types.Part.from_text(text=prompt))

        config = None
        if json_output or schema is not None:
            config = self._types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            )

        resp = await self.client.aio.models.generate_content(
            model=self.settings.gemini_text_model,
            contents=contents,
            config=config,
        )
        return getattr(resp, "text", "") or ""

    async def image_edit_completion(self, prompt: str, image: InlineImage) -> list[ContentPart]:
        resp = await self.client.aio.models.generate_content(
            model=self.settings.gemini_edit_model,
            contents=[self._image_part(image), self._types.Part.from_text(text=prompt)],
            config=self._types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"]),
        )
        return _extract_parts(resp)

    async def text_to_image(self, prompt: str, count: int, aspect_ratio: str) -> list[InlineImage]:
        mime_type = self.settings.image_output_mime_type
        resp = await self.client.aio.models.generate_images(
            model=self.settings.gemini_image_model,
            prompt=prompt,
            config=self._types.GenerateImagesConfig(
                number_of_images=count,
                aspect_ratio=aspect_ratio,
                output_mime_type=mime_type,
            ),
        )

        out: list[InlineImage] = []
        for gi in getattr(resp, "generated_images", None) or []:
            img_bytes = getattr(getattr(gi, "image", None), "image_bytes", None)
            if not img_bytes:
                continue
            out.append(InlineImage(data=_b64(img_bytes), mime_type=mime_type))
        return out

    def _image_part(self, image: InlineImage) -> Any:
        return self._types.Part.from_bytes(data=base64.b64decode(image.data), mime_type=image.mime_type)


def _b64(data: bytes | str) -> str:
    # The SDK hands back raw bytes; older builds returned base64 text already.
    if isinstance(data, str):
        return data
    return base64.b64encode(data).decode("ascii")


def _extract_parts(resp: Any) -> list[ContentPart]:
    candidates = getattr(resp, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    out: list[ContentPart] = []
    for part in getattr(content, "parts", None) or []:
        text = getattr(part, "text", None)
        if text:
            out.append(ContentPart(text=text))
            continue
        inline = getattr(part, "inline_data", None)
        data = getattr(inline, "data", None) if inline else None
        if not data:
            continue
        mime = getattr(inline, "mime_type", None) or "image/png"
        out.append(ContentPart(inline_data=InlineImage(data=_b64(data), mime_type=mime)))
    return out
