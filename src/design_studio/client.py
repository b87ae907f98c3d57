from __future__ import annotations

import base64
import logging
import mimetypes
from io import BytesIO
from pathlib import Path
from typing import Any, BinaryIO, Union

import httpx
from PIL import Image, UnidentifiedImageError
from pydantic import ValidationError

from design_studio import prompts
from design_studio.capabilities import CapabilityUnavailableError, SpeechToText, UnsupportedSpeechToText
from design_studio.config import Settings, settings as default_settings
from design_studio.schemas import (
    Action,
    Color,
    EditedImage,
    KitData,
    MoodBoardData,
    SerializableImage,
    SlideshowData,
)

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, bytearray, BinaryIO, SerializableImage]

UNKNOWN_API_ERROR = "An unknown API error occurred."
CONFIG_ERROR_MARKER = "API_KEY is not configured"
CONFIG_ERROR_HELP = (
    "Configuration error: the API key for the AI service has not been configured. "
    "The site administrator must add it to the deployment settings for the application to work."
)
FALLBACK_MIME_TYPE = "application/octet-stream"


class ApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None, details: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ClientConfigurationError(ApiError):
    pass


class PaletteFormatError(ValueError):
    pass


def _sniff_mime_type(raw: bytes) -> str | None:
    try:
        with Image.open(BytesIO(raw)) as img:
            return img.get_format_mimetype()
    except (UnidentifiedImageError, OSError):
        return None


def file_to_serializable(source: ImageSource, mime_type: str | None = None) -> SerializableImage:
    """
    Read an image fully and encode it for transport.

    `source` may be a path, raw bytes, a binary file object, or a base64 data URL.
    The declared `mime_type` wins; otherwise the type is guessed from the file name,
    then sniffed from the bytes, then falls back to application/octet-stream.
    """
    if isinstance(source, SerializableImage):
        return source

    name: str | None = None
    if isinstance(source, str) and source.startswith("data:") and ";base64," in source:
        header, data = source.split(",", 1)
        declared = header[len("data:") : -len(";base64")]
        return SerializableImage(data=data, mime_type=mime_type or declared or FALLBACK_MIME_TYPE)
    if isinstance(source, (bytes, bytearray)):
        raw = bytes(source)
    elif isinstance(source, (str, Path)):
        path = Path(source)
        raw = path.read_bytes()
        name = path.name
    else:
        raw = source.read()
        name = getattr(source, "name", None)

    mime = mime_type
    if not mime and isinstance(name, str):
        mime = mimetypes.guess_type(name)[0]
    if not mime:
        mime = _sniff_mime_type(raw) or FALLBACK_MIME_TYPE

    return SerializableImage(data=base64.b64encode(raw).decode("ascii"), mime_type=mime)


def _wire_image(image: ImageSource) -> dict[str, str]:
    return file_to_serializable(image).model_dump(by_alias=True)


class DesignStudioClient:
    """
    One method per dispatcher action. Each call is independent: no retries, no caching.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        settings: Settings | None = None,
        speech: SpeechToText | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.speech = speech or UnsupportedSpeechToText()
        self._owns_http = http_client is None
        self.http = http_client or httpx.Client(
            base_url=base_url or self.settings.api_base_url,
            timeout=self.settings.client_timeout,
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> DesignStudioClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def call_api(self, action: Action | str, payload: dict[str, Any]) -> Any:
        name = action.value if isinstance(action, Action) else action
        try:
            response = self.http.post(self.settings.api_path, json={"action": name, "payload": payload})
            try:
                result = response.json()
            except ValueError:
                result = None
            if not isinstance(result, dict):
                result = {}

            if not response.is_success:
                raise ApiError(
                    result.get("error") or UNKNOWN_API_ERROR,
                    status_code=response.status_code,
                    details=result.get("details"),
                )
            return result.get("data")
        except Exception as exc:
            logger.error('API call failed for action "%s": %s', name, exc)
            if CONFIG_ERROR_MARKER in str(exc):
                raise ClientConfigurationError(
                    CONFIG_ERROR_HELP, status_code=getattr(exc, "status_code", None)
                ) from exc
            raise

    def generate_image(self, prompt: str, number_of_images: int = 2, aspect_ratio: str = "1:1") -> list[str]:
        return self.call_api(
            Action.GENERATE_IMAGE,
            {"prompt": prompt, "numberOfImages": number_of_images, "aspectRatio": aspect_ratio},
        )

    def generate_storyboard(self, scene_description: str) -> list[str]:
        return self.call_api(Action.GENERATE_STORYBOARD, {"sceneDescription": scene_description})

    def generate_structured_text(self, prompt: str, response_schema: dict[str, Any]) -> Any:
        return self.call_api(Action.GENERATE_STRUCTURED_TEXT, {"prompt": prompt, "responseSchema": response_schema})

    def generate_text(self, prompt: str) -> str:
        return self.call_api(Action.GENERATE_TEXT, {"prompt": prompt})

    def generate_detailed_brief(self, user_prompt: str) -> str:
        return self.generate_text(prompts.detailed_brief_prompt(user_prompt))

    def generate_text_with_image(self, prompt: str, image: ImageSource, is_json: bool = False) -> Any:
        return self.call_api(
            Action.GENERATE_TEXT_WITH_IMAGE,
            {"prompt": prompt, "image": _wire_image(image), "isJson": is_json},
        )

    def edit_image(self, prompt: str, image: ImageSource) -> EditedImage:
        data = self.call_api(Action.EDIT_IMAGE, {"prompt": prompt, "image": _wire_image(image)})
        return EditedImage.model_validate(data)

    def analyze_originality(self, prompt: str, image: ImageSource) -> dict[str, Any]:
        return self.call_api(Action.ANALYZE_ORIGINALITY, {"prompt": prompt, "image": _wire_image(image)})

    def generate_brand_kit(self, image: ImageSource) -> KitData:
        data = self.call_api(Action.GENERATE_BRAND_KIT, {"image": _wire_image(image)})
        return KitData.model_validate(data)

    def generate_mood_board(self, theme: str) -> MoodBoardData:
        data = self.call_api(Action.GENERATE_MOOD_BOARD, {"theme": theme})
        return MoodBoardData.model_validate(data)

    def generate_slideshow(self, images: list[ImageSource], title: str, points: str) -> SlideshowData:
        payload = {"images": [_wire_image(img) for img in images], "title": title, "points": points}
        data = self.call_api(Action.GENERATE_SLIDESHOW, payload)
        return SlideshowData.model_validate(data)

    def generate_color_palette(self, theme: str) -> list[Color]:
        result = self.generate_structured_text(prompts.color_palette_prompt(theme), prompts.COLOR_PALETTE_SCHEMA)
        palette = result.get("palette") if isinstance(result, dict) else None
        if not isinstance(palette, list):
            raise PaletteFormatError("Invalid response format from API for color palette.")
        try:
            return [Color.model_validate(c) for c in palette]
        except ValidationError as exc:
            raise PaletteFormatError("Invalid response format from API for color palette.") from exc

    def generate_image_from_speech(
        self,
        audio: bytes,
        number_of_images: int = 2,
        aspect_ratio: str = "1:1",
    ) -> list[str]:
        if not self.speech.is_supported():
            raise CapabilityUnavailableError("Speech recognition is not supported in this environment.")
        transcript = self.speech.transcribe(audio).strip()
        if not transcript:
            raise ValueError("No speech was recognized.")
        return self.generate_image(transcript, number_of_images=number_of_images, aspect_ratio=aspect_ratio)
