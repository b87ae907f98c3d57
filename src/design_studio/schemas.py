from __future__ import annotations

import math
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from design_studio.providers.base import InlineImage


class Action(str, Enum):
    GENERATE_IMAGE = "generateImage"
    GENERATE_STORYBOARD = "generateStoryboard"
    GENERATE_STRUCTURED_TEXT = "generateStructuredText"
    GENERATE_TEXT = "generateText"
    GENERATE_TEXT_WITH_IMAGE = "generateTextWithImage"
    EDIT_IMAGE = "editImage"
    ANALYZE_ORIGINALITY = "analyzeOriginality"
    GENERATE_BRAND_KIT = "generateBrandKit"
    GENERATE_MOOD_BOARD = "generateMoodBoard"
    GENERATE_SLIDESHOW = "generateSlideshow"


class WireModel(BaseModel):
    # Wire names are camelCase; python attributes are snake_case.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SerializableImage(WireModel):
    data: str
    mime_type: str = Field(alias="mimeType")

    def to_inline(self) -> InlineImage:
        return InlineImage(data=self.data, mime_type=self.mime_type)


# --- Payloads, one per action ---


class GenerateImagePayload(WireModel):
    prompt: str = ""
    number_of_images: int = Field(default=2, alias="numberOfImages")
    aspect_ratio: str = Field(default="1:1", alias="aspectRatio")

    @field_validator("number_of_images", mode="before")
    @classmethod
    def _default_count(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 2
        if not math.isfinite(value) or value <= 0:
            return 2
        return max(1, int(value))

    @field_validator("aspect_ratio", mode="before")
    @classmethod
    def _default_ratio(cls, value: Any) -> str:
        return value if isinstance(value, str) else "1:1"


class StoryboardPayload(WireModel):
    scene_description: str = Field(default="", alias="sceneDescription")


class StructuredTextPayload(WireModel):
    prompt: str = ""
    response_schema: dict[str, Any] = Field(alias="responseSchema")


class TextPayload(WireModel):
    prompt: str = ""


class TextWithImagePayload(WireModel):
    prompt: str = ""
    image: SerializableImage
    is_json: bool = Field(default=False, alias="isJson")


class EditImagePayload(WireModel):
    prompt: str = ""
    image: SerializableImage


class OriginalityPayload(WireModel):
    prompt: str = ""
    image: SerializableImage


class BrandKitPayload(WireModel):
    image: SerializableImage


class MoodBoardPayload(WireModel):
    theme: str = ""


class SlideshowPayload(WireModel):
    images: list[SerializableImage] = Field(default_factory=list)
    title: str = ""
    points: str = ""


PAYLOAD_MODELS: dict[Action, type[WireModel]] = {
    Action.GENERATE_IMAGE: GenerateImagePayload,
    Action.GENERATE_STORYBOARD: StoryboardPayload,
    Action.GENERATE_STRUCTURED_TEXT: StructuredTextPayload,
    Action.GENERATE_TEXT: TextPayload,
    Action.GENERATE_TEXT_WITH_IMAGE: TextWithImagePayload,
    Action.EDIT_IMAGE: EditImagePayload,
    Action.ANALYZE_ORIGINALITY: OriginalityPayload,
    Action.GENERATE_BRAND_KIT: BrandKitPayload,
    Action.GENERATE_MOOD_BOARD: MoodBoardPayload,
    Action.GENERATE_SLIDESHOW: SlideshowPayload,
}


# --- Results the client hands back to callers ---


class ResultModel(BaseModel):
    # Provider output is loosely shaped; keep unknown keys instead of dropping them.
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class EditedImage(ResultModel):
    text: str | None = None
    image: str | None = None


class KitColors(ResultModel):
    primary: list[str] = Field(default_factory=list)
    secondary: list[str] = Field(default_factory=list)


class KitTypography(ResultModel):
    headline_font: str = Field(default="", alias="headlineFont")
    body_font: str = Field(default="", alias="bodyFont")
    reason: str = ""


class KitData(ResultModel):
    colors: KitColors = Field(default_factory=KitColors)
    typography: KitTypography = Field(default_factory=KitTypography)
    style_keywords: list[str] = Field(default_factory=list, alias="styleKeywords")
    mockups: list[str] = Field(default_factory=list)


class MoodBoardData(ResultModel):
    images: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)


SlideType = Literal["title", "image_left", "image_right", "full_image", "bullet_points", "end"]


class Slide(ResultModel):
    type: SlideType
    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    image_index: int | None = None
    caption: str | None = None
    points: list[str] | None = None


class SlideshowData(ResultModel):
    slides: list[Slide] = Field(default_factory=list)


class Color(ResultModel):
    name: str
    hex: str
