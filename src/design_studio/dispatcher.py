from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from design_studio import prompts
from design_studio.errors import InvalidActionError, InvalidPayloadError, ResponseShapeError
from design_studio.parsing import ParsePolicy, parse_json_outcome, parse_json_response
from design_studio.providers.base import GenerativeProvider, InlineImage
from design_studio.schemas import (
    PAYLOAD_MODELS,
    Action,
    BrandKitPayload,
    EditImagePayload,
    GenerateImagePayload,
    MoodBoardPayload,
    OriginalityPayload,
    SlideshowPayload,
    StoryboardPayload,
    StructuredTextPayload,
    TextPayload,
    TextWithImagePayload,
    WireModel,
)

logger = logging.getLogger(__name__)

# analyzeOriginality only looks at the top matches.
MAX_SIMILAR_DESIGNS = 2


def parse_action(action: Any) -> Action:
    try:
        return Action(action)
    except ValueError:
        raise InvalidActionError("Invalid action") from None


def parse_payload(action: Action, payload: Any) -> WireModel:
    model = PAYLOAD_MODELS[action]
    try:
        return model.model_validate(payload if payload is not None else {})
    except ValidationError as exc:
        raise InvalidPayloadError(f"Invalid payload for {action.value}: {exc}") from exc


def _data_urls(images: list[InlineImage]) -> list[str]:
    return [img.to_data_url() for img in images]


class ActionDispatcher:
    """
    Maps an action + payload onto provider calls and reshapes the results.

    Stateless apart from the provider; one instance can serve concurrent requests.
    """

    def __init__(self, provider: GenerativeProvider) -> None:
        self.provider = provider
        self._handlers: dict[Action, Callable[[Any], Awaitable[Any]]] = {
            Action.GENERATE_IMAGE: self.generate_image,
            Action.GENERATE_STORYBOARD: self.generate_storyboard,
            Action.GENERATE_STRUCTURED_TEXT: self.generate_structured_text,
            Action.GENERATE_TEXT: self.generate_text,
            Action.GENERATE_TEXT_WITH_IMAGE: self.generate_text_with_image,
            Action.EDIT_IMAGE: self.edit_image,
            Action.ANALYZE_ORIGINALITY: self.analyze_originality,
            Action.GENERATE_BRAND_KIT: self.generate_brand_kit,
            Action.GENERATE_MOOD_BOARD: self.generate_mood_board,
            Action.GENERATE_SLIDESHOW: self.generate_slideshow,
        }
        missing = set(Action) - set(self._handlers)
        if missing:
            raise RuntimeError(f"no handler for actions: {sorted(a.value for a in missing)}")

    async def dispatch(self, action: Any, payload: Any) -> Any:
        act = action if isinstance(action, Action) else parse_action(action)
        body = parse_payload(act, payload)
        logger.info("dispatching %s via %s", act.value, getattr(self.provider, "name", "provider"))
        return await self._handlers[act](body)

    async def generate_image(self, p: GenerateImagePayload) -> list[str]:
        images = await self.provider.text_to_image(p.prompt, p.number_of_images, p.aspect_ratio)
        return _data_urls(images)

    async def generate_storyboard(self, p: StoryboardPayload) -> list[str]:
        images = await self.provider.text_to_image(prompts.storyboard_prompt(p.scene_description), 4, "16:9")
        return _data_urls(images[:4])

    async def generate_structured_text(self, p: StructuredTextPayload) -> Any:
        text = await self.provider.structured_completion(p.prompt, p.response_schema)
        return parse_json_response(text, ParsePolicy.fail(), label="Structured text")

    async def generate_text(self, p: TextPayload) -> str:
        return await self.provider.text_completion(p.prompt)

    async def generate_text_with_image(self, p: TextWithImagePayload) -> Any:
        text = await self.provider.multimodal_completion(p.prompt, [p.image.to_inline()], json_output=p.is_json)
        if not p.is_json:
            return text
        return parse_json_response(text, ParsePolicy.fallback_raw(), label="Image analysis")

    async def edit_image(self, p: EditImagePayload) -> dict[str, str | None]:
        parts = await self.provider.image_edit_completion(p.prompt, p.image.to_inline())

        result_text: str | None = None
        result_image: str | None = None
        # Last part of each kind wins.
        for part in parts:
            if part.text:
                result_text = part.text
            elif part.inline_data is not None:
                result_image = part.inline_data.to_data_url()

        if not result_image:
            raise ResponseShapeError("The AI did not return an edited image.", details=result_text)
        return {"text": result_text, "image": result_image}

    async def analyze_originality(self, p: OriginalityPayload) -> dict[str, Any]:
        text = await self.provider.multimodal_completion(p.prompt, [p.image.to_inline()], json_output=True)
        analysis, parsed = parse_json_outcome(
            text, ParsePolicy.fallback_raw(), label="Originality analysis", expect=dict
        )
        if not parsed:
            return analysis

        similar = analysis.get("similarDesigns")
        considered = similar[:MAX_SIMILAR_DESIGNS] if isinstance(similar, list) else []
        similar_images: list[str] = []
        if considered:
            # Only the first design is described; the rest of the count are variations of it.
            prompt = prompts.similar_design_prompt(considered[0])
            images = await self.provider.text_to_image(prompt, len(considered), "1:1")
            similar_images = _data_urls(images)

        return {**analysis, "similarImages": similar_images}

    async def generate_brand_kit(self, p: BrandKitPayload) -> dict[str, Any]:
        text = await self.provider.multimodal_completion(
            prompts.BRAND_KIT_ANALYSIS_PROMPT,
            [p.image.to_inline()],
            schema=prompts.BRAND_KIT_SCHEMA,
        )
        try:
            analysis = parse_json_response(text, ParsePolicy.fail(), label="Brand analysis", expect=dict)
        except ResponseShapeError as exc:
            raise ResponseShapeError("Failed to parse the brand analysis from the AI.", details=exc.details) from exc

        mockup_prompt = prompts.brand_mockup_prompt(analysis.get("styleKeywords"))
        mockups = await self.provider.text_to_image(mockup_prompt, 2, "4:3")
        return {**analysis, "mockups": _data_urls(mockups)}

    async def generate_mood_board(self, p: MoodBoardPayload) -> dict[str, list[str]]:
        images = await self.provider.text_to_image(
            prompts.mood_board_prompt(p.theme), prompts.MOOD_BOARD_IMAGE_COUNT, "1:1"
        )
        if not images:
            raise ResponseShapeError("The AI did not return any images for the mood board.")

        text = await self.provider.multimodal_completion(
            prompts.MOOD_BOARD_COLORS_PROMPT,
            [images[0]],
            schema=prompts.MOOD_BOARD_COLORS_SCHEMA,
        )
        colors = parse_json_response(
            text,
            ParsePolicy.substitute(prompts.FALLBACK_PALETTE),
            label="Mood board colors",
            expect=list,
            expect_items=str,
        )
        return {"images": _data_urls(images), "colors": colors}

    async def generate_slideshow(self, p: SlideshowPayload) -> Any:
        text = await self.provider.multimodal_completion(
            prompts.slideshow_prompt(p.title, p.points, len(p.images)),
            [img.to_inline() for img in p.images],
            schema=prompts.SLIDESHOW_SCHEMA,
        )
        return parse_json_response(text, ParsePolicy.fail(), label="Slideshow")
