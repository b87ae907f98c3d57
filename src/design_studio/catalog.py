from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any

from design_studio.schemas import Action


class ToolCategory(str, Enum):
    CREATIVE_ASSISTANCE = "Creative generation and assistance"
    WORKFLOW_OPTIMIZATION = "Workflow optimization"
    ADVANCED_EDITING = "Advanced editing tools"
    ANALYSIS_OPTIMIZATION = "Analysis and optimization"
    DESIGN_ASSISTANT = "Smart design assistant"
    PROJECT_SPECIFIC = "Project-specific features"


@dataclass(frozen=True)
class Tool:
    id: str
    title: str
    description: str
    category: ToolCategory
    # The dispatcher action the tool drives; None when the tool has no backend yet.
    action: Action | None

    @property
    def implemented(self) -> bool:
        return self.action is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "action": self.action.value if self.action else None,
            "isImplemented": self.implemented,
        }


_C = ToolCategory
_A = Action

TOOLS: list[Tool] = [
    Tool("design-from-prompt", "Design from prompts", "Generate logos, illustrations or full compositions by describing the idea.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_IMAGE),
    Tool("live-design-session", "Live design session", "Expand a rough idea into a detailed brief, then render it.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_TEXT),
    Tool("voice-to-design", "Voice to design", "Describe a design out loud and turn it into an image.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_IMAGE),
    Tool("visual-brainstorming", "Visual brainstorming", "Create multiple variants of a concept automatically.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_IMAGE),
    Tool("auto-mockups", "Automatic mockups", "Generate realistic presentations of designs in different contexts.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_IMAGE),
    Tool("smart-color-palettes", "Smart color palettes", "Suggest combinations based on trends and color theory.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_STRUCTURED_TEXT),
    Tool("brand-name-generator", "Name and slogan generator", "Create catchy brand names and slogans for new products or campaigns.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_STRUCTURED_TEXT),
    Tool("mood-board-generator", "Mood board generator", "Build an image mood board and its dominant palette from a theme.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_MOOD_BOARD),
    Tool("video-storyboard-generator", "Video storyboard generator", "Turn a scene description into a four-shot cinematic storyboard.", _C.CREATIVE_ASSISTANCE, _A.GENERATE_STORYBOARD),
    Tool("auto-tagging", "Asset auto-tagging", "Classify images, fonts and resources automatically.", _C.WORKFLOW_OPTIMIZATION, _A.GENERATE_TEXT_WITH_IMAGE),
    Tool("semantic-search", "Semantic search", "Find assets using natural-language descriptions.", _C.WORKFLOW_OPTIMIZATION, None),
    Tool("task-automation", "Repetitive task automation", "Resize, export formats and prepare files for print.", _C.WORKFLOW_OPTIMIZATION, None),
    Tool("color-compatibility", "Color compatibility analysis", "Check accessibility and contrast.", _C.WORKFLOW_OPTIMIZATION, _A.GENERATE_STRUCTURED_TEXT),
    Tool("bg-removal", "Precise background removal", "One-click removal using semantic segmentation.", _C.ADVANCED_EDITING, _A.EDIT_IMAGE),
    Tool("image-expansion", "Image expansion (outpainting)", "Fill missing areas coherently.", _C.ADVANCED_EDITING, _A.EDIT_IMAGE),
    Tool("resolution-upscaling", "Resolution upscaling", "Increase the quality of pixelated images.", _C.ADVANCED_EDITING, _A.EDIT_IMAGE),
    Tool("photo-restoration", "Old photo restoration", "Remove scratches and recover details.", _C.ADVANCED_EDITING, _A.EDIT_IMAGE),
    Tool("ai-vectorizer", "AI vectorizer", "Convert sketches, drawings or photos into clean vector strokes.", _C.ADVANCED_EDITING, _A.EDIT_IMAGE),
    Tool("product-photography", "Product photography enhancement", "Generate professional backgrounds or improve product lighting.", _C.ADVANCED_EDITING, _A.EDIT_IMAGE),
    Tool("trend-analysis", "Trend analysis", "Suggest styles based on target markets.", _C.ANALYSIS_OPTIMIZATION, _A.GENERATE_STRUCTURED_TEXT),
    Tool("ab-testing", "Automated A/B testing", "Generate variants and predict performance.", _C.ANALYSIS_OPTIMIZATION, _A.GENERATE_STRUCTURED_TEXT),
    Tool("plagiarism-detection", "Plagiarism detection", "Check the originality of a design.", _C.ANALYSIS_OPTIMIZATION, _A.ANALYZE_ORIGINALITY),
    Tool("social-media-optimization", "Social media optimization", "Suggest ideal formats and sizes.", _C.ANALYSIS_OPTIMIZATION, _A.GENERATE_STRUCTURED_TEXT),
    Tool("automated-critique", "Automated constructive critique", "Analyze composition, balance and visual hierarchy.", _C.DESIGN_ASSISTANT, _A.GENERATE_TEXT_WITH_IMAGE),
    Tool("improvement-suggestions", "Improvement suggestions", "Specific recommendations for refinement.", _C.DESIGN_ASSISTANT, _A.GENERATE_TEXT_WITH_IMAGE),
    Tool("error-detection", "Error detection", "Wrong color spaces, low resolutions.", _C.DESIGN_ASSISTANT, _A.GENERATE_TEXT_WITH_IMAGE),
    Tool("auto-style-guides", "Automatic style guides", "Generate brand manuals from existing designs.", _C.DESIGN_ASSISTANT, _A.GENERATE_TEXT_WITH_IMAGE),
    Tool("presentation-script-generator", "Presentation script generator", "Write a script that explains your design decisions to a client.", _C.DESIGN_ASSISTANT, _A.GENERATE_TEXT_WITH_IMAGE),
    Tool("slideshow-generator", "Slideshow generator", "Lay out a project presentation from images and key points.", _C.DESIGN_ASSISTANT, _A.GENERATE_SLIDESHOW),
    Tool("logo-design", "Logo design", "Unlimited concept generation plus variations.", _C.PROJECT_SPECIFIC, _A.GENERATE_IMAGE),
    Tool("brand-identity-kit", "Brand identity kit", "Derive colors, typography and mockups from a logo.", _C.PROJECT_SPECIFIC, _A.GENERATE_BRAND_KIT),
    Tool("web-ui-design", "Web/UI design", "Layout and component suggestions.", _C.PROJECT_SPECIFIC, _A.GENERATE_STRUCTURED_TEXT),
    Tool("packaging-design", "Packaging", "Shelf impact analysis.", _C.PROJECT_SPECIFIC, _A.GENERATE_TEXT_WITH_IMAGE),
    Tool("typography", "Typography", "Smart font pairing recommendations.", _C.PROJECT_SPECIFIC, _A.GENERATE_TEXT),
]

_BY_ID = {tool.id: tool for tool in TOOLS}


def get_tool(tool_id: str) -> Tool:
    try:
        return _BY_ID[tool_id]
    except KeyError:
        raise KeyError(f"unknown tool '{tool_id}'") from None


def tools_by_category() -> dict[ToolCategory, list[Tool]]:
    grouped: dict[ToolCategory, list[Tool]] = defaultdict(list)
    for tool in TOOLS:
        grouped[tool.category].append(tool)
    return dict(grouped)
