from __future__ import annotations

from typing import Any


# --- Storyboard ---

STORYBOARD_SHOTS = (
    "Shot 1 (wide establishing shot): introduce the setting and the overall atmosphere.",
    "Shot 2 (medium shot): show the main subject and the action taking place.",
    "Shot 3 (close-up): focus on an important detail, emotion or object.",
    "Shot 4 (concluding shot): resolve the scene with a memorable closing frame.",
)


def storyboard_prompt(scene_description: str) -> str:
    shots = "\n".join(f"- {s}" for s in STORYBOARD_SHOTS)
    return (
        "Create a cinematic video storyboard frame for the following scene.\n"
        f"Scene: {scene_description}\n"
        "The storyboard is made of four consecutive shots:\n"
        f"{shots}\n"
        "Consistent characters, lighting and color grading across shots. "
        "Cinematic composition, film still, 16:9 framing. No text, no captions, no panel borders."
    )


# --- Originality ---


def similar_design_prompt(design: Any) -> str:
    if isinstance(design, dict):
        title = str(design.get("title") or "").strip()
        description = str(design.get("description") or "").strip()
    else:
        title, description = "", str(design or "").strip()

    subject = f"'{title}'" if title else "an existing design"
    detail = f" {description}" if description else ""
    return (
        f"A clean reference image of {subject}.{detail} "
        "Show the design on a neutral background, centered, as it would appear in a portfolio."
    )


# --- Brand kit ---

BRAND_KIT_ANALYSIS_PROMPT = (
    "Act as a brand identity designer. Analyze this logo and propose a brand kit. "
    "Extract the primary and secondary colors as hex codes, recommend a headline font and a body font "
    "(Google Fonts) that pair well with the logo, explain the reason for the pairing, and list 3 to 5 "
    "keywords describing the visual style of the brand."
)

BRAND_KIT_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "colors": {
            "type": "OBJECT",
            "properties": {
                "primary": {"type": "ARRAY", "items": {"type": "STRING"}, "description": "Primary hex colors."},
                "secondary": {"type": "ARRAY", "items": {"type": "STRING"}, "description": "Secondary hex colors."},
            },
            "required": ["primary", "secondary"],
        },
        "typography": {
            "type": "OBJECT",
            "properties": {
                "headlineFont": {"type": "STRING"},
                "bodyFont": {"type": "STRING"},
                "reason": {"type": "STRING"},
            },
            "required": ["headlineFont", "bodyFont", "reason"],
        },
        "styleKeywords": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["colors", "typography", "styleKeywords"],
}


def brand_mockup_prompt(style_keywords: Any) -> str:
    if isinstance(style_keywords, list):
        style = ", ".join(str(k) for k in style_keywords if str(k).strip())
    else:
        style = str(style_keywords or "").strip()
    style = style or "modern, professional"
    return (
        f"Photorealistic brand mockup of stationery and merchandise (business cards, letterhead, tote bag) "
        f"for a brand with a {style} visual style. Studio lighting, clean flat-lay composition."
    )


# --- Mood board ---

MOOD_BOARD_IMAGE_COUNT = 9

MOOD_BOARD_COLORS_PROMPT = (
    "Extract the 5 most dominant colors of this image. "
    "Respond with a JSON array of 5 hex color codes (e.g. \"#RRGGBB\")."
)

MOOD_BOARD_COLORS_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {"type": "STRING", "description": "A hex color code, e.g. #RRGGBB."},
}

FALLBACK_PALETTE: list[str] = ["#333333", "#666666", "#999999", "#CCCCCC", "#EEEEEE"]


def mood_board_prompt(theme: str) -> str:
    return (
        f"An inspirational mood board image for the theme: {theme}. "
        "Evocative photography, textures and details, cohesive color palette, aesthetic composition."
    )


# --- Slideshow ---

SLIDE_TYPES = ["title", "image_left", "image_right", "full_image", "bullet_points", "end"]

SLIDESHOW_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "slides": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "type": {"type": "STRING", "enum": SLIDE_TYPES},
                    "title": {"type": "STRING"},
                    "subtitle": {"type": "STRING"},
                    "text": {"type": "STRING"},
                    "image_index": {"type": "INTEGER", "description": "Zero-based index of the image to show."},
                    "caption": {"type": "STRING"},
                    "points": {"type": "ARRAY", "items": {"type": "STRING"}},
                },
                "required": ["type"],
            },
        },
    },
    "required": ["slides"],
}


def slideshow_prompt(title: str, points: str, image_count: int) -> str:
    return (
        "Act as a presentation designer. Build a short slideshow to present a design project.\n"
        f"Project title: {title}\n"
        f"Key points to communicate:\n{points}\n"
        f"{image_count} images are attached, referenced by zero-based image_index in the order given.\n"
        "Start with a 'title' slide and finish with an 'end' slide. In between, use 'image_left', "
        "'image_right' and 'full_image' slides to show each image with a short text or caption, "
        "and 'bullet_points' slides for the key points."
    )


# --- Client-side prompts ---


def detailed_brief_prompt(user_prompt: str) -> str:
    return (
        f'Act as a creative director. A designer has given you this initial idea: "{user_prompt}".\n'
        "Expand this into a detailed creative brief for an image generation AI.\n"
        "The brief should be a single block of text, starting with the original idea and then expanding on it.\n"
        "Include details about:\n"
        "- A specific visual style (e.g., minimalist vector art, photorealistic, cinematic).\n"
        "- A color palette.\n"
        "- The mood and atmosphere.\n"
        "- The composition and subject placement.\n"
        "- Key elements to include.\n"
        "Make the final text a rich, descriptive paragraph that will guide the AI to create a high-quality, "
        "specific image."
    )


def color_palette_prompt(theme: str) -> str:
    return f"Generate a color palette with 5 colors for the theme: {theme}. Provide creative names for each color."


COLOR_PALETTE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "palette": {
            "type": "ARRAY",
            "description": "An array of 5 color objects.",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {"type": "STRING", "description": "The creative name of the color."},
                    "hex": {"type": "STRING", "description": "The hex code for the color (e.g., #RRGGBB)."},
                },
                "required": ["name", "hex"],
            },
        },
    },
    "required": ["palette"],
}
