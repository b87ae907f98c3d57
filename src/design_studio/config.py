from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Loads keys from process env, and also from a local .env file for convenience.
    model_config = SettingsConfigDict(
        env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8", populate_by_name=True
    )

    # Key (server side only)
    api_key: str | None = Field(default=None, validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"))

    # Models
    gemini_text_model: str = "gemini-2.5-flash"
    gemini_edit_model: str = "gemini-2.5-flash-image"
    gemini_image_model: str = "imagen-4.0-generate-001"
    image_output_mime_type: str = "image/jpeg"

    # HTTP surface
    api_path: str = "/api/gemini"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    log_level: str = "INFO"

    # Client SDK. A None timeout disables the httpx default.
    api_base_url: str = "http://localhost:8000"
    client_timeout: float | None = None


settings = Settings()
