"""
Gemini configuration settings.

Model selection and credentials for the syllabus extraction call.

Dependencies: pydantic, pydantic_settings
System role: Extraction oracle configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Google Gemini client configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
        description="Google AI Studio API key",
    )
    model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model that accepts inline PDF parts",
    )
    temperature: float = Field(
        default=0.0,
        description="Sampling temperature for extraction",
    )
