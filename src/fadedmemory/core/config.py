"""Configuration management for the Faded Memory Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the FADEDMEMORY_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (FADEDMEMORY_* prefix)
2. .env file in the project root
3. Default values defined in FadedMemoryConfig

The API credential is the one exception to the prefix rule: it is also read
from ``GEMINI_API_KEY`` or ``GOOGLE_API_KEY`` so an existing Google AI Studio
setup works unchanged.

Example .env file:
    FADEDMEMORY_API_KEY=your-key-here
    FADEDMEMORY_DEFAULT_SERVICE=Gemini
    FADEDMEMORY_RETRO_FILTER_STYLE=detailed
    FADEDMEMORY_GRADIO_SERVER_PORT=7860

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
The credential is therefore read exactly once, at startup; there is no
rotation or refresh logic.

Usage Example
-------------
    from fadedmemory.core.config import config

    print(config.gemini_model_id)
    print(config.retro_filter_style)

See Also
--------
- .env.example: Template with all available configuration options
- FadedMemoryConfig: Full configuration class documentation
"""

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class FadedMemoryConfig(BaseSettings):
    """Main configuration for the Faded Memory Generator.

    Attributes
    ----------
    Service Settings:
        api_key : SecretStr | None
            Opaque credential for the hosted generation service
        default_service : str
            Generation service adapter to use (Gemini, Dry-Run)
        gemini_model_id : str
            Gemini model used for image transformation

    Prompt Settings:
        retro_filter_style : Literal["detailed", "short"]
            Which retro film-emulation template to send
        date_stamp_year : str
            Two-digit year printed in the date stamp overlay
        max_instruction_length : int
            Longest accepted composition instruction, in characters

    Image Settings:
        fallback_mime_type : str
            MIME type assumed for results when the primary image has none
        max_upload_bytes : int
            Largest accepted image file, in bytes

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = FadedMemoryConfig(
        ...     default_service="Dry-Run",
        ...     retro_filter_style="short",
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FADEDMEMORY_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Service settings
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("FADEDMEMORY_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"),
        description="Credential for the hosted generation service",
    )
    default_service: str = Field(
        default="Gemini",
        description="Generation service adapter to use (Gemini, Dry-Run)",
    )
    gemini_model_id: str = Field(
        default="gemini-2.5-flash-image-preview",
        description="Gemini model used for image transformation",
    )

    # Prompt settings
    retro_filter_style: Literal["detailed", "short"] = Field(
        default="detailed",
        description="Retro film-emulation template sent with every request",
    )
    date_stamp_year: str = Field(
        default="86",
        min_length=2,
        max_length=2,
        description="Two-digit year shown in the date stamp overlay",
    )
    max_instruction_length: int = Field(
        default=2000,
        ge=1,
        description="Longest accepted composition instruction in characters",
    )

    # Image settings
    fallback_mime_type: Literal["image/jpeg", "image/png", "image/webp"] = Field(
        default="image/png",
        description="MIME type assumed for results when the primary image has none",
    )
    max_upload_bytes: int = Field(
        default=20 * 1024 * 1024,
        ge=1,
        description="Largest accepted image file in bytes",
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    def has_api_key(self) -> bool:
        """Check whether a non-empty credential was configured."""
        return bool(self.api_key and self.api_key.get_secret_value().strip())


# Global configuration instance
# Loaded once at import time from FADEDMEMORY_* variables and the .env file.
config = FadedMemoryConfig()
