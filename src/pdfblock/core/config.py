"""
Configuration schema and loading for pdfblock.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from pdfblock.contracts import Component, VersionRequirement
from pdfblock.core.versions import InvalidVersionError, parse_version


def _version_to_str(v: Any) -> Any:
    """YAML and Dynaconf env values parse "8.2" as a float; versions are strings."""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _validate_version(v: str) -> str:
    try:
        parse_version(v)
    except InvalidVersionError as e:
        raise ValueError(str(e)) from e
    return v


class PluginSettings(BaseModel):
    """Identity of the plugin and where its bundled assets are served from."""

    model_config = {"frozen": True}

    name: str = Field(
        default="PDFjs viewer for Elementor",
        description="Plugin name shown in admin notices",
    )
    version: str = Field(default="1.3.2", description="Plugin version")
    asset_base_url: str = Field(
        default="",
        description="Public URL of the plugin directory (bundled viewer lives below it)",
    )

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        return _version_to_str(v)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        return _validate_version(v)


class RequirementSettings(BaseModel):
    """Minimum versions checked by the environment guard.

    Example YAML:
        requirements:
          extension_name: Elementor
          minimum_extension_version: "3.0.0"
          runtime_name: PHP
          minimum_runtime_version: "7.1"
    """

    model_config = {"frozen": True}

    extension_name: str = Field(default="Elementor")
    minimum_extension_version: str = Field(default="3.0.0")
    runtime_name: str = Field(default="PHP")
    minimum_runtime_version: str = Field(default="7.1")

    @field_validator("minimum_extension_version", "minimum_runtime_version", mode="before")
    @classmethod
    def coerce_minimum(cls, v: Any) -> Any:
        return _version_to_str(v)

    @field_validator("minimum_extension_version", "minimum_runtime_version")
    @classmethod
    def validate_minimum(cls, v: str) -> str:
        """Minimums must be parseable at config time, not at boot."""
        return _validate_version(v)

    @property
    def extension(self) -> VersionRequirement:
        return VersionRequirement(
            component=Component.HOST_EXTENSION,
            minimum_version=self.minimum_extension_version,
            display_name=self.extension_name,
        )

    @property
    def runtime(self) -> VersionRequirement:
        return VersionRequirement(
            component=Component.RUNTIME,
            minimum_version=self.minimum_runtime_version,
            display_name=self.runtime_name,
        )


class BlockSettings(BaseModel):
    """Block registration behavior."""

    model_config = {"frozen": True}

    register_when_guard_fails: bool = Field(
        default=False,
        description="Register blocks even when the environment guard fails",
    )


class MediaSettings(BaseModel):
    """Attachment id to URL mapping used by the built-in media library.

    Example YAML:
        media:
          attachments:
            123: https://site/files/doc.pdf
    """

    model_config = {"frozen": True}

    attachments: dict[int, str] = Field(default_factory=dict)


class PdfBlockSettings(BaseModel):
    """Top-level pdfblock configuration.

    All settings are validated and frozen after construction.
    """

    model_config = {"frozen": True}

    plugin: PluginSettings = Field(default_factory=PluginSettings)
    requirements: RequirementSettings = Field(default_factory=RequirementSettings)
    blocks: BlockSettings = Field(default_factory=BlockSettings)
    media: MediaSettings = Field(default_factory=MediaSettings)
    log_level: str = Field(default="INFO")


def load_settings(config_path: Path) -> PdfBlockSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (PDFBLOCK_*) - highest priority
    2. Config file (settings.yaml)
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: PDFBLOCK_REQUIREMENTS__MINIMUM_RUNTIME_VERSION
    for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated PdfBlockSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="PDFBLOCK",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase top-level keys; Pydantic fields are lowercase
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {
        k.lower(): _lower_keys(v)
        for k, v in dynaconf_settings.as_dict().items()
        if k not in internal_keys
    }
    return PdfBlockSettings(**raw_config)


def _lower_keys(value: Any) -> Any:
    """Lowercase string keys of nested mappings (env overrides arrive uppercase)."""
    if isinstance(value, dict):
        return {
            (k.lower() if isinstance(k, str) else k): _lower_keys(v)
            for k, v in value.items()
        }
    return value
