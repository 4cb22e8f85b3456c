import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, PrivateAttr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from octo.constants import (
    BlueprintSchema,
    OCTO_DEFAULT_BLUEPRINT_FILE,
    OCTO_DEFAULT_SETTINGS_FILE,
    OCTO_SETTINGS_ENV_VAR,
)
from octo.exceptions import SettingsError


class OctoSettings(BaseSettings):
    """
    Octo settings management using Pydantic.

    Settings are resolved with the following priority (highest to lowest):
    1. Overrides passed to `load()`
    2. Values from the settings YAML file
    3. Environment variables (prefixed with OCTO_SETTINGS_)
    4. Default values defined in the model

    Environment variable examples:
    - OCTO_SETTINGS_BLUEPRINT_FILE=octo.blueprint.yaml
    - OCTO_SETTINGS_READ_SCHEMA=legacy
    - OCTO_SETTINGS_OVERWRITE=false
    """

    model_config = SettingsConfigDict(
        env_prefix="OCTO_SETTINGS_",
        case_sensitive=False,
        extra="forbid",
    )

    blueprint_file: str = Field(
        default=OCTO_DEFAULT_BLUEPRINT_FILE,
        description="Blueprint file name relative to the project root, or an absolute path",
    )
    read_schema: BlueprintSchema = Field(
        default=BlueprintSchema.AUTO, description="Schema used to read blueprints ('auto' sniffs the file)"
    )
    write_schema: BlueprintSchema = Field(
        default=BlueprintSchema.CURRENT, description="Schema used to write blueprints"
    )
    overwrite: bool = Field(default=True, description="Whether saving may replace an existing blueprint")

    _settings_file: str | None = PrivateAttr(default=None)

    @field_validator("read_schema", "write_schema", mode="before")
    @classmethod
    def validate_schema(cls, v: Any) -> BlueprintSchema:
        """Convert string to BlueprintSchema enum."""
        if isinstance(v, str):
            try:
                return BlueprintSchema(v)
            except ValueError as e:
                raise ValueError(
                    f"Invalid blueprint schema: {v}. "
                    f"Must be one of: {', '.join(s.value for s in BlueprintSchema)}"
                ) from e
        return v

    @field_validator("write_schema")
    @classmethod
    def validate_write_schema(cls, v: BlueprintSchema) -> BlueprintSchema:
        if v is BlueprintSchema.AUTO:
            raise ValueError("write_schema must name a concrete schema, not 'auto'")
        return v

    @classmethod
    def load(cls, settings_file: str | None = None, **overrides: Any) -> "OctoSettings":
        """
        Load settings from a YAML file with programmatic overrides.

        Settings file resolution priority (highest to lowest):
        1. Explicit settings_file parameter
        2. OCTO_SETTINGS environment variable
        3. Default "octo.yaml" in current directory

        A missing file is only an error when it was asked for explicitly (by
        parameter or environment variable); otherwise defaults apply.

        Args:
            settings_file: Path to settings YAML file.
            **overrides: Values taking precedence over the file. Example: overwrite=False

        Returns:
            OctoSettings instance.

        Raises:
            SettingsError: If the settings file is missing, unreadable or invalid.

        Examples:
            settings = OctoSettings.load()
            settings = OctoSettings.load("configs/octo.yaml", read_schema="legacy")
        """
        explicit_file = settings_file or os.getenv(OCTO_SETTINGS_ENV_VAR)
        settings_path = Path(explicit_file or OCTO_DEFAULT_SETTINGS_FILE).resolve()

        yaml_data: Any = {}
        if settings_path.exists():
            try:
                with settings_path.open() as f:
                    yaml_data = yaml.safe_load(f) or {}
            except Exception as e:
                raise SettingsError(f"Failed to load settings from {settings_path}: {e}") from e
        elif explicit_file:
            raise SettingsError(
                f"Settings file not found: {explicit_file}\n"
                f"Resolved to absolute path: {settings_path}\n"
                f"Current working directory: {Path.cwd()}"
            )

        if not isinstance(yaml_data, dict):
            raise SettingsError(
                f"Settings file must contain a YAML dictionary, got {type(yaml_data).__name__}"
            )

        try:
            instance = cls(**{**yaml_data, **overrides})
        except ValidationError as e:
            raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e

        if settings_path.exists():
            instance._settings_file = str(settings_path)
        return instance

    @property
    def settings_file(self) -> str | None:
        """Path of the YAML file these settings were loaded from, if any."""
        return self._settings_file

    @property
    def as_dict(self) -> dict[str, Any]:
        """Get settings as a dictionary."""
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        return str(self.as_dict)
