"""
Blueprint models: the in-memory shape of a project's automation configuration.

A Blueprint is built by an input adapter right after project analysis, written
once, and rebuilt from its file on every later invocation. Construction never
checks the mandatory `name`; readers call `validate_required()` after decoding.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

from pydantic import Field, field_validator

from octo.constants import ThermalMode
from octo.models.base import OctoBaseModel
from octo.models.validators import run_required_field_validation


class EnvVar(OctoBaseModel):
    """An environment variable the project expects at run time."""

    _always_emit: ClassVar[tuple[str, ...]] = ("name", "required")

    name: str
    required: bool = False


class ThermalConfig(OctoBaseModel):
    """
    Resource-throttling parameters for automation on local hardware.

    Zero numeric values mean "auto-detect" (concurrency, batch size) or "use the
    built-in default" (cool-down). Negative values are not rejected here.
    """

    concurrency: int = 0
    batch_size: int = 0
    cool_down_ms: int = 0
    mode: ThermalMode = ThermalMode.AUTO

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> ThermalMode:
        """Convert string to ThermalMode enum."""
        if isinstance(v, str):
            try:
                return ThermalMode(v)
            except ValueError as e:
                raise ValueError(
                    f"Invalid thermal mode: {v}. Must be one of: {', '.join(m.value for m in ThermalMode)}"
                ) from e
        return v

    @property
    def is_auto(self) -> bool:
        """True when every setting is left to auto-detection."""
        return all(self.is_default(name) for name in type(self).model_fields)


class Blueprint(OctoBaseModel):
    """
    Canonical representation of how to set up and run a project.

    Field order is the order of keys in a rendered document. `run_command` and
    `setup_command` are stored under the shorter `run` and `setup` keys.
    """

    _always_emit: ClassVar[tuple[str, ...]] = ("name",)

    name: str = ""
    language: str = ""
    version: str = ""
    run_command: str = Field(default="", alias="run")
    setup_command: str = Field(default="", alias="setup")
    setup_required: bool = False
    package_manager: str = ""
    is_monorepo: bool = False
    monorepo_root: str = ""
    env_vars: list[EnvVar] = Field(default_factory=list)
    thermal: ThermalConfig = Field(default_factory=ThermalConfig)

    def validate_required(self, path: str | Path | None = None) -> "Blueprint":
        """
        Enforce the mandatory fields of a loaded blueprint.

        Args:
            path: File the blueprint came from, for error messages.

        Returns:
            The same blueprint, to allow chaining.

        Raises:
            BlueprintValidationError: If `name` is empty.
        """
        run_required_field_validation(self, path)
        return self

    @property
    def needs_setup(self) -> bool:
        """True when a setup command must run before the project starts."""
        return self.setup_required and bool(self.setup_command)

    def missing_env_vars(self, environ: Mapping[str, str]) -> list[str]:
        """
        List required environment variables that are absent or empty.

        Args:
            environ: Environment to check, usually `os.environ`.

        Returns:
            Names of the missing required variables, in declaration order.
        """
        return [var.name for var in self.env_vars if var.required and not environ.get(var.name)]

    def working_dir(self, project_root: str | Path) -> Path:
        """
        Directory commands should run in.

        `monorepo_root` only applies when `is_monorepo` is set; relative values are
        taken from the project root. The filesystem is not consulted.
        """
        root = Path(project_root)
        if self.is_monorepo and self.monorepo_root:
            return root / self.monorepo_root
        return root
