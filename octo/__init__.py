"""Octo blueprint persistence: store and reload a project's setup-and-run configuration."""

from octo.blueprints import BlueprintStore, from_analysis, from_project_info, read, write
from octo.models import Blueprint, EnvVar, ThermalConfig

__all__ = [
    "Blueprint",
    "BlueprintStore",
    "EnvVar",
    "ThermalConfig",
    "from_analysis",
    "from_project_info",
    "read",
    "write",
]
