"""Octo models package for blueprint definitions."""

from .base import OctoBaseModel
from .blueprint import Blueprint, EnvVar, ThermalConfig

__all__ = [
    "Blueprint",
    "EnvVar",
    "OctoBaseModel",
    "ThermalConfig",
]
