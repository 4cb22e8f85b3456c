"""
Octo exception hierarchy.

This module defines the exceptions raised by the blueprint persistence layer,
organized hierarchically so callers can tell an unparsable file from a file
that parses but is incomplete.

File-system failures are not wrapped: the builtin OSError raised by the
operating system reaches the caller unchanged.
"""

from pathlib import Path

###############################################################################
# ROOT EXCEPTION
###############################################################################


class OctoError(Exception):
    """
    Root exception class for all Octo errors.

    This exception serves as the base class for the entire exception hierarchy.
    It should never be raised directly but rather inherited from.
    """


###############################################################################
# BLUEPRINT EXCEPTIONS
###############################################################################


class BlueprintError(OctoError):
    """Base exception for all blueprint persistence errors."""

    def __init__(self, message: str = "", path: str | Path | None = None):
        self.path = str(path) if path is not None else ""
        prefix = f"Blueprint '{self.path}': " if self.path else "Blueprint: "
        super().__init__(f"{prefix}{message}")


class BlueprintDecodeError(BlueprintError):
    """Raised when a document cannot be decoded into the blueprint shape."""


class BlueprintEncodeError(BlueprintError):
    """Raised when a blueprint cannot be rendered into a document."""


class BlueprintValidationError(BlueprintError):
    """
    Raised when a document decodes cleanly but lacks a mandatory field.

    Only `name` is mandatory, so `field` is currently always "name".
    """

    def __init__(self, message: str = "", path: str | Path | None = None, field: str = ""):
        self.field = field
        super().__init__(message, path=path)


###############################################################################
# SETTINGS EXCEPTIONS
###############################################################################


class SettingsError(OctoError):
    """
    Base exception class for settings-related errors.

    These relate to loading and validating Octo's own settings.
    """

    def __init__(self, message: str = "", setting: str = ""):
        prefix = f"Setting '{setting}': " if setting else ""
        super().__init__(f"{prefix}{message}")
        self.setting = setting
