"""
Legacy blueprint schema: flat `key: value` lines, one per field.

Earlier releases wrote only `name`, `language`, `version` and `run`. Writing in
this format drops every other field. Reading ignores any line that does not
start with one of those keys, matched case-insensitively.
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

import yaml

from octo.constants import BLUEPRINT_FILE_ENCODING, LEGACY_KEY_FIELDS
from octo.exceptions import BlueprintEncodeError
from octo.models import Blueprint

logger = logging.getLogger(__name__)

QUOTE_CHARS = ("'", '"')


def _unquote(value: str) -> str:
    """Strip YAML-style single or double quotes wrapping a whole value."""
    if len(value) < 2 or value[0] not in QUOTE_CHARS or value[-1] != value[0]:  # noqa: PLR2004
        return value
    try:
        unquoted = yaml.safe_load(value)
    except yaml.YAMLError:
        return value[1:-1]
    return unquoted if isinstance(unquoted, str) else value[1:-1]


def _quote_if_needed(value: str) -> str:
    """Quote values the reader would otherwise trim or unquote."""
    if value != value.strip() or value[0] in QUOTE_CHARS or value[-1] in QUOTE_CHARS:
        return json.dumps(value, ensure_ascii=False)
    return value


def decode_legacy_blueprint(lines: Iterable[str], path: str | Path | None = None) -> Blueprint:
    """
    Build a blueprint from legacy lines.

    When a key appears more than once, the last occurrence wins.

    Args:
        lines: Document lines, with or without line endings.
        path: Origin of the lines, for error messages.

    Raises:
        BlueprintValidationError: If no non-empty name line is found.
    """
    values: dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.strip()
        lowered = line.lower()
        for key, field_name in LEGACY_KEY_FIELDS.items():
            prefix = f"{key}:"
            if lowered.startswith(prefix):
                values[field_name] = _unquote(line[len(prefix) :].strip())
                break

    return Blueprint(**values).validate_required(path)


def encode_legacy_blueprint(blueprint: Blueprint, path: str | Path | None = None) -> str:
    """
    Render the legacy subset of a blueprint.

    Raises:
        BlueprintEncodeError: If a value spans several lines, which the format cannot hold.
    """
    lines = [f"name: {json.dumps(blueprint.name, ensure_ascii=False)}"]
    for key, field_name in LEGACY_KEY_FIELDS.items():
        if key == "name":
            continue
        value = getattr(blueprint, field_name)
        if not value:
            continue
        if len(value.splitlines()) > 1:
            raise BlueprintEncodeError(f"'{key}' spans several lines and cannot be stored in legacy format", path=path)
        lines.append(f"{key}: {_quote_if_needed(value)}")
    return "".join(f"{line}\n" for line in lines)


def read_legacy_blueprint(path: str | Path) -> Blueprint:
    """
    Load a blueprint stored in the legacy line format.

    Raises:
        OSError: If the file cannot be opened or read.
        BlueprintValidationError: If the file has no name line.
    """
    path = Path(path)
    with path.open(encoding=BLUEPRINT_FILE_ENCODING) as f:
        blueprint = decode_legacy_blueprint(f, path)
    logger.debug(f"Read legacy blueprint '{blueprint.name}' from {path}")
    return blueprint


def write_legacy_blueprint(path: str | Path, blueprint: Blueprint) -> None:
    """
    Store the legacy subset of a blueprint, replacing any existing content.

    Setup, package manager, monorepo, env var and thermal fields are not written.

    Raises:
        OSError: If the file cannot be created or written.
        BlueprintEncodeError: If a value cannot be expressed in the legacy format.
    """
    path = Path(path)
    text = encode_legacy_blueprint(blueprint, path)
    with path.open("w", encoding=BLUEPRINT_FILE_ENCODING) as f:
        f.write(text)
    logger.debug(f"Wrote legacy blueprint '{blueprint.name}' to {path}")
