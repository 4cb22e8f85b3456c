"""
Current blueprint schema: a nested YAML document carrying every Blueprint field.

Fields at their default value are left out of the document, except `name`,
which is always written and always double-quoted.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from octo.constants import BLUEPRINT_FILE_ENCODING
from octo.exceptions import BlueprintDecodeError, BlueprintEncodeError
from octo.models import Blueprint

logger = logging.getLogger(__name__)

YAML_NULL_TAG = "tag:yaml.org,2002:null"
YAML_STR_TAG = "tag:yaml.org,2002:str"


class BlueprintLoader(yaml.SafeLoader):
    """
    SafeLoader that only resolves nulls implicitly.

    Every other plain scalar is kept as text and converted by the Blueprint model,
    so `version: 1.20` stays "1.20" and `name: on` stays "on".
    """


BlueprintLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag == YAML_NULL_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class QuotedString(str):
    """A string always rendered double-quoted."""


class BlueprintDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their parent key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:  # noqa: ARG002
        return super().increase_indent(flow, False)


def _represent_quoted_string(dumper: yaml.SafeDumper, data: QuotedString) -> yaml.ScalarNode:
    return dumper.represent_scalar(YAML_STR_TAG, str(data), style='"')


BlueprintDumper.add_representer(QuotedString, _represent_quoted_string)


def load_document(text: str, path: str | Path | None = None) -> dict[str, Any]:
    """
    Parse blueprint text into a raw mapping.

    Args:
        text: Document content.
        path: Origin of the text, for error messages.

    Returns:
        The decoded mapping; an empty document gives an empty mapping.

    Raises:
        BlueprintDecodeError: If the text is not YAML or not a YAML mapping.
    """
    try:
        data = yaml.load(text, Loader=BlueprintLoader)  # noqa: S506
    except yaml.YAMLError as e:
        raise BlueprintDecodeError(f"invalid YAML: {e}", path=path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BlueprintDecodeError(
            f"document must be a YAML mapping, got {type(data).__name__}", path=path
        )
    return data


def decode_blueprint(text: str, path: str | Path | None = None) -> Blueprint:
    """
    Decode and validate a current-schema document.

    Raises:
        BlueprintDecodeError: If the text is not a mapping or a value does not fit its field.
        BlueprintValidationError: If the document has no name.
    """
    document = load_document(text, path)
    try:
        blueprint = Blueprint.model_validate(document)
    except ValidationError as e:
        raise BlueprintDecodeError(f"document does not match the blueprint schema: {e}", path=path) from e
    return blueprint.validate_required(path)


def encode_blueprint(blueprint: Blueprint, path: str | Path | None = None) -> str:
    """Render a blueprint as current-schema YAML text."""
    document = blueprint.to_document()
    document["name"] = QuotedString(document["name"])
    try:
        return yaml.dump(
            document,
            Dumper=BlueprintDumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=float("inf"),
        )
    except yaml.YAMLError as e:
        raise BlueprintEncodeError(f"failed to render document: {e}", path=path) from e


def read_blueprint(path: str | Path) -> Blueprint:
    """
    Load a blueprint stored in the current schema.

    Each call reads the file afresh; nothing is cached.

    Args:
        path: Location of the blueprint file.

    Returns:
        The decoded blueprint, guaranteed to have a non-empty name.

    Raises:
        OSError: If the file cannot be opened or read.
        BlueprintDecodeError: If the content is not a valid current-schema document.
        BlueprintValidationError: If the document has no name.
    """
    path = Path(path)
    with path.open(encoding=BLUEPRINT_FILE_ENCODING) as f:
        text = f.read()

    blueprint = decode_blueprint(text, path)
    logger.debug(f"Read blueprint '{blueprint.name}' from {path}")
    return blueprint


def write_blueprint(path: str | Path, blueprint: Blueprint) -> None:
    """
    Store a blueprint in the current schema, replacing any existing content.

    The document is rendered before the file is opened, so a rendering failure
    leaves an existing file untouched. A failure while writing is not rolled back
    and leaves the file in an unreliable state.

    Args:
        path: Location of the blueprint file.
        blueprint: The blueprint to store.

    Raises:
        OSError: If the file cannot be created or written.
        BlueprintEncodeError: If the blueprint cannot be rendered.
    """
    path = Path(path)
    text = encode_blueprint(blueprint, path)
    with path.open("w", encoding=BLUEPRINT_FILE_ENCODING) as f:
        f.write(text)
    logger.debug(f"Wrote blueprint '{blueprint.name}' to {path}")
