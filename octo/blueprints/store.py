"""
Schema dispatch for blueprint files.

The current and legacy codecs are independent; this module only chooses
between them, either as told or by sniffing the document. A document is in the
current schema when it is a YAML mapping holding a key the legacy format cannot
express, or when a value continues onto an indented line. Everything else,
including valid YAML made of legacy keys only, is read with the legacy grammar,
whose keys are case-insensitive and whose values may contain ` #`. A current
document with bad values is reported as a decode error, never re-read as legacy.
"""

import errno
import logging
from pathlib import Path

from octo.blueprints.current import decode_blueprint, load_document, read_blueprint, write_blueprint
from octo.blueprints.legacy import decode_legacy_blueprint, read_legacy_blueprint, write_legacy_blueprint
from octo.constants import (
    BLUEPRINT_DOCUMENT_KEYS,
    BLUEPRINT_FILE_ENCODING,
    LEGACY_KEY_FIELDS,
    BlueprintSchema,
)
from octo.exceptions import BlueprintDecodeError, BlueprintEncodeError
from octo.models import Blueprint
from octo.settings import OctoSettings

logger = logging.getLogger(__name__)

CURRENT_ONLY_KEYS = frozenset(BLUEPRINT_DOCUMENT_KEYS) - frozenset(LEGACY_KEY_FIELDS)


def detect_schema(text: str) -> BlueprintSchema:
    """Tell which schema a document is written in."""
    try:
        document = load_document(text)
    except BlueprintDecodeError:
        return BlueprintSchema.LEGACY

    if CURRENT_ONLY_KEYS.intersection(document):
        return BlueprintSchema.CURRENT
    # Legacy keys hold scalars, so indentation means a value continued over several lines.
    if any(line.strip() and line[0].isspace() for line in text.splitlines()):
        return BlueprintSchema.CURRENT
    return BlueprintSchema.LEGACY


def read(path: str | Path, schema: BlueprintSchema | str = BlueprintSchema.AUTO) -> Blueprint:
    """
    Load a blueprint in the given schema, sniffing it when schema is 'auto'.

    Raises:
        OSError: If the file cannot be opened or read.
        BlueprintDecodeError: If the content does not decode.
        BlueprintValidationError: If the decoded blueprint has no name.
    """
    schema = BlueprintSchema(schema)
    if schema is BlueprintSchema.CURRENT:
        return read_blueprint(path)
    if schema is BlueprintSchema.LEGACY:
        return read_legacy_blueprint(path)

    path = Path(path)
    with path.open(encoding=BLUEPRINT_FILE_ENCODING) as f:
        text = f.read()

    detected = detect_schema(text)
    logger.debug(f"Detected {detected} blueprint schema in {path}")
    if detected is BlueprintSchema.LEGACY:
        return decode_legacy_blueprint(text.splitlines(), path)
    return decode_blueprint(text, path)


def write(
    path: str | Path, blueprint: Blueprint, schema: BlueprintSchema | str = BlueprintSchema.CURRENT
) -> None:
    """
    Store a blueprint in the given schema.

    Raises:
        OSError: If the file cannot be created or written.
        BlueprintEncodeError: If the blueprint cannot be rendered, or schema is 'auto'.
    """
    schema = BlueprintSchema(schema)
    if schema is BlueprintSchema.AUTO:
        raise BlueprintEncodeError("a concrete schema is required for writing, got 'auto'", path=path)
    if schema is BlueprintSchema.LEGACY:
        write_legacy_blueprint(path, blueprint)
    else:
        write_blueprint(path, blueprint)


class BlueprintStore:
    """
    Blueprint files addressed by project root.

    The store holds only settings; every load reads the file again.
    """

    def __init__(self, settings: OctoSettings | None = None):
        self.settings = settings or OctoSettings()

    def path_for(self, project_root: str | Path) -> Path:
        """Location of the blueprint for a project; an absolute blueprint_file is used as is."""
        return Path(project_root) / self.settings.blueprint_file

    def exists(self, project_root: str | Path) -> bool:
        return self.path_for(project_root).is_file()

    def load(self, project_root: str | Path) -> Blueprint:
        """
        Read the blueprint of a project.

        Raises:
            FileNotFoundError: If the project has no blueprint yet.
            OSError: If the file cannot be read.
            BlueprintDecodeError: If the content does not decode.
            BlueprintValidationError: If the decoded blueprint has no name.
        """
        path = self.path_for(project_root)
        if not path.exists():
            raise FileNotFoundError(
                errno.ENOENT, "Configuration file not found. Run 'octo init' first", str(path)
            )
        return read(path, self.settings.read_schema)

    def save(self, project_root: str | Path, blueprint: Blueprint) -> Path:
        """
        Write the blueprint of a project.

        Returns:
            The path written to.

        Raises:
            FileExistsError: If a blueprint exists and overwriting is disabled.
            OSError: If the file cannot be written.
            BlueprintEncodeError: If the blueprint cannot be rendered.
        """
        path = self.path_for(project_root)
        if not self.settings.overwrite and path.exists():
            raise FileExistsError(
                errno.EEXIST, "Configuration file already exists; enable overwrite to replace it", str(path)
            )
        write(path, blueprint, self.settings.write_schema)
        return path
