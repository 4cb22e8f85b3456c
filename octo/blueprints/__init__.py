"""Blueprint persistence package for Octo."""

from octo.blueprints.adapters import from_analysis, from_project_info
from octo.blueprints.current import read_blueprint, write_blueprint
from octo.blueprints.legacy import read_legacy_blueprint, write_legacy_blueprint
from octo.blueprints.store import BlueprintStore, detect_schema, read, write

__all__ = [
    "BlueprintStore",
    "detect_schema",
    "from_analysis",
    "from_project_info",
    "read",
    "read_blueprint",
    "read_legacy_blueprint",
    "write",
    "write_blueprint",
    "write_legacy_blueprint",
]
