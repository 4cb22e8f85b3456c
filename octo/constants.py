from enum import StrEnum


class ThermalMode(StrEnum):
    """
    Defines how aggressively automation may use local hardware.

    Attributes:
        AUTO: Pick concurrency, batching and cool-down from detected hardware.
            An empty or missing mode in a blueprint means AUTO.

        COOL: Favor low temperatures over speed (fewer workers, longer pauses).

        PERFORMANCE: Favor speed; throttling is left to the operating system.
    """

    AUTO = "auto"
    COOL = "cool"
    PERFORMANCE = "performance"

    @classmethod
    def _missing_(cls, value: object) -> "ThermalMode | None":
        """Accept empty values and case variations."""
        if isinstance(value, str):
            normalized = value.strip().lower()
            if not normalized:
                return cls.AUTO
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class BlueprintSchema(StrEnum):
    """
    Document formats a blueprint can be persisted in.

    Attributes:
        CURRENT: Nested YAML document supporting every blueprint field.

        LEGACY: Flat `key: value` lines limited to name, language, version and run.

        AUTO: Read-only choice; sniff the document and pick one of the above.
    """

    CURRENT = "current"
    LEGACY = "legacy"
    AUTO = "auto"

    @classmethod
    def _missing_(cls, value: object) -> "BlueprintSchema | None":
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


OCTO_DEFAULT_BLUEPRINT_FILE = ".octo.yaml"
OCTO_DEFAULT_SETTINGS_FILE = "octo.yaml"
OCTO_SETTINGS_ENV_VAR = "OCTO_SETTINGS"

OCTO_SETTINGS_OPTIONAL = {
    "blueprint_file": OCTO_DEFAULT_BLUEPRINT_FILE,
    "read_schema": BlueprintSchema.AUTO,
    "write_schema": BlueprintSchema.CURRENT,
    "overwrite": True,
}

# Document keys of the current schema, in emission order.
BLUEPRINT_DOCUMENT_KEYS = (
    "name",
    "language",
    "version",
    "run",
    "setup",
    "setup_required",
    "package_manager",
    "is_monorepo",
    "monorepo_root",
    "env_vars",
    "thermal",
)

# Legacy line prefixes mapped to the Blueprint attribute they populate.
LEGACY_KEY_FIELDS = {
    "name": "name",
    "language": "language",
    "version": "version",
    "run": "run_command",
}

# Encoding used for every blueprint file, read or written.
BLUEPRINT_FILE_ENCODING = "utf-8"
