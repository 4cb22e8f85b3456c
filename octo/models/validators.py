import sys
from pathlib import Path
from typing import TYPE_CHECKING

from octo.exceptions import BlueprintValidationError

if TYPE_CHECKING:
    from octo.models.blueprint import Blueprint


def run_required_field_validation(blueprint: "Blueprint", path: str | Path | None = None) -> None:
    """
    Run post-decode validation by calling field-specific validators.

    For each field defined in the Blueprint model, attempts to find and call a
    corresponding validator function named '{field_name}_validator' in this module.

    Validator functions must return a tuple: (bool, str)
    - If first element is True, validation passes (second element ignored)
    - If first element is False, validation fails and second element is used as error message

    Args:
        blueprint: The Blueprint instance to validate.
        path: Location the blueprint was loaded from, used in error messages.

    Raises:
        BlueprintValidationError: If any field validation fails.
    """
    current_module = sys.modules[__name__]

    for field_name in type(blueprint).model_fields:
        validator_func = getattr(current_module, f"{field_name}_validator", None)
        if validator_func is None:
            continue

        is_valid, error_message = validator_func(blueprint)
        if is_valid is False:
            raise BlueprintValidationError(
                error_message or f"invalid value for '{field_name}'", path=path, field=field_name
            )


def name_validator(blueprint: "Blueprint") -> tuple[bool, str]:
    """
    The project name is the one mandatory blueprint field.

    Args:
        blueprint: The Blueprint instance being validated.

    Returns:
        tuple[bool, str]: (is_valid, error_message)
    """
    if not blueprint.name:
        return (False, "invalid configuration: missing name")
    return (True, "")
