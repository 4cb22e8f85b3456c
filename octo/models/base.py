from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class OctoBaseModel(BaseModel):
    """
    Base model for all persisted Octo models.

    Provides explicit per-field default detection, which drives optional-field
    elision when a model is rendered into a document.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Fields rendered even when they hold their default value.
    _always_emit: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:
        """Treat explicit nulls in a document as if the key were absent."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def is_default(self, field_name: str) -> bool:
        """
        Tell whether a field currently holds its default ("zero") value.

        Nested models are default when every one of their own fields is.

        Args:
            field_name: Attribute name of the field to check.

        Returns:
            True if the field would be elided from a rendered document.
        """
        value = getattr(self, field_name)
        if isinstance(value, OctoBaseModel):
            return all(value.is_default(name) for name in type(value).model_fields)
        field = type(self).model_fields[field_name]
        return value == field.get_default(call_default_factory=True)

    def to_document(self) -> dict[str, Any]:
        """
        Render the model as a plain mapping keyed by document keys.

        Fields holding their default are omitted unless listed in `_always_emit`.
        Key order follows field declaration order.
        """
        document: dict[str, Any] = {}
        for field_name, field in type(self).model_fields.items():
            if field_name not in self._always_emit and self.is_default(field_name):
                continue
            document[field.alias or field_name] = _to_document_value(getattr(self, field_name))
        return document


def _to_document_value(value: Any) -> Any:
    if isinstance(value, OctoBaseModel):
        return value.to_document()
    if isinstance(value, list):
        return [_to_document_value(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value
