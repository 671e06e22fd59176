"""Base model configuration for all Canvas records."""

from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

SCALAR_TYPES = (str, int, float, bool)


class CanvasModel(BaseModel):
    """Base model with common configuration.

    Canvas records are read opportunistically, so every field on a
    subclass is optional and unknown fields are ignored. A field whose
    value doesn't match its declared type keeps the raw value when it is
    a scalar and becomes None otherwise.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def keep_off_type_values(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return value if isinstance(value, SCALAR_TYPES) else None

    @classmethod
    def from_record(cls, record: Any) -> Self:
        """Build from a decoded JSON value; anything but a mapping is an empty record."""
        if not isinstance(record, dict):
            return cls()
        return cls.model_validate(record)
