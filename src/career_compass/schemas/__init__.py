"""Schema descriptors shared by prompt construction and response validation."""

from career_compass.schemas.descriptor import (
    Array,
    Enum,
    Number,
    Object,
    Schema,
    String,
    validate_or_raise,
)

__all__ = [
    "Array",
    "Enum",
    "Number",
    "Object",
    "Schema",
    "String",
    "validate_or_raise",
]
