"""Tagged-variant schema descriptors.

A descriptor describes the JSON shape expected from the AI backend. The same
object is serialized into the wire format sent with the request
(:meth:`Schema.to_json_schema`) and used locally to check the parsed response
before it is trusted (:meth:`Schema.validate`, backed by ``jsonschema``).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from jsonschema import Draft202012Validator, ValidationError

from career_compass.errors import SchemaValidationError


class Schema:
    """Base class for all schema variants."""

    def to_json_schema(self) -> dict:
        raise NotImplementedError

    def validate(self, value: object) -> list[str]:
        """Return a list of error messages; empty when ``value`` conforms.

        A null field counts as missing, so it only fails when required.
        """
        validator = Draft202012Validator(self.to_json_schema())
        messages: list[str] = []
        for error in validator.iter_errors(_drop_nulls(value)):
            for message in _format_error(error):
                if message not in messages:
                    messages.append(message)
        return messages


@dataclass(frozen=True)
class String(Schema):
    description: str | None = None

    def to_json_schema(self) -> dict:
        return _describe({"type": "string"}, self.description)


@dataclass(frozen=True)
class Number(Schema):
    minimum: float | None = None
    maximum: float | None = None
    description: str | None = None

    def to_json_schema(self) -> dict:
        out: dict = {"type": "number"}
        if self.minimum is not None:
            out["minimum"] = self.minimum
        if self.maximum is not None:
            out["maximum"] = self.maximum
        return _describe(out, self.description)


@dataclass(frozen=True)
class Enum(Schema):
    values: tuple[str, ...]
    description: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))

    def to_json_schema(self) -> dict:
        return _describe({"type": "string", "enum": list(self.values)}, self.description)


@dataclass(frozen=True)
class Array(Schema):
    items: Schema
    min_items: int | None = None
    max_items: int | None = None
    description: str | None = None

    def to_json_schema(self) -> dict:
        out: dict = {"type": "array", "items": self.items.to_json_schema()}
        if self.min_items is not None:
            out["minItems"] = self.min_items
        if self.max_items is not None:
            out["maxItems"] = self.max_items
        return _describe(out, self.description)


@dataclass(frozen=True)
class Object(Schema):
    properties: dict[str, Schema] = field(default_factory=dict)
    required: tuple[str, ...] | None = None
    description: str | None = None

    def __post_init__(self):
        required = tuple(self.properties) if self.required is None else tuple(self.required)
        unknown = [name for name in required if name not in self.properties]
        if unknown:
            raise ValueError(f"Required fields not declared as properties: {unknown}")
        object.__setattr__(self, "required", required)

    def to_json_schema(self) -> dict:
        out = {
            "type": "object",
            "properties": {name: s.to_json_schema() for name, s in self.properties.items()},
            "required": list(self.required),
        }
        return _describe(out, self.description)


def validate_or_raise(schema: Schema, value: object) -> None:
    """Raise SchemaValidationError when ``value`` does not match ``schema``."""
    errors = schema.validate(value)
    if errors:
        raise SchemaValidationError(errors)


def _describe(out: dict, description: str | None) -> dict:
    if description:
        out["description"] = description
    return out


def _drop_nulls(value: object) -> object:
    if isinstance(value, dict):
        return {k: _drop_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_nulls(v) for v in value]
    return value


def _format_path(parts: Iterable[str | int]) -> str:
    """``chartData[2].growth`` style path; the root is ``$``."""
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path or "$"


def _format_error(error: ValidationError) -> list[str]:
    path = _format_path(error.absolute_path)
    keyword = error.validator
    instance = error.instance
    expected = error.validator_value

    if keyword == "required":
        prefix = "" if path == "$" else f"{path}."
        return [f"{prefix}{name}: missing required field" for name in expected if name not in instance]
    if keyword == "type":
        return [f"{path}: expected {expected}, got {_type_name(instance)}"]
    if keyword == "minimum":
        return [f"{path}: {instance} is below minimum {expected}"]
    if keyword == "maximum":
        return [f"{path}: {instance} is above maximum {expected}"]
    if keyword == "enum":
        return [f"{path}: {instance!r} is not one of [{', '.join(map(str, expected))}]"]
    if keyword == "minItems":
        return [f"{path}: expected at least {expected} items, got {len(instance)}"]
    if keyword == "maxItems":
        return [f"{path}: expected at most {expected} items, got {len(instance)}"]
    return [f"{path}: {error.message}"]


def _type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
