"""Shared pydantic base for wire-facing models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Source = Literal["live", "fallback"]


class WireModel(BaseModel):
    """Model serialized with camelCase keys and populated from either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
