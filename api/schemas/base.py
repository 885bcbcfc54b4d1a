"""
Shared base for request and response bodies.

Clients speak camelCase JSON (`campId`, `participantEmail`); Python code and
PocketBase use snake_case. Extra keys sent by clients are converted to
snake_case before they reach the store.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel, to_snake


class CamelModel(BaseModel):
    """Request/response model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OpenCamelModel(CamelModel):
    """Request model that also accepts arbitrary descriptive fields."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def store_fields(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Declared and extra fields as snake_case keys, without unset optionals."""
        skip = set(self.model_extra or {}) | (exclude or set())
        fields = self.model_dump(mode="json", exclude_none=True, exclude=skip)
        for key, value in (self.model_extra or {}).items():
            fields[to_snake(key)] = value
        return fields


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str
