"""Tool definition DTO supplied by the caller on each completion.

Adapters translate these into the vendor's function-calling schema; they do
not own or cache tool definitions.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


def _empty_object_schema() -> Dict[str, Any]:
    return {"type": "object", "properties": {}}


class Tool(BaseModel):
    """A callable tool the model may request.

    Attributes
    ----------
    name:
        Function name; must be non-empty.
    description:
        Natural-language description shown to the model.
    input_schema:
        JSON-schema object describing the arguments.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    input_schema: Dict[str, Any] = Field(default_factory=_empty_object_schema)


__all__ = ["Tool"]
