# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for normalized documentation records."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NormalizedType:
    """Represent a minimal recursive type shape.

    Attributes:
        name: Identifier for bare types; ``union``, ``tuple`` or the
            container name for composite types.
        elements: Member types for composite types; ``None`` otherwise.
            Entries are ``None`` where a member type is unsupported.
    """

    name: str
    elements: tuple["NormalizedType | None", ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping, omitting absent ``elements``."""
        payload: dict[str, Any] = {"name": self.name}
        if self.elements is not None:
            payload["elements"] = [_type_dict(element) for element in self.elements]
        return payload


@dataclass(frozen=True)
class ParamDescriptor:
    """Represent one documented parameter."""

    name: str
    description: str | None
    type: NormalizedType | None
    optional: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "type": _type_dict(self.type),
            "optional": self.optional,
        }


@dataclass(frozen=True)
class ReturnDescriptor:
    """Represent the documented return value."""

    description: str | None
    type: NormalizedType | None

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "type": _type_dict(self.type)}


@dataclass(frozen=True)
class DocRecord:
    """Represent one normalized documentation comment.

    Attributes:
        description: Block-level description; ``None`` when absent.
        params: Parameter descriptors in source order.
        returns: Return descriptor from the first return tag, if any.
    """

    description: str | None
    params: tuple[ParamDescriptor, ...]
    returns: ReturnDescriptor | None

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-ready tree."""
        return {
            "description": self.description,
            "params": [param.to_dict() for param in self.params],
            "returns": self.returns.to_dict() if self.returns else None,
        }


def _type_dict(value: NormalizedType | None) -> dict[str, Any] | None:
    return value.to_dict() if value is not None else None
