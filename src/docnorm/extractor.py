# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Tag extraction interfaces and DTOs for documentation comments."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TagRecord:
    """Represent one ``@keyword`` unit of a documentation comment.

    Attributes:
        tag: Tag keyword without the leading ``@``.
        name: Associated name for name-bearing tags such as ``param``.
        type: Type expression text without the surrounding braces.
        description: Free-text description following type and name.
        source: Raw tag text with comment decoration removed.
        optional: Whether the name was written in ``[name]`` form.
        default: Default value from a ``[name=default]`` name.
    """

    tag: str
    name: str | None
    type: str | None
    description: str | None
    source: str
    optional: bool = False
    default: str | None = None


@dataclass(frozen=True)
class CommentBlock:
    """Represent one parsed documentation comment block."""

    description: str
    tags: tuple[TagRecord, ...]


class TagExtractor(Protocol):
    """Comment tokenizer contract."""

    def extract(self, comment: str) -> list[CommentBlock]:
        """Split decorated comment text into blocks of tags, in source order."""
