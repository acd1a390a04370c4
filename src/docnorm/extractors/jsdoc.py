# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""JSDoc comment tag extractor."""

import logging
import re
from dataclasses import dataclass, field

from docnorm.extractor import CommentBlock, TagRecord

logger = logging.getLogger(__name__)

BLOCK_PATTERN = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)
TAG_KEYWORD_PATTERN = re.compile(r"@(\S+)")

NAMED_TAGS: frozenset[str] = frozenset(
    {
        "param",
        "arg",
        "argument",
        "property",
        "prop",
        "typedef",
        "callback",
        "template",
    }
)


@dataclass
class _PendingTag:
    first_line: str
    continuation: list[str] = field(default_factory=list)


class JSDocTagExtractor:
    """Extract ``@tag`` records from ``/** ... */`` comment blocks."""

    def extract(self, comment: str) -> list[CommentBlock]:
        """Extract every documentation block from comment text.

        Args:
            comment: Text containing one or more ``/** ... */`` blocks.

        Returns:
            Parsed blocks in source order. Text without a block yields an
            empty list.
        """
        return [
            self._parse_block(match.group(1))
            for match in BLOCK_PATTERN.finditer(comment)
        ]

    def extract_tags(self, comment: str) -> list[TagRecord]:
        """Return the tags of the first block in source order."""
        blocks = self.extract(comment)
        if not blocks:
            return []
        return list(blocks[0].tags)

    def _parse_block(self, body: str) -> CommentBlock:
        description_lines: list[str] = []
        pending: list[_PendingTag] = []
        for line in _strip_decoration(body):
            if line.startswith("@"):
                pending.append(_PendingTag(first_line=line))
            elif pending:
                pending[-1].continuation.append(line)
            else:
                description_lines.append(line)
        return CommentBlock(
            description="\n".join(description_lines).strip(),
            tags=tuple(self._build_tag(item) for item in pending),
        )

    def _build_tag(self, pending: _PendingTag) -> TagRecord:
        source = "\n".join([pending.first_line, *pending.continuation]).strip()
        match = TAG_KEYWORD_PATTERN.match(pending.first_line)
        if match is None:
            # a lone "@" still counts as a tag boundary
            return TagRecord(tag="", name=None, type=None, description=None, source=source)
        keyword = match.group(1)
        rest = pending.first_line[match.end() :].lstrip()

        type_text: str | None = None
        if rest.startswith("{"):
            close = _find_closing(rest, "{", "}")
            if close is None:
                logger.warning(
                    f"Unterminated type braces; keeping tag without a type (tag={keyword} source={source!r})"
                )
            else:
                type_text = rest[1:close].strip()
                rest = rest[close + 1 :].lstrip()

        name: str | None = None
        optional = False
        default: str | None = None
        if keyword in NAMED_TAGS and rest:
            name, optional, default, rest = _split_name(rest)

        if rest.startswith("- "):
            rest = rest[2:]
        description = "\n".join([rest, *pending.continuation]).strip()
        return TagRecord(
            tag=keyword,
            name=name,
            type=type_text,
            description=description or None,
            source=source,
            optional=optional,
            default=default,
        )


def _strip_decoration(body: str) -> list[str]:
    """Remove leading whitespace and ``*`` gutters from block lines."""
    lines: list[str] = []
    for raw_line in body.splitlines():
        line = raw_line.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        lines.append(line)
    return lines


def _find_closing(text: str, opener: str, closer: str) -> int | None:
    """Return the index of the bracket closing ``text[0]``, if balanced."""
    depth = 0
    for index, char in enumerate(text):
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
    return None


def _split_name(rest: str) -> tuple[str, bool, str | None, str]:
    """Split the leading name off a tag remainder.

    Returns:
        Name, optional flag, default value and the remaining text.
    """
    if rest.startswith("["):
        close = _find_closing(rest, "[", "]")
        if close is not None:
            inner = rest[1:close].strip()
            remainder = rest[close + 1 :].lstrip()
            if "=" in inner:
                name, default = inner.split("=", 1)
                return name.strip(), True, default.strip(), remainder
            return inner, True, None, remainder
    parts = rest.split(None, 1)
    remainder = parts[1] if len(parts) > 1 else ""
    return parts[0], False, None, remainder
