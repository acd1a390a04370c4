# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Assemble normalized documentation records from comment text."""

import logging

from docnorm.expression import ExpressionParser
from docnorm.extractor import TagExtractor, TagRecord
from docnorm.extractors.jsdoc import JSDocTagExtractor
from docnorm.model import DocRecord, ParamDescriptor, ReturnDescriptor
from docnorm.normalizer import normalize_type
from docnorm.parsers.jsdoc_type import JSDocTypeParser

logger = logging.getLogger(__name__)

PARAM_TAGS: frozenset[str] = frozenset({"param", "arg", "argument"})
RETURN_TAGS: frozenset[str] = frozenset({"returns", "return"})


class DocAssembler:
    """Build ``DocRecord`` values from raw documentation comments."""

    def __init__(
        self,
        extractor: TagExtractor | None = None,
        parser: ExpressionParser | None = None,
    ) -> None:
        self._extractor = extractor or JSDocTagExtractor()
        self._parser = parser or JSDocTypeParser()

    def assemble(self, raw_comment: str) -> DocRecord:
        """Normalize one documentation comment.

        Args:
            raw_comment: Comment body without ``/**``/``*/`` delimiters.

        Returns:
            The normalized record. Comments without tags or text produce an
            empty record rather than an error.

        Raises:
            TypeParseError: If a tag carries a malformed type expression.
        """
        blocks = self._extractor.extract(f"/** {raw_comment} */")
        if not blocks:
            return DocRecord(description=None, params=(), returns=None)
        block = blocks[0]
        return DocRecord(
            description=block.description or None,
            params=self._build_params(block.tags),
            returns=self._build_returns(block.tags),
        )

    def is_optional(self, tag: TagRecord) -> bool:
        """Return whether a parameter tag is optional by either convention."""
        explicit = has_optional_flag(tag)
        marked = has_optional_marker(tag, self._parser)
        return explicit or marked

    def _build_params(self, tags: tuple[TagRecord, ...]) -> tuple[ParamDescriptor, ...]:
        return tuple(
            ParamDescriptor(
                name=tag.name or "",
                description=tag.description or None,
                type=normalize_type(tag.type, parser=self._parser),
                optional=self.is_optional(tag),
            )
            for tag in tags
            if tag.tag in PARAM_TAGS
        )

    def _build_returns(self, tags: tuple[TagRecord, ...]) -> ReturnDescriptor | None:
        return_tags = [tag for tag in tags if tag.tag in RETURN_TAGS]
        if not return_tags:
            return None
        if len(return_tags) > 1:
            logger.debug(
                f"Multiple return tags; using the first (count={len(return_tags)})"
            )
        tag = return_tags[0]
        return ReturnDescriptor(
            description=return_description(tag),
            type=normalize_type(tag.type, parser=self._parser),
        )


def has_optional_flag(tag: TagRecord) -> bool:
    """Return whether the extractor flagged the tag optional (``[name]``)."""
    return tag.optional


def has_optional_marker(tag: TagRecord, parser: ExpressionParser) -> bool:
    """Return whether the tag type carries a trailing ``=`` marker.

    Raises:
        TypeParseError: If the type expression is malformed.
    """
    if tag.type is None or not tag.type.strip():
        return False
    return parser.parse(tag.type.strip()).kind == "OPTIONAL"


def return_description(tag: TagRecord) -> str | None:
    """Derive the human-readable description of a return tag.

    Typed tags use the extracted description. Untyped tags fall back to the
    raw tag text with the leading ``@<tag> `` marker removed.

    Args:
        tag: Return tag record.

    Returns:
        Description text, or ``None`` when empty.
    """
    if tag.type:
        return tag.description or None
    return tag.source.removeprefix(f"@{tag.tag}").strip() or None


def assemble(raw_comment: str) -> DocRecord:
    """Normalize a documentation comment with the default collaborators."""
    return DocAssembler().assemble(raw_comment)
