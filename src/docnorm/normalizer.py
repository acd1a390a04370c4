# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Type-expression normalization into minimal recursive type shapes."""

import logging

from docnorm.expression import AnnotationNode, ExpressionParser
from docnorm.model import NormalizedType
from docnorm.parsers.jsdoc_type import JSDocTypeParser, render_node

logger = logging.getLogger(__name__)

DEFAULT_PARSER: ExpressionParser = JSDocTypeParser()


def normalize_type(
    expression: str | None, parser: ExpressionParser | None = None
) -> NormalizedType | None:
    """Parse and normalize a type expression.

    Args:
        expression: Type expression text without braces.
        parser: Grammar parser; ``DEFAULT_PARSER`` when omitted.

    Returns:
        Normalized type, or ``None`` for empty input or unsupported syntax.

    Raises:
        TypeParseError: If the expression is not valid syntax.
    """
    if expression is None or not expression.strip():
        return None
    source = expression.strip()
    node = (parser or DEFAULT_PARSER).parse(source)
    return normalize_node(node, source=source)


def normalize_node(
    node: AnnotationNode | None, source: str | None = None
) -> NormalizedType | None:
    """Normalize an already-parsed annotation node.

    Args:
        node: Node to normalize.
        source: Original expression text for ``node``. Only the optional
            marker case reads it; nested nodes are rendered instead.

    Returns:
        Normalized type, or ``None`` when the node kind is not supported.
    """
    if node is None:
        return None
    kind = node.kind
    if kind == "NAME":
        return NormalizedType(name=str(node.name))
    if kind == "UNION":
        return NormalizedType(
            name="union",
            elements=(normalize_node(node.left), normalize_node(node.right)),
        )
    if kind == "OPTIONAL":
        # flat name only; the wrapped expression is not normalized
        if source is not None:
            return NormalizedType(name=source.removesuffix("="))
        if node.value is None:
            return None
        return NormalizedType(name=render_node(node.value))
    if kind == "ANY":
        return NormalizedType(name="mixed")
    if kind == "GENERIC":
        if node.subject is None or node.subject.name is None:
            return None
        return NormalizedType(
            name=node.subject.name,
            elements=tuple(normalize_node(item) for item in node.objects),
        )
    if kind == "TUPLE":
        return NormalizedType(
            name="tuple",
            elements=tuple(normalize_node(item) for item in node.entries),
        )
    logger.debug(f"Unsupported type node; no type information (kind={kind})")
    return None
