# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Type-expression AST and parser contract."""

from dataclasses import dataclass
from typing import Literal, Protocol


NodeKind = Literal[
    "NAME",
    "UNION",
    "OPTIONAL",
    "ANY",
    "UNKNOWN",
    "GENERIC",
    "TUPLE",
    "NULLABLE",
    "NOT_NULLABLE",
    "VARIADIC",
    "PARENTHESIS",
    "RECORD",
    "RECORD_ENTRY",
    "FUNCTION",
    "ARROW",
    "NAMED_PARAMETER",
    "TYPE_QUERY",
    "STRING_VALUE",
    "NUMBER_VALUE",
]


class TypeParseError(ValueError):
    """Represent a type expression that is not valid grammar syntax."""

    def __init__(self, expression: str, message: str) -> None:
        super().__init__(f"Invalid type expression {expression!r}: {message}")
        self.expression = expression
        self.message = message


@dataclass(frozen=True)
class AnnotationNode:
    """Represent one node of a parsed type expression.

    Only the fields relevant to ``kind`` are populated.

    Attributes:
        kind: Node discriminant.
        name: Identifier for ``NAME``, ``RECORD_ENTRY``, ``NAMED_PARAMETER``
            and ``TYPE_QUERY``; literal text for ``STRING_VALUE`` and
            ``NUMBER_VALUE``.
        left: Left branch of a ``UNION``.
        right: Right branch of a ``UNION``.
        subject: Container node of a ``GENERIC``.
        objects: Type arguments of a ``GENERIC``, in source order.
        entries: Entries of a ``TUPLE``, in source order.
        value: Wrapped node for prefix/postfix operators, record entries and
            named parameters.
        fields: ``RECORD_ENTRY`` nodes of a ``RECORD``.
        params: Parameter nodes of a ``FUNCTION`` or ``ARROW``.
        returns: Return node of a ``FUNCTION`` or ``ARROW``.
    """

    kind: NodeKind
    name: str | None = None
    left: "AnnotationNode | None" = None
    right: "AnnotationNode | None" = None
    subject: "AnnotationNode | None" = None
    objects: tuple["AnnotationNode", ...] = ()
    entries: tuple["AnnotationNode", ...] = ()
    value: "AnnotationNode | None" = None
    fields: tuple["AnnotationNode", ...] = ()
    params: tuple["AnnotationNode", ...] = ()
    returns: "AnnotationNode | None" = None


class ExpressionParser(Protocol):
    """Define the type-expression grammar parser contract."""

    def parse(self, expression: str) -> AnnotationNode:
        """Parse a type expression.

        Args:
            expression: Type expression text without surrounding braces.

        Returns:
            Root node of the parsed expression.

        Raises:
            TypeParseError: If the expression is not valid syntax.
        """
