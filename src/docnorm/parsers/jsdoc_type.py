# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Lark-based parser for JSDoc-style type expressions."""

import logging

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from docnorm.expression import AnnotationNode, TypeParseError

logger = logging.getLogger(__name__)

TYPE_GRAMMAR = r"""
?start: type_expr

?type_expr: prefix_expr
          | prefix_expr "|" type_expr -> union
          | arrow

?prefix_expr: postfix_expr
            | "?" prefix_expr -> nullable
            | "!" prefix_expr -> not_nullable
            | "..." prefix_expr -> variadic

?postfix_expr: primary
             | postfix_expr "=" -> optional
             | postfix_expr "[" "]" -> array
             | postfix_expr "?" -> nullable
             | postfix_expr "!" -> not_nullable

?primary: name
        | generic
        | tuple_type
        | record
        | function
        | type_query
        | parenthesis
        | any_type
        | unknown_type
        | string_value
        | number_value

name: NAME
generic: name "<" type_list ">"
       | name "." "<" type_list ">"
tuple_type: "[" [type_list] "]"
record: "{" [record_entry ("," record_entry)*] "}"
record_entry: NAME [":" type_expr]
function: "function" "(" [type_list] ")" [":" type_expr]
arrow: "(" [named_param ("," named_param)*] ")" "=>" type_expr
named_param: NAME [":" type_expr]
type_query: "typeof" NAME
parenthesis: "(" type_expr ")"
any_type: "*"
unknown_type: "?"
string_value: STRING
number_value: NUMBER

type_list: type_expr ("," type_expr)*

NAME: /[A-Za-z_$][\w$]*(?:[.:~#\/][A-Za-z_$][\w$-]*)*/
STRING: /"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'/
NUMBER: /-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?/

%import common.WS
%ignore WS
"""


class _AnnotationBuilder(Transformer):
    """Turn lark parse trees into ``AnnotationNode`` values."""

    def union(self, children: list) -> AnnotationNode:
        left, right = children
        return AnnotationNode(kind="UNION", left=left, right=right)

    def nullable(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="NULLABLE", value=children[0])

    def not_nullable(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="NOT_NULLABLE", value=children[0])

    def variadic(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="VARIADIC", value=children[0])

    def optional(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="OPTIONAL", value=children[0])

    def array(self, children: list) -> AnnotationNode:
        # T[] is sugar for Array<T>
        return AnnotationNode(
            kind="GENERIC",
            subject=AnnotationNode(kind="NAME", name="Array"),
            objects=(children[0],),
        )

    def name(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="NAME", name=str(children[0]))

    def generic(self, children: list) -> AnnotationNode:
        subject, objects = children
        return AnnotationNode(kind="GENERIC", subject=subject, objects=tuple(objects))

    def tuple_type(self, children: list) -> AnnotationNode:
        entries = children[0] if children else []
        return AnnotationNode(kind="TUPLE", entries=tuple(entries))

    def record(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="RECORD", fields=tuple(children))

    def record_entry(self, children: list) -> AnnotationNode:
        value = children[1] if len(children) > 1 else None
        return AnnotationNode(kind="RECORD_ENTRY", name=str(children[0]), value=value)

    def function(self, children: list) -> AnnotationNode:
        params: list[AnnotationNode] = []
        returns = None
        for child in children:
            if isinstance(child, list):
                params = child
            else:
                returns = child
        return AnnotationNode(kind="FUNCTION", params=tuple(params), returns=returns)

    def arrow(self, children: list) -> AnnotationNode:
        *params, returns = children
        return AnnotationNode(kind="ARROW", params=tuple(params), returns=returns)

    def named_param(self, children: list) -> AnnotationNode:
        value = children[1] if len(children) > 1 else None
        return AnnotationNode(kind="NAMED_PARAMETER", name=str(children[0]), value=value)

    def type_query(self, children: list[Token]) -> AnnotationNode:
        return AnnotationNode(kind="TYPE_QUERY", name=str(children[0]))

    def parenthesis(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="PARENTHESIS", value=children[0])

    def any_type(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="ANY")

    def unknown_type(self, children: list) -> AnnotationNode:
        return AnnotationNode(kind="UNKNOWN")

    def string_value(self, children: list[Token]) -> AnnotationNode:
        return AnnotationNode(kind="STRING_VALUE", name=str(children[0]))

    def number_value(self, children: list[Token]) -> AnnotationNode:
        return AnnotationNode(kind="NUMBER_VALUE", name=str(children[0]))

    def type_list(self, children: list) -> list[AnnotationNode]:
        return list(children)


class JSDocTypeParser:
    """Parse JSDoc type expressions into annotation trees."""

    def __init__(self) -> None:
        self._lark = Lark(
            TYPE_GRAMMAR,
            start="start",
            parser="earley",
            maybe_placeholders=False,
        )
        self._builder = _AnnotationBuilder()

    def parse(self, expression: str) -> AnnotationNode:
        """Parse one type expression.

        Args:
            expression: Type expression text without surrounding braces.

        Returns:
            Root annotation node.

        Raises:
            TypeParseError: If the expression is not valid syntax.
        """
        try:
            tree = self._lark.parse(expression)
        except UnexpectedInput as exc:
            logger.debug(f"Type expression rejected (expression={expression!r} error={exc})")
            raise TypeParseError(expression, str(exc).strip()) from exc
        return self._builder.transform(tree)


def render_node(node: AnnotationNode) -> str:
    """Render an annotation node back to type-expression text.

    Generic arguments are always printed in angle-bracket form, so ``T[]``
    renders as ``Array<T>``.

    Args:
        node: Node to render.

    Returns:
        Canonical expression text.
    """
    kind = node.kind
    if kind in ("NAME", "STRING_VALUE", "NUMBER_VALUE"):
        return str(node.name)
    if kind == "UNION":
        return f"{render_node(_child(node.left))}|{render_node(_child(node.right))}"
    if kind == "OPTIONAL":
        return f"{render_node(_child(node.value))}="
    if kind == "ANY":
        return "*"
    if kind == "UNKNOWN":
        return "?"
    if kind == "GENERIC":
        objects = ", ".join(render_node(item) for item in node.objects)
        return f"{render_node(_child(node.subject))}<{objects}>"
    if kind == "TUPLE":
        return "[" + ", ".join(render_node(item) for item in node.entries) + "]"
    if kind == "NULLABLE":
        return f"?{render_node(_child(node.value))}"
    if kind == "NOT_NULLABLE":
        return f"!{render_node(_child(node.value))}"
    if kind == "VARIADIC":
        return f"...{render_node(_child(node.value))}"
    if kind == "PARENTHESIS":
        return f"({render_node(_child(node.value))})"
    if kind == "RECORD":
        return "{" + ", ".join(render_node(item) for item in node.fields) + "}"
    if kind in ("RECORD_ENTRY", "NAMED_PARAMETER"):
        if node.value is None:
            return str(node.name)
        return f"{node.name}: {render_node(node.value)}"
    if kind == "FUNCTION":
        params = ", ".join(render_node(item) for item in node.params)
        if node.returns is None:
            return f"function({params})"
        return f"function({params}): {render_node(node.returns)}"
    if kind == "ARROW":
        params = ", ".join(render_node(item) for item in node.params)
        return f"({params}) => {render_node(_child(node.returns))}"
    if kind == "TYPE_QUERY":
        return f"typeof {node.name}"
    raise ValueError(f"Unsupported node kind: {kind}")


def _child(node: AnnotationNode | None) -> AnnotationNode:
    if node is None:
        raise ValueError("Annotation node is missing a required child")
    return node
