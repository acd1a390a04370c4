import pytest

from docnorm.expression import AnnotationNode, TypeParseError
from docnorm.parsers import JSDocTypeParser, render_node


@pytest.fixture(scope="module")
def parser() -> JSDocTypeParser:
    return JSDocTypeParser()


def test_parser_reads_bare_and_dotted_names(parser: JSDocTypeParser) -> None:
    assert parser.parse("Foo") == AnnotationNode(kind="NAME", name="Foo")
    assert parser.parse("ns.Widget").name == "ns.Widget"
    assert parser.parse("module:lib.Thing").name == "module:lib.Thing"


def test_parser_builds_right_associative_unions(parser: JSDocTypeParser) -> None:
    node = parser.parse("A | B | C")

    assert node.kind == "UNION"
    assert node.left == AnnotationNode(kind="NAME", name="A")
    assert node.right is not None
    assert node.right.kind == "UNION"
    assert node.right.left == AnnotationNode(kind="NAME", name="B")
    assert node.right.right == AnnotationNode(kind="NAME", name="C")


def test_parser_marks_trailing_equals_as_optional(parser: JSDocTypeParser) -> None:
    node = parser.parse("string=")

    assert node.kind == "OPTIONAL"
    assert node.value == AnnotationNode(kind="NAME", name="string")


def test_parser_reads_angle_dot_angle_and_square_bracket_generics(
    parser: JSDocTypeParser,
) -> None:
    array_name = AnnotationNode(kind="NAME", name="Array")
    string_name = AnnotationNode(kind="NAME", name="string")

    for expression in ("Array<string>", "Array.<string>", "string[]"):
        node = parser.parse(expression)
        assert node.kind == "GENERIC"
        assert node.subject == array_name
        assert node.objects == (string_name,)


def test_parser_keeps_generic_argument_order(parser: JSDocTypeParser) -> None:
    node = parser.parse("Map<string, Array<number>>")

    assert node.kind == "GENERIC"
    assert [item.kind for item in node.objects] == ["NAME", "GENERIC"]
    assert node.objects[0].name == "string"


def test_parser_reads_tuples_including_empty(parser: JSDocTypeParser) -> None:
    node = parser.parse("[number, string]")

    assert node.kind == "TUPLE"
    assert [entry.name for entry in node.entries] == ["number", "string"]
    assert parser.parse("[]") == AnnotationNode(kind="TUPLE")


def test_parser_distinguishes_unknown_from_nullable(parser: JSDocTypeParser) -> None:
    assert parser.parse("?") == AnnotationNode(kind="UNKNOWN")
    assert parser.parse("*") == AnnotationNode(kind="ANY")
    nullable = parser.parse("?string")
    assert nullable.kind == "NULLABLE"
    assert nullable.value == AnnotationNode(kind="NAME", name="string")
    assert parser.parse("!Foo").kind == "NOT_NULLABLE"
    assert parser.parse("...number").kind == "VARIADIC"


def test_parser_reads_records_functions_and_literals(parser: JSDocTypeParser) -> None:
    record = parser.parse("{a: number, b}")
    assert record.kind == "RECORD"
    assert [field.name for field in record.fields] == ["a", "b"]
    assert record.fields[0].value == AnnotationNode(kind="NAME", name="number")
    assert record.fields[1].value is None

    function = parser.parse("function(string, number): boolean")
    assert function.kind == "FUNCTION"
    assert [param.name for param in function.params] == ["string", "number"]
    assert function.returns == AnnotationNode(kind="NAME", name="boolean")

    assert parser.parse("function()") == AnnotationNode(kind="FUNCTION")
    assert parser.parse("'left'") == AnnotationNode(kind="STRING_VALUE", name="'left'")
    assert parser.parse("42") == AnnotationNode(kind="NUMBER_VALUE", name="42")
    assert parser.parse("(string|number)").kind == "PARENTHESIS"


@pytest.mark.parametrize("expression", ["", "Array<", "string|", "<>", "{a: }"])
def test_parser_raises_type_parse_error_for_invalid_syntax(
    parser: JSDocTypeParser, expression: str
) -> None:
    with pytest.raises(TypeParseError) as exc_info:
        parser.parse(expression)

    assert exc_info.value.expression == expression


def test_render_node_prints_canonical_text(parser: JSDocTypeParser) -> None:
    assert render_node(parser.parse("Array.<string>")) == "Array<string>"
    assert render_node(parser.parse("string[]=")) == "Array<string>="
    assert render_node(parser.parse("function(string): number")) == (
        "function(string): number"
    )
    assert render_node(parser.parse("{a: number, b}")) == "{a: number, b}"
    assert render_node(parser.parse("?(A|B)")) == "?(A|B)"


def test_parser_reads_postfix_nullable_and_non_nullable(
    parser: JSDocTypeParser,
) -> None:
    string_name = AnnotationNode(kind="NAME", name="string")

    assert parser.parse("string?") == AnnotationNode(kind="NULLABLE", value=string_name)
    assert parser.parse("string!") == AnnotationNode(
        kind="NOT_NULLABLE", value=string_name
    )
    optional = parser.parse("string?=")
    assert optional.kind == "OPTIONAL"
    assert optional.value == AnnotationNode(kind="NULLABLE", value=string_name)
    assert parser.parse("??") == AnnotationNode(
        kind="NULLABLE", value=AnnotationNode(kind="UNKNOWN")
    )


def test_parser_reads_module_paths_with_slashes_and_hyphens(
    parser: JSDocTypeParser,
) -> None:
    assert parser.parse("module:foo/bar") == AnnotationNode(
        kind="NAME", name="module:foo/bar"
    )
    assert parser.parse("module:my-lib/util").name == "module:my-lib/util"


def test_parser_reads_arrow_functions_and_type_queries(
    parser: JSDocTypeParser,
) -> None:
    assert parser.parse("() => void") == AnnotationNode(
        kind="ARROW", returns=AnnotationNode(kind="NAME", name="void")
    )
    arrow = parser.parse("(a: string, b) => number|string")
    assert arrow.kind == "ARROW"
    assert [param.name for param in arrow.params] == ["a", "b"]
    assert arrow.params[0].value == AnnotationNode(kind="NAME", name="string")
    assert arrow.params[1].value is None
    assert arrow.returns is not None
    assert arrow.returns.kind == "UNION"

    assert parser.parse("typeof x") == AnnotationNode(kind="TYPE_QUERY", name="x")
    assert render_node(arrow) == "(a: string, b) => number|string"
    assert render_node(parser.parse("typeof x")) == "typeof x"
