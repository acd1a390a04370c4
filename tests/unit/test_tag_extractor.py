import logging

import pytest

from docnorm.extractor import TagRecord
from docnorm.extractors import JSDocTagExtractor


def test_extractor_returns_no_blocks_without_doc_comment() -> None:
    extractor = JSDocTagExtractor()

    assert extractor.extract("plain text") == []
    assert extractor.extract("/* not a doc comment */") == []
    assert extractor.extract_tags("plain text") == []


def test_extractor_splits_description_and_tags_in_order() -> None:
    comment = "\n".join(
        [
            "/**",
            " * Adds two numbers.",
            " *",
            " * @param {number} a first operand",
            " * @param {number} b - second operand",
            " * @returns {number} the sum",
            " */",
        ]
    )

    blocks = JSDocTagExtractor().extract(comment)

    assert len(blocks) == 1
    block = blocks[0]
    assert block.description == "Adds two numbers."
    assert block.tags == (
        TagRecord(
            tag="param",
            name="a",
            type="number",
            description="first operand",
            source="@param {number} a first operand",
        ),
        TagRecord(
            tag="param",
            name="b",
            type="number",
            description="second operand",
            source="@param {number} b - second operand",
        ),
        TagRecord(
            tag="returns",
            name=None,
            type="number",
            description="the sum",
            source="@returns {number} the sum",
        ),
    )


def test_extractor_reads_bracketed_optional_names() -> None:
    tags = JSDocTagExtractor().extract_tags(
        "/** @param {string} [label] shown text\n@param {number} [count=10] how many */"
    )

    assert tags[0].name == "label"
    assert tags[0].optional is True
    assert tags[0].default is None
    assert tags[0].description == "shown text"
    assert tags[1].name == "count"
    assert tags[1].optional is True
    assert tags[1].default == "10"


def test_extractor_keeps_nested_braces_in_type() -> None:
    tags = JSDocTagExtractor().extract_tags(
        "/** @param {{a: number, b: string}} options settings */"
    )

    assert tags[0].type == "{a: number, b: string}"
    assert tags[0].name == "options"
    assert tags[0].description == "settings"


def test_extractor_appends_continuation_lines() -> None:
    comment = "\n".join(
        [
            "/**",
            " * @param {string} path where to look",
            " *   relative to the root",
            " * @return",
            " *   nothing useful",
            " */",
        ]
    )

    tags = JSDocTagExtractor().extract_tags(comment)

    assert tags[0].description == "where to look\nrelative to the root"
    assert tags[0].source == "@param {string} path where to look\nrelative to the root"
    assert tags[1].tag == "return"
    assert tags[1].description == "nothing useful"
    assert tags[1].source == "@return\nnothing useful"


def test_extractor_does_not_read_names_for_return_tags() -> None:
    tags = JSDocTagExtractor().extract_tags("/** @returns the sum */")

    assert tags == [
        TagRecord(
            tag="returns",
            name=None,
            type=None,
            description="the sum",
            source="@returns the sum",
        )
    ]


def test_extractor_returns_every_block_in_order() -> None:
    blocks = JSDocTagExtractor().extract("/** first */\nconst a = 1;\n/** second */")

    assert [block.description for block in blocks] == ["first", "second"]


def test_extractor_keeps_tag_with_unterminated_type(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING):
        tags = JSDocTagExtractor().extract_tags("/** @returns {number the sum */")

    assert len(tags) == 1
    assert tags[0].type is None
    assert tags[0].description == "{number the sum"
    assert "Unterminated type braces" in caplog.text
