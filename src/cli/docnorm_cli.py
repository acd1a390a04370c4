# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line front end for documentation comment normalization."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.style import Style
from rich.table import Table

from docnorm.assembler import DocAssembler
from docnorm.expression import TypeParseError
from docnorm.model import DocRecord, NormalizedType

logger = logging.getLogger(__name__)

TABLE_COLUMN_RATIOS: dict[str, int] = {
    "name": 2,
    "type": 3,
    "optional": 1,
    "description": 5,
}


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="docnorm")
    subparsers = parser.add_subparsers(dest="command", required=True)
    parse_parser = subparsers.add_parser("parse")
    source_group = parse_parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--input", required=False, help="File holding the comment body."
    )
    source_group.add_argument(
        "--text", required=False, help="Comment body passed inline."
    )
    parse_parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    parse_parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )
    parse_parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(
    argv: list[str],
    stdout: TextIO,
    stderr: TextIO,
    stdin: TextIO | None = None,
) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.
        stdin: Stream read when neither ``--input`` nor ``--text`` is given.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.command == "parse":
        return _run_parse(args=args, stdout=stdout, stderr=stderr, stdin=stdin)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_parse(
    args: argparse.Namespace,
    stdout: TextIO,
    stderr: TextIO,
    stdin: TextIO | None,
) -> int:
    """Run parse command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.
        stdin: Fallback input stream.

    Returns:
        Exit code.
    """
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.text is not None:
        comment = args.text
    elif args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            logger.warning(f"Path does not exist (path={input_path})")
            stderr.write(f"Path does not exist: {input_path}\n")
            return 2
        try:
            comment = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Failed to read input (path={input_path} error={exc})")
            stderr.write(f"Failed to read input: {input_path}\n")
            return 2
    else:
        comment = (stdin or sys.stdin).read()

    try:
        record = DocAssembler().assemble(comment)
    except TypeParseError as exc:
        logger.warning(f"Malformed type expression (expression={exc.expression!r})")
        stderr.write(f"Malformed type expression: {exc.expression}\n")
        return 2
    logger.info(
        f"Comment normalized (params={len(record.params)} returns={record.returns is not None})"
    )

    if args.format == "json":
        if args.output:
            try:
                _write_json_file(record=record, output_path=Path(args.output))
            except OSError as exc:
                logger.warning(
                    f"Failed to write JSON output file (output_path={args.output} error={exc})"
                )
                stderr.write(f"Failed to write JSON output file: {args.output}\n")
                return 2
        else:
            _write_json(record=record, stdout=stdout)
    else:
        _write_table(record=record, stdout=stdout)
    return 0


def format_type(value: NormalizedType | None) -> str:
    """Render a normalized type for display.

    Args:
        value: Normalized type or ``None``.

    Returns:
        Compact text such as ``union<string, number>``.
    """
    if value is None:
        return "-"
    if value.elements is None:
        return value.name
    return f"{value.name}<{', '.join(format_type(item) for item in value.elements)}>"


def _write_json(record: DocRecord, stdout: TextIO) -> None:
    """Write the record in JSON format.

    Args:
        record: Normalized record.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(record.to_dict(), indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_json_file(record: DocRecord, output_path: Path) -> None:
    """Write raw JSON payload to an output file.

    Args:
        record: Normalized record.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(record.to_dict(), indent=2, sort_keys=True), encoding="utf-8"
    )


def _write_table(record: DocRecord, stdout: TextIO) -> None:
    """Write the record as a Rich table.

    Args:
        record: Normalized record.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.rule(
        escape(record.description or "(no description)"),
        style=Style(color="cyan"),
        characters="-",
    )
    table = Table(show_header=True, show_lines=True, expand=True)
    table.add_column("name", ratio=TABLE_COLUMN_RATIOS["name"], overflow="fold")
    table.add_column("type", ratio=TABLE_COLUMN_RATIOS["type"], overflow="fold")
    table.add_column(
        "optional", ratio=TABLE_COLUMN_RATIOS["optional"], overflow="fold"
    )
    table.add_column(
        "description", ratio=TABLE_COLUMN_RATIOS["description"], overflow="fold"
    )
    for param in record.params:
        table.add_row(
            escape(param.name),
            escape(format_type(param.type)),
            str(param.optional).lower(),
            escape(param.description or ""),
        )
    if record.returns is not None:
        table.add_row(
            "(returns)",
            escape(format_type(record.returns.type)),
            "",
            escape(record.returns.description or ""),
        )
    console.print(table)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
