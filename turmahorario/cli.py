"""
CLI (Command Line Interface).

Converts the class/schedule PDFs of a coordination unit into one JSON file:

    turmahorario                       # every PDF in ./resources
    turmahorario relatorio.pdf         # a single PDF
    turmahorario pdfs/ -o out.json     # a directory, custom output path
    turmahorario pdfs/ --summary       # also print a table of the offerings

Exit codes: 0 on success, 1 when nothing could be converted.
With -D/--debug errors are raised with their traceback instead.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from turmahorario.errors import (
    MetadataError,
    NoDocumentsError,
    TurmaHorarioError,
    UnreadableDocumentError,
)
from turmahorario.extract import DEFAULT_SUFFIX, extract_report, load_pdf_paths
from turmahorario.model import DocumentReport, Offering, SkippedTable
from turmahorario.parse import transform_reports
from turmahorario.storage import default_output_path, save_offerings

console = Console()


def _default_input_dir() -> Path:
    """
    Return the default input directory (./resources).
    """
    return Path.cwd() / "resources"


def _read_reports(paths: Iterable[Path], suffix: str) -> List[DocumentReport]:
    """
    Open every PDF and read its metadata. Documents that cannot be read are
    reported and skipped.
    """
    reports: List[DocumentReport] = []
    for path in paths:
        try:
            reports.append(extract_report(path, suffix=suffix))
        except (MetadataError, UnreadableDocumentError, OSError) as exc:
            console.print(f"[yellow]Skipping {escape(path.name)}: {escape(str(exc))}[/]")
    return reports


def _print_skipped(skipped: List[SkippedTable]) -> None:
    for s in skipped:
        name = Path(s.source).name if s.source else "?"
        console.print(f"[yellow]Skipped table {s.index} of {escape(name)}: {escape(s.reason)}[/]")


def _print_summary(offerings: List[Offering]) -> None:
    table = Table(title=f"Offerings ({len(offerings)})", box=box.SIMPLE)
    table.add_column("Code")
    table.add_column("Name")
    table.add_column("Section")
    table.add_column("Seats", justify="right")
    table.add_column("Instructors", justify="right")
    table.add_column("Sessions", justify="right")

    for o in offerings:
        table.add_row(
            o.code,
            o.name,
            o.section,
            str(o.seat_count),
            str(len(o.instructors)),
            str(len(o.sessions)),
        )
    console.print(table)


def run(args: argparse.Namespace) -> int:
    """
    Run the whole conversion for parsed CLI args and return the exit code.
    """
    paths = load_pdf_paths(args.input)
    if not paths:
        raise NoDocumentsError(f"No PDF files found in {Path(args.input).resolve()}")

    reports = _read_reports(paths, args.strip_suffix)
    if not reports:
        raise NoDocumentsError("No valid PDF files could be read")

    console.print(f"Preparing data for period {escape(reports[0].period)}")

    batch = transform_reports(reports)
    _print_skipped(batch.skipped)

    out_path = args.out if args.out is not None else default_output_path(batch.offerings[0].period)
    saved = save_offerings(batch.offerings, out_path)

    if args.summary:
        _print_summary(batch.offerings)

    console.print(f"Saved {len(batch.offerings)} offerings to: {saved.resolve()}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser.
    """
    parser = argparse.ArgumentParser(
        prog="turmahorario",
        description="Convert class/schedule PDF reports into JSON offerings",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=_default_input_dir(),
        help="PDF file or directory with PDF files (default: ./resources)",
    )
    parser.add_argument("-o", "--out", type=Path, default=None, help="Output JSON path")
    parser.add_argument(
        "--strip-suffix",
        type=str,
        default=DEFAULT_SUFFIX,
        help=f"Decorative suffix removed from the coordination line (default: {DEFAULT_SUFFIX!r})",
    )
    parser.add_argument("--summary", action="store_true", help="Print a table of the parsed offerings")
    parser.add_argument("-D", "--debug", action="store_true", help="Raise errors with traceback")
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, runs the conversion
    and exits via SystemExit with a return code.
    """
    args = build_parser().parse_args(argv)

    try:
        code = run(args)
    except (TurmaHorarioError, OSError) as exc:
        if args.debug:
            raise
        console.print(f"[red]\\[ERR] {escape(str(exc))}[/]")
        raise SystemExit(1)

    raise SystemExit(code)
