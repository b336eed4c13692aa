"""
PDF loading (PDF -> DocumentReport).

- Collects the PDF files of the input (single file or directory)
- Extracts every page's tables with pdfplumber as GridTables
- Reads the coordination unit and period from the first page text

The tables of a document are produced lazily, page by page.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import pdfplumber
from pdfplumber.utils.exceptions import PdfminerException

from turmahorario.errors import MetadataError, UnreadableDocumentError
from turmahorario.model import DocumentReport, GridTable


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

COORD_MARKER = "COORD"
DEFAULT_SUFFIX = "- POLI"

# One or more "HH:MM-HH:MM" slots written back to back
_TIME_SLOTS = re.compile(r"(?:\d{1,2}:\d{2}-\d{1,2}:\d{2})+")


# ---------------------------------------------------------------------------
# Metadata line
# ---------------------------------------------------------------------------


def parse_coordination_line(text: str, suffix: str = DEFAULT_SUFFIX) -> Tuple[str, str]:
    """
    Return (coordination unit, period) from the first-page text.

    The line looks like:
        "COORDENAÇÃO DE ENGENHARIA DA COMPUTAÇÃO - 2023.1 - POLI"
    The decorative suffix is removed and the rest is split on the last '-'.
    """
    line = next((ln for ln in text.splitlines() if COORD_MARKER in ln), None)
    if line is None:
        raise MetadataError(f"no line containing '{COORD_MARKER}' on the first page")

    if suffix:
        line = line.replace(suffix, "")

    if "-" not in line:
        raise MetadataError(f"coordination line has no '-' before the period: {line.strip()!r}")

    coordination, period = line.rsplit("-", 1)
    return coordination.strip(), period.strip()


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def load_pdf_paths(path: str | Path) -> List[Path]:
    """
    Return the PDF files to process: the file itself, or every *.pdf of a
    directory in name order.

    Raises FileNotFoundError when the path does not exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Failed to load file at {p.resolve()}")

    if p.is_dir():
        return sorted(f for f in p.iterdir() if f.is_file() and f.suffix.lower() == ".pdf")
    return [p]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def _join_cell_lines(text: Optional[str]) -> Optional[str]:
    """
    Undo pdfplumber's line wrapping inside a cell.

    Wrapped time slots are glued back together ("07:30-08:20\\n08:20-09:10"
    -> "07:30-08:2008:20-09:10"), any other text is joined with a space
    ("DIA DA\\nSEMANA" -> "DIA DA SEMANA").
    """
    if text is None:
        return None

    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    if len(lines) < 2:
        return text
    if all(_TIME_SLOTS.fullmatch(ln) for ln in lines):
        return "".join(lines)
    return " ".join(lines)


def _iter_tables(pdf_path: Path) -> Iterator[GridTable]:
    # Keep the file open only while the generator is consumed
    try:
        with pdfplumber.open(pdf_path) as pdf:
            for page in pdf.pages:
                for rows in page.extract_tables():
                    if rows:
                        yield GridTable.from_rows([_join_cell_lines(cell) for cell in row] for row in rows)
    except PdfminerException as exc:
        raise UnreadableDocumentError(f"cannot extract tables from {pdf_path.name}: {exc}") from exc


def read_first_page_text(pdf_path: Path) -> str:
    with pdfplumber.open(pdf_path) as pdf:
        if not pdf.pages:
            return ""
        return pdf.pages[0].extract_text() or ""


def extract_report(pdf_path: str | Path, suffix: str = DEFAULT_SUFFIX) -> DocumentReport:
    """
    Build the DocumentReport of one PDF.

    Raises UnreadableDocumentError when the file is not a readable PDF and
    MetadataError when the coordination line is missing.
    """
    p = Path(pdf_path)
    try:
        text = read_first_page_text(p)
    except PdfminerException as exc:
        raise UnreadableDocumentError(f"cannot read PDF {p.name}: {exc}") from exc

    coordination, period = parse_coordination_line(text, suffix=suffix)
    return DocumentReport(
        coordination_unit=coordination,
        period=period,
        tables=_iter_tables(p),
        source=str(p),
    )
