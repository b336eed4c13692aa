"""
Parsing (class tables -> structured offerings).

- Locates the "TURMA" anchor of each table
- Reads section, seat count, code and name next to the anchor
- Reads the instructor block until the "DIA DA SEMANA" row
- Reads the weekly session block while rows start with a weekday code
- Skips tables that fail, and fails the batch only when nothing is left

Table layout, relative to the anchor (row, col):

    (0,0) TURMA     (0,1..) other header cells
    (1,0) section   (1,1) seats      (1,2) "code - name"
    (2,*) instructor header
    (3,*) instructor name | workload hours      (repeated)
    (k,0) DIA DA SEMANA
    (k+1,*) weekday | room | time slots         (repeated)
"""

from __future__ import annotations

import re

from itertools import takewhile

from typing import Iterable, Tuple

from turmahorario.errors import (
    AnchorNotFoundError,
    FormatError,
    NoDocumentsError,
    NoValidOfferingsError,
    UnreadableDocumentError,
)
from turmahorario.grid import ValueAt, find_anchor, make_value_at, rows_below_anchor
from turmahorario.model import (
    BatchResult,
    ClassSession,
    DocumentReport,
    Instructor,
    Offering,
    ReportResult,
    SkippedTable,
    Table,
)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MIN_COLUMNS = 3
INSTRUCTOR_START_ROW = 3
SESSION_HEADER = "DIA DA SEMANA"
TIME_SLOT_WIDTH = 11

WEEKDAYS: Tuple[str, ...] = ("seg", "ter", "qua", "qui", "sex", "sab", "dom")

_UNSIGNED_INT = re.compile(r"\d+")


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def weekday_code(text: str) -> int:
    """
    Map a 3-letter weekday (SEG..DOM, any case) to 0..6, anything else to -1.
    """
    try:
        return WEEKDAYS.index(text.strip().lower())
    except ValueError:
        return -1


def parse_workload_hours(text: str) -> int:
    # Unreadable workload is not an error, it becomes -1
    raw = text.strip()
    if not _UNSIGNED_INT.fullmatch(raw):
        return -1
    return int(raw)


def parse_seat_count(text: str) -> int:
    """
    Parse the seat count of an offering. Raises FormatError if not a number.
    """
    raw = text.strip()
    if not _UNSIGNED_INT.fullmatch(raw):
        raise FormatError(f"invalid seat count: {text!r}")
    return int(raw)


def split_code_and_name(text: str) -> Tuple[str, str]:
    """
    Split "07700 - Algoritmos" into ("07700", "Algoritmos") on the first '-'.
    """
    if "-" not in text:
        raise FormatError(f"missing '-' between code and name: {text!r}")
    code, name = text.split("-", 1)
    return code.strip(), name.strip()


def chunk_time_slots(raw: str, size: int = TIME_SLOT_WIDTH) -> Tuple[str, ...]:
    """
    Split a time-slot string into consecutive chunks of `size` characters.

    "07:30-08:2008:20-09:10" -> ("07:30-08:20", "08:20-09:10")
    The last chunk is shorter when len(raw) is not a multiple of size.
    """
    return tuple(raw[i : i + size] for i in range(0, len(raw), size))


# ---------------------------------------------------------------------------
# Block parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def parse_instructors(value_at: ValueAt, row_limit: int) -> Tuple[Instructor, ...]:
    """
    Read instructor rows from relative row 3 until the "DIA DA SEMANA" row
    or the end of the table.
    """
    rows = takewhile(
        lambda i: value_at(i, 0) != SESSION_HEADER,
        range(INSTRUCTOR_START_ROW, row_limit),
    )
    return tuple(Instructor(value_at(i, 0), parse_workload_hours(value_at(i, 1))) for i in rows)


def parse_sessions(value_at: ValueAt, start: int, row_limit: int) -> Tuple[ClassSession, ...]:
    """
    Read session rows from `start` while the first cell is a weekday code.
    """
    rows = takewhile(
        lambda i: weekday_code(value_at(i, 0)) >= 0,
        range(start, row_limit),
    )
    return tuple(
        ClassSession(
            weekday=value_at(i, 0).upper(),
            room=value_at(i, 1),
            time_slots=chunk_time_slots(value_at(i, 2)),
        )
        for i in rows
    )


def table_to_offering(table: Table, coordination_unit: str, period: str) -> Offering:
    """
    Build one Offering from a class table.

    Raises AnchorNotFoundError or FormatError when the table cannot be read.
    """
    anchor = find_anchor(table)
    value_at = make_value_at(table, anchor)
    row_limit = rows_below_anchor(table, anchor)

    instructors = parse_instructors(value_at, row_limit)

    # Sessions start after the instructors and the "DIA DA SEMANA" row
    sessions = parse_sessions(value_at, INSTRUCTOR_START_ROW + len(instructors) + 1, row_limit)

    code, name = split_code_and_name(value_at(1, 2))

    return Offering(
        code=code,
        name=name,
        section=value_at(1, 0),
        seat_count=parse_seat_count(value_at(1, 1)),
        coordination_unit=coordination_unit,
        period=period,
        instructors=instructors,
        sessions=sessions,
    )


# ---------------------------------------------------------------------------
# Report assembly
# ---------------------------------------------------------------------------


def is_valid_table(table: Table) -> bool:
    # Narrow tables are cover pages or decorations
    return table.col_count >= MIN_COLUMNS


def transform_report(report: DocumentReport) -> ReportResult:
    """
    Convert every valid table of one document into an Offering.

    A table that fails is recorded in `skipped` and does not stop the others.
    When the document stops yielding tables (UnreadableDocumentError), the
    offerings read so far are kept and the rest of the document is skipped.
    """
    result = ReportResult()
    index = -1

    try:
        for index, table in enumerate(report.tables):
            if not is_valid_table(table):
                continue

            try:
                offering = table_to_offering(table, report.coordination_unit, report.period)
            except AnchorNotFoundError as exc:
                result.skipped.append(SkippedTable(report.source, index, f"anchor not found: {exc}"))
                continue
            except FormatError as exc:
                result.skipped.append(SkippedTable(report.source, index, str(exc)))
                continue

            result.offerings.append(offering)
    except UnreadableDocumentError as exc:
        # index + 1 is the table that could not be extracted
        result.skipped.append(SkippedTable(report.source, index + 1, f"document unreadable: {exc}"))

    return result


def transform_reports(reports: Iterable[DocumentReport]) -> BatchResult:
    """
    Convert all documents of a batch.

    Raises NoDocumentsError for an empty input and NoValidOfferingsError
    when no table of any document produced an offering.
    """
    batch = BatchResult()
    seen = 0

    for report in reports:
        seen += 1
        result = transform_report(report)
        batch.offerings.extend(result.offerings)
        batch.skipped.extend(result.skipped)

    if seen == 0:
        raise NoDocumentsError("no documents to process")

    if not batch.offerings:
        raise NoValidOfferingsError("no valid offerings found in the document(s)")

    return batch
