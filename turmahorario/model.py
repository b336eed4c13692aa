"""
Central data model definitions used across the project.

This module defines the canonical structure of the parsed records so that:
- the grid reader, the block parsers and the storage layer share the same names
- every record serializes to the same JSON field names
- parsed records cannot be modified after a table has been read
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple


class Table(Protocol):
    """
    A 2-D grid of text cells, as handed over by a table extractor.
    """

    @property
    def row_count(self) -> int: ...

    @property
    def col_count(self) -> int: ...

    def cell_text(self, row: int, col: int) -> str: ...


@dataclass(frozen=True)
class GridTable:
    """
    In-memory Table backed by a list of rows.

    Cells outside the grid read as "" so that anchor-relative lookups
    past the last row or column never raise.
    """

    rows: Tuple[Tuple[str, ...], ...]
    col_count: int

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Optional[str]]]) -> "GridTable":
        # None cells are produced by merged cells in the extractor output
        clean = tuple(tuple("" if cell is None else str(cell) for cell in row) for row in rows)
        width = max((len(row) for row in clean), default=0)
        return cls(rows=clean, col_count=width)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def cell_text(self, row: int, col: int) -> str:
        if row < 0 or col < 0 or row >= len(self.rows):
            return ""
        cells = self.rows[row]
        if col >= len(cells):
            return ""
        return cells[col]


@dataclass(frozen=True)
class Position:
    """Offset of the anchor cell inside a Table."""

    row: int
    col: int


@dataclass(frozen=True)
class Instructor:
    """
    One instructor row of a class table.

    workload_hours is -1 when the source text was not a number.
    """

    name: str
    workload_hours: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "workloadHours": self.workload_hours}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Instructor":
        return cls(name=data["name"], workload_hours=int(data["workloadHours"]))


@dataclass(frozen=True)
class ClassSession:
    """
    One weekly class meeting (weekday, room and its time slots).
    """

    weekday: str
    room: str
    time_slots: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"weekday": self.weekday, "room": self.room, "timeSlots": list(self.time_slots)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClassSession":
        return cls(
            weekday=data["weekday"],
            room=data["room"],
            time_slots=tuple(data["timeSlots"]),
        )


@dataclass(frozen=True)
class Offering:
    """
    Represents one course offering (course + section) of a coordination unit.
    """

    code: str
    name: str
    section: str
    seat_count: int
    coordination_unit: str
    period: str
    instructors: Tuple[Instructor, ...]
    sessions: Tuple[ClassSession, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "section": self.section,
            "seatCount": self.seat_count,
            "coordinationUnit": self.coordination_unit,
            "period": self.period,
            "instructors": [i.to_dict() for i in self.instructors],
            "sessions": [s.to_dict() for s in self.sessions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Offering":
        return cls(
            code=data["code"],
            name=data["name"],
            section=data["section"],
            seat_count=int(data["seatCount"]),
            coordination_unit=data["coordinationUnit"],
            period=data["period"],
            instructors=tuple(Instructor.from_dict(i) for i in data.get("instructors", [])),
            sessions=tuple(ClassSession.from_dict(s) for s in data.get("sessions", [])),
        )


@dataclass(frozen=True)
class DocumentReport:
    """
    All tables of one source document plus its coordination unit and period.

    tables may be a lazy iterable; it is consumed once.
    """

    coordination_unit: str
    period: str
    tables: Iterable[Table]
    source: str = ""


@dataclass(frozen=True)
class SkippedTable:
    """A table that was rejected, with the reason why."""

    source: str
    index: int
    reason: str


@dataclass
class ReportResult:
    offerings: List[Offering] = field(default_factory=list)
    skipped: List[SkippedTable] = field(default_factory=list)


@dataclass
class BatchResult:
    offerings: List[Offering] = field(default_factory=list)
    skipped: List[SkippedTable] = field(default_factory=list)
