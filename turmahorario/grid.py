"""
Anchor lookup and anchor-relative cell access.

Every class table contains a header cell with the text "TURMA". All other
fields are read at fixed offsets from that cell, so the parsing code never
depends on where the extractor happened to place the header.
"""

from __future__ import annotations

from typing import Callable

from turmahorario.errors import AnchorNotFoundError
from turmahorario.model import Position, Table

ANCHOR_TEXT = "TURMA"

ValueAt = Callable[[int, int], str]


def find_anchor(table: Table) -> Position:
    """
    Return the position of the first "TURMA" cell, scanning row by row.

    Raises AnchorNotFoundError when the table has no such cell.
    """
    for row in range(table.row_count):
        for col in range(table.col_count):
            if table.cell_text(row, col).strip() == ANCHOR_TEXT:
                return Position(row, col)

    raise AnchorNotFoundError(
        f"no '{ANCHOR_TEXT}' cell in table ({table.row_count}x{table.col_count})"
    )


def rows_below_anchor(table: Table, anchor: Position) -> int:
    # Relative rows 0..n-1 exist in the table
    return max(table.row_count - anchor.row, 0)


def make_value_at(table: Table, anchor: Position | None = None) -> ValueAt:
    """
    Build value_at(i, j): the stripped text of the cell i rows below and
    j columns right of the anchor.
    """
    origin = anchor if anchor is not None else find_anchor(table)

    def value_at(i: int, j: int) -> str:
        return table.cell_text(origin.row + i, origin.col + j).strip()

    return value_at
