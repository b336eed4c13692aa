"""
Error types raised by the parsing core and the PDF collaborator.

Three levels are distinguished:
- per table:    FormatError / AnchorNotFoundError -> the table is skipped
- per document: MetadataError / UnreadableDocumentError -> the document is skipped by the CLI
- per batch:    NoDocumentsError / NoValidOfferingsError -> nothing to save
"""

from __future__ import annotations


class TurmaHorarioError(Exception):
    """Base class for every error raised by this package."""


class FormatError(TurmaHorarioError):
    """A table field does not have the expected format."""


class AnchorNotFoundError(FormatError):
    """No cell with the text 'TURMA' exists in the table."""


class MetadataError(TurmaHorarioError):
    """The coordination/period line could not be read from the first page."""


class NoDocumentsError(TurmaHorarioError):
    """No PDF documents were found in the input."""


class NoValidOfferingsError(TurmaHorarioError):
    """The whole batch produced zero offerings."""


class UnreadableDocumentError(TurmaHorarioError):
    """A PDF file could not be opened or parsed."""
