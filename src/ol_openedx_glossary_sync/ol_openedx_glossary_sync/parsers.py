"""
Parsing of glossary CSV exports.

The export is shaped ``en,<locale>,pos,description``: one header row
followed by term, translation, part of speech and comment columns. Both the
import path (``parse``) and the inspection path (``preview``) share one
tokenizer and one column-repair rule; they only differ in how many columns a
row needs to be kept.
"""

import csv
import io
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from ol_openedx_glossary_sync.constants import (
    GLOSSARY_COLUMN_COUNT,
    MIN_HEADER_COLUMNS,
    MIN_PREVIEW_COLUMNS,
)
from ol_openedx_glossary_sync.entries import GlossaryRecord

log = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


@dataclass(frozen=True)
class GlossaryPreview:
    """Header and records of an export, read without side effects."""

    header: tuple[str, ...] = ()
    records: tuple[GlossaryRecord, ...] = field(default_factory=tuple)


def decode_export(raw: bytes | str) -> str:
    """Decode an export body as UTF-8, dropping a leading byte order mark."""
    if isinstance(raw, bytes):
        return raw.decode("utf-8-sig", errors="replace")
    return raw.removeprefix(BYTE_ORDER_MARK)


def repair_row(row: list[str]) -> list[str]:
    """
    Collapse an over-wide row back to four columns.

    Unquoted commas in free text push extra cells into the middle of the row,
    so the first two and the last two cells are kept and the overflow between
    them is dropped: ``[a, b, c, d, e, f]`` becomes ``[a, b, e, f]``.
    """
    if len(row) > GLOSSARY_COLUMN_COUNT:
        return row[:2] + row[-2:]
    return row


def is_blank(row: list[str]) -> bool:
    return not any(row)


class GlossaryCSVParser:
    """Tolerant reader for glossary CSV exports."""

    delimiter = ","
    quotechar = '"'

    def iter_rows(self, raw: bytes | str) -> Iterator[list[str]]:
        """
        Yield trimmed rows, skipping any row the csv module cannot read.
        """
        reader = csv.reader(
            io.StringIO(decode_export(raw), newline=""),
            delimiter=self.delimiter,
            quotechar=self.quotechar,
            doublequote=True,
            escapechar=None,
        )
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as exc:
                log.debug("Skipping unreadable CSV line %s: %s", reader.line_num, exc)
                continue
            yield [cell.strip() for cell in row]

    def _split_header(
        self, raw: bytes | str
    ) -> tuple[list[str] | None, Iterator[list[str]]]:
        rows = (row for row in self.iter_rows(raw) if not is_blank(row))
        return next(rows, None), rows

    def parse(
        self, raw: bytes | str, locale: str | None = None
    ) -> list[GlossaryRecord]:
        """
        Parse an export into records for import.

        Rows with fewer than four columns are discarded and wider rows are
        repaired with ``repair_row``. Validation of the record contents is
        left to the caller.

        Args:
            raw: The export body
            locale: Expected remote locale, compared with the header

        Returns:
            list[GlossaryRecord]: Records in file order
        """
        header, rows = self._split_header(raw)
        if header is None or len(header) < MIN_HEADER_COLUMNS:
            log.debug("Glossary export has no usable header")
            return []

        if locale and header[1].lower() != locale.lower():
            log.warning(
                "Glossary export header names locale %r, expected %r",
                header[1],
                locale,
            )

        records = []
        for row in rows:
            if len(row) < GLOSSARY_COLUMN_COUNT:
                log.debug("Skipping short glossary row: %s", row)
                continue
            term, translation, part_of_speech, comment = repair_row(row)
            records.append(GlossaryRecord(term, translation, part_of_speech, comment))
        return records

    def preview(self, raw: bytes | str) -> GlossaryPreview:
        """
        Parse an export for inspection.

        Rows need only a term and a translation; missing trailing columns read
        as empty strings. Records without a term are dropped.
        """
        header, rows = self._split_header(raw)
        if header is None:
            return GlossaryPreview()

        records = []
        for row in rows:
            if len(row) < MIN_PREVIEW_COLUMNS:
                continue
            cells = repair_row(row)
            cells += [""] * (GLOSSARY_COLUMN_COUNT - len(cells))
            record = GlossaryRecord(*cells)
            if record.term:
                records.append(record)

        return GlossaryPreview(
            header=tuple(cell.casefold() for cell in header),
            records=tuple(records),
        )
