"""Report writers for built documents."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from loguru import logger

from .models import Document, LineCategory


@dataclass(frozen=True)
class ReportRow:
    """One output row."""

    name: str
    value: str
    errors: Tuple[str, ...] = field(default_factory=tuple)
    flagged: bool = False


def format_rows(
    document: Document,
    primer_a_name: str = "primerRT",
    primer_b_name: str = "primerqPCR-Fwd",
) -> List[ReportRow]:
    """
    Turn a document into report rows.

    A transformed sequence line becomes two rows, one per primer, named after
    the primer and the line's label. Every other line becomes a single row.
    """
    rows = []
    for record in document:
        if record.is_transformed:
            primer_a, primer_b = record.primers
            if record.label:
                names = (primer_a_name + record.label, primer_b_name + record.label)
            else:
                names = (record.category.display_name,) * 2
            rows.append(ReportRow(name=names[0], value=primer_a))
            rows.append(ReportRow(name=names[1], value=primer_b))
        else:
            flagged = record.category is LineCategory.UNKNOWN or bool(record.errors)
            rows.append(ReportRow(
                name=record.category.display_name,
                value=record.text,
                errors=record.errors,
                flagged=flagged,
            ))
    return rows


def write_text(rows: List[ReportRow], handle: TextIO) -> None:
    """Write rows as tab-separated text; flagged rows start with a '!' column."""
    for row in rows:
        fields = ["!" if row.flagged else "", row.name, row.value]
        if row.errors:
            fields.append(' '.join(f"error(s) : {error}" for error in row.errors))
        handle.write('\t'.join(fields) + '\n')


def format_output(
    document: Document,
    output_file: Optional[Path],
    output_format: str = "text",
    primer_a_name: str = "primerRT",
    primer_b_name: str = "primerqPCR-Fwd",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Write a document report.

    Args:
        document: Built document
        output_file: Destination path, or None to write to ``stream``
        output_format: ``text`` or ``json``
        primer_a_name: Row name prefix for the first primer
        primer_b_name: Row name prefix for the second primer
        stream: Fallback text stream when no output file is given
    """
    if output_format not in ("text", "json"):
        raise ValueError(f"Unknown output format: {output_format}")

    if output_file is None:
        _write(document, stream or sys.stdout, output_format, primer_a_name, primer_b_name)
        return

    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Writing {output_format} report: {output_file}")
    with open(output_file, 'w', encoding='utf-8') as f:
        _write(document, f, output_format, primer_a_name, primer_b_name)


def _write(document, handle, output_format, primer_a_name, primer_b_name) -> None:
    if output_format == "json":
        json.dump(document.to_dict(), handle, indent=2)
        handle.write('\n')
    else:
        write_text(format_rows(document, primer_a_name, primer_b_name), handle)
