"""Data models for miRNA primer pipeline."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class LineCategory(Enum):
    """Structural category of an input line."""
    HEADER = "header"
    SEQUENCE = "sequence"
    COMMENT = "comment"
    BLANK = "blank"
    UNKNOWN = "unknown"

    @property
    def display_tag(self) -> Optional[str]:
        """Colour token consumed by renderers; blank lines have none."""
        return DISPLAY_TAGS[self]

    @property
    def display_name(self) -> str:
        """Name shown next to a line in reports."""
        return "" if self is LineCategory.BLANK else self.value


DISPLAY_TAGS = {
    LineCategory.HEADER: "teal",
    LineCategory.SEQUENCE: "violet",
    LineCategory.COMMENT: "purple",
    LineCategory.BLANK: None,
    LineCategory.UNKNOWN: "grey",
}

PRIMER_SEPARATOR = "-"


@dataclass(frozen=True)
class LineRecord:
    """One annotated input line."""

    category: LineCategory
    text: str
    label: Optional[str] = None  # only set for sequence lines
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_transformed(self) -> bool:
        """True for sequence lines whose text now holds a primer pair."""
        return self.category is LineCategory.SEQUENCE and not self.errors

    @property
    def primers(self) -> Tuple[str, str]:
        """Split a transformed line into (primer A, primer B)."""
        if not self.is_transformed:
            raise ValueError(f"Line is not a transformed sequence: {self.text!r}")
        primer_a, primer_b = self.text.split(PRIMER_SEPARATOR)
        return (primer_a, primer_b)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'category': self.category.value,
            'label': self.label,
            'text': self.text,
            'errors': list(self.errors),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "LineRecord":
        """Create from dictionary."""
        return cls(
            category=LineCategory(data['category']),
            text=data['text'],
            label=data.get('label'),
            errors=tuple(data.get('errors', ())),
        )


@dataclass(frozen=True)
class Document:
    """Ordered, read-only collection of line records for one submission."""

    records: Tuple[LineRecord, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[LineRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> LineRecord:
        return self.records[index]

    def sequences(self) -> List[LineRecord]:
        """Get all sequence records."""
        return [record for record in self.records if record.category is LineCategory.SEQUENCE]

    def get_statistics(self) -> dict:
        """Get document statistics."""
        counts = Counter(record.category for record in self.records)
        sequences = self.sequences()
        transformed = sum(1 for record in sequences if record.is_transformed)

        stats = {"total_lines": len(self.records)}
        for category in LineCategory:
            stats[category.value] = counts.get(category, 0)
        stats["transformed"] = transformed
        stats["rejected"] = len(sequences) - transformed
        return stats

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {'records': [record.to_dict() for record in self.records]}

    @classmethod
    def from_dict(cls, data: Dict) -> "Document":
        """Create from dictionary."""
        return cls(records=tuple(LineRecord.from_dict(item) for item in data['records']))
