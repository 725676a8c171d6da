"""Document builder: classify, validate, transform and label input lines."""

from __future__ import annotations

import re
from typing import List, Optional

from loguru import logger

from ..config import PipelineConfig
from ..exceptions import InputError, TransformError
from ..models import PRIMER_SEPARATOR, Document, LineCategory, LineRecord
from ..primers.transformer import SequenceTransformer, StemLoopPrimerTransformer
from ..primers.validator import MirnaValidator, SequenceValidator
from .classifier import classify


WHITESPACE_RUN = re.compile(r'\s+')


def derive_label(previous: Optional[LineRecord]) -> str:
    """
    Derive the label of a sequence line from the record just before it.

    Args:
        previous: Preceding record, or None for the first line

    Returns:
        ``"_" + first header token`` when the previous line is a header, else ``""``
    """
    if previous is None or previous.category is not LineCategory.HEADER:
        return ""
    name = WHITESPACE_RUN.split(previous.text[1:], maxsplit=1)[0]
    return "_" + name


class DocumentBuilder:
    """Build annotated documents from raw FASTA-style text."""

    def __init__(
        self,
        validator: Optional[SequenceValidator] = None,
        transformer: Optional[SequenceTransformer] = None,
        max_input_size: Optional[int] = None,
    ):
        """
        Initialize document builder.

        Args:
            validator: Callable returning error descriptions for a sequence
            transformer: Callable turning (sequence, prefix, suffix) into a primer pair
            max_input_size: Maximum accepted input length in characters
        """
        self.validator = validator if validator is not None else MirnaValidator()
        self.transformer = transformer if transformer is not None else StemLoopPrimerTransformer()
        self.max_input_size = max_input_size

    def build(self, raw_input: str, prefix: str, suffix: str) -> Document:
        """
        Build a document from raw input text.

        Args:
            raw_input: Text block, lines separated by newlines
            prefix: Forward primer literal passed to the transformer
            suffix: RT primer literal passed to the transformer

        Returns:
            Document with one record per input line
        """
        if not isinstance(raw_input, str):
            raise InputError(f"Expected text input, got {type(raw_input).__name__}")

        if self.max_input_size is not None and len(raw_input) > self.max_input_size:
            raise InputError(
                f"Input too large: {len(raw_input)} characters (limit {self.max_input_size})"
            )

        lines = raw_input.split('\n')
        logger.info(f"Building document from {len(lines)} lines")

        records: List[LineRecord] = []
        for line_number, line in enumerate(lines, start=1):
            category = classify(line)

            if category is LineCategory.SEQUENCE:
                previous = records[-1] if records else None
                record = self._build_sequence_record(line, line_number, previous, prefix, suffix)
            else:
                record = LineRecord(category=category, text=line)

            records.append(record)

        document = Document(records=tuple(records))
        stats = document.get_statistics()
        logger.info(
            f"Built document: {stats['sequence']} sequences, "
            f"{stats['transformed']} transformed, {stats['rejected']} rejected"
        )
        return document

    def _build_sequence_record(
        self,
        line: str,
        line_number: int,
        previous: Optional[LineRecord],
        prefix: str,
        suffix: str,
    ) -> LineRecord:
        """Validate, transform and label one sequence line."""
        label = derive_label(previous)
        errors = list(self.validator(line))

        if errors:
            for error in errors:
                logger.warning(f"Line {line_number}: {error}")
            return LineRecord(category=LineCategory.SEQUENCE, text=line, label=label, errors=tuple(errors))

        try:
            primers = self.transformer(line, prefix, suffix)
        except TransformError as e:
            logger.warning(f"Line {line_number}: {e}")
            return LineRecord(category=LineCategory.SEQUENCE, text=line, label=label, errors=(str(e),))
        except Exception as e:
            error = f"Primer transformation failed for {line}: {e}"
            logger.warning(f"Line {line_number}: {error}")
            return LineRecord(category=LineCategory.SEQUENCE, text=line, label=label, errors=(error,))

        if not isinstance(primers, str) or primers.count(PRIMER_SEPARATOR) != 1:
            error = f"transformer output must contain exactly one '{PRIMER_SEPARATOR}': {primers}"
            logger.warning(f"Line {line_number}: {error}")
            return LineRecord(category=LineCategory.SEQUENCE, text=line, label=label, errors=(error,))

        logger.debug(f"Line {line_number}: designed primers {primers}")
        return LineRecord(category=LineCategory.SEQUENCE, text=primers, label=label)


def build_document(
    raw_input: str,
    config: Optional[PipelineConfig] = None,
    validator: Optional[SequenceValidator] = None,
    transformer: Optional[SequenceTransformer] = None,
) -> Document:
    """
    Build a document using a pipeline configuration.

    Default collaborators are created from the configuration when not given.
    """
    if config is None:
        config = PipelineConfig()

    if validator is None:
        validator = MirnaValidator(config.min_length, config.max_length)
    if transformer is None:
        transformer = StemLoopPrimerTransformer(config.rt_overlap)

    builder = DocumentBuilder(validator, transformer, max_input_size=config.max_input_size)
    return builder.build(raw_input, config.prefix, config.suffix)
