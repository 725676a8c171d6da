"""Tests for the document builder and label derivation."""

import pytest

from mirna_primer_pipeline.config import PipelineConfig
from mirna_primer_pipeline.core.builder import DocumentBuilder, build_document, derive_label
from mirna_primer_pipeline.exceptions import InputError, TransformError
from mirna_primer_pipeline.models import LineCategory, LineRecord


MIR21 = "UAGCUUAUCAGACUGAUGUUGA"
PREFIX = "GCGGCG"
SUFFIX = "GTCG"


class RecordingValidator:
    """Validator stub returning fixed errors and recording its calls."""

    def __init__(self, errors=None):
        self.errors = errors or []
        self.calls = []

    def __call__(self, sequence):
        self.calls.append(sequence)
        return list(self.errors)


class RecordingTransformer:
    """Transformer stub joining prefix and suffix around the sequence."""

    def __init__(self):
        self.calls = []

    def __call__(self, sequence, prefix, suffix):
        self.calls.append((sequence, prefix, suffix))
        return f"{prefix}{sequence}-{sequence}{suffix}"


def test_derive_label_from_header():
    """The first header token becomes the label."""
    header = LineRecord(category=LineCategory.HEADER, text=">abc123 extra text")
    assert derive_label(header) == "_abc123"

    header = LineRecord(category=LineCategory.HEADER, text=">abc\tdesc")
    assert derive_label(header) == "_abc"


def test_derive_label_without_header():
    """No preceding header means an empty label."""
    assert derive_label(None) == ""
    assert derive_label(LineRecord(category=LineCategory.COMMENT, text=";x")) == ""


def test_derive_label_empty_header_name():
    """A header with nothing right after '>' gives a bare underscore."""
    assert derive_label(LineRecord(category=LineCategory.HEADER, text=">")) == "_"
    assert derive_label(LineRecord(category=LineCategory.HEADER, text="> abc")) == "_"


def test_end_to_end_example():
    """Five lines produce five records in input order."""
    document = build_document(">mir1 desc\nAUGCAUGC\n;note\n\n???")

    assert len(document) == 5
    assert [record.category for record in document] == [
        LineCategory.HEADER,
        LineCategory.SEQUENCE,
        LineCategory.COMMENT,
        LineCategory.BLANK,
        LineCategory.UNKNOWN,
    ]

    header, sequence, comment, blank, unknown = document
    assert header.label is None and header.text == ">mir1 desc"
    assert sequence.label == "_mir1"
    # 8 nt is below the default minimum length
    assert sequence.text == "AUGCAUGC"
    assert sequence.errors
    assert comment.label is None and comment.text == ";note"
    assert blank.label is None and blank.text == ""
    assert unknown.label is None and unknown.text == "???"
    assert all(not record.errors for record in (header, comment, blank, unknown))


def test_valid_sequence_is_transformed():
    """A valid sequence's text is replaced by the transformer output."""
    validator = RecordingValidator()
    transformer = RecordingTransformer()
    builder = DocumentBuilder(validator, transformer)

    document = builder.build(f">hsa-miR-21-5p MIMAT0000076\n{MIR21}", PREFIX, SUFFIX)

    record = document[1]
    assert record.text == f"{PREFIX}{MIR21}-{MIR21}{SUFFIX}"
    assert record.label == "_hsa-miR-21-5p"
    assert record.errors == ()
    assert validator.calls == [MIR21]
    assert transformer.calls == [(MIR21, PREFIX, SUFFIX)]


def test_invalid_sequence_keeps_raw_text():
    """Validation errors are kept in order and block transformation."""
    validator = RecordingValidator(errors=["first", "second", "first"])
    transformer = RecordingTransformer()
    builder = DocumentBuilder(validator, transformer)

    document = builder.build(MIR21, PREFIX, SUFFIX)

    record = document[0]
    assert record.text == MIR21
    assert record.errors == ("first", "second", "first")
    assert record.label == ""
    assert transformer.calls == []


def test_collaborators_only_see_sequence_lines():
    """Headers, comments and unknown lines never reach the collaborators."""
    validator = RecordingValidator()
    transformer = RecordingTransformer()
    builder = DocumentBuilder(validator, transformer)

    builder.build(">h\n;c\n\n??\nAUGC\nUUUU", PREFIX, SUFFIX)

    assert validator.calls == ["AUGC", "UUUU"]
    assert [call[0] for call in transformer.calls] == ["AUGC", "UUUU"]


def test_label_uses_only_immediately_preceding_line():
    """A header two lines above does not label a sequence."""
    builder = DocumentBuilder(RecordingValidator(), RecordingTransformer())

    document = builder.build(">mir1\n\nAUGC\n>mir2\nAUGC\nAUGC", PREFIX, SUFFIX)

    assert document[2].label == ""
    assert document[4].label == "_mir2"
    assert document[5].label == ""


def test_trailing_newline_gives_blank_record():
    """An empty line after the final newline is kept."""
    builder = DocumentBuilder(RecordingValidator(), RecordingTransformer())

    document = builder.build("AUGC\n", PREFIX, SUFFIX)

    assert len(document) == 2
    assert document[1].category is LineCategory.BLANK

    assert len(builder.build("", PREFIX, SUFFIX)) == 1


def test_transform_error_is_recorded():
    """A failing transformer adds an error and leaves the raw text."""
    def failing_transformer(sequence, prefix, suffix):
        raise TransformError("no primer site", sequence=sequence)

    builder = DocumentBuilder(RecordingValidator(), failing_transformer)
    document = builder.build(">m\nAUGC\nGGGG", PREFIX, SUFFIX)

    assert document[1].text == "AUGC"
    assert len(document[1].errors) == 1
    assert "no primer site" in document[1].errors[0]
    assert not document[1].is_transformed
    assert document[2].category is LineCategory.SEQUENCE
    assert len(document[2].errors) == 1


def test_malformed_transformer_output_is_recorded():
    """Output without exactly one separator is treated as a failure."""
    builder = DocumentBuilder(RecordingValidator(), lambda seq, prefix, suffix: "A-B-C")

    record = builder.build("AUGC", PREFIX, SUFFIX)[0]

    assert record.text == "AUGC"
    assert len(record.errors) == 1


def test_default_collaborators():
    """The default builder designs stem-loop primers."""
    config = PipelineConfig()
    document = build_document(f">hsa-miR-21-5p\n{MIR21}", config)

    record = document[1]
    assert record.is_transformed
    rt_primer, forward_primer = record.primers
    assert rt_primer == config.suffix + "TCAACA"
    assert forward_primer == config.prefix + "TAGCTTATCAGACTGA"


def test_build_is_deterministic():
    """Two builds of the same input are equal record for record."""
    raw = f">mir1 desc\n{MIR21}\n;note\n\nAUGCAUGC\n???"

    first = build_document(raw)
    second = build_document(raw)

    assert first == second
    assert first is not second


def test_non_text_input_rejected():
    """Bytes are not accepted as input."""
    builder = DocumentBuilder(RecordingValidator(), RecordingTransformer())

    with pytest.raises(InputError):
        builder.build(b">mir1\nAUGC", PREFIX, SUFFIX)


def test_input_size_bound():
    """Input larger than the configured bound is rejected before processing."""
    validator = RecordingValidator()
    builder = DocumentBuilder(validator, RecordingTransformer(), max_input_size=10)

    with pytest.raises(InputError):
        builder.build("AUGC\n" * 5, PREFIX, SUFFIX)
    assert validator.calls == []


def test_document_statistics():
    """Statistics count categories and outcomes."""
    document = build_document(f">a\n{MIR21}\n>b\nAUGC\n;c\n\n??")
    stats = document.get_statistics()

    assert stats["total_lines"] == 7
    assert stats["header"] == 2
    assert stats["sequence"] == 2
    assert stats["comment"] == 1
    assert stats["blank"] == 1
    assert stats["unknown"] == 1
    assert stats["transformed"] == 1
    assert stats["rejected"] == 1


def test_records_are_read_only():
    """Records cannot be changed after the document is built."""
    document = build_document("AUGC")

    with pytest.raises(AttributeError):
        document[0].text = "changed"


def test_unexpected_transformer_failure_is_recorded():
    """Any exception from the transformer stays on its line."""
    def broken_transformer(sequence, prefix, suffix):
        raise ValueError("remote primer service failed")

    builder = DocumentBuilder(RecordingValidator(), broken_transformer)
    document = builder.build(">m\nAUGC\n;c", PREFIX, SUFFIX)

    assert len(document) == 3
    assert document[1].text == "AUGC"
    assert document[1].label == "_m"
    assert len(document[1].errors) == 1
    assert "remote primer service failed" in document[1].errors[0]
    assert document[2].category is LineCategory.COMMENT
