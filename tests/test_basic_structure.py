"""Basic tests to verify project structure."""

import pytest

def test_package_imports():
    """Test that basic package imports work."""
    from mirna_primer_pipeline import __version__, PipelineConfig, LineRecord

    assert __version__ == "1.0.0"
    assert PipelineConfig is not None
    assert LineRecord is not None

def test_config_creation():
    """Test basic config creation."""
    from mirna_primer_pipeline.config import PipelineConfig

    config = PipelineConfig()
    assert config.prefix == "GCGGCG"
    assert config.suffix == "GTCGTATCCAGTGCAGGGTCCGAGGTATTCGCACTGGATACGAC"
    assert config.min_length == 18
    assert config.max_length == 25

def test_exceptions():
    """Test that custom exceptions work."""
    from mirna_primer_pipeline.exceptions import PipelineError, InputError, TransformError

    with pytest.raises(PipelineError):
        raise PipelineError("Test error")

    with pytest.raises(InputError):
        raise InputError("Input error")

    error = TransformError("too short", sequence="AUG")
    assert isinstance(error, PipelineError)
    assert "AUG" in str(error)

def test_models():
    """Test basic model functionality."""
    from mirna_primer_pipeline.models import Document, LineCategory, LineRecord

    record = LineRecord(
        category=LineCategory.SEQUENCE,
        text="PRIMERA-PRIMERB",
        label="_mir1",
    )

    assert record.is_transformed
    assert record.primers == ("PRIMERA", "PRIMERB")
    assert LineCategory.HEADER.display_tag == "teal"
    assert LineCategory.BLANK.display_tag is None
    assert LineCategory.BLANK.display_name == ""

    # Test serialization
    document = Document(records=(record,))
    document2 = Document.from_dict(document.to_dict())
    assert document == document2
