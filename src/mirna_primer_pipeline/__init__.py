"""miRNA Primer Pipeline.

Classifies the lines of a FASTA-style miRNA text block, validates sequence
lines and designs a stem-loop RT primer and a qPCR forward primer for each
valid miRNA.
"""

__version__ = "1.0.0"

from .config import PipelineConfig
from .models import Document, LineCategory, LineRecord
from .core import classify, derive_label, DocumentBuilder, build_document
from .primers import MirnaValidator, StemLoopPrimerTransformer
from .report import ReportRow, format_rows, format_output
from .main import run_pipeline

__all__ = [
    "__version__",
    "PipelineConfig",
    "Document",
    "LineCategory",
    "LineRecord",
    "classify",
    "derive_label",
    "DocumentBuilder",
    "build_document",
    "MirnaValidator",
    "StemLoopPrimerTransformer",
    "ReportRow",
    "format_rows",
    "format_output",
    "run_pipeline"
]
