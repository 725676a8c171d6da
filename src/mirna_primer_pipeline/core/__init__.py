"""Core processing modules for miRNA Primer Pipeline."""

from .classifier import classify
from .builder import derive_label, DocumentBuilder, build_document

__all__ = [
    "classify",
    "derive_label",
    "DocumentBuilder",
    "build_document"
]
