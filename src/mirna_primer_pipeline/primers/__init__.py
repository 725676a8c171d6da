"""Primer design modules for miRNA Primer Pipeline."""

from .validator import MirnaValidator
from .transformer import StemLoopPrimerTransformer

__all__ = [
    "MirnaValidator",
    "StemLoopPrimerTransformer"
]
