#!/usr/bin/env python3
"""
Stem-loop primer design for miRNA Primer Pipeline.

A transformer is any callable taking ``(sequence, prefix, suffix)`` and
returning two primers joined by a single ``-``.
"""

from typing import Callable

from ..exceptions import TransformError
from ..models import PRIMER_SEPARATOR


SequenceTransformer = Callable[[str, str, str], str]

COMPLEMENT_MAP = {'A': 'T', 'T': 'A', 'G': 'C', 'C': 'G'}


def to_dna(sequence: str) -> str:
    """Convert an RNA or DNA sequence to upper-case DNA."""
    return sequence.upper().replace('U', 'T')


def reverse_complement(sequence: str) -> str:
    """Get reverse complement of a DNA sequence."""
    try:
        return ''.join(COMPLEMENT_MAP[base] for base in reversed(sequence))
    except KeyError as e:
        raise TransformError(f"Non-nucleotide base {e.args[0]!r}", sequence=sequence)


class StemLoopPrimerTransformer:
    """Design a stem-loop RT primer and a qPCR forward primer for a miRNA."""

    def __init__(self, rt_overlap: int = 6):
        """
        Initialize transformer.

        Args:
            rt_overlap: Number of 3' miRNA bases the RT primer hybridizes to
        """
        if rt_overlap <= 0:
            raise TransformError(f"Invalid rt_overlap: {rt_overlap}")
        self.rt_overlap = rt_overlap

    def __call__(self, sequence: str, prefix: str, suffix: str) -> str:
        return PRIMER_SEPARATOR.join(self.design(sequence, prefix, suffix))

    def design(self, sequence: str, prefix: str, suffix: str):
        """
        Design the primer pair.

        Args:
            sequence: Validated miRNA sequence
            prefix: 5' tail of the forward primer
            suffix: Stem-loop sequence of the RT primer

        Returns:
            Tuple of (RT primer, forward primer)
        """
        dna = to_dna(sequence)
        if len(dna) <= self.rt_overlap:
            raise TransformError(
                f"sequence must be longer than the {self.rt_overlap} nt RT overlap",
                sequence=sequence,
            )

        rt_primer = suffix + reverse_complement(dna[-self.rt_overlap:])
        forward_primer = prefix + dna[:-self.rt_overlap]

        if PRIMER_SEPARATOR in rt_primer or PRIMER_SEPARATOR in forward_primer:
            raise TransformError(
                f"primer literals must not contain {PRIMER_SEPARATOR!r}", sequence=sequence
            )

        return rt_primer, forward_primer
