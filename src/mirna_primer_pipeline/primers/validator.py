#!/usr/bin/env python3
"""
miRNA sequence validation for miRNA Primer Pipeline.

A validator is any callable taking the raw sequence text and returning an
ordered list of error descriptions. An empty list means the sequence can be
transformed into primers.
"""

from typing import Callable, List

from ..exceptions import ValidationError


SequenceValidator = Callable[[str], List[str]]

NUCLEOTIDES = set("ACGTU")


class MirnaValidator:
    """Default validator for mature miRNA sequences."""

    def __init__(self, min_length: int = 18, max_length: int = 25):
        """
        Initialize miRNA validator.

        Args:
            min_length: Minimum accepted sequence length
            max_length: Maximum accepted sequence length
        """
        if min_length <= 0 or max_length < min_length:
            raise ValidationError(
                f"Invalid length bounds: min_length={min_length}, max_length={max_length}"
            )
        self.min_length = min_length
        self.max_length = max_length

    def __call__(self, sequence: str) -> List[str]:
        return self.validate(sequence)

    def validate(self, sequence: str) -> List[str]:
        """
        Validate a miRNA sequence.

        Args:
            sequence: Raw sequence text

        Returns:
            List of error descriptions, empty when the sequence is valid
        """
        errors = []
        upper = sequence.upper()

        invalid = sorted(set(upper) - NUCLEOTIDES)
        if invalid:
            errors.append(f"invalid characters: {''.join(invalid)}")

        if len(sequence) < self.min_length:
            errors.append(
                f"sequence too short ({len(sequence)} nt, minimum {self.min_length})"
            )
        elif len(sequence) > self.max_length:
            errors.append(
                f"sequence too long ({len(sequence)} nt, maximum {self.max_length})"
            )

        if "U" in upper and "T" in upper:
            errors.append("sequence mixes RNA (U) and DNA (T) bases")

        return errors
