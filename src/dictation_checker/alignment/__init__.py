"""
Alignment Module

Word-level alignment of a reference sentence against a typed transcription.

Usage:
    from dictation_checker.alignment import align_words

    alignment = align_words(["guten", "tag"], ["guten", "schönen", "tag"])
    for op in alignment:
        print(op.op, op.ref_word, op.user_word)

Costs default to match 0, substitution 3, insertion 2, deletion 2; pass an
AlignmentCosts to change them.
"""

from .base import (
    OpType,
    MATCH,
    SUBSTITUTE,
    DELETE,
    INSERT,
    OP_TYPES,
    ComparisonOptions,
    AlignmentCosts,
    DEFAULT_COSTS,
    AlignmentOp,
    Alignment,
)
from .sequence import (
    compute_cost_matrix,
    backtrack,
    align_words,
)

__all__ = [
    # Op vocabulary
    "OpType",
    "MATCH",
    "SUBSTITUTE",
    "DELETE",
    "INSERT",
    "OP_TYPES",
    # Config
    "ComparisonOptions",
    "AlignmentCosts",
    "DEFAULT_COSTS",
    # Data structures
    "AlignmentOp",
    "Alignment",
    # Algorithm
    "compute_cost_matrix",
    "backtrack",
    "align_words",
]
