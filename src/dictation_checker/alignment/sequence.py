"""
Edit distance based word alignment.

Global sequence alignment of a reference word list against the words a
learner typed, using dynamic programming over a cost matrix.

Complexity: O(N*M) time and space where N = reference length,
M = user length. Inputs are single sentences, so this stays tiny.

Backtracking re-derives each step from the stored costs in a fixed
priority order (diagonal, deletion, insertion). When several alignments
are optimal the same one is always returned.
"""

from typing import List, Optional, Sequence
import logging

from .base import (
    Alignment,
    AlignmentCosts,
    AlignmentOp,
    DEFAULT_COSTS,
)

logger = logging.getLogger(__name__)


def compute_cost_matrix(
    ref_words: Sequence[str],
    user_words: Sequence[str],
    costs: Optional[AlignmentCosts] = None,
) -> List[List[int]]:
    """
    Fill the alignment cost matrix.

    dp[i][j] is the cheapest way to align ref_words[:i] with user_words[:j].

    Args:
        ref_words: Reference words
        user_words: User words
        costs: Cost model (default: DEFAULT_COSTS)

    Returns:
        (len(ref_words) + 1) x (len(user_words) + 1) matrix
    """
    costs = costs or DEFAULT_COSTS
    n, m = len(ref_words), len(user_words)

    dp = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(n + 1):
        dp[i][0] = i * costs.deletion
    for j in range(m + 1):
        dp[0][j] = j * costs.insertion

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            diag = costs.match if ref_words[i - 1] == user_words[j - 1] else costs.substitution
            dp[i][j] = min(
                dp[i - 1][j - 1] + diag,          # Match / substitute
                dp[i - 1][j] + costs.deletion,    # Missing reference word
                dp[i][j - 1] + costs.insertion,   # Extra user word
            )

    return dp


def backtrack(
    dp: List[List[int]],
    ref_words: Sequence[str],
    user_words: Sequence[str],
    costs: Optional[AlignmentCosts] = None,
) -> List[AlignmentOp]:
    """
    Walk the cost matrix from its last cell back to the origin.

    Tie-break order: diagonal move, then deletion, then insertion.

    Returns:
        Alignment ops in reading order
    """
    costs = costs or DEFAULT_COSTS
    ops: List[AlignmentOp] = []
    i, j = len(ref_words), len(user_words)

    while i > 0 or j > 0:
        current = dp[i][j]

        if i > 0 and j > 0:
            same = ref_words[i - 1] == user_words[j - 1]
            diag = costs.match if same else costs.substitution
            if current == dp[i - 1][j - 1] + diag:
                if same:
                    ops.append(AlignmentOp.match(ref_words[i - 1], user_words[j - 1], i - 1, j - 1))
                else:
                    ops.append(AlignmentOp.substitute(ref_words[i - 1], user_words[j - 1], i - 1, j - 1))
                i -= 1
                j -= 1
                continue

        if i > 0 and current == dp[i - 1][j] + costs.deletion:
            ops.append(AlignmentOp.delete(ref_words[i - 1], i - 1))
            i -= 1
            continue

        ops.append(AlignmentOp.insert(user_words[j - 1], j - 1))
        j -= 1

    ops.reverse()
    return ops


def align_words(
    ref_words: Sequence[str],
    user_words: Sequence[str],
    costs: Optional[AlignmentCosts] = None,
) -> Alignment:
    """
    Compute the minimum-cost alignment of two word lists.

    Words are compared by exact string equality; any case folding or
    punctuation removal must happen before this call.

    Args:
        ref_words: Reference words
        user_words: Words typed by the user
        costs: Cost model (default: match 0, sub 3, ins 2, del 2)

    Returns:
        Alignment with ops and total distance

    Example:
        >>> alignment = align_words(["guten", "tag"], ["guten", "schönen", "tag"])
        >>> alignment.op_types
        ['match', 'ins', 'match']
    """
    costs = costs or DEFAULT_COSTS

    dp = compute_cost_matrix(ref_words, user_words, costs)
    ops = backtrack(dp, ref_words, user_words, costs)
    distance = dp[len(ref_words)][len(user_words)]

    logger.debug(
        f"Aligned {len(ref_words)} reference / {len(user_words)} user words: "
        f"{len(ops)} ops, distance {distance}"
    )

    return Alignment(ops=ops, distance=distance)
