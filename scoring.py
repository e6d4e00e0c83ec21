"""
scoring.py
==========
Deterministic, side-effect-free scoring and lifecycle bounds.

Extracted from the turn controller so it can be unit-tested independently and
adjusted by changing DialogueConfig values in config.py without touching any
dialogue logic.
"""

from __future__ import annotations

from config import DIALOGUE_CONFIG, DialogueConfig


def calculate_score(
    solved:      bool,
    query_count: int,
    solve_count: int,
    cfg: DialogueConfig = DIALOGUE_CONFIG,
) -> int:
    """
    Compute the player's final score.

    A solved case scores ``max_score - query_count - solve_count`` (default
    max_score: 6), so every piece of evidence and every wrong guess costs one
    point. A cold case always scores 0.

    Args:
        solved:      True if the player named the solution.
        query_count: Evidence categories delivered this session.
        solve_count: Wrong guesses made before the final guess.
        cfg:         Dialogue bounds (defaults to the module singleton).

    Returns:
        Integer score, never negative.

    Examples:
        >>> calculate_score(True, 2, 1)
        3
        >>> calculate_score(False, 4, 2)
        0
    """
    if not solved:
        return 0
    return max(0, cfg.max_score - query_count - solve_count)


def queries_exhausted(query_count: int, cfg: DialogueConfig = DIALOGUE_CONFIG) -> bool:
    """True once no more evidence may be requested and solving is forced."""
    return query_count >= cfg.max_queries


def case_gone_cold(solve_count: int, cfg: DialogueConfig = DIALOGUE_CONFIG) -> bool:
    """True once the player has used up every guess."""
    return solve_count >= cfg.max_solves
