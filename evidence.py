"""
evidence.py
===========
Deterministic evidence lookup.

Each evidence category is answered first from one of the two solution items
and, failing that, from the other. Which item comes first depends on whether
the category is in MEANS_PRIORITY. When neither item knows the category the
answer is the non-committal NOT_RELEVANT filler, which is still useful to the
player because it rules items out.

The lookup has no randomness and no hidden state beyond the solution, so the
same (category, solution) always resolves to the same answer.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Mapping

from case_data import CLUE_CATALOG, MEANS_CATALOG, MEANS_PRIORITY, NOT_RELEVANT
from models import Solution

logger = logging.getLogger("dialogue_deduction.evidence")


def resolve_evidence(
    category: str,
    solution: Solution,
    means_catalog: Mapping[str, Mapping[str, str]] = MEANS_CATALOG,
    clue_catalog:  Mapping[str, Mapping[str, str]] = CLUE_CATALOG,
    means_priority: FrozenSet[str] = MEANS_PRIORITY,
) -> str:
    """
    Answer `category` for the given solution.

    Lookup order:
        1. The primary item's record (means item for MEANS_PRIORITY
           categories, clue item otherwise).
        2. The secondary item's record.
        3. NOT_RELEVANT.

    Args:
        category:       Evidence category requested by the player.
        solution:       The session's hidden solution.
        means_catalog:  Means item → evidence record.
        clue_catalog:   Clue item → evidence record.
        means_priority: Categories for which the means item is primary.

    Returns:
        The answer text.
    """
    means_record = means_catalog[solution.means_item]
    clue_record  = clue_catalog[solution.clue_item]

    if category in means_priority:
        primary, secondary = means_record, clue_record
    else:
        primary, secondary = clue_record, means_record

    if category in primary:
        answer = primary[category]
    elif category in secondary:
        answer = secondary[category]
    else:
        answer = NOT_RELEVANT

    logger.debug("Resolved %r -> %r", category, answer)
    return answer
