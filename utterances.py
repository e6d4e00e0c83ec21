"""
utterances.py
=============
Stateless builders for the partner's computed utterances.

These functions carry no game state of their own — they receive everything
they need as arguments — so they can be tested without a controller or a
voice collaborator.

Contains:
  - suspects_utterance()      : lists each suspect's means and clues
  - known_evidence_utterance(): recaps the knowledge log
  - partner_query()           : evidence prompt with random suggestions
  - solve_prompt()            : guess prompt with a random pep line
  - confirmation_prompt()     : yes/no question for a pending action
"""

from __future__ import annotations

import random
from typing import Iterable, List, Sequence

from case_data import (
    CONFIRMATION_LINES,
    GUESS_CONFIRM,
    INSTRUCTIONS_INTENT,
    KNOWN_INTENT,
    QUERY_LINES,
    SOLVE_INTENT,
    SOLVE_LINES,
    SOLVE_PROMPT,
    SUSPECTS_INTENT,
)
from models import (
    DeliverEvidence,
    PendingAction,
    ResolveGuess,
    ShowInstructions,
    ShowKnown,
    ShowSuspects,
    StartSolve,
    Suspect,
)


# ---------------------------------------------------------------------------
# Side-query answers
# ---------------------------------------------------------------------------

def suspects_utterance(suspects: Sequence[Suspect]) -> str:
    """
    Describe every suspect's lists.

    Example:
        >>> suspects_utterance([Suspect(("belt", "wine"), ("diary", "dust"))])
        'Suspect 1 is tied to these means: belt, wine, and these clues: diary, dust.'
    """
    parts: List[str] = []
    for idx, suspect in enumerate(suspects, 1):
        parts.append(
            f"Suspect {idx} is tied to these means: {', '.join(suspect.means)}, "
            f"and these clues: {', '.join(suspect.clues)}."
        )
    return " ".join(parts)


def known_evidence_utterance(knowledge_log: Iterable[str]) -> str:
    return f"What we know so far is that {', '.join(knowledge_log)}."


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def partner_query(remaining: Iterable[str], rng: random.Random, count: int = 2) -> str:
    """
    Build the evidence prompt, suggesting up to `count` remaining categories.

    Suggestions are drawn from a sorted copy of `remaining` so a seeded rng
    always produces the same prompt.
    """
    pool = sorted(remaining)
    suggestions = rng.sample(pool, min(count, len(pool)))
    line = rng.choice(QUERY_LINES)
    if not suggestions:
        return line
    return f"{line} {' or '.join(suggestions)}?"


def solve_prompt(rng: random.Random) -> str:
    return SOLVE_PROMPT.format(line=rng.choice(SOLVE_LINES))


def confirmation_prompt(action: PendingAction) -> str:
    """Phrase the yes/no question that confirms `action`."""
    if isinstance(action, DeliverEvidence):
        return CONFIRMATION_LINES[action.category]
    if isinstance(action, ResolveGuess):
        first, second = action.guess
        return GUESS_CONFIRM.format(first=first, second=second)
    if isinstance(action, ShowSuspects):
        return CONFIRMATION_LINES[SUSPECTS_INTENT]
    if isinstance(action, ShowKnown):
        return CONFIRMATION_LINES[KNOWN_INTENT]
    if isinstance(action, ShowInstructions):
        return CONFIRMATION_LINES[INSTRUCTIONS_INTENT]
    if isinstance(action, StartSolve):
        return CONFIRMATION_LINES[SOLVE_INTENT]
    raise TypeError(f"Unknown pending action: {action!r}")
