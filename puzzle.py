"""
puzzle.py
=========
Scenario generation and guess validation.

Contains:
  generate_scenario() — shuffles both catalogs into suspects and picks the
                        hidden solution from exactly one of them.
  start_session()     — wraps a generated scenario in a fresh Session and
                        reveals the crime-scene location as the first fact.
  is_valid_guess()    — checks whether a pair could be the solution at all.

All randomness goes through an injected ``random.Random`` so tests can fix
the scenario with a seed or a stub.
"""

from __future__ import annotations

import logging
import random
from typing import List, Mapping, Optional, Sequence, Tuple

from case_data import CLUE_CATALOG, EVIDENCE_CATEGORIES, LOCATION_KEY, MEANS_CATALOG
from config import DEFAULT_DIFFICULTY, Difficulty
from models import Session, Solution, Suspect

logger = logging.getLogger("dialogue_deduction.puzzle")

Catalog = Mapping[str, Mapping[str, str]]


def _chunk(items: Sequence[str], count: int, size: int) -> List[Tuple[str, ...]]:
    return [tuple(items[i * size:(i + 1) * size]) for i in range(count)]


def generate_scenario(
    means_catalog: Catalog,
    clue_catalog:  Catalog,
    suspect_num:   int,
    suspect_size:  int,
    rng: Optional[random.Random] = None,
) -> Tuple[List[Suspect], Solution]:
    """
    Build the suspects and the hidden solution.

    Both key lists are shuffled independently (Fisher–Yates, via
    ``rng.shuffle``) and cut into ``suspect_num`` contiguous chunks of
    ``suspect_size``. Chunk *i* of means and chunk *i* of clues form suspect
    *i*, so every item belongs to at most one suspect. A suspect is then chosen
    uniformly, and one means and one clue are chosen uniformly from its lists.

    Args:
        means_catalog: Means item → evidence record.
        clue_catalog:  Clue item → evidence record.
        suspect_num:   Number of suspects to build.
        suspect_size:  Means and clues per suspect.
        rng:           Random source; a fresh ``random.Random()`` if omitted.

    Returns:
        (suspects, solution)

    Raises:
        ValueError: if either catalog is too small for the requested size.
    """
    rng = rng or random.Random()
    needed = suspect_num * suspect_size
    if needed > len(means_catalog) or needed > len(clue_catalog):
        raise ValueError(
            f"Cannot build {suspect_num} suspects of size {suspect_size}: "
            f"catalogs hold {len(means_catalog)} means and {len(clue_catalog)} clues."
        )

    means = list(means_catalog.keys())
    clues = list(clue_catalog.keys())
    rng.shuffle(means)
    rng.shuffle(clues)

    suspects = [
        Suspect(means=m, clues=c)
        for m, c in zip(
            _chunk(means, suspect_num, suspect_size),
            _chunk(clues, suspect_num, suspect_size),
        )
    ]

    culprit  = suspects[rng.randrange(suspect_num)]
    solution = Solution(
        means_item=culprit.means[rng.randrange(suspect_size)],
        clue_item=culprit.clues[rng.randrange(suspect_size)],
    )
    return suspects, solution


def start_session(
    difficulty: Difficulty = DEFAULT_DIFFICULTY,
    rng: Optional[random.Random] = None,
    means_catalog: Catalog = MEANS_CATALOG,
    clue_catalog:  Catalog = CLUE_CATALOG,
    categories: Sequence[str] = EVIDENCE_CATEGORIES,
) -> Session:
    """
    Generate a scenario and wrap it in a new Session.

    The solution clue's location is logged to the knowledge log as the first
    revealed fact. The suspects and the solution are written to the debug log
    for testers; they are never spoken.
    """
    suspects, solution = generate_scenario(
        means_catalog,
        clue_catalog,
        difficulty.suspect_num,
        difficulty.suspect_size,
        rng,
    )
    session = Session(
        suspects=suspects,
        solution=solution,
        difficulty=difficulty,
        remaining_evidence=set(categories),
    )
    session.record_fact(LOCATION_KEY, clue_catalog[solution.clue_item][LOCATION_KEY])

    logger.info(
        "Scenario generated — suspects=%d, size=%d",
        difficulty.suspect_num,
        difficulty.suspect_size,
    )
    for idx, suspect in enumerate(suspects, 1):
        logger.debug(
            "Suspect %d: means=%s clues=%s", idx, list(suspect.means), list(suspect.clues)
        )
    logger.debug(
        "Correct solution: means=%r clue=%r", solution.means_item, solution.clue_item
    )
    return session


def is_valid_guess(first: str, second: str, suspects: Sequence[Suspect]) -> bool:
    """
    Return True if (first, second) could be the solution.

    A guess is possible when one item is among a suspect's means and the other
    among the same suspect's clues, in either order. Impossible guesses are
    rejected before they cost a solve attempt.
    """
    for suspect in suspects:
        if first in suspect.means and second in suspect.clues:
            return True
        if second in suspect.means and first in suspect.clues:
            return True
    return False
