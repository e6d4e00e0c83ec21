"""
models.py
=========
Shared data models for Dialogue Deduction.

Contains:
  - Intent / Entity / NLUResult : Pydantic schema for the classifier's output.
  - Suspect / Solution          : Dataclasses describing the generated puzzle.
  - Session                     : Mutable dataclass tracking one playthrough.
  - DeliverEvidence ... ResolveGuess : The closed set of actions a
                                  confirmation can be pending on.
  - ConfirmationRequest         : The transient low-confidence record.

Keeping these in one module guarantees a single source of truth for data
shapes used across the puzzle, the confirmation subsystem, the controller and
the voice adapters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from config import Difficulty


# ---------------------------------------------------------------------------
# Pydantic classifier output schema
# ---------------------------------------------------------------------------

class Intent(BaseModel):
    """One scored intent, ordered most-confident first in NLUResult.intents."""

    model_config = ConfigDict(populate_by_name=True)

    name:             str   = Field(alias="category")
    confidence_score: float = Field(alias="confidenceScore", ge=0.0, le=1.0)


class Entity(BaseModel):
    """One scored entity (an item name, a yes/no answer, or a number)."""

    model_config = ConfigDict(populate_by_name=True)

    category:         str
    confidence_score: float = Field(alias="confidenceScore", ge=0.0, le=1.0)
    text:             Optional[str] = None


class NLUResult(BaseModel):
    """
    Validated classifier output for a single utterance.

    The shape mirrors a conversational language-understanding service:
    a top intent, the ranked list of intents, and the ranked list of entities.
    Both camelCase (wire) and snake_case (Python) field names are accepted.

    Fields:
        top_intent: Name of the best intent, or None when nothing was found.
        intents:    Ranked intents with confidence scores in [0, 1].
        entities:   Ranked entities with confidence scores in [0, 1].
    """

    model_config = ConfigDict(populate_by_name=True)

    top_intent: Optional[str] = Field(default=None, alias="topIntent")
    intents:    List[Intent]  = Field(default_factory=list)
    entities:   List[Entity]  = Field(default_factory=list)

    @property
    def has_intent(self) -> bool:
        return bool(self.intents) and self.top_intent is not None

    @property
    def intent_confidence(self) -> float:
        """Confidence of the intent named by ``top_intent``, 0.0 when it is not scored."""
        for intent in self.intents:
            if intent.name == self.top_intent:
                return intent.confidence_score
        return 0.0

    @property
    def first_entity(self) -> Optional[Entity]:
        return self.entities[0] if self.entities else None

    def guess_pair(self) -> Optional[Tuple[str, str]]:
        """Return the first two entity categories as a guess, if present."""
        if len(self.entities) < 2:
            return None
        return self.entities[0].category, self.entities[1].category

    def guess_confidence(self) -> float:
        """Combined confidence of the two guess entities."""
        return sum(e.confidence_score for e in self.entities[:2])


# ---------------------------------------------------------------------------
# Puzzle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Suspect:
    """
    One candidate culprit.

    Attributes:
        means: Possible means of murder tied to this suspect.
        clues: Incriminating clues tied to this suspect.
    """

    means: Tuple[str, ...]
    clues: Tuple[str, ...]


@dataclass(frozen=True)
class Solution:
    """The hidden (means, clue) pair the player must name."""

    means_item: str
    clue_item:  str

    def matches(self, first: str, second: str) -> bool:
        """True when the two items are the solution, in either order."""
        return {first, second} == {self.means_item, self.clue_item}


# ---------------------------------------------------------------------------
# Pending confirmation actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeliverEvidence:
    category: str


@dataclass(frozen=True)
class ShowSuspects:
    pass


@dataclass(frozen=True)
class ShowKnown:
    pass


@dataclass(frozen=True)
class ShowInstructions:
    pass


@dataclass(frozen=True)
class StartSolve:
    pass


@dataclass(frozen=True)
class ResolveGuess:
    guess: Tuple[str, str]


PendingAction = Union[
    DeliverEvidence, ShowSuspects, ShowKnown, ShowInstructions, StartSolve, ResolveGuess
]


@dataclass
class ConfirmationRequest:
    """
    An unresolved low-confidence interpretation.

    Attributes:
        action:         What will happen if the player says yes.
        raw_transcript: What the recogniser heard, echoed back on a "no".
        retry_count:    Unparseable replies so far; starts at 0 per request.
    """

    action:         PendingAction
    raw_transcript: str
    retry_count:    int = 0


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

@dataclass
class Session:
    """
    Mutable state for one playthrough.

    This object is created at scenario generation and owned by the
    DialogueController, which is the only thing that mutates it.

    Attributes:
        suspects:           Generated suspects, read-only after creation.
        solution:           The hidden (means, clue) pair.
        difficulty:         Suspect count and list size the scenario was built with.
        remaining_evidence: Categories that may still be asked. Only shrinks.
        knowledge_log:      Facts revealed so far, in order. Append-only.
        query_count:        Evidence categories delivered.
        solve_count:        Wrong guesses made.
        pending_guess:      Guess awaiting confirmation, if any.
        finished:           True once a terminal state was reached.
        won:                True if the player named the solution.
        final_score:        Score announced at the end of the game.
    """

    suspects:           List[Suspect]
    solution:           Solution
    difficulty:         Difficulty
    remaining_evidence: Set[str]
    knowledge_log:      List[str] = field(default_factory=list)
    query_count:        int  = 0
    solve_count:        int  = 0
    pending_guess:      Optional[Tuple[str, str]] = None
    finished:           bool = False
    won:                bool = False
    final_score:        int  = 0

    # ------------------------------------------------------------------
    # Mutation helpers
    # ------------------------------------------------------------------

    def is_available(self, category: Optional[str]) -> bool:
        return category is not None and category in self.remaining_evidence

    def record_fact(self, category: str, answer: str) -> None:
        self.knowledge_log.append(f"{category} was {answer}")

    def record_evidence(self, category: str, answer: str) -> None:
        """
        Consume `category`: remove it from the pool, log the fact and count
        the query. Non-informative answers are recorded the same way.
        """
        self.remaining_evidence.discard(category)
        self.record_fact(category, answer)
        self.query_count += 1

    def record_miss(self) -> None:
        """Count one valid-but-wrong guess."""
        self.solve_count += 1
        self.pending_guess = None

    def finish(self, won: bool, score: int) -> None:
        self.finished    = True
        self.won         = won
        self.final_score = score
        self.pending_guess = None
