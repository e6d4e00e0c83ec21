"""
config.py
=========
Central configuration module for Dialogue Deduction.

All tunable constants, model identifiers, voice settings, dialogue thresholds
and difficulty bounds live here so they can be adjusted without touching the
turn controller or the puzzle logic.

Usage:
    from config import DIALOGUE_CONFIG, VOICE_CONFIG, Difficulty
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet


# ---------------------------------------------------------------------------
# Model selection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ModelConfig:
    """
    Groq model identifiers used by the language-understanding agent.

    Attributes:
        nlu_model: Small, fast model used to classify each player utterance
                   into intents and entities. Classification is a short
                   structured task, so the instant model keeps turn latency low.
    """
    nlu_model: str = "llama-3.1-8b-instant"


# ---------------------------------------------------------------------------
# Voice collaborator settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VoiceConfig:
    """
    Settings handed to the voice I/O collaborator.

    Attributes:
        no_input_timeout_ms: Silence allowed before a NoInput signal. Kept long
                             because staying silent is something the player
                             may do on purpose to get back to the main loop.
        complete_timeout_ms: End-of-utterance detection delay (0 = immediate).
        locale:              Recognition / synthesis locale.
        voice:               Synthesis voice name.
    """
    no_input_timeout_ms: int = 8000
    complete_timeout_ms: int = 0
    locale:              str = "en-US"
    voice:               str = "en-US-NancyNeural"


# ---------------------------------------------------------------------------
# Dialogue thresholds and game bounds
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DialogueConfig:
    """
    Confidence thresholds and lifecycle bounds for the turn controller.

    Attributes:
        intent_threshold:         Intent confidence below which the result is
                                  confirmed with the player before acting.
        entity_threshold:         Same, for single entities (yes / no / numbers).
        guess_threshold:          Minimum combined confidence of the two guess
                                  entities before a guess is resolved directly.
        max_queries:              Evidence requests allowed before the solve
                                  phase is forced.
        max_solves:               Wrong guesses allowed before the case goes cold.
        max_confirmation_retries: Unparseable confirmation replies tolerated
                                  before confirmation is abandoned.
        max_score:                Score for solving with no queries and no misses.
        suggestions:              Remaining categories suggested per prompt.
    """
    intent_threshold: float = 0.7
    entity_threshold: float = 0.7
    guess_threshold:  float = 1.4

    max_queries: int = 4
    max_solves:  int = 2

    max_confirmation_retries: int = 1

    max_score:   int = 6
    suggestions: int = 2


# ---------------------------------------------------------------------------
# Difficulty
# ---------------------------------------------------------------------------

DIFFICULTY_CHOICES: FrozenSet[int] = frozenset({2, 3, 4})
"""Allowed values for both the suspect count and the per-suspect list size."""


@dataclass(frozen=True)
class Difficulty:
    """
    Difficulty chosen during setup. Immutable once the scenario is generated.

    Attributes:
        suspect_num:  Number of suspects in the scenario.
        suspect_size: Number of means and of clues tied to each suspect.
    """
    suspect_num:  int = 2
    suspect_size: int = 2

    def __post_init__(self) -> None:
        for name in ("suspect_num", "suspect_size"):
            value = getattr(self, name)
            if value not in DIFFICULTY_CHOICES:
                raise ValueError(
                    f"{name} must be one of {sorted(DIFFICULTY_CHOICES)}, got {value!r}"
                )


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

MODEL_CONFIG       = ModelConfig()
VOICE_CONFIG       = VoiceConfig()
DIALOGUE_CONFIG    = DialogueConfig()
DEFAULT_DIFFICULTY = Difficulty()
