"""
controller.py
=============
Dialogue turn controller for Dialogue Deduction.

Contains:
  DialogueController — the single orchestrating class that runs setup, the
                       main evidence loop, the solve loop and the side-queries,
                       owns the Session, and drives the voice collaborator.

Public API summary:
    game = DialogueController(voice, rng=random.Random(7))
    await game.run()                  → Session (finished)
    await game.setup()                → Difficulty
    await game.begin(difficulty)      → Session
    await game.step()                 → None   (one evidence or solve turn)

Turn flow
---------
Every turn is "speak, then listen, then act". Speaking is an ordinary
``await`` on the voice collaborator, so a turn that speaks on its way out
needs no extra state. Side-queries (suspects, known evidence, instructions)
speak and return without touching ``phase``, which is how the game resumes
exactly where it was interrupted.

Logging
-------
The logger name for this module is ``dialogue_deduction.controller``.
Configure level and destination once at your entry point (see cli.py).
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional, Tuple

from case_data import (
    ALREADY_ASKED,
    BEGINNER_INSTRUCTIONS,
    CASE_COLD,
    CLUE_CATALOG,
    CORRECT,
    EVIDENCE_CATEGORIES,
    IMPOSSIBLE,
    INCORRECT,
    INSTRUCTIONS_INTENT,
    INSTRUCTIONS_RETRY,
    INTRODUCTION,
    KNOWN_INTENT,
    LOCATION_KEY,
    MIDGAME_INSTRUCTIONS,
    NO_INPUT_NUDGE,
    NO_INTENT,
    NUMBER_SILENCE,
    NUMBER_UNCLEAR,
    OUT_OF_TIME,
    SETTINGS_QUESTION,
    SOLVE_INTENT,
    SUSPECT_NUM_QUESTION,
    SUSPECT_SIZE_QUESTION,
    SUSPECTS_INTENT,
    TWO_ITEMS,
    WELCOME,
    YES_NO_SILENCE,
    YES_NO_UNCLEAR,
)
from confirmation import (
    ConfirmableTurn,
    Confirmation,
    Outcome,
    number_answer,
    yes_no_answer,
)
from config import DEFAULT_DIFFICULTY, DIALOGUE_CONFIG, DialogueConfig, Difficulty
from evidence import resolve_evidence
from models import (
    ConfirmationRequest,
    DeliverEvidence,
    NLUResult,
    PendingAction,
    ResolveGuess,
    Session,
    ShowInstructions,
    ShowKnown,
    ShowSuspects,
    StartSolve,
)
from puzzle import is_valid_guess, start_session
from scoring import calculate_score, case_gone_cold, queries_exhausted
from utterances import (
    known_evidence_utterance,
    partner_query,
    solve_prompt,
    suspects_utterance,
)
from voice import NoInput, VoiceIO

logger = logging.getLogger("dialogue_deduction.controller")


class Phase(Enum):
    """The main-loop sub-state a side-query returns to."""

    EVIDENCE = "evidence"
    SOLVE    = "solve"


SIDE_QUERIES = {
    SOLVE_INTENT:        StartSolve(),
    SUSPECTS_INTENT:     ShowSuspects(),
    KNOWN_INTENT:        ShowKnown(),
    INSTRUCTIONS_INTENT: ShowInstructions(),
}
"""Intent name → action for the always-available side-queries."""

SOLVE_SIDE_QUERIES = (SUSPECTS_INTENT, KNOWN_INTENT, INSTRUCTIONS_INTENT)
"""Side-queries honoured in the solve loop when no full guess was given."""


class DialogueController:
    """
    Main dialogue engine.

    Owns the Session and the Confirmation subsystem. The host only needs to
    provide a ready VoiceIO and call ``run()``.

    Attributes:
        voice:        Speech collaborator (speak / listen with NLU).
        rng:          Random source for the scenario and the partner's lines.
        cfg:          Thresholds and bounds.
        session:      Current Session; None until ``begin()``.
        phase:        EVIDENCE or SOLVE — where the next turn happens.
        confirmation: The shared Confirmation subsystem.
    """

    def __init__(
        self,
        voice: VoiceIO,
        rng: Optional[random.Random] = None,
        cfg: DialogueConfig = DIALOGUE_CONFIG,
    ) -> None:
        self.voice   = voice
        self.rng     = rng or random.Random()
        self.cfg     = cfg
        self.session: Optional[Session] = None
        self.phase   = Phase.EVIDENCE
        self.confirmation = Confirmation(voice, cfg)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def run(self) -> Session:
        """Play one full game: setup, scenario, turns until a terminal state."""
        difficulty = await self.setup()
        session    = await self.begin(difficulty)
        while not session.finished:
            await self.step()
        logger.info(
            "Game over — won=%s, score=%d, queries=%d, wrong_guesses=%d",
            session.won,
            session.final_score,
            session.query_count,
            session.solve_count,
        )
        return session

    async def setup(self) -> Difficulty:
        """
        Welcome the player, offer the beginner's instructions and ask for
        the difficulty. Every question here repeats until it is understood.
        """
        threshold = self.cfg.entity_threshold

        wants_instructions = await ConfirmableTurn(
            prompt=WELCOME,
            interpret=lambda nlu: yes_no_answer(nlu, threshold),
            retry_notice=INSTRUCTIONS_RETRY,
            no_input_notice=INSTRUCTIONS_RETRY,
            repeat_prompt=False,
        ).run(self.voice)
        if wants_instructions.value:
            await self.voice.speak(BEGINNER_INSTRUCTIONS)

        change_settings = await ConfirmableTurn(
            prompt=SETTINGS_QUESTION,
            interpret=lambda nlu: yes_no_answer(nlu, threshold),
            retry_notice=YES_NO_UNCLEAR,
            no_input_notice=YES_NO_SILENCE,
        ).run(self.voice)
        if not change_settings.value:
            logger.info("Keeping default difficulty %s.", DEFAULT_DIFFICULTY)
            return DEFAULT_DIFFICULTY

        suspect_num = await self._ask_number(SUSPECT_NUM_QUESTION)
        suspect_size = await self._ask_number(SUSPECT_SIZE_QUESTION)
        difficulty = Difficulty(suspect_num=suspect_num, suspect_size=suspect_size)
        logger.info("Difficulty chosen: %s", difficulty)
        return difficulty

    async def _ask_number(self, question: str) -> int:
        threshold = self.cfg.entity_threshold
        result = await ConfirmableTurn(
            prompt=question,
            interpret=lambda nlu: number_answer(nlu, threshold),
            retry_notice=NUMBER_UNCLEAR,
            no_input_notice=NUMBER_SILENCE,
        ).run(self.voice)
        return result.value

    async def begin(self, difficulty: Difficulty) -> Session:
        """
        Generate the scenario and brief the player. There is no way back to
        setup after this.
        """
        self.session = start_session(difficulty, self.rng)
        self.phase   = Phase.EVIDENCE

        location = CLUE_CATALOG[self.session.solution.clue_item][LOCATION_KEY]
        await self.voice.speak(
            f"{INTRODUCTION.format(location=location)} "
            f"{suspects_utterance(self.session.suspects)}"
        )
        return self.session

    async def step(self) -> None:
        """Run one turn of whichever loop the game is in."""
        if self.session is None:
            raise RuntimeError("begin() must be awaited before step().")
        if self.phase is Phase.SOLVE:
            await self.solve_turn()
        else:
            await self.evidence_turn()

    # ------------------------------------------------------------------
    # Main evidence loop
    # ------------------------------------------------------------------

    async def evidence_turn(self) -> None:
        """
        One pass of the evidence loop.

        Order of checks:
          1. Query cap reached → warn and force the solve loop.
          2. Silence → nudge.
          3. No intent → explain the valid actions.
          4. Available category or side-query → confirm if the intent is
             below the threshold, act on it otherwise.
          5. Anything else falls through to the next pass.
        """
        session = self.session
        if queries_exhausted(session.query_count, self.cfg):
            logger.info("Query cap reached (%d) — forcing solve.", session.query_count)
            await self.voice.speak(OUT_OF_TIME)
            self.phase = Phase.SOLVE
            return

        await self.voice.speak(
            partner_query(session.remaining_evidence, self.rng, self.cfg.suggestions)
        )
        heard = await self.voice.listen()
        if isinstance(heard, NoInput):
            await self.voice.speak(NO_INPUT_NUDGE)
            return

        nlu = heard.nlu
        if not nlu.has_intent:
            await self.voice.speak(NO_INTENT)
            return

        action = self._action_for_intent(nlu.top_intent)
        if action is None:
            logger.info("Unmatched intent %r — back to the loop start.", nlu.top_intent)
            if nlu.top_intent in EVIDENCE_CATEGORIES:
                await self.voice.speak(ALREADY_ASKED.format(category=nlu.top_intent))
            return

        if self._low_intent(nlu):
            await self._confirm(action, heard.transcript)
            return
        await self._perform(action)

    def _action_for_intent(self, intent: Optional[str]) -> Optional[PendingAction]:
        if self.session.is_available(intent):
            return DeliverEvidence(intent)
        return SIDE_QUERIES.get(intent)

    def _low_intent(self, nlu: NLUResult) -> bool:
        return nlu.intent_confidence < self.cfg.intent_threshold

    async def deliver_evidence(self, category: str) -> None:
        """Resolve `category`, consume it and tell the player."""
        session = self.session
        answer  = resolve_evidence(category, session.solution)
        session.record_evidence(category, answer)
        logger.info(
            "Evidence %d/%d delivered: %r", session.query_count, self.cfg.max_queries, category
        )
        await self.voice.speak(f"The {category} was {answer}.")

    # ------------------------------------------------------------------
    # Solve loop
    # ------------------------------------------------------------------

    async def solve_turn(self) -> None:
        """
        One pass of the solve loop.

        Order of checks:
          1. Silence → nudge.
          2. Fewer than two entities → a side-query if one was asked for,
             otherwise ask again for two items.
          3. Impossible combination → explain, no penalty.
          4. Combined entity confidence below the threshold → confirm the guess.
          5. Resolve the guess.
        """
        await self.voice.speak(solve_prompt(self.rng))
        heard = await self.voice.listen()
        if isinstance(heard, NoInput):
            await self.voice.speak(NO_INPUT_NUDGE)
            return

        nlu   = heard.nlu
        guess = nlu.guess_pair()
        if guess is None:
            if nlu.top_intent in SOLVE_SIDE_QUERIES:
                action = SIDE_QUERIES[nlu.top_intent]
                if self._low_intent(nlu):
                    await self._confirm(action, heard.transcript)
                else:
                    await self._perform(action)
                return
            await self.voice.speak(TWO_ITEMS)
            return

        first, second = guess
        if not is_valid_guess(first, second, self.session.suspects):
            logger.info("Impossible guess rejected: %r + %r", first, second)
            await self.voice.speak(IMPOSSIBLE.format(first=first, second=second))
            return

        if nlu.guess_confidence() < self.cfg.guess_threshold:
            self.session.pending_guess = guess
            await self._confirm(ResolveGuess(guess), heard.transcript)
            return
        await self.resolve_guess(guess)

    async def resolve_guess(self, guess: Tuple[str, str]) -> None:
        """Score a valid guess and move to a terminal state or back to the solve prompt."""
        session = self.session
        first, second = guess
        session.pending_guess = None

        if session.solution.matches(first, second):
            score = calculate_score(True, session.query_count, session.solve_count, self.cfg)
            session.finish(won=True, score=score)
            logger.info("Correct guess %r + %r, score=%d", first, second, score)
            await self.voice.speak(CORRECT.format(first=first, second=second, score=score))
            return

        session.record_miss()
        logger.info(
            "Wrong guess %r + %r (%d/%d)", first, second, session.solve_count, self.cfg.max_solves
        )
        await self.voice.speak(INCORRECT.format(first=first, second=second))
        if case_gone_cold(session.solve_count, self.cfg):
            score = calculate_score(False, session.query_count, session.solve_count, self.cfg)
            session.finish(won=False, score=score)
            logger.info("Case gone cold.")
            await self.voice.speak(CASE_COLD)
            return
        self.phase = Phase.SOLVE

    # ------------------------------------------------------------------
    # Confirmation and dispatch
    # ------------------------------------------------------------------

    async def _confirm(self, action: PendingAction, transcript: str) -> None:
        outcome = await self.confirmation.confirm(ConfirmationRequest(action, transcript))
        if outcome is Outcome.AFFIRMED:
            await self._perform(action)
            return

        self.session.pending_guess = None
        if outcome is Outcome.EXHAUSTED:
            self.phase = Phase.EVIDENCE

    async def _perform(self, action: PendingAction) -> None:
        if isinstance(action, DeliverEvidence):
            if self.session.is_available(action.category):
                await self.deliver_evidence(action.category)
            else:
                await self.voice.speak(ALREADY_ASKED.format(category=action.category))
        elif isinstance(action, ResolveGuess):
            await self.resolve_guess(action.guess)
        elif isinstance(action, StartSolve):
            logger.info("Player asked to solve after %d queries.", self.session.query_count)
            self.phase = Phase.SOLVE
        elif isinstance(action, ShowSuspects):
            await self.voice.speak(suspects_utterance(self.session.suspects))
        elif isinstance(action, ShowKnown):
            await self.voice.speak(known_evidence_utterance(self.session.knowledge_log))
        elif isinstance(action, ShowInstructions):
            await self.voice.speak(MIDGAME_INSTRUCTIONS)
        else:
            raise TypeError(f"Unknown pending action: {action!r}")
