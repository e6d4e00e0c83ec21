"""
confirmation.py
===============
Low-confidence recovery for every point where the game listens.

Contains:
  ConfirmableTurn — one "ask, listen, interpret, maybe ask again" exchange,
                    parameterised by the prompt, an interpreter that accepts
                    or rejects the classifier result, the notices spoken on a
                    bad answer or on silence, and a retry bound.
  Confirmation    — asks the player to confirm a pending action that was
                    inferred with low confidence. It only decides yes / no /
                    give up; the caller performs the action.
  yes_no_answer() / number_answer() — interpreters used during setup.

A confirmation never starts another confirmation: the reply is read only as
affirmative or negative.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from case_data import (
    AFFIRMATIVE,
    CONFIRM_DENIED,
    CONFIRM_RETRY,
    NEGATIVE,
    NO_INPUT_NUDGE,
    NUMBER_ENTITIES,
)
from config import DIALOGUE_CONFIG, DialogueConfig
from models import ConfirmationRequest, NLUResult
from utterances import confirmation_prompt
from voice import NoInput, VoiceIO

logger = logging.getLogger("dialogue_deduction.confirmation")


# ---------------------------------------------------------------------------
# Interpreters
# ---------------------------------------------------------------------------

def yes_no_answer(nlu: NLUResult, threshold: float = 0.0) -> Optional[bool]:
    """
    Read the first entity as yes (True) or no (False).

    Returns None when there is no entity, when it is scored below
    `threshold`, or when it is neither affirmative nor negative.
    """
    entity = nlu.first_entity
    if entity is None or entity.confidence_score < threshold:
        return None
    if entity.category == AFFIRMATIVE:
        return True
    if entity.category == NEGATIVE:
        return False
    return None


def number_answer(nlu: NLUResult, threshold: float = 0.0) -> Optional[int]:
    """Read the first entity as one of the allowed difficulty numbers."""
    entity = nlu.first_entity
    if entity is None or entity.confidence_score < threshold:
        return None
    return NUMBER_ENTITIES.get(entity.category)


# ---------------------------------------------------------------------------
# Confirmable turn
# ---------------------------------------------------------------------------

class TurnStatus(Enum):
    ANSWERED  = "answered"
    EXHAUSTED = "exhausted"
    SILENT    = "silent"


@dataclass(frozen=True)
class TurnResult:
    status:  TurnStatus
    value:   Any = None
    retries: int = 0


@dataclass
class ConfirmableTurn:
    """
    A question that is repeated until the answer is understood.

    Attributes:
        prompt:          Spoken first.
        interpret:       Maps a classifier result to a value, or None to reject it.
        retry_notice:    Spoken after a rejected answer.
        no_input_notice: Spoken after silence. None ends the turn on silence.
        repeat_prompt:   Speak `prompt` again after a notice.
        max_retries:     Rejected answers tolerated; None means unbounded.
    """

    prompt:          str
    interpret:       Callable[[NLUResult], Any]
    retry_notice:    str
    no_input_notice: Optional[str] = None
    repeat_prompt:   bool = True
    max_retries:     Optional[int] = None

    async def run(self, voice: VoiceIO) -> TurnResult:
        retries = 0
        await voice.speak(self.prompt)
        while True:
            heard = await voice.listen()
            if isinstance(heard, NoInput):
                if self.no_input_notice is None:
                    return TurnResult(TurnStatus.SILENT, retries=retries)
                await voice.speak(self.no_input_notice)
            else:
                value = self.interpret(heard.nlu)
                if value is not None:
                    return TurnResult(TurnStatus.ANSWERED, value, retries)
                retries += 1
                await voice.speak(self.retry_notice)
                if self.max_retries is not None and retries > self.max_retries:
                    return TurnResult(TurnStatus.EXHAUSTED, retries=retries)
            if self.repeat_prompt:
                await voice.speak(self.prompt)


# ---------------------------------------------------------------------------
# Confirmation of a pending action
# ---------------------------------------------------------------------------

class Outcome(Enum):
    AFFIRMED  = "affirmed"
    DENIED    = "denied"
    EXHAUSTED = "exhausted"
    SILENT    = "silent"


class Confirmation:
    """
    Confirm a low-confidence interpretation with the player.

    Outcomes and what the caller should do with them:
        AFFIRMED  — perform the pending action.
        DENIED    — the misheard transcript has been read back; resume where
                    the low-confidence turn happened.
        SILENT    — the no-input nudge has been spoken; resume likewise.
        EXHAUSTED — too many unparseable replies; drop the action and go back
                    to the main evidence loop.
    """

    def __init__(self, voice: VoiceIO, cfg: DialogueConfig = DIALOGUE_CONFIG) -> None:
        self.voice = voice
        self.cfg   = cfg

    async def confirm(self, request: ConfirmationRequest) -> Outcome:
        request.retry_count = 0
        logger.info(
            "Confirming %r (heard %r)", request.action, request.raw_transcript
        )
        turn = ConfirmableTurn(
            prompt=confirmation_prompt(request.action),
            interpret=yes_no_answer,
            retry_notice=CONFIRM_RETRY,
            max_retries=self.cfg.max_confirmation_retries,
        )
        result = await turn.run(self.voice)
        request.retry_count = result.retries

        if result.status is TurnStatus.SILENT:
            await self.voice.speak(NO_INPUT_NUDGE)
            return Outcome.SILENT
        if result.status is TurnStatus.EXHAUSTED:
            logger.info(
                "Confirmation abandoned after %d unclear replies.", request.retry_count
            )
            return Outcome.EXHAUSTED
        if result.value:
            return Outcome.AFFIRMED

        await self.voice.speak(CONFIRM_DENIED.format(transcript=request.raw_transcript))
        return Outcome.DENIED
