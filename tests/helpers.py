"""Test doubles shared by the test modules."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from case_data import AFFIRMATIVE, NEGATIVE
from models import Entity, Intent, NLUResult, Suspect
from voice import ListenResult, NoInput, Recognised, VoiceIO


class StubRandom(random.Random):
    """Random source whose shuffles keep order and whose randrange is scripted."""

    def __init__(self, picks: Iterable[int] = (), seed: int = 0) -> None:
        super().__init__(seed)
        self.picks = list(picks)

    def shuffle(self, x, *args, **kwargs) -> None:
        pass

    def randrange(self, *args, **kwargs) -> int:
        if self.picks:
            return self.picks.pop(0)
        return super().randrange(*args, **kwargs)


def suspect_of(item: str, suspects: Sequence[Suspect]) -> Optional[int]:
    """Index of the suspect holding `item` among its means or clues, or None."""
    for idx, suspect in enumerate(suspects):
        if item in suspect.means or item in suspect.clues:
            return idx
    return None


class ScriptedVoice(VoiceIO):
    """VoiceIO fake: records what is spoken and replays scripted listens."""

    def __init__(self, script: Sequence[ListenResult] = ()) -> None:
        self.script: List[ListenResult] = list(script)
        self.spoken: List[str] = []
        self.listens = 0

    def queue(self, *events: ListenResult) -> None:
        self.script.extend(events)

    async def speak(self, utterance: str) -> None:
        self.spoken.append(utterance)

    async def listen(self) -> ListenResult:
        if not self.script:
            raise AssertionError("ScriptedVoice ran out of scripted input")
        self.listens += 1
        return self.script.pop(0)

    def said(self, fragment: str) -> bool:
        return any(fragment in line for line in self.spoken)


def nlu(
    intent: Optional[str] = None,
    confidence: float = 0.95,
    entities: Sequence[Tuple[str, float]] = (),
) -> NLUResult:
    intents = [Intent(name=intent, confidence_score=confidence)] if intent else []
    return NLUResult(
        top_intent=intent,
        intents=intents,
        entities=[Entity(category=c, confidence_score=s) for c, s in entities],
    )


def said(transcript: str = "something", **kwargs) -> Recognised:
    return Recognised(transcript=transcript, nlu=nlu(**kwargs))


def ask(category: str, confidence: float = 0.95, transcript: Optional[str] = None) -> Recognised:
    return said(transcript or category, intent=category, confidence=confidence)


def guess(first: str, second: str, confidence: float = 0.9) -> Recognised:
    return said(
        f"{first} and {second}",
        intent="solve the case",
        entities=[(first, confidence), (second, confidence)],
    )


def yes(confidence: float = 0.95) -> Recognised:
    return said("yes", entities=[(AFFIRMATIVE, confidence)])


def no(confidence: float = 0.95) -> Recognised:
    return said("no", entities=[(NEGATIVE, confidence)])


def number(value: int, confidence: float = 0.95) -> Recognised:
    return said(str(value), entities=[(str(value), confidence)])


def silence() -> NoInput:
    return NoInput()
