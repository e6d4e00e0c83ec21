"""
voice.py
========
The voice I/O contract consumed by the turn controller, plus a console
stand-in for development.

Contains:
  Recognised / NoInput — the two things a listen can produce.
  VoiceIO              — abstract async collaborator: prepare, speak, listen.
  ConsoleVoice         — prints utterances and reads typed lines, classifying
                         each one through a Classifier. A blank line or a
                         timeout counts as silence.

The controller awaits ``speak`` before it does anything else, so an
implementation must only return once the utterance has finished playing.
"""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Union

from config import VOICE_CONFIG, VoiceConfig
from models import NLUResult
from nlu import Classifier

logger = logging.getLogger("dialogue_deduction.voice")


@dataclass(frozen=True)
class Recognised:
    """A classified utterance."""

    transcript: str
    nlu:        NLUResult


@dataclass(frozen=True)
class NoInput:
    """The player stayed silent until the no-input timeout."""


ListenResult = Union[Recognised, NoInput]


class VoiceIO(ABC):
    """Speech synthesis + recognition with NLU enabled."""

    async def prepare(self) -> None:
        """Return once the collaborator is ready to speak and listen."""

    @abstractmethod
    async def speak(self, utterance: str) -> None:
        """Speak `utterance` and return when it has finished."""

    @abstractmethod
    async def listen(self) -> ListenResult:
        """Wait for a recognised utterance or a no-input timeout."""

    async def close(self) -> None:
        """Release the collaborator. Called once at the end of a session."""


class ConsoleVoice(VoiceIO):
    """
    Text console stand-in for a speech service.

    Lines are read on a daemon thread and handed to the event loop through a
    queue, so a listen can time out without losing what the player types
    afterwards; a late line is heard on the next listen.

    Args:
        classifier: Turns each typed line into an NLUResult.
        cfg:        Voice settings; ``no_input_timeout_ms`` bounds each listen. The
                    rest are what a speech service would be configured with
                    and are only logged here.
        stream:     Where lines are read from (stdin by default).
        out:        Where utterances are written (print by default).
    """

    def __init__(
        self,
        classifier: Classifier,
        cfg: VoiceConfig = VOICE_CONFIG,
        stream: Optional[TextIO] = None,
        out: Callable[[str], None] = print,
    ) -> None:
        self.classifier = classifier
        self.cfg        = cfg
        self.timeout    = cfg.no_input_timeout_ms / 1000
        self._stream    = stream or sys.stdin
        self._out       = out
        self._lines: Optional[asyncio.Queue] = None

    async def prepare(self) -> None:
        loop = asyncio.get_running_loop()
        self._lines = asyncio.Queue()
        reader = threading.Thread(
            target=self._read_lines, args=(loop, self._lines), daemon=True
        )
        reader.start()
        logger.info(
            "Console voice ready (locale=%s, voice=%s, no-input timeout=%dms, "
            "complete timeout=%dms).",
            self.cfg.locale,
            self.cfg.voice,
            self.cfg.no_input_timeout_ms,
            self.cfg.complete_timeout_ms,
        )

    def _read_lines(self, loop: asyncio.AbstractEventLoop, lines: asyncio.Queue) -> None:
        while True:
            line = self._stream.readline()
            if not line:
                loop.call_soon_threadsafe(lines.put_nowait, None)
                return
            loop.call_soon_threadsafe(lines.put_nowait, line.strip())

    async def wait_for_start(self) -> None:
        """Block until the player presses Enter (the host's start signal)."""
        self._out("Press Enter to start.")
        line = await self._next_line(timeout=None)
        if line is None:
            raise EOFError("Input closed before the game started.")

    async def speak(self, utterance: str) -> None:
        self._out(f"\n[Partner]: {utterance}")

    async def listen(self) -> ListenResult:
        self._out("[You]: ")
        try:
            line = await self._next_line(timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.debug("No input within %.1fs.", self.timeout)
            return NoInput()
        if line is None:
            raise EOFError("Input closed.")
        if not line:
            return NoInput()

        nlu = await self.classifier.classify(line)
        logger.debug("Heard %r -> top_intent=%r", line, nlu.top_intent)
        return Recognised(transcript=line, nlu=nlu)

    async def _next_line(self, timeout: Optional[float]) -> Optional[str]:
        if self._lines is None:
            raise RuntimeError("ConsoleVoice.prepare() must be awaited first.")
        return await asyncio.wait_for(self._lines.get(), timeout=timeout)
