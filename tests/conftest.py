import asyncio

import pytest

from config import Difficulty
from controller import DialogueController
from helpers import ScriptedVoice, StubRandom


@pytest.fixture()
def voice():
    return ScriptedVoice()


@pytest.fixture()
def game(voice):
    """
    A begun 2x2 game with catalogs left in their declared order:

        Suspect 1: scissors, chainsaw         | take-out food, book
        Suspect 2: ice skates, knife and fork | underwear, office supplies

    Solution: scissors + take-out food (crime scene: kitchen).
    """
    controller = DialogueController(voice, rng=StubRandom(picks=[0, 0, 0]))
    asyncio.run(controller.begin(Difficulty()))
    voice.spoken.clear()
    return controller
