import asyncio
import io
import logging

import pytest

from config import VoiceConfig
from helpers import nlu
from nlu import Classifier
from voice import ConsoleVoice, NoInput, Recognised


class KeywordClassifier(Classifier):
    async def classify(self, utterance):
        return nlu(intent=utterance, confidence=0.9)


def test_console_voice_reads_classifies_and_treats_blank_as_silence():
    printed = []
    voice = ConsoleVoice(
        KeywordClassifier(),
        cfg=VoiceConfig(no_input_timeout_ms=2000),
        stream=io.StringIO("\n\nweather\n"),
        out=printed.append,
    )

    async def scenario():
        await voice.prepare()
        await voice.wait_for_start()
        await voice.speak("Hello detective.")
        first = await voice.listen()
        second = await voice.listen()
        with pytest.raises(EOFError):
            await voice.listen()
        return first, second

    first, second = asyncio.run(scenario())

    assert isinstance(first, NoInput)
    assert isinstance(second, Recognised)
    assert second.transcript == "weather"
    assert second.nlu.top_intent == "weather"
    assert any("Hello detective." in line for line in printed)


def test_listen_requires_prepare():
    voice = ConsoleVoice(KeywordClassifier(), stream=io.StringIO(""))

    with pytest.raises(RuntimeError):
        asyncio.run(voice.listen())


def test_prepare_reports_speech_settings(caplog):
    cfg = VoiceConfig(locale="en-GB", voice="en-GB-SoniaNeural", complete_timeout_ms=500)
    voice = ConsoleVoice(KeywordClassifier(), cfg=cfg, stream=io.StringIO(""))

    async def scenario():
        await voice.prepare()
        with pytest.raises(EOFError):
            await voice.listen()

    with caplog.at_level(logging.INFO, logger="dialogue_deduction.voice"):
        asyncio.run(scenario())

    assert "locale=en-GB" in caplog.text
    assert "voice=en-GB-SoniaNeural" in caplog.text
    assert "complete timeout=500ms" in caplog.text
