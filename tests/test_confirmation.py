import asyncio

from case_data import CONFIRM_RETRY, CONFIRMATION_LINES, NO_INPUT_NUDGE
from confirmation import (
    ConfirmableTurn,
    Confirmation,
    Outcome,
    TurnStatus,
    number_answer,
    yes_no_answer,
)
from helpers import ScriptedVoice, no, nlu, number, said, silence, yes
from models import ConfirmationRequest, DeliverEvidence, ResolveGuess


def confirm(voice, action=DeliverEvidence("motive"), transcript="motor of"):
    request = ConfirmationRequest(action, transcript)
    outcome = asyncio.run(Confirmation(voice).confirm(request))
    return outcome, request


def test_affirmative_reply():
    voice = ScriptedVoice([yes()])

    outcome, request = confirm(voice)

    assert outcome is Outcome.AFFIRMED
    assert voice.spoken == [CONFIRMATION_LINES["motive"]]
    assert request.retry_count == 0


def test_negative_reply_reports_transcript():
    voice = ScriptedVoice([no()])

    outcome, _ = confirm(voice, transcript="motor of")

    assert outcome is Outcome.DENIED
    assert "which was motor of" in voice.spoken[-1]


def test_gives_up_after_second_unclear_reply():
    prompt = CONFIRMATION_LINES["motive"]
    voice = ScriptedVoice([said("hmm"), said("what")])

    outcome, request = confirm(voice)

    assert outcome is Outcome.EXHAUSTED
    assert request.retry_count == 2
    assert voice.spoken == [prompt, CONFIRM_RETRY, prompt, CONFIRM_RETRY]


def test_one_unclear_reply_is_retried():
    voice = ScriptedVoice([said("hmm"), yes()])

    outcome, request = confirm(voice)

    assert outcome is Outcome.AFFIRMED
    assert request.retry_count == 1


def test_silence_nudges_and_stops():
    voice = ScriptedVoice([silence()])

    outcome, _ = confirm(voice)

    assert outcome is Outcome.SILENT
    assert voice.spoken[-1] == NO_INPUT_NUDGE


def test_guess_confirmation_names_both_items():
    voice = ScriptedVoice([yes()])

    confirm(voice, action=ResolveGuess(("belt", "diary")))

    assert "belt and diary" in voice.spoken[0]


def test_interpreters():
    assert yes_no_answer(yes().nlu) is True
    assert yes_no_answer(no().nlu) is False
    assert yes_no_answer(yes(confidence=0.5).nlu, threshold=0.7) is None
    assert yes_no_answer(nlu()) is None
    assert number_answer(number(3).nlu) == 3
    assert number_answer(number(5).nlu) is None


def test_unbounded_turn_repeats_until_understood():
    voice = ScriptedVoice([silence(), said("banana"), number(4)])
    turn = ConfirmableTurn(
        prompt="How many?",
        interpret=number_answer,
        retry_notice="Invalid.",
        no_input_notice="Silent.",
    )

    result = asyncio.run(turn.run(voice))

    assert result.status is TurnStatus.ANSWERED
    assert result.value == 4
    assert voice.spoken == ["How many?", "Silent.", "How many?", "Invalid.", "How many?"]
