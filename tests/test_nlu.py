import asyncio
import json

import pytest
from pydantic import ValidationError

from models import NLUResult
from nlu import AgentClassifier, parse_nlu_response


class FakeResponse:
    def __init__(self, content):
        self.content = content


class FakeAgent:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.prompts = []

    async def arun(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return FakeResponse(self.content)


PAYLOAD = {
    "topIntent": "motive",
    "intents": [
        {"category": "weather", "confidenceScore": 0.1},
        {"category": "motive", "confidenceScore": 0.82},
    ],
    "entities": [
        {"category": "wine", "confidenceScore": 0.6},
        {"category": "diary", "confidenceScore": 0.9},
    ],
}


def test_parses_fenced_block_and_ranks_intents():
    raw = f"Sure!\n```json\n{json.dumps(PAYLOAD)}\n```"

    result = parse_nlu_response(raw)

    assert result.top_intent == "motive"
    assert [i.name for i in result.intents] == ["motive", "weather"]
    assert result.intent_confidence == pytest.approx(0.82)
    assert result.guess_pair() == ("wine", "diary")
    assert result.guess_confidence() == pytest.approx(1.5)


def test_parses_bare_json_and_fills_top_intent():
    payload = dict(PAYLOAD, topIntent=None)

    result = parse_nlu_response(json.dumps(payload))

    assert result.top_intent == "motive"


def test_named_top_intent_keeps_its_own_score():
    payload = {
        "topIntent": "weather",
        "intents": [
            {"category": "weather", "confidenceScore": 0.3},
            {"category": "motive", "confidenceScore": 0.9},
        ],
    }

    result = parse_nlu_response(json.dumps(payload))

    assert result.top_intent == "weather"
    assert result.intent_confidence == pytest.approx(0.3)


def test_unscored_top_intent_has_no_confidence():
    result = NLUResult(top_intent="weather")

    assert result.intent_confidence == 0.0


def test_accepts_name_key_for_intents():
    result = NLUResult.model_validate(
        {"topIntent": "weather", "intents": [{"name": "weather", "confidenceScore": 1.0}]}
    )

    assert result.intents[0].name == "weather"


def test_rejects_scores_outside_unit_range():
    with pytest.raises(ValidationError):
        parse_nlu_response('{"intents": [{"category": "weather", "confidenceScore": 3}]}')


def test_classifier_returns_validated_result():
    agent = FakeAgent(content=json.dumps(PAYLOAD))

    result = asyncio.run(AgentClassifier(agent).classify("what was the motive"))

    assert result.top_intent == "motive"
    assert "what was the motive" in agent.prompts[0]


@pytest.mark.parametrize(
    "agent",
    [FakeAgent(content="I am not JSON"), FakeAgent(error=RuntimeError("network down"))],
)
def test_classifier_degrades_to_empty_result(agent):
    result = asyncio.run(AgentClassifier(agent).classify("mumble"))

    assert not result.has_intent
    assert result.entities == []
