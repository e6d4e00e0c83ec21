"""
nlu.py
======
Language-understanding collaborator.

Contains:
  Classifier          — abstract contract: utterance in, NLUResult out.
  AgentClassifier     — Classifier backed by the agno NLU agent.
  parse_nlu_response()— extracts and validates the agent's JSON block.

The turn controller never sees raw model output. Anything that cannot be
parsed is logged and turned into an empty NLUResult, which the controller
treats as "no intent recognised" and reprompts.
"""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Optional

from agents import build_nlu_agent
from models import NLUResult

logger = logging.getLogger("dialogue_deduction.nlu")


class Classifier(ABC):
    """Anything that can turn an utterance into an NLUResult."""

    @abstractmethod
    async def classify(self, utterance: str) -> NLUResult:
        ...


def parse_nlu_response(raw: str) -> NLUResult:
    """
    Extract the JSON block from `raw` and validate it as an NLUResult.

    Accepts a ```json fenced block or the outermost bare braces. Intents are
    re-ranked by confidence and ``top_intent`` is filled from the best intent
    when the model left it out. A ``top_intent`` the model did name is kept,
    and its own score is what ``intent_confidence`` reports. Entity order is
    preserved because it carries the order in which the player named guess
    items.

    Raises:
        json.JSONDecodeError: if no valid JSON could be found.
        pydantic.ValidationError: if the JSON does not fit the schema.
    """
    match = re.search(r"```json\s*(\{.*\})\s*```", raw, re.DOTALL)
    if match:
        json_str = match.group(1)
    else:
        match = re.search(r"\{.*\}", raw, re.DOTALL)
        json_str = match.group(0) if match else "{}"

    result = NLUResult.model_validate(json.loads(json_str))
    result.intents.sort(key=lambda i: i.confidence_score, reverse=True)
    if result.top_intent is None and result.intents:
        result.top_intent = result.intents[0].name
    return result


class AgentClassifier(Classifier):
    """
    Classifier that asks the agno NLU agent for each utterance.

    Args:
        agent: Anything with an async ``arun(prompt)`` returning an object with
               ``.content``; defaults to ``build_nlu_agent()``.
    """

    def __init__(self, agent: Optional[Any] = None) -> None:
        self.agent = agent if agent is not None else build_nlu_agent()

    async def classify(self, utterance: str) -> NLUResult:
        prompt = f'Classify this utterance:\n"""{utterance}"""'
        raw    = "<no response>"
        try:
            resp = await self.agent.arun(prompt)
            raw  = resp.content if hasattr(resp, "content") else str(resp)
            result = parse_nlu_response(raw)
        except Exception as exc:
            # An empty result makes the controller reprompt; the player hears
            # "I didn't catch that" instead of the game stopping.
            logger.error(
                "NLU classification failed: %s. Raw response (first 300 chars): %r",
                exc,
                raw[:300],
                exc_info=True,
            )
            return NLUResult()

        logger.info(
            "NLU: %r -> top_intent=%r (%.2f), entities=%s",
            utterance,
            result.top_intent,
            result.intent_confidence,
            [e.category for e in result.entities],
        )
        return result
