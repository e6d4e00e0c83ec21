"""
agents.py
=========
Factory function that constructs the Agno Agent used for language
understanding.

Keeping the builder here rather than inline in the classifier means:
  - The system prompt is easy to find and edit in isolation.
  - Unit tests can construct the classifier with a fake agent and never
    touch the network.
  - Model swaps or prompt experiments require changes in exactly one file.

Agents built here:
  build_nlu_agent() — maps one player utterance to scored intents and entities
"""

from __future__ import annotations

from agno.agent import Agent
from agno.models.groq import Groq

from case_data import (
    AFFIRMATIVE,
    CLUE_CATALOG,
    EVIDENCE_CATEGORIES,
    MEANS_CATALOG,
    NEGATIVE,
    NUMBER_ENTITIES,
    SIDE_QUERY_INTENTS,
)
from config import MODEL_CONFIG


# ---------------------------------------------------------------------------
# Language-understanding agent
# ---------------------------------------------------------------------------

def build_nlu_agent() -> Agent:
    """
    Build the utterance classifier.

    The agent plays the part of a conversational language-understanding
    service. It receives a single transcribed utterance and returns a strict
    ```json ... ``` block with a top intent, ranked intents and ranked
    entities, each scored in [0, 1]. The classifier in nlu.py extracts and
    validates that block against the NLUResult schema.

    The utility model is used because this is short, structured
    classification, and it runs on every turn of the game.

    Returns:
        An Agent that outputs a JSON block parseable into NLUResult.
    """
    intent_list = ", ".join(f'"{i}"' for i in EVIDENCE_CATEGORIES + SIDE_QUERY_INTENTS)
    item_list   = ", ".join(f'"{i}"' for i in list(MEANS_CATALOG) + list(CLUE_CATALOG))
    answer_list = ", ".join(f'"{a}"' for a in [AFFIRMATIVE, NEGATIVE, *NUMBER_ENTITIES])

    instructions = f"""
You are the language-understanding layer of a voice-driven detective game.

You receive ONE transcribed utterance from the player and must classify it.

INTENTS (use EXACT spelling):
{intent_list}
  - Evidence intents are requests to hear about that kind of evidence.
  - "solve the case": the player wants to make a guess now.
  - "asking about suspects": the player wants the means and clues of each suspect.
  - "asking for evidence": the player wants a recap of what is known so far.
  - "asking for instructions": the player wants the rules summarised.

ENTITIES (use EXACT spelling):
  Items   : {item_list}
  Answers : {answer_list}
  - Tag every item the player names, in the order they say them.
  - Tag "affirmative" for yes / yeah / sure / correct, "negative" for no / nope / wrong.
  - Tag "2", "3" or "4" when the player gives that number, in digits or words.

SCORING:
  - Rank intents from most to least likely and include at least the top three.
  - confidenceScore is your probability that the label is right, between 0 and 1.
  - Lower the score when the utterance is vague, garbled or only loosely related.

OUTPUT FORMAT — return ONLY this JSON block, nothing else before or after it:
```json
{{
  "topIntent": "<best intent>",
  "intents":   [{{"category": "<intent>", "confidenceScore": 0.0}}],
  "entities":  [{{"category": "<entity>", "confidenceScore": 0.0, "text": "<words heard>"}}]
}}
```
Use an empty list for entities when none are present.
"""

    return Agent(
        name="NLU Agent",
        role="Classify a player utterance into scored intents and entities.",
        model=Groq(id=MODEL_CONFIG.nlu_model),
        instructions=[instructions],
        markdown=False,
    )
