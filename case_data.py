"""
case_data.py
============
All narrative content for Dialogue Deduction.

Centralising story data here means you can swap out the whole item set
(means, clues, evidence categories, partner lines) without touching the
puzzle, the resolver or the turn controller.

To create a new case set:
    1. Replace MEANS_CATALOG / CLUE_CATALOG with your own items. Every item
       must define a "solution" entry naming itself, and every clue item must
       define "location" (it is the first fact revealed).
    2. Keep at least 16 items in each catalog so the hardest difficulty (4x4)
       can still be generated.
    3. Keep EVIDENCE_CATEGORIES, MEANS_PRIORITY and CONFIRMATION_LINES in sync.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List


# ---------------------------------------------------------------------------
# Evidence categories
# ---------------------------------------------------------------------------

EVIDENCE_CATEGORIES: List[str] = [
    "cause of death",
    "time of death",
    "motive",
    "state of the victim's clothes",
    "hint on body part",
    "social relationship between victim and culprit",
    "weather",
]
"""
Kinds of evidence the player can request. Each can be asked once per session.
"""

MEANS_PRIORITY: FrozenSet[str] = frozenset({
    "cause of death",
    "hint on body part",
})
"""
Categories answered from the means item first. Every other category is
answered from the clue item first.
"""

LOCATION_KEY = "location"

NOT_RELEVANT = "probably not that relevant"
"""Answer given when neither solution item defines the requested category."""


# ---------------------------------------------------------------------------
# Side-query intents and answer entities
# ---------------------------------------------------------------------------

SOLVE_INTENT        = "solve the case"
SUSPECTS_INTENT     = "asking about suspects"
KNOWN_INTENT        = "asking for evidence"
INSTRUCTIONS_INTENT = "asking for instructions"

SIDE_QUERY_INTENTS: List[str] = [
    SOLVE_INTENT,
    SUSPECTS_INTENT,
    KNOWN_INTENT,
    INSTRUCTIONS_INTENT,
]

AFFIRMATIVE = "affirmative"
NEGATIVE    = "negative"

NUMBER_ENTITIES: Dict[str, int] = {"2": 2, "3": 3, "4": 4}


# ---------------------------------------------------------------------------
# Evidence catalogs
# ---------------------------------------------------------------------------

MEANS_CATALOG: Dict[str, Dict[str, str]] = {
    "scissors": {
        "solution": "scissors",
        "cause of death": "loss of blood",
        "hint on body part": "all over the body",
    },
    "chainsaw": {
        "solution": "chainsaw",
        "cause of death": "loss of blood",
        "hint on body part": "on the hand...which is on the table over there",
    },
    "ice skates": {
        "solution": "ice skates",
        "cause of death": "loss of blood",
        "hint on body part": "almost looks like it could have been an accident, the way that throat was cut",
        "weather": "cold",
    },
    "knife and fork": {
        "solution": "knife and fork",
        "cause of death": "loss of blood",
        "social relationship between victim and culprit": "very, very close. Especially now after the murder",
        "hint on body part": "all over, especially the missing pieces",
    },
    "belt": {
        "solution": "belt",
        "cause of death": "suffocation",
        "hint on body part": "marks around the neck",
    },
    "plastic bag": {
        "solution": "plastic bag",
        "cause of death": "suffocation",
        "hint on body part": "some piece of material seems stuck in the victim's mouth",
    },
    "drowning": {
        "solution": "drowning",
        "cause of death": "suffocation",
        "hint on body part": "the hair is a mess",
    },
    "scarf": {
        "solution": "scarf",
        "cause of death": "suffocation",
        "hint on body part": "marks around the neck",
        "weather": "cold",
    },
    "wine": {
        "solution": "wine",
        "cause of death": "poison or disease",
        "social relationship between victim and culprit": "they were close once, but only one of them wanted to rekindle this evening",
        "motive": "spurned love",
        "hint on body part": "nothing, really, but we should wait for the autopsy",
    },
    "scorpion": {
        "solution": "scorpion",
        "cause of death": "poison or disease",
        "social relationship between victim and culprit": "one-sided, but the culprit finally got the victim's attention with a peculiar murder weapon",
        "hint on body part": "just a small mark on the leg",
        "weather": "warm and humid",
    },
    "injection": {
        "solution": "injection",
        "cause of death": "poison or disease",
        "hint on body part": "in the arm fold",
    },
    "starvation": {
        "solution": "starvation",
        "cause of death": "poison or disease",
        "social relationship between victim and culprit": "clearly the culprit felt something strongly, if they wanted to drag it out like this",
        "hint on body part": "body seems brittle",
    },
    "steel tube": {
        "solution": "steel tube",
        "cause of death": "blunt trauma",
    },
    "trophy": {
        "solution": "trophy",
        "cause of death": "blunt trauma",
        "social relationship between victim and culprit": "rivals",
        "motive": "jealousy",
    },
    "crutch": {
        "solution": "crutch",
        "cause of death": "blunt trauma",
        "social relationship between victim and culprit": "strangers until an accident",
        "motive": "revenge",
        "hint on body part": "a leg was broken",
    },
    "punch": {
        "solution": "punch",
        "cause of death": "blunt trauma",
        "hint on body part": "some teeth are gone",
    },
}
"""Dict mapping means item → evidence category → answer text."""

CLUE_CATALOG: Dict[str, Dict[str, str]] = {
    "take-out food": {
        "solution": "take-out food",
        "location": "kitchen",
        "social relationship between victim and culprit": "they hang out quite often",
        "time of death": "evening",
        "weather": "pouring rain",
        "state of the victim's clothes": "messy",
    },
    "book": {
        "solution": "book",
        "location": "school",
        "social relationship between victim and culprit": "classmates, perhaps?",
        "time of death": "afternoon",
        "state of the victim's clothes": "tidy",
    },
    "underwear": {
        "solution": "underwear",
        "location": "bedroom",
        "social relationship between victim and culprit": "quite close, perhaps even romantically involved",
        "time of death": "evening",
        "motive": "spurned love",
        "state of the victim's clothes": "naked",
    },
    "office supplies": {
        "solution": "office supplies",
        "location": "office",
        "social relationship between victim and culprit": "one was the boss of the other",
        "time of death": "middle of the day",
        "motive": "that they had just had enough",
        "weather": "sunny, but the victim didn't get to enjoy it",
        "state of the victim's clothes": "orderly",
    },
    "diary": {
        "solution": "diary",
        "location": "bedroom",
        "social relationship between victim and culprit": "one-sided",
        "time of death": "just before bedtime, it seems",
        "motive": "unrequited love",
        "state of the victim's clothes": "pyjamas",
    },
    "dust": {
        "solution": "dust",
        "location": "storeroom",
        "social relationship between victim and culprit": "one where the victim would show up even to this secluded place",
        "time of death": "working hours",
        "weather": "dry",
        "state of the victim's clothes": "messy",
    },
    "juice": {
        "solution": "juice",
        "location": "kitchen",
        "time of death": "morning",
        "state of the victim's clothes": "messy",
    },
    "snacks": {
        "solution": "snacks",
        "location": "kitchen",
        "time of death": "evening",
        "motive": "they were smacking too loud",
        "state of the victim's clothes": "messy",
    },
    "dictionary": {
        "solution": "dictionary",
        "location": "school",
        "social relationship between victim and culprit": "student and teacher",
        "time of death": "just before an exam, perhaps?",
        "motive": "frustration",
        # Phonetic spelling so an English voice says "soleado" (Spanish: sunny).
        "weather": "sohl eh ah doh",
        "state of the victim's clothes": "neat",
    },
    "toothpicks": {
        "solution": "toothpicks",
        "location": "restaurant",
        "time of death": "evening",
        "motive": "it's just so distracting, why can't they just get rid of it?",
    },
    "clothes hanger": {
        "solution": "clothes hanger",
        "location": "bedroom",
        "time of death": "morning or evening",
        "motive": "fashionable jealousy",
        "state of the victim's clothes": "very orderly",
    },
    "menu": {
        "solution": "menu",
        "location": "restaurant",
        "social relationship between victim and culprit": "close enough for a date, it seems",
        "time of death": "evening",
        "motive": "that sitting across from each other, the reasons they broke up must have come flooding back",
        "state of the victim's clothes": "fancy",
    },
    "coffee": {
        "solution": "coffee",
        "location": "kitchen",
        "time of death": "morning",
        "motive": "that they weren't a morning person",
        "weather": "too dark, too early",
        "state of the victim's clothes": "stained",
    },
    "oil stain": {
        "solution": "oil stain",
        "location": "storeroom",
        "time of death": "working hours",
        "motive": "victim messed up the fancy overalls",
        "state of the victim's clothes": "stained",
    },
    "electronic speaker": {
        "solution": "electronic speaker",
        "location": "living room",
        "time of death": "late evening",
        "social relationship between victim and culprit": "neighbours",
        "motive": "they took matters into their own hands after the housing association did not take the appropriate steps",
        "weather": "thunderous, say witnesses, but we're not sure this checks out",
        "state of the victim's clothes": "casual",
    },
    "jewelry": {
        "solution": "jewelry",
        "location": "bedroom",
        "time of death": "just as they were heading out to an event",
        "motive": "that they might've wanted something gifted back",
        "state of the victim's clothes": "elegant",
    },
}
"""Dict mapping clue item → evidence category → answer text."""


# ---------------------------------------------------------------------------
# Partner lines
# ---------------------------------------------------------------------------

QUERY_LINES: List[str] = [
    "What piece of evidence do you think will best solve this case? What about",
    "What do you want to focus on? Perhaps",
    "What do you think will be most relevant? Maybe",
    "What evidence do you think is most important? May I suggest",
    "Which proof do you think best pins down the murderer? I think perhaps",
]

SOLVE_LINES: List[str] = [
    "Let's solve this case!",
    "Let's catch that killer!",
    "I know you've got it!",
    "We'll get them now!",
]

CONFIRMATION_LINES: Dict[str, str] = {
    "cause of death": "Are you asking about what caused the death?",
    "time of death": "Are you asking about when the crime occurred?",
    "motive": "Are you asking about the motive of the killer?",
    "state of the victim's clothes": "Are you asking about the state of the victim's clothes?",
    "hint on body part": "Are you asking if there was some hint on a specific body part?",
    "social relationship between victim and culprit": "Are you asking what relationship might exist between those involved?",
    "weather": "Are you asking what the weather was like at the time of the crime?",
    SOLVE_INTENT: "Would you like to try to solve the case?",
    SUSPECTS_INTENT: "Would you like to know what clues and means are tied to each suspect?",
    KNOWN_INTENT: "Are you trying to hear what evidence we have already confirmed?",
    INSTRUCTIONS_INTENT: "Would you like me to summarise the game instructions?",
}


# ---------------------------------------------------------------------------
# Fixed utterances
# ---------------------------------------------------------------------------

WELCOME = (
    "Welcome to Dialogue Deduction: a game where you are forced by circumstance "
    "to work with your dialogue system partner to solve a murder with only your voice. "
    "Do you want the beginner's instructions?"
)

SETTINGS_QUESTION = (
    "Do you want to change any settings? The default difficulty setting is the easiest: "
    "with 2 suspects who both have only 2 means and 2 clues each."
)

SUSPECT_NUM_QUESTION = (
    "How many suspects do you want in the game? "
    "Valid answers are 2, 3, and 4, where higher is more difficult."
)

SUSPECT_SIZE_QUESTION = (
    "How many means and clues do you want per suspect in the game? "
    "Valid answers are 2, 3, and 4, where higher is more difficult."
)

INTRODUCTION = (
    "Hello detective. Sorry to disturb your vacation, but there's been a murder "
    "and we need your help! Since you can only join by voice message, we have to do "
    "the best with the situation. I'm at the scene of the crime as we speak, which is "
    "the {location} at XState Street 18. I have taken some notes on the evidence but "
    "don't quite know where to start."
)

NO_INPUT_NUDGE  = "You there detective? Let's focus!"
NO_INTENT       = (
    "I didn't quite catch your intention there. You must ask for a new piece of evidence, "
    "ask what we already know, request to solve the case, ask about suspects, "
    "or ask for instructions."
)
OUT_OF_TIME     = (
    "Detective, we have no more time to consider new evidence and must try to finish this!"
)
ALREADY_ASKED   = "We already looked into the {category}."
SOLVE_PROMPT    = "{line} Which clue and means of murder do you want to guess?"
TWO_ITEMS       = "Guesses must be two items. Let's try again."
IMPOSSIBLE      = (
    "{first} and {second} is not possible! Guesses must be one means of murder "
    "and one clue from the same suspect. Let's try again."
)
CORRECT         = (
    "{first} and {second}? That's correct! Nice work detective! "
    "Your final score is {score}."
)
INCORRECT       = "{first} and {second}? That's incorrect!"
CASE_COLD       = (
    "Dangit, it seems the case has gone cold! Hopefully we get the next one. "
    "Your final score is 0."
)
GUESS_CONFIRM   = "Are you trying to solve the case with the following solution: {first} and {second}?"
CONFIRM_RETRY   = "I didn't hear an affirmation or a negation."
CONFIRM_DENIED  = "I see. I inferred from what I thought I heard, which was {transcript}."

INSTRUCTIONS_RETRY    = "I couldn't quite catch a yes or no type of answer. Do you want the beginner's introduction?"
YES_NO_SILENCE        = "I didn't hear anything. Please give a yes or no type of answer."
YES_NO_UNCLEAR        = "I didn't quite catch that. Please give a yes or no type of answer."
NUMBER_SILENCE        = "I didn't hear anything."
NUMBER_UNCLEAR        = "I didn't catch a valid answer."

BEGINNER_INSTRUCTIONS = """You're a detective tasked with solving a murder.
Your detective partner will call you to the scene of the crime, the location of which will be your first piece of evidence.
There will be a number of suspects depending on the difficulty mode.
Each suspect will be represented by a list of potential means of murder and a list of incriminating clues.
You will be told these lists at the start of the game.
To win the game, you must guess the randomly selected combination of weapon and clue.
There will always be exactly one weapon and one clue, and the selection is always made from the same suspect's lists.
At most points in the game, you will be free to take one of the following actions:
1. Ask about some piece of evidence. Your partner will have some suggestions for you, but you can always ask about something that was suggested at an earlier stage of the game.
For example, if the murder weapon was "scissors" and you ask about the "cause of death", you'll get "loss of blood".
You can ask for 4 such pieces of evidence, then you will be pressed to try to solve the case. Note that you'll be asking about evidence that will help you pin down the weapon and clue, not about those items directly.
2. You can also try to solve the case before you are forced to. State that you want to solve the case. When prompted, guess a weapon and a clue and see if you're right!
After two guesses the case goes cold and you lose.
You can earn a better score by managing with fewer pieces of evidence or fewer guesses.
3. Ask about the suspects. This will give you the lists of means and clues tied to each suspect.
4. Ask what evidence you have so far. This will recap the evidence you've already received.
Asking about the suspects and old evidence is just to help you remember and does not impede your score.
Note that any given piece of evidence might fit multiple weapons or clues, so you need to triangulate the most likely combination.
Any score above 0 is a success, and the highest possible is 6.
5. Ask for instructions. You will get an abbreviated version of these instructions which summarise the main game actions.
To get back to the main part of the game, you just need to stay silent.
Good luck!"""

MIDGAME_INSTRUCTIONS = """To win the game, you must guess the correct combination of one means and one clue tied to the same suspect.
You can take the following actions at most points in the game:
1. When prompted, ask about a piece of evidence, for example "cause of death". Your partner will suggest options.
2. Ask to solve the case, after which you will be prompted to guess at a solution to the game.
3. Ask about the suspects. You will be given the lists of means and clues tied to each suspect.
4. Ask what evidence you know so far. This will recap the answers you have already received, including the location you learned at the start of the game.
You only need to stay silent at any point after the game starts to get back to the main part of the game.
Good luck!"""
