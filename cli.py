"""
cli.py
======
Command-line runner for Dialogue Deduction.

Plays one game in the terminal: the partner's lines are printed and the
player types what they would have said. Each line is classified by the agno
NLU agent exactly as a spoken utterance would be. All game logic is delegated
to DialogueController; this module only wires the collaborators together.

Usage:
    python cli.py            # or the installed `dialogue-deduction` script
    python cli.py --seed 7   # reproducible scenario

Pressing Enter on an empty line is silence, which brings you back to the
main part of the game.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import random
from typing import List, Optional

from dotenv import load_dotenv

from controller import DialogueController
from nlu import AgentClassifier
from voice import ConsoleVoice


async def play(seed: Optional[int] = None) -> None:
    """
    Prepare the console voice, wait for the start signal and run one session.
    """
    voice = ConsoleVoice(AgentClassifier())
    await voice.prepare()
    await voice.wait_for_start()

    game = DialogueController(voice, rng=random.Random(seed))
    try:
        session = await game.run()
    finally:
        await voice.close()

    print(
        f"\n{'CASE SOLVED!' if session.won else 'CASE UNSOLVED...'} "
        f"Score: {session.final_score}/{game.cfg.max_score}"
    )


def run_cli(argv: Optional[List[str]] = None) -> None:
    """
    Validate the GROQ_API_KEY environment variable and play one game.
    """
    parser = argparse.ArgumentParser(description="Voice-style murder deduction game.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the scenario.")
    parser.add_argument("--debug", action="store_true", help="Log the hidden solution.")
    args = parser.parse_args(argv)

    # Configure logging at the entry point so all dialogue_deduction.* loggers
    # emit through one handler. Game logs stay quiet by default because they
    # share the terminal with the dialogue.
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if args.debug:
        logging.getLogger("dialogue_deduction").setLevel(logging.DEBUG)

    load_dotenv()
    if not os.environ.get("GROQ_API_KEY"):
        print("Error: GROQ_API_KEY environment variable is not set.")
        print("  export GROQ_API_KEY='your-key-here'")
        return

    try:
        asyncio.run(play(args.seed))
    except (EOFError, KeyboardInterrupt):
        print("\nThanks for playing!")


if __name__ == "__main__":
    run_cli()
