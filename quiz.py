# quiz.py
import logging
import os
import random
import sys

from game import ConsoleIO, start_game

LOG_LEVEL = os.environ.get("QUIZ_LOG_LEVEL", "WARNING").upper()
QUIZ_SEED = os.environ.get("QUIZ_SEED")


def make_rng():
    # QUIZ_SEED makes the country picks repeatable (handy for demos)
    if QUIZ_SEED:
        return random.Random(QUIZ_SEED)
    return random.Random()


def log_level(name: str) -> int:
    # only real level names; logging also exposes constants like BASIC_FORMAT
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.WARNING


def main() -> int:
    logging.basicConfig(
        level=log_level(LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    io = ConsoleIO()

    try:
        session = start_game(io, rng=make_rng())
    except KeyboardInterrupt:
        io.write("")
        io.write("Game interrupted. Goodbye!")
        return 130
    except EOFError:
        io.write("")
        io.write("No more input. Goodbye!")
        return 0

    return 0 if session.playable else 1


if __name__ == "__main__":
    sys.exit(main())
