# game.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from countries import Country, FailureKind, LoadResult, load_countries
from rules.answers import is_correct
from rules.hints import generate_hints
from rules.scoring import (
    MAX_HINTS,
    NO_POINTS,
    TOTAL_ROUNDS,
    max_possible_score,
    points_for_hint_index,
    rating_for,
    score_percentage,
    total_score,
)

logger = logging.getLogger(__name__)

QUIT_WORD = "quit"
RULE = "=" * 50


# =========================
# I/O channel
# =========================

class QuizIO(Protocol):
    def write(self, line: str = "") -> None: ...

    def read_line(self, prompt: str = "") -> str: ...


class ConsoleIO:
    """print/input adapter. EOFError from input() is left to the caller."""

    def write(self, line: str = "") -> None:
        print(line)

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)


# =========================
# Models
# =========================

class RoundOutcome(Enum):
    CORRECT = "correct"
    QUIT = "quit"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RoundResult:
    round_number: int
    country_name: str
    points_earned: int
    outcome: RoundOutcome


@dataclass
class GameSession:
    countries: Tuple[Country, ...] = ()
    results: List[RoundResult] = field(default_factory=list)
    load_failure: Optional[FailureKind] = None

    @property
    def total_score(self) -> int:
        return total_score(self.results)

    @property
    def playable(self) -> bool:
        return self.load_failure is None and bool(self.countries)


def _is_quit(text: str) -> bool:
    return text.lower() == QUIT_WORD


# =========================
# Round
# =========================

def play_round(country: Country, hints: Sequence[str], round_number: int, io: QuizIO) -> RoundResult:
    """
    Reveal hints one by one until a correct guess, a quit, or no hints left.

    An empty answer is a pass: it moves on to the next hint without being
    checked. Hints are never shown again after a correct guess or a quit.
    """
    name = country.common_name
    io.write(f"Puzzle #{round_number}:")

    for hint_index, hint in enumerate(hints):
        io.write("")
        io.write(f"Hint {hint_index + 1}/{len(hints)}:")
        io.write(f"• {hint}")

        answer = io.read_line("Your answer: ").strip()

        if not answer:
            io.write("No answer provided, moving to the next hint...")
            continue

        if _is_quit(answer):
            io.write(f"Round abandoned. The answer was: {name}")
            logger.info(f"Round {round_number} quit on hint {hint_index + 1}")
            return RoundResult(round_number, name, NO_POINTS, RoundOutcome.QUIT)

        if is_correct(country, answer):
            points = points_for_hint_index(hint_index)
            io.write(f"✓ CORRECT! The answer is: {name}")
            io.write(f"You earned {points} points for guessing after {hint_index + 1} hint(s)!")

            remaining = hints[hint_index + 1:]
            if remaining:
                io.write("")
                io.write("Remaining hints you didn't need:")
                for rest in remaining:
                    io.write(f"• {rest}")
            return RoundResult(round_number, name, points, RoundOutcome.CORRECT)

        if hint_index < len(hints) - 1:
            io.write("✗ Incorrect. Try again with the next hint!")

    io.write("")
    io.write(f"✗ You didn't guess it! The correct answer is: {name}")
    io.write("0 points for this round.")
    return RoundResult(round_number, name, NO_POINTS, RoundOutcome.EXHAUSTED)


# =========================
# Game
# =========================

def pick_country(countries: Sequence[Country], rng: random.Random) -> Country:
    # With replacement: the same country can come up in two rounds.
    return rng.choice(countries)


def intro_lines(rounds: int = TOTAL_ROUNDS) -> List[str]:
    table = []
    for i in range(MAX_HINTS):
        pts = points_for_hint_index(i)
        table.append(f"{_ordinal(i + 1)} hint = {pts} {'pt' if pts == 1 else 'pts'}")
    points = ", ".join(table)

    return [
        "=== GUESS THE COUNTRY! ===",
        f"The game consists of {rounds} rounds. In each round you will receive hints gradually.",
        "The faster you guess, the more points you earn!",
        f"Scoring: {points}",
        f"Type '{QUIT_WORD}' to end the game at any time.",
    ]


def _ordinal(n: int) -> str:
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n, "th")
    return f"{n}{suffix}"


def render_summary(results: Sequence[RoundResult], rounds: int = TOTAL_ROUNDS) -> List[str]:
    total = total_score(results)
    maximum = max_possible_score(rounds)
    percentage = score_percentage(total, maximum)

    lines = ["", RULE, "           GAME SUMMARY", RULE]
    lines += [f"Round {r.round_number}: {r.country_name} - {r.points_earned} pts" for r in results]
    lines += [
        "-" * 50,
        f"TOTAL SCORE: {total}/{maximum} points",
        f"Percentage: {percentage:.1f}%",
        f"Rating: {rating_for(percentage)}",
        "",
        "Thank you for playing!",
    ]
    return lines


def run_game(
    session: GameSession,
    io: QuizIO,
    rng: Optional[random.Random] = None,
    rounds: int = TOTAL_ROUNDS,
) -> GameSession:
    """Play up to `rounds` rounds on a loaded session, then print the summary."""
    rng = rng or random.Random()

    io.write("")
    for line in intro_lines(rounds):
        io.write(line)

    for round_number in range(1, rounds + 1):
        if round_number > 1:
            io.write("")
            answer = io.read_line(
                f"Press Enter to continue to the next round (or type '{QUIT_WORD}' to stop)... "
            )
            if _is_quit(answer.strip()):
                logger.info(f"Session stopped before round {round_number}")
                break

        io.write("")
        io.write(f"= ROUND {round_number}/{rounds} =")

        country = pick_country(session.countries, rng)
        result = play_round(country, generate_hints(country), round_number, io)
        session.results.append(result)

    for line in render_summary(session.results, rounds):
        io.write(line)
    return session


def start_game(
    io: QuizIO,
    load: Callable[[], LoadResult] = load_countries,
    rng: Optional[random.Random] = None,
) -> GameSession:
    """
    Load the country pool and run a session on it.

    A failed load is reported to the player and no round is played.
    """
    io.write("Loading country data...")
    loaded = load()

    if not loaded.ok:
        # a result without a failure kind but with no countries is still unplayable
        failure = loaded.failure or FailureKind.NO_PLAYABLE_COUNTRIES
        logger.warning(f"Country data unavailable ({failure.value}): {loaded.detail}")
        io.write("Failed to load country data. The game cannot be played right now.")
        if failure is FailureKind.NETWORK:
            io.write("Check your internet connection and try again.")
        return GameSession(load_failure=failure)

    io.write(f"Loaded {len(loaded.countries)} countries!")
    session = GameSession(countries=loaded.countries)
    return run_game(session, io, rng=rng)
