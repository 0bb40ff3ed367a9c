# rules/scoring.py
from __future__ import annotations

from typing import Iterable, Tuple

TOTAL_ROUNDS = 3
MAX_HINTS = 4
NO_POINTS = 0

# Highest threshold first; first match wins.
RATINGS: Tuple[Tuple[float, str], ...] = (
    (90, "GEOGRAPHY MASTER!"),
    (75, "EXPERT!"),
    (60, "VERY GOOD!"),
    (40, "NOT BAD!"),
    (20, "TIME TO STUDY!"),
)
LOWEST_RATING = "EXPLORE THE WORLD!"


def points_for_hint_index(hint_index: int) -> int:
    """
    Points for a correct guess made while hint `hint_index` (0-based) was shown.
    1st hint = 4 pts, 2nd = 3, 3rd = 2, 4th = 1.
    """
    if not 0 <= hint_index < MAX_HINTS:
        raise ValueError(f"hint index must be in 0..{MAX_HINTS - 1}, got {hint_index}")
    return MAX_HINTS - hint_index


def total_score(results: Iterable) -> int:
    return sum(int(r.points_earned) for r in results)


def max_possible_score(rounds: int = TOTAL_ROUNDS) -> int:
    return rounds * MAX_HINTS


def score_percentage(total: int, maximum: int) -> float:
    if maximum <= 0:
        return 0.0
    return total / maximum * 100


def rating_for(percentage: float) -> str:
    for threshold, label in RATINGS:
        if percentage >= threshold:
            return label
    return LOWEST_RATING
