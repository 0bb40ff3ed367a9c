# rules/answers.py
from countries import Country
from utils import lower_text


def _name_matches(name: str, guess: str) -> bool:
    if not name or not guess:
        return False
    return name == guess or guess in name or name in guess


def is_correct(country: Country, guess: str) -> bool:
    """
    Case-insensitive match against the common and the official name.

    Containment counts both ways, so partial names are accepted
    ("united" matches "United States", "republic of france" matches "France").
    This leniency is known and kept on purpose; the caller trims the guess.
    """
    guess_l = lower_text(guess)
    return _name_matches(lower_text(country.common_name), guess_l) or _name_matches(
        lower_text(country.official_name), guess_l
    )
