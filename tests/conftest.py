import pytest

from countries import Country, Currency


class ScriptedIO:
    """Feeds canned answers and records everything written."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.lines = []
        self.prompts = []

    def write(self, line=""):
        self.lines.append(line)

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def france():
    return Country(
        common_name="France",
        official_name="French Republic",
        capitals=("Paris",),
        population=67_000_000,
        currency=Currency(name="Euro", symbol="€"),
        region="Europe",
        subregion="Western Europe",
    )


@pytest.fixture
def scripted_io():
    return ScriptedIO
