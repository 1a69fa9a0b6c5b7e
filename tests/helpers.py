import sys
from pathlib import Path

# Ensure the project root is on the Python path
sys.path.append(str(Path(__file__).resolve().parents[1]))


class FakeQuestion:
    """Stands in for the object returned by ``questionary`` prompt calls."""

    def __init__(self, answer):
        self.answer = answer

    def ask(self):
        return self.answer


def make_questions(responses):
    iterator = iter(responses)

    def _question(*args, **kwargs):
        return FakeQuestion(next(iterator))

    return _question


def press(app, *keys):
    """Feed key names to ``app`` and return the last ``handle_key`` result."""
    result = True
    for key in keys:
        result = app.handle_key(key)
    return result


def type_text(app, text):
    press(app, *list(text))
