import pytest

SEED = b"0123456789abcdef0123456789abcdef"


class ScriptedRandom:
    """Stands in for PMRandom: returns queued values and checks they fit the requested range."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def gen_range(self, low, high):
        value = self.values.pop(0)
        assert low <= value < high, f"scripted {value} outside [{low}, {high})"
        self.calls.append((low, high))
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def seed():
    return SEED
