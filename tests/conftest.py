"""Shared fixtures for the test suite."""

import pytest


class ScriptedRandom:
    """Random source that replays fixed sequences of draws."""

    def __init__(self, ints=(), floats=()):
        self._ints = list(ints)
        self._floats = list(floats)
        self.int_calls: list[int] = []

    def randrange(self, stop):
        self.int_calls.append(stop)
        value = self._ints.pop(0)
        assert 0 <= value < stop, f"scripted value {value} outside [0, {stop})"
        return value

    def random(self):
        return self._floats.pop(0)


@pytest.fixture()
def scripted_random():
    return ScriptedRandom
