import matplotlib

matplotlib.use("Agg")

import pytest


class LastIndexRandom:
    """randrange(n) -> n-1: start cell is the bottom-right corner, shuffles keep order."""

    def __init__(self):
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return n - 1


class ZeroRandom:
    """randrange(n) -> 0."""

    def __init__(self):
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return 0


@pytest.fixture
def last_index_rng():
    return LastIndexRandom()


@pytest.fixture
def zero_rng():
    return ZeroRandom()
