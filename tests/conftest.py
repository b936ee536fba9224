import pytest


class CountingIterator:
    """Single-pass source that records how many elements were pulled."""

    def __init__(self, items):
        self._iterator = iter(items)
        self.pulls = 0

    def __iter__(self):
        return self

    def __next__(self):
        value = next(self._iterator)
        self.pulls += 1
        return value


def _generator():
    yield 1
    yield 2
    yield 3


def _empty_generator():
    return
    yield


@pytest.fixture
def generator():
    """Factory for fresh one-shot generators over 1, 2, 3"""
    return _generator


@pytest.fixture
def empty_generator():
    """Factory for fresh one-shot empty generators"""
    return _empty_generator


@pytest.fixture
def counting():
    """Wrap an iterable so tests can assert how far it was advanced"""
    return CountingIterator
