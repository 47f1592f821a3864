"""Shared fixtures for lazyseq tests."""

import pytest


class CountingSource:
    """Iterable that records how many elements have been pulled from it."""

    def __init__(self, items):
        self.items = list(items)
        self.pulled = 0

    def __iter__(self):
        for item in self.items:
            self.pulled += 1
            yield item


@pytest.fixture
def counting_source():
    return CountingSource
