"""Pytest configuration and fixtures."""

import pytest
from core.domain.errors import InvalidRange, ReseedUnsupported
from core.interfaces.secure_sampler import SecureSampler


class CountingSampler(SecureSampler):
    """
    Instrumented sampler for generator tests.
    
    Draws from a fixed cycle of values (clamped into the requested range),
    counts every call, and can be told to fail reseed or to fail sampling
    after a given number of draws.
    """
    
    def __init__(self, values=(65,), fail_reseed=False, fail_after=None):
        self.values = list(values)
        self.fail_reseed = fail_reseed
        self.fail_after = fail_after
        self.reseed_count = 0
        self.sample_count = 0
        self.ranges = []
    
    def reseed(self) -> None:
        if self.fail_reseed:
            raise ReseedUnsupported("entropy source offline")
        self.reseed_count += 1
    
    def sample(self, lo: int, hi: int) -> int:
        if self.fail_after is not None and self.sample_count >= self.fail_after:
            raise InvalidRange(hi, lo)
        self.ranges.append((lo, hi))
        value = self.values[self.sample_count % len(self.values)]
        self.sample_count += 1
        return min(max(value, lo), hi)


@pytest.fixture
def counting_sampler():
    """Sampler that always returns 'A' and counts calls."""
    return CountingSampler()


@pytest.fixture
def emitted():
    """List collecting emitted passwords."""
    return []


@pytest.fixture
def make_sampler():
    """Factory for CountingSampler with custom behavior."""
    return CountingSampler
