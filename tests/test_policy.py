"""tests/test_policy.py — Unit tests for ResizePolicy."""

import pytest
from chaintable.policy import GROW_THRESHOLD, MIN_BUCKETS, SHRINK_THRESHOLD, ResizePolicy


class TestDefaults:
    def test_default_values(self):
        p = ResizePolicy()
        assert p.min_buckets == MIN_BUCKETS
        assert p.grow_threshold == GROW_THRESHOLD == 1.5
        assert p.shrink_threshold == SHRINK_THRESHOLD == 0.375

    def test_shrink_is_quarter_of_grow(self):
        p = ResizePolicy(grow_threshold=2.0)
        assert p.shrink_threshold == 0.5

    def test_frozen(self):
        p = ResizePolicy()
        with pytest.raises(AttributeError):
            p.min_buckets = 4


class TestValidation:
    def test_min_buckets_zero(self):
        with pytest.raises(ValueError):
            ResizePolicy(min_buckets=0)

    def test_min_buckets_not_int(self):
        with pytest.raises(TypeError):
            ResizePolicy(min_buckets=2.5)

    def test_grow_threshold_non_positive(self):
        with pytest.raises(ValueError):
            ResizePolicy(grow_threshold=0)


class TestDecisions:
    def test_grow_strictly_above_threshold(self):
        p = ResizePolicy()
        assert not p.should_grow(1.5)
        assert p.should_grow(1.5 + 1 / 8)

    def test_shrink_strictly_below_threshold(self):
        p = ResizePolicy()
        assert not p.should_shrink(0.375, 64)
        assert p.should_shrink(0.3, 64)

    def test_never_shrinks_at_floor(self):
        p = ResizePolicy(min_buckets=8)
        assert not p.should_shrink(0.0, 8)
