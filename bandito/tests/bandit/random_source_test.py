# -*- coding: utf-8 -*-
"""Tests for the random sources."""
from bandito.bandit.random_source import NumpyRandomSource
from bandito.tests.bandit.bandit_test_case import ScriptedRandomSource


class TestRandomSource(object):

    """Tests :class:`bandito.bandit.random_source.NumpyRandomSource` and ``RandomSourceInterface.choice``."""

    def test_uniform_in_unit_interval(self):
        """Test that draws are in [0, 1)."""
        random_source = NumpyRandomSource()
        for _ in range(1000):
            assert 0.0 <= random_source.uniform() < 1.0

    def test_seeded_sources_agree(self):
        """Test that two sources with the same seed draw the same numbers."""
        first = NumpyRandomSource(seed=12)
        second = NumpyRandomSource(seed=12)
        assert [first.uniform() for _ in range(10)] == [second.uniform() for _ in range(10)]
        assert first.seed == 12

    def test_reseed_restarts_draws(self):
        """Test that reseeding a seeded source repeats its draws."""
        random_source = NumpyRandomSource(seed=5)
        draws = [random_source.uniform() for _ in range(10)]
        random_source.reseed()
        assert [random_source.uniform() for _ in range(10)] == draws

    def test_choice_in_range(self):
        """Test that choices are in [0, num_choices)."""
        random_source = NumpyRandomSource(seed=1)
        for num_choices in [1, 2, 7]:
            for _ in range(200):
                assert 0 <= random_source.choice(num_choices) < num_choices

    def test_choice_maps_draws_to_equal_buckets(self):
        """Test that choice splits [0, 1) into equal buckets, a draw just below 1 landing in the last one."""
        random_source = ScriptedRandomSource([0.0, 0.24, 0.25, 0.74, 0.75, 1.0 - 1e-16])
        assert [random_source.choice(4) for _ in range(6)] == [0, 0, 1, 2, 3, 3]
