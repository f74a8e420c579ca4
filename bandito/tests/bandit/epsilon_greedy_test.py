# -*- coding: utf-8 -*-
"""Test epsilon-greedy bandit implementation.

Test default values, epsilon validation, exploitation with ties, exploration, and the checks
shared by every policy in :class:`bandito.tests.bandit.bandit_test_case.BanditTestCase`.

"""
import pytest

from bandito.bandit.constant import DEFAULT_EPSILON
from bandito.bandit.epsilon_greedy import EpsilonGreedy
from bandito.exceptions import InvalidParameterError
from bandito.tests.bandit.bandit_test_case import BanditTestCase, ScriptedRandomSource


class TestEpsilonGreedy(BanditTestCase):

    """Verify that different epsilon values and arm statistics return correct results."""

    bandit_class = EpsilonGreedy
    epsilons_to_test = [DEFAULT_EPSILON, 0.0, 0.5, 1.0]
    hyperparameters_to_test = [{'epsilon': epsilon} for epsilon in epsilons_to_test]

    def test_init_default(self):
        """Verify that default values do not throw and error."""
        self._test_init_default()
        assert EpsilonGreedy(2).epsilon == DEFAULT_EPSILON

    def test_num_arms_invalid(self):
        """Test that a bandit without arms causes a ValueError."""
        self._test_num_arms_invalid()

    def test_epsilon_invalid(self):
        """Test that epsilon outside [0, 1] causes an InvalidParameterError."""
        for epsilon in [-0.01, 1.01, -1.0, 2.0, float('nan'), float('inf')]:
            with pytest.raises(InvalidParameterError):
                EpsilonGreedy(3, epsilon=epsilon)

    def test_version(self):
        """Test the version string, epsilon to two decimals."""
        assert EpsilonGreedy(3, epsilon=0.1).version() == 'EpsilonGreedy(epsilon=0.10)'
        assert EpsilonGreedy(3, epsilon=1.0).version() == 'EpsilonGreedy(epsilon=1.00)'

    def test_one_arm(self):
        """Check that the one-arm case always returns the only arm."""
        for epsilon in self.epsilons_to_test:
            bandit = EpsilonGreedy(1, epsilon=epsilon)
            for _ in range(20):
                assert bandit.select_arm() == 1

    def test_exploit_best_arm(self):
        """Check that a draw above epsilon pulls the arm with the best running mean."""
        bandit = EpsilonGreedy(3, epsilon=0.1, random_source=ScriptedRandomSource([0.5]))
        bandit.update(1, 0.2)
        bandit.update(2, 0.9)
        bandit.update(3, 0.4)
        for _ in range(10):
            assert bandit.select_arm() == 2

    def test_exploit_tie_goes_to_lowest_ordinal(self):
        """Check that ties among the best arms go to the lowest ordinal, including the all-zero start."""
        bandit = EpsilonGreedy(3, epsilon=0.0, random_source=ScriptedRandomSource([0.5]))
        assert bandit.select_arm() == 1

        bandit.update(2, 1.0)
        bandit.update(3, 1.0)
        assert bandit.select_arm() == 2

    def test_explore_random_arm(self):
        """Check that a draw at or below epsilon pulls an arm chosen by the next draw, the best arm included."""
        # First draw 0.2 <= 0.5 explores; the second draw picks arm int(0.7 * 3) + 1 = 3.
        bandit = EpsilonGreedy(3, epsilon=0.5, random_source=ScriptedRandomSource([0.2, 0.7]))
        bandit.update(1, 1.0)
        assert bandit.select_arm() == 3

        # Exploring may pick the best arm too: int(0.1 * 3) + 1 = 1.
        bandit = EpsilonGreedy(3, epsilon=0.5, random_source=ScriptedRandomSource([0.2, 0.1]))
        bandit.update(1, 1.0)
        assert bandit.select_arm() == 1

    def test_epsilon_one_is_uniform(self):
        """Check that with epsilon = 1 every arm is pulled about equally often, whatever the arm values."""
        bandit = EpsilonGreedy(4, epsilon=1.0)
        bandit.update(1, 10.0)
        num_selections = 8000
        for _ in range(num_selections):
            bandit.select_arm()
        fractions = bandit.arm_statistics.pulls / float(num_selections)
        for fraction in fractions:
            assert fraction == pytest.approx(0.25, abs=0.03)

    def test_select_arm_in_range(self):
        """Check that selected ordinals are always in [1, num_arms]."""
        self._test_select_arm_in_range()

    def test_update_running_mean(self):
        """Check that n identical rewards give a mean equal to the reward."""
        self._test_update_running_mean()

    def test_update_running_mean_of_different_rewards(self):
        """Check that the running mean is the exact mean of the rewards, unaffected by selections."""
        bandit = EpsilonGreedy(2, epsilon=0.0, random_source=ScriptedRandomSource([0.5]))
        for reward in [1.0, 2.0, 3.0, 6.0]:
            bandit.select_arm()
            bandit.update(1, reward)
        assert bandit.arm_statistics.values[0] == pytest.approx(3.0)
        assert bandit.arm_statistics.counts[0] == 4
        assert bandit.arm_statistics.pulls[0] == 4

    def test_update_unknown_ordinal(self):
        """Test that updating an unknown ordinal causes an UnknownOrdinalError."""
        self._test_update_unknown_ordinal()

    def test_update_non_finite_reward_invalid(self):
        """Test that a non-finite reward causes a ValueError."""
        self._test_update_non_finite_reward_invalid()

    def test_select_counts_pulls_only(self):
        """Check that select and update each count once, in separate counters."""
        self._test_select_counts_pulls_only()

    def test_reset(self):
        """Check that reset zeroes the statistics and keeps the version."""
        self._test_reset()

    def test_reset_keeps_epsilon(self):
        """Check that reset leaves epsilon untouched."""
        bandit = EpsilonGreedy(2, epsilon=0.3)
        bandit.reset()
        assert bandit.epsilon == 0.3

    def test_reset_reseeds(self):
        """Check that a seeded bandit repeats its selections after a reset."""
        self._test_reset_reseeds()

    def test_concurrent_select_and_update(self):
        """Check that no pull or reward is lost under concurrent use."""
        self._test_concurrent_select_and_update()

    def test_json_payload(self):
        """Test the json payload of the policy and its statistics."""
        bandit = EpsilonGreedy(2, epsilon=0.25)
        bandit.update(2, 0.5)
        assert bandit.json_payload() == {
                'version': 'EpsilonGreedy(epsilon=0.25)',
                'epsilon': 0.25,
                'arm_statistics': {
                    'pulls': [0, 0],
                    'counts': [0, 1],
                    'values': [0.0, 0.5],
                    },
                }
