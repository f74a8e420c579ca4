# -*- coding: utf-8 -*-
"""Tests for the colander schemas of experiment records and bandit configurations."""
import colander
import pytest

from bandito.bandit.constant import DEFAULT_BANDIT_SUBTYPE, DEFAULT_EPSILON, DEFAULT_TAU, MAX_RANDOM_SEED
from bandito.schemas import BanditConfig, BanditEpsilonGreedyHyperparameterInfo, BanditSoftmaxHyperparameterInfo, ExperimentRecord


class TestExperimentRecord(object):

    """Tests :class:`bandito.schemas.ExperimentRecord`."""

    def test_valid_record(self):
        """Test that a valid record deserializes to a tuple with an integer ordinal."""
        record = ['signup_flow', '2', '/v2/signup', 'signup_flow:variant_b']
        assert ExperimentRecord().deserialize(record) == ('signup_flow', 2, '/v2/signup', 'signup_flow:variant_b')

    def test_empty_url(self):
        """Test that the url is not validated, not even for emptiness."""
        assert ExperimentRecord().deserialize(['exp', '1', '', 'exp:a']) == ('exp', 1, '', 'exp:a')

    def test_invalid_records(self):
        """Test that wrong field counts, bad ordinals, whitespace and unprefixed tags cause colander.Invalid."""
        for record in [
                ['exp', '1', '/a'],
                ['exp', '1', '/a', 'exp:a', 'extra'],
                ['exp', 'one', '/a', 'exp:a'],
                ['exp', '1.5', '/a', 'exp:a'],
                ['exp', '', '/a', 'exp:a'],
                ['exp', ' 1', '/a', 'exp:a'],
                ['exp', '1 ', '/a', 'exp:a'],
                ['exp', '1_0', '/a', 'exp:a'],
                ['exp', '１', '/a', 'exp:a'],
                ['my exp', '1', '/a', 'my exp:a'],
                [' exp', '1', '/a', ' exp:a'],
                ['', '1', '/a', ':a'],
                ['exp', '1', '/a', 'exp:a b'],
                ['exp', '1', '/a', ''],
                ['exp', '1', '/a', 'other:a'],
                ['exp', '1', '/a', 'exp'],
                ['exp', '1', '/a', 'expa:b'],
        ]:
            with pytest.raises(colander.Invalid):
                ExperimentRecord().deserialize(record)


class TestBanditSchemas(object):

    """Tests the bandit configuration schemas."""

    def test_hyperparameter_defaults(self):
        """Test that missing hyperparameters take their defaults."""
        assert BanditEpsilonGreedyHyperparameterInfo().deserialize({}) == {'epsilon': DEFAULT_EPSILON}
        assert BanditSoftmaxHyperparameterInfo().deserialize({}) == {'tau': DEFAULT_TAU}

    def test_hyperparameter_bounds(self):
        """Test the closed bounds of epsilon and tau."""
        for epsilon in [0.0, 1.0]:
            assert BanditEpsilonGreedyHyperparameterInfo().deserialize({'epsilon': epsilon}) == {'epsilon': epsilon}
        assert BanditSoftmaxHyperparameterInfo().deserialize({'tau': 0.0}) == {'tau': 0.0}

        for epsilon in [-0.1, 1.1, float('nan')]:
            with pytest.raises(colander.Invalid):
                BanditEpsilonGreedyHyperparameterInfo().deserialize({'epsilon': epsilon})
        for tau in [-0.1, float('inf'), float('nan')]:
            with pytest.raises(colander.Invalid):
                BanditSoftmaxHyperparameterInfo().deserialize({'tau': tau})

    def test_random_seed_bounds(self):
        """Test that seeds outside the range numpy accepts are rejected by the config."""
        for random_seed in [0, MAX_RANDOM_SEED]:
            assert BanditConfig().deserialize({'random_seed': random_seed})['random_seed'] == random_seed

        for random_seed in [-1, MAX_RANDOM_SEED + 1, 2 ** 40, 'abc']:
            with pytest.raises(colander.Invalid):
                BanditConfig().deserialize({'random_seed': random_seed})

    def test_bandit_config_defaults(self):
        """Test that an empty config takes the default subtype, no hyperparameters and no seed."""
        assert BanditConfig().deserialize({}) == {
                'subtype': DEFAULT_BANDIT_SUBTYPE,
                'hyperparameter_info': {},
                'random_seed': None,
                }
