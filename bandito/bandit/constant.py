# -*- coding: utf-8 -*-
"""Some default configuration parameters for bandit components."""
# Bandit subtypes
BANDIT_SUBTYPE_EPSILON_GREEDY = 'epsilon_greedy'
BANDIT_SUBTYPE_SOFTMAX = 'softmax'
DEFAULT_BANDIT_SUBTYPE = BANDIT_SUBTYPE_EPSILON_GREEDY
BANDIT_SUBTYPES = [
                BANDIT_SUBTYPE_EPSILON_GREEDY,
                BANDIT_SUBTYPE_SOFTMAX,
                ]

# Default Hyperparameters
DEFAULT_EPSILON = 0.05
#: Softmax temperature; small values concentrate allocation on the best arm.
DEFAULT_TAU = 0.1
BANDIT_SUBTYPES_TO_DEFAULT_HYPERPARAMETER_INFOS = {
        BANDIT_SUBTYPE_EPSILON_GREEDY: {'epsilon': DEFAULT_EPSILON},
        BANDIT_SUBTYPE_SOFTMAX: {'tau': DEFAULT_TAU},
        }

# Random seeds
#: Largest seed ``numpy.random.RandomState`` accepts.
MAX_RANDOM_SEED = 2 ** 32 - 1
