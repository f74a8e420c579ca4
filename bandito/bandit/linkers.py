# -*- coding: utf-8 -*-
"""Links between bandit subtypes and their implementations, and bandit factories built from configuration.

A bandit factory is a callable ``factory(num_arms)`` returning a
:class:`~bandito.bandit.interfaces.bandit_interface.BanditInterface`; it is the seam through which
callers choose the policy and its hyperparameters for every trial.

"""
import copy
import pprint
from collections import namedtuple

import colander
import numpy
import simplejson as json

from bandito.bandit.constant import BANDIT_SUBTYPE_EPSILON_GREEDY, BANDIT_SUBTYPE_SOFTMAX, DEFAULT_BANDIT_SUBTYPE
from bandito.bandit.epsilon_greedy import EpsilonGreedy
from bandito.bandit.random_source import NumpyRandomSource
from bandito.bandit.softmax import Softmax
from bandito.exceptions import InvalidParameterError
from bandito.schemas import BANDIT_SUBTYPES_TO_HYPERPARAMETER_INFO_SCHEMA_CLASSES, BanditConfig, RandomSeed

BanditMethod = namedtuple(
        'BanditMethod',
        [
            'subtype',
            'bandit_class',
            ],
        )


BANDIT_SUBTYPES_TO_BANDIT_METHODS = {
        BANDIT_SUBTYPE_EPSILON_GREEDY: BanditMethod(
            subtype=BANDIT_SUBTYPE_EPSILON_GREEDY,
            bandit_class=EpsilonGreedy,
            ),
        BANDIT_SUBTYPE_SOFTMAX: BanditMethod(
            subtype=BANDIT_SUBTYPE_SOFTMAX,
            bandit_class=Softmax,
            ),
        }


def _deserialize(schema, cstruct):
    """Deserialize ``cstruct`` with ``schema``, turning ``colander.Invalid`` into InvalidParameterError."""
    try:
        return schema.deserialize(cstruct)
    except colander.Invalid as exception:
        raise InvalidParameterError('Failed validation:\n{0:s}'.format(pprint.pformat(exception.asdict())))


def make_bandit_factory(subtype=DEFAULT_BANDIT_SUBTYPE, hyperparameter_info=None, random_seed=None):
    """Build a bandit factory for ``subtype`` with the hyperparameters in ``hyperparameter_info``.

    The hyperparameters and the seed are validated now, so a bad configuration fails before any bandit is built.
    Every bandit built by the factory gets its own random source. With ``random_seed`` given, the n-th bandit
    is seeded with the n-th child of ``numpy.random.SeedSequence(random_seed)``: the bandits of one factory draw
    independent streams, and two factories with the same seed build bandits that draw the same streams.

    :param subtype: subtype of the bandit policy (default: :const:`~bandito.bandit.constant.DEFAULT_BANDIT_SUBTYPE`)
    :type subtype: str, one of :const:`~bandito.bandit.constant.BANDIT_SUBTYPES`
    :param hyperparameter_info: hyperparameters of the subtype, e.g., ``{'epsilon': 0.1}`` (default: None, the subtype defaults)
    :type hyperparameter_info: dict
    :param random_seed: seed from which the bandits' random sources are seeded (default: None, seeded from the operating system)
    :type random_seed: int in [0, 2**32 - 1] or None
    :return: a bandit factory
    :rtype: callable taking ``num_arms`` and returning a :class:`~bandito.bandit.interfaces.bandit_interface.BanditInterface`
    :raise: InvalidParameterError when ``subtype`` is unknown, or ``hyperparameter_info`` or ``random_seed`` is invalid

    """
    if subtype not in BANDIT_SUBTYPES_TO_BANDIT_METHODS:
        raise InvalidParameterError('subtype = {0} is not one of {1}!'.format(subtype, sorted(BANDIT_SUBTYPES_TO_BANDIT_METHODS)))

    schema = BANDIT_SUBTYPES_TO_HYPERPARAMETER_INFO_SCHEMA_CLASSES[subtype]()
    validated_hyperparameter_info = _deserialize(schema, copy.deepcopy(hyperparameter_info or {}))
    bandit_class = BANDIT_SUBTYPES_TO_BANDIT_METHODS[subtype].bandit_class

    seed_sequence = None
    if random_seed is not None:
        seed_sequence = numpy.random.SeedSequence(_deserialize(RandomSeed(name='random_seed'), random_seed))

    def bandit_factory(num_arms):
        """Construct a bandit with ``num_arms`` arms."""
        seed = None
        if seed_sequence is not None:
            seed = int(seed_sequence.spawn(1)[0].generate_state(1)[0])

        return bandit_class(
                num_arms,
                random_source=NumpyRandomSource(seed=seed),
                **validated_hyperparameter_info
                )

    return bandit_factory


def bandit_factory_from_config(config):
    """Build a bandit factory from a config dict; see :class:`bandito.schemas.BanditConfig` for the layout.

    :param config: the bandit configuration
    :type config: dict
    :return: a bandit factory, see :func:`make_bandit_factory`
    :raise: InvalidParameterError when ``config`` fails validation

    """
    params = _deserialize(BanditConfig(), config)
    return make_bandit_factory(
            subtype=params['subtype'],
            hyperparameter_info=params['hyperparameter_info'],
            random_seed=params['random_seed'],
            )


def bandit_factory_from_json(json_config):
    """Build a bandit factory from a JSON-encoded config; see :func:`bandit_factory_from_config`.

    :param json_config: the JSON-encoded bandit configuration
    :type json_config: str
    :raise: InvalidParameterError when ``json_config`` is not valid JSON or fails validation

    """
    try:
        config = json.loads(json_config)
    except json.JSONDecodeError as exception:
        raise InvalidParameterError('bandit config is not valid json: {0}'.format(exception))
    return bandit_factory_from_config(config)
