# -*- coding: utf-8 -*-
"""Sources of uniform random numbers owned by a single bandit.

A bandit never touches a global generator; it is handed a :class:`RandomSourceInterface` so that tests can
inject a deterministic seed (or a scripted sequence of draws).

"""
from abc import ABCMeta, abstractmethod

import numpy


class RandomSourceInterface(object, metaclass=ABCMeta):

    r"""Interface for a source of uniform random numbers in :math:`[0, 1)`."""

    @abstractmethod
    def uniform(self):
        r"""Draw the next uniform random number.

        :return: a number in :math:`[0, 1)`
        :rtype: float64

        """
        pass

    @abstractmethod
    def reseed(self):
        """Return this source to its just-constructed state."""
        pass

    def choice(self, num_choices):
        r"""Draw an index uniformly from ``0, 1, ..., num_choices - 1`` using one call to :meth:`uniform`.

        :param num_choices: number of choices to draw from
        :type num_choices: int >= 1
        :return: the chosen index
        :rtype: int

        """
        # uniform() < 1 so the product is < num_choices; the min() guards against rounding.
        return min(int(self.uniform() * num_choices), num_choices - 1)


class NumpyRandomSource(RandomSourceInterface):

    """Random source backed by a ``numpy.random.RandomState``.

    :ivar seed: (*int or None*) seed handed to the generator on construction and on every :meth:`reseed`;
      None means fresh entropy from the operating system each time

    """

    def __init__(self, seed=None):
        """Construct a NumpyRandomSource.

        :param seed: seed for deterministic draws (default: None, seeded from the operating system)
        :type seed: int or None

        """
        self._seed = seed
        self._random_state = numpy.random.RandomState(seed)

    def uniform(self):
        """Draw the next uniform random number in [0, 1)."""
        return self._random_state.random_sample()

    def reseed(self):
        """Recreate the generator from the construction seed."""
        self._random_state = numpy.random.RandomState(self._seed)

    @property
    def seed(self):
        """Return the seed, None if seeded from the operating system."""
        return self._seed
