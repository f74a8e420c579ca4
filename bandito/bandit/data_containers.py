# -*- coding: utf-8 -*-
"""Data containers convenient for/used to interact with bandit members."""
import pprint

import numpy

from bandito.exceptions import InvalidParameterError, UnknownOrdinalError


class ArmStatistics(object):

    """Per-arm statistics (pulls, counts, running mean values) of a bandit with ``num_arms`` arms.

    Arms are addressed by their 1-based ordinal; internally index ``ordinal - 1`` is used.

    Selections and observed rewards are counted separately: ``pulls`` is incremented when a policy selects
    an arm, ``counts`` when a reward is incorporated. The running mean divides by ``counts`` only, so
    ``values`` is always the exact mean of the rewards observed for each arm.

    This container does no locking; the owning bandit serializes access.

    :ivar num_arms: (*int >= 1*) number of arms
    :ivar pulls: (*array of int64*) number of times each arm was selected
    :ivar counts: (*array of int64*) number of rewards observed for each arm
    :ivar values: (*array of float64*) running mean reward of each arm

    """

    __slots__ = ('_num_arms', '_pulls', '_counts', '_values')

    def __init__(self, num_arms):
        """Allocate all-zero statistics for ``num_arms`` arms.

        :param num_arms: number of arms
        :type num_arms: int >= 1
        :raise: InvalidParameterError when ``num_arms`` is less than 1

        """
        if num_arms < 1:
            raise InvalidParameterError('num_arms = {0} must be at least 1!'.format(num_arms))
        self._num_arms = int(num_arms)
        self.reset()

    def __str__(self):
        """Pretty print this object as a dict."""
        return pprint.pformat(self.json_payload())

    def json_payload(self):
        """Convert the statistics into a dict to be consumed by json."""
        return {
                'pulls': self._pulls.tolist(),
                'counts': self._counts.tolist(),
                'values': self._values.tolist(),
                }

    def reset(self):
        """Zero every pull, count and value."""
        self._pulls = numpy.zeros(self._num_arms, dtype=numpy.int64)
        self._counts = numpy.zeros(self._num_arms, dtype=numpy.int64)
        self._values = numpy.zeros(self._num_arms, dtype=numpy.float64)

    def validate_ordinal(self, ordinal):
        """Check that ``ordinal`` addresses an arm and return its 0-based index.

        :param ordinal: 1-based arm ordinal
        :type ordinal: int
        :return: 0-based index of the arm
        :rtype: int
        :raise: UnknownOrdinalError when ``ordinal`` is not in ``[1, num_arms]``

        """
        if isinstance(ordinal, bool) or not isinstance(ordinal, (int, numpy.integer)) or not 1 <= ordinal <= self._num_arms:
            raise UnknownOrdinalError('ordinal {0} not in [1,{1:d}]'.format(ordinal, self._num_arms))
        return int(ordinal) - 1

    def record_pull(self, ordinal):
        """Count one selection of arm ``ordinal``."""
        index = self.validate_ordinal(ordinal)
        self._pulls[index] += 1

    def record_reward(self, ordinal, reward):
        r"""Incorporate ``reward`` into the running mean of arm ``ordinal``.

        Uses the incremental mean

        .. math:: v \leftarrow v + \frac{r - v}{n}

        where *n* is the number of rewards observed for the arm, this one included. This equals
        :math:`\frac{v (n - 1) + r}{n}` but does not grow the magnitude of intermediate values.

        :param ordinal: 1-based arm ordinal
        :type ordinal: int
        :param reward: observed reward
        :type reward: float64
        :raise: UnknownOrdinalError when ``ordinal`` is not in ``[1, num_arms]``
        :raise: InvalidParameterError when ``reward`` is non-finite

        """
        index = self.validate_ordinal(ordinal)
        if not numpy.isfinite(reward):
            raise InvalidParameterError('reward = {0} is non-finite!'.format(reward))
        self._counts[index] += 1
        self._values[index] += (reward - self._values[index]) / self._counts[index]

    def copy(self):
        """Return a deep copy of these statistics."""
        other = ArmStatistics(self._num_arms)
        other._pulls = self._pulls.copy()
        other._counts = self._counts.copy()
        other._values = self._values.copy()
        return other

    @property
    def num_arms(self):
        """Return the number of arms."""
        return self._num_arms

    @property
    def pulls(self):
        """Return the number of times each arm was selected."""
        return self._pulls

    @property
    def counts(self):
        """Return the number of rewards observed for each arm."""
        return self._counts

    @property
    def values(self):
        """Return the running mean reward of each arm."""
        return self._values
