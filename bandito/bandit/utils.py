# -*- coding: utf-8 -*-
"""Utilities for bandit."""
import numpy


def get_winning_arm_index(values):
    r"""Compute the 0-based index of the arm with the greatest value; ties go to the lowest index.

    Throws an exception when values is empty.

    :param values: the value of each arm
    :type values: array of float64 with shape (num_arms,)
    :return: 0-based index of the first maximal value
    :rtype: int
    :raise: ValueError when ``values`` is empty.

    """
    if len(values) == 0:
        raise ValueError('values is empty!')

    # numpy.argmax returns the first occurrence of the maximum.
    return int(numpy.argmax(values))


def sample_index_from_distribution(probabilities, uniform_draw):
    r"""Choose an index by inverse-CDF sampling of ``probabilities`` with the draw ``uniform_draw``.

    Returns the first index *i* such that :math:`\sum_{j \le i} p_j > u`. The accumulated probabilities
    sum to 1 up to rounding; if rounding leaves the total at or below ``uniform_draw``, the last index
    is returned.

    :param probabilities: a probability distribution over arms
    :type probabilities: array of float64 with shape (num_arms,), summing to 1
    :param uniform_draw: a uniform random number in :math:`[0, 1)`
    :type uniform_draw: float64
    :return: the sampled 0-based index
    :rtype: int
    :raise: ValueError when ``probabilities`` is empty.

    """
    if len(probabilities) == 0:
        raise ValueError('probabilities is empty!')

    cumulative_probabilities = numpy.cumsum(probabilities)
    index = int(numpy.searchsorted(cumulative_probabilities, uniform_draw, side='right'))
    return min(index, len(probabilities) - 1)
