# -*- coding: utf-8 -*-
"""Classes (Python) to run the Bandit Softmax policy: choose the arm to pull next and learn from rewards.

See :class:`bandito.bandit.interfaces.bandit_interface.BanditInterface` for further details on bandit.

"""
import logging
import threading

import numpy
from scipy.special import softmax

from bandito.bandit.constant import DEFAULT_TAU
from bandito.bandit.data_containers import ArmStatistics
from bandito.bandit.interfaces.bandit_interface import BanditInterface
from bandito.bandit.random_source import NumpyRandomSource
from bandito.bandit.utils import get_winning_arm_index, sample_index_from_distribution
from bandito.exceptions import InvalidParameterError


class Softmax(BanditInterface):

    r"""Implementation of Softmax (Boltzmann exploration).

    A class to encapsulate the computation of bandit softmax. Unlike epsilon-greedy, softmax explores
    non-uniformly: better arms are pulled more often.

    Each arm *i* with running mean :math:`v_i` is pulled with probability

    .. math:: p_i = \frac{e^{v_i / \tau}}{\sum_j e^{v_j / \tau}}

    where the temperature :math:`\tau` controls exploration: as :math:`\tau \to \infty` the distribution
    becomes uniform, as :math:`\tau \to 0` all probability goes to the best arms.

    See :class:`bandito.bandit.interfaces.bandit_interface.BanditInterface` docs for further details.

    """

    def __init__(
            self,
            num_arms,
            tau=DEFAULT_TAU,
            random_source=None,
    ):
        """Construct a Softmax object.

        :param num_arms: number of arms
        :type num_arms: int >= 1
        :param tau: temperature hyperparameter (default: :const:`~bandito.bandit.constant.DEFAULT_TAU`)
        :type tau: finite float64 >= 0.0
        :param random_source: source of uniform randoms (default: None, a :class:`~bandito.bandit.random_source.NumpyRandomSource`
          seeded from the operating system)
        :type random_source: :class:`~bandito.bandit.random_source.RandomSourceInterface`
        :raise: InvalidParameterError when ``tau`` is negative or non-finite, or ``num_arms`` is less than 1

        """
        if not 0.0 <= tau < float('inf'):
            raise InvalidParameterError('tau = {0} not in [0, inf)!'.format(tau))

        self._arm_statistics = ArmStatistics(num_arms)
        self._tau = tau
        self._random_source = random_source if random_source is not None else NumpyRandomSource()
        self._lock = threading.Lock()
        self.log = logging.getLogger(__name__)

    def __str__(self):
        """Return the version followed by the pretty printed arm statistics."""
        return '{0:s}\n{1:s}'.format(self.version(), str(self.arm_statistics))

    def get_arm_probabilities(self):
        r"""Compute the Boltzmann distribution over the current running means.

        The distribution is computed by ``scipy.special.softmax``, which shifts the exponents by their maximum
        so large :math:`v_i / \tau` do not overflow. With :math:`\tau = 0` (or a :math:`\tau` so small that
        :math:`v_i / \tau` is not representable) the limit distribution is returned: the best arms share all the
        probability equally, as they do for every :math:`\tau` small enough to make the other arms negligible.

        :return: probability of pulling each arm, indexed by ``ordinal - 1``
        :rtype: array of float64 with shape (num_arms,)

        """
        with self._lock:
            return self._get_arm_probabilities(self._arm_statistics.values)

    def _get_arm_probabilities(self, values):
        """Compute the distribution for ``values``; callers hold the lock."""
        if self._tau > 0.0:
            with numpy.errstate(over='ignore'):
                scaled_values = values / self._tau
            if numpy.all(numpy.isfinite(scaled_values)):
                return softmax(scaled_values)

        # tau is 0, or so small that some v_i / tau overflowed: use the limit, uniform over the best arms.
        best_arms = values == values[get_winning_arm_index(values)]
        return best_arms / float(numpy.count_nonzero(best_arms))

    def select_arm(self):
        r"""Choose the arm to pull next by sampling the Boltzmann distribution, and count the pull.

        One uniform :math:`u \in [0, 1)` is drawn and the arm is found by inverse-CDF sampling: the first arm whose
        cumulative probability exceeds *u*. See :func:`bandito.bandit.utils.sample_index_from_distribution`.

        :return: 1-based ordinal of the chosen arm
        :rtype: int

        """
        with self._lock:
            probabilities = self._get_arm_probabilities(self._arm_statistics.values)
            index = sample_index_from_distribution(probabilities, self._random_source.uniform())

            ordinal = index + 1
            self._arm_statistics.record_pull(ordinal)
            return ordinal

    def update(self, ordinal, reward):
        """Incorporate ``reward`` into the running mean of arm ``ordinal``. See :meth:`bandito.bandit.data_containers.ArmStatistics.record_reward`."""
        with self._lock:
            self._arm_statistics.record_reward(ordinal, reward)

    def reset(self):
        """Zero the arm statistics and re-seed the random source; tau is untouched."""
        with self._lock:
            self._arm_statistics.reset()
            self._random_source.reseed()
        self.log.debug("reset %s", self.version())

    def version(self):
        """Return ``Softmax(tau=<tau>)`` with tau to two decimals."""
        return 'Softmax(tau={0:.2f})'.format(self._tau)

    def json_payload(self):
        """Construct a json serializeable dictionary of the policy and its arm statistics."""
        return {
                'version': self.version(),
                'tau': self._tau,
                'arm_statistics': self.arm_statistics.json_payload(),
                }

    @property
    def num_arms(self):
        """Return the number of arms."""
        return self._arm_statistics.num_arms

    @property
    def tau(self):
        """Return tau, the temperature."""
        return self._tau

    @property
    def arm_statistics(self):
        """Return a snapshot (copy) of the arm statistics."""
        with self._lock:
            return self._arm_statistics.copy()
