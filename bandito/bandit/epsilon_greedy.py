# -*- coding: utf-8 -*-
"""Classes (Python) to run the Bandit Epsilon-Greedy policy: choose the arm to pull next and learn from rewards.

See :class:`bandito.bandit.interfaces.bandit_interface.BanditInterface` for further details on bandit.

"""
import logging
import threading

from bandito.bandit.constant import DEFAULT_EPSILON
from bandito.bandit.data_containers import ArmStatistics
from bandito.bandit.interfaces.bandit_interface import BanditInterface
from bandito.bandit.random_source import NumpyRandomSource
from bandito.bandit.utils import get_winning_arm_index
from bandito.exceptions import InvalidParameterError


class EpsilonGreedy(BanditInterface):

    r"""Implementation of EpsilonGreedy.

    A class to encapsulate the computation of bandit epsilon greedy.

    The Algorithm: http://en.wikipedia.org/wiki/Multi-armed_bandit#Approximate_solutions

    With probability :math:`1-\epsilon` this policy pulls the arm with the best running mean reward
    (exploitation); with probability :math:`\epsilon` it pulls an arm chosen uniformly among all arms,
    the best arm included (exploration).

    See :class:`bandito.bandit.interfaces.bandit_interface.BanditInterface` docs for further details.

    """

    def __init__(
            self,
            num_arms,
            epsilon=DEFAULT_EPSILON,
            random_source=None,
    ):
        """Construct an EpsilonGreedy object.

        :param num_arms: number of arms
        :type num_arms: int >= 1
        :param epsilon: epsilon hyperparameter for the epsilon bandit algorithm (default: :const:`~bandito.bandit.constant.DEFAULT_EPSILON`)
        :type epsilon: float64 in range [0.0, 1.0]
        :param random_source: source of uniform randoms (default: None, a :class:`~bandito.bandit.random_source.NumpyRandomSource`
          seeded from the operating system)
        :type random_source: :class:`~bandito.bandit.random_source.RandomSourceInterface`
        :raise: InvalidParameterError when ``epsilon`` is not in [0, 1] or ``num_arms`` is less than 1

        """
        if not 0.0 <= epsilon <= 1.0:
            raise InvalidParameterError('epsilon = {0} not in [0, 1]!'.format(epsilon))

        self._arm_statistics = ArmStatistics(num_arms)
        self._epsilon = epsilon
        self._random_source = random_source if random_source is not None else NumpyRandomSource()
        self._lock = threading.Lock()
        self.log = logging.getLogger(__name__)

    def __str__(self):
        """Return the version followed by the pretty printed arm statistics."""
        return '{0:s}\n{1:s}'.format(self.version(), str(self.arm_statistics))

    def select_arm(self):
        r"""Choose the arm to pull next according to the epsilon-greedy policy and count the pull.

        A uniform :math:`u \in [0, 1)` is drawn. If :math:`u > \epsilon`, the arm with the greatest running mean is
        chosen, the lowest ordinal winning ties. Otherwise an arm is chosen uniformly at random.

        For example, with :math:`\epsilon = 0` the best arm is always pulled, and with :math:`\epsilon = 1` every pull
        is uniform over all arms.

        :return: 1-based ordinal of the chosen arm
        :rtype: int

        """
        with self._lock:
            if self._random_source.uniform() > self._epsilon:
                index = get_winning_arm_index(self._arm_statistics.values)
            else:
                index = self._random_source.choice(self._arm_statistics.num_arms)

            ordinal = index + 1
            self._arm_statistics.record_pull(ordinal)
            return ordinal

    def update(self, ordinal, reward):
        """Incorporate ``reward`` into the running mean of arm ``ordinal``. See :meth:`bandito.bandit.data_containers.ArmStatistics.record_reward`."""
        with self._lock:
            self._arm_statistics.record_reward(ordinal, reward)

    def reset(self):
        """Zero the arm statistics and re-seed the random source; epsilon is untouched."""
        with self._lock:
            self._arm_statistics.reset()
            self._random_source.reseed()
        self.log.debug("reset %s", self.version())

    def version(self):
        """Return ``EpsilonGreedy(epsilon=<epsilon>)`` with epsilon to two decimals."""
        return 'EpsilonGreedy(epsilon={0:.2f})'.format(self._epsilon)

    def json_payload(self):
        """Construct a json serializeable dictionary of the policy and its arm statistics."""
        return {
                'version': self.version(),
                'epsilon': self._epsilon,
                'arm_statistics': self.arm_statistics.json_payload(),
                }

    @property
    def num_arms(self):
        """Return the number of arms."""
        return self._arm_statistics.num_arms

    @property
    def epsilon(self):
        """Return epsilon, the probability of exploring."""
        return self._epsilon

    @property
    def arm_statistics(self):
        """Return a snapshot (copy) of the arm statistics."""
        with self._lock:
            return self._arm_statistics.copy()
