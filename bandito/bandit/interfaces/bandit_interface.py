# -*- coding: utf-8 -*-
r"""Interface for Bandit functions, supports select arm, update, reset and version."""
from abc import ABCMeta, abstractmethod


class BanditInterface(object, metaclass=ABCMeta):

    r"""Interface for a bandit algorithm.

    A bandit owns the statistics of ``num_arms`` arms, addressed by 1-based ordinals, and a random source.
    It decides which arm to pull next (:meth:`select_arm`) and folds observed rewards into its
    belief about each arm (:meth:`update`).

    Implementers of this ABC are required to manage their own hyperparameters, and to serialize
    :meth:`select_arm`, :meth:`update` and :meth:`reset` so that one instance can be shared by
    many serving threads.

    """

    @abstractmethod
    def select_arm(self):
        r"""Choose the arm to pull next and count the pull.

        :return: 1-based ordinal of the chosen arm, always in ``[1, num_arms]``
        :rtype: int

        """
        pass

    @abstractmethod
    def update(self, ordinal, reward):
        r"""Incorporate ``reward``, observed after pulling arm ``ordinal``, into that arm's running mean.

        :param ordinal: 1-based ordinal of the arm the reward belongs to
        :type ordinal: int
        :param reward: observed reward
        :type reward: float64
        :raise: :class:`bandito.exceptions.UnknownOrdinalError` when ``ordinal`` is not in ``[1, num_arms]``

        """
        pass

    @abstractmethod
    def reset(self):
        """Return the bandit to its newly constructed state: statistics zeroed, random source re-seeded.

        Hyperparameters are untouched.

        """
        pass

    @abstractmethod
    def version(self):
        """Return a human-readable identity of this strategy and its hyperparameters, for diagnostics.

        :rtype: str

        """
        pass

    @property
    @abstractmethod
    def num_arms(self):
        """Return the number of arms."""
        pass
