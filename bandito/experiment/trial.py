# -*- coding: utf-8 -*-
"""Trials: bandits set up against experiments, and the registry of every trial keyed by experiment name.

The registry is built once, before serving traffic, and is read-only afterwards; lookups need no locking.
To reload experiments, build a new :class:`Trials` and swap the reference held by the server.
Each bandit serializes its own :meth:`select_arm`/:meth:`update` calls, so trials can be shared by threads.

"""
import logging
from collections.abc import Mapping

from bandito.exceptions import FactoryFailureError, UnknownTagError
from bandito.experiment.parser import parse_experiments
from bandito.timing import timing_context


class Trial(object):

    """A bandit set up against an experiment: arm *i* of the bandit is the variant with ordinal *i*.

    :ivar bandit: (:class:`~bandito.bandit.interfaces.bandit_interface.BanditInterface`) the policy choosing variants
    :ivar experiment: (:class:`~bandito.experiment.data_containers.Experiment`) the experiment whose variants are the arms

    """

    __slots__ = ('_bandit', '_experiment')

    def __init__(self, bandit, experiment):
        """Construct a Trial.

        :param bandit: the bandit; must have exactly one arm per variant of ``experiment``
        :type bandit: :class:`~bandito.bandit.interfaces.bandit_interface.BanditInterface`
        :param experiment: the experiment
        :type experiment: :class:`~bandito.experiment.data_containers.Experiment`
        :raise: ValueError when the bandit and the experiment have different numbers of arms

        """
        if bandit.num_arms != experiment.num_arms:
            raise ValueError('bandit has {0:d} arms but experiment {1:s} has {2:d} variants!'.format(
                bandit.num_arms,
                experiment.name,
                experiment.num_arms,
            ))
        self._bandit = bandit
        self._experiment = experiment

    def select(self):
        """Select an arm with the bandit and return the associated variant.

        :return: the variant to route to
        :rtype: :class:`~bandito.experiment.data_containers.Variant`
        :raise: UnknownOrdinalError if the bandit returned an ordinal the experiment does not have

        """
        return self._experiment.get_variant(self._bandit.select_arm())

    def update(self, ordinal, reward):
        """Report ``reward`` observed for the variant with ``ordinal``; see :meth:`BanditInterface.update`."""
        self._bandit.update(ordinal, reward)

    def json_payload(self):
        """Construct a json serializeable dictionary of this trial."""
        return {
                'bandit': self._bandit.version(),
                'experiment': self._experiment.json_payload(),
                }

    @property
    def bandit(self):
        """Return the bandit."""
        return self._bandit

    @property
    def experiment(self):
        """Return the experiment."""
        return self._experiment


class Trials(Mapping):

    """A read-only mapping of experiment names to :class:`Trial` setups.

    Build it with :meth:`from_experiments` or :meth:`from_tsv`.

    """

    def __init__(self, trials):
        """Construct a Trials registry from a dict of (experiment name, :class:`Trial`) pairs; the dict is copied."""
        self._trials = dict(trials)

    def __getitem__(self, name):
        """Return the trial of experiment ``name``; raises KeyError if there is none."""
        return self._trials[name]

    def __iter__(self):
        """Iterate over experiment names."""
        return iter(self._trials)

    def __len__(self):
        """Return the number of trials."""
        return len(self._trials)

    @classmethod
    def from_experiments(cls, experiments, bandit_factory):
        """Set up one bandit per experiment with ``bandit_factory`` and return the registry.

        Construction is all-or-nothing: if the factory rejects any experiment, no registry is returned.

        :param experiments: experiments keyed by name, e.g., from :func:`bandito.experiment.parser.parse_experiments`
        :type experiments: dict of (str, :class:`~bandito.experiment.data_containers.Experiment`) pairs
        :param bandit_factory: callable returning a bandit with the given number of arms,
          e.g., from :func:`bandito.bandit.linkers.make_bandit_factory`
        :type bandit_factory: callable taking int and returning :class:`~bandito.bandit.interfaces.bandit_interface.BanditInterface`
        :return: the trials registry
        :rtype: :class:`Trials`
        :raise: FactoryFailureError when ``bandit_factory`` raises ValueError for an experiment,
          or returns a bandit whose number of arms differs from the experiment's

        """
        log = logging.getLogger(__name__)

        trials = {}
        for name, experiment in experiments.items():
            try:
                trials[name] = Trial(bandit_factory(experiment.num_arms), experiment)
            except ValueError as exception:
                log.error("could not build a bandit for experiment %s: %s", name, exception)
                raise FactoryFailureError(
                    'could not build a bandit for experiment {0:s}: {1}'.format(name, exception),
                    experiment_name=name,
                ) from exception

        log.info("set up %d trials", len(trials))
        return cls(trials)

    @classmethod
    def from_tsv(cls, experiments_tsv, bandit_factory):
        """Parse ``experiments_tsv`` and set up one bandit per experiment; see :meth:`from_experiments`.

        :param experiments_tsv: the experiment definitions, see :func:`bandito.experiment.parser.parse_experiments`
        :type experiments_tsv: str, or an iterable of lines
        :param bandit_factory: callable returning a bandit with the given number of arms
        :type bandit_factory: callable taking int and returning :class:`~bandito.bandit.interfaces.bandit_interface.BanditInterface`
        :return: the trials registry
        :rtype: :class:`Trials`
        :raise: MalformedRecordError or NonContiguousOrdinalsError when parsing fails
        :raise: FactoryFailureError when ``bandit_factory`` raises ValueError for an experiment

        """
        with timing_context("set up trials from tsv"):
            experiments = parse_experiments(experiments_tsv)
            return cls.from_experiments(experiments, bandit_factory)

    def get_variant(self, tag):
        """Return the experiment and the variant carrying ``tag``, searching every trial.

        Used when a caller pins a variant out of band instead of letting the bandit choose.

        :param tag: variant tag
        :type tag: str
        :return: the experiment and the variant
        :rtype: tuple of (:class:`~bandito.experiment.data_containers.Experiment`, :class:`~bandito.experiment.data_containers.Variant`)
        :raise: UnknownTagError when no variant carries ``tag``

        """
        for trial in self._trials.values():
            for variant in trial.experiment.variants:
                if variant.tag == tag:
                    return trial.experiment, variant

        raise UnknownTagError('could not find variant \'{0}\''.format(tag))

    def json_payload(self):
        """Construct a json serializeable dictionary of every trial, keyed by experiment name."""
        return {name: trial.json_payload() for name, trial in self._trials.items()}
