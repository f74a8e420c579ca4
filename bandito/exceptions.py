# -*- coding: utf-8 -*-
"""Exceptions raised by the bandit policies, the experiment parser and the trials registry.

Every exception derives from :class:`BanditoError` and from the builtin exception that describes
the failure (``ValueError`` for bad input, ``LookupError`` for failed lookups), so callers may catch
either.

"""


class BanditoError(Exception):

    """Base class for all bandito errors."""

    pass


class InvalidParameterError(BanditoError, ValueError):

    """A policy parameter (epsilon, tau, number of arms, reward) or bandit configuration is out of its domain."""

    pass


class MalformedRecordError(BanditoError, ValueError):

    """An experiment record has the wrong number of fields, a bad ordinal, a bad name or a bad tag.

    :ivar line_number: (*int*) 1-based index of the offending record, None if unknown

    """

    def __init__(self, msg, line_number=None):
        """Construct a MalformedRecordError; ``line_number`` is the 1-based index of the offending record."""
        super(MalformedRecordError, self).__init__(msg)
        self.line_number = line_number


class NonContiguousOrdinalsError(BanditoError, ValueError):

    """The ordinals of an experiment are not exactly ``1..n``.

    :ivar experiment_name: (*str*) name of the offending experiment
    :ivar ordinal: (*int*) the first ordinal found out of place

    """

    def __init__(self, experiment_name, ordinal):
        """Construct a NonContiguousOrdinalsError for ``ordinal`` of experiment ``experiment_name``."""
        super(NonContiguousOrdinalsError, self).__init__(
            '{0:s}: variant {1:d} noncontiguous'.format(experiment_name, ordinal),
        )
        self.experiment_name = experiment_name
        self.ordinal = ordinal


class UnknownOrdinalError(BanditoError, LookupError):

    """An arm ordinal is outside ``[1, num_arms]``."""

    pass


class UnknownTagError(BanditoError, LookupError):

    """No variant carries the requested tag."""

    pass


class FactoryFailureError(BanditoError, ValueError):

    """The bandit factory rejected the construction of a bandit for an experiment.

    :ivar experiment_name: (*str*) name of the experiment whose bandit could not be built

    """

    def __init__(self, msg, experiment_name=None):
        """Construct a FactoryFailureError for experiment ``experiment_name``."""
        super(FactoryFailureError, self).__init__(msg)
        self.experiment_name = experiment_name
