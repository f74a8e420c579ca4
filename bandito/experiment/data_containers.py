# -*- coding: utf-8 -*-
"""Data containers for experiments and their variants."""
import pprint
from collections import namedtuple

from bandito.exceptions import UnknownOrdinalError, UnknownTagError


class Variant(namedtuple('Variant', ['ordinal', 'url', 'tag'])):

    """One arm of an experiment, as seen from outside: where to route (url) and how to name it (tag).

    :ivar ordinal: (*int >= 1*) 1-based arm ordinal, unique and contiguous within the experiment
    :ivar url: (*str*) the url associated with this variant, opaque to this library
    :ivar tag: (*str*) globally unique identifier ``"<experiment name>:<suffix>"``, stable for the
      lifetime of the experiment

    """

    __slots__ = ()

    def json_payload(self):
        """Convert the variant into a dict to be consumed by json."""
        return dict(self._asdict())


class Experiment(object):

    """A named experiment and its variants, sorted by ascending ordinal.

    Ordinals are contiguous and start at 1, so the variant with ordinal *i* is ``variants[i - 1]``
    and the number of arms of the experiment is ``len(variants)``. Use
    :func:`bandito.experiment.parser.parse_experiment_records` to build validated experiments.

    :ivar name: (*str*) the experiment name, a single whitespace-free token
    :ivar variants: (*tuple of* :class:`Variant`) the variants, in ordinal order

    """

    __slots__ = ('_name', '_variants')

    def __init__(self, name, variants):
        """Construct an Experiment; ``variants`` must already be sorted by ordinal."""
        self._name = name
        self._variants = tuple(variants)

    def __str__(self):
        """Pretty print this object as a dict."""
        return pprint.pformat(self.json_payload())

    def __repr__(self):
        """Return an unambiguous representation of this experiment."""
        return 'Experiment(name={0!r}, variants={1!r})'.format(self._name, self._variants)

    def __eq__(self, other):
        """Experiments are equal when their names and variants are."""
        if not isinstance(other, Experiment):
            return NotImplemented
        return self._name == other.name and self._variants == other.variants

    def __ne__(self, other):
        """Experiments differ when their names or variants do."""
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        """Hash on name and variants; experiments are immutable."""
        return hash((self._name, self._variants))

    def json_payload(self):
        """Convert the experiment into a dict to be consumed by json."""
        return {
                'name': self._name,
                'variants': [variant.json_payload() for variant in self._variants],
                }

    def get_variant(self, ordinal):
        """Return the variant with the 1-based ``ordinal``.

        :param ordinal: 1-based ordinal of the variant
        :type ordinal: int
        :return: the variant
        :rtype: :class:`Variant`
        :raise: UnknownOrdinalError when ``ordinal`` is not in ``[1, num_arms]``

        """
        num_arms = len(self._variants)
        if not 1 <= ordinal <= num_arms:
            raise UnknownOrdinalError('ordinal {0} not in [1,{1:d}]'.format(ordinal, num_arms))

        return self._variants[ordinal - 1]

    def get_tagged_variant(self, tag):
        """Return the variant of this experiment carrying ``tag``.

        :param tag: variant tag
        :type tag: str
        :return: the variant
        :rtype: :class:`Variant`
        :raise: UnknownTagError when no variant of this experiment carries ``tag``

        """
        for variant in self._variants:
            if variant.tag == tag:
                return variant

        raise UnknownTagError('tag \'{0}\' is not in experiment {1:s}'.format(tag, self._name))

    @property
    def name(self):
        """Return the experiment name."""
        return self._name

    @property
    def variants(self):
        """Return the variants, a tuple sorted by ordinal."""
        return self._variants

    @property
    def num_arms(self):
        """Return the number of variants, i.e., the number of arms of the experiment's bandit."""
        return len(self._variants)
