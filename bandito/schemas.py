# -*- coding: utf-8 -*-
"""Colander schemas validating experiment records and bandit configurations.

.. Warning:: Outputs of colander schema serialization/deserialization should be treated as
  READ-ONLY. It appears that "missing=" and "default=" value are weak-copied (by reference).
  Thus changing missing/default fields in the output dict can modify the schema!

"""
import math
import re

import colander

from bandito.bandit.constant import BANDIT_SUBTYPE_EPSILON_GREEDY, BANDIT_SUBTYPE_SOFTMAX, BANDIT_SUBTYPES, DEFAULT_BANDIT_SUBTYPE, DEFAULT_EPSILON, DEFAULT_TAU, MAX_RANDOM_SEED
from bandito.experiment.constant import TAG_SEPARATOR


class StrictMappingSchema(colander.MappingSchema):

    """A ``colander.MappingSchema`` that raises exceptions when asked to serialize/deserialize unknown keys.

    .. Note:: by default, colander.MappingSchema ignores/throws out unknown keys.

    """

    def schema_type(self, **kw):
        """Set MappingSchema to raise ``colander.Invalid`` when serializing/deserializing unknown keys."""
        return colander.Mapping(unknown='raise')


class NonNegativeFloat(colander.SchemaNode):

    """Colander non-negative (finite) float."""

    schema_type = colander.Float
    title = 'Non-negative Float'

    def validator(self, node, cstruct):
        """Raise an exception if the node value (cstruct) is negative or non-finite.

        :param node: the node being validated (usually self)
        :type node: colander.SchemaNode subclass instance
        :param cstruct: the value being validated
        :type cstruct: float
        :raise: colander.Invalid if cstruct value is bad

        """
        if not 0.0 <= cstruct < float('inf'):
            raise colander.Invalid(node, msg='Value = {0:f} must be non-negative and finite.'.format(cstruct))


class UnitIntervalFloat(colander.SchemaNode):

    """Colander float in the closed interval [0, 1]."""

    schema_type = colander.Float
    title = 'Unit Interval Float'

    def validator(self, node, cstruct):
        """Raise an exception if the node value (cstruct) is not in [0, 1]; NaN is rejected too.

        :param node: the node being validated (usually self)
        :type node: colander.SchemaNode subclass instance
        :param cstruct: the value being validated
        :type cstruct: float
        :raise: colander.Invalid if cstruct value is bad

        """
        if math.isnan(cstruct) or not 0.0 <= cstruct <= 1.0:
            raise colander.Invalid(node, msg='Value = {0:f} must be in [0, 1].'.format(cstruct))


class RandomSeed(colander.SchemaNode):

    """Colander integer seed that ``numpy.random.RandomState`` accepts, i.e., in [0, 2**32 - 1]."""

    schema_type = colander.Int
    title = 'Random Seed'

    def validator(self, node, cstruct):
        """Raise an exception if the node value (cstruct) is not a valid seed.

        :param node: the node being validated (usually self)
        :type node: colander.SchemaNode subclass instance
        :param cstruct: the value being validated
        :type cstruct: int
        :raise: colander.Invalid if cstruct value is bad

        """
        if not 0 <= cstruct <= MAX_RANDOM_SEED:
            raise colander.Invalid(node, msg='Value = {0:d} must be in [0, {1:d}].'.format(cstruct, MAX_RANDOM_SEED))


class DecimalInt(colander.Int):

    """A ``colander.Int`` that only deserializes plain decimal strings: an optional sign and ASCII digits.

    .. Note:: python's ``int()`` also accepts surrounding whitespace, underscores between digits and
      non-ASCII digits; all of these are rejected here.

    """

    DECIMAL_PATTERN = re.compile(r'[+-]?[0-9]+')

    def deserialize(self, node, cstruct):
        """Raise ``colander.Invalid`` if ``cstruct`` is a string that is not a plain decimal, else deserialize as ``colander.Int``."""
        if isinstance(cstruct, str) and self.DECIMAL_PATTERN.fullmatch(cstruct) is None:
            raise colander.Invalid(node, msg='"{0:s}" is not a decimal integer.'.format(cstruct))
        return super(DecimalInt, self).deserialize(node, cstruct)


class Token(colander.SchemaNode):

    """Colander string made of exactly one whitespace-free token (no leading, trailing or inner whitespace)."""

    schema_type = colander.String
    title = 'Token'

    def validator(self, node, cstruct):
        """Raise an exception if the node value (cstruct) contains whitespace.

        :param node: the node being validated (usually self)
        :type node: colander.SchemaNode subclass instance
        :param cstruct: the value being validated
        :type cstruct: str
        :raise: colander.Invalid if cstruct value is bad

        """
        if cstruct.split() != [cstruct]:
            raise colander.Invalid(node, msg='"{0:s}" has whitespace.'.format(cstruct))


class ExperimentRecord(colander.TupleSchema):

    """One row of an experiments TSV: ``(name, ordinal, url, tag)``.

    **Fields**

    :ivar name: (*str*) the experiment name, a single whitespace-free token
    :ivar ordinal: (*int*) 1-based position of the variant within its experiment
    :ivar url: (*str*) the url associated with this variant, not validated
    :ivar tag: (*str*) globally unique variant tag, a single whitespace-free token
      that must start with ``"<name>:"``

    **Example Record**

    .. sourcecode:: text

        signup_flow	1	/v1/signup	signup_flow:control

    """

    name = Token()
    ordinal = colander.SchemaNode(DecimalInt())
    url = colander.SchemaNode(colander.String(allow_empty=True))
    tag = Token()

    def validator(self, node, appstruct):
        """Raise an exception if the tag of the record (appstruct) is not prefixed by its experiment name.

        :param node: the node being validated (usually self)
        :type node: colander.SchemaNode subclass instance
        :param appstruct: the deserialized record
        :type appstruct: tuple of (str, int, str, str)
        :raise: colander.Invalid if the tag does not start with ``"<name>:"``

        """
        name, _, _, tag = appstruct
        prefix = name + TAG_SEPARATOR
        if not tag.startswith(prefix):
            raise colander.Invalid(node, msg='tag "{0:s}" must start with "{1:s}"'.format(tag, prefix))


class BanditEpsilonGreedyHyperparameterInfo(StrictMappingSchema):

    """The hyperparameter info needed for every epsilon-greedy bandit.

    **Optional fields**

    :ivar epsilon: (*0.0 <= float64 <= 1.0*) epsilon value for epsilon-greedy bandit (default: :const:`~bandito.bandit.constant.DEFAULT_EPSILON`)

    """

    epsilon = UnitIntervalFloat(missing=DEFAULT_EPSILON)


class BanditSoftmaxHyperparameterInfo(StrictMappingSchema):

    """The hyperparameter info needed for every softmax bandit.

    **Optional fields**

    :ivar tau: (*float64 >= 0.0*) temperature for softmax bandit (default: :const:`~bandito.bandit.constant.DEFAULT_TAU`)

    """

    tau = NonNegativeFloat(missing=DEFAULT_TAU)


#: Mapping from bandit subtypes (:const:`bandito.bandit.constant.BANDIT_SUBTYPES`) to
#: hyperparameter info schemas, e.g., :class:`bandito.schemas.BanditEpsilonGreedyHyperparameterInfo`.
BANDIT_SUBTYPES_TO_HYPERPARAMETER_INFO_SCHEMA_CLASSES = {
        BANDIT_SUBTYPE_EPSILON_GREEDY: BanditEpsilonGreedyHyperparameterInfo,
        BANDIT_SUBTYPE_SOFTMAX: BanditSoftmaxHyperparameterInfo,
        }


class BanditConfig(StrictMappingSchema):

    """A bandit configuration: which policy every trial runs, with which hyperparameters.

    ``hyperparameter_info`` is *not* validated by this schema since its fields depend on ``subtype``;
    validate it with the schema in :const:`BANDIT_SUBTYPES_TO_HYPERPARAMETER_INFO_SCHEMA_CLASSES`.

    **Optional fields**

    :ivar subtype: (*str*) subtype of the bandit policy (default: epsilon_greedy)
    :ivar hyperparameter_info: (*dict*) hyperparameters of the subtype (default: the subtype defaults)
    :ivar random_seed: (*0 <= int <= 2**32 - 1*) seed from which every bandit's random source is seeded, for reproducible runs (default: None)

    **Example Config**

    .. sourcecode:: javascript

        {
            "subtype": "softmax",
            "hyperparameter_info": {
                "tau": 0.2,
                },
            "random_seed": 1234,
        }

    """

    subtype = colander.SchemaNode(
            colander.String(),
            validator=colander.OneOf(BANDIT_SUBTYPES),
            missing=DEFAULT_BANDIT_SUBTYPE,
            )
    hyperparameter_info = colander.SchemaNode(
            colander.Mapping(unknown='preserve'),
            missing={},
            )
    random_seed = RandomSeed(missing=None)
