# -*- coding: utf-8 -*-
"""Parse experiment definitions (tab-separated records) into validated :class:`~bandito.experiment.data_containers.Experiment` objects.

Each record has 4 fields and there is no header:

.. sourcecode:: text

    experiment_name	ordinal	url	tag

For example:

.. sourcecode:: text

    signup_flow	1	/v1/signup	signup_flow:control
    signup_flow	2	/v2/signup	signup_flow:variant_b

Parsing is all-or-nothing: the first bad record (or experiment) raises, and no experiments are returned,
since routing traffic against a partially valid experiment table is unsafe.

"""
import collections
import csv
import io
import logging
import pprint

import colander

from bandito.exceptions import MalformedRecordError, NonContiguousOrdinalsError
from bandito.experiment.constant import EXPERIMENT_RECORD_DELIMITER
from bandito.experiment.data_containers import Experiment, Variant
from bandito.schemas import ExperimentRecord


def _parse_numbered_records(numbered_records):
    """Parse ``(line_number, record)`` pairs; see :func:`parse_experiment_records`."""
    schema = ExperimentRecord()
    variants_by_name = collections.defaultdict(list)
    tags_to_line_numbers = {}

    for line_number, record in numbered_records:
        try:
            name, ordinal, url, tag = schema.deserialize(record)
        except colander.Invalid as exception:
            raise MalformedRecordError(
                'invalid record on line {0:d}: {1}\n{2:s}'.format(line_number, record, pprint.pformat(exception.asdict())),
                line_number=line_number,
            )

        if tag in tags_to_line_numbers:
            raise MalformedRecordError(
                'duplicate tag {0:s} on line {1:d}, first seen on line {2:d}'.format(tag, line_number, tags_to_line_numbers[tag]),
                line_number=line_number,
            )
        tags_to_line_numbers[tag] = line_number

        variants_by_name[name].append(Variant(ordinal=ordinal, url=url, tag=tag))

    experiments = {}
    for name, variants in variants_by_name.items():
        variants.sort(key=lambda variant: variant.ordinal)
        # Fail if ordinals are non-contiguous or do not start with 1
        for expected_ordinal, variant in enumerate(variants, start=1):
            if variant.ordinal != expected_ordinal:
                raise NonContiguousOrdinalsError(name, variant.ordinal)

        experiments[name] = Experiment(name, variants)

    if "log" not in _parse_numbered_records.__dict__:
        _parse_numbered_records.log = logging.getLogger(__name__)
    _parse_numbered_records.log.debug("parsed %d experiments from %d records", len(experiments), len(tags_to_line_numbers))
    return experiments


def parse_experiment_records(records):
    """Convert records of ``(name, ordinal, url, tag)`` fields into a dict of validated experiments.

    Every record must have exactly 4 fields, an integer ordinal, and a name and a tag that are single
    whitespace-free tokens, the tag starting with ``"<name>:"`` (see :class:`bandito.schemas.ExperimentRecord`).
    Tags are unique across all records. After grouping records by name and sorting by ordinal,
    the ordinals of every experiment must be exactly ``1..n``.

    :param records: the experiment records
    :type records: iterable of sequences of 4 str
    :return: experiments keyed by name
    :rtype: dict of (str, :class:`~bandito.experiment.data_containers.Experiment`) pairs
    :raise: MalformedRecordError when a record is invalid
    :raise: NonContiguousOrdinalsError when the ordinals of an experiment have gaps or duplicates

    """
    return _parse_numbered_records(enumerate(records, start=1))


def parse_experiments(experiments_tsv):
    """Split tab-separated text into records and parse them; see :func:`parse_experiment_records`.

    Blank lines are skipped. Reading the text from a file is left to the caller.

    :param experiments_tsv: the experiment definitions
    :type experiments_tsv: str, or an iterable of lines
    :return: experiments keyed by name
    :rtype: dict of (str, :class:`~bandito.experiment.data_containers.Experiment`) pairs
    :raise: MalformedRecordError when the text is not valid TSV or a record is invalid
    :raise: NonContiguousOrdinalsError when the ordinals of an experiment have gaps or duplicates

    """
    if isinstance(experiments_tsv, str):
        experiments_tsv = io.StringIO(experiments_tsv, newline='')

    reader = csv.reader(experiments_tsv, delimiter=EXPERIMENT_RECORD_DELIMITER, strict=True)
    numbered_records = []
    try:
        for record in reader:
            if record:
                numbered_records.append((reader.line_num, record))
    except csv.Error as exception:
        raise MalformedRecordError(
            'could not read tsv on line {0:d}: {1}'.format(reader.line_num, exception),
            line_number=reader.line_num,
        )

    return _parse_numbered_records(numbered_records)
