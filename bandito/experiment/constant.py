# -*- coding: utf-8 -*-
"""Constants describing the experiments TSV format."""
#: Number of fields of a record in an experiments TSV: name, ordinal, url, tag.
EXPERIMENT_RECORD_NUM_FIELDS = 4
#: Field delimiter of the experiments TSV.
EXPERIMENT_RECORD_DELIMITER = '\t'
#: Separator between the experiment name and the variant suffix of a tag.
TAG_SEPARATOR = ':'
