# -*- coding: utf-8 -*-
r"""Testing code for experiments, the experiment parser and trials.

**Files in this package**

* :mod:`bandito.tests.experiment.experiment_test_case`: base test case with experiment definitions
* :mod:`bandito.tests.experiment.data_containers_test`: tests for :mod:`bandito.experiment.data_containers`
* :mod:`bandito.tests.experiment.parser_test`: tests for :mod:`bandito.experiment.parser`
* :mod:`bandito.tests.experiment.trial_test`: tests for :mod:`bandito.experiment.trial`

"""
