# -*- coding: utf-8 -*-
r"""Testing code for bandito.

Testing is done via pytest; test modules are named ``*_test.py``.

This package includes:

* Tests for the bandit policies: :mod:`bandito.tests.bandit`
* Tests for experiments, the parser and trials: :mod:`bandito.tests.experiment`
* Tests for the colander schemas: :mod:`bandito.tests.schemas_test`
* Tests for the timing context: :mod:`bandito.tests.timing_test`

"""
