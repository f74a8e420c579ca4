# -*- coding: utf-8 -*-
r"""Testing code for the (Python) bandit library.

**Files in this package**

* :mod:`bandito.tests.bandit.bandit_test_case`: base test case for bandit tests, with a scripted random source
* :mod:`bandito.tests.bandit.data_containers_test`: tests for :mod:`bandito.bandit.data_containers`
* :mod:`bandito.tests.bandit.epsilon_greedy_test`: tests for :class:`bandito.bandit.epsilon_greedy.EpsilonGreedy`
* :mod:`bandito.tests.bandit.linkers_test`: tests for :mod:`bandito.bandit.linkers`
* :mod:`bandito.tests.bandit.random_source_test`: tests for :mod:`bandito.bandit.random_source`
* :mod:`bandito.tests.bandit.softmax_test`: tests for :class:`bandito.bandit.softmax.Softmax`
* :mod:`bandito.tests.bandit.utils_test`: tests for :mod:`bandito.bandit.utils`

"""
