# -*- coding: utf-8 -*-
"""Bandit directory containing multi-armed bandit implementations in python.

**Files in this package**

* :mod:`bandito.bandit.constant`: bandit subtypes and default hyperparameters
* :mod:`bandito.bandit.data_containers`: :class:`~bandito.bandit.data_containers.ArmStatistics`
  container for the pulls, reward counts and running mean values of each arm
* :mod:`bandito.bandit.random_source`: injectable sources of uniform random numbers
* :mod:`bandito.bandit.utils`: winning arm and inverse-CDF sampling helpers
* :mod:`bandito.bandit.linkers`: linkers connecting bandit subtypes to classes, and bandit factories

**Interfaces**
:mod:`bandito.bandit.interfaces.bandit_interface`

**Bandit policies**
:mod:`bandito.bandit.epsilon_greedy`: epsilon-greedy policy
:mod:`bandito.bandit.softmax`: softmax (Boltzmann) policy

"""
