# -*- coding: utf-8 -*-
"""Experiments, their variants, and the trials binding a bandit to each experiment.

**Files in this package**

* :mod:`bandito.experiment.constant`: constants of the experiments TSV format
* :mod:`bandito.experiment.data_containers`: :class:`~bandito.experiment.data_containers.Variant`
  and :class:`~bandito.experiment.data_containers.Experiment` containers
* :mod:`bandito.experiment.parser`: parse and validate experiment records
* :mod:`bandito.experiment.trial`: :class:`~bandito.experiment.trial.Trial` and the
  :class:`~bandito.experiment.trial.Trials` registry

"""
