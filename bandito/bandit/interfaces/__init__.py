# -*- coding: utf-8 -*-
"""Interfaces for the bandit package.

**Files in this package**

* :mod:`bandito.bandit.interfaces.bandit_interface`: :class:`~bandito.bandit.interfaces.bandit_interface.BanditInterface`,
  the contract shared by every bandit policy

"""
