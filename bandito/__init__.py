# -*- coding: utf-8 -*-
"""Bandit arm selection for routing traffic among the variants of A/B/n experiments.

**Packages**

* :mod:`bandito.bandit`: bandit policies (epsilon-greedy, softmax) and their configuration
* :mod:`bandito.experiment`: experiments, variants, the experiment parser and the trials registry

"""
#: Following the versioning system at http://semver.org/
#: MAJOR: incremented for incompatible API changes
MAJOR = 0
#: MINOR: incremented for adding functionality in a backwards-compatible manner
MINOR = 1
#: PATCH: incremented for backward-compatible bug fixes and minor capability improvements
PATCH = 0
#: Latest release version of bandito
__version__ = "{0:d}.{1:d}.{2:d}".format(MAJOR, MINOR, PATCH)
