# -*- coding: utf-8 -*-
"""Context manager that logs how long building or reloading a component took."""
import contextlib
import logging
import time


@contextlib.contextmanager
def timing_context(name, level=logging.INFO):
    """Log the wall-clock runtime of the body of the with-statement under ``name``.

    The time is logged even when the body raises, so failed registry builds are timed too.

    :param name: name to log with this timing information
    :type name: str
    :param level: logging level of the timing message (default: ``logging.INFO``)
    :type level: int

    """
    if "log" not in timing_context.__dict__:
        timing_context.log = logging.getLogger(__name__)

    start_time = time.time()
    try:
        yield
    finally:
        timing_context.log.log(level, "%s: %f secs", name, time.time() - start_time)
