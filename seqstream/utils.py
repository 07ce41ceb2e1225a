"""Miscellaneous tools for internal use."""

import logging
import numbers
from collections.abc import Iterable, Iterator
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def isnumber(x):
    """Return wether `x` is a real number."""
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def is_iterable(x):
    """Return wether `x` supports iteration, without iterating it.

    Objects that only implement the legacy `__getitem__` protocol are
    accepted as well.
    """
    return isinstance(x, Iterable) or hasattr(type(x), '__getitem__')


def is_iterator(x):
    """Return wether `x` is a single-pass iterator."""
    return isinstance(x, Iterator)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger
