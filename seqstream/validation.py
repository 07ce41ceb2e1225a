"""Call-time argument checks shared by the :class:`Stream` operations."""

import functools
import inspect

from .errors import ArgCountError, ArgTypeError, ArgValueError
from .utils import isint, isnumber, is_iterable


def arity(func):
    """Decorate a method to check the number of arguments it receives.

    The first parameter (`self` or `cls`) is not counted. Calls that do not
    bind to the signature of `func` raise :class:`ArgCountError` before the
    body of `func` runs.

    Args:
        func (Callable): a method or a function wrapped by `classmethod`.

    Return:
        Callable: the checked method.
    """
    signature = inspect.signature(func)
    params = list(signature.parameters.values())[1:]
    positional = [p for p in params
                  if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    lo = sum(1 for p in positional if p.default is p.empty)
    if any(p.kind == p.VAR_POSITIONAL for p in params):
        hi = None
    else:
        hi = len(positional)

    @functools.wraps(func)
    def checked(*args, **kwargs):
        try:
            signature.bind(*args, **kwargs)
        except TypeError:
            raise ArgCountError(
                func.__name__, (lo, hi), len(args) - 1 + len(kwargs)) from None

        return func(*args, **kwargs)

    checked.expected = (lo, hi)
    return checked


def check_callable(x, name, function):
    if not callable(x):
        raise ArgTypeError(
            "{} must be callable, not {}".format(name, type(x).__name__),
            function)


def check_optional_callable(x, name, function):
    if x is not None:
        check_callable(x, name, function)


def check_bool(x, name, function):
    if not isinstance(x, bool):
        raise ArgTypeError(
            "{} must be a bool, not {}".format(name, type(x).__name__),
            function)


def check_str(x, name, function):
    if not isinstance(x, str):
        raise ArgTypeError(
            "{} must be a str, not {}".format(name, type(x).__name__),
            function)


def check_number(x, name, function):
    if not isnumber(x):
        raise ArgTypeError(
            "{} must be a number, not {}".format(name, type(x).__name__),
            function)


def check_int(x, name, function, minimum=None):
    """Check that `x` is an integer, optionally no smaller than `minimum`."""
    if not isint(x):
        raise ArgTypeError(
            "{} must be an integer, not {}".format(name, type(x).__name__),
            function)

    if minimum is not None and x < minimum:
        raise ArgValueError(
            "{} must be greater than or equal to {}, got {}".format(
                name, minimum, x),
            function)


def check_iterable(x, name, function):
    if not is_iterable(x):
        raise ArgTypeError(
            "{} must be iterable, not {}".format(name, type(x).__name__),
            function)


def check_instance(x, cls, name, function):
    if not isinstance(x, cls):
        raise ArgTypeError(
            "{} must be a {}, not {}".format(
                name, cls.__name__, type(x).__name__),
            function)
