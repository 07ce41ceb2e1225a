import inspect
import threading

from .utils import get_logger


logger = get_logger(__name__)


class StreamError(Exception):
    """Base class for errors raised by :class:`seqstream.Stream` operations.

    Args:
        message (str): description of the problem.
        function (str): name of the operation that failed.
    """
    def __init__(self, message, function):
        super().__init__("Stream.{}(): {}".format(function, message))
        self.function = function


class ArgCountError(StreamError, TypeError):
    """Raised when an operation receives too few or too many arguments.

    Attributes:
        expected (Tuple[int, Optional[int]]): minimum and maximum number of
            arguments, the maximum is `None` for variadic operations.
        received (int): number of arguments actually passed.
    """
    def __init__(self, function, expected, received):
        lo, hi = expected
        if hi is None:
            wanted = "at least {}".format(lo)
        elif lo == hi:
            wanted = str(lo)
        else:
            wanted = "{} to {}".format(lo, hi)

        super().__init__(
            "invalid number of arguments; expected {} but received {}".format(
                wanted, received),
            function)
        self.expected = expected
        self.received = received


class ArgTypeError(StreamError, TypeError):
    """Raised when an argument or an element has the wrong type."""


class ArgValueError(StreamError, ValueError):
    """Raised when an argument has the right type but an invalid value."""


class EmptyStreamError(StreamError, ValueError):
    """Raised when reducing an empty stream without an initial value."""
    def __init__(self, function="reduce"):
        super().__init__("cannot reduce an empty stream", function)


class UnequalLengthError(StreamError, ValueError):
    """Raised by :meth:`Stream.zip_equal` when inputs differ in length."""
    def __init__(self, function="zip_equal"):
        super().__init__("iterables are not of equal length", function)


class EvaluationError(Exception):
    """Raised when user code fails while a stream is being evaluated."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None, empty=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user code triggered by SeqStream
            are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through SeqStream code,
              might facilitate step-by-step debugging.
            - `None` leave unchanged.
        empty (str): what reductions without initial value
            (:meth:`Stream.reduce`, :meth:`Stream.min`, :meth:`Stream.max`)
            do on an empty stream:

            - `'raise'`: raise :class:`EmptyStreamError`.
            - `'none'`: return `None`.
            - `None` leave unchanged.

    Returns:
        Tuple[str, str]: The current `evaluation` and `empty` settings.

    Example:

        >>> seqstream.seterr(empty='none')
        ('wrap', 'none')
        >>> print(seqstream.Stream.empty().max())
        None
        >>> seqstream.seterr(empty='raise')
        ('wrap', 'raise')
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    if empty in ('raise', 'none'):
        error_config.empty = empty
    elif empty is not None:
        raise ValueError("empty must be 'raise' or 'none'")

    if evaluation is not None or empty is not None:
        logger.debug("error settings changed to evaluation=%s, empty=%s",
                     evaluation, empty)

    return ("passthrough" if error_config.passthrough else 'wrap',
            error_config.empty)


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False
        self.empty = 'raise'


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    if not lines:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out


def guard(func, function, stack):
    """Wrap a user callable so that its failures raise EvaluationError.

    Args:
        func (Callable): user supplied function.
        function (str): name of the operation that calls `func`.
        stack (str): formatted stack where the operation was requested.

    Return:
        Callable: `func` with exceptions wrapped according to
        :func:`seterr`.
    """
    def guarded(*args):
        try:
            return func(*args)

        except Exception as error:
            if error_config.passthrough or isinstance(error, EvaluationError):
                raise
            else:
                msg = "Failed to evaluate Stream.{}() created at:\n{}".format(
                    function, stack)
                raise EvaluationError(msg) from error

    return guarded
