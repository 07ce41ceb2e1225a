import math
import operator

from . import generators
from .errors import ArgTypeError, ArgValueError, EmptyStreamError, \
    error_config, format_stack, guard
from .sequencer import Deferred, Sequencer
from .utils import get_logger, is_iterator
from .validation import arity, check_bool, check_callable, check_instance, \
    check_int, check_iterable, check_number, check_optional_callable, \
    check_str


logger = get_logger(__name__)

_missing = object()


def _guarded(fn, function):
    # skip this helper, the operation and its arity wrapper
    return guard(fn, function, format_stack(3))


class Stream(object):
    """A lazy sequence of values with chainable transformations.

    Streams are created with the factory class methods
    (:meth:`from_iterable`, :meth:`of`, :meth:`range`, ...), transformed
    with methods that return new streams (:meth:`map`, :meth:`filter`,
    :meth:`take`, ...) and consumed by terminal methods that produce a
    value (:meth:`to_list`, :meth:`sum`, :meth:`find_first`, ...).

    Nothing is computed before a terminal method or a plain `for` loop
    pulls values, and each value flows through the whole pipeline before
    the next one is pulled. Transforms never modify the stream they are
    called on.

    A stream can be consumed more than once only when its source supports
    several independent iterations (a list does, a generator does not).

    Arguments of every method are checked when the method is called,
    invalid calls raise :class:`ArgCountError`, :class:`ArgTypeError` or
    :class:`ArgValueError` immediately.

    Example:

        >>> Stream.range(1, 11) \\
        ...     .filter(lambda x: x % 2 == 0) \\
        ...     .map(lambda x: x * 2) \\
        ...     .to_list()
        [4, 8, 12, 16, 20]

    .. warning::

        Terminal operations that need every element (:meth:`count`,
        :meth:`to_list`, :meth:`sum`, :meth:`find_last`...) never return
        on infinite streams such as :meth:`repeat` or :meth:`iterate`,
        bound them with :meth:`take` or :meth:`take_while` first.
    """
    def __init__(self, sequencer):
        self._sequencer = sequencer

    def __iter__(self):
        return self._sequencer.iterator()

    def _derive(self, func, *args):
        return self.__class__(
            Sequencer(Deferred(func, self._sequencer, *args)))

    # Factories ---------------------------------------------------------------

    @classmethod
    @arity
    def from_iterable(cls, iterable):
        """Create a stream over the values of an iterable.

        Example:

            >>> Stream.from_iterable("abc").to_list()
            ['a', 'b', 'c']
        """
        check_iterable(iterable, "iterable", "from_iterable")
        if is_iterator(iterable):
            logger.debug(
                "Stream.from_iterable(): %s is a single-pass iterator, "
                "the stream can only be consumed once",
                type(iterable).__name__)

        return cls(Sequencer(iterable))

    @classmethod
    @arity
    def of(cls, *values):
        """Create a stream over the given values."""
        return cls(Sequencer(values))

    @classmethod
    @arity
    def range(cls, start, stop=_missing, step=1):
        """Stream equivalent of Python built-in :class:`python:range`.

        With a single argument, count from 0 up to `start` (excluded).
        Otherwise count from `start` towards `stop` (excluded): the
        direction is decided by which bound is larger and only the
        magnitude of `step` is used.

        Args:
            start (Real): first value, or upper bound if `stop` is omitted.
            stop (Real): excluded bound.
            step (Real): non-zero, non-NaN increment (default 1).

        Example:

            >>> Stream.range(0, 10, 2).to_list()
            [0, 2, 4, 6, 8]
            >>> Stream.range(5, 0, -1).to_list()
            [5, 4, 3, 2, 1]
        """
        check_number(start, "start", "range")
        if stop is not _missing:
            check_number(stop, "stop", "range")
        check_number(step, "step", "range")
        if step == 0:
            raise ArgValueError("step must not be zero", "range")
        if math.isnan(step):
            raise ArgValueError("step must not be NaN", "range")

        if stop is _missing:
            if step == 1:
                return cls(Sequencer(Deferred(
                    generators.range_zero_to_n, start)))
            start, stop = 0, start

        return cls(Sequencer(Deferred(
            generators.range_start_stop_step, start, stop, step)))

    @classmethod
    @arity
    def repeat(cls, value):
        """Create an infinite stream repeating `value`."""
        return cls(Sequencer(Deferred(generators.repeat, value)))

    @classmethod
    @arity
    def iterate(cls, init, fn):
        """Create the infinite stream `init, fn(init), fn(fn(init)), ...`.

        Example:

            >>> Stream.iterate(1, lambda x: x * 2).take(5).to_list()
            [1, 2, 4, 8, 16]
        """
        check_callable(fn, "fn", "iterate")
        fn = _guarded(fn, "iterate")
        return cls(Sequencer(Deferred(generators.iterate, init, fn)))

    @classmethod
    @arity
    def empty(cls):
        return cls(Sequencer(()))

    @classmethod
    @arity
    def zip(cls, *iterables):
        """Create a stream of tuples pairing the values of the iterables.

        The stream stops as soon as any of the iterables is exhausted.

        Example:

            >>> Stream.zip([1, 2, 3], "abcd").to_list()
            [(1, 'a'), (2, 'b'), (3, 'c')]
        """
        for i, iterable in enumerate(iterables):
            check_iterable(iterable, "iterables[{}]".format(i), "zip")

        return cls(Sequencer(Deferred(generators.zip, *iterables)))

    @classmethod
    @arity
    def zip_equal(cls, *iterables):
        """Like :meth:`zip` but all iterables must have the same length.

        A length mismatch raises :class:`UnequalLengthError` when the
        shortest iterable runs out.
        """
        for i, iterable in enumerate(iterables):
            check_iterable(iterable, "iterables[{}]".format(i), "zip_equal")

        return cls(Sequencer(Deferred(generators.zip_equal, *iterables)))

    # Transforms --------------------------------------------------------------

    @arity
    def map(self, fn):
        """Return a stream of `fn(x)` for every value `x`."""
        check_callable(fn, "fn", "map")
        return self._derive(generators.map, _guarded(fn, "map"))

    @arity
    def filter(self, predicate):
        """Return a stream of the values for which `predicate` is true."""
        check_callable(predicate, "predicate", "filter")
        return self._derive(generators.filter, _guarded(predicate, "filter"))

    @arity
    def skip(self, n):
        """Return a stream without the first `n` values."""
        check_int(n, "n", "skip", minimum=0)
        return self._derive(generators.skip, n)

    @arity
    def take(self, n):
        """Return a stream of at most `n` values."""
        check_int(n, "n", "take", minimum=0)
        return self._derive(generators.take, n)

    @arity
    def take_while(self, predicate):
        """Return a stream of the values preceding the first one for which
        `predicate` is false.

        Example:

            >>> Stream.of(1, 2, 5, 1).take_while(lambda x: x < 3).to_list()
            [1, 2]
        """
        check_callable(predicate, "predicate", "take_while")
        return self._derive(
            generators.take_while, _guarded(predicate, "take_while"))

    @arity
    def enumerate(self):
        """Return a stream of `(index, value)` pairs."""
        return self._derive(generators.enumerate)

    @arity
    def chain(self, iterable):
        """Return a stream of these values followed by those of `iterable`."""
        check_iterable(iterable, "iterable", "chain")
        return self._derive(generators.chain, iterable)

    @arity
    def flatten(self):
        """Return a stream of the values contained in each value.

        Only one level of nesting is removed.

        Example:

            >>> Stream.of([1, 2], (3,), Stream.of(4, 5)).flatten().to_list()
            [1, 2, 3, 4, 5]
        """
        return self._derive(generators.flatten)

    @arity
    def chunk(self, n):
        """Return a stream of lists of `n` consecutive values.

        The last list contains the remaining values and may be shorter.

        Example:

            >>> Stream.range(7).chunk(3).to_list()
            [[0, 1, 2], [3, 4, 5], [6]]
        """
        check_int(n, "n", "chunk", minimum=1)
        return self._derive(generators.chunk, n)

    @arity
    def slide(self, n, step=1):
        """Return a stream of sliding windows over the values.

        Args:
            n (int): number of values in a window.
            step (int): offset between the starts of two successive
                windows (default 1).

        Return:
            Stream: a stream of lists of exactly `n` values, empty if there
            are fewer than `n` values.

        Example:

            >>> Stream.range(5).slide(3).to_list()
            [[0, 1, 2], [1, 2, 3], [2, 3, 4]]
            >>> Stream.range(7).slide(2, 3).to_list()
            [[0, 1], [2, 3], [4, 5]]
        """
        check_int(n, "n", "slide", minimum=1)
        check_int(step, "step", "slide", minimum=1)
        return self._derive(generators.slide, n, step)

    @arity
    def scan(self, initial, fn):
        """Return the successive values of a fold, starting with `initial`.

        Example:

            >>> Stream.range(1, 6).scan(0, lambda acc, x: acc + x).to_list()
            [0, 1, 3, 6, 10, 15]
        """
        check_callable(fn, "fn", "scan")
        return self.__class__(Sequencer(Deferred(
            generators.scan, initial, self._sequencer, _guarded(fn, "scan"))))

    # Collectors --------------------------------------------------------------

    @arity
    def to_list(self):
        return list(self._sequencer)

    @arity
    def to_dict(self):
        """Collect a stream of `(key, value)` pairs into a dictionary.

        Later values overwrite earlier ones for duplicate keys, keys keep
        their first insertion order.

        Raises:
            ArgTypeError: if a value is not a tuple or list of length 2.
        """
        result = {}
        for item in self._sequencer:
            if not isinstance(item, (tuple, list)) or len(item) != 2:
                raise ArgTypeError(
                    "requires a stream of key-value pairs, got {!r}".format(
                        item),
                    "to_dict")

            key, value = item
            result[key] = value

        return result

    @arity
    def to_set(self):
        return set(self._sequencer)

    @arity
    def join(self, separator=""):
        """Concatenate a stream of strings, inserting `separator` in between.

        Example:

            >>> Stream.of("a", "b", "c").join(", ")
            'a, b, c'
        """
        check_str(separator, "separator", "join")
        parts = []
        for value in self._sequencer:
            if not isinstance(value, str):
                raise ArgTypeError(
                    "requires a stream of str, got {}".format(
                        type(value).__name__),
                    "join")
            parts.append(value)

        return separator.join(parts)

    # Reductions --------------------------------------------------------------

    def _fold(self, initial, fn):
        acc = initial
        for value in self._sequencer:
            acc = fn(acc, value)

        return acc

    def _reduce(self, fn, function):
        iterator = self._sequencer.iterator()
        first = next(iterator, _missing)
        if first is _missing:
            if error_config.empty == 'none':
                return None
            raise EmptyStreamError(function)

        acc = first
        for value in iterator:
            acc = fn(acc, value)

        return acc

    @arity
    def fold(self, initial, fn):
        """Combine the values from left to right starting with `initial`.

        Return `initial` for an empty stream.

        Example:

            >>> Stream.range(5).fold(10, lambda acc, x: acc + x)
            20
        """
        check_callable(fn, "fn", "fold")
        return self._fold(initial, _guarded(fn, "fold"))

    @arity
    def reduce(self, fn):
        """Combine the values from left to right starting with the first.

        Raises:
            EmptyStreamError: if the stream is empty, unless
                :func:`seterr` was called with `empty='none'` in which case
                `None` is returned.
        """
        check_callable(fn, "fn", "reduce")
        return self._reduce(_guarded(fn, "reduce"), "reduce")

    @arity
    def for_each(self, fn):
        """Call `fn` on every value."""
        check_callable(fn, "fn", "for_each")
        fn = _guarded(fn, "for_each")
        for value in self._sequencer:
            fn(value)

    @arity
    def sum(self):
        return self._fold(0, operator.add)

    @arity
    def product(self):
        return self._fold(1, operator.mul)

    @arity
    def min(self):
        """Return the smallest value, empty streams behave as in :meth:`reduce`."""
        return self._reduce(min, "min")

    @arity
    def max(self):
        """Return the largest value, empty streams behave as in :meth:`reduce`."""
        return self._reduce(max, "max")

    @arity
    def count(self):
        return self._fold(0, lambda acc, _: acc + 1)

    @arity
    def all(self):
        return all(self._sequencer)

    @arity
    def any(self):
        return any(self._sequencer)

    @arity
    def all_map(self, predicate):
        """Return whether `predicate` holds for every value.

        Stops at the first value that fails the predicate.
        """
        check_callable(predicate, "predicate", "all_map")
        predicate = _guarded(predicate, "all_map")
        return all(predicate(value) for value in self._sequencer)

    @arity
    def any_map(self, predicate):
        """Return whether `predicate` holds for at least one value.

        Stops at the first value that satisfies the predicate.
        """
        check_callable(predicate, "predicate", "any_map")
        predicate = _guarded(predicate, "any_map")
        return any(predicate(value) for value in self._sequencer)

    @arity
    def find_first(self, predicate):
        """Return the first value satisfying `predicate`, or `None`."""
        check_callable(predicate, "predicate", "find_first")
        predicate = _guarded(predicate, "find_first")
        for value in self._sequencer:
            if predicate(value):
                return value

        return None

    @arity
    def find_last(self, predicate):
        """Return the last value satisfying `predicate`, or `None`.

        The whole stream is always consumed.
        """
        check_callable(predicate, "predicate", "find_last")
        predicate = _guarded(predicate, "find_last")
        result = None
        for value in self._sequencer:
            if predicate(value):
                result = value

        return result

    # Comparisons -------------------------------------------------------------

    def _compare(self, other):
        iterator1 = self._sequencer.iterator()
        iterator2 = other._sequencer.iterator()
        while True:
            x1 = next(iterator1, _missing)
            x2 = next(iterator2, _missing)
            if x1 is _missing and x2 is _missing:
                return 0
            if x1 is _missing:
                return -1
            if x2 is _missing:
                return 1
            if x1 < x2:
                return -1
            if x1 > x2:
                return 1

    @arity
    def compare(self, other):
        """Compare two streams lexicographically.

        Values are pulled in pairs until they differ or a stream runs out,
        a stream that ends first is the smaller one.

        Return:
            int: -1, 0 or 1 if this stream is respectively smaller, equal
            or greater than `other`.

        Example:

            >>> Stream.of(1, 2, 3).compare(Stream.of(1, 2, 4))
            -1
            >>> Stream.of(1, 2).compare(Stream.of(1, 2))
            0
            >>> Stream.of(1, 2, 3).compare(Stream.of(1, 2))
            1
        """
        check_instance(other, Stream, "other", "compare")
        return self._compare(other)

    @arity
    def compare_by(self, other, key):
        """Compare two streams lexicographically by `key(value)`."""
        check_instance(other, Stream, "other", "compare_by")
        check_callable(key, "key", "compare_by")
        key = _guarded(key, "compare_by")
        return self._derive(generators.map, key)._compare(
            other._derive(generators.map, key))

    @arity
    def eq(self, other):
        check_instance(other, Stream, "other", "eq")
        return self._compare(other) == 0

    @arity
    def eq_by(self, other, key):
        """Return whether both streams are equal when compared by `key`."""
        check_instance(other, Stream, "other", "eq_by")
        check_callable(key, "key", "eq_by")
        key = _guarded(key, "eq_by")
        return self._derive(generators.map, key)._compare(
            other._derive(generators.map, key)) == 0

    @arity
    def ne(self, other):
        check_instance(other, Stream, "other", "ne")
        return self._compare(other) != 0

    @arity
    def lt(self, other):
        check_instance(other, Stream, "other", "lt")
        return self._compare(other) < 0

    @arity
    def le(self, other):
        check_instance(other, Stream, "other", "le")
        return self._compare(other) <= 0

    @arity
    def gt(self, other):
        check_instance(other, Stream, "other", "gt")
        return self._compare(other) > 0

    @arity
    def ge(self, other):
        check_instance(other, Stream, "other", "ge")
        return self._compare(other) >= 0

    @arity
    def is_sorted(self, reverse=False, key=None):
        """Return whether values are in ascending order.

        Equal neighbours do not break the order.

        Args:
            reverse (bool): check for descending order instead.
            key (Optional[Callable]): compare `key(value)` instead of the
                values themselves.

        Example:

            >>> Stream.of(1, 2, 2, 5).is_sorted()
            True
            >>> Stream.of("ccc", "bb", "a").is_sorted(True, key=len)
            True
        """
        check_bool(reverse, "reverse", "is_sorted")
        check_optional_callable(key, "key", "is_sorted")
        if key is not None:
            return self._derive(
                generators.map, _guarded(key, "is_sorted")).is_sorted(reverse)

        iterator = self._sequencer.iterator()
        prev = next(iterator, _missing)
        if prev is _missing:
            return True

        for value in iterator:
            if (prev < value) if reverse else (prev > value):
                return False
            prev = value

        return True

    @arity
    def is_sorted_by(self, cmp, reverse=False):
        """Return whether values are ordered according to a comparator.

        Args:
            cmp (Callable[[Any, Any], Real]): returns a negative number,
                zero or a positive number when its first argument is
                respectively smaller, equal or greater than the second.
            reverse (bool): check for descending order instead.
        """
        check_callable(cmp, "cmp", "is_sorted_by")
        check_bool(reverse, "reverse", "is_sorted_by")
        cmp = _guarded(cmp, "is_sorted_by")

        iterator = self._sequencer.iterator()
        prev = next(iterator, _missing)
        if prev is _missing:
            return True

        for value in iterator:
            order = cmp(prev, value)
            if (order < 0) if reverse else (order > 0):
                return False
            prev = value

        return True
