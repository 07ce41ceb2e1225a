"""Lazy producers and transformers used to build stream pipelines.

These are trusted helpers: arguments are assumed valid, checks happen in
:class:`seqstream.Stream`. Every function returns a fresh generator that
only pulls from its inputs when advanced.
"""

import itertools

from .errors import UnequalLengthError


def range_zero_to_n(stop):
    i = 0
    while i < stop:
        yield i
        i += 1


def range_start_stop_step(start, stop, step):
    """Yield values from `start` towards `stop`, excluding `stop`.

    The direction is given by comparing `start` and `stop`, only the
    magnitude of `step` is used.
    """
    step = abs(step)
    val = start
    if start < stop:
        while val < stop:
            yield val
            val += step
    else:
        while val > stop:
            yield val
            val -= step


def repeat(value):
    while True:
        yield value


def iterate(init, fn):
    value = init
    while True:
        yield value
        value = fn(value)


def skip(sequence, n):
    it = iter(sequence)
    for _ in range(n):
        if next(it, _exhausted) is _exhausted:
            return

    yield from it


def take(sequence, n):
    if n <= 0:
        return

    i = 0
    for value in sequence:
        yield value
        i += 1
        if i >= n:
            return


def take_while(sequence, predicate):
    for value in sequence:
        if not predicate(value):
            return
        yield value


def enumerate(sequence):
    i = 0
    for value in sequence:
        yield i, value
        i += 1


def map(sequence, fn):
    for value in sequence:
        yield fn(value)


def filter(sequence, predicate):
    for value in sequence:
        if predicate(value):
            yield value


def flatten(sequence):
    for inner in sequence:
        yield from inner


def chain(*sequences):
    for sequence in sequences:
        yield from sequence


def zip(*sequences):
    iterators = [iter(seq) for seq in sequences]
    if len(iterators) == 0:
        return

    while True:
        values = []
        for it in iterators:
            value = next(it, _exhausted)
            if value is _exhausted:
                return
            values.append(value)

        yield tuple(values)


def zip_equal(*sequences):
    for values in itertools.zip_longest(*sequences, fillvalue=_exhausted):
        if any(v is _exhausted for v in values):
            raise UnequalLengthError()
        yield values


def chunk(sequence, n):
    buffer = []
    for value in sequence:
        buffer.append(value)
        if len(buffer) == n:
            yield buffer
            buffer = []

    if len(buffer) > 0:
        yield buffer


def slide(sequence, n, step=1):
    buffer = []
    for value in sequence:
        buffer.append(value)
        if len(buffer) == n:
            yield list(buffer)
            del buffer[:step]


def scan(initial, sequence, fn):
    acc = initial
    yield acc
    for value in sequence:
        acc = fn(acc, value)
        yield acc


class _Exhausted(object):
    def __repr__(self):
        return "<exhausted>"


_exhausted = _Exhausted()
