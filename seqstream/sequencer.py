class Sequencer(object):
    """Reusable iteration unit over a source iterable.

    The source is only referenced, never copied nor validated. Whether a
    sequencer can be iterated several times depends on its source: a list
    or a :class:`Deferred` pipeline over a list can, a generator cannot.

    Args:
        source (Iterable): the wrapped iterable.
    """
    def __init__(self, source):
        self.source = source

    def __iter__(self):
        return self.iterator()

    def iterator(self):
        """Return a fresh iterator over the source."""
        return iter(self.source)


class Deferred(object):
    """Iterable that calls a generator function anew on every iteration.

    Example:

        >>> from seqstream.generators import take
        >>> d = Deferred(take, [1, 2, 3], 2)
        >>> list(d), list(d)
        ([1, 2], [1, 2])
    """
    def __init__(self, func, *args):
        self.func = func
        self.args = args

    def __iter__(self):
        return iter(self.func(*self.args))
