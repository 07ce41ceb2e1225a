from random import random, randint

import pytest

from seqstream import Stream, ArgCountError, ArgTypeError, ArgValueError


class CountingSource(object):
    """Iterable that records how many values were pulled from it."""
    def __init__(self, values):
        self.values = values
        self.pulled = 0

    def __iter__(self):
        for v in self.values:
            self.pulled += 1
            yield v


def test_laziness():
    source = CountingSource(list(range(100)))
    s = Stream.from_iterable(source) \
        .map(lambda x: x + 1) \
        .filter(lambda x: x % 2 == 0) \
        .skip(2).take(10) \
        .take_while(lambda x: x < 1000) \
        .enumerate() \
        .chunk(2) \
        .slide(2) \
        .flatten() \
        .scan([], lambda acc, x: acc + [x]) \
        .chain([None])
    assert source.pulled == 0

    s.to_list()
    assert source.pulled > 0

    def explode():
        raise AssertionError("source should not be read")
        yield

    s = Stream.from_iterable(explode()).map(str).filter(bool).chunk(3)
    del s


def test_determinism():
    arr = [random() for _ in range(50)]
    s = Stream.from_iterable(arr).map(lambda x: x * 2).slide(3).map(sum)
    assert s.to_list() == s.to_list()


def test_map():
    arr = [randint(-100, 100) for _ in range(100)]

    def f(x):
        return x * 3

    def h(x):
        return str(x)

    assert Stream.from_iterable(arr).map(f).to_list() == [f(x) for x in arr]
    assert Stream.from_iterable(arr).map(f).map(h).to_list() \
        == Stream.from_iterable(arr).map(lambda x: h(f(x))).to_list()

    with pytest.raises(ArgCountError):
        Stream.range(10).map()
    with pytest.raises(ArgCountError):
        Stream.range(10).map(f, 5)
    with pytest.raises(ArgTypeError):
        Stream.range(10).map(5)


def test_map_call_count():
    def do(x):
        do.call_cnt += 1
        return x

    do.call_cnt = 0

    s = Stream.range(10).map(do)
    assert do.call_cnt == 0
    assert s.take(3).to_list() == [0, 1, 2]
    assert do.call_cnt == 3


def test_filter():
    numbers = [1, 2, 3, 4, 5, 6]
    assert Stream.from_iterable(numbers).filter(lambda x: x % 2).to_list() \
        == [1, 3, 5]
    assert Stream.range(1, 11) \
        .filter(lambda x: x % 2 == 0) \
        .map(lambda x: x * 2) \
        .to_list() == [4, 8, 12, 16, 20]

    with pytest.raises(ArgCountError):
        Stream.range(10).filter()
    with pytest.raises(ArgTypeError):
        Stream.range(10).filter("x")


def test_skip_take():
    arr = list(range(20))
    for n in range(len(arr) + 1):
        s = Stream.from_iterable(arr)
        assert s.take(n).to_list() + s.skip(n).to_list() == arr

    assert Stream.from_iterable(arr).skip(3).skip(2).to_list() == arr[5:]
    assert Stream.from_iterable(arr).take(30).to_list() == arr
    assert Stream.from_iterable(arr).skip(30).to_list() == []

    for op in ("skip", "take"):
        with pytest.raises(ArgCountError):
            getattr(Stream.range(10), op)()
        with pytest.raises(ArgCountError):
            getattr(Stream.range(10), op)(1, 2)
        with pytest.raises(ArgTypeError):
            getattr(Stream.range(10), op)("1")
        with pytest.raises(ArgTypeError):
            getattr(Stream.range(10), op)(1.5)
        with pytest.raises(ArgValueError):
            getattr(Stream.range(10), op)(-1)


def test_take_while():
    assert Stream.of(1, 2, 3, 10, 1).take_while(lambda x: x < 5).to_list() \
        == [1, 2, 3]
    assert Stream.empty().take_while(lambda x: True).to_list() == []

    with pytest.raises(ArgCountError):
        Stream.range(10).take_while()
    with pytest.raises(ArgTypeError):
        Stream.range(10).take_while(1)


def test_enumerate():
    assert Stream.of('a', 'b').enumerate().to_list() == [(0, 'a'), (1, 'b')]
    assert Stream.of('a', 'b').enumerate().to_dict() == {0: 'a', 1: 'b'}

    with pytest.raises(ArgCountError):
        Stream.range(10).enumerate(1)


def test_chain():
    assert Stream.of(1, 2).chain("ab").to_list() == [1, 2, 'a', 'b']
    assert Stream.of(1).chain([2]).chain(Stream.of(3)).to_list() == [1, 2, 3]

    with pytest.raises(ArgCountError):
        Stream.range(10).chain()
    with pytest.raises(ArgTypeError):
        Stream.range(10).chain(5)


def test_flatten():
    numbers = [[1, 2], [3, 4], [5, 6]]
    assert Stream.from_iterable(numbers).flatten().to_list() \
        == [1, 2, 3, 4, 5, 6]
    assert Stream.from_iterable(numbers).map(Stream.from_iterable) \
        .flatten().map(lambda x: x * 2).to_list() == [2, 4, 6, 8, 10, 12]

    with pytest.raises(ArgCountError):
        Stream.range(10).flatten(1)


def test_chunk():
    s = Stream.from_iterable([1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert s.chunk(3).to_list() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert s.chunk(2).to_list() == [[1, 2], [3, 4], [5, 6], [7, 8], [9]]
    assert s.chunk(1).count() == 9
    assert s.chunk(20).to_list() == [[1, 2, 3, 4, 5, 6, 7, 8, 9]]

    with pytest.raises(ArgCountError):
        s.chunk()
    with pytest.raises(ArgTypeError):
        s.chunk("3")
    with pytest.raises(ArgValueError):
        s.chunk(0)
    with pytest.raises(ArgValueError):
        s.chunk(-1)


def test_slide():
    s = Stream.from_iterable([1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert s.slide(2).to_list() == [[1, 2], [2, 3], [3, 4], [4, 5], [5, 6],
                                    [6, 7], [7, 8], [8, 9]]
    assert s.slide(4).count() == 6
    assert s.slide(9).to_list() == [[1, 2, 3, 4, 5, 6, 7, 8, 9]]
    assert s.slide(10).to_list() == []
    assert s.slide(3, 3).to_list() == s.chunk(3).to_list()

    assert s.slide(2, 3).to_list() == [[1, 2], [3, 4], [5, 6], [7, 8]]
    assert s.slide(2, 5).to_list() == s.chunk(2).take(4).to_list()

    with pytest.raises(ArgCountError):
        s.slide()
    with pytest.raises(ArgCountError):
        s.slide(1, 2, 3)
    with pytest.raises(ArgTypeError):
        s.slide(2.0)
    with pytest.raises(ArgValueError):
        s.slide(0)
    with pytest.raises(ArgValueError):
        s.slide(2, 0)


def test_scan():
    data = Stream.range(1, 6).scan(0, lambda a, b: a + b).to_list()
    assert data == [0, 1, 3, 6, 10, 15]
    assert data == [n * (n + 1) // 2 for n in range(6)]

    for size, arr in enumerate(Stream.range(5).scan([], lambda a, x: a + [x])):
        assert arr == list(range(size))

    assert Stream.empty().scan(7, lambda a, b: a + b).to_list() == [7]

    with pytest.raises(ArgCountError):
        Stream.range(10).scan(1)
    with pytest.raises(ArgTypeError):
        Stream.range(10).scan(1, 1)


def test_parent_unchanged():
    parent = Stream.of(1, 2, 3)
    child = parent.map(lambda x: -x)
    assert child.to_list() == [-1, -2, -3]
    assert parent.to_list() == [1, 2, 3]
    assert child.to_list() == [-1, -2, -3]
