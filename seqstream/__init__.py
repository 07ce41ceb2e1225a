"""
A python library to build lazy pipelines over iterables.

The seqstream package provides the :class:`Stream` type, a fluent wrapper
around any iterable (lists, strings, generators, arrays...) that chains
transformations such as `map`, `filter`, `take`, `chunk` or `slide`
without materializing intermediate results.

Values are only computed when a terminal operation (`to_list`, `sum`,
`find_first`...) or a `for` loop pulls them, one at a time, through the
whole pipeline. All operations check their arguments when called so that
mistakes surface at the call site rather than during later iteration.
"""

from .errors import (
    ArgCountError,
    ArgTypeError,
    ArgValueError,
    EmptyStreamError,
    EvaluationError,
    StreamError,
    UnequalLengthError,
    seterr,
)
from .sequencer import Sequencer
from .stream import Stream

__all__ = [
    "Stream",
    "Sequencer",
    "seterr",
    "StreamError",
    "ArgCountError",
    "ArgTypeError",
    "ArgValueError",
    "EmptyStreamError",
    "UnequalLengthError",
    "EvaluationError",
]
