from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..indexed import _BaseIndexed

Accumulator = Callable[[U, Tuple[T, ...]], U]


class TerminalAccessor(Generic[T]):
    """eager conversions; everything except count() walks the ranks"""

    def __init__(self, indexed_instance: '_BaseIndexed[T]'):
        self._indexed = indexed_instance

    def list(self) -> List[Instance]:
        """convert to list"""
        return list(self._indexed)

    def tuple(self) -> Tuple[Instance, ...]:
        """convert to tuple"""
        return tuple(self._indexed)

    def set(self) -> Set[Instance]:
        """convert to set"""
        return set(self._indexed)

    def array(self) -> np.ndarray:
        """
        convert to numpy array, one row per instance.
        instances of different lengths (power sets) give a 1-d object array.
        """
        rows = self.list()
        if len({len(row) for row in rows}) <= 1:
            return np.array(rows)
        result = np.empty(len(rows), dtype=object)
        for i, row in enumerate(rows):
            result[i] = row
        return result

    def pandas(self) -> pd.Series:
        """convert to pandas series of tuples"""
        return pd.Series(self.list(), dtype=object)

    def df(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """convert to pandas dataframe, one column per position"""
        return pd.DataFrame(self.list(), columns=columns)

    def count(self, predicate: Optional[Predicate[Instance]] = None) -> Any:
        """count instances; without a predicate this is the stored count"""
        if predicate is None: return self._indexed.count
        return sum(1 for x in self._indexed if predicate(x))

    def any(self, predicate: Optional[Predicate[Instance]] = None) -> bool:
        """check if any instance satisfies condition"""
        if predicate is None: return self._indexed.count > 0
        return any(predicate(x) for x in self._indexed)

    def all(self, predicate: Predicate[Instance]) -> bool:
        """check if all instances satisfy condition"""
        return all(predicate(x) for x in self._indexed)

    def first(self, predicate: Optional[Predicate[Instance]] = None) -> Instance:
        """get first instance"""
        if predicate is None:
            if not self._indexed.count > 0: raise ValueError("sequence contains no elements")
            return self._indexed.lookup(0)
        for item in self._indexed:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def last(self, predicate: Optional[Predicate[Instance]] = None) -> Instance:
        """get last instance, scanning ranks downwards"""
        count = int(self._indexed.count)
        if predicate is None:
            if count == 0: raise ValueError("sequence contains no elements")
            return self._indexed.lookup(count - 1)
        for rank in range(count - 1, -1, -1):
            item = self._indexed.lookup(rank)
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def aggregate(self, accumulator: Accumulator[U, T], seed: U) -> U:
        """fold every instance into seed"""
        return reduce(accumulator, self._indexed, seed)
