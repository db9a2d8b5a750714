from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from contextlib import contextmanager

import numpy as np
from .types import *

# --- accessors ---
from .extensions.terminal import TerminalAccessor
from .extensions.sampling import SampleAccessor
from .extensions.partition import PartitionAccessor


@contextmanager
def exact_arithmetic(index_type: Type):
    """make fixed-width numpy integers raise on overflow instead of wrapping"""
    if isinstance(index_type, type) and issubclass(index_type, np.integer):
        try:
            with np.errstate(over='raise'):
                yield
        except FloatingPointError as e:
            raise OverflowError(f"value does not fit in {index_type.__name__}") from e
    else:
        yield


def _range_length(ranks: range) -> int:
    """len(range) without the sys.maxsize limit"""
    if ranks.step > 0:
        length = (ranks.stop - ranks.start + ranks.step - 1) // ranks.step
    else:
        length = (ranks.start - ranks.stop - ranks.step - 1) // -ranks.step
    return max(0, length)


# --- abstract base class ---

class IIndexed(ABC, Generic[T]):
    @abstractmethod
    def _unrank(self, idx: Any) -> Instance:
        """map an already validated rank to its instance"""
        pass


# --- base implementation ---

class _BaseIndexed(IIndexed[T]):
    def __init__(self, count: Any, index_type: Type):
        """init with the total count, already expressed in index_type"""
        self._count = count
        self._index_type = index_type
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
        self.sample = SampleAccessor(self)
        self.part = PartitionAccessor(self)

    @property
    def count(self) -> Any:
        """number of distinct instances, fixed at construction"""
        return self._count

    @property
    def index_type(self) -> Type:
        return self._index_type

    def _rank(self, idx: Any) -> Any:
        """check a rank and convert it to the index type"""
        try:
            operator.index(idx)
        except TypeError:
            raise TypeError(f"ranks must be integers, not {type(idx).__name__}") from None
        if not 0 <= idx < self._count:
            raise IndexOutOfRange(idx, self._count)
        return self._index_type(idx)

    def lookup(self, idx: Any) -> Instance:
        """the instance at rank idx"""
        rank = self._rank(idx)
        with exact_arithmetic(self._index_type):
            return self._unrank(rank)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return RankView(self, range(int(self._count))[key])
        return self.lookup(key)

    def __iter__(self) -> Iterator[Instance]:
        # each instance is rebuilt from its rank, so a new iterator always restarts at 0
        for i in range(int(self._count)):
            with exact_arithmetic(self._index_type):
                instance = self._unrank(self._index_type(i))
            yield instance

    def __len__(self) -> int:
        return int(self._count)

    def __bool__(self) -> bool:
        # len() overflows for huge counts
        return self._count > 0

    def __contains__(self, item: Any) -> bool:
        target = tuple(item)
        return any(instance == target for instance in self)


class RankView(_BaseIndexed[T]):
    """a lazy window over a range of another structure's ranks"""

    def __init__(self, parent: _BaseIndexed[T], ranks: range):
        self._parent = parent
        self._ranks = ranks
        super().__init__(parent.index_type(_range_length(ranks)), parent.index_type)

    @property
    def parent(self) -> _BaseIndexed[T]:
        return self._parent

    @property
    def ranks(self) -> range:
        """the parent ranks covered by this view, in view order"""
        return self._ranks

    def parent_rank(self, idx: Any) -> int:
        """translate a view rank into the parent's rank"""
        return self._ranks.start + int(self._rank(idx)) * self._ranks.step

    def _unrank(self, idx: Any) -> Instance:
        parent_rank = self._ranks.start + int(idx) * self._ranks.step
        return self._parent._unrank(self._parent.index_type(parent_rank))

    def __getitem__(self, key):
        if isinstance(key, slice):
            return RankView(self._parent, self._ranks[key])
        return self.lookup(key)

    def __repr__(self) -> str:
        return f"RankView(parent={self._parent!r}, ranks={self._ranks!r})"
