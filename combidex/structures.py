from __future__ import annotations

import logging
import operator
from abc import abstractmethod

from .types import *
from .config import get_settings
from .arithmetic import factorial, falling_factorial, combination_count, factoradic, combinadic
from .indexed import _BaseIndexed, exact_arithmetic

logger = logging.getLogger(__name__)


def _resolve_index_type(index_type: Optional[Type]) -> Type:
    return get_settings().index_type if index_type is None else index_type


def _materialize(seed: Iterable[T]) -> Tuple[T, ...]:
    seed = tuple(seed)
    if not seed:
        raise InvalidArgument("seed must not be empty")
    return seed


def _resolve_size(size: Optional[int], n: int, clamp: bool) -> int:
    """None means n; sizes above n are clamped where repetition is impossible"""
    if size is None:
        return n
    size = operator.index(size)
    if size <= 0:
        raise InvalidArgument(f"size must be positive, got {size}")
    return min(size, n) if clamp else size


def _power(base: I, exponent: int) -> I:
    result = type(base)(1)
    for _ in range(exponent):
        result = result * base
    return result


# --- shared seed handling ---

class _SeededStructure(_BaseIndexed[T]):
    _clamp_size = True

    def __init__(self, seed: Iterable[T], size: Optional[int] = None, index_type: Optional[Type] = None):
        self._seed = _materialize(seed)
        self._size = _resolve_size(size, len(self._seed), self._clamp_size)
        index_type = _resolve_index_type(index_type)
        with exact_arithmetic(index_type):
            count = self._count_for(index_type(len(self._seed)), index_type(self._size))
        super().__init__(count, index_type)
        logger.debug(f"{type(self).__name__} over {len(self._seed)} items, size {self._size}: {count} instances")

    @abstractmethod
    def _count_for(self, n: I, k: I) -> I:
        """closed-form count for n seed items and size k"""
        pass

    @property
    def seed(self) -> Tuple[T, ...]:
        return self._seed

    @property
    def size(self) -> int:
        return self._size

    def _key(self) -> Tuple:
        return type(self), self._seed, self._size, self._index_type

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, _SeededStructure): return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self._seed)}, size={self._size}, count={self._count})"


# --- structures ---

class Permutation(_SeededStructure[T]):
    """
    ordered k-selections of the seed, ranked in the same order as
    itertools.permutations(seed, k).
    """

    def _count_for(self, n: I, k: I) -> I:
        return falling_factorial(n, k)

    def _unrank(self, idx: Any) -> Instance:
        n, k = len(self._seed), self._size
        if k == 1:
            return (self._seed[int(idx)],)
        # padding the rank by (n-k)! leaves the unused tail in seed order
        # worked in python ints: (n-k)! can outgrow a fixed-width index type whose count fits
        skip = factorial(n - k)
        digits = factoradic(int(idx) * skip, n)
        # digits index the shrinking copy, not the original seed
        source = list(self._seed)
        return tuple(source.pop(digit) for digit in digits[:k])


class Combination(_SeededStructure[T]):
    """k-subsets of the seed in seed order, ranked like itertools.combinations(seed, k)"""

    def _count_for(self, n: I, k: I) -> I:
        return combination_count(n, k)

    def _unrank(self, idx: Any) -> Instance:
        positions = combinadic(self._index_type(len(self._seed)), self._index_type(self._size), idx)
        return tuple(self._seed[p] for p in positions)


class BaseN(_SeededStructure[T]):
    """
    k-tuples over the seed alphabet with repetition.
    the first position is the least significant digit: rank 1 changes
    the first element, rank n changes the second.
    """
    _clamp_size = False

    def _count_for(self, n: I, k: I) -> I:
        return _power(n, int(k))

    def _unrank(self, idx: Any) -> Instance:
        radix = self._index_type(len(self._seed))
        result = []
        q = idx
        for _ in range(self._size):
            q, r = divmod(q, radix)
            result.append(self._seed[int(r)])
        return tuple(result)


class PowerSet(_SeededStructure[T]):
    """all 2^n subsets; bit i of the rank selects seed[i]"""

    def __init__(self, seed: Iterable[T], index_type: Optional[Type] = None):
        super().__init__(seed, None, index_type)

    def _count_for(self, n: I, k: I) -> I:
        return _power(type(n)(2), int(n))

    def _unrank(self, idx: Any) -> Instance:
        two = self._index_type(2)
        result = []
        q = idx
        for item in self._seed:
            q, bit = divmod(q, two)
            if bit:
                result.append(item)
        return tuple(result)

    def __repr__(self) -> str:
        return f"PowerSet(n={len(self._seed)}, count={self._count})"
