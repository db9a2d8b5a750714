from __future__ import annotations
import sys
import typing
import random
from ..types import *
from ..config import get_settings

if typing.TYPE_CHECKING:
    from ..indexed import _BaseIndexed


class SampleAccessor(Generic[T]):
    """random access sampling; only the drawn ranks are ever unranked"""

    def __init__(self, indexed_instance: '_BaseIndexed[T]'):
        self._indexed = indexed_instance

    def _rng(self, seed: Optional[int]) -> random.Random:
        return random.Random(get_settings().sample_seed if seed is None else seed)

    def ranks(self, n: int, seed: Optional[int] = None, replace: bool = False) -> List[int]:
        """
        draw n ranks uniformly from [0, count).
        without replacement the ranks are distinct, so n may not exceed count.
        """
        count = int(self._indexed.count)
        if n < 0:
            raise InvalidArgument(f"sample size must be non-negative, got {n}")
        if not replace and n > count:
            raise InvalidArgument(f"sample of {n} is larger than the {count} available instances")

        rng = self._rng(seed)
        if replace:
            return [rng.randrange(count) for _ in range(n)]
        if count <= sys.maxsize:
            return rng.sample(range(count), n)

        # random.sample needs len(); with a huge population collisions are rare anyway
        chosen, seen = [], set()
        while len(chosen) < n:
            rank = rng.randrange(count)
            if rank not in seen:
                seen.add(rank)
                chosen.append(rank)
        return chosen

    def random(self, n: int, seed: Optional[int] = None, replace: bool = False) -> List[Instance]:
        """n random instances"""
        return [self._indexed.lookup(rank) for rank in self.ranks(n, seed, replace)]

    def one(self, seed: Optional[int] = None) -> Instance:
        """a single random instance"""
        return self.random(1, seed)[0]
