from __future__ import annotations
import typing
import logging
from concurrent.futures import ThreadPoolExecutor
from ..types import *
from ..config import get_settings

if typing.TYPE_CHECKING:
    from ..indexed import _BaseIndexed, RankView

logger = logging.getLogger(__name__)


class PartitionAccessor(Generic[T]):
    """
    splits the rank range into independent views.
    every instance is derived from its rank alone, so partitions can be
    processed on separate workers without any coordination.
    """

    def __init__(self, indexed_instance: '_BaseIndexed[T]'):
        self._indexed = indexed_instance

    def _view(self, start: int, stop: int) -> 'RankView[T]':
        from ..indexed import RankView
        source = self._indexed
        # views of views collapse onto the original structure
        if isinstance(source, RankView):
            return RankView(source.parent, source.ranks[start:stop])
        return RankView(source, range(start, stop))

    def chunks(self, parts: int) -> List['RankView[T]']:
        """
        split into at most `parts` contiguous views of near-equal size.
        the first count % parts views get one extra rank.
        """
        if parts <= 0:
            raise InvalidArgument(f"number of parts must be positive, got {parts}")
        count = int(self._indexed.count)
        parts = min(parts, count) or 1
        base, extra = divmod(count, parts)

        views = []
        start = 0
        for i in range(parts):
            stop = start + base + (1 if i < extra else 0)
            views.append(self._view(start, stop))
            start = stop
        return views

    def batches(self, size: int) -> Iterator['RankView[T]']:
        """consecutive views of `size` ranks, the last one may be shorter"""
        if size <= 0:
            raise InvalidArgument("batch size must be positive")
        count = int(self._indexed.count)
        for start in range(0, count, size):
            yield self._view(start, min(start + size, count))

    def map_partitions(self, func: Callable[['RankView[T]'], U], parts: Optional[int] = None,
                       max_workers: Optional[int] = None) -> List[U]:
        """apply func to each partition view in a thread pool, results in partition order"""
        workers = max_workers or get_settings().max_workers
        views = self.chunks(parts or workers)
        logger.debug(f"mapping over {len(views)} partitions with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(func, views))

    def map(self, selector: Selector[Instance, U], parts: Optional[int] = None,
            max_workers: Optional[int] = None) -> List[U]:
        """apply selector to every instance in parallel, results in rank order"""
        chunked = self.map_partitions(lambda view: [selector(x) for x in view], parts, max_workers)
        return [item for chunk in chunked for item in chunk]

    def count(self, predicate: Predicate[Instance], parts: Optional[int] = None,
              max_workers: Optional[int] = None) -> int:
        """count matching instances in parallel"""
        return sum(self.map_partitions(lambda view: sum(1 for x in view if predicate(x)),
                                       parts, max_workers))
