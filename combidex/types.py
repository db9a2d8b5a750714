from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Sequence, Type, Protocol, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')

Instance = Tuple[T, ...]
Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], Any]


@runtime_checkable
class IntegerLike(Protocol):
    """
    the minimal arithmetic a rank/count type has to provide.
    python's int, numpy's fixed-width integers and gmpy2.mpz all qualify.
    """

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __divmod__(self, other: Any) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...
    def __int__(self) -> int: ...


# counts and ranks: any type with the IntegerLike arithmetic
I = TypeVar('I', bound=IntegerLike)


# --- error taxonomy ---

class CombinatoricsError(Exception):
    """base class for every error raised by combidex"""


class InvalidArgument(CombinatoricsError, ValueError):
    """bad size, empty seed or negative arithmetic input"""


class IndexOutOfRange(CombinatoricsError, IndexError):
    """rank outside [0, count)"""

    def __init__(self, rank: Any, count: Any):
        self.rank = rank
        self.count = count
        super().__init__(f"rank {rank} out of range [0, {count})")
