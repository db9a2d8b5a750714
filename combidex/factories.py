from .types import *
from .structures import Permutation, Combination, BaseN, PowerSet
from .product import CartesianProduct, ProductSet


def permutations(seed: Iterable[T], size: Optional[int] = None,
                 index_type: Optional[Type] = None) -> Permutation[T]:
    """ordered selections of `size` items (all items when size is None)"""
    return Permutation(seed, size, index_type)


def combinations(seed: Iterable[T], size: Optional[int] = None,
                 index_type: Optional[Type] = None) -> Combination[T]:
    """unordered selections of `size` items, kept in seed order"""
    return Combination(seed, size, index_type)


def base_n(seed: Iterable[T], size: Optional[int] = None,
           index_type: Optional[Type] = None) -> BaseN[T]:
    """tuples of `size` symbols drawn from seed with repetition"""
    return BaseN(seed, size, index_type)


def power_set(seed: Iterable[T], index_type: Optional[Type] = None) -> PowerSet[T]:
    """every subset of seed"""
    return PowerSet(seed, index_type)


def cartesian_product(*components: Iterable[Any], index_type: Optional[Type] = None) -> CartesianProduct:
    """one element from each component"""
    return CartesianProduct(*components, index_type=index_type)


def product_set(*components: Iterable[T], element_type: Optional[Type] = None,
                index_type: Optional[Type] = None) -> ProductSet[T]:
    """cartesian product over components sharing one element type"""
    return ProductSet(*components, element_type=element_type, index_type=index_type)


def of(*items: T, kind: Callable[..., Any] = Permutation, **kwargs: Any):
    """build a structure straight from its items, e.g. of('a', 'b', 'c', kind=Combination, size=2)"""
    return kind(items, **kwargs)


# --- aliases ---
perm = permutations
comb = combinations
