from __future__ import annotations

import logging

from .types import *
from .indexed import _BaseIndexed, exact_arithmetic
from .structures import _resolve_index_type

logger = logging.getLogger(__name__)


class CartesianProduct(_BaseIndexed[Any]):
    """
    one element from each component, ranked like itertools.product.

    the rank is a mixed-radix number whose digit i has radix len(components[i]);
    the first component is the most significant digit, so the count is built
    and the rank decomposed in the same component order.
    """

    def __init__(self, *components: Iterable[Any], index_type: Optional[Type] = None):
        if not components:
            raise InvalidArgument("cartesian product needs at least one component")
        self._components = tuple(tuple(component) for component in components)
        for i, component in enumerate(self._components):
            if not component:
                raise InvalidArgument(f"component {i} is empty")

        index_type = _resolve_index_type(index_type)
        with exact_arithmetic(index_type):
            count = index_type(1)
            for component in self._components:
                count = count * index_type(len(component))
        super().__init__(count, index_type)
        logger.debug(f"{type(self).__name__} of radices {[len(c) for c in self._components]}: {count} instances")

    @property
    def components(self) -> Tuple[Tuple[Any, ...], ...]:
        return self._components

    @property
    def size(self) -> int:
        """number of components, which is also the length of every instance"""
        return len(self._components)

    def _unrank(self, idx: Any) -> Instance:
        picked = [None] * len(self._components)
        q = idx
        # least significant digit first, i.e. the last component
        for i in range(len(self._components) - 1, -1, -1):
            component = self._components[i]
            q, r = divmod(q, self._index_type(len(component)))
            picked[i] = component[int(r)]
        return tuple(picked)

    def _key(self) -> Tuple:
        return type(self), self._components, self._index_type

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CartesianProduct): return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        radices = 'x'.join(str(len(c)) for c in self._components)
        return f"{type(self).__name__}({radices}, count={self._count})"


class ProductSet(CartesianProduct, Generic[T]):
    """a cartesian product whose components all hold elements of one type"""

    def __init__(self, *components: Iterable[T], element_type: Optional[Type] = None,
                 index_type: Optional[Type] = None):
        super().__init__(*components, index_type=index_type)
        if element_type is None:
            element_type = type(self._components[0][0])
        for i, component in enumerate(self._components):
            for item in component:
                if not isinstance(item, element_type):
                    raise InvalidArgument(
                        f"component {i} holds {type(item).__name__}, expected {element_type.__name__}")
        self._element_type = element_type

    @property
    def element_type(self) -> Type:
        return self._element_type

    def _key(self) -> Tuple:
        return super()._key() + (self._element_type,)
