r"""
'                          _     _     _
'     ___ ___  _ __ ___   | |__ (_) __| | _____  __
'    / __/ _ \| '_ ` _ \  | '_ \| |/ _` |/ _ \ \/ /
'   | (_| (_) | | | | | | | |_) | | (_| |  __/>  <
'    \___\___/|_| |_| |_| |_.__/|_|\__,_|\___/_/\_\
"""

# expose the structures
from .structures import Permutation, Combination, BaseN, PowerSet
from .product import CartesianProduct, ProductSet
from .indexed import RankView

# expose the arithmetic primitives
from .arithmetic import (
    factorial,
    falling_factorial,
    permutation_count,
    combination_count,
    factoradic,
    combinadic
)

# expose the factory functions
from .factories import (
    permutations,
    combinations,
    base_n,
    power_set,
    cartesian_product,
    product_set,
    of,
    perm,
    comb
)

# expose configuration and errors
from .config import Settings, configure, get_settings
from .types import (
    IntegerLike,
    CombinatoricsError,
    InvalidArgument,
    IndexOutOfRange
)

# define what `import *` does
__all__ = [
    "Permutation",
    "Combination",
    "BaseN",
    "PowerSet",
    "CartesianProduct",
    "ProductSet",
    "RankView",
    "factorial",
    "falling_factorial",
    "permutation_count",
    "combination_count",
    "factoradic",
    "combinadic",
    "permutations",
    "combinations",
    "base_n",
    "power_set",
    "cartesian_product",
    "product_set",
    "of",
    "perm",
    "comb",
    "Settings",
    "configure",
    "get_settings",
    "IntegerLike",
    "CombinatoricsError",
    "InvalidArgument",
    "IndexOutOfRange"
]
