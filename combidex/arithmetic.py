"""
exact counting and unranking primitives.

every function is generic over the integer type of its first argument:
results are built with that type's own constructor and operators, so python
ints stay unbounded and numpy integers stay fixed-width.
"""
from .types import *


def _like(n: I, value: int) -> I:
    """build `value` in the integer type of `n`"""
    return type(n)(value)


def factorial(n: I) -> I:
    """n! as an exact product 1*2*...*n"""
    if n < 0:
        raise InvalidArgument(f"factorial of negative number {n}")
    result = _like(n, 1)
    for i in range(2, int(n) + 1):
        result = result * _like(n, i)
    return result


def falling_factorial(n: I, k: I) -> I:
    """n*(n-1)*...*(n-k+1), the number of ordered k-selections from n items"""
    if n < 0 or k < 0:
        raise InvalidArgument(f"falling factorial needs non-negative arguments, got ({n}, {k})")
    if k == 0:
        return _like(n, 1)
    if n < k:
        return _like(n, 0)
    result = _like(n, 1)
    for i in range(int(n) - int(k) + 1, int(n) + 1):
        result = result * _like(n, i)
    return result


permutation_count = falling_factorial


def combination_count(n: I, k: I) -> I:
    """binomial coefficient n choose k"""
    if n < 0 or k < 0:
        raise InvalidArgument(f"combination count needs non-negative arguments, got ({n}, {k})")
    if k == 0 or k == n:
        return _like(n, 1)
    if n < k:
        return _like(n, 0)
    # C(n, k) == C(n, n - k); the smaller side keeps the products short
    k = min(int(k), int(n) - int(k))
    # after step i, result == C(n, i + 1), so every intermediate stays near the final count
    result = _like(n, 1)
    for i in range(k):
        result = result * (n - _like(n, i)) // _like(n, i + 1)
    return result


def factoradic(rank: I, digits: int) -> List[int]:
    """
    rank in the factorial number system, most significant digit first.
    the digit with radix i+1 sits at position i counted from the right, so
    the last digit is always 0. the result is padded to exactly `digits`
    digits; a rank that needs more raises InvalidArgument.
    """
    if rank < 0:
        raise InvalidArgument(f"factoradic of negative number {rank}")
    result = [0] * digits
    q = rank
    radix = 1
    while True:
        q, r = divmod(q, _like(rank, radix))
        if radix > digits:
            if r != 0 or q != 0:
                raise InvalidArgument(f"{rank} does not fit in {digits} factoradic digits")
            break
        result[radix - 1] = int(r)
        if q == 0:
            break
        radix += 1
    result.reverse()
    return result


def combinadic(n: I, k: I, rank: I) -> List[int]:
    """
    positions of the rank-th k-subset of range(n) in lexicographic order.

    works on the complement x = C(n, k) - 1 - rank: each digit is the
    largest a with C(a, b) <= x, taken greedily from the top.
    """
    count = combination_count(n, k)
    if not 0 <= rank < count:
        raise IndexOutOfRange(rank, count)
    x = count - _like(n, 1) - rank
    a, b = n, k
    positions = []
    for _ in range(int(k)):
        while combination_count(a, b) > x:
            a = a - _like(n, 1)
        positions.append(int(n) - 1 - int(a))
        x = x - combination_count(a, b)
        b = b - _like(n, 1)
    return positions
