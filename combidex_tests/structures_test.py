import math
import itertools
import numpy as np
import suite
from combidex import (
    Permutation, Combination, BaseN, PowerSet,
    permutations, combinations, base_n, power_set, of, perm, comb,
    InvalidArgument, IndexOutOfRange
)
from combidex_tests.seeds import words

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

# --- test data ---
digits = [0, 1, 2, 3]
letters = ['a', 'b', 'c', 'd']


# --- permutation ---

@test("permutation of 4 items taken 2 at a time")
def test_permutation_scenario():
    p = Permutation(digits, 2)
    assert_equal(p.count, 12, "count should be 4!/2!")
    assert_equal(p.lookup(0), (0, 1), "rank 0 is wrong")
    assert_equal(p.lookup(11), (3, 2), "last rank is wrong")
    assert_equal(p[6], (2, 0), "rank 6 is wrong")


@test("permutation ranks follow itertools.permutations exactly for n <= 6")
def test_permutation_brute_force():
    for n in range(1, 7):
        seed = words(n, seed=n)
        for k in range(1, n + 1):
            p = Permutation(seed, k)
            expected = list(itertools.permutations(seed, k))
            assert_equal(p.count, math.perm(n, k), f"count for ({n}, {k}) is wrong")
            assert_equal(list(p), expected, f"order for ({n}, {k}) differs from itertools")
            assert_equal(len(set(p)), p.count, f"duplicates for ({n}, {k})")


@test("permutation size defaults to n and is clamped to n")
def test_permutation_size():
    assert_equal(Permutation(letters).size, 4, "size should default to n")
    assert_equal(Permutation(letters).count, 24, "full permutation count should be 4!")
    clamped = Permutation(letters, 10)
    assert_equal(clamped.size, 4, "size above n should be clamped")
    assert_equal(clamped.count, 24, "clamped count should be 4!")


@test("permutation of 100 items counts and unranks exactly")
def test_permutation_big():
    p = Permutation(range(100))
    assert_equal(p.count, math.factorial(100), "count should be 100!")
    assert_equal(p[0], tuple(range(100)), "first permutation is the seed")
    assert_equal(p[p.count - 1], tuple(range(99, -1, -1)), "last permutation is the reversed seed")
    assert_that(bool(p), "a huge structure is still truthy")
    assert_raises(OverflowError, len, p)


@test("permutation works with numpy int64 counts")
def test_permutation_numpy():
    p = Permutation(digits, 2, index_type=np.int64)
    assert_that(isinstance(p.count, np.int64), "count should be np.int64")
    assert_equal(p[np.int64(11)], (3, 2), "numpy rank should unrank")
    assert_equal(p[11], (3, 2), "python rank should be converted")
    assert_equal(list(p), list(Permutation(digits, 2)), "numpy and python ranks should agree")


@test("fixed-width index types refuse counts they cannot hold")
def test_permutation_numpy_overflow():
    assert_raises(OverflowError, Permutation, range(30), None, np.int64)


@test("int64 permutations work when only (n-k)! is too big for int64")
def test_permutation_numpy_large_n():
    p = Permutation(range(25), 2, index_type=np.int64)
    assert_that(isinstance(p.count, np.int64), "count should be np.int64")
    assert_equal(int(p.count), 600, "count should be 25*24")
    assert_equal(p[0], (0, 1), "rank 0 is wrong")
    assert_equal(p[599], (24, 23), "last rank is wrong")
    assert_equal(list(p), list(Permutation(range(25), 2)), "numpy and python ranks should agree")


@test("int64 combinations work when only P(n, k) is too big for int64")
def test_combination_numpy_large_n():
    c = Combination(range(40), 20, index_type=np.int64)
    assert_that(isinstance(c.count, np.int64), "count should be np.int64")
    assert_equal(int(c.count), math.comb(40, 20), "count should be C(40, 20)")
    assert_equal(c[0], tuple(range(20)), "rank 0 is the first 20 items")
    assert_equal(c[c.count - 1], tuple(range(20, 40)), "last rank is the last 20 items")

    assert_that(math.perm(30, 15) > 2 ** 63, "P(30, 15) should not fit in int64")
    narrow = Combination(range(30), 15, index_type=np.int64)
    wide = Combination(range(30), 15)
    total = math.comb(30, 15)
    for rank in list(range(0, total, total // 200)) + [total - 1]:
        assert_equal(narrow[np.int64(rank)], wide[rank], f"rank {rank} differs between int64 and int")


@test("lookups never touch the seed")
def test_permutation_seed_untouched():
    seed = list(letters)
    p = Permutation(seed, 3)
    _ = list(p)
    assert_equal(p.seed, tuple(letters), "seed should be unchanged after lookups")
    seed.append('z')
    assert_equal(p.seed, tuple(letters), "mutating the caller's list should not leak in")
    assert_equal(p.count, 24, "count is fixed at construction")


# --- combination ---

@test("combination of 4 letters taken 2 at a time")
def test_combination_scenario():
    c = Combination(letters, 2)
    assert_equal(c.count, 6, "count should be C(4, 2)")
    assert_equal(c[0], ('a', 'b'), "rank 0 is wrong")
    assert_equal(c[5], ('c', 'd'), "last rank is wrong")


@test("combination ranks follow itertools.combinations and keep seed order")
def test_combination_brute_force():
    for n in range(1, 7):
        seed = words(n, seed=10 + n)
        position = {word: i for i, word in enumerate(seed)}
        for k in range(1, n + 1):
            c = Combination(seed, k)
            actual = list(c)
            assert_equal(c.count, math.comb(n, k), f"count for ({n}, {k}) is wrong")
            assert_equal(actual, list(itertools.combinations(seed, k)), f"order for ({n}, {k}) is wrong")
            assert_equal(len(set(actual)), c.count, f"duplicates for ({n}, {k})")
            for subset in actual:
                indices = [position[word] for word in subset]
                assert_that(indices == sorted(indices), f"{subset} does not keep seed order")


@test("combination size above n is clamped to the whole seed")
def test_combination_clamp():
    c = Combination(letters, 9)
    assert_equal(c.count, 1, "only one subset of size n")
    assert_equal(c[0], tuple(letters), "that subset is the seed")


@test("combination membership")
def test_combination_contains():
    c = Combination(letters, 2)
    assert_that(('a', 'c') in c, "('a', 'c') should be a member")
    assert_that(('c', 'a') not in c, "reordered tuples are not members")


# --- base n ---

@test("base-n tuples with repetition")
def test_base_n_basic():
    b = BaseN('abc', 2)
    assert_equal(b.count, 9, "count should be 3^2")
    assert_equal(b[0], ('a', 'a'), "rank 0 is k copies of the first symbol")
    assert_equal(b[8], ('c', 'c'), "last rank is k copies of the last symbol")
    assert_equal(b[1], ('b', 'a'), "the first position is the least significant digit")
    assert_equal(b[3], ('a', 'b'), "rank n carries into the second position")


@test("base-n covers the full product and allows size above n")
def test_base_n_product():
    b = BaseN('ab', 3)
    assert_equal(b.count, 8, "size may exceed n")
    expected = [tuple(reversed(t)) for t in itertools.product('ab', repeat=3)]
    assert_equal(list(b), expected, "order should be itertools.product read right to left")


# --- power set ---

@test("power set ranks follow the bits of the rank")
def test_power_set_basic():
    ps = PowerSet('abc')
    assert_equal(ps.count, 8, "count should be 2^3")
    assert_equal(ps[0], (), "rank 0 is the empty subset")
    assert_equal(ps[7], ('a', 'b', 'c'), "last rank is the full seed")
    assert_equal(ps[1], ('a',), "bit 0 selects the first item")
    assert_equal(ps[6], ('b', 'c'), "bits 1 and 2 select the second and third items")
    expected = {s for k in range(4) for s in itertools.combinations('abc', k)}
    assert_equal(set(ps), expected, "every subset should appear")


@test("power set over 70 items")
def test_power_set_big():
    ps = PowerSet(range(70))
    assert_equal(ps.count, 2 ** 70, "count should be 2^70")
    assert_equal(ps[ps.count - 1], tuple(range(70)), "last rank is the full seed")
    assert_equal(ps[2 ** 69], (69,), "the top bit selects the last item")


# --- shared errors and value semantics ---

@test("every structure rejects ranks outside [0, count)")
def test_out_of_range():
    for structure in (Permutation(digits, 2), Combination(letters, 2), BaseN('abc', 2), PowerSet('abc')):
        error = assert_raises(IndexOutOfRange, structure.lookup, structure.count)
        assert_that(isinstance(error, IndexError), "IndexOutOfRange should also be an IndexError")
        assert_raises(IndexOutOfRange, structure.lookup, -1)
        assert_raises(TypeError, structure.lookup, 1.5)


@test("construction rejects empty seeds and non-positive sizes")
def test_invalid_construction():
    assert_raises(InvalidArgument, Permutation, [], 1)
    assert_raises(InvalidArgument, Combination, [])
    assert_raises(InvalidArgument, BaseN, '', 2)
    assert_raises(InvalidArgument, PowerSet, [])
    assert_raises(InvalidArgument, Permutation, letters, 0)
    assert_raises(InvalidArgument, Combination, letters, -2)
    assert_raises(InvalidArgument, BaseN, letters, 0)


@test("structures compare by class, seed and size")
def test_equality():
    assert_equal(Permutation('abc', 2), Permutation(['a', 'b', 'c'], 2), "same seed and size")
    assert_that(Permutation('abc', 2) != Combination('abc', 2), "different kinds differ")
    assert_that(Permutation('abc', 2) != Permutation('abc', 3), "different sizes differ")
    assert_equal(hash(BaseN('ab', 2)), hash(BaseN('ab', 2)), "equal structures hash alike")
    assert_equal(repr(Permutation(digits, 2)), "Permutation(n=4, size=2, count=12)", "repr is wrong")


@test("iteration restarts from rank 0 every time")
def test_iteration_restartable():
    c = Combination(letters, 3)
    assert_equal(list(c), list(c), "two passes should agree")
    it = iter(c)
    assert_equal(next(it), ('a', 'b', 'c'), "a fresh iterator starts at rank 0")
    assert_equal(len(c), 4, "len should be the count")


@test("factory functions build the matching structures")
def test_factories():
    assert_equal(permutations(letters, 2), Permutation(letters, 2), "permutations factory")
    assert_equal(combinations(letters, 2), Combination(letters, 2), "combinations factory")
    assert_equal(base_n(letters, 3), BaseN(letters, 3), "base_n factory")
    assert_equal(power_set(letters), PowerSet(letters), "power_set factory")
    assert_equal(of('a', 'b', 'c', kind=Combination, size=2), Combination('abc', 2), "of() takes items directly")
    assert_equal(of(1, 2, 3)[5], (3, 2, 1), "of() defaults to a full permutation")
    assert_that(perm is permutations and comb is combinations, "short aliases")


if __name__ == "__main__":
    suite.run(title="combidex structures test")
