from faker import Faker

_fake = Faker()


def words(n: int, seed: int = 0) -> list:
    """n distinct random words, reproducible for a given seed"""
    _fake.seed_instance(seed)
    return _fake.words(nb=n, unique=True)


def numbers(n: int, seed: int = 0) -> list:
    """n distinct random integers"""
    _fake.seed_instance(seed)
    return list(_fake.random_elements(elements=list(range(1000)), length=n, unique=True))
