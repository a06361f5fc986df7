from typing import Iterator

# both larger than the ASCII alphabet
PRIME_1 = 131
PRIME_2 = 151


def hash_string(s: str, a: int, m: int) -> int:
    """Polynomial hash of the UTF-8 bytes of s, base a, reduced mod m."""
    hash = 0
    for b in s.encode("utf-8"):
        hash = (hash * a + b) % m
    return hash


def probe_sequence(s: str, num_buckets: int) -> Iterator[int]:
    """
    Yield (hash_a + attempt * (hash_b + 1)) % num_buckets for attempts
    0 .. num_buckets - 1.
    """
    hash_a = hash_string(s, PRIME_1, num_buckets)
    step = hash_string(s, PRIME_2, num_buckets) + 1
    for attempt in range(num_buckets):
        yield (hash_a + attempt * step) % num_buckets
