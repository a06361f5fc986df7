import math


def is_prime(x: int) -> bool:
    if x < 2:
        return False
    if x < 4:
        return True
    if x % 2 == 0:
        return False
    for i in range(3, math.isqrt(x) + 1, 2):
        if x % i == 0:
            return False
    return True


def next_prime(x: int) -> int:
    """Return the smallest prime >= x."""
    if x < 2:
        return 2
    while not is_prime(x):
        x += 1
    return x
