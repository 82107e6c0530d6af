from __future__ import annotations


def is_prime(n: int) -> bool:
    """Trial division over candidates of the form 6k +/- 1.

    Anything below 2, negatives included, is not prime.
    """

    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True
