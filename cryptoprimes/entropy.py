"""Source of random integers for candidate generation and witness selection.

Anything with a ``random_integer(low, high)`` method returning a uniform value in
``[low, high)`` can be passed wherever an ``rng`` argument is accepted.
"""

import secrets

__all__ = ['SecureRandom', 'default_random']


class SecureRandom:
    """Uniform integers from the operating system CSPRNG"""

    def random_integer(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f'Empty range [{low}, {high})')
        return low + secrets.randbelow(high - low)

    def __repr__(self):
        return 'SecureRandom()'


_DEFAULT = SecureRandom()


def default_random() -> SecureRandom:
    return _DEFAULT
