"""Probabilistic prime generation and primality testing.

The primality decision combines a base-2 Fermat screen with two Miller-Rabin
passes, one witnessed from the table of low primes and one from the full range
[2, n-2]. No Lucas test is performed (see FIPS 186-4, section C.3.3), so the
error probability is bounded by the Miller-Rabin round count and is never zero.
"""

import logging
from bisect import bisect_right
from enum import Enum, unique
from math import gcd

from cryptoprimes import config
from cryptoprimes.entropy import default_random
from cryptoprimes.error import InvalidBitLength, SearchExhausted
from cryptoprimes.lowprimes import LOW_PRIMES
from cryptoprimes.montgomery import MontgomeryContext

__all__ = ['WITNESS', 'default_rounds', 'fermat', 'miller_rabin', 'is_probable_prime', 'random_probable_prime']

logger = logging.getLogger(__name__)


@unique
class WITNESS(Enum):
    UNIFORM = 'uniform'
    FROM_TABLE = 'from_table'


def default_rounds(bits):
    return max(1, bits // config.ROUNDS_DIVISOR)


def random_probable_prime(bits, e=None, k=None, rng=None):
    """Random probable prime of exactly `bits` bits.

    If `e` is given the result p also satisfies gcd(p - 1, e) == 1, as needed for
    an RSA public exponent. `k` is the number of Miller-Rabin rounds per pass.
    """
    if not isinstance(bits, int) or isinstance(bits, bool) or bits < 2:
        raise InvalidBitLength(bits)

    rng = rng or default_random()
    low = 1 << (bits - 1)
    high = low << 1

    n = rng.random_integer(low, high)
    if not n & 1:
        n += 1  # force odd

    limit = config.max_attempts(bits)
    for attempt in range(1, limit + 1):
        if is_probable_prime(n, e, k, rng):
            logger.debug('Found %d-bit probable prime after %d candidates', bits, attempt)
            return n

        n += 2
        if n.bit_length() > bits:
            # overflowed the range, go back to the minimum
            n = n % high + low
            logger.debug('Candidate search for %d bits wrapped around', bits)

    logger.warning('Gave up looking for a %d-bit probable prime after %d candidates', bits, limit)
    raise SearchExhausted(bits, limit)


def is_probable_prime(n, e=None, k=None, rng=None):
    """Probabilistic primality test.

    Rejects n when gcd(n - 1, e) != 1 for a given exponent e, regardless of
    whether n itself is prime.
    """
    if e is not None and gcd(n - 1, e) != 1:
        return False
    if n < 4:
        return n > 1
    if not n & 1:
        return False

    if not fermat(n):
        return False
    if not miller_rabin(n, k, WITNESS.FROM_TABLE, rng):
        return False
    if not miller_rabin(n, k, WITNESS.UNIFORM, rng):
        return False
    # TODO add the Lucas test from FIPS 186-4 section C.3.3
    return True


def fermat(n, b=2):
    """True iff b^(n-1) mod n == 1. Carmichael numbers pass for every b coprime to n"""
    if n < 2:
        return False
    if not n & 1:
        return pow(b, n - 1, n) == 1

    ctx = MontgomeryContext(n)
    return ctx.from_mont(ctx.pow(ctx.to_mont(b), n - 1)) == 1


def _draw_witness(n, witness, rng):
    if witness is WITNESS.FROM_TABLE:
        # only table primes in [2, n-2], so a small prime n never draws itself
        size = bisect_right(LOW_PRIMES, n - 2)
        return LOW_PRIMES[rng.random_integer(0, size)]
    return rng.random_integer(2, n - 1)


def miller_rabin(n, k=None, witness=WITNESS.UNIFORM, rng=None):
    """Miller-Rabin test with `k` rounds, see HAC Remark 4.28.

    `witness` selects where the bases come from: uniformly from [2, n-2], or from
    the low primes table. Both draw from `rng`, so a stub rng with a fixed output
    sequence makes the verdict deterministic. A `k` below 1 means default_rounds.
    """
    if n < 4:
        return n > 1
    if not n & 1:
        return False

    if not k or k < 0:
        k = default_rounds(n.bit_length())
    rng = rng or default_random()

    ctx = MontgomeryContext(n)
    n1 = n - 1
    one = ctx.one
    minus_one = ctx.to_mont(n1)

    # n - 1 = 2^s * d
    s = 0
    while not (n1 >> s) & 1:
        s += 1
    d = n1 >> s

    for _ in range(k):
        a = _draw_witness(n, witness, rng)
        x = ctx.pow(ctx.to_mont(a), d)
        if x == one or x == minus_one:
            continue

        for _ in range(s - 1):
            x = ctx.sqr(x)
            if x == one:
                return False
            if x == minus_one:
                break
        else:
            return False

    return True
