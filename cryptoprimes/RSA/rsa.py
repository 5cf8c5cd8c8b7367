from cryptoprimes import config
from cryptoprimes.error import InvalidBitLength, SearchExhausted
from cryptoprimes.number_theory import mulinv
from cryptoprimes.primes import random_probable_prime

__all__ = ['generate_keypair']

MIN_MODULUS_BITS = 16


def generate_keypair(bits, e=65537, rng=None):
    """RSA key pair with a modulus of exactly `bits` bits.

    The modulus is the product of two distinct probable primes of `bits // 2` and
    `bits - bits // 2` bits, both satisfying gcd(p - 1, e) == 1 so e is always invertible.
    Returns ((d, n), (e, n)).
    """
    if not isinstance(bits, int) or isinstance(bits, bool) or bits < MIN_MODULUS_BITS:
        raise InvalidBitLength(bits, minimum=MIN_MODULUS_BITS)

    limit = config.max_attempts(bits)
    for _ in range(limit):
        p = random_probable_prime(bits // 2, e, rng=rng)
        q = random_probable_prime(bits - bits // 2, e, rng=rng)
        # the product of an a-bit and a b-bit number has a + b - 1 or a + b bits
        if p != q and (p * q).bit_length() == bits:
            break
    else:
        raise SearchExhausted(bits, limit)

    n = p * q
    phi = (p - 1) * (q - 1)

    d = mulinv(e, phi)

    private = (d, n)
    public = (e, n)
    return private, public
