import os

from cryptoprimes.error import ConfigurationError

__all__ = ['max_attempts', 'DEFAULT_SEARCH_FACTOR', 'ROUNDS_DIVISOR']

# Candidates tried per requested bit before a search gives up
DEFAULT_SEARCH_FACTOR = 100

# Miller-Rabin rounds default to one per this many bits of the tested number
ROUNDS_DIVISOR = 48


def max_attempts(bits):
    """Cap on the number of candidates random_probable_prime tests for a `bits`-bit prime"""
    raw = os.environ.get('CRYPTOPRIMES_MAX_ATTEMPTS')
    if raw is None:
        return DEFAULT_SEARCH_FACTOR * bits

    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f'CRYPTOPRIMES_MAX_ATTEMPTS must be an integer, got {raw!r}') from None

    if value < 1:
        raise ConfigurationError(f'CRYPTOPRIMES_MAX_ATTEMPTS must be positive, got {value}')
    return value
