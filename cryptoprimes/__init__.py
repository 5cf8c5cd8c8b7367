"""
Probabilistic prime generation and primality testing for asymmetric key generation.
"""

from .error import *
from .lowprimes import *
from .entropy import *
from .montgomery import *
from .number_theory import *
from .primes import *
from .RSA import *

from . import error, lowprimes, entropy, montgomery, number_theory, primes, RSA

__all__ = []

for _module in (error, lowprimes, entropy, montgomery, number_theory, primes, RSA):
    __all__.extend(_module.__all__)

__version__ = "0.1"
