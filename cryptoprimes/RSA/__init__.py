from .rsa import *
from .rsa import __all__
