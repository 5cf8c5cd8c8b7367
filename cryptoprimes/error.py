__all__ = ['PrimeError', 'InvalidBitLength', 'SearchExhausted', 'ConfigurationError']


class PrimeError(Exception):
    pass


class InvalidBitLength(PrimeError, ValueError):
    def __init__(self, bits, minimum=2):
        self.bits = bits
        self.minimum = minimum
        super().__init__(f'Bit length must be an integer >= {minimum}, got {bits!r}')


class SearchExhausted(PrimeError):
    def __init__(self, bits, attempts):
        self.bits = bits
        self.attempts = attempts
        super().__init__(f'No {bits}-bit probable prime found after {attempts} candidates')


class ConfigurationError(PrimeError, ValueError):
    pass
