from cryptoprimes.number_theory import mulinv

__all__ = ['MontgomeryContext']


class MontgomeryContext:
    """Arithmetic modulo a fixed odd n in Montgomery form, with R = 2 ** n.bit_length().

    Values handed to mul/sqr/pow must already be in Montgomery form (see to_mont);
    results stay in Montgomery form until passed through from_mont. Two values
    in Montgomery form are equal iff the integers they represent are equal mod n.
    """

    def __init__(self, n: int):
        if n < 3 or not n & 1:
            raise ValueError(f'Montgomery modulus must be odd and >= 3, got {n}')
        self.n = n
        self.k = n.bit_length()
        self.R = 1 << self.k
        self.mask = self.R - 1
        self.n_prime = -mulinv(n, self.R) & self.mask  # n * n_prime == -1 mod R
        self.r2 = (self.R * self.R) % n
        self.one = self.R % n

    def reduce(self, t: int) -> int:
        """REDC: t * R^-1 mod n, for 0 <= t < n * R"""
        m = ((t & self.mask) * self.n_prime) & self.mask
        u = (t + m * self.n) >> self.k
        return u - self.n if u >= self.n else u

    def to_mont(self, a: int) -> int:
        return self.reduce((a % self.n) * self.r2)

    def from_mont(self, a: int) -> int:
        return self.reduce(a)

    def mul(self, a: int, b: int) -> int:
        return self.reduce(a * b)

    def sqr(self, a: int) -> int:
        return self.reduce(a * a)

    def pow(self, a: int, e: int) -> int:
        """a ** e with a in Montgomery form, left-to-right square and multiply"""
        if e < 0:
            raise ValueError('Negative exponents are not supported')
        result = self.one
        for bit in format(e, 'b'):
            result = self.sqr(result)
            if bit == '1':
                result = self.mul(result, a)
        return result

    def __repr__(self):
        return f'MontgomeryContext({self.n})'
