__all__ = ['xgcd', 'mulinv']


def xgcd(b, n):
    """Takes integers b, n and returns a triple (g, x, y) such that bx + ny = g = gcd(b, n)"""
    x0, x1, y0, y1 = 1, 0, 0, 1
    while n != 0:
        q, b, n = b // n, n, b % n
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return b, x0, y0


def mulinv(b, n):
    """Inverse of b modulo n, via the extended Euclidean algorithm"""
    g, x, _ = xgcd(b % n, n)
    if g != 1:
        raise ValueError(f'{b} has no inverse modulo {n}')
    return x % n
