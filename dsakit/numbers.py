"""Number puzzles: modular factorial, bit counts, powers, Fibonacci and more."""

from itertools import product

MODULUS = 10**9 + 7

KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def mod_factorial(num):
    """Return num! modulo 10**9 + 7; 1 for any num below 2."""
    result = 1
    for factor in range(2, num + 1):
        result = result * factor % MODULUS
    return result


def count_set_bits(n):
    """Return the number of 1 bits in a non-negative integer."""
    if n < 0:
        raise ValueError("bit count needs a non-negative integer")
    return bin(n).count("1")


def counting_bits(n):
    """Return the set-bit counts of every integer from 0 to n."""
    return [count_set_bits(value) for value in range(max(n, 0) + 1)]


def fast_power(num, k):
    """Raise num to the power k (k >= 1) by repeated squaring."""
    if k < 1:
        raise ValueError("exponent must be at least 1")
    result = 1
    base = num
    while True:
        if k & 1:
            result *= base
        k >>= 1
        if not k:
            return result
        base *= base


def fibonacci(n):
    """Return the n-th Fibonacci number; 0 for n <= 0."""
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def _digit_square_sum(n):
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n):
    """Tell whether repeatedly summing squared digits of n reaches 1."""
    seen = set()
    while n not in seen:
        seen.add(n)
        n = _digit_square_sum(n)
        if n == 1:
            return True
    return False


def phone_combinations(digits):
    """Return every letter string a phone keypad digit string can spell."""
    letters = (KEYPAD.get(digit, "") for digit in digits)
    return ["".join(combo) for combo in product(*letters)]