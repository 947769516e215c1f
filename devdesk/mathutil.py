"""Numeric helpers: rounding, clamping, integer arithmetic, geometry and randomness."""

from __future__ import annotations

import math
import random
from typing import Iterable


def _round_half_away(x: float) -> float:
    """Round to the nearest integer, halves away from zero, without double rounding."""
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += int(math.copysign(1, x))
    return float(whole)


def round_int(x: float) -> int:
    """Round to the nearest integer; halves are rounded away from zero."""
    return int(_round_half_away(x))


def round_to(x: float, places: int) -> float:
    """Round to the given number of decimal places, halves away from zero."""
    shift = math.pow(10, places)
    return _round_half_away(x * shift) / shift


def floor_int(x: float) -> int:
    """Return the largest integer not greater than x."""
    return math.floor(x)


def ceil_int(x: float) -> int:
    """Return the smallest integer not less than x."""
    return math.ceil(x)


def clamp(value, low, high):
    """Limit value to the range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def is_even(n: int) -> bool:
    """Return True when n is even."""
    return n % 2 == 0


def is_odd(n: int) -> bool:
    """Return True when n is odd."""
    return n % 2 != 0


def is_power_of_two(n: int) -> bool:
    """Return True when n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def _trunc_rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncated toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm with truncated remainders."""
    while b != 0:
        a, b = b, _trunc_rem(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    g = gcd(a, b)
    if g == 0:
        raise ZeroDivisionError("lcm of zero and zero is undefined")
    return _trunc_div(a, g) * b


def factorial(n: int) -> int:
    """Return n!, with 1 for every n not greater than one."""
    if n <= 1:
        return 1
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; n itself when n is at most one."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180.0 / math.pi


def random_int(low: int, high: int) -> int:
    """Return a random integer in [low, high); raises ValueError on an empty range."""
    if high <= low:
        raise ValueError("random_int needs low < high")
    return random.randrange(low, high)


def random_float(low: float, high: float) -> float:
    """Return a random float in [low, high)."""
    return low + random.random() * (high - low)


def random_bool() -> bool:
    """Return True or False at random."""
    return random.getrandbits(1) == 1


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + t * (b - a)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance_squared(x1, y1, x2, y2))


def distance_squared(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared Euclidean distance between two points."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def normalize(x: float, y: float) -> tuple[float, float]:
    """Scale a vector to unit length; a near-zero vector gives (0, 0)."""
    length = math.sqrt(x * x + y * y)
    if length < 1e-10:
        return 0.0, 0.0
    return x / length, y / length


def average(values: Iterable[float]) -> float:
    """Arithmetic mean of the values, or 0 for none."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)