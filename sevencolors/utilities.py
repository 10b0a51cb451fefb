"""Small numeric and random helpers shared by the game and its agents."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence, Sized
from typing import Any

MOVE_COLORS = 7


def random_bit_index(n: int) -> int:
    """Return the index of a randomly chosen set bit among the low 8 bits of ``n``."""
    indices = [i for i in range(8) if n >> i & 1]
    if not indices:
        raise ValueError("no bit is set in the mask")
    return random.choice(indices)


def get_random_scalar(low: int, high: int) -> int:
    """Return a random integer in the closed range ``[low, high]``."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return random.randint(low, high)


def clip(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    if value > high:
        return high
    if value < low:
        return low
    return value


def condense(moves: Sequence[Sized]) -> int:
    """Pack the seven move collections into a bit mask of the non-empty ones."""
    return sum(1 << i for i, queue in zip(range(MOVE_COLORS), moves) if len(queue) > 0)


def decondense(mask: int) -> list[int]:
    """Unpack a move mask into seven 0/1 flags."""
    return [(mask >> i) & 1 for i in range(MOVE_COLORS)]


def exp_approx(x: float) -> float:
    """Cheap rational approximation of ``exp(x)`` near zero."""
    return 1 / (1 - x * (1 - x / 2))


def tanh_approx(x: float) -> float:
    """Cheap rational approximation of ``tanh(x)``."""
    return x * (27 + x * x) / (27 + 9 * x * x)


def time_function(name: str, func: Callable[[], Any]) -> float:
    """Run ``func``, report its scaled processor time and return that figure."""
    start = time.process_time()
    func()
    elapsed = (time.process_time() - start) / 10
    print(f"Execution time of {name}: {elapsed:.6f} seconds")
    return elapsed