import random
from typing import Sequence

CPU_MOVES = (-1, 0, 1)


def evaluate(pair: Sequence[int], fallback: int) -> int:
    """Next round value for a pair of numbers.

    The sum is divided by three when it divides evenly; otherwise the round
    does not advance and ``fallback`` comes back unchanged.
    """
    total = sum(pair)
    if total % 3 == 0:
        return total // 3
    return fallback


def is_winning(value: int) -> bool:
    return abs(value) == 1


def draw_opening_number(low: int = 1999, high: int = 9999) -> int:
    return random.randint(low, high)


def draw_cpu_move() -> int:
    return random.choice(CPU_MOVES)
