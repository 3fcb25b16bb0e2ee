"""
arrays.py — Array Datasets
===========================
Producers for the sorting / searching families:

    • generate_random_array – N uniform ints in [low, high]
    • parse_custom_array    – "5, 3, 8, 1" typed by the user
"""

import random
from typing import List, Optional

from utils.errors import InvalidInput


def generate_random_array(
    size: int,
    low: int = 5,
    high: int = 500,
    seed: Optional[int] = None,
) -> List[int]:
    if size < 0:
        raise InvalidInput(f"Array size must be non-negative, got {size}", field="size")
    if low > high:
        raise InvalidInput(f"Empty value range [{low}, {high}]", field="range")
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


def parse_custom_array(text: str, low: int = 1, high: int = 500) -> List[int]:
    """
    Comma-separated ints.  Tokens that are not ints or fall outside
    [low, high] are dropped; an input with nothing usable is rejected.
    """
    values: List[int] = []
    for token in text.split(","):
        token = token.strip()
        try:
            value = int(token)
        except ValueError:
            continue
        if low <= value <= high:
            values.append(value)

    if not values:
        raise InvalidInput(
            f"Enter numbers between {low} and {high} separated by commas", field="text"
        )
    return values
