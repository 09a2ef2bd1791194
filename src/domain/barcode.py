# src/domain/barcode.py

import random
from typing import Callable, Protocol

from src.domain.exceptions import BarcodeAllocationError

BARCODE_LENGTH = 8
BARCODE_MIN = 1
BARCODE_MAX = 99_999_999

DEFAULT_MAX_DRAWS = 1000


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def generate_barcode(rng: RandomSource | None = None) -> str:
    """
    Draw one 8-digit, zero-padded barcode.
    Format only; uniqueness is the caller's concern.
    """
    source = rng or random
    value = source.randint(BARCODE_MIN, BARCODE_MAX)
    return str(value).zfill(BARCODE_LENGTH)


def allocate_barcode(
    is_taken: Callable[[str], bool],
    rng: RandomSource | None = None,
    max_draws: int = DEFAULT_MAX_DRAWS,
) -> str:
    """
    Keep drawing until `is_taken` rejects nothing.

    Raises BarcodeAllocationError after `max_draws` taken candidates.
    """
    for _ in range(max_draws):
        barcode = generate_barcode(rng)
        if not is_taken(barcode):
            return barcode

    raise BarcodeAllocationError(
        f"No free barcode found after {max_draws} draws"
    )
