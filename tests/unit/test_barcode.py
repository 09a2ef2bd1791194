import random

import pytest

from src.domain.barcode import allocate_barcode, generate_barcode
from src.domain.exceptions import BarcodeAllocationError
from tests.fakes import ScriptedRandom


def test_barcode_is_zero_padded_to_eight_digits():
    assert generate_barcode(ScriptedRandom([42])) == "00000042"
    assert generate_barcode(ScriptedRandom([1])) == "00000001"
    assert generate_barcode(ScriptedRandom([99_999_999])) == "99999999"


def test_random_barcodes_are_always_eight_digits():
    rng = random.Random(1234)
    for _ in range(500):
        barcode = generate_barcode(rng)
        assert len(barcode) == 8
        assert barcode.isdigit()
        assert barcode != "00000000"


def test_allocate_skips_taken_barcodes():
    taken = {"00000001", "00000002"}
    rng = ScriptedRandom([1, 2, 3])

    assert allocate_barcode(taken.__contains__, rng=rng) == "00000003"
    assert rng.calls == 3


def test_allocate_gives_up_after_max_draws():
    rng = ScriptedRandom([7] * 5)

    with pytest.raises(BarcodeAllocationError):
        allocate_barcode(lambda barcode: True, rng=rng, max_draws=5)

    assert rng.calls == 5
