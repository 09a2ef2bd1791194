from src.domain.pricing import MAX_AMOUNT, compute_total_price


def test_total_sums_adult_and_kid_tickets():
    assert compute_total_price(700, 2, 450, 3) == 700 * 2 + 450 * 3


def test_missing_kid_fields_count_as_zero():
    assert compute_total_price(700, 1) == 700
    assert compute_total_price(700, 1, None, None) == 700
    assert compute_total_price(700, 1, 450, None) == 700


def test_zero_quantities():
    assert compute_total_price(700, 0, 450, 0) == 0


def test_amount_limit_matches_int4_column():
    assert MAX_AMOUNT == 2**31 - 1
