
# Prices, quantities and totals are stored in 32-bit signed columns.
MAX_AMOUNT = 2_147_483_647


def compute_total_price(
    adult_price: int,
    adult_quantity: int,
    kid_price: int | None = None,
    kid_quantity: int | None = None,
) -> int:
    """Adult and kid subtotals; absent kid fields count as zero."""
    return adult_price * adult_quantity + (kid_price or 0) * (kid_quantity or 0)
