from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain.pricing import MAX_AMOUNT, compute_total_price

Amount = Annotated[int, Field(ge=0, le=MAX_AMOUNT)]


class StoreOrderRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    event_id: str = Field(min_length=1)
    event_date: datetime
    ticket_adult_price: Amount
    ticket_adult_quantity: Amount
    # Must be sent, but null is accepted and counted as zero.
    ticket_kid_price: Amount | None
    ticket_kid_quantity: Amount | None
    user_id: str = Field(min_length=1)

    @model_validator(mode="after")
    def total_fits_column(self) -> "StoreOrderRequest":
        total = compute_total_price(
            self.ticket_adult_price,
            self.ticket_adult_quantity,
            self.ticket_kid_price,
            self.ticket_kid_quantity,
        )
        if total > MAX_AMOUNT:
            raise ValueError(f"total price {total} exceeds {MAX_AMOUNT}")
        return self


class MessageResponse(BaseModel):
    message: str
