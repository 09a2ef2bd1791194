# src/infrastructure/gateways/booking_gateway.py

import logging
from typing import Callable

import httpx

from src.infrastructure.db.models import Order
from src.infrastructure.gateways.http import GatewayResult, post_json

logger = logging.getLogger(__name__)

BARCODE_TAKEN_ERROR = "barcode already exists"
DEFAULT_MAX_ATTEMPTS = 3


class BookingGateway:
    """Reserves an order with the external booking API."""

    def __init__(
        self,
        client: httpx.Client,
        url: str,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self.client = client
        self.url = url
        self.max_attempts = max_attempts

    def book_order(
        self,
        order: Order,
        regenerate_barcode: Callable[[], str],
    ) -> GatewayResult:
        """
        Book `order`, replacing `order.barcode` whenever the API
        reports it as taken. Each collision consumes one attempt.

        Only the collision error is inspected; any other body counts
        as a successful booking.
        """
        for attempt in range(1, self.max_attempts + 1):
            body = post_json(self.client, "booking", self.url, _booking_payload(order))

            if body.get("error") != BARCODE_TAKEN_ERROR:
                logger.info(
                    "Order booked. barcode=%s attempt=%s",
                    order.barcode,
                    attempt,
                )
                return GatewayResult(success=True, message="Order successfully booked")

            logger.warning(
                "Booking API rejected barcode %s as taken (attempt %s/%s)",
                order.barcode,
                attempt,
                self.max_attempts,
            )
            if attempt < self.max_attempts:
                order.barcode = regenerate_barcode()

        logger.warning(
            "Booking gave up after %s barcode collisions. event_id=%s",
            self.max_attempts,
            order.event_id,
        )
        return GatewayResult(success=False, message="Failed to book the order")


def _booking_payload(order: Order) -> dict:
    return {
        "event_id": order.event_id,
        "event_date": order.event_date.isoformat(sep=" "),
        "ticket_adult_price": order.ticket_adult_price,
        "ticket_adult_quantity": order.ticket_adult_quantity,
        "ticket_kid_price": order.ticket_kid_price,
        "ticket_kid_quantity": order.ticket_kid_quantity,
        "barcode": order.barcode,
    }
