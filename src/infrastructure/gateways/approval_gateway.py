# src/infrastructure/gateways/approval_gateway.py

import logging

import httpx

from src.infrastructure.gateways.http import GatewayResult, post_json

logger = logging.getLogger(__name__)

APPROVED_MESSAGE = "order successfully approved"

REJECTION_MESSAGES: dict[str, str] = {
    "event cancelled": "Event was cancelled",
    "no tickets": "No tickets available",
    "no seats": "No seats available",
    "fan removed": "Fan was removed",
}
FALLBACK_REJECTION_MESSAGE = "Approval rejected"


class ApprovalGateway:
    """Requests final approval for a booked order. Single attempt."""

    def __init__(self, client: httpx.Client, url: str):
        self.client = client
        self.url = url

    def approve_order(self, barcode: str) -> GatewayResult:
        body = post_json(self.client, "approval", self.url, {"barcode": barcode})

        if body.get("message") == APPROVED_MESSAGE:
            return GatewayResult(success=True, message="Order successfully approved")

        reason = body.get("message") or body.get("error")
        message = rejection_message(reason)
        logger.info(
            "Approval rejected. barcode=%s reason=%r message=%r",
            barcode,
            reason,
            message,
        )
        return GatewayResult(success=False, message=message)


def rejection_message(reason) -> str:
    """
    Map the approver's reason code to its message.

    Codes outside REJECTION_MESSAGES, and missing or non-string
    codes, yield FALLBACK_REJECTION_MESSAGE ("Approval rejected").
    """
    if isinstance(reason, str):
        return REJECTION_MESSAGES.get(reason.strip().lower(), FALLBACK_REJECTION_MESSAGE)
    return FALLBACK_REJECTION_MESSAGE
