

class OrderBookingError(Exception):
    """
    Base exception for all domain-level errors
    inside the order booking service.
    """


class InvalidStateTransitionError(OrderBookingError):
    """
    Raised when an illegal order state transition is attempted.
    """

    def __init__(self, from_state: str, to_state: str):
        self.from_state = from_state
        self.to_state = to_state

        message = (
            f"Illegal state transition attempted: "
            f"{from_state} -> {to_state}"
        )
        super().__init__(message)


class BarcodeConflictError(OrderBookingError):
    """Raised when a barcode is already taken by a stored order."""

    def __init__(self, barcode: str):
        self.barcode = barcode
        super().__init__(f"Barcode {barcode} is already in use")


class BarcodeAllocationError(OrderBookingError):
    """Raised when no free barcode was found within the draw limit."""


class ExternalServiceError(OrderBookingError):
    """
    Raised when the booking or approval API is unreachable
    or answers with something that is not a JSON object.
    """

    def __init__(self, service: str, reason: str):
        self.service = service
        self.reason = reason
        super().__init__(f"{service} API unavailable: {reason}")
