import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from src.domain.barcode import DEFAULT_MAX_DRAWS, RandomSource, allocate_barcode
from src.domain.pricing import compute_total_price
from src.domain.state_machine import OrderStateMachine, OrderStatus
from src.infrastructure.db.models import Order
from src.infrastructure.gateways.approval_gateway import APPROVED_MESSAGE, ApprovalGateway
from src.infrastructure.gateways.booking_gateway import BookingGateway
from src.infrastructure.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)

BOOKING_CANCELLED_MESSAGE = "Order cancelled"


@dataclass(frozen=True)
class OrderRequest:
    event_id: str
    event_date: datetime
    ticket_adult_price: int
    ticket_adult_quantity: int
    ticket_kid_price: int | None
    ticket_kid_quantity: int | None
    user_id: str


@dataclass(frozen=True)
class PlacementResult:
    approved: bool
    message: str
    barcode: str | None = None


class OrderPlacementService:
    """
    Books, approves and finally stores one order.

    Nothing is written unless both external calls succeed.
    """

    def __init__(
        self,
        db: Session,
        booking_gateway: BookingGateway,
        approval_gateway: ApprovalGateway,
        rng: RandomSource | None = None,
        barcode_max_draws: int = DEFAULT_MAX_DRAWS,
    ):
        self.db = db
        self.order_repository = OrderRepository(db)
        self.booking_gateway = booking_gateway
        self.approval_gateway = approval_gateway
        self.rng = rng
        self.barcode_max_draws = barcode_max_draws

    def place_order(self, request: OrderRequest) -> PlacementResult:
        order = self._build_order(request)

        booking = self.booking_gateway.book_order(order, self._new_barcode)
        if not booking.success:
            return PlacementResult(approved=False, message=BOOKING_CANCELLED_MESSAGE)

        approval = self.approval_gateway.approve_order(order.barcode)
        if not approval.success:
            return PlacementResult(approved=False, message=approval.message)

        self._transition(order, OrderStatus.APPROVED)
        self.order_repository.add(order)
        logger.info(
            "Order stored. barcode=%s user_id=%s total_price=%s",
            order.barcode,
            order.user_id,
            order.total_price,
        )

        return PlacementResult(
            approved=True,
            message=APPROVED_MESSAGE,
            barcode=order.barcode,
        )

    def _build_order(self, request: OrderRequest) -> Order:
        return Order(
            event_id=request.event_id,
            event_date=request.event_date,
            ticket_adult_price=request.ticket_adult_price,
            ticket_adult_quantity=request.ticket_adult_quantity,
            ticket_kid_price=request.ticket_kid_price,
            ticket_kid_quantity=request.ticket_kid_quantity,
            barcode=self._new_barcode(),
            user_id=request.user_id,
            total_price=compute_total_price(
                request.ticket_adult_price,
                request.ticket_adult_quantity,
                request.ticket_kid_price,
                request.ticket_kid_quantity,
            ),
            status=OrderStatus.PENDING,
        )

    def _new_barcode(self) -> str:
        return allocate_barcode(
            self.order_repository.barcode_exists,
            rng=self.rng,
            max_draws=self.barcode_max_draws,
        )

    def _transition(self, order: Order, to_status: OrderStatus) -> None:
        OrderStateMachine.validate_transition(order.status, to_status)
        order.status = to_status
