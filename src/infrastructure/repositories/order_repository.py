# src/infrastructure/repositories/order_repository.py

from sqlalchemy.orm import Session
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from src.infrastructure.db.models import Order
from src.domain.exceptions import BarcodeConflictError


class OrderRepository:

    def __init__(self, db: Session):
        self.db = db

    def barcode_exists(self, barcode: str) -> bool:
        stmt = select(Order.id).where(Order.barcode == barcode)
        return self.db.execute(stmt).first() is not None

    def get_by_barcode(self, barcode: str) -> Order | None:
        stmt = select(Order).where(Order.barcode == barcode)
        return self.db.execute(stmt).scalar_one_or_none()

    def count(self) -> int:
        stmt = select(func.count()).select_from(Order)
        return self.db.execute(stmt).scalar_one()

    def add(self, order: Order) -> Order:
        """
        INSERT the order and flush immediately.
        The unique constraint on barcode is the authority;
        a violation is rolled back and raised as BarcodeConflictError.
        """
        self.db.add(order)
        try:
            self.db.flush()
        except IntegrityError as exc:
            self.db.rollback()
            if self.barcode_exists(order.barcode):
                raise BarcodeConflictError(order.barcode) from exc
            raise

        return order
