# src/infrastructure/db/models.py

from sqlalchemy import (
    String,
    Integer,
    DateTime,
    Enum,
    UniqueConstraint,
    CheckConstraint,
    ForeignKey,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime

from src.infrastructure.db.session import Base
from src.domain.state_machine import OrderStatus


class Order(Base):
    """
    Order table. A row exists only for orders that were
    both booked and approved by the external APIs.
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[str] = mapped_column(String(64), nullable=False)
    event_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ticket_adult_price: Mapped[int] = mapped_column(Integer, nullable=False)
    ticket_adult_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    ticket_kid_price: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ticket_kid_quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    barcode: Mapped[str] = mapped_column(String(8), nullable=False)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    total_price: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, name="order_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    tickets: Mapped[list["Ticket"]] = relationship(back_populates="order")

    __table_args__ = (
        UniqueConstraint("barcode", name="uq_order_barcode"),
        CheckConstraint("ticket_adult_quantity >= 0", name="ck_adult_quantity_nonnegative"),
        CheckConstraint("total_price >= 0", name="ck_total_price_nonnegative"),
    )


class TicketType(Base):
    __tablename__ = "ticket_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    tickets: Mapped[list["Ticket"]] = relationship(back_populates="ticket_type")


class Ticket(Base):
    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("orders.id"),
        nullable=False,
    )
    ticket_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ticket_types.id"),
        nullable=False,
    )
    barcode: Mapped[str] = mapped_column(String(8), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    order: Mapped[Order] = relationship(back_populates="tickets")
    ticket_type: Mapped[TicketType] = relationship(back_populates="tickets")

    __table_args__ = (
        UniqueConstraint("barcode", name="uq_ticket_barcode"),
        CheckConstraint("price >= 0", name="ck_ticket_price_nonnegative"),
    )
