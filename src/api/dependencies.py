from collections.abc import Iterator

import httpx
from fastapi import Depends
from sqlalchemy.orm import Session

from src.application.order_service import OrderPlacementService
from src.config import Settings, get_settings
from src.infrastructure.db.session import SessionLocal
from src.infrastructure.gateways.approval_gateway import ApprovalGateway
from src.infrastructure.gateways.booking_gateway import BookingGateway


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_http_client(settings: Settings = Depends(get_settings)) -> Iterator[httpx.Client]:
    with httpx.Client(timeout=settings.external_api_timeout) as client:
        yield client


def get_booking_gateway(
    client: httpx.Client = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> BookingGateway:
    return BookingGateway(
        client,
        settings.booking_api_url,
        max_attempts=settings.booking_max_attempts,
    )


def get_approval_gateway(
    client: httpx.Client = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ApprovalGateway:
    return ApprovalGateway(client, settings.approval_api_url)


def get_order_service(
    db: Session = Depends(get_db),
    booking_gateway: BookingGateway = Depends(get_booking_gateway),
    approval_gateway: ApprovalGateway = Depends(get_approval_gateway),
    settings: Settings = Depends(get_settings),
) -> OrderPlacementService:
    return OrderPlacementService(
        db,
        booking_gateway,
        approval_gateway,
        barcode_max_draws=settings.barcode_max_draws,
    )
