import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_order_service
from src.api.schemas.schemas import MessageResponse, StoreOrderRequest
from src.application.order_service import OrderPlacementService, OrderRequest
from src.domain.exceptions import (
    BarcodeAllocationError,
    BarcodeConflictError,
    ExternalServiceError,
)


router = APIRouter()
logger = logging.getLogger(__name__)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.get("/health")
def health():
    return {"message": "Order booking service is running"}


@router.post(
    "/storeOrder",
    response_model=MessageResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_409_CONFLICT: {"model": MessageResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": MessageResponse},
    },
)
def store_order(
    request: StoreOrderRequest,
    service: OrderPlacementService = Depends(get_order_service),
):
    order_request = OrderRequest(
        event_id=request.event_id,
        event_date=request.event_date,
        ticket_adult_price=request.ticket_adult_price,
        ticket_adult_quantity=request.ticket_adult_quantity,
        ticket_kid_price=request.ticket_kid_price,
        ticket_kid_quantity=request.ticket_kid_quantity,
        user_id=request.user_id,
    )

    try:
        result = service.place_order(order_request)
    except ExternalServiceError as exc:
        return _message(status.HTTP_502_BAD_GATEWAY, str(exc))
    except BarcodeConflictError as exc:
        logger.warning("Order not stored, barcode taken at insert. barcode=%s", exc.barcode)
        return _message(status.HTTP_409_CONFLICT, str(exc))
    except BarcodeAllocationError as exc:
        logger.error("Barcode allocation failed: %s", exc)
        return _message(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))

    if not result.approved:
        return _message(status.HTTP_400_BAD_REQUEST, result.message)

    return _message(status.HTTP_200_OK, result.message)
