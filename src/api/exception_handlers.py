import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    missing = [
        ".".join(str(part) for part in error["loc"] if part != "body")
        for error in exc.errors()
        if error.get("type") == "missing"
    ]
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())

    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
    else:
        details = "; ".join(error["msg"] for error in exc.errors())
        message = f"Invalid order request: {details}"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
