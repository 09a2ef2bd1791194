# src/infrastructure/gateways/http.py

import logging
from dataclasses import dataclass

import httpx

from src.domain.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewayResult:
    success: bool
    message: str


def post_json(client: httpx.Client, service: str, url: str, payload: dict) -> dict:
    """
    POST `payload` and return the decoded JSON object.

    The status code is not checked: both external APIs report
    business outcomes (collisions, rejections) with 4xx bodies.
    Anything that is not a JSON object raises ExternalServiceError.
    """
    try:
        response = client.post(url, json=payload)
    except httpx.HTTPError as exc:
        logger.exception("%s API request to %s failed", service, url)
        raise ExternalServiceError(service, str(exc) or type(exc).__name__) from exc

    try:
        body = response.json()
    except ValueError as exc:
        logger.error(
            "%s API returned a non-JSON body. status=%s",
            service,
            response.status_code,
        )
        raise ExternalServiceError(service, "malformed response body") from exc

    if not isinstance(body, dict):
        logger.error("%s API returned %s instead of an object", service, type(body).__name__)
        raise ExternalServiceError(service, "malformed response body")

    return body
