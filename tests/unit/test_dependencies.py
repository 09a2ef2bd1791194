import httpx

from src.api.dependencies import get_http_client
from src.config import get_settings


def test_http_client_uses_configured_timeout(monkeypatch):
    monkeypatch.setenv("EXTERNAL_API_TIMEOUT", "2.5")

    clients = get_http_client(get_settings())
    client = next(clients)
    try:
        assert client.timeout == httpx.Timeout(2.5)
    finally:
        clients.close()

    assert client.is_closed


def test_http_client_default_timeout(monkeypatch):
    monkeypatch.delenv("EXTERNAL_API_TIMEOUT", raising=False)

    clients = get_http_client(get_settings())
    client = next(clients)
    try:
        assert client.timeout == httpx.Timeout(10.0)
    finally:
        clients.close()
