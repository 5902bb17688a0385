"""HTTP client for upstream data providers."""
import httpx

from ...config import settings


def client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.http_timeout_s)
