"""
app/services/smartgov_client.py

Purpose: HTTP client for the SmartGov mock API

- One method per endpoint, used by the front-end action screens
- Raises ApiError with the server's error text on non-2xx responses
- Accepts an injected httpx.Client (tests pass FastAPI's TestClient)
"""

import httpx
from typing import Any, Dict, Optional

from app.core.config import settings
from app.core.exceptions import ApiError
from app.core.logging import get_logger
from app.models.user import User

logger = get_logger(__name__)


class SmartGovClient:
    """Synchronous client for the mock backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        api_prefix: Optional[str] = None,
        timeout: float = 10.0
    ):
        self.api_prefix = settings.API_PREFIX if api_prefix is None else api_prefix
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout
        )

    def close(self):
        if self._owns_client:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        POSTs a JSON body and returns the decoded JSON response.

        Raises:
            ApiError: On any non-2xx status, or when the backend is unreachable
        """
        url = f"{self.api_prefix}{path}"
        try:
            response = self._http.post(url, json=body)
        except httpx.HTTPError as e:
            logger.error(f"❌ Request to {url} failed: {e}")
            raise ApiError(f"Could not reach SmartGov services: {e}", status_code=503, code="UNAVAILABLE") from e

        if response.is_success:
            return response.json()

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        message = payload.get("error") or response.reason_phrase or "Request failed"
        logger.warning(f"⚠️ {url} returned {response.status_code}: {message}")
        raise ApiError(message, status_code=response.status_code, code=payload.get("code", "API_ERROR"))

    def login(self, phone: str) -> User:
        data = self._post("/auth/login", {"phone": phone})
        return User(**data)

    def pay(self, token: Optional[str], amount: Any, tax_type: Optional[str]) -> Dict[str, Any]:
        return self._post("/payments/pay", {"token": token, "amount": amount, "taxType": tax_type})

    def register_business(self, token: Optional[str], data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._post("/pacra/register", {"token": token, "data": data or {}})

    def apply_for_id(self, token: Optional[str]) -> Dict[str, Any]:
        return self._post("/id/apply", {"token": token})

    def submit_report(self, details: Optional[str] = None, token: Optional[str] = None) -> Dict[str, Any]:
        body = {"details": details}
        if token:
            body["token"] = token
        return self._post("/reports/submit", body)
