"""Appium client speaking the W3C WebDriver HTTP protocol.

This module provides:
- ElementRef for element ids returned by the server
- AppiumClient for session, lookup and interaction endpoints

There is no retry layer: a failed call raises AppiumHTTPError and the
caller decides whether that is a default value or a failed step.
"""

import base64
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from petspot_e2e.core.exceptions import AppiumHTTPError, DriverSessionError

log = structlog.get_logger(__name__)

W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"
LEGACY_ELEMENT_KEY = "ELEMENT"


@dataclass(frozen=True)
class ElementRef:
    """Session-scoped handle to a UI node; invalid after re-render."""

    element_id: str


def _unwrap_value(payload: dict[str, Any]) -> Any:
    # W3C responses wrap the result in {"value": ...}
    if "value" in payload:
        return payload["value"]
    return payload


def _element_id(element_obj: Any) -> str:
    if not isinstance(element_obj, dict):
        raise ValueError(f"Unexpected element payload type: {type(element_obj)}")
    for key in (W3C_ELEMENT_KEY, LEGACY_ELEMENT_KEY):
        if element_obj.get(key):
            return str(element_obj[key])
    raise ValueError(f"Could not extract element id from keys: {list(element_obj)}")


class AppiumClient:
    """Synchronous Appium client.

    Attributes:
        server_url: Appium server base URL.
        timeout: Per-request timeout in seconds.
        session_id: Active session id, None before create_session().

    Example:
        client = AppiumClient("http://127.0.0.1:4723")
        client.create_session({"capabilities": {"alwaysMatch": caps}})
        tabs = client.find_elements("xpath", "//*[@content-desc='bottomNav.homeTab']")
        client.click(tabs[0])
        client.delete_session()
    """

    def __init__(self, server_url: str, timeout: float = 60.0) -> None:
        if not server_url:
            raise ValueError("server_url is required")
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self.session_id: str | None = None
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None:
            self._client = httpx.Client(base_url=self.server_url, timeout=self.timeout)
            log.debug("appium_http_client_created", server_url=self.server_url)
        return self._client

    def close(self) -> None:
        """Delete the session (if any) and release the HTTP client."""
        try:
            self.delete_session()
        finally:
            if self._client is not None:
                self._client.close()
                self._client = None

    def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        url = f"{self.server_url}{path}"
        try:
            response = self._get_client().request(method, path, json=json)
        except httpx.HTTPError as e:
            log.warning("appium_request_failed", method=method, path=path, error=str(e))
            raise AppiumHTTPError(
                f"Failed to call Appium server: {e}", method=method, url=url
            ) from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            details = None
            if isinstance(payload, dict):
                value = _unwrap_value(payload)
                if isinstance(value, dict):
                    details = value.get("error") or value.get("message")
            raise AppiumHTTPError(
                f"Appium HTTP {response.status_code} for {method} {path}"
                + (f": {details}" if details else ""),
                method=method,
                url=url,
                status_code=response.status_code,
                response_json=payload if isinstance(payload, dict) else None,
            )

        if not isinstance(payload, dict):
            raise AppiumHTTPError(
                f"Appium returned non-JSON response for {method} {path}",
                method=method,
                url=url,
                status_code=response.status_code,
            )
        return payload

    def _session_path(self, suffix: str) -> str:
        if not self.session_id:
            raise DriverSessionError("No active Appium session. Call create_session() first.")
        return f"/session/{self.session_id}{suffix}"

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def create_session(self, session_payload: dict[str, Any]) -> str:
        """Create an Appium session.

        Args:
            session_payload: WebDriver new-session body, usually
                {"capabilities": {"alwaysMatch": {...}, "firstMatch": [{}]}}.

        Returns:
            The new session id.

        Raises:
            AppiumHTTPError: If the server rejects the payload or omits the id.
        """
        if not session_payload:
            raise ValueError("session_payload must be a non-empty dict")

        response = self._request("POST", "/session", json=session_payload)
        value = _unwrap_value(response)
        session_id = value.get("sessionId") if isinstance(value, dict) else None
        session_id = session_id or response.get("sessionId")
        if not session_id:
            raise AppiumHTTPError(
                "Appium did not return a sessionId",
                method="POST",
                url=f"{self.server_url}/session",
                response_json=response,
            )

        self.session_id = str(session_id)
        log.info("appium_session_created", session_id=self.session_id)
        return self.session_id

    def delete_session(self) -> None:
        if not self.session_id:
            return
        session_id = self.session_id
        try:
            self._request("DELETE", f"/session/{session_id}")
            log.info("appium_session_deleted", session_id=session_id)
        finally:
            self.session_id = None

    # -------------------------------------------------------------------------
    # Elements
    # -------------------------------------------------------------------------

    def find_elements(self, using: str, value: str) -> list[ElementRef]:
        """Find all elements matching a strategy; empty list when none match."""
        if not using or not value:
            raise ValueError("'using' and 'value' are required to find elements")
        response = self._request(
            "POST", self._session_path("/elements"), json={"using": using, "value": value}
        )
        items = _unwrap_value(response)
        if not isinstance(items, list):
            raise AppiumHTTPError(
                "Unexpected /elements response shape (expected list)",
                method="POST",
                url=f"{self.server_url}{self._session_path('/elements')}",
                response_json=response,
            )
        return [ElementRef(element_id=_element_id(item)) for item in items]

    def click(self, element: ElementRef) -> None:
        self._request("POST", self._session_path(f"/element/{element.element_id}/click"), json={})

    def send_keys(self, element: ElementRef, text: str) -> None:
        # Servers differ on `text` vs `value`; send both.
        self._request(
            "POST",
            self._session_path(f"/element/{element.element_id}/value"),
            json={"text": text, "value": list(text)},
        )

    def get_element_text(self, element: ElementRef) -> str:
        value = _unwrap_value(
            self._request("GET", self._session_path(f"/element/{element.element_id}/text"))
        )
        return value if isinstance(value, str) else ""

    def get_element_attribute(self, element: ElementRef, name: str) -> str | None:
        value = _unwrap_value(
            self._request(
                "GET", self._session_path(f"/element/{element.element_id}/attribute/{name}")
            )
        )
        return None if value is None else str(value)

    def is_element_displayed(self, element: ElementRef) -> bool:
        value = _unwrap_value(
            self._request("GET", self._session_path(f"/element/{element.element_id}/displayed"))
        )
        return bool(value)

    def is_element_enabled(self, element: ElementRef) -> bool:
        value = _unwrap_value(
            self._request("GET", self._session_path(f"/element/{element.element_id}/enabled"))
        )
        return bool(value)

    # -------------------------------------------------------------------------
    # Screen
    # -------------------------------------------------------------------------

    def get_page_source(self) -> str:
        value = _unwrap_value(self._request("GET", self._session_path("/source")))
        if not isinstance(value, str):
            raise AppiumHTTPError(
                "Unexpected /source response shape (expected string)",
                method="GET",
                url=f"{self.server_url}{self._session_path('/source')}",
            )
        return value

    def get_screenshot_png_bytes(self) -> bytes:
        value = _unwrap_value(self._request("GET", self._session_path("/screenshot")))
        if not isinstance(value, str):
            raise AppiumHTTPError(
                "Unexpected /screenshot response shape (expected base64 string)",
                method="GET",
                url=f"{self.server_url}{self._session_path('/screenshot')}",
            )
        return base64.b64decode(value)
