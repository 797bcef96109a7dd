"""Backend REST client used to set up scenario test data.

Scenarios create the announcements they need instead of relying on seed
data. Every announcement created through a client is remembered and
removed again by ``cleanup``.

Example:
    api = BackendApiClient("http://localhost:3000", admin_token="secret")
    created = api.create_announcement(pet_name="Rex", species="DOG")
    ...
    api.cleanup()
    api.close()
"""

from datetime import date, timedelta
from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ConfigDict

from petspot_e2e.core.exceptions import BackendAPIError

log = structlog.get_logger(__name__)

ANNOUNCEMENTS_PATH = "/api/v1/announcements"
ADMIN_ANNOUNCEMENTS_PATH = "/api/admin/v1/announcements"

# Default location of seeded announcements (Wroclaw).
DEFAULT_LATITUDE = 51.1
DEFAULT_LONGITUDE = 17.0

# 1x1 JPEG. The backend only lists announcements that have a photo.
PLACEHOLDER_JPEG = bytes.fromhex(
    "FFD8FFE000104A46494600010100000100010000FFDB00430008060607060508"
    "0707070909080A0C140D0C0B0B0C1912130F141D1A1F1E1D1A1C1C20242E2720"
    "222C231C1C2837292C30313434341F27393D38323C2E333432FFC0000B080001"
    "000101011100FFC4001F00000105010101010101000000000000000001020304"
    "05060708090A0BFFC400B5100002010303020403050504040000017D01020300"
    "041105122131410613516107227114328191A1082342B1C11552D1F024336272"
    "82090A161718191A25262728292A3435363738393A434445464748494A535455"
    "565758595A636465666768696A737475767778797A838485868788898A929394"
    "95969798999AA2A3A4A5A6A7A8A9AAB2B3B4B5B6B7B8B9BAC2C3C4C5C6C7C8C9"
    "CAD2D3D4D5D6D7D8D9DAE1E2E3E4E5E6E7E8E9EAF1F2F3F4F5F6F7F8F9FAFFDA"
    "0008010100003F00FBD500000000FFD9"
)


class CreatedAnnouncement(BaseModel):
    """Announcement created for a scenario."""

    model_config = ConfigDict(frozen=True)

    id: str
    management_password: str
    pet_name: str | None = None


class BackendApiClient:
    """Synchronous client for the announcement endpoints.

    Attributes:
        base_url: Backend base URL.
        admin_token: Sent as ``Authorization`` on admin deletes.
        timeout: Per-request timeout in seconds.
        created: Announcements created through this client, oldest first.
    """

    def __init__(self, base_url: str, admin_token: str = "", timeout: float = 30.0) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self.base_url = base_url.rstrip("/")
        self.admin_token = admin_token
        self.timeout = timeout
        self.created: list[CreatedAnnouncement] = []
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None:
            self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout)
            log.debug("backend_http_client_created", base_url=self.base_url)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _request(
        self, method: str, path: str, expected: tuple[int, ...], **kwargs: Any
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self._get_client().request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log.warning("backend_request_failed", method=method, path=path, error=str(e))
            raise BackendAPIError(
                f"Failed to call backend: {e}", method=method, url=url
            ) from e

        if response.status_code not in expected:
            raise BackendAPIError(
                f"Backend HTTP {response.status_code} for {method} {path}: {response.text}",
                method=method,
                url=url,
                status_code=response.status_code,
            )
        return response

    # -------------------------------------------------------------------------
    # Announcements
    # -------------------------------------------------------------------------

    def create_announcement(
        self,
        pet_name: str | None = None,
        species: str = "DOG",
        sex: str = "UNKNOWN",
        status: str = "MISSING",
        latitude: float = DEFAULT_LATITUDE,
        longitude: float = DEFAULT_LONGITUDE,
        last_seen_date: date | None = None,
        **optional: Any,
    ) -> CreatedAnnouncement:
        """Create an announcement and give it a placeholder photo.

        Args:
            pet_name: Optional pet name; also used in log events.
            species: DOG, CAT, BIRD or OTHER.
            sex: MALE, FEMALE or UNKNOWN.
            status: MISSING or FOUND.
            latitude: Last seen latitude.
            longitude: Last seen longitude.
            last_seen_date: Defaults to yesterday; the backend may run in UTC
                and rejects dates in the future.
            **optional: Further API fields as named by the API, e.g.
                ``breed``, ``age``, ``description``, ``microchipNumber``,
                ``email``, ``phone``, ``reward``.

        Raises:
            BackendAPIError: If the backend does not answer 201.
        """
        seen = last_seen_date or date.today() - timedelta(days=1)
        body: dict[str, Any] = {
            "species": species,
            "sex": sex,
            "status": status,
            "locationLatitude": latitude,
            "locationLongitude": longitude,
            "lastSeenDate": seen.isoformat(),
            **optional,
        }
        if pet_name is not None:
            body["petName"] = pet_name

        payload = self._request("POST", ANNOUNCEMENTS_PATH, (201,), json=body).json()
        created = CreatedAnnouncement(
            id=str(payload["id"]),
            management_password=str(payload["managementPassword"]),
            pet_name=pet_name,
        )
        self.created.append(created)
        log.info("announcement_created", announcement_id=created.id, pet_name=pet_name)

        self.upload_placeholder_photo(created)
        return created

    def upload_placeholder_photo(self, announcement: CreatedAnnouncement) -> bool:
        """Attach the placeholder JPEG; a failure is logged, not raised."""
        try:
            self._request(
                "POST",
                f"{ANNOUNCEMENTS_PATH}/{announcement.id}/photos",
                (201,),
                files={"photo": ("test.jpg", PLACEHOLDER_JPEG, "image/jpeg")},
                auth=("user", announcement.management_password),
            )
        except BackendAPIError as e:
            log.warning(
                "placeholder_photo_upload_failed", announcement_id=announcement.id, error=str(e)
            )
            return False
        return True

    def get_announcement(self, announcement_id: str) -> dict[str, Any]:
        """Fetch one announcement.

        Raises:
            BackendAPIError: If it does not exist or the call fails.
        """
        response = self._request("GET", f"{ANNOUNCEMENTS_PATH}/{announcement_id}", (200,))
        return response.json()

    def delete_announcement(self, announcement_id: str) -> None:
        """Delete through the admin API; an already deleted id is not an error."""
        self._request(
            "DELETE",
            f"{ADMIN_ANNOUNCEMENTS_PATH}/{announcement_id}",
            (204, 404),
            headers={"Authorization": self.admin_token},
        )
        log.info("announcement_deleted", announcement_id=announcement_id)

    def cleanup(self) -> list[str]:
        """Delete everything this client created.

        Returns:
            Ids that could not be deleted.
        """
        failed: list[str] = []
        for announcement in self.created:
            try:
                self.delete_announcement(announcement.id)
            except BackendAPIError as e:
                log.warning(
                    "announcement_cleanup_failed", announcement_id=announcement.id, error=str(e)
                )
                failed.append(announcement.id)
        self.created.clear()
        return failed
