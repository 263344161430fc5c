"""
Upstream oilfield data API client
Handles OAuth 2.0 client-credentials authentication and the three lookups used
by project import. Lookups never raise: any failure is logged and a fixed
fallback record is returned instead.
"""
import time
from typing import Any, Callable, Dict, List, Optional

import httpx
import structlog
from pydantic import ValidationError

from ..config import settings
from ..schemas.upstream import CompletionDesign, ProjectInfo, WellInfo

log = structlog.get_logger(__name__)

# Refresh the token this many seconds before it expires
TOKEN_EXPIRY_SKEW = 60


class UpstreamError(Exception):
    """Raised internally when a request cannot produce a usable payload"""


def mock_project(project_number: str) -> ProjectInfo:
    return ProjectInfo(
        padName=f"Project {project_number}",
        projectNumber=project_number,
        basin="Development Basin",
        numberOfWells=5,
        wellIDs=[{"id": f"well-{n}"} for n in range(1, 6)],
        field="Mock Field",
        county="Mock County",
        state="Mock State",
        country="United States",
        crews=[{"label": "Mock Crew"}],
    )


def mock_well(well_id: str) -> WellInfo:
    return WellInfo(
        wellName=f"Well {well_id}",
        color="Manual Entry",
        apiNumber=f"API-{well_id}",
        pumpingServiceCompanies=[{"label": "Mock Service Company"}],
    )


def mock_completion_design() -> CompletionDesign:
    return CompletionDesign(
        designMaximumRate=96,
        designMaximumPressure=9500,
        plannedNumberOfStages=settings.DEFAULT_PLANNED_STAGES,
        plannedCompletedLateralLength=6629,
    )


class UpstreamClient:
    """Client for the upstream project/well/completion-design API"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_url: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.base_url = (base_url or settings.UPSTREAM_BASE_URL).rstrip("/")
        self.token_url = token_url or settings.UPSTREAM_TOKEN_URL
        self.client_id = client_id if client_id is not None else settings.UPSTREAM_CLIENT_ID
        self.client_secret = client_secret if client_secret is not None else settings.UPSTREAM_CLIENT_SECRET
        self.timeout = timeout or settings.UPSTREAM_TIMEOUT
        # Only set in tests (httpx.MockTransport)
        self.transport = transport
        self._clock = clock
        self._token: Optional[str] = None
        self._token_expires_at = 0.0

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self.transport)

    def get_access_token(self) -> str:
        """Return a cached bearer token, requesting a new one when it is about to expire"""
        if not self.configured:
            raise UpstreamError("upstream client credentials are not configured")
        if self._token and self._clock() < self._token_expires_at:
            return self._token

        with self._client() as client:
            response = client.post(
                self.token_url,
                auth=(self.client_id, self.client_secret),
                data={"grant_type": "client_credentials"},
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            data = response.json()

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise UpstreamError("token response has no access_token")
        expires_in = data.get("expires_in") or 0
        self._token = token
        self._token_expires_at = self._clock() + max(float(expires_in) - TOKEN_EXPIRY_SKEW, 0)
        log.info("upstream_token_obtained", expires_in=expires_in)
        return token

    def _get_list(self, endpoint: str, params: Dict[str, str]) -> List[Any]:
        """GET a resource endpoint; the upstream API answers with JSON arrays"""
        token = self.get_access_token()
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        with self._client() as client:
            response = client.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {token}", "Accept": "application/json"},
            )
            response.raise_for_status()
            data = response.json()
        if not isinstance(data, list):
            raise UpstreamError(f"expected a JSON array from {endpoint}")
        if not data:
            raise UpstreamError(f"empty result from {endpoint}")
        return data

    def _lookup(self, what: str, endpoint: str, params: Dict[str, str], model, fallback):
        try:
            return model.model_validate(self._get_list(endpoint, params)[0])
        except (httpx.HTTPError, ValidationError, ValueError, UpstreamError) as exc:
            log.warning("upstream_fallback", lookup=what, params=params, error=str(exc))
            return fallback()

    def get_project_by_number(self, project_number: str) -> ProjectInfo:
        return self._lookup(
            "project", "project/", {"project_number": project_number},
            ProjectInfo, lambda: mock_project(project_number),
        )

    def get_well_info(self, well_id: str) -> WellInfo:
        return self._lookup(
            "well", "generalWellInformation", {"well_id": well_id},
            WellInfo, lambda: mock_well(well_id),
        )

    def get_completion_design(self, well_id: str) -> CompletionDesign:
        return self._lookup(
            "completion_design", "completionDesign", {"well_id": well_id},
            CompletionDesign, mock_completion_design,
        )


_client: Optional[UpstreamClient] = None


def get_upstream_client() -> UpstreamClient:
    """FastAPI dependency returning the shared client (keeps the token cache)"""
    global _client
    if _client is None:
        _client = UpstreamClient()
    return _client
