"""LevelUp API adapter - HTTP client for goal and plan records."""

import logging

import requests

from levelup.config import Config, load_config
from levelup.core.records import GoalRecord, JobStatusRecord, PlanVersionRecord

logger = logging.getLogger(__name__)

API_PREFIX = "/api/levelup"
DEFAULT_TIMEOUT = 30


class APIError(Exception):
    """Raised when the LevelUp server can't be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def normalize_server_address(address: str) -> str:
    """Add a scheme if the address has none and drop any trailing slash."""
    address = address.strip().rstrip("/")
    if address and not address.startswith(("http://", "https://")):
        address = f"http://{address}"
    return address


class LevelUpAPIAdapter:
    """
    LevelUp API adapter.

    Implements GoalRepository protocol. Only does the HTTP calls and hands the
    JSON to the record decoders - no business logic, no retries.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self.base_url = normalize_server_address(self.config.server_address)
        self._session = session or requests.Session()

    def _api_request(self, endpoint: str) -> dict | list:
        """Make authenticated API request."""
        if not self.base_url:
            raise APIError("LevelUp server not configured. Set SERVER_ADDRESS in levelup.conf")

        headers = {"Accept": "application/json"}
        if self.config.api_token:
            headers["Authorization"] = f"Bearer {self.config.api_token}"

        url = f"{self.base_url}{API_PREFIX}{endpoint}"
        logger.debug(f"GET {url}")
        try:
            resp = self._session.get(url, headers=headers, timeout=DEFAULT_TIMEOUT)
        except requests.RequestException as e:
            raise APIError(f"Request to {url} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise APIError(f"Server error (status: {resp.status_code})", resp.status_code)
        return resp.json()

    def fetch_goals(self) -> list[GoalRecord]:
        """Fetch all goals."""
        return [GoalRecord.from_api(g) for g in self._api_request("/goals")]

    def fetch_job(self, job_id: str) -> JobStatusRecord:
        """Fetch the status of a plan-generation job."""
        return JobStatusRecord.from_api(self._api_request(f"/jobs/{job_id}"))

    def fetch_plan_version(self, version_id: str) -> PlanVersionRecord:
        """Fetch one version of a plan."""
        return PlanVersionRecord.from_api(self._api_request(f"/plan-versions/{version_id}"))
