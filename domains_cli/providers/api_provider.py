"""
REST API DNS provider.

Talks to the platform's domains API over HTTPS using a bearer token. When a
scope is configured every request carries it as the ``teamId`` query
parameter.
"""

import logging
from typing import Dict, List, Optional

import requests

from .base_provider import APIError, AuthenticationError, DNSProvider, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.cloud.example.com"
DEFAULT_TIMEOUT = 30


class APIProvider(DNSProvider):
    """DNS provider implementation for the platform REST API."""

    def __init__(self, config: Dict):
        """Initialize API provider."""
        self.base_url = config.get("api_url", DEFAULT_API_URL).rstrip("/")
        self.token = config.get("token")
        self.scope = config.get("scope")
        self.timeout = config.get("timeout", DEFAULT_TIMEOUT)
        self.session = requests.Session()
        self.session.headers.update(
            {"Accept": "application/json", "User-Agent": "domains-cli"}
        )
        logger.debug(f"API provider initialized for {self.base_url}")

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        data: Optional[Dict] = None,
    ) -> Dict:
        """Make a request to the API and return the decoded JSON body."""
        if not self.token:
            raise AuthenticationError(
                "No token found. Pass --token or set `token` in the global config",
                code="missing_token",
            )

        params = {key: value for key, value in (params or {}).items() if value is not None}
        if self.scope:
            params["teamId"] = self.scope

        url = f"{self.base_url}{endpoint}"
        headers = {"Authorization": f"Bearer {self.token}"}
        logger.debug(f"{method} {url} params={params}")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request to {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        if not response.ok:
            raise self._error_from_response(response)

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                f"Could not parse response from {url}", status_code=response.status_code
            ) from e

    def _error_from_response(self, response: requests.Response) -> APIError:
        """Map an error response to the matching APIError subclass."""
        code = None
        message = f"Request failed with status {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            code = body["error"].get("code")
            message = body["error"].get("message") or message

        if response.status_code in (401, 403):
            return AuthenticationError(message, status_code=response.status_code, code=code)
        if response.status_code == 404:
            return NotFoundError(message, status_code=response.status_code, code=code)
        return APIError(message, status_code=response.status_code, code=code)

    def list_domains(self, limit: Optional[int] = None, until: Optional[int] = None) -> Dict:
        """Get one page of the domains owned by the current scope."""
        body = self._make_request(
            "GET", "/v5/domains", params={"limit": limit, "until": until}
        )
        return {
            "domains": body.get("domains", []),
            "pagination": {"next": (body.get("pagination") or {}).get("next")},
        }

    def list_records(
        self, domain: str, limit: Optional[int] = None, until: Optional[int] = None
    ) -> Dict:
        """Get one page of DNS records for a domain."""
        body = self._make_request(
            "GET",
            f"/v4/domains/{domain}/records",
            params={"limit": limit, "until": until},
        )
        return {
            "records": body.get("records", []),
            "pagination": {"next": (body.get("pagination") or {}).get("next")},
        }

    def get_record(self, record_id: str) -> Dict:
        """Get a DNS record by ID."""
        return self._make_request("GET", f"/v5/domains/records/{record_id}")

    def create_record(self, domain: str, record: Dict) -> str:
        """Create a new DNS record."""
        body = self._make_request("POST", f"/v2/domains/{domain}/records", data=record)
        logger.info(f"Created record {body.get('uid')} for {domain}")
        return body.get("uid")

    def import_zone(self, domain: str, zonefile: str) -> List[str]:
        """Upload a zone file."""
        body = self._make_request(
            "PUT", f"/v3/domains/{domain}/records", data={"zonefile": zonefile}
        )
        record_ids = body.get("recordIds", [])
        logger.info(f"Imported {len(record_ids)} records for {domain}")
        return record_ids

    def delete_record(self, domain: str, record_id: str) -> bool:
        """Delete a DNS record."""
        self._make_request("DELETE", f"/v2/domains/{domain}/records/{record_id}")
        logger.info(f"Deleted record {record_id} from {domain}")
        return True
