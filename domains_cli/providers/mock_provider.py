"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores domains and records in
memory, with the same pagination behaviour as the API.
"""

import itertools
import logging
from typing import Dict, List, Optional

from ..core.zonefile import parse_zonefile
from ..utils.validators import sanitize_fqdn
from .base_provider import DNSProvider, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
# 2020-03-20T16:37:36.178Z, the first "created" timestamp handed out
EPOCH_START_MS = 1584722256178


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider, optionally seeded with ``config["domains"]``."""
        config = config or {}
        self.domains: Dict[str, Dict] = {}
        self.records: Dict[str, List[Dict]] = {}
        self._ids = itertools.count(1)
        self._clock = itertools.count(EPOCH_START_MS, 1000)

        for domain, records in (config.get("domains") or {}).items():
            self.add_domain(domain)
            for record in records or []:
                self.create_record(domain, record)

        logger.info("Mock DNS provider initialized")

    def add_domain(self, domain: str) -> Dict:
        """Register a domain with no records."""
        name = sanitize_fqdn(domain)
        if name not in self.domains:
            self.domains[name] = {"name": name, "created": next(self._clock)}
            self.records[name] = []
        return self.domains[name]

    def _require_domain(self, domain: str) -> str:
        name = sanitize_fqdn(domain)
        if name not in self.domains:
            raise NotFoundError(f"Domain {domain} not found", status_code=404, code="not_found")
        return name

    @staticmethod
    def _page(items: List[Dict], limit: Optional[int], until: Optional[int]) -> Dict:
        """Newest first; ``until`` excludes items created at or after it."""
        limit = limit or DEFAULT_PAGE_SIZE
        ordered = sorted(items, key=lambda item: item["created"], reverse=True)
        if until is not None:
            ordered = [item for item in ordered if item["created"] < until]

        page = ordered[:limit]
        next_cursor = page[-1]["created"] if len(ordered) > limit else None
        return {"items": [dict(item) for item in page], "next": next_cursor}

    def list_domains(self, limit: Optional[int] = None, until: Optional[int] = None) -> Dict:
        """Get one page of domains."""
        page = self._page(list(self.domains.values()), limit, until)
        logger.info(f"Mock: Retrieved {len(page['items'])} domains")
        return {"domains": page["items"], "pagination": {"next": page["next"]}}

    def list_records(
        self, domain: str, limit: Optional[int] = None, until: Optional[int] = None
    ) -> Dict:
        """Get one page of DNS records for a domain."""
        name = self._require_domain(domain)
        page = self._page(self.records[name], limit, until)
        logger.info(f"Mock: Retrieved {len(page['items'])} records for {name}")
        return {"records": page["items"], "pagination": {"next": page["next"]}}

    def get_record(self, record_id: str) -> Dict:
        """Get a DNS record by ID."""
        for domain, records in self.records.items():
            for record in records:
                if record["id"] == record_id:
                    return dict(record, domain=domain)
        raise NotFoundError(f"DNS record {record_id} not found", status_code=404, code="not_found")

    def create_record(self, domain: str, record: Dict) -> str:
        """Create a new DNS record."""
        name = sanitize_fqdn(domain)
        if name not in self.domains:
            self.add_domain(name)

        record_id = f"rec_{next(self._ids):06d}"
        stored = dict(record, id=record_id, created=next(self._clock))
        self.records[name].append(stored)
        logger.info(f"Mock: Created record {record_id} ({record.get('type')}) for {name}")
        return record_id

    def import_zone(self, domain: str, zonefile: str) -> List[str]:
        """Create every record of a zone file."""
        return [
            self.create_record(domain, record)
            for record in parse_zonefile(zonefile, domain)
        ]

    def delete_record(self, domain: str, record_id: str) -> bool:
        """Delete a DNS record."""
        name = self._require_domain(domain)
        for i, existing in enumerate(self.records[name]):
            if existing["id"] == record_id:
                del self.records[name][i]
                logger.info(f"Mock: Deleted record {record_id} from {name}")
                return True

        raise NotFoundError(f"DNS record {record_id} not found", status_code=404, code="not_found")
