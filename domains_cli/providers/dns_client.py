"""
DNS Client - Unified interface for DNS provider APIs

This module provides the client handed to every command handler. The
provider is selected from configuration and created on first use, so commands
that never touch the network (such as ``--help``) need no credentials.
"""

import logging
from typing import Dict, List, Optional

from .api_provider import APIProvider
from .base_provider import DNSProvider
from .mock_provider import MockDNSProvider

logger = logging.getLogger(__name__)

# Top-level settings every provider receives
SHARED_SETTINGS = ("token", "scope", "api_url", "timeout")


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict, provider: Optional[DNSProvider] = None):
        """Initialize DNS client with configuration."""
        self.config = config
        self._provider = provider

    @property
    def scope(self) -> Optional[str]:
        return self.config.get("scope")

    @property
    def provider(self) -> DNSProvider:
        if self._provider is None:
            self._provider = self._get_provider()
        return self._provider

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "api")
        provider_config = dict(
            self.config.get("dns_providers", {}).get(provider_name) or {}
        )
        for key in SHARED_SETTINGS:
            if self.config.get(key) is not None:
                provider_config.setdefault(key, self.config[key])

        if provider_name == "api":
            return APIProvider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            logger.warning(f"Unknown provider '{provider_name}', using mock provider")
            return MockDNSProvider()

    def list_domains(self, limit: Optional[int] = None, until: Optional[int] = None) -> Dict:
        """Get one page of domains."""
        return self.provider.list_domains(limit=limit, until=until)

    def list_records(
        self, domain: str, limit: Optional[int] = None, until: Optional[int] = None
    ) -> Dict:
        """Get one page of DNS records for a domain."""
        return self.provider.list_records(domain, limit=limit, until=until)

    def get_record(self, record_id: str) -> Dict:
        """Get a DNS record by ID."""
        return self.provider.get_record(record_id)

    def create_record(self, domain: str, record: Dict) -> str:
        """Create a new DNS record."""
        return self.provider.create_record(domain, record)

    def import_zone(self, domain: str, zonefile: str) -> List[str]:
        """Import the records of a zone file."""
        return self.provider.import_zone(domain, zonefile)

    def delete_record(self, domain: str, record_id: str) -> bool:
        """Delete a DNS record."""
        return self.provider.delete_record(domain, record_id)
