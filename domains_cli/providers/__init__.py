"""
DNS provider implementations.

This package contains the REST API provider used in production and an
in-memory provider for tests and demonstrations.
"""

from .api_provider import APIProvider
from .base_provider import APIError, AuthenticationError, DNSProvider, NotFoundError
from .dns_client import DNSClient
from .mock_provider import MockDNSProvider

__all__ = [
    "APIError",
    "APIProvider",
    "AuthenticationError",
    "DNSClient",
    "DNSProvider",
    "MockDNSProvider",
    "NotFoundError",
]
