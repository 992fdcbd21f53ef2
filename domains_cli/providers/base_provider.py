"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must
implement, and the errors they raise.

Listing methods return one page at a time::

    {"records": [...], "pagination": {"next": 1584722256178}}

where ``next`` is the cursor for the following page (milliseconds since the
UNIX epoch) or None on the last page.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class APIError(Exception):
    """Error reported by a DNS provider."""

    def __init__(
        self, message: str, status_code: Optional[int] = None, code: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class AuthenticationError(APIError):
    """Missing or rejected credentials."""


class NotFoundError(APIError):
    """The requested domain or record does not exist."""


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def list_domains(self, limit: Optional[int] = None, until: Optional[int] = None) -> Dict:
        """Get one page of the domains owned by the current scope."""
        pass

    @abstractmethod
    def list_records(
        self, domain: str, limit: Optional[int] = None, until: Optional[int] = None
    ) -> Dict:
        """Get one page of DNS records for a domain."""
        pass

    @abstractmethod
    def get_record(self, record_id: str) -> Dict:
        """Get a DNS record by ID. Raises NotFoundError if it does not exist."""
        pass

    @abstractmethod
    def create_record(self, domain: str, record: Dict) -> str:
        """Create a new DNS record and return its ID."""
        pass

    @abstractmethod
    def import_zone(self, domain: str, zonefile: str) -> List[str]:
        """Create the records of a zone file and return their IDs."""
        pass

    @abstractmethod
    def delete_record(self, domain: str, record_id: str) -> bool:
        """Delete a DNS record."""
        pass
