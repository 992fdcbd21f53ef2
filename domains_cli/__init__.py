"""
domains-cli - Manage the DNS records of your domains

Command-line client for adding, importing, listing and removing DNS records
on domains owned by a cloud platform account.
"""

__version__ = "1.0.0"
__author__ = "domains-cli Team"
__description__ = "Manage DNS records for domains from the command line"

PACKAGE_NAME = "domains"

from .providers.dns_client import DNSClient  # noqa: E402

__all__ = [
    "DNSClient",
    "PACKAGE_NAME",
]
