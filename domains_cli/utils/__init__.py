"""
Utility functions and helpers.

This package contains input validation and terminal output helpers
shared by the command handlers.
"""

from .validators import sanitize_fqdn, validate_fqdn, validate_ipv4, validate_ipv6

__all__ = ["sanitize_fqdn", "validate_fqdn", "validate_ipv4", "validate_ipv6"]
