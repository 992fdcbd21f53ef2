"""
Validators - Input validation for DNS records

This module provides validation functions for domain names and IP addresses
used when building DNS records from command-line arguments.
"""

import ipaddress
import logging
import re

logger = logging.getLogger(__name__)

LABEL_PATTERN = re.compile(r"^[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?$")


def validate_fqdn(fqdn: str) -> bool:
    """
    Validate Fully Qualified Domain Name (FQDN).

    A single trailing dot (absolute form) is accepted.

    Args:
        fqdn: The FQDN to validate

    Returns:
        True if valid, False otherwise
    """
    if not fqdn or not isinstance(fqdn, str):
        return False

    if fqdn.endswith("."):
        fqdn = fqdn[:-1]

    if len(fqdn) > 253:
        logger.debug(f"FQDN too long: {fqdn}")
        return False

    labels = fqdn.split(".")

    if len(labels) < 2:
        logger.debug(f"FQDN must have at least 2 labels: {fqdn}")
        return False

    if any(label == "" for label in labels):
        logger.debug(f"FQDN contains empty labels: {fqdn}")
        return False

    for label in labels:
        if not _validate_label(label):
            logger.debug(f"Invalid label '{label}' in FQDN: {fqdn}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """Validate a single domain label."""
    if len(label) == 0 or len(label) > 63:
        return False

    # Letters, digits and hyphens, not starting or ending with a hyphen
    return bool(LABEL_PATTERN.match(label))


def validate_ipv4(ipv4: str) -> bool:
    """
    Validate IPv4 address.

    Args:
        ipv4: The IPv4 address to validate

    Returns:
        True if valid, False otherwise
    """
    if not ipv4 or not isinstance(ipv4, str):
        return False

    try:
        ipaddress.IPv4Address(ipv4.strip())
        return True
    except ipaddress.AddressValueError:
        logger.debug(f"Invalid IPv4 address: {ipv4}")
        return False


def validate_ipv6(ipv6: str) -> bool:
    """Validate IPv6 address."""
    if not ipv6 or not isinstance(ipv6, str):
        return False

    try:
        ipaddress.IPv6Address(ipv6.strip())
        return True
    except ipaddress.AddressValueError:
        logger.debug(f"Invalid IPv6 address: {ipv6}")
        return False


def sanitize_fqdn(fqdn: str) -> str:
    """
    Sanitize FQDN by removing invalid characters and normalizing.

    Args:
        fqdn: The FQDN to sanitize

    Returns:
        Sanitized FQDN
    """
    if not fqdn:
        return fqdn

    fqdn = fqdn.strip().strip(".").lower()

    # Keep only letters, digits, hyphens and dots
    fqdn = re.sub(r"[^a-z0-9.-]", "", fqdn)
    fqdn = re.sub(r"\.+", ".", fqdn)

    return fqdn.strip(".")
