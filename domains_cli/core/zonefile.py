"""
Zone file loading.

Zone files are parsed with dnspython before upload so that malformed files
are rejected locally with a line number instead of a remote error.
"""

import logging
from typing import Dict, List

import dns.exception
import dns.rdatatype
import dns.zone

logger = logging.getLogger(__name__)

# Managed by the platform, never imported
SKIPPED_TYPES = {dns.rdatatype.SOA}


class ZoneFileError(ValueError):
    """The zone file could not be read or parsed."""


def read_zonefile(path: str) -> str:
    """Read a zone file from disk."""
    try:
        with open(path, "r") as f:
            return f.read()
    except FileNotFoundError:
        raise ZoneFileError(f"Zone file not found: {path}")
    except OSError as e:
        raise ZoneFileError(f"Could not read zone file {path}: {e}")


def parse_zonefile(text: str, domain: str) -> List[Dict]:
    """
    Parse zone file text into record dicts.

    Args:
        text: Zone file contents
        domain: Origin for relative names

    Returns:
        List of ``{"name", "type", "value", "ttl"}`` dicts; the apex is ``""``

    Raises:
        ZoneFileError: If the zone file is malformed
    """
    try:
        zone = dns.zone.from_text(
            text, origin=domain, relativize=True, check_origin=False
        )
    except dns.exception.DNSException as e:
        raise ZoneFileError(f"Invalid zone file for {domain}: {e}")

    records = []
    for name, ttl, rdata in zone.iterate_rdatas():
        if rdata.rdtype in SKIPPED_TYPES:
            continue
        relative_name = name.to_text()
        records.append(
            {
                "name": "" if relative_name == "@" else relative_name,
                "type": dns.rdatatype.to_text(rdata.rdtype),
                "value": rdata.to_text(),
                "ttl": ttl,
            }
        )

    logger.debug(f"Parsed {len(records)} records from zone file for {domain}")
    return records
