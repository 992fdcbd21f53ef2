"""
Record Builder - DNS records from `dns add` arguments

Accepted argument shapes::

    <domain> <name> <A|AAAA|ALIAS|CNAME|TXT|CAA> <value>
    <domain> <name> MX <value> <priority>
    <domain> <name> SRV <priority> <weight> <port> <target>

``@`` as the name refers to the domain itself.
"""

import logging
from typing import Dict, Optional, Sequence, Tuple

import dns.exception
import dns.rdata
import dns.rdataclass
import dns.rdatatype

from ..utils.validators import validate_fqdn, validate_ipv4, validate_ipv6

logger = logging.getLogger(__name__)

SIMPLE_TYPES = ("A", "AAAA", "ALIAS", "CAA", "CNAME", "TXT")
RECORD_TYPES = SIMPLE_TYPES + ("MX", "SRV")


def _parse_int(value: str, lower: int = 0, upper: int = 65535) -> Optional[int]:
    try:
        number = int(value)
    except ValueError:
        return None
    if not lower <= number <= upper:
        return None
    return number


def _valid_value(record_type: str, value: str) -> bool:
    """Check a record value for the types that have a fixed syntax."""
    if not value:
        return False
    if record_type == "A":
        return validate_ipv4(value)
    if record_type == "AAAA":
        return validate_ipv6(value)
    if record_type == "CAA":
        try:
            dns.rdata.from_text(dns.rdataclass.IN, dns.rdatatype.CAA, value)
        except (dns.exception.DNSException, ValueError) as e:
            logger.debug(f"Invalid CAA value {value!r}: {e}")
            return False
    return True


def parse_add_args(args: Sequence[str]) -> Optional[Tuple[str, Dict]]:
    """
    Build a record from `dns add` arguments.

    Returns:
        ``(domain, record)`` or None when the arguments do not describe a
        valid record
    """
    if len(args) < 4:
        return None

    domain, name, record_type = args[0], args[1], args[2].upper()
    if not validate_fqdn(domain) or record_type not in RECORD_TYPES:
        return None

    name = "" if name == "@" else name

    if record_type == "MX":
        if len(args) != 5:
            return None
        priority = _parse_int(args[4])
        if priority is None or not args[3]:
            return None
        return domain, {
            "name": name,
            "type": "MX",
            "value": args[3],
            "mxPriority": priority,
        }

    if record_type == "SRV":
        if len(args) != 7:
            return None
        priority, weight, port = (_parse_int(arg) for arg in args[3:6])
        target = args[6]
        if priority is None or weight is None or port is None or not target:
            return None
        return domain, {
            "name": name,
            "type": "SRV",
            "srv": {"priority": priority, "weight": weight, "port": port, "target": target},
        }

    if len(args) != 4 or not _valid_value(record_type, args[3]):
        return None

    return domain, {"name": name, "type": record_type, "value": args[3]}


def format_record_value(record: Dict) -> str:
    """Render the value column for a record listing."""
    if record.get("type") == "MX" and record.get("mxPriority") is not None:
        return f"{record['mxPriority']} {record.get('value', '')}"
    srv = record.get("srv")
    if record.get("type") == "SRV" and srv:
        return f"{srv['priority']} {srv['weight']} {srv['port']} {srv['target']}"
    return str(record.get("value", ""))
