"""`dns import`: create records from a zone file."""

from typing import Sequence

from ... import PACKAGE_NAME
from ...cli.args import ParsedInvocation
from ...core.zonefile import ZoneFileError, parse_zonefile, read_zonefile
from ...providers.base_provider import APIError, NotFoundError
from ...providers.dns_client import DNSClient
from ...utils import output
from ...utils.validators import validate_fqdn


def import_zone(client: DNSClient, parsed: ParsedInvocation, args: Sequence[str]) -> int:
    """Upload the zone file ``args[1]`` for domain ``args[0]``."""
    if len(args) != 2:
        output.error_message(
            "Invalid number of arguments. "
            f"Usage: `{PACKAGE_NAME} dns import <domain> <zonefile>`"
        )
        return 1

    domain, zonefile_path = args
    if not validate_fqdn(domain):
        output.error_message(f"Invalid domain name \"{domain}\"")
        return 1

    elapsed = output.stamp()

    try:
        zonefile = read_zonefile(zonefile_path)
        records = parse_zonefile(zonefile, domain)
    except ZoneFileError as e:
        output.handle_error(e)
        return 1

    if not records:
        output.warn(f"No DNS records found in {zonefile_path}")

    try:
        record_ids = client.import_zone(domain, zonefile)
    except NotFoundError:
        output.error_message(f"The domain {domain} can't be found.")
        return 1
    except APIError as e:
        output.handle_error(e)
        return 1

    output.success(
        f"{len(record_ids)} DNS records for domain [bold]{domain}[/bold] "
        f"created {elapsed()}"
    )
    return 0
