"""`dns add`: create a single DNS record."""

import logging
from typing import Sequence

from ... import PACKAGE_NAME
from ...cli.args import ParsedInvocation
from ...core.records import parse_add_args
from ...providers.base_provider import APIError, NotFoundError
from ...providers.dns_client import DNSClient
from ...utils import output

logger = logging.getLogger(__name__)


def add(client: DNSClient, parsed: ParsedInvocation, args: Sequence[str]) -> int:
    """Create the record described by ``args``; returns the exit status."""
    parsed_record = parse_add_args(args)
    if parsed_record is None:
        output.error_message(
            "Invalid <domain> <name> <type> <value> parameter set. "
            f"Run `{PACKAGE_NAME} dns --help` for examples."
        )
        return 1

    domain, record = parsed_record
    elapsed = output.stamp()

    try:
        record_id = client.create_record(domain, record)
    except NotFoundError:
        output.error_message(f"The domain {domain} can't be found.")
        return 1
    except APIError as e:
        output.handle_error(e)
        return 1

    scope = f" under {client.scope}" if client.scope else ""
    output.success(
        f"DNS record for domain [bold]{domain}[/bold] "
        f"[dim]({record_id})[/dim] created{scope} {elapsed()}"
    )
    logger.debug(f"Created {record['type']} record {record_id} for {domain}")
    return 0
