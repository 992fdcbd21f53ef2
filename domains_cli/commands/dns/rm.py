"""`dns rm`: remove a DNS record by ID after confirmation."""

from typing import Dict, Sequence

from rich.markup import escape
from rich.prompt import Confirm

from ... import PACKAGE_NAME
from ...cli.args import ParsedInvocation
from ...core.records import format_record_value
from ...providers.base_provider import APIError, NotFoundError
from ...providers.dns_client import DNSClient
from ...utils import output


def _describe(record: Dict) -> str:
    name = record.get("name") or "@"
    return escape(
        f"{record['id']}  {name}  {record.get('type', '')}  {format_record_value(record)}"
    )


def rm(client: DNSClient, parsed: ParsedInvocation, args: Sequence[str]) -> int:
    """Remove the record ``args[0]``."""
    if len(args) != 1:
        output.error_message(
            f"Invalid number of arguments. Usage: `{PACKAGE_NAME} dns rm <id>`"
        )
        return 1

    record_id = args[0]

    try:
        record = client.get_record(record_id)
    except NotFoundError:
        output.error_message("DNS record not found")
        return 1
    except APIError as e:
        output.handle_error(e)
        return 1

    domain = record.get("domain")
    output.log("The following record will be removed permanently")
    output.show(f"  {_describe(record)}")

    if not Confirm.ask("Are you sure?", default=False, console=output.console):
        output.log("Canceled")
        return 0

    elapsed = output.stamp()
    try:
        client.delete_record(domain, record_id)
    except APIError as e:
        output.handle_error(e)
        return 1

    output.success(
        f"Record [dim]{escape(record_id)}[/dim] removed from "
        f"[bold]{escape(str(domain))}[/bold] {elapsed()}"
    )
    return 0
