"""
`dns ls`: list DNS records.

With a domain, lists one page of that domain's records. Without one, lists
the records of every domain on one page of the scope's domains. ``--next``
and ``--limit`` page through records or domains respectively.
"""

import logging
import time
from typing import Dict, Optional, Sequence, Tuple

from rich.markup import escape
from rich.table import Table

from ... import PACKAGE_NAME
from ...cli.args import ParsedInvocation
from ...core.records import format_record_value
from ...providers.base_provider import APIError, NotFoundError
from ...providers.dns_client import DNSClient
from ...utils import output

logger = logging.getLogger(__name__)

MAX_LIMIT = 100


def get_pagination_opts(parsed: ParsedInvocation) -> Tuple[Optional[int], Optional[int]]:
    """
    Read ``--next`` and ``--limit`` from the parsed flags.

    Raises:
        ValueError: If ``--next`` is negative or ``--limit`` is out of range
    """
    next_cursor = parsed.get("--next")
    limit = parsed.get("--limit")

    if next_cursor is not None and next_cursor < 0:
        raise ValueError("Please provide a non-negative number for flag --next")
    if limit is not None and not 1 <= limit <= MAX_LIMIT:
        raise ValueError(f"Please provide a number between 1 and {MAX_LIMIT} for flag --limit")

    return next_cursor, limit


def format_age(created_ms: Optional[int], now_ms: Optional[int] = None) -> str:
    """Render how long ago ``created_ms`` was, e.g. ``3d``."""
    if created_ms is None:
        return "-"
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    seconds = max(0, (now_ms - created_ms) // 1000)
    for unit, size in (("d", 86400), ("h", 3600), ("m", 60)):
        if seconds >= size:
            return f"{seconds // size}{unit}"
    return f"{seconds}s"


def records_table(records: Sequence[Dict], title: Optional[str] = None) -> Table:
    """Build the table shown for a page of records."""
    table = Table(title=title, title_justify="left", box=None, header_style="dim")
    table.add_column("id", style="dim")
    table.add_column("name")
    table.add_column("type")
    table.add_column("value", style="cyan")
    table.add_column("created", justify="right", style="dim")

    for record in records:
        table.add_row(
            escape(str(record.get("id", ""))),
            escape(record.get("name") or "@"),
            escape(str(record.get("type", ""))),
            escape(format_record_value(record)),
            format_age(record.get("created")),
        )
    return table


def _next_page_hint(next_cursor: Optional[int], domain: Optional[str] = None):
    if next_cursor is None:
        return
    target = f" {escape(domain)}" if domain else ""
    output.log(
        "To display the next page run "
        f"`{PACKAGE_NAME} dns ls{target} --next {next_cursor}`"
    )


def _list_domain_records(client: DNSClient, domain: str, limit, next_cursor) -> int:
    elapsed = output.stamp()
    try:
        page = client.list_records(domain, limit=limit, until=next_cursor)
    except NotFoundError:
        output.error_message(f"The domain {domain} can't be found.")
        return 1
    except APIError as e:
        output.handle_error(e)
        return 1

    records = page["records"]
    output.log(
        f"{len(records)} Records found under [bold]{escape(domain)}[/bold] {elapsed()}"
    )
    if records:
        output.show(records_table(records))
    _next_page_hint(page["pagination"].get("next"), domain)
    return 0


def _list_all_records(client: DNSClient, limit, next_cursor) -> int:
    elapsed = output.stamp()
    try:
        domains_page = client.list_domains(limit=limit, until=next_cursor)
        tables = []
        total = 0
        for domain in domains_page["domains"]:
            records = client.list_records(domain["name"])["records"]
            total += len(records)
            tables.append(records_table(records, title=escape(domain["name"])))
    except APIError as e:
        output.handle_error(e)
        return 1

    scope = f"under [bold]{escape(client.scope)}[/bold] " if client.scope else ""
    output.log(f"{total} Records found {scope}{elapsed()}")
    for table in tables:
        output.show(table)
    _next_page_hint(domains_page["pagination"].get("next"))
    return 0


def ls(client: DNSClient, parsed: ParsedInvocation, args: Sequence[str]) -> int:
    """List records for ``args[0]``, or for every domain when no domain is given."""
    if len(args) > 1:
        output.error_message(
            "Invalid number of arguments. "
            f"Usage: `{PACKAGE_NAME} dns ls [domain]`"
        )
        return 1

    try:
        next_cursor, limit = get_pagination_opts(parsed)
    except ValueError as e:
        output.handle_error(e)
        return 1

    if args:
        return _list_domain_records(client, args[0], limit, next_cursor)
    return _list_all_records(client, limit, next_cursor)
