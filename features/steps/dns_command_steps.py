"""
Step definitions for domains-cli integration tests.
"""

import io
import re
import shlex
from unittest.mock import patch

from behave import given, then, when
from rich.console import Console

from domains_cli.cli.main import run
from domains_cli.core.config import load_config
from domains_cli.providers.dns_client import DNSClient
from domains_cli.utils import output

ZONEFILE = """\
$TTL 3600
@       IN A     198.51.100.20
www     IN CNAME example.net.
@       IN MX    10 mail.example.net.
"""


def _run(context, argv, confirm=None):
    """Run the CLI against the scenario's client, capturing both consoles."""
    stdout, stderr = io.StringIO(), io.StringIO()
    out_console = Console(file=stdout, width=200, color_system=None, highlight=False)
    err_console = Console(file=stderr, width=200, color_system=None, highlight=False)

    with patch.object(output, "console", out_console), \
            patch.object(output, "err_console", err_console), \
            patch("rich.prompt.Confirm.ask", return_value=bool(confirm)):
        context.exit_status = run(argv, client=context.client)

    context.stdout = stdout.getvalue()
    context.stderr = stderr.getvalue()


@given("the domains CLI is configured with the mock provider")
def step_impl(context):
    """Build the client from the scenario's global config."""
    config = load_config(
        str(context.global_config_dir), cwd=str(context.test_data_dir)
    )
    context.client = DNSClient(config)
    assert config["default_provider"] == "mock"


@given("a zone file with {count:d} records")
def step_impl(context, count):
    """Write a zone file for the scenario."""
    assert ZONEFILE.count(" IN ") == count
    context.zonefile = context.test_data_dir / "zonefile.txt"
    with open(context.zonefile, "w") as f:
        f.write(ZONEFILE)


@when('I run "{command}"')
def step_impl(context, command):
    """Run a domains command line."""
    _run(context, shlex.split(command)[1:])


@when('I import the zone file for "{domain}"')
def step_impl(context, domain):
    """Run `dns import` with the scenario's zone file."""
    _run(context, ["dns", "import", domain, str(context.zonefile)])


@when("I run the suggested next page command")
def step_impl(context):
    """Follow the --next hint printed by the previous listing."""
    match = re.search(r"`(domains dns ls [^`]+)`", context.stdout)
    assert match, f"No next page hint in output:\n{context.stdout}"
    _run(context, shlex.split(match.group(1))[1:])


@when('I remove the first record of "{domain}" and answer "{answer}"')
def step_impl(context, domain, answer):
    """Run `dns rm` on a record, answering the confirmation prompt."""
    record_id = context.client.list_records(domain)["records"][0]["id"]
    _run(context, ["dns", "rm", record_id], confirm=answer == "yes")


@then("the exit status should be {status:d}")
def step_impl(context, status):
    assert context.exit_status == status, (
        f"Expected exit status {status}, got {context.exit_status}\n"
        f"stdout:\n{context.stdout}\nstderr:\n{context.stderr}"
    )


@then('the output should contain "{text}"')
def step_impl(context, text):
    assert text in context.stdout, f"{text!r} not in output:\n{context.stdout}"


@then('the output should not contain "{text}"')
def step_impl(context, text):
    assert text not in context.stdout, f"{text!r} found in output:\n{context.stdout}"


@then('the error output should contain "{text}"')
def step_impl(context, text):
    assert text in context.stderr, f"{text!r} not in error output:\n{context.stderr}"


@then('the domain "{domain}" should have {count:d} records')
def step_impl(context, domain, count):
    records = context.client.list_records(domain, limit=100)["records"]
    assert len(records) == count, f"Expected {count} records, found {len(records)}"
