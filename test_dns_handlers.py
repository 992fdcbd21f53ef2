#!/usr/bin/env python3
"""
Test suite for the `dns` handlers and their collaborators

Covers record building, zone files, the add/import/ls/rm handlers, the DNS
providers, the client and configuration loading.
"""

import io
import json
import logging
import os
import shutil
import tempfile
import unittest
from unittest.mock import Mock, patch

import requests
import yaml
from rich.console import Console

from domains_cli.cli.args import parse_args
from domains_cli.commands.dns import FLAG_SCHEMA
from domains_cli.commands.dns.add import add
from domains_cli.commands.dns.import_zone import import_zone
from domains_cli.commands.dns.ls import format_age, get_pagination_opts, ls
from domains_cli.commands.dns.rm import rm
from domains_cli.core.config import (
    ConfigError,
    apply_overrides,
    config_logger,
    load_config,
)
from domains_cli.core.records import format_record_value, parse_add_args
from domains_cli.core.zonefile import ZoneFileError, parse_zonefile, read_zonefile
from domains_cli.providers.api_provider import APIProvider
from domains_cli.providers.base_provider import (
    APIError,
    AuthenticationError,
    NotFoundError,
)
from domains_cli.providers.dns_client import DNSClient
from domains_cli.providers.mock_provider import MockDNSProvider
from domains_cli.utils import output
from domains_cli.utils.validators import (
    sanitize_fqdn,
    validate_fqdn,
    validate_ipv4,
    validate_ipv6,
)

ZONEFILE = """\
$TTL 3600
@       IN A     198.51.100.1
www     IN CNAME example.com.
@       IN MX    10 mail.example.com.
"""


def make_client(domains=None):
    """Client backed by an in-memory provider."""
    provider = MockDNSProvider({"domains": domains or {}})
    return DNSClient({"default_provider": "mock"}, provider=provider), provider


def flags(*argv):
    return parse_args(list(argv), FLAG_SCHEMA)


def api_response(status, body=None):
    """Fake requests.Response."""
    response = Mock()
    response.status_code = status
    response.ok = status < 400
    if body is None:
        response.content = b""
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.content = json.dumps(body).encode()
        response.json.return_value = body
    return response


class HandlerTestCase(unittest.TestCase):
    """Base class capturing handler output."""

    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        for name, buffer in (("console", self.stdout), ("err_console", self.stderr)):
            patcher = patch.object(
                output,
                name,
                Console(file=buffer, width=200, color_system=None, highlight=False),
            )
            patcher.start()
            self.addCleanup(patcher.stop)


class TestValidators(unittest.TestCase):
    """Test the validation functions."""

    def test_validate_fqdn(self):
        """Valid and invalid domain names."""
        for fqdn in ("example.com", "sub.example.com", "1password.com", "example.com."):
            with self.subTest(fqdn=fqdn):
                self.assertTrue(validate_fqdn(fqdn))

        for fqdn in ("", "single", ".example.com", "example..com", "-example.com",
                     "example-.com", "a" * 64 + ".com", "exa mple.com"):
            with self.subTest(fqdn=fqdn):
                self.assertFalse(validate_fqdn(fqdn))

    def test_validate_ip_addresses(self):
        """IPv4 and IPv6 validation."""
        self.assertTrue(validate_ipv4("198.51.100.100"))
        self.assertFalse(validate_ipv4("256.1.2.3"))
        self.assertFalse(validate_ipv4("2001:db8::1"))
        self.assertTrue(validate_ipv6("2001:db8::1"))
        self.assertFalse(validate_ipv6("198.51.100.100"))

    def test_sanitize_fqdn(self):
        """Domain keys are normalized."""
        self.assertEqual(sanitize_fqdn(" Example.COM. "), "example.com")


class TestRecordArguments(unittest.TestCase):
    """Test building records from `dns add` arguments."""

    def test_simple_records(self):
        """Four-argument records."""
        cases = [
            (["example.com", "api", "A", "198.51.100.100"], "A", "198.51.100.100"),
            (["example.com", "api", "AAAA", "2001:db8::1"], "AAAA", "2001:db8::1"),
            (["example.com", "www", "cname", "example.net"], "CNAME", "example.net"),
            (["example.com", "@", "ALIAS", "example.net"], "ALIAS", "example.net"),
            (["example.com", "_acme", "TXT", "some text"], "TXT", "some text"),
            (["example.com", "@", "CAA", '0 issue "letsencrypt.org"'], "CAA", '0 issue "letsencrypt.org"'),
        ]

        for args, record_type, value in cases:
            with self.subTest(args=args):
                domain, record = parse_add_args(args)
                self.assertEqual(domain, "example.com")
                self.assertEqual(record["type"], record_type)
                self.assertEqual(record["value"], value)

    def test_apex_name(self):
        """@ refers to the domain itself."""
        _, record = parse_add_args(["example.com", "@", "A", "198.51.100.100"])
        self.assertEqual(record["name"], "")

    def test_mx_record(self):
        """MX records carry a priority."""
        _, record = parse_add_args(["example.com", "@", "MX", "mail.example.com", "10"])

        self.assertEqual(
            record,
            {"name": "", "type": "MX", "value": "mail.example.com", "mxPriority": 10},
        )

    def test_srv_record(self):
        """SRV records carry priority, weight, port and target."""
        _, record = parse_add_args(["example.com", "_ldap._tcp", "SRV", "10", "0", "389", "example.net"])

        self.assertEqual(record["name"], "_ldap._tcp")
        self.assertEqual(
            record["srv"], {"priority": 10, "weight": 0, "port": 389, "target": "example.net"}
        )
        self.assertNotIn("value", record)

    def test_invalid_arguments(self):
        """Malformed argument sets build nothing."""
        invalid = [
            [],
            ["example.com", "@", "A"],
            ["example.com", "api", "A", "198.51.100.1", "extra"],
            ["example.com", "api", "A", "999.1.1.1"],
            ["example.com", "api", "AAAA", "198.51.100.1"],
            ["example.com", "@", "MX", "mail.example.com"],
            ["example.com", "@", "MX", "mail.example.com", "high"],
            ["example.com", "@", "MX", "mail.example.com", "70000"],
            ["example.com", "@", "SRV", "10", "0", "389"],
            ["example.com", "@", "SRV", "10", "0", "port", "example.net"],
            ["example.com", "@", "CAA", "issue letsencrypt.org"],
            ["example.com", "@", "SPF", "v=spf1 -all"],
            ["not a domain", "@", "A", "198.51.100.1"],
        ]

        for args in invalid:
            with self.subTest(args=args):
                self.assertIsNone(parse_add_args(args))

    def test_format_record_value(self):
        """Listing values include type-specific fields."""
        self.assertEqual(
            format_record_value({"type": "MX", "value": "mail.example.com", "mxPriority": 10}),
            "10 mail.example.com",
        )
        self.assertEqual(
            format_record_value(
                {"type": "SRV", "srv": {"priority": 10, "weight": 0, "port": 389, "target": "example.net"}}
            ),
            "10 0 389 example.net",
        )
        self.assertEqual(format_record_value({"type": "A", "value": "198.51.100.1"}), "198.51.100.1")


class TestZoneFile(unittest.TestCase):
    """Test zone file reading and parsing."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_parse_zonefile(self):
        """Records are returned with relative names."""
        records = parse_zonefile(ZONEFILE, "example.com")

        self.assertEqual(len(records), 3)
        self.assertEqual(
            sorted((record["name"], record["type"]) for record in records),
            [("", "A"), ("", "MX"), ("www", "CNAME")],
        )
        self.assertTrue(all(record["ttl"] == 3600 for record in records))

    def test_soa_is_skipped(self):
        """The SOA record is managed by the platform."""
        text = (
            "$TTL 3600\n"
            "@ IN SOA ns1.example.com. admin.example.com. 1 7200 3600 1209600 3600\n"
            "@ IN NS ns1.example.com.\n"
        )

        records = parse_zonefile(text, "example.com")

        self.assertEqual([record["type"] for record in records], ["NS"])

    def test_invalid_zonefile(self):
        """Syntax errors are reported as ZoneFileError."""
        with self.assertRaises(ZoneFileError):
            parse_zonefile("$TTL 3600\nwww IN A not-an-address\n", "example.com")

    def test_read_missing_file(self):
        """A missing file is a ZoneFileError."""
        with self.assertRaises(ZoneFileError):
            read_zonefile(os.path.join(self.temp_dir, "missing.txt"))


class TestAddHandler(HandlerTestCase):
    """Test `dns add`."""

    def test_add_a_record(self):
        """An A record is created and its ID reported."""
        client, provider = make_client()

        status = add(client, flags(), ("example.com", "api", "A", "198.51.100.100"))

        self.assertEqual(status, 0)
        record = provider.records["example.com"][0]
        self.assertEqual(
            (record["name"], record["type"], record["value"]), ("api", "A", "198.51.100.100")
        )
        self.assertIn("Success!", self.stdout.getvalue())
        self.assertIn(record["id"], self.stdout.getvalue())

    def test_add_srv_record(self):
        """SRV records are stored with their fields."""
        client, provider = make_client()

        status = add(client, flags(), ("example.com", "@", "SRV", "10", "0", "389", "example.net"))

        self.assertEqual(status, 0)
        self.assertEqual(provider.records["example.com"][0]["srv"]["port"], 389)

    def test_invalid_arguments(self):
        """Bad arguments exit 1 without calling the provider."""
        client = DNSClient({}, provider=Mock())

        status = add(client, flags(), ("example.com", "@", "MX", "mail.example.com"))

        self.assertEqual(status, 1)
        client.provider.create_record.assert_not_called()
        self.assertIn("Invalid <domain> <name> <type> <value>", self.stderr.getvalue())

    def test_api_error(self):
        """Provider errors exit 1."""
        provider = Mock()
        provider.create_record.side_effect = APIError("Record already exists", status_code=409)
        client = DNSClient({}, provider=provider)

        status = add(client, flags(), ("example.com", "api", "A", "198.51.100.100"))

        self.assertEqual(status, 1)
        self.assertIn("Record already exists", self.stderr.getvalue())

    def test_unknown_domain(self):
        """A missing domain is reported by name."""
        provider = Mock()
        provider.create_record.side_effect = NotFoundError("not found", status_code=404)
        client = DNSClient({}, provider=provider)

        status = add(client, flags(), ("example.com", "api", "A", "198.51.100.100"))

        self.assertEqual(status, 1)
        self.assertIn("The domain example.com can't be found.", self.stderr.getvalue())


class TestImportHandler(HandlerTestCase):
    """Test `dns import`."""

    def setUp(self):
        super().setUp()
        self.temp_dir = tempfile.mkdtemp()
        self.zonefile = os.path.join(self.temp_dir, "zonefile.txt")
        with open(self.zonefile, "w") as f:
            f.write(ZONEFILE)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_import(self):
        """Every record of the zone file is created."""
        client, provider = make_client({"example.com": []})

        status = import_zone(client, flags(), ("example.com", self.zonefile))

        self.assertEqual(status, 0)
        self.assertEqual(len(provider.records["example.com"]), 3)
        self.assertIn("3 DNS records for domain example.com created", self.stdout.getvalue())

    def test_wrong_number_of_arguments(self):
        """import needs a domain and a file."""
        client, _ = make_client()

        for args in ((), ("example.com",), ("example.com", self.zonefile, "extra")):
            with self.subTest(args=args):
                self.assertEqual(import_zone(client, flags(), args), 1)

    def test_missing_file(self):
        """A missing zone file exits 1."""
        client, provider = make_client({"example.com": []})

        status = import_zone(client, flags(), ("example.com", os.path.join(self.temp_dir, "nope")))

        self.assertEqual(status, 1)
        self.assertEqual(provider.records["example.com"], [])
        self.assertIn("Zone file not found", self.stderr.getvalue())

    def test_malformed_file_is_not_uploaded(self):
        """Zone files are validated before upload."""
        with open(self.zonefile, "w") as f:
            f.write("$TTL 3600\nwww IN A not-an-address\n")
        client = DNSClient({}, provider=Mock())

        status = import_zone(client, flags(), ("example.com", self.zonefile))

        self.assertEqual(status, 1)
        client.provider.import_zone.assert_not_called()

    def test_invalid_domain(self):
        """The domain must be a valid name."""
        client, _ = make_client()
        self.assertEqual(import_zone(client, flags(), ("not-a-domain", self.zonefile)), 1)


class TestLsHandler(HandlerTestCase):
    """Test `dns ls`."""

    def setUp(self):
        super().setUp()
        self.client, self.provider = make_client(
            {
                "example.com": [
                    {"name": "", "type": "A", "value": "198.51.100.1"},
                    {"name": "www", "type": "CNAME", "value": "example.com"},
                    {"name": "", "type": "MX", "value": "mail.example.com", "mxPriority": 10},
                ],
                "example.net": [
                    {"name": "api", "type": "AAAA", "value": "2001:db8::1"},
                ],
            }
        )

    def test_list_domain(self):
        """All records of a domain are shown."""
        status = ls(self.client, flags(), ("example.com",))

        self.assertEqual(status, 0)
        out = self.stdout.getvalue()
        self.assertIn("3 Records found under example.com", out)
        self.assertIn("198.51.100.1", out)
        self.assertIn("10 mail.example.com", out)
        self.assertNotIn("--next", out)

    def test_pagination(self):
        """--limit pages the records and --next continues."""
        status = ls(self.client, flags("--limit", "2"), ("example.com",))

        self.assertEqual(status, 0)
        cursor = self.provider.records["example.com"][1]["created"]
        self.assertIn(f"domains dns ls example.com --next {cursor}", self.stdout.getvalue())
        self.assertNotIn("198.51.100.1", self.stdout.getvalue())

        self.stdout.truncate(0)
        self.stdout.seek(0)
        status = ls(self.client, flags("--limit", "2", "-N", str(cursor)), ("example.com",))

        self.assertEqual(status, 0)
        out = self.stdout.getvalue()
        self.assertIn("1 Records found under example.com", out)
        self.assertIn("198.51.100.1", out)
        self.assertNotIn("To display the next page", out)

    def test_list_all_domains(self):
        """Without a domain every domain's records are listed."""
        status = ls(self.client, flags(), ())

        self.assertEqual(status, 0)
        out = self.stdout.getvalue()
        self.assertIn("4 Records found", out)
        self.assertIn("example.net", out)
        self.assertIn("2001:db8::1", out)

    def test_list_all_domains_paginated(self):
        """The --next hint pages through domains when no domain is given."""
        status = ls(self.client, flags("--limit", "1"), ())

        self.assertEqual(status, 0)
        self.assertIn("domains dns ls --next", self.stdout.getvalue())

    def test_invalid_pagination(self):
        """Negative cursors and out-of-range limits exit 1."""
        for argv in (("--next", "-1"), ("--limit", "0"), ("--limit", "101")):
            with self.subTest(argv=argv):
                self.assertEqual(ls(self.client, flags(*argv), ("example.com",)), 1)
        self.assertIn("--next", self.stderr.getvalue())
        self.assertIn("--limit", self.stderr.getvalue())

    def test_get_pagination_opts(self):
        """Both values are optional."""
        self.assertEqual(get_pagination_opts(flags()), (None, None))
        self.assertEqual(get_pagination_opts(flags("-N", "5", "--limit", "100")), (5, 100))

    def test_too_many_arguments(self):
        """ls takes at most one domain."""
        self.assertEqual(ls(self.client, flags(), ("example.com", "example.net")), 1)
        self.assertIn("Invalid number of arguments", self.stderr.getvalue())

    def test_unknown_domain(self):
        """A missing domain exits 1."""
        self.assertEqual(ls(self.client, flags(), ("missing.com",)), 1)
        self.assertIn("The domain missing.com can't be found.", self.stderr.getvalue())

    def test_format_age(self):
        """Ages are rendered in the largest whole unit."""
        self.assertEqual(format_age(None), "-")
        self.assertEqual(format_age(0, 30 * 1000), "30s")
        self.assertEqual(format_age(0, 5 * 60 * 1000), "5m")
        self.assertEqual(format_age(0, 3 * 86400 * 1000 + 5000), "3d")


class TestRmHandler(HandlerTestCase):
    """Test `dns rm`."""

    def setUp(self):
        super().setUp()
        self.client, self.provider = make_client(
            {"example.com": [{"name": "www", "type": "A", "value": "198.51.100.1"}]}
        )
        self.record_id = self.provider.records["example.com"][0]["id"]

    def test_remove_confirmed(self):
        """The record is deleted after confirmation."""
        with patch("domains_cli.commands.dns.rm.Confirm.ask", return_value=True) as ask:
            status = rm(self.client, flags(), (self.record_id,))

        self.assertEqual(status, 0)
        ask.assert_called_once()
        self.assertEqual(self.provider.records["example.com"], [])
        self.assertIn(f"Record {self.record_id} removed from example.com", self.stdout.getvalue())

    def test_remove_declined(self):
        """Declining keeps the record."""
        with patch("domains_cli.commands.dns.rm.Confirm.ask", return_value=False):
            status = rm(self.client, flags(), (self.record_id,))

        self.assertEqual(status, 0)
        self.assertEqual(len(self.provider.records["example.com"]), 1)
        self.assertIn("Canceled", self.stdout.getvalue())

    def test_record_not_found(self):
        """Unknown IDs exit 1 without prompting."""
        with patch("domains_cli.commands.dns.rm.Confirm.ask") as ask:
            status = rm(self.client, flags(), ("rec_missing",))

        self.assertEqual(status, 1)
        ask.assert_not_called()
        self.assertIn("DNS record not found", self.stderr.getvalue())

    def test_wrong_number_of_arguments(self):
        """rm takes exactly one ID."""
        for args in ((), ("rec_1", "rec_2")):
            with self.subTest(args=args):
                self.assertEqual(rm(self.client, flags(), args), 1)


class TestAPIProvider(unittest.TestCase):
    """Test the REST API provider."""

    def setUp(self):
        self.provider = APIProvider(
            {"token": "secret", "scope": "team_1", "api_url": "https://api.test/"}
        )

    def request(self, response):
        patcher = patch.object(self.provider.session, "request", return_value=response)
        self.addCleanup(patcher.stop)
        return patcher.start()

    def test_list_records(self):
        """Records are requested with auth, scope and pagination."""
        request = self.request(
            api_response(200, {"records": [{"id": "rec_1"}], "pagination": {"next": 123}})
        )

        page = self.provider.list_records("example.com", limit=20)

        self.assertEqual(page, {"records": [{"id": "rec_1"}], "pagination": {"next": 123}})
        args, kwargs = request.call_args
        self.assertEqual(args, ("GET", "https://api.test/v4/domains/example.com/records"))
        self.assertEqual(kwargs["params"], {"limit": 20, "teamId": "team_1"})
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer secret")
        self.assertEqual(kwargs["timeout"], 30)

    def test_list_domains_with_cursor(self):
        """The cursor is sent as `until`."""
        request = self.request(api_response(200, {"domains": [{"name": "example.com"}]}))

        page = self.provider.list_domains(until=1584722256178)

        self.assertEqual(page["pagination"], {"next": None})
        self.assertEqual(request.call_args[1]["params"]["until"], 1584722256178)

    def test_create_record(self):
        """The record is posted and its ID returned."""
        request = self.request(api_response(200, {"uid": "rec_42"}))
        record = {"name": "api", "type": "A", "value": "198.51.100.100"}

        self.assertEqual(self.provider.create_record("example.com", record), "rec_42")
        args, kwargs = request.call_args
        self.assertEqual(args, ("POST", "https://api.test/v2/domains/example.com/records"))
        self.assertEqual(kwargs["json"], record)

    def test_import_zone(self):
        """Zone files are uploaded as JSON."""
        request = self.request(api_response(200, {"recordIds": ["rec_1", "rec_2"]}))

        self.assertEqual(self.provider.import_zone("example.com", ZONEFILE), ["rec_1", "rec_2"])
        self.assertEqual(request.call_args[0][0], "PUT")
        self.assertEqual(request.call_args[1]["json"], {"zonefile": ZONEFILE})

    def test_delete_record(self):
        """Empty responses are fine."""
        request = self.request(api_response(204))

        self.assertTrue(self.provider.delete_record("example.com", "rec_1"))
        self.assertEqual(
            request.call_args[0], ("DELETE", "https://api.test/v2/domains/example.com/records/rec_1")
        )

    def test_error_responses(self):
        """Status codes map to the APIError family."""
        cases = [
            (404, {"error": {"code": "not_found", "message": "Record not found"}}, NotFoundError),
            (403, {"error": {"code": "forbidden", "message": "Not allowed"}}, AuthenticationError),
            (400, {"error": {"code": "invalid_value", "message": "Bad value"}}, APIError),
        ]

        for status, body, error_class in cases:
            with self.subTest(status=status):
                with patch.object(self.provider.session, "request", return_value=api_response(status, body)):
                    with self.assertRaises(error_class) as ctx:
                        self.provider.get_record("rec_1")
                self.assertEqual(str(ctx.exception), body["error"]["message"])
                self.assertEqual(ctx.exception.code, body["error"]["code"])
                self.assertEqual(ctx.exception.status_code, status)

    def test_error_without_body(self):
        """Errors without JSON still raise."""
        self.request(api_response(502))

        with self.assertRaises(APIError) as ctx:
            self.provider.get_record("rec_1")
        self.assertIn("502", str(ctx.exception))

    def test_network_error(self):
        """Connection failures are wrapped."""
        request = self.request(None)
        request.side_effect = requests.exceptions.ConnectionError("connection refused")

        with self.assertRaises(APIError) as ctx:
            self.provider.list_domains()
        self.assertIn("connection refused", str(ctx.exception))

    def test_missing_token(self):
        """No request is made without a token."""
        provider = APIProvider({})
        with patch.object(provider.session, "request") as request:
            with self.assertRaises(AuthenticationError):
                provider.list_domains()
        request.assert_not_called()


class TestMockDNSProvider(unittest.TestCase):
    """Test the in-memory provider."""

    def setUp(self):
        self.provider = MockDNSProvider()
        self.provider.add_domain("example.com")

    def test_create_and_get_record(self):
        """Created records can be fetched by ID with their domain."""
        record_id = self.provider.create_record("example.com", {"name": "www", "type": "A", "value": "198.51.100.1"})

        record = self.provider.get_record(record_id)

        self.assertEqual(record["domain"], "example.com")
        self.assertEqual(record["value"], "198.51.100.1")

    def test_pagination(self):
        """Pages are newest first and the cursor continues where a page ended."""
        ids = [
            self.provider.create_record("example.com", {"name": f"r{i}", "type": "A", "value": "198.51.100.1"})
            for i in range(5)
        ]

        first = self.provider.list_records("example.com", limit=2)
        second = self.provider.list_records("example.com", limit=2, until=first["pagination"]["next"])
        third = self.provider.list_records("example.com", limit=2, until=second["pagination"]["next"])

        seen = [r["id"] for page in (first, second, third) for r in page["records"]]
        self.assertEqual(seen, list(reversed(ids)))
        self.assertIsNone(third["pagination"]["next"])

    def test_unknown_domain_and_record(self):
        """Missing domains and records raise NotFoundError."""
        with self.assertRaises(NotFoundError):
            self.provider.list_records("missing.com")
        with self.assertRaises(NotFoundError):
            self.provider.get_record("rec_missing")
        with self.assertRaises(NotFoundError):
            self.provider.delete_record("example.com", "rec_missing")

    def test_import_zone(self):
        """Zone files create one record per entry."""
        ids = self.provider.import_zone("example.com", ZONEFILE)

        self.assertEqual(len(ids), 3)
        self.assertEqual(len(self.provider.list_records("example.com")["records"]), 3)


class TestDNSClient(unittest.TestCase):
    """Test provider selection."""

    def test_api_provider_is_lazy(self):
        """The provider is created on first use with the shared settings."""
        client = DNSClient({"default_provider": "api", "token": "secret", "scope": "team_1"})

        self.assertIsNone(client._provider)
        self.assertIsInstance(client.provider, APIProvider)
        self.assertEqual(client.provider.token, "secret")
        self.assertEqual(client.scope, "team_1")

    def test_mock_provider(self):
        """The mock provider can be configured."""
        client = DNSClient({"default_provider": "mock", "dns_providers": {"mock": {"domains": {"example.com": []}}}})

        self.assertIsInstance(client.provider, MockDNSProvider)
        self.assertEqual(client.list_records("example.com")["records"], [])

    def test_unknown_provider(self):
        """Unknown providers fall back to the mock provider."""
        client = DNSClient({"default_provider": "route53"})

        with self.assertLogs("domains_cli.providers.dns_client", level="WARNING"):
            provider = client.provider
        self.assertIsInstance(provider, MockDNSProvider)


class TestConfig(unittest.TestCase):
    """Test configuration loading."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.global_dir = os.path.join(self.temp_dir, "global")
        self.project_dir = os.path.join(self.temp_dir, "project")
        os.makedirs(self.global_dir)
        os.makedirs(self.project_dir)
        patcher = patch.dict(os.environ, {"DOMAINS_TOKEN": ""})
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def write(self, path, data):
        with open(path, "w") as f:
            if isinstance(data, str):
                f.write(data)
            else:
                yaml.dump(data, f)

    def load(self, **kwargs):
        return load_config(self.global_dir, cwd=self.project_dir, **kwargs)

    def test_defaults(self):
        """Without config files the defaults apply."""
        config = self.load()

        self.assertIsNone(config["token"])
        self.assertEqual(config["default_provider"], "api")
        self.assertEqual(config["logging"]["level"], "WARNING")

    def test_global_config_is_merged(self):
        """Global settings override defaults without dropping nested keys."""
        self.write(
            os.path.join(self.global_dir, "config.yaml"),
            {"token": "abc", "dns_providers": {"mock": {"domains": {}}}},
        )

        config = self.load()

        self.assertEqual(config["token"], "abc")
        self.assertIn("api", config["dns_providers"])
        self.assertEqual(config["dns_providers"]["mock"], {"domains": {}})

    def test_local_config(self):
        """domains.yaml in the working directory overrides the global file."""
        self.write(os.path.join(self.global_dir, "config.yaml"), {"scope": "global-team"})
        self.write(os.path.join(self.project_dir, "domains.yaml"), {"scope": "project-team"})

        self.assertEqual(self.load()["scope"], "project-team")

        explicit = os.path.join(self.temp_dir, "other.yaml")
        self.write(explicit, {"scope": "other-team"})
        self.assertEqual(self.load(local_config_path=explicit)["scope"], "other-team")

    def test_missing_explicit_local_config(self):
        """An explicit local config must exist."""
        with self.assertRaises(ConfigError):
            self.load(local_config_path=os.path.join(self.temp_dir, "missing.yaml"))

    def test_invalid_yaml(self):
        """Unparseable or non-mapping files are ConfigErrors."""
        for content in ("token: [unclosed\n", "- a\n- b\n"):
            with self.subTest(content=content):
                self.write(os.path.join(self.global_dir, "config.yaml"), content)
                with self.assertRaises(ConfigError):
                    self.load()

    def test_token_from_environment(self):
        """DOMAINS_TOKEN is used only when no token is configured."""
        with patch.dict(os.environ, {"DOMAINS_TOKEN": "from-env"}):
            self.assertEqual(self.load()["token"], "from-env")

            self.write(os.path.join(self.global_dir, "config.yaml"), {"token": "from-file"})
            self.assertEqual(self.load()["token"], "from-file")

    def test_apply_overrides(self):
        """Command-line values win."""
        config = apply_overrides({"token": "a", "scope": "b"}, token="c")

        self.assertEqual(config, {"token": "c", "scope": "b"})

    def test_config_logger(self):
        """--debug forces DEBUG and a log file adds a file handler."""
        with patch("logging.basicConfig") as basic_config, patch("logging.FileHandler") as file_handler:
            config_logger({"logging": {"level": "INFO", "file": "domains.log"}}, debug=True)

        kwargs = basic_config.call_args[1]
        self.assertEqual(kwargs["level"], "DEBUG")
        file_handler.assert_called_once_with("domains.log")
        self.assertEqual(len(kwargs["handlers"]), 2)

        with patch("logging.basicConfig") as basic_config:
            config_logger({})
        self.assertEqual(basic_config.call_args[1]["level"], "WARNING")
        self.assertIsInstance(basic_config.call_args[1]["handlers"][0], logging.StreamHandler)


if __name__ == "__main__":
    unittest.main()
