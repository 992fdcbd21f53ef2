"""Usage text for the `dns` command."""

from ... import PACKAGE_NAME
from ...utils import output


def help_text(package_name: str = PACKAGE_NAME) -> str:
    """Return the `dns` usage text as rich markup."""
    cmd = f"$ {package_name} dns"
    return f"""
  [bold]{package_name} dns[/bold] \\[options] <command>

  [dim]Commands:[/dim]

    add     \\[details]             Add a new DNS entry (see below for examples)
    import  \\[domain] \\[zonefile]   Import a DNS zone file (see below for examples)
    rm      \\[id]                  Remove a DNS entry using its ID
    ls      \\[domain]              List all DNS entries for a domain

  [dim]Options:[/dim]

    -h, --help                     Output usage information
    -A [bold underline]FILE[/bold underline], --local-config=[bold underline]FILE[/bold underline]   Path to the local `domains.yaml` file
    -Q [bold underline]DIR[/bold underline], --global-config=[bold underline]DIR[/bold underline]    Path to the global `.domains` directory
    -d, --debug                    Debug mode \\[off]
    --no-color                     No color mode \\[off]
    -t [bold underline]TOKEN[/bold underline], --token=[bold underline]TOKEN[/bold underline]        Login token
    -S, --scope                    Set a custom scope
    -N, --next                     Show next page of results
    --limit=[bold underline]VALUE[/bold underline]                  Number of results to return per page (default: 20, max: 100)

  [dim]Examples:[/dim]

  [grey50]–[/grey50] Add an A record for a subdomain

      [cyan]{cmd} add <DOMAIN> <SUBDOMAIN> <A | AAAA | ALIAS | CNAME | TXT> <VALUE>[/cyan]
      [cyan]{cmd} add example.com api A 198.51.100.100[/cyan]

  [grey50]–[/grey50] Add an MX record (@ as a name refers to the domain)

      [cyan]{cmd} add <DOMAIN> '@' MX <RECORD VALUE> <PRIORITY>[/cyan]
      [cyan]{cmd} add example.com '@' MX mail.example.com 10[/cyan]

  [grey50]–[/grey50] Add an SRV record

      [cyan]{cmd} add <DOMAIN> <NAME> SRV <PRIORITY> <WEIGHT> <PORT> <TARGET>[/cyan]
      [cyan]{cmd} add example.com '@' SRV 10 0 389 example.net[/cyan]

  [grey50]–[/grey50] Add a CAA record

      [cyan]{cmd} add <DOMAIN> <NAME> CAA '<FLAGS> <TAG> "<VALUE>"'[/cyan]
      [cyan]{cmd} add example.com '@' CAA '0 issue "letsencrypt.org"'[/cyan]

  [grey50]–[/grey50] Import a Zone file

      [cyan]{cmd} import <DOMAIN> <FILE>[/cyan]
      [cyan]{cmd} import example.com ./zonefile.txt[/cyan]

  [grey50]–[/grey50] Paginate results, where [dim]`1584722256178`[/dim] is the time in milliseconds since the UNIX epoch.

      [cyan]{cmd} ls --next 1584722256178[/cyan]
      [cyan]{cmd} ls example.com --next 1584722256178[/cyan]
"""


def print_help():
    output.show(help_text())
