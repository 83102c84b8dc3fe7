"""domainaddr CLI -- check and decompose hosts from the shell.

Thin wrapper around :mod:`domainaddr` using click.
"""

from __future__ import annotations

import json
import logging

import click

from domainaddr.config import Settings
from domainaddr.domain import Domain
from domainaddr.errors import AddressError
from domainaddr.host import Host


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.debug:
        logging.getLogger("domainaddr").setLevel(logging.DEBUG)


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _describe(host: Host) -> dict:
    address = host.address
    info = {
        "type": type(address).__name__,
        "address": str(address),
        "name": address.name,
        "port": host.port.number if host.port is not None else None,
        "local": address.is_local(),
    }
    if isinstance(address, Domain):
        info.update(
            subdomains=[str(s) for s in address.subdomains],
            sld=str(address.sld),
            tld=str(address.tld) if address.tld is not None else None,
        )
    return info


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="domainaddr")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """domainaddr -- domain name validation and decomposition."""
    settings = Settings()
    _configure_logging(settings)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# domainaddr check
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("hosts", nargs=-1, required=True)
def check(hosts: tuple[str, ...]) -> None:
    """Report whether each HOST is a valid address[:port]."""
    failed = False
    for raw in hosts:
        ok = Host.validate(raw)
        failed = failed or not ok
        click.echo(f"{raw}\t{'valid' if ok else 'invalid'}")
    if failed:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# domainaddr parse
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("host")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print JSON instead of text (also enabled by DOMAINADDR_JSON).",
)
@click.pass_context
def parse(ctx: click.Context, host: str, as_json: bool) -> None:
    """Decompose HOST into its address parts and port."""
    try:
        parsed = Host.parse(host)
    except AddressError as exc:
        _error(f"Error: {exc}")
        return

    info = _describe(parsed)
    if as_json or ctx.obj["settings"].json_output:
        click.echo(json.dumps(info, indent=2))
        return

    click.echo(f"Type:       {info['type']}")
    click.echo(f"Address:    {info['address']}")
    if "sld" in info:
        click.echo(f"Subdomains: {', '.join(info['subdomains']) or '-'}")
        click.echo(f"SLD:        {info['sld']}")
        click.echo(f"TLD:        {info['tld'] or '-'}")
    if info["port"] is not None:
        click.echo(f"Port:       {info['port']} ({parsed.port.port_type.value})")
    if info["local"]:
        click.echo("Local:      yes")


if __name__ == "__main__":
    cli()
