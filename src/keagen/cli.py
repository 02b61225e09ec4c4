"""Command-line interface for generating Kea DHCPv4 configuration."""

import sys

import click

from . import __version__
from .base import dump_json, dump_yaml
from .config import KeaConfig
from .exceptions import IncompleteConfigError


def build_sample_config() -> KeaConfig:
    """Build the sample configuration written by ``keagen generate``."""
    config = KeaConfig()
    subnet4 = config.dhcp4.subnet4
    subnet_id = subnet4.add_config("192.168.10.0/24")
    subnet4.add_pool_for_cfg(subnet_id, "192.168.10.10", "192.168.10.20")
    config.dhcp4.option_data.add_option_always("domain-name-servers", "192.0.2.1, 192.0.2.2")
    return config


@click.group()
@click.version_option(version=__version__, prog_name="keagen")
def cli() -> None:
    """keagen - Build Kea DHCPv4 server configuration documents."""
    pass


@cli.command()
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["json", "yaml"]), default="json", help="Output format",
)
@click.option("--strict", is_flag=True, help="Fail if a required section is empty")
def generate(output_format: str, strict: bool) -> None:
    """Print the sample configuration to stdout.

    \b
    Examples:
        keagen generate
        keagen generate --format yaml
    """
    config = build_sample_config()

    try:
        document = config.to_dict(strict=True)
    except IncompleteConfigError as e:
        if strict:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        click.echo(f"Warning: {e}", err=True)
        document = e.document

    if output_format == "yaml":
        click.echo(dump_yaml(document), nl=False)
    else:
        click.echo(dump_json(document, indent=2))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
