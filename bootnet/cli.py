"""BootNet CLI using Click."""

from __future__ import annotations

import json
import logging
import sys
from importlib.metadata import version

import click

from .cli_types import BootConfigArgs
from .config import load_config
from .exceptions import AggregationInvariantError, BootNetError, UserError
from .pipeline import build_pipeline

# Module logger
logger = logging.getLogger("bootnet")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


def cmd_boot_config(args: BootConfigArgs) -> None:
    """Resolve the host and print its boot network document as JSON."""
    config = load_config(args.config)
    pipeline = build_pipeline(config, logger=logger)
    document = pipeline.run(args.host)
    click.echo(json.dumps(document, indent=2, sort_keys=True))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("bootnet"), prog_name="bootnet")
@click.argument("host", metavar="[HOSTNAME_OR_UUID]", required=False)
@click.option(
    "--config",
    "-c",
    type=click.Path(),
    help="Path to JSON config file (default: $BOOTNET_CONFIG or /opt/smartdc/booter/config.json).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
def cli(host: str | None, config: str | None, verbose: bool):
    """Print the boot-time network configuration for a compute node.

    HOSTNAME_OR_UUID selects the node by UUID or hostname. Without it, the
    node this command runs on is used.
    """
    setup_logging(verbose=verbose)
    args = BootConfigArgs(host=host, config=config, verbose=verbose)
    try:
        cmd_boot_config(args)
    except UserError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except (BootNetError, AggregationInvariantError) as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
