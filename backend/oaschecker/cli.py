"""
CLI for the OpenAPI conformance checker

Commands:
    check   - Load a contract document and report whether it is usable

Usage:
    oaschecker check openapi.yaml
    oaschecker check openapi.yaml --verbose
    oaschecker check openapi.yaml --json

Exit code: 0 if the contract loads, 1 otherwise.
"""

import json
import sys

import click

from . import __version__
from .checker import Checker
from .errors import ContractLoadError


@click.group()
@click.version_option(version=__version__, prog_name="oaschecker")
def cli():
    """OpenAPI conformance checker CLI."""
    pass


@cli.command("check")
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="List every documented operation")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def check(file_path, verbose, output_json):
    """
    Load a contract document the same way the middleware does.

    FILE_PATH: Path to an OpenAPI 3 document (YAML or JSON)
    """
    try:
        checker = Checker.from_file(file_path)
    except ContractLoadError as e:
        if output_json:
            click.echo(json.dumps({"file": file_path, "ok": False, "error": str(e)}, indent=2))
        else:
            click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    operations = checker.operations()

    if output_json:
        click.echo(json.dumps({
            "file": file_path,
            "ok": True,
            "operations": [{"method": m, "path": p} for m, p in operations],
        }, indent=2))
        return

    click.echo(f"OK: {file_path} documents {len(operations)} operation(s)")
    if verbose:
        for method, path in operations:
            click.echo(f"  {method:<7} {path}")
