"""Command-line entry point for gh-dispatch.

Provides two subcommands:
    gh-dispatch operations  – list the known operations and their URL templates
    gh-dispatch call        – run one operation and print the merged JSON result
"""

import json
import logging

import click
import requests

from gh_dispatch import __version__
from gh_dispatch.github_api import OPERATIONS, GitHubClient, redact_token
from gh_dispatch.settings import GitHubSettings


@click.group()
@click.version_option(version=__version__, prog_name="gh-dispatch")
@click.option(
    "--token",
    envvar="GITHUB_TOKEN",
    default=None,
    help="GitHub access token (defaults to $GITHUB_TOKEN).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose logging.",
)
@click.pass_context
def cli(ctx: click.Context, token: str | None, verbose: bool) -> None:
    """Call the GitHub REST API by operation name."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)
    ctx.obj = {"token": token}


@cli.command("operations")
def list_operations() -> None:
    """List operations and the URL templates they resolve to."""
    for name, route in OPERATIONS.items():
        click.echo(f"{click.style(name, bold=True)}: {', '.join(route.templates)}")


@cli.command()
@click.argument("operation", type=click.Choice(list(OPERATIONS)))
@click.argument("args", nargs=-1)
@click.option(
    "--max-pages",
    type=click.IntRange(min=1),
    default=None,
    help="Stop with an error if the API advertises more pages than this.",
)
@click.pass_obj
def call(obj: dict, operation: str, args: tuple[str, ...], max_pages: int | None) -> None:
    """Run OPERATION, filling its URL template with ARGS."""
    token = obj["token"]
    if not token:
        raise click.UsageError("A GitHub token is required (--token or GITHUB_TOKEN).")

    settings = GitHubSettings() if max_pages is None else GitHubSettings(max_pages=max_pages)
    client = GitHubClient(token, settings=settings)
    try:
        result = client.call(operation, *args)
    except (requests.RequestException, ValueError, TypeError, RuntimeError) as exc:
        raise click.ClickException(redact_token(str(exc))) from exc

    click.echo(json.dumps(result, indent=2))
