"""CLI entry point for the storefront client."""

from __future__ import annotations

import logging
from typing import Optional

import click
from rich.console import Console

from steamsearch.errors import AmbiguousMatch

console = Console()


@click.group()
@click.version_option(package_name="steamsearch")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and matching decisions.")
def cli(verbose: bool):
    """steamsearch - Look up games on the Steam storefront."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# ---------------------------------------------------------------------------
# steamsearch env
# ---------------------------------------------------------------------------


@cli.group(invoke_without_command=True)
@click.pass_context
def env(ctx):
    """Show or configure settings.

    Run without arguments to see current status.
    Use `steamsearch env set KEY value` to save a setting to ~/.steamsearch/.env.
    """
    if ctx.invoked_subcommand is not None:
        return

    from steamsearch.config import PERSISTENT_ENV, check_env

    console.print("Settings:")
    console.print()
    for var, is_set, info in check_env():
        status = "[green]overridden[/green]" if is_set else "default"
        console.print(f"  {var}: {status}")
        console.print(f"    {info['description']}")
        console.print(f"    Default: {info['default']}", style="dim")
        console.print()

    console.print(f"Config file: {PERSISTENT_ENV}", style="dim")


@env.command("set")
@click.argument("key")
@click.argument("value")
def env_set(key: str, value: str):
    """Save a setting to ~/.steamsearch/.env.

    KEY: one of the settings listed by `steamsearch env`
    VALUE: the value to store
    """
    from steamsearch.config import VALID_KEYS, save_setting

    key = key.upper()
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key: {key}[/red]")
        console.print(f"Valid keys: {', '.join(sorted(VALID_KEYS))}")
        raise SystemExit(1)

    path = save_setting(key, value)
    console.print(f"Saved {key} to {path}")


# ---------------------------------------------------------------------------
# lookups
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("query")
def search(query: str):
    """List every app the storefront search returns.

    QUERY: the game name to search for
    """
    from steamsearch.renderer import render_search_results
    from steamsearch.storefront import search_apps

    try:
        results = search_apps(query)
        render_search_results(results, query=query)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)


@cli.command()
@click.argument("query")
@click.option("--max-listed", default=None, type=click.IntRange(min=1),
              help="How many candidates to list when the name is ambiguous.")
def resolve(query: str, max_listed: Optional[int]):
    """Resolve a game name to a single app id.

    QUERY: the game name, matched case-insensitively
    """
    from steamsearch.renderer import render_ambiguous, render_resolved
    from steamsearch.storefront import resolve_application

    try:
        app = resolve_application(query, max_listed=max_listed)
        render_resolved(app)
    except AmbiguousMatch as e:
        render_ambiguous(e)
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)


@cli.command()
@click.argument("query")
def review(query: str):
    """Show how a game was received by reviewers.

    QUERY: the game name, matched case-insensitively
    """
    from steamsearch.renderer import render_ambiguous, render_review
    from steamsearch.storefront import get_app_review

    try:
        text, _ = get_app_review(query)
        render_review(text)
    except AmbiguousMatch as e:
        render_ambiguous(e)
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)


@cli.command()
@click.argument("app_id")
def details(app_id: str):
    """Show storefront details for an app.

    APP_ID: numeric Steam app id (e.g., 620)
    """
    from steamsearch.renderer import render_app_details
    from steamsearch.storefront import get_app_details

    try:
        entries = get_app_details(app_id)
        if not entries:
            console.print(f"[yellow]No details available for app {app_id}.[/yellow]")
        for entry_id, entry in entries.items():
            render_app_details(entry_id, entry)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)


@cli.command()
@click.argument("app_id")
def adult(app_id: str):
    """Check whether an app is flagged for adult sexual content.

    APP_ID: numeric Steam app id (e.g., 620)
    """
    from steamsearch.renderer import render_adult_verdict
    from steamsearch.storefront import check_app_is_adult

    try:
        render_adult_verdict(app_id, check_app_is_adult(app_id))
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)
