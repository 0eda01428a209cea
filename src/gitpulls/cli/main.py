"""Main CLI entry point."""

import asyncio
import logging

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from gitpulls.config import get_settings
from gitpulls.errors import (
    InvalidInputError,
    MalformedResponseError,
    RateLimitCheckError,
    RateLimitExceededError,
    describe_status,
)
from gitpulls.github.client import GitHubClient
from gitpulls.models.pr import CountResult
from gitpulls.models.repo import SelectedRepository
from gitpulls.pipeline import run
from gitpulls.prompts import select_repository
from gitpulls.utils.logging import setup_logging

app = typer.Typer(
    name="gitpulls",
    help="Interactive tool that counts the open pull requests of a GitHub repository",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def _version_callback(value: bool):
    if value:
        from gitpulls import __version__

        console.print(f"gitpulls version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information",
    ),
):
    """
    Ask for a repository and print how many of its pull requests are open.

    Example:
        gitpulls
    """
    settings = get_settings()
    setup_logging(logging.DEBUG if verbose else settings.log_level)

    console.print(
        Panel.fit(
            "[bold blue]Welcome to gitpulls![/bold blue]\n"
            "Let's process some GitHub data!",
            border_style="blue",
        )
    )
    console.print()

    try:
        selection = select_repository(
            console, per_page=settings.per_page, max_attempts=settings.max_attempts
        )
    except (InvalidInputError, EOFError, KeyboardInterrupt) as e:
        logger.debug("Prompt aborted: %r", e)
        console.print("\n[red]Aborted.[/red]")
        raise typer.Exit(1)

    console.print(f"owner: {selection.owner} name: {selection.repo}", markup=False)

    client = GitHubClient(settings=settings)
    try:
        code = asyncio.run(_count_async(selection, client))
    except KeyboardInterrupt:
        console.print("\n[red]Aborted.[/red]")
        raise typer.Exit(1)
    raise typer.Exit(code)


async def _count_async(selection: SelectedRepository, client: GitHubClient) -> int:
    """Run the pipeline and report. Returns the exit code."""
    try:
        with console.status("[bold green]Fetching pull requests..."):
            result = await run(selection, client)
    except RateLimitExceededError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return 0
    except RateLimitCheckError as e:
        console.print(f"[red]{e}[/red]")
        return 1
    except MalformedResponseError as e:
        logger.debug("%s", e)
        console.print("[red]Unexpected response from GitHub[/red]")
        return 1
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        message = describe_status(status)
        if message:
            console.print(f"[red]{message}[/red]")
        else:
            logger.warning("Request failed (HTTP %d)", status)
        return 1
    except httpx.RequestError as e:
        console.print(f"[red]Could not reach GitHub: {escape(str(e))}[/red]")
        return 1

    _report(result)
    return 0


def _report(result: CountResult):
    logger.debug(
        "%s: %d pull requests, %d open",
        result.selection.full_name,
        result.total,
        result.open_count,
    )
    console.print(f"# of open PR: {result.open_count}", markup=False)


if __name__ == "__main__":
    app()
