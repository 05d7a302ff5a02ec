"""
Artifact Provenance CLI

Command-line interface for listing GitHub Actions artifacts and locating the
workflow run attempt behind each one.

Usage:
    artifact-provenance repos
    artifact-provenance artifacts --links
    artifact-provenance artifacts -r acme/app -r acme/lib
    artifact-provenance resolve acme/app
"""

import asyncio

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from artifact_provenance.domain.inventory import ArtifactInventory
from artifact_provenance.domain.ports import ProgressSink
from artifact_provenance.infra.config import GitHubConfig, settings
from artifact_provenance.infra.exceptions import ArtifactProvenanceError, MissingTokenError
from artifact_provenance.infra.github import GitHubClient
from artifact_provenance.infra.observability import setup_logging
from artifact_provenance.services import (
    ArtifactScanner,
    LoggingProgressSink,
    build_artifact_inventory,
    list_repositories,
)

app = typer.Typer(
    name="artifact-provenance",
    help="List GitHub Actions artifacts and trace them to their workflow runs",
    add_completion=False,
)

console = Console()

TOKEN_OPTION = typer.Option(None, "--token", "-t", help="GitHub token (defaults to GITHUB_TOKEN)")


class RichProgressSink:
    """ProgressSink driving a rich progress bar task."""

    def __init__(self, progress: Progress, task_id):
        self.progress = progress
        self.task_id = task_id

    def __call__(self, message: str, percent: int | None = None) -> None:
        if percent is None:
            self.progress.update(self.task_id, description=message)
        else:
            self.progress.update(self.task_id, description=message, completed=percent)


@app.callback()
def main_callback(
    log_level: str = typer.Option(settings.observability.log_level, "--log-level", help="Log level"),
    log_format: str = typer.Option(settings.observability.log_format, "--log-format", help="console | json"),
):
    """Configure logging before any command runs."""
    setup_logging(level=log_level, format=log_format)


@app.command()
def repos(token: str | None = TOKEN_OPTION):
    """List the authenticated user's repositories."""
    config = _github_config(token)

    async def _run() -> list[str]:
        async with GitHubClient(config) as api:
            return await list_repositories(api, LoggingProgressSink(__name__), config.page_size)

    try:
        names = asyncio.run(_run())
    except ArtifactProvenanceError as e:
        console.print(f"\n[bold red]❌ Failed to fetch repositories:[/bold red] {e}")
        raise typer.Exit(code=1)

    for name in names:
        console.print(name)
    console.print(f"\n[dim]{len(names)} repositories[/dim]")


@app.command()
def artifacts(
    token: str | None = TOKEN_OPTION,
    repository: list[str] | None = typer.Option(
        None, "--repo", "-r", help="Repository to scan (repeatable; default: all of yours)"
    ),
    links: bool = typer.Option(False, "--links", "-l", help="Resolve workflow run links"),
):
    """
    Scan repositories for artifacts.

    Repositories are ranked by total artifact size; with --links every
    artifact is traced to the run attempt that produced it.
    """
    config = _github_config(token)

    async def _run() -> list[ArtifactInventory]:
        async with GitHubClient(config) as api:
            scanner = ArtifactScanner(api, config)
            with _progress_bar() as progress:
                task = progress.add_task("[cyan]Fetching repositories...", total=100)
                sink = RichProgressSink(progress, task)
                inventories = await scanner.scan(sink, repositories=repository or None)
                if links:
                    await scanner.resolve_links(inventories, sink)
            return inventories

    try:
        inventories = asyncio.run(_run())
    except ArtifactProvenanceError as e:
        console.print(f"\n[bold red]❌ Scan failed:[/bold red] {e}")
        raise typer.Exit(code=1)

    if not inventories:
        console.print("[dim]No artifacts found[/dim]")
        return

    for inventory in inventories:
        _display_inventory(inventory)


@app.command()
def resolve(
    repository: str = typer.Argument(..., help="Repository (owner/name)"),
    token: str | None = TOKEN_OPTION,
):
    """Trace every artifact of one repository to its workflow run attempt."""
    config = _github_config(token)

    async def _run() -> ArtifactInventory:
        async with GitHubClient(config) as api:
            scanner = ArtifactScanner(api, config)
            with _progress_bar() as progress:
                task = progress.add_task(f"[cyan]Fetching artifacts for {repository}...", total=100)
                sink: ProgressSink = RichProgressSink(progress, task)
                inventory = await build_artifact_inventory(api, repository, sink, config.page_size)
                result = await scanner.resolver.resolve(inventory, sink)
            console.print(
                f"[dim]{result.matched} linked, {result.fallbacks} fallback, "
                f"{result.runs_scanned}/{result.runs_total} runs scanned[/dim]"
            )
            return inventory

    try:
        inventory = asyncio.run(_run())
    except ArtifactProvenanceError as e:
        console.print(f"\n[bold red]❌ Resolution failed:[/bold red] {e}")
        raise typer.Exit(code=1)

    if len(inventory) == 0:
        console.print(f"[dim]{repository}: no artifacts[/dim]")
        return
    _display_inventory(inventory)


# === Helper Functions ===


def _github_config(token: str | None) -> GitHubConfig:
    """GitHub settings with the CLI token applied; exits when no token is available."""
    config = settings.github
    if token:
        config = config.model_copy(update={"token": token})
    if not config.token:
        console.print(f"[bold red]❌ {MissingTokenError().message}[/bold red]")
        raise typer.Exit(code=1)
    return config


def _progress_bar() -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    )


def _display_inventory(inventory: ArtifactInventory) -> None:
    """Render one repository as a table."""
    console.print(
        f"\n[bold]{inventory.repository} | Total Artifact Size: {inventory.total_size_mb:.2f} MB[/bold]",
        soft_wrap=True,
    )

    table = Table()
    table.add_column("Artifact", style="cyan")
    table.add_column("Size (MB)", justify="right")

    has_links = inventory.has_links
    if has_links:
        table.add_column("Link", style="blue")

    for artifact in inventory:
        row = [artifact.name, f"{artifact.size_mb:.2f}"]
        if has_links:
            row.append(artifact.workflow_link or "")
        table.add_row(*row)

    console.print(table)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
