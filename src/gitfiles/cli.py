"""git-files CLI — print the permalink of a file in the current working tree."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from gitfiles import __version__

app = typer.Typer(
    name="git-files",
    help="Get the GitHub / GitLab url of a file in a git repository.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        print(f"git-files {__version__}")
        raise typer.Exit()


def _platform_callback(value: Optional[str]):
    from gitfiles.errors import InvalidPlatform
    from gitfiles.url.platform import parse_platform

    if value is None:
        return None
    try:
        return parse_platform(value)
    except InvalidPlatform as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def main(
    file: Path = typer.Argument(..., help="File to link, relative or absolute"),
    line: Optional[int] = typer.Option(None, "--line", "-l", min=1, help="File line"),
    platform: Optional[str] = typer.Option(
        None, "--platform", "-p", callback=_platform_callback,
        help="Platform: github or gitlab",
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Repository url, skips the remote lookup"),
    remote: Optional[str] = typer.Option(None, "--remote", "-r", help="Remote name (default: origin)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitfiles.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show how the url was resolved"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Print the hosting-platform url of FILE at the current branch or commit."""
    from gitfiles.config.loader import ConfigError, load_config
    from gitfiles.errors import GitFilesError
    from gitfiles.git.adapter import open_repository
    from gitfiles.permalink import PermalinkRequest, resolve_permalink

    try:
        repo = open_repository()
    except GitFilesError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    try:
        cfg = load_config(repo.workdir, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Repo root: {escape(str(repo.workdir))}[/dim]")
        console.print(f"[dim]Git dir: {escape(str(repo.git_dir))}[/dim]")
        if not url and not cfg.remote.url:
            console.print(f"[dim]Remote: {escape(remote or cfg.remote.name)}[/dim]")

    request = PermalinkRequest(file=file, line=line, platform=platform, url=url, remote=remote)
    try:
        link = resolve_permalink(request, repo, cfg)
    except GitFilesError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if verbose:
        kind = "branch" if link.ref.is_branch else "commit"
        console.print(f"[dim]Base url: {escape(link.base_url)}[/dim]")
        console.print(f"[dim]Ref: {escape(link.ref.name)} ({kind})[/dim]")
        console.print(f"[dim]Path: {escape(link.path)}[/dim]")
        console.print(f"[dim]Platform: {link.platform.value}[/dim]")

    print(link.url)
