"""
tokensmith command line interface.

Commands:
- build:  tokens.css, _tokens.sass and the HTML pages
- tokens: stylesheets only
- pages:  HTML pages only
- watch:  build, then rebuild whenever a token file changes

Environment:
    LOG_LEVEL              - Logging level (default: INFO)
    TOKENSMITH_TOKENS_DIR  - Token source directory
    TOKENSMITH_OUTPUT_DIR  - Stylesheet output directory
    TOKENSMITH_PAGES_DIR   - HTML page output directory
"""

from __future__ import annotations

import logging
import os
import platform
from collections.abc import Callable
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ._version import get_version
from .build import BuildResult, build_all, build_docs, build_tokens
from .config import BuildConfig, load_config
from .core.errors import TokensmithError
from .watch import watch_and_rebuild

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Design token resolver: CSS custom properties, Sass variables and HTML docs",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokensmith version {get_version()}")
        typer.echo(f"  Python:   {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform: {platform.system()} {platform.release()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    tokens_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--tokens-dir",
        help="Token source directory (contains base/ and alias/)",
    ),
    config_file: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to tokensmith.toml (default: ./tokensmith.toml if present)",
    ),
) -> None:
    """tokensmith CLI main callback for global options."""
    _configure_logging(verbose)
    try:
        config = load_config(config_file)
    except TokensmithError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    ctx.obj = config.with_overrides(tokens_dir=tokens_dir)


def _command_config(
    ctx: typer.Context, project_overrides: Path | None, strict: bool
) -> BuildConfig:
    config: BuildConfig = ctx.obj if ctx.obj is not None else load_config()
    return config.with_overrides(overrides_path=project_overrides, strict=strict or None)


def _report(result: BuildResult) -> None:
    for path in result.written:
        console.print(f"[green]✓[/green] {path}")
    unresolved = result.token_set.unresolved
    if unresolved:
        console.print(f"[yellow]{len(unresolved)} unresolved reference(s)[/yellow]")


def _run(action: Callable[[BuildConfig], BuildResult], config: BuildConfig) -> None:
    """Run one generation pass, turning token and file errors into exit status 1."""
    try:
        result = action(config)
    except (TokensmithError, OSError) as e:
        logger.error("Build failed: %s", e)
        console.print(f"[red]Build failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _report(result)


# Shared option definitions
_OVERRIDES_OPTION = typer.Option(
    None,
    "--project-overrides",
    help="Token document deep-merged into the light and dark UI themes",
)
_STRICT_OPTION = typer.Option(
    False,
    "--strict",
    help="Fail on unresolved token references instead of warning",
)


@app.command(name="build")
def build_command(
    ctx: typer.Context,
    project_overrides: Path | None = _OVERRIDES_OPTION,
    strict: bool = _STRICT_OPTION,
) -> None:
    """Generate tokens.css, _tokens.sass and the HTML pages."""
    _run(build_all, _command_config(ctx, project_overrides, strict))


@app.command(name="tokens")
def tokens_command(
    ctx: typer.Context,
    project_overrides: Path | None = _OVERRIDES_OPTION,
    strict: bool = _STRICT_OPTION,
) -> None:
    """Generate tokens.css and _tokens.sass only."""
    _run(build_tokens, _command_config(ctx, project_overrides, strict))


@app.command(name="pages")
def pages_command(
    ctx: typer.Context,
    project_overrides: Path | None = _OVERRIDES_OPTION,
    strict: bool = _STRICT_OPTION,
) -> None:
    """Generate the HTML documentation pages only."""
    _run(build_docs, _command_config(ctx, project_overrides, strict))


@app.command(name="watch")
def watch_command(
    ctx: typer.Context,
    project_overrides: Path | None = _OVERRIDES_OPTION,
    strict: bool = _STRICT_OPTION,
    debounce: float = typer.Option(0.2, "--debounce", help="Seconds to wait after a change"),
) -> None:
    """Build once, then rebuild whenever a token file changes."""
    config = _command_config(ctx, project_overrides, strict)

    def rebuild() -> None:
        _report(build_all(config))

    try:
        rebuild()
    except (TokensmithError, OSError) as e:
        logger.error("Build failed: %s", e)
        console.print(f"[red]Build failed:[/red] {escape(str(e))}")

    console.print(f"[cyan]Watching {config.tokens_dir} (Ctrl+C to stop)[/cyan]")
    try:
        watch_and_rebuild(
            config.tokens_dir,
            rebuild,
            overrides_path=config.overrides_path,
            debounce=debounce,
        )
    except KeyboardInterrupt:
        console.print("Stopped watching")


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
