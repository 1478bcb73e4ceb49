"""
Follow-Back Analyzer CLI

Command-line interface for comparing following/followers exports.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from followback.models.entities import AnalysisResult, ContactRecord

# Initialize console for rich output
console = Console()

SECTION_TITLES = [
    ("following", "Following", "👥"),
    ("followers", "Followers", "👤"),
    ("not_following_back", "Not following back", "⚠️"),
]


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure logging with rich handler."""
    handlers = [RichHandler(console=console, show_path=False)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=handlers,
        force=True,
    )


def _load_exports(following_path: str, followers_paths: tuple[str, ...]):
    """Load all export files, exiting on the first parse failure.

    Returns None when any file is blank.
    """
    from followback.pipeline.ingest import EmptyInput, ParseFailure, load_export_file

    outcomes = {}
    for path in (following_path, *followers_paths):
        try:
            outcomes[path] = load_export_file(path)
        except Exception as e:
            console.print(f"[red]✗[/red] Failed to load {Path(path).name}: {escape(str(e))}")
            logging.debug(f"Load error: {e}", exc_info=True)
            sys.exit(1)

    for path, outcome in outcomes.items():
        if isinstance(outcome, ParseFailure):
            console.print(f"[red]✗[/red] Could not parse {Path(path).name}: {escape(outcome.message)}")
            sys.exit(1)

    if any(isinstance(outcome, EmptyInput) for outcome in outcomes.values()):
        logging.debug("Blank export file, nothing to analyze")
        return None

    following_raw = outcomes[following_path]
    followers_parts = [outcomes[path] for path in followers_paths]
    return following_raw, followers_parts


def _run_analysis(following_path: str, followers_paths: tuple[str, ...]) -> Optional[AnalysisResult]:
    """Load, parse and compare exports, handling every failure mode for the CLI."""
    from followback.pipeline.compare import AnalysisError, analyze
    from followback.pipeline.ingest import FOLLOWERS_KEY, merge_exports

    loaded = _load_exports(following_path, followers_paths)
    if loaded is None:
        return None

    following_raw, followers_parts = loaded

    try:
        return analyze(following_raw, merge_exports(followers_parts, FOLLOWERS_KEY))
    except Exception as e:
        logging.debug(f"Analysis error: {e}", exc_info=True)
        console.print(f"[red]✗[/red] {AnalysisError()}")
        sys.exit(1)


def _records_table(
    records: list[ContactRecord],
    highlight: bool = False,
    max_rows: int = 0,
) -> Table:
    """Build a username/link table for one section."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Username")
    table.add_column("Link")

    shown = records[:max_rows] if max_rows > 0 else records
    row_style = "yellow" if highlight else None

    for record in shown:
        link = escape(record.href) if record.href else "[dim]-[/dim]"
        table.add_row(escape(record.username), link, style=row_style)

    if len(shown) < len(records):
        table.add_row(f"[dim]... and {len(records) - len(shown)} more[/dim]", "")

    return table


def _print_result(result: AnalysisResult, show_all: bool, max_rows: int) -> None:
    for key, title, icon in SECTION_TITLES:
        if not show_all and key != "not_following_back":
            continue

        records = getattr(result, key)
        console.print(f"\n[bold]{icon} {title} ({len(records)})[/bold]")

        if not records:
            console.print("  [dim]📭 No data[/dim]")
            continue

        console.print(_records_table(
            records,
            highlight=key == "not_following_back",
            max_rows=max_rows,
        ))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """Follow-Back Analyzer - Find accounts that don't follow you back."""
    from followback.utils.config import load_config

    ctx.ensure_object(dict)
    config = load_config()
    ctx.obj["config"] = config

    if verbose:
        ctx.obj["log_level"] = "DEBUG"
    elif quiet:
        ctx.obj["log_level"] = "WARNING"
    else:
        ctx.obj["log_level"] = config.logging.level

    setup_logging(ctx.obj["log_level"], config.logging.file)


@cli.command()
@click.option(
    "--following",
    "following_path",
    required=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="following.json from the account data export",
)
@click.option(
    "--followers",
    "followers_paths",
    required=True,
    multiple=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="followers_N.json from the export (repeat for each part)",
)
@click.option(
    "--output", "-o",
    "output_dir",
    default=None,
    type=click.Path(file_okay=False, dir_okay=True),
    help="Write reports to this directory",
)
@click.option(
    "--format", "-f",
    "formats",
    multiple=True,
    type=click.Choice(["csv", "markdown", "json"]),
    help="Report formats to generate (default: from config; without --output, reports go to the configured directory)",
)
@click.option(
    "--show-all",
    is_flag=True,
    help="Also list all following and followers",
)
@click.pass_context
def analyze(
    ctx: click.Context,
    following_path: str,
    followers_paths: tuple[str, ...],
    output_dir: Optional[str],
    formats: tuple[str, ...],
    show_all: bool,
) -> None:
    """Find followed accounts that don't follow back."""
    from followback.models.reciprocity import summarize
    from followback.pipeline.outputs import generate_outputs

    config = ctx.obj["config"]

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Processing data...", total=None)
        result = _run_analysis(following_path, followers_paths)
        progress.update(task, completed=True)

    if result is None:
        return

    summary = summarize(result)

    console.print("\n[bold blue]Follow-Back Analysis[/bold blue]")
    console.print("=" * 50)
    console.print(
        f"  Following: {summary['following']}  "
        f"Followers: {summary['followers']}  "
        f"Not following back: [bold yellow]{summary['not_following_back']}[/bold yellow]"
    )

    _print_result(
        result,
        show_all=show_all or config.display.show_all_sections,
        max_rows=config.display.max_rows,
    )

    # Asking for a format without a directory writes to the configured one
    if formats and not output_dir:
        output_dir = config.output.directory

    if output_dir:
        output_files = generate_outputs(
            result,
            output_dir=output_dir,
            formats=list(formats) or config.output.formats,
            timestamp_filenames=config.output.timestamp_filenames,
        )

        console.print("\n[bold]Reports Generated:[/bold]")
        for fmt, path in output_files.items():
            console.print(f"  • {fmt}: [cyan]{path}[/cyan]")

    console.print()


@cli.command()
@click.option(
    "--following",
    "following_path",
    required=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="following.json from the account data export",
)
@click.option(
    "--followers",
    "followers_paths",
    required=True,
    multiple=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="followers_N.json from the export (repeat for each part)",
)
@click.pass_context
def stats(ctx: click.Context, following_path: str, followers_paths: tuple[str, ...]) -> None:
    """Show quick statistics about your exports."""
    from followback.models.reciprocity import summarize

    result = _run_analysis(following_path, followers_paths)
    if result is None:
        return

    summary = summarize(result)

    console.print("\n[bold blue]Export Statistics[/bold blue]")
    console.print("=" * 50)

    table = Table(show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Following", str(summary["following"]))
    table.add_row("Followers", str(summary["followers"]))
    table.add_row("Mutual", str(summary["mutual"]))
    table.add_row("Not following back", str(summary["not_following_back"]))
    table.add_row("Follow-back ratio", f"{summary['follow_back_ratio']:.0%}")

    console.print(table)
    console.print()


@cli.command()
@click.option(
    "--source", "-s",
    default=None,
    help="Path or URL of the instructions document",
)
@click.pass_context
def instructions(ctx: click.Context, source: Optional[str]) -> None:
    """Show how to export your followers and following."""
    from followback.pipeline.instructions import load_instructions

    config = ctx.obj["config"]
    text = load_instructions(
        source or config.instructions.source,
        timeout=config.instructions.timeout_seconds,
    )
    console.print(Markdown(text))


@cli.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from followback import __version__

    console.print(f"Follow-Back Analyzer v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
