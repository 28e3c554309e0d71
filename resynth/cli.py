"""
resynth.cli - Typer CLI entry point.

The emotion and sentiment commands run the same pipeline and differ only in
which projection of the speech record they append, and to which file.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from resynth import __version__
from resynth.config import (
    CONFIG_FILENAME,
    ExtractorConfig,
    ScoreFilterOptions,
    create_default_config,
    load_api_token,
    load_config,
    merge_filter_options,
    write_config,
)
from resynth.exceptions import ResynthError
from resynth.logging import configure_logging
from resynth.models import PROJECTIONS

app = typer.Typer(
    name="resynth",
    help="Speech emotion and sentiment extractor.\n\n"
    "Scores speech transcripts line by line with a hosted text classifier "
    "and appends the results to JSON collections.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"resynth {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Resynth - speech emotion and sentiment extractor."""
    pass


def run_extraction(
    input_file: Path,
    output: Path,
    config: ExtractorConfig,
    options: ScoreFilterOptions,
    kind: str,
    verbose: bool,
) -> None:
    """Score one speech and append the chosen projection to a collection."""
    configure_logging(verbose)

    from resynth.pipeline import extract_speech
    from resynth.provider.huggingface import create_client_from_config
    from resynth.store import AppendingJSONStore

    try:
        client = create_client_from_config(config.provider, load_api_token())

        console.print(f"[cyan]Processing speech from {input_file}...[/cyan]")
        result = extract_speech(
            input_path=input_file,
            provider=client,
            options=options,
            store=AppendingJSONStore(output),
            projection=PROJECTIONS[kind],
            score_lines=kind == "emotion",
        )
    except (ResynthError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    record = result.record
    if kind == "emotion":
        console.print(f"[green]✓[/green] Speech processed ({len(record.lines)} line(s))")
    else:
        console.print(
            f"[green]✓[/green] Speech analyzed "
            f"(sentiment: {record.sentiment.label}, {record.sentiment.score:.2f})"
        )
    console.print(f"[dim]  Speaker: {record.metadata.speaker}[/dim]")
    console.print(f"[dim]  Event: {record.metadata.event}[/dim]")
    console.print(f"[dim]  Date: {record.metadata.date}[/dim]")
    console.print(
        f"[green]✓[/green] Appended {kind} to {output} "
        f"(now contains {result.collection_size} record(s))"
    )


@app.command("emotion")
def emotion(
    input_file: Path = typer.Argument(..., help="Text file with a single speech"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="JSON file to append to (default: speeches.json)"
    ),
    threshold: float | None = typer.Option(
        None, "--threshold", "-t", help="Minimum emotion score threshold"
    ),
    max_emotions: int | None = typer.Option(
        None, "--max-emotions", "-m", help="Maximum emotions per line"
    ),
    normalize: bool | None = typer.Option(
        None, "--normalize/--no-normalize", help="Normalize kept scores to sum to 1.0"
    ),
    round_to: int | None = typer.Option(
        None, "--round", "-r", help="Decimal places to round scores"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Extract per-line emotions from a speech."""
    try:
        config = load_config()
        options = merge_filter_options(
            config.filters,
            threshold=threshold,
            max_count=max_emotions,
            normalize=normalize,
            round_decimals=round_to,
        )
    except ResynthError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    output_path = output or config.emotion_output
    run_extraction(input_file, output_path, config, options, "emotion", verbose)


@app.command("sentiment")
def sentiment(
    input_file: Path = typer.Argument(..., help="Text file with a single speech"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="JSON file to append to (default: sentiments.json)"
    ),
    round_to: int | None = typer.Option(
        None, "--round", "-r", help="Decimal places to round scores"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Extract the overall sentiment of a speech."""
    try:
        config = load_config()
        options = merge_filter_options(config.filters, round_decimals=round_to)
    except ResynthError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    output_path = output or config.sentiment_output
    run_extraction(input_file, output_path, config, options, "sentiment", verbose)


@app.command("init")
def init_config(
    path: str = typer.Option(".", "--path", "-d", help="Directory to write resynth.yaml in"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a default resynth.yaml."""
    config_path = Path(path) / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[red]Error: '{config_path}' already exists[/red]")
        raise typer.Exit(1)

    write_config(create_default_config(), config_path)
    console.print(f"[green]✓[/green] Wrote default configuration to {config_path}")
    console.print("\nNext steps:")
    console.print("  export HF_TOKEN=<your token>")
    console.print("  resynth emotion <speech.txt>")
