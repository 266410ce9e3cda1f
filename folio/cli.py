"""CLI entry point for Folio."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from folio.config import DEFAULT_CONFIG_TEMPLATE, FolioConfig, load_config
from folio.converter import ConversionOutcome, DocumentConverter
from folio.errors import FolioError
from folio.llm import create_llm_provider
from folio.log import configure_logging
from folio.pipeline import ConversionStatus, ConversionTarget, DocumentResult
from folio.render import PageRenderer

app = typer.Typer(
    name="folio",
    help="Convert PDF pages and images into Excel tables or Word documents with a vision model.",
)

config_app = typer.Typer(help="Manage Folio configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: FolioConfig | None = None


def _get_config() -> FolioConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to folio.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _parse_target(value: str) -> ConversionTarget:
    try:
        return ConversionTarget.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _display_outcome(outcome: ConversionOutcome) -> None:
    result = outcome.result
    if isinstance(result, DocumentResult):
        detail = f"{len(result.blocks)} block(s)"
    else:
        detail = f"{len(result.tables)} table(s)"
    verb = "Written to" if outcome.written else "Would write"
    rprint(
        Panel(
            f"[dim]Source:[/dim]  {outcome.source_path}\n"
            f"[dim]Target:[/dim]  {outcome.target.value}\n"
            f"[dim]Pages:[/dim]   {outcome.page_count}\n"
            f"[dim]Content:[/dim] {detail}\n"
            f"[dim]{verb}:[/dim] {outcome.output_path}",
            title="Conversion Result",
            border_style="green",
        )
    )


@app.command()
def convert(
    file: str = typer.Argument(..., help="PDF or image to convert"),
    to: str = typer.Option("word", "--to", "-t", help="Output kind: excel|word"),
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Override output directory")
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Convert without writing the file"),
) -> None:
    """Convert a document into a spreadsheet or a Word document."""
    cfg = _get_config()
    target = _parse_target(to)
    if output:
        cfg = cfg.model_copy(
            update={"output": cfg.output.model_copy(update={"base_dir": output})}
        )

    try:
        provider = create_llm_provider(cfg.llm)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    converter = DocumentConverter(cfg, provider)
    rprint(f"[bold]Converting[/bold] {file} to {target.value} (llm: {cfg.llm.provider})...")

    with Progress(
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        transient=True,
    ) as progress:
        task = progress.add_task("Starting...", total=100)

        def on_progress(status: ConversionStatus) -> None:
            progress.update(task, description=status.step, completed=status.progress)

        try:
            outcome = asyncio.run(
                converter.convert_file(file, target, on_progress=on_progress, dry_run=dry_run)
            )
        except (FolioError, OSError) as e:
            progress.stop()
            rprint(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

    _display_outcome(outcome)


@app.command()
def pages(
    file: str = typer.Argument(..., help="PDF or image to render"),
) -> None:
    """Render a file into page images and list them, without calling a model."""
    cfg = _get_config()
    renderer = PageRenderer(cfg.render)
    try:
        rendered = renderer.render(file)
    except FolioError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"Pages ({len(rendered)})")
    table.add_column("Page", justify="right", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Size", justify="right")
    for page in rendered:
        table.add_row(str(page.index), page.mime_type, f"{len(page.image) / 1024:.1f} KB")
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default folio.yaml in current directory."""
    target = Path("folio.yaml")
    if target.exists() and not force:
        rprint("[yellow]folio.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
