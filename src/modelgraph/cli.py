"""CLI interface for modelgraph using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modelgraph import __description__, __version__
from modelgraph.config import LogLevel, ModelGraphConfig, load_config
from modelgraph.graph import DotRenderer, GraphGenerator, RenderError, render_dot_file, style_for, write_graph
from modelgraph.graph.export import DOT_FORMAT, default_output_path
from modelgraph.models import JsonModelSource, ModelSourceError

app = typer.Typer(
    name="modelgraph",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"modelgraph version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """modelgraph - Visualize model relations as a clustered directed graph."""


def setup_logging(config: ModelGraphConfig, verbose: bool = False) -> None:
    """Configure logging from the configuration file or --verbose."""
    level = logging.DEBUG if verbose else _LOG_LEVELS.get(config.logging.level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load(config_path: Optional[Path], verbose: bool) -> ModelGraphConfig:
    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)
    setup_logging(config, verbose)
    return config


def _open_source(config: ModelGraphConfig, models_path: Optional[Path]) -> JsonModelSource:
    return JsonModelSource(
        models_path or Path(config.models.source),
        exclude=config.models.exclude,
        real_models=config.models.real_models,
    )


@app.command()
def generate(
    models: Annotated[
        Optional[Path],
        typer.Option("--models", "-m", help="Model manifest file (default: models.source from config)")
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="DOT output file (default: <output.dir>/graph.dot)")
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Also render an image in this Graphviz format (png, svg, ...)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .modelgraph.json)")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Generate the model relation graph as a DOT file."""
    settings = _load(config, verbose)

    try:
        source = _open_source(settings, models)

        generator = GraphGenerator(settings)
        generator.add_renderer(DotRenderer())

        console.print("[dim]Collecting model relations...[/dim]")
        spec = generator.generate(source)
        console.print(f"[green]OK[/green] Graph with {spec.node_count} models and {spec.edge_count} relations")

        if generator.skipped_relations:
            console.print(f"[yellow]Skipped relations:[/yellow] {len(generator.skipped_relations)}")
        if generator.lookup_failures:
            console.print(f"[yellow]Unresolved relations:[/yellow] {len(generator.lookup_failures)}")

        dot_file = write_graph(
            generator.render_graph(spec, DOT_FORMAT),
            out or default_output_path(settings, DOT_FORMAT),
        )
        console.print(f"Done. Result can be found in {escape(str(dot_file))}", soft_wrap=True)

        if format and format != DOT_FORMAT:
            image_file = render_dot_file(
                dot_file,
                dot_file.with_suffix(f".{format}"),
                format_name=format,
                config=settings,
            )
            console.print(f"Done. Image can be found as {escape(str(image_file))}", soft_wrap=True)

    except (ModelSourceError, RenderError, OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


@app.command()
def render(
    input_file: Annotated[Path, typer.Argument(help="Existing DOT file")],
    output_file: Annotated[
        Optional[Path],
        typer.Argument(help="Image file (default: <output.dir>/graph.<format>)")
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Graphviz output format (default: from output extension, else svg)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .modelgraph.json)")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Transform a DOT file into an image."""
    settings = _load(config, verbose)

    try:
        image_file = render_dot_file(input_file, output_file, format_name=format, config=settings)
    except (RenderError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    console.print(f"Done. Image can be found as {escape(str(image_file))}", soft_wrap=True)


@app.command()
def relations(
    models: Annotated[
        Optional[Path],
        typer.Option("--models", "-m", help="Model manifest file (default: models.source from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .modelgraph.json)")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """List the relations found between models."""
    settings = _load(config, verbose)

    try:
        source = _open_source(settings, models)
        model_list, relation_map = GraphGenerator(settings).collect(source)
    except ModelSourceError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    table = Table(title=f"Model Relations ({len(model_list)} models)")
    table.add_column("Namespace", style="cyan")
    table.add_column("Model", style="yellow")
    table.add_column("Relation", style="green")
    table.add_column("Related Model")

    for namespace, namespace_models in relation_map.items():
        for model_name, model_relations in namespace_models.items():
            for kind, related_models in model_relations.items():
                for related in related_models:
                    table.add_row(
                        namespace or settings.graph.default_namespace_label,
                        model_name,
                        style_for(kind).label,
                        related,
                    )

    console.print(table)


if __name__ == "__main__":
    app()
