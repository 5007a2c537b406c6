"""Writing DOT files and rendering them with the Graphviz layout tool."""

import logging
import shutil
import subprocess
from pathlib import Path

from ..config import ModelGraphConfig

logger = logging.getLogger(__name__)

DOT_FORMAT = "dot"


class RenderError(Exception):
    """Raised when a DOT file cannot be turned into an image."""
    pass


def detect_format(output_file: str | Path | None, explicit: str | None = None, default: str = "svg") -> str:
    """Pick the output format.

    The explicit format wins, then the output file extension, then ``default``.
    """
    if explicit:
        return explicit
    if output_file:
        detected = Path(output_file).suffix.lstrip(".")
        if detected:
            return detected
    return default


def default_output_path(config: ModelGraphConfig, format_name: str) -> Path:
    return Path(config.output.dir) / f"graph.{format_name}"


def write_graph(content: str, output_file: str | Path) -> Path:
    """Write a rendered graph description to ``output_file``."""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info(f"Wrote graph description to {output_path}")
    return output_path


def layout_command(config: ModelGraphConfig, format_name: str, output_file: Path) -> list[str]:
    """Command line of the layout tool, reading the description from stdin."""
    tool = config.render.tool
    if config.render.path:
        tool = str(Path(config.render.path) / tool)
    return [tool, f"-T{format_name}", f"-o{output_file}"]


def render_dot_file(
    input_file: str | Path,
    output_file: str | Path | None = None,
    format_name: str | None = None,
    config: ModelGraphConfig | None = None,
) -> Path:
    """Transform an existing DOT file into an image.

    Args:
        input_file: DOT file to render
        output_file: Image path (default: ``<output.dir>/graph.<format>``)
        format_name: Output format; inferred from ``output_file`` when omitted
        config: Configuration holding the layout tool location

    Returns:
        Path of the rendered output

    Raises:
        RenderError: If the input is missing or the layout tool fails
    """
    config = config or ModelGraphConfig()
    input_path = Path(input_file)
    if not input_path.is_file():
        raise RenderError(f"Input file cannot be found: {input_path}")

    format_name = detect_format(output_file, format_name, config.render.default_format)
    output_path = Path(output_file) if output_file else default_output_path(config, format_name)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if format_name == DOT_FORMAT:
        if output_path.resolve() != input_path.resolve():
            shutil.copyfile(input_path, output_path)
        logger.info(f"Copied graph description to {output_path}")
        return output_path

    command = layout_command(config, format_name, output_path)
    logger.debug(f"Running {' '.join(command)} < {input_path}")

    with open(input_path, encoding="utf-8") as stdin:
        try:
            result = subprocess.run(
                command,
                stdin=stdin,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except FileNotFoundError as e:
            raise RenderError(f"Layout tool not found: {command[0]} ({e})") from e

    if result.returncode != 0:
        raise RenderError((result.stdout or "").strip() or f"{command[0]} exited with code {result.returncode}")

    logger.info(f"Rendered {input_path} to {output_path}")
    return output_path
