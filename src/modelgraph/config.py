"""Configuration management for modelgraph using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILE_NAME = ".modelgraph.json"


class RankDir(str, Enum):
    """Graphviz layout directions."""
    TOP_BOTTOM = "TB"
    LEFT_RIGHT = "LR"
    BOTTOM_TOP = "BT"
    RIGHT_LEFT = "RL"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class GraphConfig(BaseModel):
    """Global graph attributes.

    Consult the Graphviz attribute reference for their meaning:
    https://www.graphviz.org/doc/info/attrs.html
    """
    label: str = "Model Relations"
    labelloc: str = "t"
    fontname: str = "Helvetica"
    fontsize: int = 12
    concentrate: bool = True  # Join multiple connecting lines between same nodes
    landscape: bool = False  # Rotate resulting graph by 90 degrees
    rankdir: RankDir = RankDir.TOP_BOTTOM
    default_namespace_label: str = Field(alias="defaultNamespaceLabel", default="App")

    @field_validator("fontsize")
    @classmethod
    def validate_fontsize(cls, v):
        if v < 1:
            raise ValueError("fontsize must be >= 1")
        return v

    model_config = ConfigDict(use_enum_values=True, validate_default=True, populate_by_name=True)


class LegendConfig(BaseModel):
    """Legend cluster configuration section."""
    label: str = "Graph Legend"

    model_config = ConfigDict(populate_by_name=True)


class ModelsConfig(BaseModel):
    """Model source configuration section."""
    source: str = "models.json"
    # fnmatch patterns matched against model identifiers and namespaces
    exclude: list[str] = Field(default_factory=lambda: ["DebugKit", "Migrations"])
    # Use the canonical target model instead of the association alias
    real_models: bool = Field(alias="realModels", default=True)

    model_config = ConfigDict(populate_by_name=True)


class RenderConfig(BaseModel):
    """Layout tool configuration section."""
    path: str = ""  # Directory holding the layout tool when it is not on PATH
    tool: str = "dot"
    default_format: str = Field(alias="defaultFormat", default="svg")

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v):
        if not v or not v.isalnum():
            raise ValueError(f"default_format must be a plain format name, got: {v!r}")
        return v

    model_config = ConfigDict(populate_by_name=True)


class OutputConfig(BaseModel):
    """Output configuration section."""
    dir: str = "."
    # strftime format appended to the graph label; empty disables timestamping
    timestamp: str = " [%Y-%m-%d %H:%M:%S]"

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class ModelGraphConfig(BaseModel):
    """Complete modelgraph configuration model."""
    graph: GraphConfig = Field(default_factory=GraphConfig)
    legend: LegendConfig = Field(default_factory=LegendConfig)
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> ModelGraphConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .modelgraph.json

    Returns:
        ModelGraphConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return ModelGraphConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return ModelGraphConfig()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .modelgraph.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None
