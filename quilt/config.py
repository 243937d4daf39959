"""Configuration parsing for quilt.yaml

Schema:
- source: root directory scanned for templates
- output: root directory rendered pages are written into
- encoding: text encoding for every template and output file
- naming: file suffixes identifying pages, layouts and fragments
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from quilt.exceptions import ConfigError

CONFIG_FILENAME = "quilt.yaml"


class NamingConfig(BaseModel):
    """File naming convention used to classify templates."""

    extension: str = Field(default=".html", description="Extension of template files")
    page_suffix: str = Field(default=".page.html", description="Suffix of page files")
    layout_suffix: str = Field(
        default=".layout.html", description="Suffix of layout files"
    )
    fragment_suffix: str = Field(
        default=".fragment.html", description="Suffix of fragment files"
    )


class QuiltConfig(BaseModel):
    """Full quilt.yaml configuration"""

    source: Path | None = Field(default=None, description="Template source root")
    output: Path | None = Field(default=None, description="Rendered output root")
    encoding: str = Field(default="utf-8", description="Text encoding for all files")
    naming: NamingConfig = Field(default_factory=NamingConfig)

    def with_overrides(
        self, source: Path | None = None, output: Path | None = None
    ) -> "QuiltConfig":
        """Return a copy with command-line values taking precedence."""
        update = {}
        if source is not None:
            update["source"] = source
        if output is not None:
            update["output"] = output
        return self.model_copy(update=update)


def find_config_file(start: Path | None = None) -> Path | None:
    """Find quilt.yaml in the start directory or its parents."""
    cwd = (start or Path.cwd()).resolve()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path) -> QuiltConfig:
    """Load quilt.yaml from path.

    Relative ``source`` and ``output`` entries are resolved against the
    directory holding the config file.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")

    try:
        config = QuiltConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(path, str(e)) from e

    base = path.parent
    update = {}
    if config.source is not None and not config.source.is_absolute():
        update["source"] = base / config.source
    if config.output is not None and not config.output.is_absolute():
        update["output"] = base / config.output
    return config.model_copy(update=update)
