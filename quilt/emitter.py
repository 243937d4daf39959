"""Emitter - writes resolved pages into the output tree."""

from __future__ import annotations

import logging
from pathlib import Path

from quilt.exceptions import TemplateIOError

log = logging.getLogger(__name__)


class Emitter:
    """Mirrors pages from the source root into the output root."""

    def __init__(self, source_root: Path, output_root: Path, encoding: str = "utf-8"):
        self.source_root = Path(source_root)
        self.output_root = Path(output_root)
        self.encoding = encoding

    def destination(self, page_path: Path) -> Path:
        """Output path for a page: its source-relative path under the output root."""
        return self.output_root / Path(page_path).relative_to(self.source_root)

    def emit(self, page_path: Path, content: str) -> Path:
        """Write resolved markup, creating parent directories as needed.

        Existing files are overwritten and line endings are written unchanged.
        """
        dest = self.destination(page_path)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with dest.open("w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except OSError as e:
            raise TemplateIOError(dest, e) from e

        log.info("Built: %s", dest)
        return dest
