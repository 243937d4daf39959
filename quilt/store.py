"""Template store - classifies a source tree into pages, layouts and fragments.

The store only holds paths. File contents are read lazily by the resolver
each time a page, layout or fragment is needed.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from quilt.config import NamingConfig

log = logging.getLogger(__name__)


@dataclass
class TemplateStore:
    """Lookup tables built once per run by walking the source root."""

    root: Path
    pages: List[Path] = field(default_factory=list)  # walk order
    layouts: Dict[str, Path] = field(default_factory=dict)
    fragments: Dict[str, Path] = field(default_factory=dict)

    @classmethod
    def walk(
        cls,
        root: Path,
        naming: Optional[NamingConfig] = None,
        exclude: Optional[Path] = None,
    ) -> "TemplateStore":
        """Recursively classify every template file under root.

        Unreadable directory entries are logged and skipped; the walk itself
        never fails. The exclude directory (usually the output root) is not
        descended into, so rendered pages are never picked up as sources.
        """
        naming = naming or NamingConfig()
        store = cls(root=Path(root))
        excluded = Path(exclude).resolve() if exclude is not None else None

        def on_error(err: OSError) -> None:
            log.warning("Skipping %s: %s", err.filename, err.strerror or err)

        for dirpath, dirnames, filenames in os.walk(store.root, onerror=on_error):
            if excluded is not None:
                dirnames[:] = [
                    d for d in dirnames if (Path(dirpath) / d).resolve() != excluded
                ]
            dirnames.sort()
            for filename in sorted(filenames):
                store.classify(Path(dirpath) / filename, naming)

        log.debug(
            "Found %d page(s), %d layout(s), %d fragment(s) under %s",
            len(store.pages),
            len(store.layouts),
            len(store.fragments),
            store.root,
        )
        return store

    def classify(self, path: Path, naming: NamingConfig) -> None:
        """Register a single file under the role its suffix identifies."""
        try:
            if not path.is_file():
                return
        except OSError as e:
            log.warning("Skipping %s: %s", path, e)
            return

        if path.suffix != naming.extension:
            return

        filename = path.name
        if filename.endswith(naming.page_suffix):
            log.debug("page: %s", path)
            self.pages.append(path)
        elif filename.endswith(naming.layout_suffix):
            name = filename[: -len(naming.layout_suffix)]
            self._register(self.layouts, "layout", name, path)
        elif filename.endswith(naming.fragment_suffix):
            name = filename[: -len(naming.fragment_suffix)]
            self._register(self.fragments, "fragment", name, path)

    def _register(
        self, table: Dict[str, Path], role: str, name: str, path: Path
    ) -> None:
        # Later duplicates overwrite earlier ones
        previous = table.get(name)
        if previous is not None:
            log.warning(
                "Duplicate %s '%s': %s replaces %s", role, name, path, previous
            )
        log.debug("%s '%s': %s", role, name, path)
        table[name] = path
