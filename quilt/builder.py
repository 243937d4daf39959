"""Builder - drives resolution and emission over every discovered page.

A run stops at the first page that fails. The failure is returned on the
report rather than raised, so callers can see which page broke the build.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from quilt.config import QuiltConfig
from quilt.emitter import Emitter
from quilt.exceptions import QuiltError
from quilt.resolver import Resolver
from quilt.store import TemplateStore

log = logging.getLogger(__name__)


@dataclass
class RenderedPage:
    """A page that resolved (and, outside dry runs, was written)."""

    source: Path
    destination: Path
    content: str


@dataclass
class PageFailure:
    """The page that aborted the run and the error it raised."""

    page: Path
    error: QuiltError

    def __str__(self) -> str:
        return f"{self.page}: {self.error}"


@dataclass
class BuildReport:
    rendered: List[RenderedPage] = field(default_factory=list)
    failure: Optional[PageFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class Builder:
    """Resolves and emits pages one at a time, in lexicographic order."""

    def __init__(
        self,
        store: TemplateStore,
        output: Path,
        encoding: str = "utf-8",
        dry_run: bool = False,
    ):
        self.store = store
        self.resolver = Resolver.from_store(store, encoding=encoding)
        self.emitter = Emitter(store.root, output, encoding=encoding)
        self.dry_run = dry_run

    def build(self) -> BuildReport:
        report = BuildReport()

        for page in sorted(self.store.pages):
            try:
                rendered = self.render_page(page)
            except QuiltError as e:
                log.debug("Page %s failed: %s", page, e)
                report.failure = PageFailure(page=page, error=e)
                break
            report.rendered.append(rendered)

        return report

    def render_page(self, page: Path) -> RenderedPage:
        content = self.resolver.resolve_file(page)
        if self.dry_run:
            destination = self.emitter.destination(page)
        else:
            destination = self.emitter.emit(page, content)
        return RenderedPage(source=page, destination=destination, content=content)


def build(config: QuiltConfig, dry_run: bool = False) -> BuildReport:
    """Walk config.source and render every page into config.output."""
    if config.source is None or config.output is None:
        raise ValueError("Both source and output must be configured")

    store = TemplateStore.walk(config.source, config.naming, exclude=config.output)
    builder = Builder(store, config.output, encoding=config.encoding, dry_run=dry_run)
    return builder.build()
