"""Resolver - merges a page's fills into its layout's placeholder markers.

Substitution is textual: the layout is treated as an opaque string and each
placeholder marker as a fixed literal, so only the exact marker syntax
``<placeholder name="NAME" />`` is ever replaced.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from quilt.exceptions import (
    AttrNotFoundError,
    FragmentNotFoundError,
    LayoutNotFoundError,
    TagNotFoundError,
    TemplateIOError,
)
from quilt.store import TemplateStore

log = logging.getLogger(__name__)

LAYOUT_TAG = "layout"
FILL_TAG = "fill"

# quoted attribute values may contain ">"
TAG_END = re.compile(r"""'[^']*'|"[^"]*"|>""")
FILL_BOUNDARY = re.compile(
    r"""<(/?)fill(?=[\s/>])(?:"[^"]*"|'[^']*'|[^'">])*>""", re.IGNORECASE
)


def placeholder_marker(name: str) -> str:
    """Literal marker text a layout uses for the named placeholder."""
    return f'<placeholder name="{name}" />'


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a whole template file, wrapping failures in TemplateIOError.

    Line endings are kept as they are on disk.
    """
    try:
        with path.open(encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateIOError(path, e) from e


def line_offsets(markup: str) -> List[int]:
    """Offset of the first character of every line in markup."""
    return [0] + [m.end() for m in re.finditer("\n", markup)]


def source_inner_markup(markup: str, offsets: List[int], tag: Tag) -> Optional[str]:
    """Slice of markup between a fill's start tag and its matching end tag.

    Returns None when the tag carries no source position or is never closed.
    """
    if tag.sourceline is None or tag.sourcepos is None:
        return None
    start = offsets[tag.sourceline - 1] + tag.sourcepos

    for match in TAG_END.finditer(markup, start):
        if match.group() == ">":
            body_start = match.end()
            break
    else:
        return None

    if markup[body_start - 2] == "/":
        return ""

    depth = 1
    for match in FILL_BOUNDARY.finditer(markup, body_start):
        if match.group(1):
            depth -= 1
            if depth == 0:
                return markup[body_start : match.start()]
        elif not match.group().endswith("/>"):
            depth += 1
    return None


class Resolver:
    """Resolves page markup against the store's layout and fragment tables."""

    def __init__(
        self,
        layouts: Dict[str, Path],
        fragments: Dict[str, Path],
        encoding: str = "utf-8",
    ):
        self.layouts = layouts
        self.fragments = fragments
        self.encoding = encoding

    @classmethod
    def from_store(cls, store: TemplateStore, encoding: str = "utf-8") -> "Resolver":
        return cls(store.layouts, store.fragments, encoding=encoding)

    def resolve(self, markup: str) -> str:
        """Return the layout text with every fill substituted in.

        Fills are applied in document order. Each one replaces every literal
        occurrence of its marker in the working buffer, so once a marker has
        been consumed later fills for the same name have nothing to replace.
        Fills naming a placeholder the layout lacks are dropped silently and
        unfilled markers are left in the output as-is.

        Raises:
            TagNotFoundError: the page has no <layout> element.
            AttrNotFoundError: <layout> lacks name or <fill> lacks placeholder.
            LayoutNotFoundError: the named layout was not discovered.
            FragmentNotFoundError: a fill names an undiscovered fragment.
            TemplateIOError: a layout or fragment file could not be read.
        """
        page = BeautifulSoup(markup, "html.parser")

        layout_tag = page.find(LAYOUT_TAG)
        if layout_tag is None:
            raise TagNotFoundError(LAYOUT_TAG)

        layout_name = self._attr(layout_tag, "name")
        if layout_name is None:
            raise AttrNotFoundError(LAYOUT_TAG, "name")

        layout_path = self.layouts.get(layout_name)
        if layout_path is None:
            raise LayoutNotFoundError(layout_name)

        content = read_text(layout_path, self.encoding)
        offsets = line_offsets(markup)

        for fill_tag in page.find_all(FILL_TAG):
            placeholder_name = self._attr(fill_tag, "placeholder")
            if placeholder_name is None:
                raise AttrNotFoundError(FILL_TAG, "placeholder")

            marker = placeholder_marker(placeholder_name)
            if marker not in content:
                log.debug("No marker for placeholder '%s'", placeholder_name)

            content = content.replace(
                marker, self._fill_content(fill_tag, markup, offsets)
            )

        return content

    def resolve_file(self, page_path: Path) -> str:
        """Read a page from disk and resolve it."""
        return self.resolve(read_text(page_path, self.encoding))

    def _fill_content(self, fill_tag: Tag, markup: str, offsets: List[int]) -> str:
        fragment_name = self._attr(fill_tag, "fragment")
        if fragment_name is None:
            inner = source_inner_markup(markup, offsets, fill_tag)
            if inner is None:
                # unclosed fill, fall back to the parsed contents
                return fill_tag.decode_contents()
            return inner

        fragment_path = self.fragments.get(fragment_name)
        if fragment_path is None:
            raise FragmentNotFoundError(fragment_name)
        return read_text(fragment_path, self.encoding)

    @staticmethod
    def _attr(tag: Tag, attr: str) -> Optional[str]:
        return tag.get(attr)
