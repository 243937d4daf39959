"""Quilt Exceptions

Errors raised while classifying, resolving and emitting templates.
"""

from __future__ import annotations

from pathlib import Path


class QuiltError(Exception):
    """Base exception for all quilt errors."""

    pass


class ConfigError(QuiltError):
    """Raised when a quilt.yaml file cannot be parsed or validated."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")


class TemplateIOError(QuiltError):
    """Raised when a template or output file cannot be read or written."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"I/O error on {path}: {reason}")


class TagNotFoundError(QuiltError):
    """Raised when a page has no element with the required tag."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Tag not found: <{tag}>")


class AttrNotFoundError(QuiltError):
    """Raised when a required attribute is missing from an element."""

    def __init__(self, tag: str, attr: str):
        self.tag = tag
        self.attr = attr
        super().__init__(f"Attribute '{attr}' not found on <{tag}>")


class LayoutNotFoundError(QuiltError):
    """Raised when a page references a layout that was not discovered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Layout not found: {name}")


class FragmentNotFoundError(QuiltError):
    """Raised when a fill references a fragment that was not discovered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Fragment not found: {name}")
