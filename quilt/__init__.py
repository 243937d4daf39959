"""Quilt - static HTML composition from pages, layouts and fragments"""

from quilt._version import __version__
from quilt.builder import Builder, BuildReport, PageFailure, RenderedPage, build
from quilt.config import NamingConfig, QuiltConfig, find_config_file, load_config
from quilt.emitter import Emitter
from quilt.exceptions import (
    AttrNotFoundError,
    ConfigError,
    FragmentNotFoundError,
    LayoutNotFoundError,
    QuiltError,
    TagNotFoundError,
    TemplateIOError,
)
from quilt.resolver import Resolver, placeholder_marker
from quilt.store import TemplateStore

__all__ = [
    "__version__",
    # driver
    "Builder",
    "BuildReport",
    "PageFailure",
    "RenderedPage",
    "build",
    # config
    "NamingConfig",
    "QuiltConfig",
    "find_config_file",
    "load_config",
    # engine
    "Emitter",
    "Resolver",
    "TemplateStore",
    "placeholder_marker",
    # errors
    "AttrNotFoundError",
    "ConfigError",
    "FragmentNotFoundError",
    "LayoutNotFoundError",
    "QuiltError",
    "TagNotFoundError",
    "TemplateIOError",
]
