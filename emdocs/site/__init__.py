"""Themed page rendering and static site generation."""

from .build import SiteReport, build_site, render_page
from .manifest import PageInfo, SiteManifest
from .markdown import markdown_to_html

__all__ = [
    "build_site",
    "render_page",
    "SiteReport",
    "SiteManifest",
    "PageInfo",
    "markdown_to_html",
]
