"""Static site generator for the documentation pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from pydantic import BaseModel

from ..config import LOGO_SRC, SITE_TITLE
from ..theme.styles import render_style_block
from .manifest import PageInfo, SiteManifest, compute_sha256, read_manifest, write_manifest
from .markdown import first_heading, markdown_to_html
from .templates import PageRow, dropdown, html_doc, pages_index

logger = logging.getLogger(__name__)


class SiteReport(BaseModel):
    """Result of building a site."""

    out_dir: Path
    pages: int
    total_bytes: int
    warnings: list[str]
    removed: list[str] = []


@dataclass(frozen=True)
class DocPage:
    source: str  # posix path relative to the docs dir, e.g. "guide/intro.md"
    title: str
    markdown: str

    @property
    def path(self) -> str:
        return str(PurePosixPath(self.source).with_suffix(".html"))

    @property
    def depth(self) -> int:
        return len(PurePosixPath(self.source).parts) - 1


def build_site(docs_dir: Path, out_dir: Path, title: str = SITE_TITLE) -> SiteReport:
    """Render every Markdown file under ``docs_dir`` into ``out_dir``."""
    docs_dir = docs_dir.resolve()
    out_dir = out_dir.resolve()
    if not docs_dir.is_dir():
        raise FileNotFoundError(f"docs directory not found: {docs_dir}")
    out_dir.mkdir(parents=True, exist_ok=True)

    pages, warnings = _scan_docs(docs_dir)
    removed = _remove_stale_pages(out_dir, {p.path for p in pages})
    nav_items = [(p.title, p.path) for p in pages]

    page_infos: list[PageInfo] = []
    for page in pages:
        html = render_page(page.title, page.markdown, nav_items, depth=page.depth)
        target = out_dir / page.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.debug("Rendered %s -> %s", page.source, page.path)
        page_infos.append(
            PageInfo(source=page.source, path=page.path, title=page.title, sha256=compute_sha256(html))
        )

    if not any(p.path == "index.html" for p in pages):
        body = pages_index(title, [PageRow(title=p.title, href=p.path) for p in pages])
        html = html_doc(title=title, body=body, nav=_nav(nav_items, depth=0))
        (out_dir / "index.html").write_text(html, encoding="utf-8")

    manifest = SiteManifest(
        style_sha256=compute_sha256(render_style_block()),
        pages=page_infos,
        warnings=warnings,
    )
    write_manifest(manifest, out_dir)

    return SiteReport(
        out_dir=out_dir,
        pages=len(page_infos),
        total_bytes=_dir_size_bytes(out_dir),
        warnings=warnings,
        removed=removed,
    )


def render_page(
    title: str,
    md: str,
    nav_items: list[tuple[str, str]] | None = None,
    depth: int = 0,
) -> str:
    """Render one Markdown document as a themed HTML page.

    Args:
        title: Page title
        md: Markdown source
        nav_items: (text, href) pairs relative to the site root
        depth: Directory depth of the page below the site root

    Returns:
        Complete HTML document
    """
    prefix = "../" * depth
    return html_doc(
        title=title,
        body=markdown_to_html(md),
        nav=_nav(nav_items or [], depth),
        logo_src=prefix + LOGO_SRC,
        logo_href=prefix + "index.html",
    )


def _nav(items: list[tuple[str, str]], depth: int) -> str:
    if not items:
        return ""
    prefix = "../" * depth
    return dropdown("Docs", [(text, prefix + href) for text, href in items])


def _scan_docs(docs_dir: Path) -> tuple[list[DocPage], list[str]]:
    pages: list[DocPage] = []
    warnings: list[str] = []

    for path in sorted(docs_dir.rglob("*.md")):
        if not path.is_file():
            continue
        rel = path.relative_to(docs_dir).as_posix()
        try:
            md = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning("Skipping %s: not valid UTF-8", rel)
            warnings.append(f"Skipped {rel}: not valid UTF-8")
            continue
        pages.append(DocPage(source=rel, title=first_heading(md) or path.stem, markdown=md))

    pages.sort(key=lambda p: p.source)
    return pages, warnings


def _remove_stale_pages(out_dir: Path, current: set[str]) -> list[str]:
    """Delete pages the previous build wrote whose sources are gone."""
    previous = read_manifest(out_dir)
    if previous is None:
        return []

    removed: list[str] = []
    for info in previous.pages:
        # index.html is regenerated when index.md disappears.
        if info.path in current or info.path == "index.html":
            continue
        target = (out_dir / info.path).resolve()
        if not target.is_relative_to(out_dir) or not target.is_file():
            continue
        target.unlink()
        logger.info("Removed stale page %s", info.path)
        removed.append(info.path)

        parent = target.parent
        while parent != out_dir and not any(parent.iterdir()):
            parent.rmdir()
            parent = parent.parent
    return removed


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
