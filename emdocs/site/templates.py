"""HTML templates for documentation pages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

from ..config import LOGO_SRC
from ..theme.styles import render_style_block

ALERT_VARIANTS = ("light", "dark")


def html_doc(
    title: str,
    body: str,
    nav: str = "",
    logo_src: str = LOGO_SRC,
    logo_href: str = "index.html",
) -> str:
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"{render_style_block()}"
        "</head>\n"
        "<body>\n"
        "<header>\n"
        f"{logo(logo_src, logo_href)}\n"
        f"<nav>{nav}</nav>\n"
        "</header>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def logo(src: str, href: str) -> str:
    return (
        f'<a href="{escape(href, quote=True)}">'
        f'<img class="prooph-logo" src="{escape(src, quote=True)}" alt="prooph">'
        "</a>"
    )


def link(href: str, text: str) -> str:
    return f'<a href="{escape(href, quote=True)}">{escape(text)}</a>'


def h1(text: str) -> str:
    return f"<h1>{escape(text)}</h1>"


def h2(text: str) -> str:
    return f"<h2>{escape(text)}</h2>"


def para(text: str) -> str:
    return f"<p>{escape(text)}</p>"


def alert(text: str, variant: str = "light") -> str:
    return alert_block(escape(text), variant)


def alert_block(html: str, variant: str = "light") -> str:
    """Wrap already-rendered HTML in an alert box."""
    if variant not in ALERT_VARIANTS:
        raise ValueError(f"unknown alert variant: {variant!r}")
    return f'<div class="alert alert-{variant}" role="alert">{html}</div>'


def dropdown(label: str, items: Iterable[tuple[str, str]]) -> str:
    """Items: (text, href)."""
    lines = [
        '<div class="dropdown">',
        f'<button class="dropdown-toggle" type="button">{escape(label)}</button>',
        '<ul class="dropdown-menu">',
    ]
    for text, href in items:
        lines.append(f"<li>{link(href, text)}</li>")
    lines.append("</ul>")
    lines.append("</div>")
    return "\n".join(lines)


@dataclass(frozen=True)
class PageRow:
    title: str
    href: str


def pages_index(heading: str, rows: Iterable[PageRow]) -> str:
    lines = [h1(heading), h2("PAGES"), "<ul>"]
    for r in rows:
        lines.append(f"<li>{link(r.href, r.title)}</li>")
    lines.append("</ul>")
    return "\n".join(lines)
