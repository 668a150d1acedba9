"""Markdown rendering for documentation pages.

Blocks are read line by line by a chain of handlers. Inline markup is matched
with one pattern and rendered recursively, so code spans may sit inside link
labels and bold text. Blockquotes opening with ``[!NOTE]``, ``[!WARNING]``
and friends become theme alerts (``alert-light`` / ``alert-dark``).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from html import escape

from .templates import alert_block

ATX_HEADING = re.compile(r"^(#{1,6})\s+(.+?)(?:\s+#+)?\s*$")

_FENCE = re.compile(r"^```\s*([\w+-]*)")
_BULLET = re.compile(r"^[-*]\s+")
_ORDERED = re.compile(r"^\d+\.\s+")
_RULE = re.compile(r"^(?:-{3,}|\*{3,})$")
_TABLE_SEP = re.compile(r"^\|?\s*:?-{3,}")
_CALLOUT = re.compile(r"^\[!([A-Za-z]+)\]\s*$")
_INLINE = re.compile(
    r"`(?P<code>[^`]+)`"
    r"|\[(?P<label>[^\]]+)\]\((?P<href>[^)\s]+)\)"
    r"|\*\*(?P<bold>.+?)\*\*"
)

CALLOUT_VARIANTS = {
    "NOTE": "light",
    "TIP": "light",
    "INFO": "light",
    "IMPORTANT": "dark",
    "WARNING": "dark",
    "CAUTION": "dark",
}

_UNSAFE_SCHEMES = ("javascript:", "data:", "vbscript:")

Handler = Callable[[list[str], int], "tuple[str, int] | None"]


def markdown_to_html(md: str) -> str:
    lines = md.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return "\n".join(_render_blocks(lines))


def first_heading(md: str) -> str | None:
    """Return the text of the first level-1 heading outside code fences."""
    in_code = False
    for line in md.splitlines():
        stripped = line.strip()
        if _FENCE.match(stripped):
            in_code = not in_code
            continue
        if in_code:
            continue
        m = ATX_HEADING.match(stripped)
        if m and len(m.group(1)) == 1:
            return m.group(2)
    return None


def render_inline(text: str) -> str:
    out: list[str] = []
    pos = 0
    for m in _INLINE.finditer(text):
        out.append(escape(text[pos : m.start()], quote=False))
        if m.group("code") is not None:
            out.append(f"<code>{escape(m.group('code'), quote=False)}</code>")
        elif m.group("label") is not None:
            label = render_inline(m.group("label"))
            href = _safe_href(m.group("href"))
            out.append(f'<a href="{escape(href)}">{label}</a>' if href else label)
        else:
            out.append(f"<strong>{render_inline(m.group('bold'))}</strong>")
        pos = m.end()
    out.append(escape(text[pos:], quote=False))
    return "".join(out)


def _render_blocks(lines: list[str]) -> list[str]:
    out: list[str] = []
    i = 0
    while i < len(lines):
        if not lines[i].strip():
            i += 1
            continue
        for handler in _HANDLERS:
            result = handler(lines, i)
            if result is not None:
                html, i = result
                out.append(html)
                break
    return out


def _fence(lines: list[str], i: int) -> tuple[str, int] | None:
    m = _FENCE.match(lines[i].strip())
    if not m:
        return None
    lang = m.group(1)
    j = i + 1
    while j < len(lines) and not lines[j].strip().startswith("```"):
        j += 1
    code = escape("\n".join(lines[i + 1 : j]), quote=False)
    attr = f' class="language-{lang}"' if lang else ""
    # An unclosed fence runs to the end of the document.
    return f"<pre><code{attr}>{code}</code></pre>", min(j + 1, len(lines))


def _rule(lines: list[str], i: int) -> tuple[str, int] | None:
    if _RULE.match(lines[i].strip()):
        return "<hr>", i + 1
    return None


def _heading(lines: list[str], i: int) -> tuple[str, int] | None:
    m = ATX_HEADING.match(lines[i].strip())
    if not m:
        return None
    level = len(m.group(1))
    return f"<h{level}>{render_inline(m.group(2))}</h{level}>", i + 1


def _table(lines: list[str], i: int) -> tuple[str, int] | None:
    if not lines[i].strip().startswith("|") or i + 1 >= len(lines):
        return None
    if not _TABLE_SEP.match(lines[i + 1].strip()):
        return None

    j = i + 2
    while j < len(lines) and lines[j].strip().startswith("|"):
        j += 1

    def cells(line: str) -> list[str]:
        return [c.strip() for c in line.strip().strip("|").split("|")]

    out = ["<table>", "<thead>", "<tr>"]
    out += [f"<th>{render_inline(c)}</th>" for c in cells(lines[i])]
    out += ["</tr>", "</thead>", "<tbody>"]
    for line in lines[i + 2 : j]:
        out.append("<tr>" + "".join(f"<td>{render_inline(c)}</td>" for c in cells(line)) + "</tr>")
    out += ["</tbody>", "</table>"]
    return "\n".join(out), j


def _quote(lines: list[str], i: int) -> tuple[str, int] | None:
    if not lines[i].lstrip().startswith(">"):
        return None
    inner: list[str] = []
    j = i
    while j < len(lines) and lines[j].lstrip().startswith(">"):
        body = lines[j].lstrip()[1:]
        inner.append(body[1:] if body.startswith(" ") else body)
        j += 1

    m = _CALLOUT.match(inner[0].strip())
    if m and m.group(1).upper() in CALLOUT_VARIANTS:
        variant = CALLOUT_VARIANTS[m.group(1).upper()]
        return alert_block("\n".join(_render_blocks(inner[1:])), variant), j

    return "\n".join(["<blockquote>", *_render_blocks(inner), "</blockquote>"]), j


def _list(lines: list[str], i: int) -> tuple[str, int] | None:
    first = lines[i].strip()
    if _BULLET.match(first):
        tag, marker = "ul", _BULLET
    elif _ORDERED.match(first):
        tag, marker = "ol", _ORDERED
    else:
        return None

    out = [f"<{tag}>"]
    j = i
    while j < len(lines) and marker.match(lines[j].strip()):
        out.append(f"<li>{render_inline(marker.sub('', lines[j].strip(), count=1))}</li>")
        j += 1
    out.append(f"</{tag}>")
    return "\n".join(out), j


def _paragraph(lines: list[str], i: int) -> tuple[str, int]:
    j = i + 1
    while j < len(lines) and lines[j].strip() and not _starts_block(lines[j].strip()):
        j += 1
    text = " ".join(line.strip() for line in lines[i:j])
    return f"<p>{render_inline(text)}</p>", j


def _starts_block(stripped: str) -> bool:
    return bool(
        _FENCE.match(stripped)
        or ATX_HEADING.match(stripped)
        or _RULE.match(stripped)
        or _BULLET.match(stripped)
        or _ORDERED.match(stripped)
        or stripped.startswith(">")
    )


_HANDLERS: tuple[Handler, ...] = (_fence, _rule, _heading, _table, _quote, _list, _paragraph)


def _safe_href(href: str) -> str | None:
    cleaned = href.strip()
    if not cleaned or cleaned.lower().startswith(_UNSAFE_SCHEMES):
        return None
    return _rewrite_md_href(cleaned)


def _rewrite_md_href(href: str) -> str:
    # Relative links between docs pages point at the rendered .html files.
    if "://" in href or href.startswith(("/", "#", "mailto:")):
        return href
    path, sep, fragment = href.partition("#")
    if path.endswith(".md"):
        path = path[:-3] + ".html"
    return f"{path}{sep}{fragment}"
