"""Parse and validate the theme's style rules.

Only the flat subset the theme uses is understood: ``selector { prop: value; }``
blocks and ``/* */`` comments. At-rules and nested blocks are rejected.
Quoted strings and parenthesised values (``url(...)``) may contain any of the
structural characters.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from pydantic import BaseModel

from .styles import SELECTORS

_STYLE_ELEMENT = re.compile(r"^\s*<style\b[^>]*>(.*)</style>\s*$", re.DOTALL | re.IGNORECASE)


class StylesheetError(ValueError):
    """Raised when style sheet text is malformed."""


class Declaration(BaseModel):
    """A single ``property: value`` pair."""

    property: str
    value: str


class StyleRule(BaseModel):
    """A selector and its declarations, in source order."""

    selector: str
    declarations: list[Declaration]

    def properties(self) -> list[str]:
        return [d.property for d in self.declarations]

    def get(self, prop: str) -> str | None:
        """Return the effective (last) value for a property."""
        for d in reversed(self.declarations):
            if d.property == prop:
                return d.value
        return None


def unwrap_style_element(text: str) -> str:
    """Return the contents of a surrounding ``<style>`` element, if any."""
    m = _STYLE_ELEMENT.match(text)
    return m.group(1) if m else text


def parse_stylesheet(css: str) -> list[StyleRule]:
    """Split style sheet text into rules.

    Args:
        css: Style sheet text, without the surrounding <style> element

    Returns:
        Rules in source order

    Raises:
        StylesheetError: If the text is not a flat list of rule blocks
    """
    text = _strip_comments(css)
    rules: list[StyleRule] = []
    pos = 0

    while True:
        open_at = _find_top_level(text, "{}", pos)
        if open_at == -1:
            rest = text[pos:]
            if rest.strip():
                raise StylesheetError(f"text outside of a rule: {_excerpt(rest)}")
            break
        if text[open_at] == "}":
            raise StylesheetError(f"unexpected '}}' near {_excerpt(text[pos : open_at + 1])}")

        selector = " ".join(text[pos:open_at].split())
        if not selector:
            raise StylesheetError(f"empty selector at offset {open_at}")

        close_at = _find_top_level(text, "{}", open_at + 1)
        if close_at == -1:
            raise StylesheetError(f"unclosed block for {selector!r}")
        if text[close_at] == "{":
            raise StylesheetError(f"nested block inside {selector!r}")

        body = text[open_at + 1 : close_at]
        rules.append(StyleRule(selector=selector, declarations=_parse_declarations(selector, body)))
        pos = close_at + 1

    return rules


def rules_by_selector(rules: Iterable[StyleRule]) -> dict[str, StyleRule]:
    return {r.selector: r for r in rules}


def check_stylesheet(css: str, expected: Iterable[str] = SELECTORS) -> list[StyleRule]:
    """Parse ``css`` and require exactly the ``expected`` selectors, in order.

    ``css`` may be bare rules or a whole ``<style>`` element, as printed by
    ``emdocs style``.
    """
    rules = parse_stylesheet(unwrap_style_element(css))
    found = [r.selector for r in rules]
    wanted = list(expected)
    if found != wanted:
        missing = [s for s in wanted if s not in found]
        extra = [s for s in found if s not in wanted]
        details = []
        if missing:
            details.append(f"missing {', '.join(missing)}")
        if extra:
            details.append(f"unexpected {', '.join(extra)}")
        if not details:
            details.append(f"order {', '.join(found)}")
        raise StylesheetError(f"selector mismatch: {'; '.join(details)}")
    return rules


def _parse_declarations(selector: str, body: str) -> list[Declaration]:
    declarations: list[Declaration] = []
    for part in _split_top_level(body, ";"):
        part = part.strip()
        if not part:
            continue
        prop, colon, value = part.partition(":")
        if not colon:
            raise StylesheetError(f"missing ':' in {selector!r}: {_excerpt(part)}")
        prop = prop.strip()
        value = " ".join(value.split())
        if not prop:
            raise StylesheetError(f"empty property name in {selector!r}")
        if not value:
            raise StylesheetError(f"empty value for {prop!r} in {selector!r}")
        declarations.append(Declaration(property=prop, value=value))
    return declarations


def _split_top_level(text: str, sep: str) -> list[str]:
    parts: list[str] = []
    pos = 0
    while True:
        at = _find_top_level(text, sep, pos)
        if at == -1:
            parts.append(text[pos:])
            return parts
        parts.append(text[pos:at])
        pos = at + 1


def _find_top_level(text: str, chars: str, start: int) -> int:
    """Index of the first of ``chars`` outside strings and parentheses, or -1."""
    quote = ""
    depth = 0
    i = start
    while i < len(text):
        c = text[i]
        if quote:
            if c == "\\":
                i += 1
            elif c == quote:
                quote = ""
        elif c in "\"'":
            quote = c
        elif c == "(":
            depth += 1
        elif c == ")" and depth:
            depth -= 1
        elif depth == 0 and c in chars:
            return i
        i += 1
    if quote:
        raise StylesheetError(f"unterminated string starting near {_excerpt(text[start:])}")
    return -1


def _strip_comments(css: str) -> str:
    out: list[str] = []
    quote = ""
    i = 0
    while i < len(css):
        c = css[i]
        if quote:
            out.append(c)
            if c == "\\" and i + 1 < len(css):
                out.append(css[i + 1])
                i += 1
            elif c == quote:
                quote = ""
        elif c in "\"'":
            quote = c
            out.append(c)
        elif css.startswith("/*", i):
            end = css.find("*/", i + 2)
            if end == -1:
                raise StylesheetError(f"unterminated comment at offset {i}")
            out.append(" ")
            i = end + 2
            continue
        else:
            out.append(c)
        i += 1
    return "".join(out)


def _excerpt(text: str, limit: int = 40) -> str:
    s = " ".join(text.split())
    return repr(s if len(s) <= limit else s[:limit] + "...")
