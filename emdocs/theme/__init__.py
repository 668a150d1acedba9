"""Documentation theme: the fixed style block and tools to inspect it."""

from .rules import (
    Declaration,
    StyleRule,
    StylesheetError,
    check_stylesheet,
    parse_stylesheet,
    rules_by_selector,
    unwrap_style_element,
)
from .styles import CSS, SELECTORS, STYLE_BLOCK, render_style_block

__all__ = [
    "CSS",
    "SELECTORS",
    "STYLE_BLOCK",
    "render_style_block",
    "Declaration",
    "StyleRule",
    "StylesheetError",
    "parse_stylesheet",
    "rules_by_selector",
    "check_stylesheet",
    "unwrap_style_element",
]
