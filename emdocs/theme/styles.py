"""Inline CSS emitted into the head of every documentation page."""

CSS = """
    body {
        font-size: 16px;
    }
    /* Header Section */
    header {
        font-size: 17px;
        font-weight: 400;
    }

    .dropdown-menu {
        font-size: 17px;
    }

    .alert-light {
        color: #818182;
        background-color: #fefefe;
    }

    .alert-dark {
        color: #1b1e21;
        background-color: #d6d8d9;
        border-color: #c6c8ca;
    }

    .prooph-logo {
        float: left;
        margin-left: 8px;
        margin-right: 8px;
        transition-timing-function: ease-in-out;
        transition: all 5s;
        height: 50px;
        padding: 5px;
    }
"""

STYLE_BLOCK = f"<style>{CSS}</style>\n"

# Page markup depends on these class and element names.
SELECTORS = (
    "body",
    "header",
    ".dropdown-menu",
    ".alert-light",
    ".alert-dark",
    ".prooph-logo",
)


def render_style_block() -> str:
    return STYLE_BLOCK
