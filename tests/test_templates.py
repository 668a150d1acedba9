"""Tests for the page templates."""

import unittest

from emdocs.site.templates import alert, alert_block, dropdown, html_doc, link
from emdocs.theme.styles import STYLE_BLOCK

LOGO_RULE = (
    "    .prooph-logo {\n"
    "        float: left;\n"
    "        margin-left: 8px;\n"
    "        margin-right: 8px;\n"
    "        transition-timing-function: ease-in-out;\n"
    "        transition: all 5s;\n"
    "        height: 50px;\n"
    "        padding: 5px;\n"
    "    }\n"
)


class TestHtmlDoc(unittest.TestCase):
    def test_style_block_in_head_exactly_once(self) -> None:
        html = html_doc(title="Intro", body="<p>x</p>")
        head = html[html.index("<head>") : html.index("</head>")]
        self.assertIn(STYLE_BLOCK, head)
        self.assertEqual(html.count("<style>"), 1)
        self.assertEqual(html.count(LOGO_RULE), 1)
        self.assertIn(LOGO_RULE, head)

    def test_render_is_idempotent(self) -> None:
        self.assertEqual(html_doc("T", "<p>b</p>"), html_doc("T", "<p>b</p>"))

    def test_escapes_title(self) -> None:
        html = html_doc(title="<script>", body="")
        self.assertIn("<title>&lt;script&gt;</title>", html)

    def test_header_has_logo(self) -> None:
        html = html_doc(title="T", body="", logo_src="img/logo.svg", logo_href="../index.html")
        self.assertIn('<img class="prooph-logo" src="img/logo.svg" alt="prooph">', html)
        self.assertIn('<a href="../index.html">', html)
        self.assertLess(html.index("<header>"), html.index("prooph-logo\" src"))


class TestFragments(unittest.TestCase):
    def test_alert_variants(self) -> None:
        self.assertEqual(
            alert("Heads up", "light"),
            '<div class="alert alert-light" role="alert">Heads up</div>',
        )
        self.assertIn("alert-dark", alert("Careful", "dark"))

    def test_alert_block_keeps_html(self) -> None:
        self.assertEqual(
            alert_block("<p>x</p>", "dark"),
            '<div class="alert alert-dark" role="alert"><p>x</p></div>',
        )
        with self.assertRaises(ValueError):
            alert_block("<p>x</p>", "info")

    def test_alert_escapes_text(self) -> None:
        self.assertIn("&lt;b&gt;", alert("<b>", "dark"))

    def test_alert_rejects_unknown_variant(self) -> None:
        with self.assertRaises(ValueError):
            alert("x", "danger")

    def test_dropdown_uses_menu_class(self) -> None:
        html = dropdown("Docs", [("Intro", "intro.html"), ("A & B", "ab.html")])
        self.assertIn('<ul class="dropdown-menu">', html)
        self.assertIn('<a href="intro.html">Intro</a>', html)
        self.assertIn("A &amp; B", html)

    def test_link_escapes_href(self) -> None:
        self.assertEqual(link('a"b', "x"), '<a href="a&quot;b">x</a>')


if __name__ == "__main__":
    unittest.main()
