"""Tests for Markdown → HTML rendering."""

import unittest

from emdocs.site.markdown import first_heading, markdown_to_html, render_inline


class TestMarkdownToHtml(unittest.TestCase):
    def test_renders_headings_and_paragraphs(self) -> None:
        html = markdown_to_html("# Title\n\nFirst line\nsecond line\n\n## Sub")
        self.assertIn("<h1>Title</h1>", html)
        self.assertIn("<p>First line second line</p>", html)
        self.assertIn("<h2>Sub</h2>", html)

    def test_heading_interrupts_paragraph(self) -> None:
        html = markdown_to_html("Some text\n## Next")
        self.assertEqual(html, "<p>Some text</p>\n<h2>Next</h2>")

    def test_heading_keeps_inner_hash(self) -> None:
        self.assertIn("<h1>Using C#</h1>", markdown_to_html("# Using C#"))
        self.assertIn("<h2>Closed</h2>", markdown_to_html("## Closed ##"))

    def test_hash_without_space_is_paragraph(self) -> None:
        self.assertEqual(markdown_to_html("#Intro"), "<p>#Intro</p>")

    def test_renders_lists(self) -> None:
        html = markdown_to_html("- A\n- B\n\n1. One\n2. Two")
        self.assertIn("<ul>\n<li>A</li>\n<li>B</li>\n</ul>", html)
        self.assertIn("<ol>\n<li>One</li>\n<li>Two</li>\n</ol>", html)

    def test_code_fence_is_escaped_and_tagged(self) -> None:
        html = markdown_to_html("```php\n<?php echo 1;\n```")
        self.assertEqual(html, '<pre><code class="language-php">&lt;?php echo 1;</code></pre>')

    def test_code_fence_hides_markup(self) -> None:
        html = markdown_to_html("```\n# not a heading\n- nor a list\n```")
        self.assertEqual(html, "<pre><code># not a heading\n- nor a list</code></pre>")

    def test_unclosed_code_fence(self) -> None:
        self.assertEqual(markdown_to_html("```\nopen"), "<pre><code>open</code></pre>")

    def test_table(self) -> None:
        html = markdown_to_html("| Name | Value |\n| --- | --- |\n| A | `1` |")
        self.assertIn("<th>Name</th>", html)
        self.assertIn("<tr><td>A</td><td><code>1</code></td></tr>", html)

    def test_blockquote_and_rule(self) -> None:
        html = markdown_to_html("> quoted\n\n---")
        self.assertIn("<blockquote>\n<p>quoted</p>\n</blockquote>", html)
        self.assertIn("<hr>", html)


class TestCallouts(unittest.TestCase):
    def test_note_becomes_light_alert(self) -> None:
        html = markdown_to_html("> [!NOTE]\n> Commands are **immutable**.")
        self.assertEqual(
            html,
            '<div class="alert alert-light" role="alert"><p>Commands are <strong>immutable</strong>.</p></div>',
        )

    def test_warning_becomes_dark_alert(self) -> None:
        html = markdown_to_html("> [!warning]\n> - one\n> - two")
        self.assertTrue(html.startswith('<div class="alert alert-dark" role="alert"><ul>'))
        self.assertIn("<li>two</li>", html)

    def test_unknown_marker_stays_blockquote(self) -> None:
        html = markdown_to_html("> [!SHOUT]\n> hey")
        self.assertTrue(html.startswith("<blockquote>"))
        self.assertNotIn("alert", html)


class TestInline(unittest.TestCase):
    def test_code_bold_and_escape(self) -> None:
        html = render_inline("Use `a<b` and **bold** <i>")
        self.assertEqual(html, "Use <code>a&lt;b</code> and <strong>bold</strong> &lt;i&gt;")

    def test_code_inside_link_label(self) -> None:
        html = markdown_to_html("See [`EventMachine`](api.md).")
        self.assertEqual(html, '<p>See <a href="api.html"><code>EventMachine</code></a>.</p>')

    def test_code_inside_bold(self) -> None:
        html = render_inline("**call `dispatch()` first**")
        self.assertEqual(html, "<strong>call <code>dispatch()</code> first</strong>")

    def test_sanitizes_links(self) -> None:
        md = "Click [bad](javascript:alert(1)) and [ok](https://example.com)."
        html = markdown_to_html(md)
        self.assertNotIn("javascript:", html.lower())
        self.assertIn('<a href="https://example.com">ok</a>', html)

    def test_rewrites_relative_md_links(self) -> None:
        html = markdown_to_html("[next](guide/next.md#top) [ext](https://x.test/a.md)")
        self.assertIn('href="guide/next.html#top"', html)
        self.assertIn('href="https://x.test/a.md"', html)


class TestFirstHeading(unittest.TestCase):
    def test_finds_first_level_one_heading(self) -> None:
        self.assertEqual(first_heading("intro\n## Sub\n# Main\n# Other"), "Main")

    def test_keeps_hash_inside_title(self) -> None:
        self.assertEqual(first_heading("# Using C#\n"), "Using C#")

    def test_strips_closing_hashes(self) -> None:
        self.assertEqual(first_heading("# Title ##"), "Title")

    def test_agrees_with_renderer_on_missing_space(self) -> None:
        self.assertIsNone(first_heading("#Intro\n"))
        self.assertNotIn("<h1>", markdown_to_html("#Intro"))

    def test_ignores_code_fences(self) -> None:
        self.assertEqual(first_heading("```\n# not a heading\n```\n# Real"), "Real")

    def test_none_when_missing(self) -> None:
        self.assertIsNone(first_heading("just text"))


if __name__ == "__main__":
    unittest.main()
