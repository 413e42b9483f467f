"""
tests/test_codeblock.py
Code sample rendering: highlighting, fallback, and content preservation.
"""

from __future__ import annotations

import html
import re

import pytest
from markupsafe import Markup

from nextmastery.codeblock import (
    LANGUAGE_LEXERS,
    code_stylesheet,
    is_supported,
    render_code_block,
    render_sample,
)
from nextmastery.models import CodeSample

SAMPLE = "export const dynamic = 1;"


def _visible_code(markup: str) -> str:
    """Text a reader sees in the rendered <pre>, tags stripped and unescaped."""
    pre = re.search(r"<pre.*?</pre>", markup, re.S).group(0)
    return html.unescape(re.sub(r"<[^>]+>", "", pre))


class TestRenderCodeBlock:

    @pytest.mark.parametrize("language", ["javascript", "unknown-lang"])
    def test_source_preserved_verbatim(self, language):
        out = render_code_block(SAMPLE, language)
        assert isinstance(out, Markup)
        assert out
        assert SAMPLE in out

    def test_supported_language_is_highlighted(self):
        out = render_code_block(SAMPLE, "javascript")
        assert 'class="highlight"' in out
        assert "<span" in out

    def test_unsupported_language_falls_back_to_plain(self):
        out = render_code_block(SAMPLE, "cobol-2099")
        assert 'class="codeblock-plain"' in out
        assert 'class="highlight"' not in out
        assert _visible_code(out) == SAMPLE

    def test_missing_language_renders_as_text(self):
        out = render_code_block(SAMPLE, None)
        assert 'data-language="text"' in out
        assert SAMPLE in out

    def test_language_tag_normalised(self):
        out = render_code_block(SAMPLE, "  JavaScript ")
        assert 'data-language="javascript"' in out
        assert 'class="highlight"' in out

    def test_deterministic(self):
        src = "const a = () => <div>{a}</div>;"
        assert render_code_block(src, "javascript") == render_code_block(src, "javascript")

    def test_markup_characters_are_escaped(self):
        src = "</textarea><script>alert(1)</script>"
        out = render_code_block(src, "nope")
        assert "<script>" not in out
        assert "&lt;script&gt;" in out
        assert _visible_code(out) == src

    def test_highlighted_text_round_trips(self):
        src = "if (a < b && c > d) {\n  return 'x';\n}"
        out = render_code_block(src, "javascript")
        assert _visible_code(out).rstrip("\n") == src

    def test_leading_blank_lines_kept(self):
        src = "\n\nnpm run dev"
        out = render_code_block(src, "bash")
        assert _visible_code(out).startswith("\n\nnpm")

    def test_text_language_has_no_token_colouring(self):
        out = render_code_block("plain words here", "text")
        assert 'class="highlight"' in out
        assert 'class="k' not in out

    def test_copy_affordance_present(self):
        out = render_code_block(SAMPLE, "bash")
        assert 'class="codeblock-copy"' in out
        assert '<textarea class="codeblock-source" hidden readonly>\n' + SAMPLE in out

    def test_language_label_shown(self):
        out = render_code_block(SAMPLE, "dockerfile")
        assert '<span class="codeblock-language">dockerfile</span>' in out

    def test_empty_source(self):
        out = render_code_block("", "javascript")
        assert out.startswith('<div class="codeblock"')

    def test_render_sample(self):
        sample = CodeSample(source="server { listen 80; }", language="nginx")
        assert render_sample(sample) == render_code_block(sample.source, "nginx")

    @pytest.mark.parametrize("language", sorted(LANGUAGE_LEXERS))
    def test_every_supported_language_renders(self, language):
        out = render_code_block("x = 1", language)
        assert "x" in _visible_code(out)


class TestSupportAndStyles:

    def test_is_supported(self):
        assert is_supported("typescript")
        assert is_supported("Bash")
        assert not is_supported("cobol")
        assert not is_supported(None)

    def test_stylesheet_scoped_to_codeblock(self):
        css = code_stylesheet("monokai")
        assert ".codeblock .highlight" in css

    def test_unknown_style_falls_back(self):
        css = code_stylesheet("no-such-style")
        assert ".codeblock .highlight" in css
