"""
nextmastery/codeblock.py
Read-only code sample renderer: syntax colouring plus a copy button.

Samples are documentation text. They are never parsed for meaning or
executed, only tokenised for colouring.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from markupsafe import Markup, escape
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from nextmastery.models import CodeSample

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "javascript"
HIGHLIGHT_CSS_CLASS = "highlight"

# Language tag shown on the block -> Pygments lexer alias
LANGUAGE_LEXERS: Dict[str, str] = {
    "javascript": "javascript",
    "jsx":        "jsx",
    "typescript": "typescript",
    "tsx":        "tsx",
    "bash":       "bash",
    "shell":      "bash",
    "text":       "text",
    "dockerfile": "docker",
    "nginx":      "nginx",
    "css":        "css",
    "scss":       "scss",
    "json":       "json",
    "yaml":       "yaml",
    "html":       "html",
    "python":     "python",
}

_FRAME = Markup(
    '<div class="codeblock" data-language="{language}">'
    '<div class="codeblock-header">'
    '<span class="codeblock-language">{language}</span>'
    '<button type="button" class="codeblock-copy" title="Copy code">📋 Copy</button>'
    '</div>'
    '<textarea class="codeblock-source" hidden readonly>\n{source}</textarea>'
    '{body}'
    '</div>'
)

_PLAIN = Markup('<pre class="codeblock-plain"><code>{source}</code></pre>')


def _lexer_for(language: str):
    alias = LANGUAGE_LEXERS.get(language)
    if alias is None:
        return None
    try:
        # keep leading/trailing blank lines; samples are shown verbatim
        return get_lexer_by_name(alias, stripnl=False)
    except ClassNotFound:
        logger.debug("Pygments has no lexer %r for language %r", alias, language)
        return None


def _formatter() -> HtmlFormatter:
    return HtmlFormatter(cssclass=HIGHLIGHT_CSS_CLASS)


def is_supported(language: Optional[str]) -> bool:
    return (language or "").strip().lower() in LANGUAGE_LEXERS


def render_code_block(source: str, language: Optional[str] = DEFAULT_LANGUAGE) -> Markup:
    """
    Render a code sample as HTML.

    Unsupported languages fall back to an unstyled monospace block; the
    source text is kept intact either way.
    """
    # str() drops Markup so template-captured samples are still escaped
    source = "" if source is None else str(source)
    tag = (language or "").strip().lower() or "text"

    lexer = _lexer_for(tag)
    if lexer is None:
        logger.debug("Rendering %r sample without highlighting", tag)
        body = _PLAIN.format(source=source)
    else:
        body = Markup(highlight(source, lexer, _formatter()))

    return _FRAME.format(language=tag, source=source, body=body)


def render_sample(sample: CodeSample) -> Markup:
    return render_code_block(sample.source, sample.language)


def code_stylesheet(style: str = "monokai") -> str:
    """CSS rules for highlighted blocks in the given Pygments style."""
    try:
        formatter = HtmlFormatter(style=style, cssclass=HIGHLIGHT_CSS_CLASS)
    except ClassNotFound:
        logger.warning("Unknown Pygments style %r, using default", style)
        formatter = HtmlFormatter(cssclass=HIGHLIGHT_CSS_CLASS)
    return formatter.get_style_defs(f".codeblock .{HIGHLIGHT_CSS_CLASS}")
