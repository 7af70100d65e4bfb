"""Markdown-like post content to HTML.

Supports a fixed grammar: `#`/`##`/`###` headers, `**bold**`, `*italic*`,
`- ` and `1. ` list items (both rendered as one flat `<ul>`), blank-line
separated paragraphs and single-newline `<br>` breaks.

The rules are plain regex substitutions applied in order over the whole text,
so later rules see the HTML produced by earlier ones. Source HTML is passed
through untouched: content is authored by trusted admins only. Rendering is not
idempotent, always render from the stored source.
"""

import re

_HEADERS = (
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
)
_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_BULLET_ITEM = re.compile(r"^- (.*)$", re.MULTILINE)
_NUMBERED_ITEM = re.compile(r"^(\d+)\. (.*)$", re.MULTILINE)
_LIST_RUN = re.compile(r"(<li>.*</li>\n?)+")


def _render_paragraph(block: str) -> str:
    if not block.strip():
        return ""
    if block.startswith("<"):
        return block
    return f"<p>{block.strip()}</p>"


def render_markup(content: str) -> str:
    html = content

    for pattern, replacement in _HEADERS:
        html = pattern.sub(replacement, html)

    html = _BOLD.sub(r"<strong>\1</strong>", html)
    html = _ITALIC.sub(r"<em>\1</em>", html)

    html = _BULLET_ITEM.sub(r"<li>\1</li>", html)
    html = _NUMBERED_ITEM.sub(r"<li>\2</li>", html)
    html = _LIST_RUN.sub(lambda match: f"<ul>{match.group(0)}</ul>", html)

    html = "\n".join(_render_paragraph(block) for block in html.split("\n\n"))

    return html.replace("\n", "<br>")
