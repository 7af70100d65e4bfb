"""Frontmatter parsing for file-based posts.

A post file may start with a block of `key: value` lines between `---` markers:

    ---
    title: "Modifier 59 explained"
    date: 2024-05-01
    tags: coding, modifiers
    ---
    Body text...
"""

import re

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n(.*)$", re.DOTALL)
_QUOTES_RE = re.compile(r"^[\"']|[\"']$")


def parse_frontmatter(text: str) -> tuple[dict[str, str], str]:
    """Split a document into its frontmatter mapping and body.

    Text without a frontmatter block is returned whole as the body.
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return {}, text

    header, body = match.groups()
    frontmatter: dict[str, str] = {}
    for line in header.split("\n"):
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        frontmatter[key] = _QUOTES_RE.sub("", value.strip())
    return frontmatter, body
