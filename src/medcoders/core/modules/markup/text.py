import math

WORDS_PER_MINUTE = 200
EXCERPT_LENGTH = 200


def calculate_read_time(content: str) -> str:
    """Estimated reading time label, e.g. `3 min read`. Never less than one minute."""
    words = len(content.split())
    minutes = max(1, math.ceil(words / WORDS_PER_MINUTE))
    return f"{minutes} min read"


def make_excerpt(content: str) -> str:
    """First paragraph of the content, cut to EXCERPT_LENGTH characters with a trailing ellipsis."""
    if not content:
        return ""
    first_paragraph = content.split("\n\n")[0]
    excerpt = first_paragraph[:EXCERPT_LENGTH].strip()
    if len(first_paragraph) > EXCERPT_LENGTH:
        excerpt += "..."
    return excerpt
