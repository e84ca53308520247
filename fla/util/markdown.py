"""Plain-text rendering of Markdown content.

Used for excerpts and word counts, where formatting characters would
otherwise be counted as words.
"""

import re

_CODE_BLOCK_RE = re.compile(r"```[^`]*```", re.DOTALL)
_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
# Most specific markers first
_EMPHASIS_RES = [
    re.compile(r"\*\*\*([^*]+)\*\*\*"),
    re.compile(r"___([^_]+)___"),
    re.compile(r"\*\*([^*]+)\*\*"),
    re.compile(r"__([^_]+)__"),
    re.compile(r"\*([^*]+)\*"),
    re.compile(r"_([^_]+)_"),
]
_HEADER_LINE_RE = re.compile(r"^\s*#{1,6}\s+")
_INLINE_HEADER_RE = re.compile(r"#{1,6}\s+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def strip_markdown(content: str) -> str:
    """Remove basic Markdown syntax from content.

    Code blocks are replaced by the newlines they spanned, links keep their
    text, images and header lines are dropped entirely.

    Args:
        content: Markdown source

    Returns:
        Plain text with at most two consecutive newlines
    """
    content = _CODE_BLOCK_RE.sub(lambda m: "\n" * m.group(0).count("\n"), content)
    content = _INLINE_CODE_RE.sub("", content)
    content = _IMAGE_RE.sub("", content)
    content = _LINK_RE.sub(r"\1", content)
    for pattern in _EMPHASIS_RES:
        content = pattern.sub(r"\1", content)

    lines = [
        _INLINE_HEADER_RE.sub("", line)
        for line in content.split("\n")
        if not _HEADER_LINE_RE.match(line)
    ]
    content = "\n".join(lines).strip()

    return _BLANK_LINES_RE.sub("\n\n", content)
