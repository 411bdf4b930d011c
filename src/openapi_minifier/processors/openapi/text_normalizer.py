import html
import re

BLOCK_TAG_PATTERN = re.compile(r"<\s*(?:br|/?p|/div|/li|/h[1-6]|/tr|/td|/th)\b[^>]*>", re.IGNORECASE)
HTML_TAG_PATTERN = re.compile(r"<!--.*?-->|</?[A-Za-z][^<>]*>", re.DOTALL)
CODE_FENCE_PATTERN = re.compile(r"```[\w+-]*")
INLINE_CODE_PATTERN = re.compile(r"`([^`]*)`")
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\([^)]*\)")
REFERENCE_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\[[^\]]*\]")
BOLD_PATTERN = re.compile(r"(\*\*|__)(?=\S)(.+?)(?<=\S)\1")
STRIKETHROUGH_PATTERN = re.compile(r"~~(?=\S)(.+?)(?<=\S)~~")
ITALIC_STAR_PATTERN = re.compile(r"(?<![\*\w])\*(?=\S)(.+?)(?<=\S)\*(?![\*\w])")
ITALIC_UNDERSCORE_PATTERN = re.compile(r"(?<!\w)_(?=\S)(.+?)(?<=\S)_(?!\w)")
HEADING_PATTERN = re.compile(r"^\s{0,3}#{1,6}\s+", re.MULTILINE)
BLOCKQUOTE_PATTERN = re.compile(r"^\s*>\s?", re.MULTILINE)
HORIZONTAL_RULE_PATTERN = re.compile(r"^\s*(?:[-*_]\s*){3,}$", re.MULTILINE)
LIST_ITEM_PATTERN = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+", re.MULTILINE)
WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_description(text: str) -> str:
    """
    Flattens HTML and common markdown markup in a description to plain text.

    Tags are stripped, emphasis, code, links and headings keep only their text,
    list and quote markers are dropped and whitespace runs collapse to one space.

    >>> normalize_description("**Bold** and [a link](http://x)")
    'Bold and a link'
    """
    text = BLOCK_TAG_PATTERN.sub(" ", text)
    text = HTML_TAG_PATTERN.sub("", text)
    text = html.unescape(text)

    text = CODE_FENCE_PATTERN.sub(" ", text)
    text = INLINE_CODE_PATTERN.sub(r"\1", text)
    text = IMAGE_PATTERN.sub(r"\1", text)
    text = LINK_PATTERN.sub(r"\1", text)
    text = REFERENCE_LINK_PATTERN.sub(r"\1", text)

    # Line-anchored markup goes before emphasis so "* item" is not read as italics
    text = HORIZONTAL_RULE_PATTERN.sub("", text)
    text = HEADING_PATTERN.sub("", text)
    text = BLOCKQUOTE_PATTERN.sub("", text)
    text = LIST_ITEM_PATTERN.sub("", text)

    text = BOLD_PATTERN.sub(r"\2", text)
    text = STRIKETHROUGH_PATTERN.sub(r"\1", text)
    text = ITALIC_STAR_PATTERN.sub(r"\1", text)
    text = ITALIC_UNDERSCORE_PATTERN.sub(r"\1", text)

    return WHITESPACE_PATTERN.sub(" ", text).strip()
