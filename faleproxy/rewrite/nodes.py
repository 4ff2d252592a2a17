"""
Node classification and traversal over a BeautifulSoup tree.

bs4 models comments, doctypes and CDATA as subclasses of NavigableString,
so "is a string" is not the same as "is visible text". ``classify`` maps
every node to exactly one NodeKind and the walkers below only ever hand
out TEXT nodes.
"""

from enum import Enum
from typing import Iterable, Iterator, List

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from bs4.element import PreformattedString

# Elements whose text content is never shown as page text
SKIPPED_TAGS = frozenset({"script", "style", "template"})


class NodeKind(Enum):
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"  # comment, doctype, CDATA, processing instruction, declaration


def classify(node: PageElement) -> NodeKind:
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    # comments, CDATA, doctypes and declarations all derive from PreformattedString;
    # other subclasses (ruby text, script/style strings) carry text payloads
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def body_scope(soup: BeautifulSoup) -> Tag:
    """Root of the visible-text traversal: <body>, or the whole document for fragments."""
    return soup.body if soup.body is not None else soup


def iter_text_nodes(
    root: Tag,
    skip_head: bool = True,
    exclude: Iterable[Tag] = (),
) -> Iterator[NavigableString]:
    """Yield visible TEXT nodes under ``root`` in document order, skipping ``exclude`` subtrees."""
    excluded = {id(tag) for tag in exclude}
    stack = list(reversed(root.contents))
    while stack:
        node = stack.pop()
        kind = classify(node)
        if kind is NodeKind.TEXT:
            yield node
        elif kind is NodeKind.ELEMENT:
            name = (node.name or "").lower()
            if name in SKIPPED_TAGS or (skip_head and name == "head") or id(node) in excluded:
                continue
            stack.extend(reversed(node.contents))


def find_titles(soup: BeautifulSoup) -> List[Tag]:
    return soup.find_all("title")
