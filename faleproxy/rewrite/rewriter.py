"""
Selective rewriter.

Parses a document, applies the replacement rules to visible text and to the
<title>, then serializes the tree back to markup. Tags, attribute values
(hrefs, srcs, inline handlers), comments and doctypes are left as they were.
Round-tripping through html.parser normalizes some markup (``<br>`` becomes
``<br/>``, bare ``&`` in text becomes ``&amp;``); that is the only change a
document without matches goes through.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from bs4 import BeautifulSoup, Tag

from .nodes import body_scope, find_titles, iter_text_nodes
from .rules import apply_rules

logger = logging.getLogger(__name__)

@dataclass
class RewriteResult:
    content: str
    title: str
    replacements: int = 0  # text payloads changed, title included

def rewrite_html(html: str) -> RewriteResult:
    """Rewrite visible text and the title of ``html``; the tree is local to this call."""
    soup = BeautifulSoup(html, "html.parser")
    titles = find_titles(soup)

    # titles get their own pass so ones in <head> or after the first are covered too
    replacements = _rewrite_text_nodes(body_scope(soup), exclude=titles)
    for title_tag in titles:
        replacements += _rewrite_text_nodes(title_tag, skip_head=False)

    title = titles[0].get_text() if titles else ""

    logger.debug("Rewrote %d text node(s)", replacements)
    return RewriteResult(content=str(soup), title=title, replacements=replacements)

def _rewrite_text_nodes(root: Tag, skip_head: bool = True, exclude: Iterable[Tag] = ()) -> int:
    changed = 0
    for node in iter_text_nodes(root, skip_head=skip_head, exclude=exclude):
        new_text = apply_rules(str(node))
        if new_text != node:
            # same position and string class, only the payload differs
            node.replace_with(type(node)(new_text))
            changed += 1
    return changed
