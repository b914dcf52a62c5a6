"""BeautifulSoup adapter for the host content tree.

The grammar only needs a handful of capabilities from the tree it reads:
the children of a node, whether a node is a line break, and a node's own
markup rendered in isolation. The rewriter additionally replaces and removes
nodes. All of them are implemented here over ``bs4`` so that the parsers and
the rewriter never touch the tree API directly.

Encoding-safe file reading (UTF-8 -> CP1252 -> replace fallback) lives here
too, for the command-line script.
"""
from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from description_lists.errors import HostError

_PARSER = "html.parser"
_FORMATTER = "minimal"


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def child_nodes(node: PageElement) -> list[PageElement]:
    """Direct children of *node*, in order. Text and comments have none."""
    if isinstance(node, Tag):
        return list(node.contents)
    return []


def is_element(node: PageElement) -> bool:
    return isinstance(node, Tag)


def is_line_break(node: PageElement) -> bool:
    """True for a ``<br>`` element itself, never for one nested deeper."""
    return isinstance(node, Tag) and node.name == "br"


def is_blank_text(node: PageElement) -> bool:
    """True for a text node holding only whitespace. Comments are not text."""
    return (
        isinstance(node, NavigableString)
        and not isinstance(node, PreformattedString)
        and not node.strip()
    )


def render_html(node: PageElement) -> str:
    """Render *node* on its own, as it would appear in its parent's markup.

    Text is escaped minimally (``&``, ``<``, ``>``); void elements render as
    ``<br/>``.
    """
    if isinstance(node, Tag):
        return node.decode(formatter=_FORMATTER)
    if isinstance(node, NavigableString):
        return node.output_ready(formatter=_FORMATTER)
    return str(node)


def render_children(node: PageElement) -> str:
    """Concatenated markup of the children of *node*."""
    return "".join(render_html(child) for child in child_nodes(node))


# ---------------------------------------------------------------------------
# Building and mutating
# ---------------------------------------------------------------------------


def parse_fragment(code: str) -> BeautifulSoup:
    """Parse an HTML fragment into a detached soup."""
    return BeautifulSoup(code, _PARSER)


def parse_html(code: str) -> PageElement:
    """Parse *code* and return its first node, detached from any tree.

    Raises:
        HostError: *code* holds no node at all.
    """
    soup = parse_fragment(code)
    if not soup.contents:
        raise HostError(f"markup holds no node: {code!r}")
    return soup.contents[0].extract()


def replace_node(old: PageElement, new_markup: str) -> PageElement:
    """Put the first node of *new_markup* where *old* is, and return it."""
    if old.parent is None:
        raise HostError("cannot replace a node that has no parent")
    new = parse_html(new_markup)
    old.replace_with(new)
    return new


def remove_node(node: PageElement) -> None:
    """Detach *node* from its parent."""
    if node.parent is None:
        raise HostError("cannot remove a node that has no parent")
    node.extract()


# ---------------------------------------------------------------------------
# Encoding-safe file reading
# ---------------------------------------------------------------------------


def read_file(fpath: Path) -> str:
    """Read a text file with encoding fallback: UTF-8 -> CP1252 -> replace.

    Args:
        fpath: Path to the file.

    Returns:
        File contents as a string.

    Raises:
        OSError: The file cannot be read.
    """
    try:
        return fpath.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        try:
            return fpath.read_text(encoding="cp1252")
        except UnicodeDecodeError:
            with open(fpath, errors="replace") as f:
                return f.read()
