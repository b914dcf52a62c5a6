"""Rewrite colon-led descriptions in an HTML tree as ``<dl>`` elements.

Entry points:

* ``process_description_lists(element)`` — rewrite the tree under a ``bs4``
  element in place, returning how many lists were inserted.
* ``process_html(html)`` — parse an HTML fragment, rewrite it and render it.

Consecutive description paragraphs merge into one list::

    <p>term A<br>: detail A</p><p>term B<br>: detail B</p>

becomes::

    <dl><dt>term A</dt> <dd>detail A</dd> <dt>term B</dt> <dd>detail B</dd></dl>
"""
from __future__ import annotations

import logging

from bs4.element import PageElement

from description_lists.config import ProcessorOptions
from description_lists.descriptions import (
    build_description_list_html,
    parse_description_lists_and_stuff,
)
from description_lists.dom import (
    child_nodes,
    is_blank_text,
    is_element,
    parse_fragment,
    remove_node,
    render_children,
    replace_node,
)
from description_lists.zebras import matched_runs, unmatched_runs

log = logging.getLogger(__name__)


def process_description_lists(
    element: PageElement,
    *,
    options: ProcessorOptions | None = None,
) -> int:
    """Replace paragraphs under *element* that read as descriptions.

    A paragraph reads as a description when it holds some lines without a
    leading colon and then some lines with one. Runs of such paragraphs
    become one ``<dl>``; every other element is searched recursively.

    Returns:
        Number of ``<dl>`` elements inserted, at any depth.
    """
    return _process(element, options or ProcessorOptions(), depth=0)


def _process(element: PageElement, options: ProcessorOptions, depth: int) -> int:
    nodes = [node for node in child_nodes(element) if not is_blank_text(node)]
    parsed = parse_description_lists_and_stuff(nodes, options=options)

    inserted = 0
    for node in (node for run in unmatched_runs(parsed.outcome) for node in run):
        if not is_element(node):
            continue
        if depth >= options.max_depth:
            log.debug("depth limit %d reached at <%s>", options.max_depth, node.name)
            continue
        inserted += _process(node, options, depth + 1)

    for annotated in matched_runs(parsed.outcome):
        list_html = build_description_list_html(a.description for a in annotated)
        replace_node(annotated[0].node, list_html)
        for later in annotated[1:]:
            remove_node(later.node)
        log.debug(
            "inserted description list of %d block(s) at depth %d",
            len(annotated), depth,
        )
        inserted += 1
    return inserted


def process_html(html: str, *, options: ProcessorOptions | None = None) -> str:
    """Rewrite description paragraphs in an HTML fragment."""
    return process_html_with_count(html, options=options)[0]


def process_html_with_count(
    html: str,
    *,
    options: ProcessorOptions | None = None,
) -> tuple[str, int]:
    """Like ``process_html``, also returning the number of lists inserted."""
    soup = parse_fragment(html)
    inserted = process_description_lists(soup, options=options)
    return render_children(soup), inserted
