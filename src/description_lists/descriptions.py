"""Grammar for colon-led description lists, and their HTML.

A paragraph reads as a description when it holds one or more lines of terms
followed by one or more lines of details, each detail line led by a colon::

    term A<br>term B<br>:detail 1<br>:detail 2

Lines are separated by ``<br>`` elements that are direct children of the
paragraph. Inline markup inside a line is kept verbatim.

Two grammars live here. ``parse_description`` reads the inline children of
one block. ``parse_description_lists_and_stuff`` reads the block children of
a container and splits them into runs of ordinary content and runs of
consecutive descriptions.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from bs4.element import PageElement

from description_lists.config import ProcessorOptions
from description_lists.dom import (
    child_nodes,
    is_blank_text,
    is_element,
    is_line_break,
    render_html,
)
from description_lists.parsers import (
    Nothing,
    Parse,
    Parsed,
    parse_anything,
    parse_many,
    parse_map,
    parse_matching,
    parse_some,
    parse_some_sundered_tidbits,
    parse_this_but_not_that,
    parse_whole_input,
    parse_zebra,
)
from description_lists.runes import Runes, runes
from description_lists.zebras import Zebra

type Node = PageElement


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Description:
    """Some terms and some details, each as rendered markup."""

    terms: tuple[str, ...]
    details: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AnnotatedDescription:
    """A description and the block node it was read from."""

    node: Node
    description: Description


def build_description_html(description: Description) -> str:
    """Render the ``<dt>`` and ``<dd>`` elements of one description."""
    terms_html = " ".join(f"<dt>{term.lstrip()}</dt>" for term in description.terms)
    details_html = " ".join(
        f"<dd>{detail.lstrip()}</dd>" for detail in description.details
    )
    return terms_html + " " + details_html


def build_description_list_html(descriptions: Iterable[Description]) -> str:
    """Render descriptions as a single ``<dl>`` element."""
    body = " ".join(build_description_html(d) for d in descriptions)
    return "<dl>" + body.lstrip() + "</dl>"


# ---------------------------------------------------------------------------
# Inline grammar: one description
# ---------------------------------------------------------------------------


def _is_colon_led(markup: str) -> bool:
    return markup.lstrip().startswith(":")


def parse_line_break(input: Runes[Node]) -> Parse[Node, Nothing]:
    return parse_map(lambda _node: {}, parse_matching(is_line_break, input))


def parse_term_chunk(input: Runes[Node]) -> Parse[Node, str]:
    """One node whose markup does not open with a colon."""
    if not input:
        return None
    markup = render_html(input.first())
    if _is_colon_led(markup):
        return None
    return Parsed(markup, input.rest())


def parse_term(input: Runes[Node]) -> Parse[Node, str]:
    """A line of term chunks, joined verbatim."""
    return parse_map(
        "".join,
        parse_some(
            lambda input: parse_this_but_not_that(
                parse_term_chunk, parse_line_break, input,
            ),
            input,
        ),
    )


def parse_detail_chunk(input: Runes[Node]) -> Parse[Node, str]:
    """One node whose markup opens with a colon; the colon is dropped.

    Whitespace before the colon is dropped with it, whitespace after it is
    kept.
    """
    if not input:
        return None
    markup = render_html(input.first())
    if not _is_colon_led(markup):
        return None
    return Parsed(markup.lstrip()[1:], input.rest())


def _parse_rendered_node(input: Runes[Node]) -> Parse[Node, str]:
    return parse_map(render_html, parse_anything(input))


def parse_detail(input: Runes[Node]) -> Parse[Node, str]:
    """A colon-led chunk and everything after it up to the next line break."""
    parsed_first = parse_detail_chunk(input)
    if parsed_first is None:
        return None
    parsed_others = parse_many(
        lambda input: parse_this_but_not_that(
            _parse_rendered_node, parse_line_break, input,
        ),
        parsed_first.leftover,
    )
    return Parsed(
        "".join([parsed_first.outcome, *parsed_others.outcome]),
        parsed_others.leftover,
    )


def parse_description(input: Iterable[Node]) -> Parse[Node, Description]:
    """Try to read the inline nodes of a block as a description.

    Terms come first, one per line, then details, one per line. Fails when
    there is not at least one of each, or when anything is left over.
    """
    input = runes(input)
    parsed_terms = parse_some_sundered_tidbits(parse_line_break, parse_term, input)
    if parsed_terms is None:
        return None
    parsed_line_break = parse_line_break(parsed_terms.leftover)
    if parsed_line_break is None:
        return None
    parsed_details = parse_whole_input(
        lambda input: parse_some_sundered_tidbits(
            parse_line_break, parse_detail, input,
        ),
        parsed_line_break.leftover,
    )
    if parsed_details is None:
        return None
    return Parsed(
        Description(tuple(parsed_terms.outcome), tuple(parsed_details.outcome)),
        parsed_details.leftover,
    )


# ---------------------------------------------------------------------------
# Block grammar: descriptions among other content
# ---------------------------------------------------------------------------


def unwrap_idle_division(node: Node) -> Node | None:
    """The single element inside an idle ``<div>``, else ``None``.

    Some editors wrap every top-level block in a ``<div>`` that does nothing,
    which would hide consecutive descriptions from each other. A division is
    idle when, blank text aside, it holds exactly one element.
    """
    if not is_element(node) or node.name != "div":
        return None
    children = [child for child in child_nodes(node) if not is_blank_text(child)]
    if len(children) == 1 and is_element(children[0]):
        return children[0]
    return None


def parse_description_lists_and_stuff(
    input: Iterable[Node],
    *,
    options: ProcessorOptions | None = None,
) -> Parsed[Node, Zebra[list[Node], list[AnnotatedDescription]]]:
    """Split block nodes into runs of other stuff and runs of descriptions.

    The zebra's white runs hold the nodes that are not descriptions, the
    black runs hold one or more consecutive descriptions each. Never fails.
    """
    options = options or ProcessorOptions()
    input = runes(input)

    def parse_nested_description(
        input: Runes[Node],
    ) -> Parse[Node, AnnotatedDescription]:
        if not input:
            return None
        root = input.first()
        parsed = None
        if options.unwrap_idle_divisions:
            wrapped = unwrap_idle_division(root)
            if wrapped is not None:
                parsed = parse_description(child_nodes(wrapped))
        if parsed is None:
            parsed = parse_description(child_nodes(root))
        if parsed is None:
            return None
        return Parsed(AnnotatedDescription(root, parsed.outcome), input.rest())

    def parse_stuff(input: Runes[Node]) -> Parse[Node, Node]:
        return parse_this_but_not_that(parse_anything, parse_nested_description, input)

    parsed = parse_zebra(
        lambda input: parse_many(parse_stuff, input),
        lambda input: parse_some(parse_nested_description, input),
        input,
    )
    if parsed is None:
        raise AssertionError("a zebra of parse_many white runs cannot fail")
    return parsed
