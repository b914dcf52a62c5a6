"""Colon-led description lists: parser combinators, zebras and an HTML rewriter."""

from description_lists.config import ProcessorOptions
from description_lists.descriptions import (
    AnnotatedDescription,
    Description,
    build_description_html,
    build_description_list_html,
    parse_description,
    parse_description_lists_and_stuff,
)
from description_lists.errors import DescriptionListError, HostError
from description_lists.parsers import Parse, Parsed, Parser
from description_lists.processor import (
    process_description_lists,
    process_html,
    process_html_with_count,
)
from description_lists.runes import Runes, runes
from description_lists.zebras import Zebra, ZebraBody, ZebraTail

__all__ = [
    "AnnotatedDescription",
    "Description",
    "DescriptionListError",
    "HostError",
    "Parse",
    "Parsed",
    "Parser",
    "ProcessorOptions",
    "Runes",
    "Zebra",
    "ZebraBody",
    "ZebraTail",
    "build_description_html",
    "build_description_list_html",
    "parse_description",
    "parse_description_lists_and_stuff",
    "process_description_lists",
    "process_html",
    "process_html_with_count",
    "runes",
]
