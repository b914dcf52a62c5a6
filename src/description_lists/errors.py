"""Exceptions raised at the boundary with the host content tree.

The parsers never raise: a failed match is ``None``. These errors cover the
host side only, where a mutation or a markup fragment cannot be honoured.
"""
from __future__ import annotations


class DescriptionListError(Exception):
    """Base class for errors raised by this package."""


class HostError(DescriptionListError):
    """The host tree cannot perform a requested operation.

    Raised for mutations of nodes that have no parent and for markup
    fragments that parse to no node at all.
    """
