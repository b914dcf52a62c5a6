"""Options for the description list rewriter."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

DEFAULT_MAX_DEPTH = 200


@dataclass(frozen=True, slots=True)
class ProcessorOptions:
    """How ``process_description_lists`` walks and recognizes content.

    Attributes:
        unwrap_idle_divisions: Parse a ``<div>`` holding a single element through
            that element, for editors that wrap every block in a bare ``<div>``.
        max_depth: Nesting levels to descend below the processed element.
            Deeper elements are left as they are.
    """

    unwrap_idle_divisions: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> ProcessorOptions:
        """Build options from a JSON object, rejecting unknown keys."""
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"unknown option(s): {', '.join(unknown)}")
        unwrap = raw.get("unwrap_idle_divisions", False)
        if not isinstance(unwrap, bool):
            raise ValueError(
                f"unwrap_idle_divisions must be true or false, got {unwrap!r}"
            )
        max_depth = raw.get("max_depth", DEFAULT_MAX_DEPTH)
        if not isinstance(max_depth, int) or isinstance(max_depth, bool):
            raise ValueError(f"max_depth must be an integer, got {max_depth!r}")
        return cls(unwrap_idle_divisions=unwrap, max_depth=max_depth)

    def to_dict(self) -> dict[str, Any]:
        return {
            "unwrap_idle_divisions": self.unwrap_idle_divisions,
            "max_depth": self.max_depth,
        }
