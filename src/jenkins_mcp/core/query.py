from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Pattern

from .errors import JenkinsValidationError
from .models import Item


@dataclass(frozen=True)
class ItemQuery:
    """Regex filters for items; empty or missing patterns match everything."""

    class_pattern: Optional[str] = None
    full_name_pattern: Optional[str] = None
    color_pattern: Optional[str] = None

    def compile(self) -> "ItemFilter":
        return ItemFilter(
            class_re=_compile("classPattern", self.class_pattern),
            full_name_re=_compile("fullNamePattern", self.full_name_pattern),
            color_re=_compile("colorPattern", self.color_pattern),
        )


def _compile(field: str, pattern: Optional[str]) -> Optional[Pattern[str]]:
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise JenkinsValidationError(
            field, f"is not a valid regular expression ({pattern!r}): {exc}"
        ) from exc


@dataclass(frozen=True)
class ItemFilter:
    class_re: Optional[Pattern[str]] = None
    full_name_re: Optional[Pattern[str]] = None
    color_re: Optional[Pattern[str]] = None

    def matches(self, item: Item) -> bool:
        if self.class_re and not self.class_re.search(item.class_name):
            return False
        if self.full_name_re and not self.full_name_re.search(item.full_name):
            return False
        if self.color_re:
            # items without a color (folders) never match a color filter
            if not item.color:
                return False
            if not self.color_re.search(item.color):
                return False
        return True


def filter_items(items: Iterable[Item], query: ItemQuery) -> List[Item]:
    """Compile the query once, then keep items matching every given pattern."""
    item_filter = query.compile()
    return [item for item in items if item_filter.matches(item)]


__all__ = ["ItemQuery", "ItemFilter", "filter_items"]
