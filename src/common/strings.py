"""Small string helpers shared by the update model and the replacement engine."""

import re
from typing import Iterable, List, Optional

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]+")


def extract_words(s: str) -> List[str]:
    """Split ``s`` into its alphanumeric fragments, dropping empty ones."""
    return [word for word in _NON_ALNUM.split(s) if word]


def remove_suffix(target: str, suffixes: Iterable[str]) -> str:
    """Remove the first of ``suffixes`` that ``target`` ends with."""
    for suffix in suffixes:
        if suffix and target.endswith(suffix):
            return target[: len(target) - len(suffix)]
    return target


def rightmost_label(s: str) -> str:
    """Return the last dot-separated label of ``s``."""
    return s.rsplit(".", 1)[-1]


def longest_common_prefix(strings: Iterable[str]) -> str:
    """Return the longest prefix shared by every string in ``strings``."""
    items = list(strings)
    if not items:
        return ""
    shortest, longest = min(items), max(items)
    end = 0
    while end < len(shortest) and shortest[end] == longest[end]:
        end += 1
    return shortest[:end]


def longest_common_prefix_greater(strings: Iterable[str], n: int) -> Optional[str]:
    """Return the longest common prefix only if it is longer than ``n``."""
    prefix = longest_common_prefix(strings)
    return prefix if len(prefix) > n else None


def sliding(s: str, size: int, count: int) -> List[str]:
    """Return at most ``count`` overlapping windows of ``size`` characters.

    A non-empty string shorter than ``size`` is its own single window.
    """
    if not s:
        return []
    if len(s) <= size:
        return [s]
    return [s[i : i + size] for i in range(len(s) - size + 1)][:count]
