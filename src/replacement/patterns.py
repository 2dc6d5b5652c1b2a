"""Search pattern construction and guarded version replacement.

A pattern anchors the current version to a search term that has to appear
before it on the same line:

    (?im)^(.*)(<groupId>.*?(term1|term2|...).*?)<currentVersion>

Group 1 is the line context in front of the anchor, group 2 the anchor up to
the version literal. Only the version literal is replaced, and the first match
is rejected outright when its context is a ``//`` comment or mentions a
"previous" version.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Tuple

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from update.models import Update, remove_common_suffix

logger = logging.getLogger(__name__)

Replacer = Callable[[str], Optional[str]]


def quote_term(term: str) -> str:
    """Quote ``term`` for literal use, letting ``.`` and ``-`` match any single character or none.

    Generic suffix words are removed first, so ``cats-core`` becomes ``cats.?``.
    """
    quoted = []
    for char in remove_common_suffix(term):
        if char in ".-":
            quoted.append(Constants.IGNORE_CHAR)
        else:
            quoted.append(re.escape(char))
    return "".join(quoted)


def quote_terms(terms: Iterable[str]) -> List[str]:
    """Quote ``terms``, dropping those that are empty or nothing but a wildcard."""
    quoted = (quote_term(term) for term in terms)
    return [term for term in quoted if term and term != Constants.IGNORE_CHAR]


@lru_cache(maxsize=Constants.PATTERN_CACHE_SIZE)
def _compile(group_id_pattern: str, terms: Tuple[str, ...], current_version: str) -> re.Pattern[str]:
    search_term = "(" + "|".join(terms) + ")"
    return re.compile(
        f"^(.*)({group_id_pattern}{search_term}.*?){re.escape(current_version)}",
        re.IGNORECASE | re.MULTILINE,
    )


@lru_cache(maxsize=Constants.PATTERN_CACHE_SIZE)
def _version_pattern(current_version: str) -> re.Pattern[str]:
    return re.compile(re.escape(current_version), re.IGNORECASE)


def _first_match(pattern: re.Pattern[str], target: str, current_version: str) -> Optional[re.Match[str]]:
    """Return the first match of ``pattern``, trying only lines that hold the version.

    Matches never span lines and end on a version literal, so each line is
    matched from its start and cut after its last version occurrence.
    """
    version = _version_pattern(current_version)
    hit = version.search(target)
    while hit is not None:
        line_start = target.rfind("\n", 0, hit.start()) + 1
        line_end = target.find("\n", hit.start())
        if line_end < 0:
            line_end = len(target)
        last_end = hit.end()
        while hit is not None and hit.end() <= line_end:
            last_end = hit.end()
            hit = version.search(target, hit.start() + 1)
        match = pattern.match(target, line_start, last_end)
        if match is not None:
            return match
    return None


def build_pattern(
    terms: Iterable[str], current_version: str, group_id: Optional[str] = None
) -> Optional[re.Pattern[str]]:
    """Build the search pattern for ``terms``, or None when no usable term is left.

    With ``group_id`` the literal groupId must precede the terms.
    """
    quoted = quote_terms(terms)
    if not quoted:
        return None
    group_id_pattern = re.escape(group_id) + ".*?" if group_id else ""
    return _compile(group_id_pattern, tuple(quoted), current_version)


def is_guarded(context: str) -> bool:
    """True when the text in front of an anchor marks a comment or an old version."""
    return (
        Constants.GUARD_WORD in context.lower()
        or context.strip().startswith(Constants.COMMENT_PREFIX)
    )


def replace_version(
    pattern: re.Pattern[str], target: str, current_version: str, next_version: str
) -> Optional[str]:
    """Replace the version literal of the first match of ``pattern`` in ``target``.

    Returns None when nothing matches or the first match is guarded.
    """
    match = _first_match(pattern, target, current_version)
    if match is None:
        return None
    if is_guarded(match.group(1)):
        if is_debug_enabled(logger):
            logger.debug(
                "Match rejected by guard",
                extra=extra_context(
                    event="replace_guarded",
                    component="replacement",
                    outcome="rejected",
                    line_offset=match.start(),
                ),
            )
        return None
    version_start = match.end(2)
    return target[:version_start] + next_version + target[match.end():]


def replacer_for(update: Update, terms: Iterable[str], include_group_id: bool) -> Replacer:
    """Return a function rewriting the current version of ``update`` in a text blob."""
    pattern = build_pattern(
        list(terms),
        update.current_version,
        update.group_id if include_group_id else None,
    )
    if pattern is None:
        return lambda _target: None

    current_version = update.current_version
    next_version = update.next_version

    def replace(target: str) -> Optional[str]:
        return replace_version(pattern, target, current_version, next_version)

    return replace
