"""Replacement strategies for locating a version in free-form text.

Strategies differ in the search terms they anchor on and whether the groupId
has to appear in front of them. They are tried from the most specific to the
least specific; the first one that produces a result wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from constants import Constants, Strategies
from common.logging_utils import extra_context, is_debug_enabled
from common.strings import extract_words, sliding
from update.models import Update
from .patterns import Replacer, replacer_for

logger = logging.getLogger(__name__)


def strict_terms(update: Update) -> List[str]:
    return list(update.search_terms())


def relaxed_terms(update: Update) -> List[str]:
    """Word fragments of the artifact id."""
    return extract_words(update.artifact_id)


def sliding_terms(update: Update) -> List[str]:
    """The first overlapping five-character windows of the artifact id."""
    return sliding(
        update.artifact_id,
        Constants.SLIDING_WINDOW_SIZE,
        Constants.SLIDING_WINDOW_COUNT,
    )


def group_id_terms(update: Update) -> List[str]:
    """Longer words of the groupId, ignoring its first label (``org``, ``com``, ...)."""
    labels = update.group_id.split(".")[1:]
    words = [word for label in labels for word in extract_words(label)]
    return [word for word in words if len(word) > Constants.MIN_GROUP_WORD_LENGTH]


def replace_all_in_strict(update: Update) -> Replacer:
    return replacer_for(update, strict_terms(update), include_group_id=True)


def replace_all_in(update: Update) -> Replacer:
    return replacer_for(update, strict_terms(update), include_group_id=False)


def replace_all_in_relaxed(update: Update) -> Replacer:
    return replacer_for(update, relaxed_terms(update), include_group_id=False)


def replace_all_in_sliding(update: Update) -> Replacer:
    return replacer_for(update, sliding_terms(update), include_group_id=False)


def replace_all_in_group_id(update: Update) -> Replacer:
    return replacer_for(update, group_id_terms(update), include_group_id=True)


STRATEGIES: Dict[str, Callable[[Update], Replacer]] = {
    Strategies.STRICT.value: replace_all_in_strict,
    Strategies.DEFAULT.value: replace_all_in,
    Strategies.RELAXED.value: replace_all_in_relaxed,
    Strategies.SLIDING.value: replace_all_in_sliding,
    Strategies.GROUP_ID.value: replace_all_in_group_id,
}


@dataclass(frozen=True)
class ReplacementResult:
    """Rewritten text and the strategy that produced it."""

    text: str
    strategy: str


def replace_with_strategies(
    update: Update, target: str, strategies: Optional[Sequence[str]] = None
) -> Optional[ReplacementResult]:
    """Try ``strategies`` in order and return the first successful replacement.

    Defaults to ``Constants.DEFAULT_STRATEGIES``. Unknown strategy names
    raise ValueError.
    """
    names = list(strategies) if strategies is not None else list(Constants.DEFAULT_STRATEGIES)
    for strategy in names:
        if strategy not in STRATEGIES:
            raise ValueError(f"unknown replacement strategy '{strategy}'")
        replaced = STRATEGIES[strategy](update)(target)
        if replaced is not None:
            if is_debug_enabled(logger):
                logger.debug(
                    "Version replaced",
                    extra=extra_context(
                        event="replace",
                        component="strategies",
                        outcome="success",
                        strategy=strategy,
                        update=update.show(),
                    ),
                )
            return ReplacementResult(replaced, strategy)
    if is_debug_enabled(logger):
        logger.debug(
            "No strategy matched",
            extra=extra_context(
                event="replace",
                component="strategies",
                outcome="no_match",
                update=update.show(),
            ),
        )
    return None


def validate_strategies(names: Iterable[str]) -> List[str]:
    """Return the known strategy names from ``names``, logging the others."""
    valid = []
    for name in names:
        if name in STRATEGIES:
            valid.append(name)
        else:
            logger.warning("Ignoring unknown replacement strategy '%s'", name)
    return valid
