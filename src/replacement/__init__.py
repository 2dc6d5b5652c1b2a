"""Locate and rewrite a dependency version inside free-form text."""

from .strategies import STRATEGIES, ReplacementResult, replace_with_strategies

__all__ = ["STRATEGIES", "ReplacementResult", "replace_with_strategies"]
