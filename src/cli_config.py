"""Configuration file loading and overrides for runtime tunables.

Precedence, lowest first: defaults in ``Constants``, the YAML config file,
CLI flags.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants
from replacement.strategies import validate_strategies

logger = logging.getLogger(__name__)


def find_config_path(explicit: Optional[str] = None) -> Optional[str]:
    """Return the config file to use: explicit path, ``BUMPGATE_CONFIG``, or ``./bumpgate.yml``."""
    if explicit:
        return explicit
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path:
        return env_path
    if os.path.isfile(Constants.DEFAULT_CONFIG_FILE):
        return Constants.DEFAULT_CONFIG_FILE
    return None


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Load a YAML (or JSON) config file.

    Raises:
        OSError: the file cannot be read.
        ValueError: the file is not a YAML mapping.
    """
    if not path:
        return {}
    with open(path, "r", encoding=Constants.FILE_ENCODING) as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    return data


def apply_config(config: Dict[str, Any]) -> None:
    """Apply config values onto ``Constants``."""
    logging_cfg = config.get("logging") or {}
    level = logging_cfg.get("level") if isinstance(logging_cfg, dict) else None
    if level:
        Constants.LOG_LEVEL = str(level).upper()

    replacement_cfg = config.get("replacement") or {}
    if not isinstance(replacement_cfg, dict):
        logger.warning("Ignoring 'replacement' config section: expected a mapping")
        return
    strategies = replacement_cfg.get("strategies")
    if strategies is not None:
        if isinstance(strategies, str):
            strategies = [strategies]
        if not isinstance(strategies, list):
            logger.warning(
                "Ignoring 'replacement.strategies': expected a name or a list, got %s",
                type(strategies).__name__,
            )
            valid = []
        else:
            valid = validate_strategies(str(s) for s in strategies)
        if valid:
            Constants.DEFAULT_STRATEGIES = valid
        else:
            logger.warning("No known strategies configured; keeping %s", Constants.DEFAULT_STRATEGIES)
    if "group" in replacement_cfg:
        Constants.GROUP_UPDATES = bool(replacement_cfg["group"])


def apply_cli_overrides(args) -> None:
    """Apply CLI flags with the highest precedence."""
    if getattr(args, "STRATEGIES", None):
        Constants.DEFAULT_STRATEGIES = list(args.STRATEGIES)
    if getattr(args, "GROUP", None) is not None:
        Constants.GROUP_UPDATES = bool(args.GROUP)
