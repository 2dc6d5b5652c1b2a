#! /usr/bin/env python3
"""BumpGate - rewrite dependency versions in free-form files.

Loads detected updates, optionally groups them, and applies each update to
every target file using the replacement strategies from strictest to loosest.
"""

import json
import logging
import sys
from typing import Any, Dict, List, Tuple

from args import parse_args
from cli_config import apply_cli_overrides, apply_config, find_config_path, load_config
from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from replacement.strategies import replace_with_strategies
from update.grouping import flatten, group_updates
from update.models import Update
from update.parser import parse_update_token
from update.serialization import UpdateFormatError, load_updates, to_dict

logger = logging.getLogger(__name__)


def read_text(file_name: str) -> str:
    """Read a text file, exiting with FILE_ERROR when it cannot be read."""
    try:
        with open(file_name, encoding=Constants.FILE_ENCODING) as file:
            return file.read()
    except FileNotFoundError as e:
        logging.error("File not found: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except (OSError, UnicodeDecodeError) as e:
        logging.error("IO error: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def write_text(file_name: str, text: str) -> None:
    try:
        with open(file_name, "w", encoding=Constants.FILE_ENCODING) as file:
            file.write(text)
    except OSError as e:
        logging.error("Couldn't write %s: %s, aborting", file_name, e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def build_update_list(args) -> List[Update]:
    """Collect updates from update files and CLI tokens.

    Args:
        args (argparse.Namespace): Parsed CLI arguments.

    Returns:
        list: Updates, grouped when grouping is enabled.
    """
    updates: List[Update] = []
    try:
        for file_name in args.UPDATES_FROM_FILE:
            updates.extend(load_updates(read_text(file_name)))
        for token in args.SINGLE:
            updates.append(parse_update_token(token))
    except UpdateFormatError as e:
        logging.error("Invalid update input: %s", e)
        sys.exit(ExitCodes.INPUT_ERROR.value)

    if Constants.GROUP_UPDATES:
        updates = group_updates(flatten(updates))
    return updates


def apply_updates(
    updates: List[Update], file_names: List[str], dry_run: bool = False
) -> Tuple[List[Dict[str, Any]], List[Update]]:
    """Apply every update to every file.

    Updates are applied in sequence to the evolving text of each file, which
    is written once and only when it changed.

    Returns:
        tuple: (report entries for applied replacements, updates that matched nothing)
    """
    report: List[Dict[str, Any]] = []
    matched = set()
    for file_name in file_names:
        original = read_text(file_name)
        text = original
        for index, update in enumerate(updates):
            result = replace_with_strategies(update, text, Constants.DEFAULT_STRATEGIES)
            if result is None:
                continue
            text = result.text
            matched.add(index)
            logging.info("%s: %s (%s)", file_name, update.show(), result.strategy)
            report.append({
                "file": file_name,
                "update": to_dict(update),
                "strategy": result.strategy,
                "nextVersion": update.next_version,
            })
        if text != original:
            if dry_run:
                logging.info("Dry run, not writing %s", file_name)
            else:
                write_text(file_name, text)
        elif is_debug_enabled(logger):
            logger.debug(
                "File unchanged",
                extra=extra_context(event="decision", component="cli", action="apply", target=file_name),
            )
    unmatched = [update for index, update in enumerate(updates) if index not in matched]
    return report, unmatched


def export_json(report: List[Dict[str, Any]], path: str) -> None:
    """Exports the replacement report to a JSON file."""
    try:
        with open(path, "w", encoding=Constants.FILE_ENCODING) as file:
            json.dump(report, file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)

    try:
        config = load_config(find_config_path(args.CONFIG))
    except OSError as e:
        logging.error("Config file couldn't be read: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except ValueError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.INPUT_ERROR.value)
    apply_config(config)
    apply_cli_overrides(args)
    configure_logging(args.LOG_LEVEL)
    if args.LOG_FILE:
        add_file_handler(args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action="main",
                strategies=",".join(Constants.DEFAULT_STRATEGIES),
            ),
        )

    updates = build_update_list(args)
    if not updates:
        logging.warning("No updates found in the input.")
        sys.exit(ExitCodes.SUCCESS.value)

    if args.LIST:
        for update in updates:
            print(update.show())
        sys.exit(ExitCodes.SUCCESS.value)

    if not args.FILES:
        logging.error("No target files given, use -f/--file.")
        sys.exit(ExitCodes.INPUT_ERROR.value)

    report, unmatched = apply_updates(updates, args.FILES, dry_run=args.DRY_RUN)
    logging.info("Applied %d replacement(s).", len(report))

    if args.OUTPUT:
        export_json(report, args.OUTPUT)

    if unmatched:
        for update in unmatched:
            logging.warning("No replacement for %s", update.show())
        if args.ERROR_ON_UNMATCHED:
            logging.error("Unmatched updates present, exiting with non-zero status code.")
            sys.exit(ExitCodes.EXIT_WARNINGS.value)

    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
