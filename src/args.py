"""Argument parsing functionality for BumpGate."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="bumpgate",
        description=(
            "BumpGate - Locate and rewrite dependency versions in free-form files"
        ),
        add_help=True,
    )

    parser.add_argument("-u", "--updates",
                        dest="UPDATES_FROM_FILE",
                        help="Load serialized updates from a YAML or JSON file",
                        action="append", type=str,
                        default=[])
    parser.add_argument("-p", "--update",
                        dest="SINGLE",
                        help="Name a single update as groupId:artifactId:current:newer[,newer...][:configurations]",
                        action="append", type=str,
                        default=[])
    parser.add_argument("-f", "--file",
                        dest="FILES",
                        help="File whose versions should be rewritten",
                        action="append", type=str,
                        default=[])

    parser.add_argument("-s", "--strategy",
                        dest="STRATEGIES",
                        help="Replacement strategy to try, in the order given (default: all, strictest first)",
                        action="append", type=str,
                        choices=Constants.SUPPORTED_STRATEGIES)
    parser.add_argument("-g", "--group",
                        dest="GROUP",
                        help="Merge updates sharing groupId and version transition before applying them",
                        action="store_true",
                        default=None)
    parser.add_argument("--list",
                        dest="LIST",
                        help="Print the loaded updates and exit",
                        action="store_true")
    parser.add_argument("-n", "--dry-run",
                        dest="DRY_RUN",
                        help="Report replacements without writing files",
                        action="store_true")
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to a JSON report of applied replacements",
                        action="store",
                        type=str)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("--error-on-unmatched",
                        dest="ERROR_ON_UNMATCHED",
                        help="Exit with a non-zero status code if an update matched no file.",
                        action="store_true")

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML or JSON)",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
