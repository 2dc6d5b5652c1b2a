"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    INPUT_ERROR = 2
    EXIT_WARNINGS = 3


class Strategies(Enum):
    """Replacement strategies, from the most to the least specific.

    Args:
        Enum (string): Replacement strategy names accepted by the program.
    """

    STRICT = "strict"
    DEFAULT = "default"
    RELAXED = "relaxed"
    SLIDING = "sliding"
    GROUP_ID = "group_id"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # Artifact ids that say nothing about the library they belong to.
    COMMON_SUFFIXES = ["config", "contrib", "core", "extra", "server"]
    MIN_PREFIX_LENGTH = 3
    MIN_GROUP_WORD_LENGTH = 3
    SLIDING_WINDOW_SIZE = 5
    SLIDING_WINDOW_COUNT = 5
    IGNORE_CHAR = ".?"
    GUARD_WORD = "previous"
    COMMENT_PREFIX = "//"
    PATTERN_CACHE_SIZE = 512

    DEFAULT_STRATEGIES = [
        Strategies.STRICT.value,
        Strategies.DEFAULT.value,
        Strategies.RELAXED.value,
        Strategies.SLIDING.value,
        Strategies.GROUP_ID.value,
    ]
    SUPPORTED_STRATEGIES = [s.value for s in Strategies]
    GROUP_UPDATES = False

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL = None
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ENV_LOG_LEVEL = "BUMPGATE_LOG_LEVEL"
    ENV_CONFIG = "BUMPGATE_CONFIG"
    DEFAULT_CONFIG_FILE = "bumpgate.yml"
    FILE_ENCODING = "utf-8"
