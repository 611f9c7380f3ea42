"""Extract ``-short`` and ``--long`` flag names from a command line string.

    >>> from flag_parser import extract
    >>> flags = extract("-a -b --long-flag-a --long-flag-b")
    >>> flags.contains("a")
    True
"""

from flag_parser.config import ExtractorConfig, LoggingConfig, LogLevel, load_config
from flag_parser.exceptions import (
    ConfigurationError,
    EmptyFlagNameError,
    FlagParserError,
)
from flag_parser.extractor import FlagExtractor, extract, get_flags
from flag_parser.flags import FlagsResult
from flag_parser.interfaces import IFlagExtractor
from flag_parser.logging_utils import (
    configure_logging,
    configure_logging_from_config,
    get_logger,
)

__all__ = [
    "ConfigurationError",
    "EmptyFlagNameError",
    "ExtractorConfig",
    "FlagExtractor",
    "FlagParserError",
    "FlagsResult",
    "IFlagExtractor",
    "LogLevel",
    "LoggingConfig",
    "configure_logging",
    "configure_logging_from_config",
    "extract",
    "get_flags",
    "get_logger",
    "load_config",
]
