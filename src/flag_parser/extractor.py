from __future__ import annotations

import logging

from flag_parser.config import ExtractorConfig
from flag_parser.exceptions import EmptyFlagNameError
from flag_parser.flags import FlagsResult
from flag_parser.interfaces import IFlagExtractor

logger = logging.getLogger(__name__)

LONG_FLAG_PREFIX = "--"
SHORT_FLAG_PREFIX = "-"


def _flag_name(token: str) -> str | None:
    """Return the flag name carried by ``token``, or None for non-flags."""
    if token.startswith(LONG_FLAG_PREFIX):
        return token[len(LONG_FLAG_PREFIX) :]
    if token.startswith(SHORT_FLAG_PREFIX):
        return token[len(SHORT_FLAG_PREFIX) :]
    return None


class FlagExtractor(IFlagExtractor):
    """Pulls ``-name`` and ``--name`` tokens out of a command line string.

    - Splits on runs of whitespace
    - Strips one leading dash from short flags, two from long flags
    - Drops tokens that do not start with a dash
    - Keeps order and duplicates; ``-abc`` is the single flag ``abc``
    """

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self._config = config or ExtractorConfig()

    @property
    def config(self) -> ExtractorConfig:
        return self._config

    def extract(self, input_str: str) -> FlagsResult:
        if not isinstance(input_str, str):
            raise TypeError(
                f"Command line must be a string, got {type(input_str).__name__}."
            )

        tokens = input_str.split()
        names: list[str] = []
        for position, token in enumerate(tokens):
            name = _flag_name(token)
            if name is None:
                continue
            if not name and self._config.reject_empty_names:
                raise EmptyFlagNameError(token=token, position=position)
            names.append(name)

        logger.debug(
            "Extracted %d flag(s) from %d token(s)", len(names), len(tokens)
        )
        return FlagsResult(tuple(names))


_default_extractor = FlagExtractor()


def extract(input_str: str) -> FlagsResult:
    """Extract flag names from ``input_str`` using the default (lenient) rules.

    Example:
        >>> flags = extract("-a -b --long-flag-a plain")
        >>> list(flags)
        ['a', 'b', 'long-flag-a']
        >>> flags.contains("a")
        True
    """
    return _default_extractor.extract(input_str)


def get_flags(input_str: str) -> list[str]:
    """Return the extracted flag names as a plain list."""
    return extract(input_str).to_list()
