from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from flag_parser.flags import FlagsResult


class IFlagExtractor(Protocol):
    """Extracts flag names from a raw command line string.

    Implementations should be pure and side-effect free.
    """

    def extract(self, input_str: str) -> FlagsResult:
        """Extract flag names from a command line.

        Args:
            input_str: Raw command line (may be empty)

        Returns:
            A FlagsResult holding the flag names in input order. Returns an
            empty result when the input contains no flag tokens.
        """
        ...
