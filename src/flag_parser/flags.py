from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from flag_parser.model_bases import InternalDTO


@dataclass(frozen=True)
class FlagsResult(InternalDTO):
    """Ordered flag names extracted from a single command line.

    Names keep the order in which their tokens appeared, including duplicates.
    Bare ``-`` and ``--`` tokens are represented by the empty string.
    """

    names: tuple[str, ...] = ()
    _lookup: frozenset[str] = field(
        init=False, repr=False, compare=False, default=frozenset()
    )

    def __post_init__(self) -> None:
        # Accept any iterable of names but always store a tuple
        if not isinstance(self.names, tuple):
            object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "_lookup", frozenset(self.names))

    def contains(self, name: str) -> bool:
        """Return True if ``name`` was extracted (exact string match)."""
        return name in self._lookup

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def to_list(self) -> list[str]:
        return list(self.names)
