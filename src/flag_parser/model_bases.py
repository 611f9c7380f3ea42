"""Nominal marker base classes for model standardization.

`DomainModel` is the base for Pydantic-based configuration models and
`InternalDTO` marks plain dataclass values such as extraction results.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__
        fields = ", ".join(
            f"{name}={value!r}"
            for name, value in self.__dict__.items()
            if not isinstance(value, BaseModel)
        )
        return f"<{class_name} {fields}>" if fields else f"<{class_name}>"


class InternalDTO:
    """Nominal marker for internal dataclass DTOs.

    Mixed into dataclass definitions to make their intent explicit for mypy.
    """
