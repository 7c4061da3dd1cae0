"""Optional override of a variable's unit."""

from __future__ import annotations

from typing import Optional


class UnitOverride:
    """Holds a unit that replaces the unit found in the input, if set."""

    def __init__(self) -> None:
        self.unit: Optional[str] = None

    def set(self, text: str) -> None:
        """Use *text* as the unit from now on."""
        self.unit = text

    def unset(self) -> None:
        """Drop the override."""
        self.unit = None

    def rewrite(self, unit: str) -> str:
        """Return the override if one is set, otherwise *unit*."""
        return self.unit if self.unit is not None else unit