"""Column settings of a worksheet, kept as single or grouped column ranges."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Col:
    """Settings of a range of columns, 1-based and inclusive."""

    min: int = 0
    max: int = 0
    width: float = 0.0
    custom_width: bool = False
    style: int = 0
    outline_level: int = 0
    hidden: bool = False
    collapsed: bool = False
    phonetic: bool = False


@dataclass
class Columns:
    """Column settings of a sheet addressed by 0-based column index."""

    items: list[Col] = field(default_factory=list)

    def resolve(self, index: int) -> Col:
        """Return the settings of a single column, creating them if required.

        A column inside a grouped range gets its own entry copied from the group.
        """
        number = index + 1

        for col in self.items:
            if col.min == col.max == number:
                return col

        group: Optional[Col] = next(
            (col for col in self.items if col.min <= number <= col.max), None
        )
        if group is not None:
            resolved = copy.copy(group)
            resolved.min = number
            resolved.max = number
        else:
            resolved = Col(min=number, max=number)

        self.items.append(resolved)
        return resolved

    def delete(self, index: int) -> None:
        """Remove a single column's settings and shrink groups that contain it."""
        number = index + 1
        kept: list[Col] = []

        for col in self.items:
            if col.min == col.max == number:
                continue
            if col.min <= number <= col.max:
                col.max -= 1
            kept.append(col)

        self.items = kept