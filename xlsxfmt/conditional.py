"""Conditional formatting: a set of rules applied to one or more cell ranges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from . import rule as rule_module
from . import styles
from .rule import ConditionalRule, RuleInfo

Option = Callable[["ConditionalInfo"], None]


@dataclass
class ConditionalFormatting:
    """Conditional formatting as stored in the worksheet."""

    bounds: list[str] = field(default_factory=list)
    rules: list[ConditionalRule] = field(default_factory=list)
    pivot: bool = False


@dataclass
class ConditionalInfo:
    """Cell ranges together with the rules that format them."""

    formatting: ConditionalFormatting = field(default_factory=ConditionalFormatting)
    rules: list[RuleInfo] = field(default_factory=list)

    def set(self, *args: Option) -> None:
        """Apply options to this conditional formatting."""
        for option in args:
            option(self)

    def validate(self) -> None:
        """Raise ValueError if there are no ranges, no rules or an invalid rule."""
        if not self.formatting.bounds:
            raise ValueError("no any refs for conditional formatting")

        if not self.rules:
            raise ValueError("no any rules for conditional formatting")

        for i, info in enumerate(self.rules):
            if info.rule.type is None:
                raise ValueError(f"conditional rule#{i}: no type")

            if info.rule.priority < 1:
                raise ValueError(
                    f"conditional rule#{i}: priority({info.rule.priority}) can't be lower than 1"
                )

            info.validate()

    def unpack(
        self,
    ) -> tuple[Optional[ConditionalFormatting], Optional[list[Optional[styles.Info]]]]:
        """Return the formatting with its rules filled in and each rule's style.

        Returns (None, None) when there are no rules.
        """
        if not self.rules:
            return None, None

        self.formatting.rules = [info.rule for info in self.rules]
        return self.formatting, [info.style for info in self.rules]


def new(*args: Option) -> ConditionalInfo:
    """Create conditional formatting with the given options applied."""
    info = ConditionalInfo()
    info.set(*args)
    return info


def pivot(info: ConditionalInfo) -> None:
    """Mark the conditional formatting as belonging to a pivot table."""
    info.formatting.pivot = True


def refs(*args: str) -> Option:
    """Option adding cell ranges the formatting applies to."""

    def apply(info: ConditionalInfo) -> None:
        info.formatting.bounds.extend(args)

    return apply


def add_rule(*args: rule_module.Option) -> Option:
    """Option adding a rule built from rule options; priorities follow insertion order."""

    def apply(info: ConditionalInfo) -> None:
        created = rule_module.new(*args)
        created.rule.priority = len(info.rules) + 1
        info.rules.append(created)

    return apply