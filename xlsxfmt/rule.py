"""Conditional formatting rules: the rule model and the simpler rule kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from . import styles
from .style_types import _XmlIntEnum

Option = Callable[["RuleInfo"], None]


class ConditionType(str, Enum):
    """Kind of a conditional formatting rule."""

    ABOVE_AVERAGE = "aboveAverage"
    BEGINS_WITH = "beginsWith"
    CELL_IS = "cellIs"
    COLOR_SCALE = "colorScale"
    CONTAINS_BLANKS = "containsBlanks"
    CONTAINS_ERRORS = "containsErrors"
    CONTAINS_TEXT = "containsText"
    DATA_BAR = "dataBar"
    DUPLICATE_VALUES = "duplicateValues"
    ENDS_WITH = "endsWith"
    EXPRESSION = "expression"
    ICON_SET = "iconSet"
    NOT_CONTAINS_BLANKS = "notContainsBlanks"
    NOT_CONTAINS_ERRORS = "notContainsErrors"
    NOT_CONTAINS_TEXT = "notContainsText"
    TIME_PERIOD = "timePeriod"
    TOP10 = "top10"
    UNIQUE_VALUES = "uniqueValues"


class ConditionOperator(str, Enum):
    """Comparison operator of a rule."""

    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    EQUAL = "equal"
    NOT_EQUAL = "notEqual"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    GREATER_THAN = "greaterThan"
    BETWEEN = "between"
    NOT_BETWEEN = "notBetween"
    CONTAINS_TEXT = "containsText"
    NOT_CONTAINS = "notContains"
    BEGINS_WITH = "beginsWith"
    ENDS_WITH = "endsWith"


class TimePeriodType(str, Enum):
    """Time period a date rule matches."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"
    LAST_7_DAYS = "last7Days"
    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    NEXT_MONTH = "nextMonth"
    THIS_WEEK = "thisWeek"
    LAST_WEEK = "lastWeek"
    NEXT_WEEK = "nextWeek"


class ValueType(_XmlIntEnum):
    """How a threshold value of a scale, bar or icon set is interpreted."""

    NUMBER = 1, "num"
    PERCENT = 2, "percent"
    HIGHEST = 3, "max"
    LOWEST = 4, "min"
    FORMULA = 5, "formula"
    PERCENTILE = 6, "percentile"

    def is_allowed(self, *args: "ValueType") -> bool:
        """Return True if this type is one of the given types."""
        return self in args


class IconSetType(_XmlIntEnum):
    """Icon collection of an icon set rule."""

    THREE_ARROWS = 2, "3Arrows"
    THREE_ARROWS_GRAY = 3, "3ArrowsGray"
    THREE_FLAGS = 4, "3Flags"
    THREE_TRAFFIC_LIGHTS1 = 5, "3TrafficLights1"
    THREE_TRAFFIC_LIGHTS2 = 6, "3TrafficLights2"
    THREE_SIGNS = 7, "3Signs"
    THREE_SYMBOLS = 8, "3Symbols"
    THREE_SYMBOLS2 = 9, "3Symbols2"
    FOUR_ARROWS = 11, "4Arrows"
    FOUR_ARROWS_GRAY = 12, "4ArrowsGray"
    FOUR_RED_TO_BLACK = 13, "4RedToBlack"
    FOUR_RATING = 14, "4Rating"
    FOUR_TRAFFIC_LIGHTS = 15, "4TrafficLights"
    FIVE_ARROWS = 17, "5Arrows"
    FIVE_ARROWS_GRAY = 18, "5ArrowsGray"
    FIVE_RATING = 19, "5Rating"
    FIVE_QUARTERS = 20, "5Quarters"

    def icon_count(self) -> int:
        """Number of icons in this collection."""
        if self < 10:
            return 3
        if self < 16:
            return 4
        return 5


@dataclass
class ConditionValue:
    type: Optional[ValueType] = None
    value: str = ""
    greater_than_equal: Optional[bool] = None


@dataclass
class ColorScale:
    values: list[ConditionValue] = field(default_factory=list)
    colors: list[styles.Color] = field(default_factory=list)


@dataclass
class DataBar:
    values: list[ConditionValue] = field(default_factory=list)
    color: Optional[styles.Color] = None
    min_length: int = 0
    max_length: int = 0
    show_value: Optional[bool] = None


@dataclass
class IconSet:
    type: Optional[IconSetType] = None
    values: list[ConditionValue] = field(default_factory=list)
    reverse: bool = False
    show_value: Optional[bool] = None
    percent: Optional[bool] = None


@dataclass
class ConditionalRule:
    """Settings of one conditional formatting rule as stored in the file."""

    type: Optional[ConditionType] = None
    priority: int = 0
    style: Optional[int] = None
    stop_if_true: bool = False
    above_average: Optional[bool] = None
    equal_average: bool = False
    std_dev: int = 0
    rank: int = 0
    bottom: bool = False
    percent: bool = False
    operator: Optional[ConditionOperator] = None
    text: str = ""
    time_period: Optional[TimePeriodType] = None
    formula: list[str] = field(default_factory=list)
    color_scale: Optional[ColorScale] = None
    data_bar: Optional[DataBar] = None
    icon_set: Optional[IconSet] = None


@dataclass
class RuleInfo:
    """A conditional rule together with its style and the kind that validates it."""

    initialized: bool = False
    rule: ConditionalRule = field(default_factory=ConditionalRule)
    style: Optional[styles.Info] = None
    validator: Optional["BaseRule"] = None

    def set(self, *args: Option) -> None:
        """Apply options to this rule."""
        for option in args:
            option(self)

    def validate(self) -> None:
        """Raise ValueError if the rule's settings are not valid for its kind."""
        if self.validator is not None:
            self.validator.validate(self)


def new(*args: Option) -> RuleInfo:
    """Create a rule with the given options applied."""
    info = RuleInfo()
    info.set(*args)
    return info


class BaseRule:
    """Common behaviour of every rule kind."""

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule()

    def _init_if_required(self, info: RuleInfo) -> None:
        if not info.initialized:
            info.initialized = True
            info.validator = self
            info.rule = self._create_rule()

    def stop_if_true(self, info: RuleInfo) -> None:
        info.rule.stop_if_true = True

    def escape(self, value: str) -> str:
        """Escape a text value for use inside a formula string literal."""
        return value.replace('"', '""')

    def validate(self, info: RuleInfo) -> None:
        """Raise ValueError if the rule is invalid; the base kind accepts anything."""


class AverageRule(BaseRule):
    """Rules comparing values with the average of the range."""

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.ABOVE_AVERAGE)

    def above(self, style: styles.Info) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.style = style
        return apply

    def equal_or_above(self, style: styles.Info) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.equal_average = True
            info.style = style
        return apply

    def below(self, style: styles.Info) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.above_average = False
            info.style = style
        return apply

    def equal_or_below(self, style: styles.Info) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.above_average = False
            info.rule.equal_average = True
            info.style = style
        return apply

    def std_dev_above(self, n: int, style: styles.Info) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.style = style
            info.rule.std_dev = n
        return apply

    def std_dev_below(self, n: int, style: styles.Info) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.above_average = False
            info.style = style
            info.rule.std_dev = n
        return apply


class StyledRule(BaseRule):
    """A fixed rule kind that only takes a style."""

    def __init__(self, condition_type: ConditionType, formula: Optional[str] = None) -> None:
        self._condition_type = condition_type
        self._formula = formula

    def _create_rule(self) -> ConditionalRule:
        formulas = [self._formula] if self._formula is not None else []
        return ConditionalRule(type=self._condition_type, formula=formulas)

    def styles(self, style: styles.Info) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.style = style
        return apply


class RankRule(BaseRule):
    """Top or bottom N (or N percent) values of the range."""

    def __init__(self, bottom: bool) -> None:
        self._bottom = bottom
        self._label = "bottom" if bottom else "top"

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.TOP10, rank=10, bottom=self._bottom)

    def default(self, info: RuleInfo) -> None:
        self._init_if_required(info)

    def value(self, rank: int, *args: Any) -> Option:
        """Set the rank; a "%" argument makes it a percentage, a style sets the style."""

        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.rank = rank
            for setting in args:
                if isinstance(setting, str):
                    if setting == "%":
                        info.rule.percent = True
                elif isinstance(setting, styles.Info):
                    info.style = setting
        return apply

    def validate(self, info: RuleInfo) -> None:
        rank = info.rule.rank
        if info.rule.percent:
            if rank < 1 or rank > 100:
                raise ValueError(f"{self._label}: value({rank}) should be between (1 - 100)")
        elif rank < 1 or rank > 1000:
            raise ValueError(f"{self._label}: value({rank}) should be between 1 and 1000")


class FormulaRule(BaseRule):
    """Rule driven by a custom formula expression."""

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.EXPRESSION)

    def expression(self, formula: str, *args: Any) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.formula = [self.escape(formula)]
            for setting in args:
                if isinstance(setting, styles.Info):
                    info.style = setting
        return apply

    def validate(self, info: RuleInfo) -> None:
        if not info.rule.formula or not info.rule.formula[0]:
            raise ValueError("formula: no expression to use as rule")


average = AverageRule()
blanks = StyledRule(ConditionType.CONTAINS_BLANKS, "LEN(TRIM(:cell:))=0")
no_blanks = StyledRule(ConditionType.NOT_CONTAINS_BLANKS, "LEN(TRIM(:cell:))>0")
errors = StyledRule(ConditionType.CONTAINS_ERRORS, "ISERROR(:cell:)")
no_errors = StyledRule(ConditionType.NOT_CONTAINS_ERRORS, "NOT(ISERROR(:cell:))")
duplicate = StyledRule(ConditionType.DUPLICATE_VALUES)
unique = StyledRule(ConditionType.UNIQUE_VALUES)
top = RankRule(bottom=False)
bottom = RankRule(bottom=True)
formula = FormulaRule()