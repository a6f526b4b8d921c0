"""Conditional formatting rules matching text, dates in a time period, or cell values."""

from __future__ import annotations

import math
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from . import styles
from .rule import (
    BaseRule,
    ConditionalRule,
    ConditionOperator,
    ConditionType,
    Option,
    RuleInfo,
    TimePeriodType,
)

_ISO8601 = "%Y-%m-%dT%H:%M:%S"


class TextRule(BaseRule):
    """Rules matching cells whose text contains, begins or ends with a value."""

    def _set_value(
        self,
        info: RuleInfo,
        text: str,
        template: str,
        condition_type: ConditionType,
        operator: ConditionOperator,
        settings: tuple[Any, ...],
    ) -> None:
        self._init_if_required(info)
        info.rule.type = condition_type
        info.rule.operator = operator
        info.rule.text = text

        length = len(text.encode("utf-8"))
        formula = template.replace(":length:", str(length))
        formula = formula.replace("%s", self.escape(text), 1)
        info.rule.formula = [formula]

        for setting in settings:
            if isinstance(setting, styles.Info):
                info.style = setting

    def _option(
        self,
        text: str,
        template: str,
        condition_type: ConditionType,
        operator: ConditionOperator,
        settings: tuple[Any, ...],
    ) -> Option:
        def apply(info: RuleInfo) -> None:
            self._set_value(info, text, template, condition_type, operator, settings)
        return apply

    def contains(self, text: str, *args: Any) -> Option:
        return self._option(
            text,
            'NOT(ISERROR(SEARCH("%s",:cell:)))',
            ConditionType.CONTAINS_TEXT,
            ConditionOperator.CONTAINS_TEXT,
            args,
        )

    def not_contains(self, text: str, *args: Any) -> Option:
        return self._option(
            text,
            'ISERROR(SEARCH("%s",:cell:))',
            ConditionType.NOT_CONTAINS_TEXT,
            ConditionOperator.NOT_CONTAINS,
            args,
        )

    def begins_with(self, text: str, *args: Any) -> Option:
        return self._option(
            text,
            'LEFT(:cell:,:length:)="%s"',
            ConditionType.BEGINS_WITH,
            ConditionOperator.BEGINS_WITH,
            args,
        )

    def ends_with(self, text: str, *args: Any) -> Option:
        return self._option(
            text,
            'RIGHT(:cell:,:length:)="%s"',
            ConditionType.ENDS_WITH,
            ConditionOperator.ENDS_WITH,
            args,
        )

    def validate(self, info: RuleInfo) -> None:
        if not info.rule.text:
            raise ValueError("text: no text to look for")


class TimePeriodRule(BaseRule):
    """Rules matching dates that fall into a period relative to today."""

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.TIME_PERIOD)

    def _option(
        self, style: Optional[styles.Info], formula: str, period: TimePeriodType
    ) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.time_period = period
            info.rule.formula = [formula]
            info.style = style
        return apply

    def today(self, style: styles.Info) -> Option:
        return self._option(style, "FLOOR(:cell:,1)=TODAY()", TimePeriodType.TODAY)

    def yesterday(self, style: styles.Info) -> Option:
        return self._option(style, "FLOOR(:cell:,1)=TODAY()-1", TimePeriodType.YESTERDAY)

    def tomorrow(self, style: styles.Info) -> Option:
        return self._option(style, "FLOOR(:cell:,1)=TODAY()+1", TimePeriodType.TOMORROW)

    def last_7_days(self, style: styles.Info) -> Option:
        return self._option(
            style,
            "AND(TODAY()-FLOOR(:cell:,1)<=6,FLOOR(:cell:,1)<=TODAY())",
            TimePeriodType.LAST_7_DAYS,
        )

    def this_week(self, style: styles.Info) -> Option:
        return self._option(
            style,
            "AND(TODAY()-ROUNDDOWN(:cell:,0)<=WEEKDAY(TODAY())-1,"
            "ROUNDDOWN(:cell:,0)-TODAY()<=7-WEEKDAY(TODAY()))'",
            TimePeriodType.THIS_WEEK,
        )

    def last_week(self, style: styles.Info) -> Option:
        return self._option(
            style,
            "AND(TODAY()-ROUNDDOWN(:cell:,0)>=(WEEKDAY(TODAY())),"
            "TODAY()-ROUNDDOWN(:cell:,0)<(WEEKDAY(TODAY())+7))'",
            TimePeriodType.LAST_WEEK,
        )

    def next_week(self, style: styles.Info) -> Option:
        return self._option(
            style,
            "AND(ROUNDDOWN(:cell:,0)-TODAY()>(7-WEEKDAY(TODAY())),"
            "ROUNDDOWN(:cell:,0)-TODAY()<(15-WEEKDAY(TODAY())))'",
            TimePeriodType.NEXT_WEEK,
        )

    def this_month(self, style: styles.Info) -> Option:
        return self._option(
            style,
            "AND(MONTH(:cell:)=MONTH(TODAY()),YEAR(:cell:)=YEAR(TODAY()))'",
            TimePeriodType.THIS_MONTH,
        )

    def last_month(self, style: styles.Info) -> Option:
        return self._option(
            style,
            "AND(MONTH(:cell:)=MONTH(TODAY())-1,OR(YEAR(:cell:)=YEAR(TODAY()),"
            "AND(MONTH(:cell:)=1,YEAR(A1)=YEAR(TODAY())-1)))'",
            TimePeriodType.LAST_MONTH,
        )

    def next_month(self, style: styles.Info) -> Option:
        return self._option(
            style,
            "AND(MONTH(:cell:)=MONTH(TODAY())+1,OR(YEAR(:cell:)=YEAR(TODAY()),"
            "AND(MONTH(:cell:)=12,YEAR(:cell:)=YEAR(TODAY())+1)))'",
            TimePeriodType.NEXT_MONTH,
        )


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _to_criteria(item: Any) -> str:
    if isinstance(item, bool):
        return "1" if item else "0"
    if isinstance(item, int):
        return str(item)
    if isinstance(item, float):
        return _format_float(item)
    if isinstance(item, (bytes, bytearray)):
        return bytes(item).decode("utf-8")
    if isinstance(item, datetime):
        return item.strftime(_ISO8601)
    return str(item)


class ValueRule(BaseRule):
    """Rules comparing cell values with one or two criteria."""

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.CELL_IS)

    def _option(
        self, items: tuple[Any, ...], operator: ConditionOperator, style: Optional[styles.Info]
    ) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.operator = operator
            for item in items:
                criteria = _to_criteria(item)
                if criteria.startswith("="):
                    criteria = criteria[1:]
                if criteria:
                    info.rule.formula.append(criteria)
            info.style = style
        return apply

    def between(self, low: Any, high: Any, style: styles.Info) -> Option:
        return self._option((low, high), ConditionOperator.BETWEEN, style)

    def not_between(self, low: Any, high: Any, style: styles.Info) -> Option:
        return self._option((low, high), ConditionOperator.NOT_BETWEEN, style)

    def equal(self, value: Any, style: styles.Info) -> Option:
        return self._option((value,), ConditionOperator.EQUAL, style)

    def not_equal(self, value: Any, style: styles.Info) -> Option:
        return self._option((value,), ConditionOperator.NOT_EQUAL, style)

    def greater(self, value: Any, style: styles.Info) -> Option:
        return self._option((value,), ConditionOperator.GREATER_THAN, style)

    def less(self, value: Any, style: styles.Info) -> Option:
        return self._option((value,), ConditionOperator.LESS_THAN, style)

    def greater_or_equal(self, value: Any, style: styles.Info) -> Option:
        return self._option((value,), ConditionOperator.GREATER_THAN_OR_EQUAL, style)

    def less_or_equal(self, value: Any, style: styles.Info) -> Option:
        return self._option((value,), ConditionOperator.LESS_THAN_OR_EQUAL, style)

    def validate(self, info: RuleInfo) -> None:
        if not info.rule.formula or not info.rule.formula[0]:
            raise ValueError("value: no criteria or value for rule")


text = TextRule()
time_period = TimePeriodRule()
value = ValueRule()