"""Conditional formatting rules that grade values: colour scales, data bars and icon sets."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from . import styles
from .rule import (
    BaseRule,
    ColorScale,
    ConditionalRule,
    ConditionType,
    ConditionValue,
    DataBar,
    IconSet,
    IconSetType,
    Option,
    RuleInfo,
    ValueType,
)

_MIN_TYPES = (
    ValueType.LOWEST,
    ValueType.NUMBER,
    ValueType.PERCENT,
    ValueType.FORMULA,
    ValueType.PERCENTILE,
)

_MAX_TYPES = (
    ValueType.NUMBER,
    ValueType.PERCENT,
    ValueType.FORMULA,
    ValueType.PERCENTILE,
    ValueType.HIGHEST,
)

_ICON_TYPES = (
    ValueType.NUMBER,
    ValueType.PERCENT,
    ValueType.FORMULA,
    ValueType.PERCENTILE,
)


def _type_name(value_type: Optional[ValueType]) -> str:
    return value_type.xml if value_type is not None else ""


def _is_allowed(value_type: Optional[ValueType], allowed: Sequence[ValueType]) -> bool:
    return value_type is not None and value_type.is_allowed(*allowed)


class _ColorScaleRule(BaseRule):
    """Shared behaviour of two- and three-colour scales."""

    _label = ""
    _defaults: tuple[tuple[ValueType, str, str], ...] = ()

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule(
            type=ConditionType.COLOR_SCALE,
            color_scale=ColorScale(
                values=[ConditionValue(type=t, value=v) for t, v, _ in self._defaults],
                colors=[styles.new_color(c) for _, _, c in self._defaults],
            ),
        )

    def default(self, info: RuleInfo) -> None:
        self._init_if_required(info)

    def _set_value(self, info: RuleInfo, idx: int, value: str, settings: tuple[Any, ...]) -> None:
        self._init_if_required(info)
        scale = info.rule.color_scale
        scale.values[idx].value = value
        for setting in settings:
            if isinstance(setting, ValueType):
                scale.values[idx].type = setting
            elif isinstance(setting, str):
                scale.colors[idx] = styles.new_color(setting)

    def _option(self, idx: int, value: str, settings: tuple[Any, ...]) -> Option:
        def apply(info: RuleInfo) -> None:
            self._set_value(info, idx, value, settings)
        return apply

    def min(self, value: str, *args: Any) -> Option:
        """Set the lowest point; a string argument is its colour, a ValueType its kind."""
        return self._option(0, value, args)

    def max(self, value: str, *args: Any) -> Option:
        """Set the highest point; a string argument is its colour, a ValueType its kind."""
        return self._option(len(self._defaults) - 1, value, args)

    def validate(self, info: RuleInfo) -> None:
        values = info.rule.color_scale.values
        if not _is_allowed(values[0].type, _MIN_TYPES):
            raise ValueError(
                f"{self._label}: Not allowed type '{_type_name(values[0].type)}' for min value"
            )
        if not _is_allowed(values[-1].type, _MAX_TYPES):
            raise ValueError(
                f"{self._label}: Not allowed type '{_type_name(values[-1].type)}' for max value"
            )


class ColorScale2Rule(_ColorScaleRule):
    """Two-colour scale between the lowest and highest values."""

    _label = "colorScale2"
    _defaults = (
        (ValueType.LOWEST, "", "#FF7128"),
        (ValueType.HIGHEST, "", "#FFEF9C"),
    )

    def default(self, info: RuleInfo) -> None:
        super().default(info)

    def min(self, value: str, *args: Any) -> Option:
        return super().min(value, *args)

    def max(self, value: str, *args: Any) -> Option:
        return super().max(value, *args)

    def validate(self, info: RuleInfo) -> None:
        super().validate(info)


class ColorScale3Rule(_ColorScaleRule):
    """Three-colour scale with a midpoint, by default the 50th percentile."""

    _label = "colorScale3"
    _defaults = (
        (ValueType.LOWEST, "", "#F8696B"),
        (ValueType.PERCENTILE, "50", "#FFEB84"),
        (ValueType.HIGHEST, "", "#63BE7B"),
    )

    def default(self, info: RuleInfo) -> None:
        super().default(info)

    def min(self, value: str, *args: Any) -> Option:
        return super().min(value, *args)

    def mid(self, value: str, *args: Any) -> Option:
        """Set the midpoint; a string argument is its colour, a ValueType its kind."""
        return self._option(1, value, args)

    def max(self, value: str, *args: Any) -> Option:
        return super().max(value, *args)

    def validate(self, info: RuleInfo) -> None:
        super().validate(info)


class DataBarRule(BaseRule):
    """Bars whose length follows the cell value."""

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule(
            type=ConditionType.DATA_BAR,
            data_bar=DataBar(
                values=[
                    ConditionValue(type=ValueType.LOWEST),
                    ConditionValue(type=ValueType.HIGHEST),
                ],
                color=styles.new_color("#638EC6"),
                min_length=10,
                max_length=90,
            ),
        )

    def default(self, info: RuleInfo) -> None:
        self._init_if_required(info)

    def _option(self, idx: int, value: str, settings: tuple[Any, ...]) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            target = info.rule.data_bar.values[idx]
            target.value = value
            for setting in settings:
                if isinstance(setting, ValueType):
                    target.type = setting
        return apply

    def min(self, value: str, *args: Any) -> Option:
        """Set the shortest bar's value; a ValueType argument sets its kind."""
        return self._option(0, value, args)

    def max(self, value: str, *args: Any) -> Option:
        """Set the longest bar's value; a ValueType argument sets its kind."""
        return self._option(1, value, args)

    def color(self, rgb: str) -> Option:
        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.data_bar.color = styles.new_color(rgb)
        return apply

    def bar_only(self, info: RuleInfo) -> None:
        self._init_if_required(info)
        info.rule.data_bar.show_value = False

    def validate(self, info: RuleInfo) -> None:
        values = info.rule.data_bar.values
        if not _is_allowed(values[0].type, _MIN_TYPES):
            raise ValueError(
                f"dataBar: Not allowed type '{_type_name(values[0].type)}' for min value"
            )
        if not _is_allowed(values[1].type, _MAX_TYPES):
            raise ValueError(
                f"dataBar: Not allowed type '{_type_name(values[1].type)}' for max value"
            )


class IconSetRule(BaseRule):
    """Icons chosen by the cell value's position among thresholds."""

    def _create_rule(self) -> ConditionalRule:
        return ConditionalRule(
            type=ConditionType.ICON_SET,
            icon_set=IconSet(type=IconSetType.THREE_TRAFFIC_LIGHTS1),
        )

    def _init_if_required(self, info: RuleInfo) -> None:
        if not info.initialized:
            super()._init_if_required(info)
            self._init_values(info)

    @staticmethod
    def _init_values(info: RuleInfo) -> None:
        # Thresholds run from the lowest upwards, evenly spread in percent.
        total = info.rule.icon_set.type.icon_count()
        info.rule.icon_set.values = [
            ConditionValue(type=ValueType.PERCENT, value=str(i * 100 // total))
            for i in range(total)
        ]

    def default(self, info: RuleInfo) -> None:
        self._init_if_required(info)

    def type(self, icon_set_type: IconSetType) -> Option:
        """Choose the icon collection; thresholds are reset to their defaults."""

        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            info.rule.icon_set.type = IconSetType(icon_set_type)
            self._init_values(info)
        return apply

    def reverse_icons(self, info: RuleInfo) -> None:
        self._init_if_required(info)
        info.rule.icon_set.reverse = True

    def icons_only(self, info: RuleInfo) -> None:
        self._init_if_required(info)
        info.rule.icon_set.show_value = False

    def value(self, index: int, value: str, *args: Any) -> Option:
        """Set the threshold of the icon at index, counted from the highest icon.

        A ">" argument makes the threshold strict; a ValueType sets its kind.
        Indexes outside the adjustable thresholds are ignored.
        """

        def apply(info: RuleInfo) -> None:
            self._init_if_required(info)
            values = info.rule.icon_set.values
            total = len(values) - 1
            if index < 0 or index >= total:
                return
            target = values[total - index]
            for setting in args:
                if isinstance(setting, ValueType):
                    target.type = setting
                elif isinstance(setting, str) and setting == ">":
                    target.greater_than_equal = False
            target.value = value
        return apply

    def validate(self, info: RuleInfo) -> None:
        for i, value in enumerate(info.rule.icon_set.values):
            if not _is_allowed(value.type, _ICON_TYPES):
                raise ValueError(
                    f"iconSet: Not allowed type '{_type_name(value.type)}' for value at index {i}"
                )


color_scale2 = ColorScale2Rule()
color_scale3 = ColorScale3Rule()
data_bar = DataBarRule()
icon_set = IconSetRule()