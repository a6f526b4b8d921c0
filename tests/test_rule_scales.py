import pytest

from xlsxfmt import rule_scales
from xlsxfmt.rule import (
    ColorScale,
    ConditionalRule,
    ConditionType,
    ConditionValue,
    DataBar,
    IconSet,
    IconSetType,
    RuleInfo,
    ValueType,
    new,
)
from xlsxfmt.styles import Color


def test_color_scale2():
    r = new(
        rule_scales.color_scale2.min("1", "#110000"),
        rule_scales.color_scale2.max("10", "#001100"),
    )
    assert r == RuleInfo(
        initialized=True,
        validator=rule_scales.color_scale2,
        rule=ConditionalRule(
            type=ConditionType.COLOR_SCALE,
            color_scale=ColorScale(
                values=[
                    ConditionValue(type=ValueType.LOWEST, value="1"),
                    ConditionValue(type=ValueType.HIGHEST, value="10"),
                ],
                colors=[Color("FF110000"), Color("FF001100")],
            ),
        ),
    )
    r.validate()


def test_color_scale2_default_colors():
    r = new(rule_scales.color_scale2.default)
    assert r.rule.color_scale.colors == [Color("FFFF7128"), Color("FFFFEF9C")]


def test_color_scale2_invalid_max_type():
    r = new(rule_scales.color_scale2.max("10", ValueType.LOWEST))
    with pytest.raises(ValueError, match="colorScale2: Not allowed type 'min' for max value"):
        r.validate()


def test_color_scale3():
    r = new(
        rule_scales.color_scale3.min("1", "#110000"),
        rule_scales.color_scale3.mid("50", "#111100"),
        rule_scales.color_scale3.max("10", "#001100"),
    )
    assert r == RuleInfo(
        initialized=True,
        validator=rule_scales.color_scale3,
        rule=ConditionalRule(
            type=ConditionType.COLOR_SCALE,
            color_scale=ColorScale(
                values=[
                    ConditionValue(type=ValueType.LOWEST, value="1"),
                    ConditionValue(type=ValueType.PERCENTILE, value="50"),
                    ConditionValue(type=ValueType.HIGHEST, value="10"),
                ],
                colors=[Color("FF110000"), Color("FF111100"), Color("FF001100")],
            ),
        ),
    )


def test_color_scale3_invalid_min_type():
    r = new(rule_scales.color_scale3.min("1", ValueType.HIGHEST))
    with pytest.raises(ValueError, match="colorScale3: Not allowed type 'max' for min value"):
        r.validate()


def test_data_bar_default():
    r = new(rule_scales.data_bar.default)
    assert r == RuleInfo(
        initialized=True,
        validator=rule_scales.data_bar,
        rule=ConditionalRule(
            type=ConditionType.DATA_BAR,
            data_bar=DataBar(
                values=[
                    ConditionValue(type=ValueType.LOWEST),
                    ConditionValue(type=ValueType.HIGHEST),
                ],
                min_length=10,
                max_length=90,
                color=Color("FF638EC6"),
            ),
        ),
    )


def test_data_bar_options():
    r = new(
        rule_scales.data_bar.min("1", ValueType.LOWEST),
        rule_scales.data_bar.max("50", ValueType.HIGHEST),
        rule_scales.data_bar.color("#110000"),
        rule_scales.data_bar.bar_only,
    )
    assert r == RuleInfo(
        initialized=True,
        validator=rule_scales.data_bar,
        rule=ConditionalRule(
            type=ConditionType.DATA_BAR,
            data_bar=DataBar(
                values=[
                    ConditionValue(type=ValueType.LOWEST, value="1"),
                    ConditionValue(type=ValueType.HIGHEST, value="50"),
                ],
                show_value=False,
                min_length=10,
                max_length=90,
                color=Color("FF110000"),
            ),
        ),
    )


def test_data_bar_invalid_min_type():
    r = new(rule_scales.data_bar.min("1", ValueType.HIGHEST))
    with pytest.raises(ValueError, match="dataBar: Not allowed type 'max' for min value"):
        r.validate()


def test_icon_set():
    r = new(
        rule_scales.icon_set.type(IconSetType.FOUR_ARROWS),
        rule_scales.icon_set.reverse_icons,
        rule_scales.icon_set.icons_only,
    )
    assert r == RuleInfo(
        initialized=True,
        validator=rule_scales.icon_set,
        rule=ConditionalRule(
            type=ConditionType.ICON_SET,
            icon_set=IconSet(
                reverse=True,
                type=IconSetType.FOUR_ARROWS,
                values=[
                    ConditionValue(type=ValueType.PERCENT, value="0"),
                    ConditionValue(type=ValueType.PERCENT, value="25"),
                    ConditionValue(type=ValueType.PERCENT, value="50"),
                    ConditionValue(type=ValueType.PERCENT, value="75"),
                ],
                show_value=False,
            ),
        ),
    )


def test_icon_set_default_values():
    r = new(rule_scales.icon_set.default)
    assert r.rule.icon_set.type is IconSetType.THREE_TRAFFIC_LIGHTS1
    assert [v.value for v in r.rule.icon_set.values] == ["0", "33", "66"]


def test_icon_set_five_icons():
    r = new(rule_scales.icon_set.type(IconSetType.FIVE_QUARTERS))
    assert [v.value for v in r.rule.icon_set.values] == ["0", "20", "40", "60", "80"]


def test_icon_set_value_counts_from_highest():
    r = new(rule_scales.icon_set.value(0, "80", ">", ValueType.NUMBER))
    target = r.rule.icon_set.values[2]
    assert target.value == "80"
    assert target.type is ValueType.NUMBER
    assert target.greater_than_equal is False
    assert r.rule.icon_set.values[1].value == "33"


def test_icon_set_value_out_of_range_ignored():
    r = new(rule_scales.icon_set.value(2, "99"), rule_scales.icon_set.value(-1, "99"))
    assert [v.value for v in r.rule.icon_set.values] == ["0", "33", "66"]


def test_icon_set_invalid_value_type():
    r = new(rule_scales.icon_set.value(1, "5", ValueType.LOWEST))
    with pytest.raises(ValueError, match="iconSet: Not allowed type 'min' for value at index 1"):
        r.validate()