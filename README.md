# xlsxfmt

Plain Python building blocks for describing how an XLSX spreadsheet is formatted:
cell styles, conditional formatting rules and column settings.

The package has no third-party dependencies.

## Installation

```
pip install xlsxfmt
```

To run the test suite:

```
pip install "xlsxfmt[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `xlsxfmt.style_types` | Enumerations for styles: `HAlign`, `VAlign`, `BorderStyle`, `PatternType`, `GradientType`, `FontCharset`, `FontFamily`, `FontScheme`, `UnderlineType`, `NamedStyleType`, plus `named_style_name()` and `builtin_named_style_id()` |
| `xlsxfmt.styles` | The style model (`Info`, `Font`, `Fill`, `Border`, `CellAlignment`, `CellProtection`, `NumberFormat`, `Color`, ...) and the option helpers used to build a style |
| `xlsxfmt.rule` | The conditional rule model (`RuleInfo`, `ConditionalRule`, `ValueType`, `IconSetType`, ...) and the simpler rule kinds |
| `xlsxfmt.rule_scales` | Colour scales, data bars and icon sets |
| `xlsxfmt.rule_criteria` | Text, time-period and cell-value rules |
| `xlsxfmt.conditional` | Conditional formatting that groups rules with the cell ranges they apply to |
| `xlsxfmt.columns` | Column settings held as single or grouped column ranges |

## Cell styles

`styles.new(*options)` creates an `Info` and applies each option to it.
`Info.set(*options)` applies more options later. Options come from the
module-level helpers `styles.font`, `styles.fill`, `styles.border`,
`styles.alignment` and `styles.protection`, and from the functions
`styles.number_format`, `styles.number_format_id` and `styles.named_style`.
Some options take an argument (`styles.font.size(12)`), others are used as
they are (`styles.font.bold`).

```python
from xlsxfmt import styles
from xlsxfmt.style_types import BorderStyle, HAlign, PatternType, UnderlineType

style = styles.new(
    styles.font.name("Calibri"),
    styles.font.size(12),
    styles.font.bold,
    styles.font.underline(UnderlineType.SINGLE),
    styles.alignment.h_align(HAlign.CENTER),
    styles.alignment.wrap_text,
    styles.border.type(BorderStyle.THIN),
    styles.border.color("#FF00FF"),
    styles.fill.pattern.type(PatternType.SOLID),
    styles.fill.pattern.color("#FFFF00"),
    styles.number_format_id(8),
)

unpacked = style.unpack()
unpacked.font.bold          # True
unpacked.protection         # None: nothing was set
```

Points worth knowing:

- Colours are given as `#RRGGBB`, `RRGGBB` or `AARRGGBB` and stored as an
  upper-case ARGB string: `styles.new_color("#FF00FF")` is
  `Color(rgb="FFFF00FF")`. Anything else raises `ValueError`.
- `styles.border.type(...)` and `styles.border.color(...)` set the top, bottom,
  left and right segments. The diagonal, vertical and horizontal segments have
  their own helpers, e.g. `styles.border.diagonal.type(...)`.
- A fill is either a pattern or a gradient. Every `styles.fill.pattern.*`
  option resets the gradient, and every `styles.fill.gradient.*` option resets
  the pattern. `styles.fill.color`, `styles.fill.background` and
  `styles.fill.type` are shortcuts for the pattern options.
- `styles.font.default` sets Calibri, size 11, Swiss family and the minor scheme.
  `styles.font.charset(...)` ignores values outside 0–255.
- `styles.number_format_id(8)` fills in the built-in code
  `($#,##0.00_);[RED]($#,##0.00_)`. `styles.number_format(code)` resolves a
  built-in code to its id. Any other code keeps the id `-1`.
- `styles.named_style("My style")` sets a custom name, and an empty name raises
  `ValueError`. `styles.named_style(NamedStyleType.HYPERLINK)` sets the built-in
  name `"Hyperlink"` and builtin id 8. The row and column outline-level pseudo
  styles (`ROW_LEVEL1`…`ROW_LEVEL7`, `COL_LEVEL1`…`COL_LEVEL7`) keep their own
  names but are stored with builtin id 1 or 2. Any other argument type raises
  `TypeError`.

`Info.unpack()` returns an `UnpackedStyle` holding copies of the parts of the
style that are not empty. Every unset part is `None`, and so is every unset
border segment. `Info.to_rich_font()` returns a copy of the font, or `None` if
no font setting was made.

## Conditional formatting rules

A rule is a `RuleInfo` built by `rule.new(*options)`. Each rule kind is a
module-level helper object. The first option applied to a rule fixes its kind:

- `rule`: `average`, `blanks`, `no_blanks`, `errors`, `no_errors`,
  `duplicate`, `unique`, `top`, `bottom`, `formula`
- `rule_scales`: `color_scale2`, `color_scale3`, `data_bar`, `icon_set`
- `rule_criteria`: `text`, `time_period`, `value`

```python
from xlsxfmt import rule, rule_criteria, rule_scales, styles
from xlsxfmt.rule import IconSetType, ValueType

red = styles.new(styles.font.color("#FF0000"))

top5 = rule.new(rule.top.value(5, "%", red))
scale = rule.new(
    rule_scales.color_scale2.min("1", "#110000"),
    rule_scales.color_scale2.max("10", "#001100"),
)
icons = rule.new(
    rule_scales.icon_set.type(IconSetType.FOUR_ARROWS),
    rule_scales.icon_set.icons_only,
)
bar = rule.new(rule_scales.data_bar.min("1", ValueType.NUMBER), rule_scales.data_bar.bar_only)
contains = rule.new(rule_criteria.text.contains("abc", red))
between = rule.new(rule_criteria.value.between(1, 10, red))
```

`RuleInfo.validate()` raises `ValueError` when a rule's settings do not fit
its kind. For example, a top/bottom rank must be 1–1000, or 1–100 when given as
a percentage. A text rule needs text, and a value or formula rule needs at least
one criterion. Scale, bar and icon-set thresholds only accept certain
`ValueType`s.

Other behaviour:

- Value criteria are turned into strings. A leading `=` is dropped and empty
  criteria are skipped. Booleans become `1`/`0`, and datetimes use
  `YYYY-MM-DDTHH:MM:SS`.
- Icon-set thresholds are spread evenly in percent when the icon set is created
  or its type changes. `icon_set.value(index, ...)` counts from the highest icon.
  An index outside the adjustable thresholds is ignored.
- Several generated formulas contain the placeholder `:cell:`, which stands for
  the top-left cell of the formatted range. This package does not replace it.

## Grouping rules with ranges

```python
from xlsxfmt import conditional, rule, styles

red = styles.new(styles.font.color("#FF0000"))

cf = conditional.new(
    conditional.refs("A1:A10"),
    conditional.add_rule(rule.top.value(5, "%", red)),
)
cf.validate()
formatting, rule_styles = cf.unpack()
```

`conditional.add_rule(...)` gives rules priorities 1, 2, 3… in the order they
are added. `conditional.pivot` marks the formatting as belonging to a pivot table.
`ConditionalInfo.validate()` raises `ValueError` when there are no ranges, no
rules, a rule without a kind, or an invalid rule. `unpack()` returns the
`ConditionalFormatting` with its rules filled in, together with each rule's
style. With no rules it returns `(None, None)`.

## Columns

`columns.Columns` keeps a list of `columns.Col` entries in `items`. Methods
take 0-based column indexes, while entries store 1-based `min`/`max` bounds.

```python
from xlsxfmt.columns import Columns

cols = Columns()
col = cols.resolve(0)   # Col(min=1, max=1, ...) appended to cols.items
col.width = 32
cols.delete(0)          # entry removed
```

If a grouped entry covers the column, `resolve()` copies it into a new
single-column entry and leaves the group as it is. `delete()` removes the
column's single entry and shrinks every group that contains it by one.

## What this package does not do

The package only describes formatting as Python objects. It does not:

- read or write `.xlsx` files, or produce their XML;
- keep a workbook, worksheets or cells, or a stylesheet that assigns style ids
  (for example, `ConditionalRule.style` is never set here);
- substitute `:cell:` placeholders in rule formulas;
- merge neighbouring column entries with equal settings.