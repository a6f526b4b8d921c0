"""Cell style description: fonts, fills, borders, alignment, protection and number formats."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from .style_types import (
    BorderStyle,
    FontCharset,
    FontFamily,
    FontScheme,
    GradientType,
    HAlign,
    NamedStyleType,
    PatternType,
    UnderlineType,
    VAlign,
    builtin_named_style_id,
    named_style_name,
)

Option = Callable[["Info"], None]

_HEX_DIGITS = frozenset("0123456789ABCDEF")

_BUILTIN_NUMBER_FORMATS: dict[int, str] = {
    0: "General",
    1: "0",
    2: "0.00",
    3: "#,##0",
    4: "#,##0.00",
    5: "($#,##0_);($#,##0)",
    6: "($#,##0_);[RED]($#,##0)",
    7: "($#,##0.00_);($#,##0.00_)",
    8: "($#,##0.00_);[RED]($#,##0.00_)",
    9: "0%",
    10: "0.00%",
    11: "0.00E+00",
    12: "# ?/?",
    13: "# ??/??",
    14: "mm-dd-yy",
    15: "d-mmm-yy",
    16: "d-mmm",
    17: "mmm-yy",
    18: "h:mm AM/PM",
    19: "h:mm:ss AM/PM",
    20: "h:mm",
    21: "h:mm:ss",
    22: "m/d/yy h:mm",
    37: "(#,##0_);(#,##0)",
    38: "(#,##0_);[RED](#,##0)",
    39: "(#,##0.00_);(#,##0.00)",
    40: "(#,##0.00_);[RED](#,##0.00)",
    41: '_(* #,##0_);_(* (#,##0);_(* "-"_);_(@_)',
    42: '_($* #,##0_);_($* (#,##0);_($* "-"_);_(@_)',
    43: '_(* #,##0.00_);_(* (#,##0.00);_(* "-"??_);_(@_)',
    44: '_($* #,##0.00_);_($* (#,##0.00);_($* "-"??_);_(@_)',
    45: "mm:ss",
    46: "[h]:mm:ss",
    47: "mmss.0",
    48: "##0.0E+0",
    49: "@",
}


@dataclass(frozen=True)
class Color:
    """An ARGB colour."""

    rgb: str = ""


def new_color(rgb: str) -> Color:
    """Build a colour from '#RRGGBB', 'RRGGBB' or 'AARRGGBB' notation."""
    value = rgb.strip().removeprefix("#").upper()
    if len(value) == 6:
        value = "FF" + value
    if len(value) != 8 or not set(value) <= _HEX_DIGITS:
        raise ValueError(f"invalid color: {rgb!r}")
    return Color(rgb=value)


class FontEffect(str, Enum):
    """Vertical position of font glyphs."""

    BASELINE = "baseline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


@dataclass
class NumberFormat:
    id: int = 0
    code: str = ""


@dataclass
class Font:
    name: str = ""
    family: int = 0
    bold: bool = False
    italic: bool = False
    strike: bool = False
    shadow: bool = False
    condense: bool = False
    extend: bool = False
    color: Optional[Color] = None
    size: float = 0.0
    underline: Optional[UnderlineType] = None
    effect: Optional[FontEffect] = None
    scheme: Optional[FontScheme] = None
    charset: int = 0


@dataclass
class PatternFill:
    type: Optional[PatternType] = None
    color: Optional[Color] = None
    background: Optional[Color] = None


@dataclass
class GradientStop:
    position: float
    color: Color


@dataclass
class GradientFill:
    type: Optional[GradientType] = None
    degree: float = 0.0
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0
    stop: list[GradientStop] = field(default_factory=list)


@dataclass
class Fill:
    pattern: Optional[PatternFill] = None
    gradient: Optional[GradientFill] = None


@dataclass
class BorderSegment:
    type: Optional[BorderStyle] = None
    color: Optional[Color] = None


_SEGMENTS = ("left", "right", "top", "bottom", "diagonal", "vertical", "horizontal")


@dataclass
class Border:
    left: Optional[BorderSegment] = None
    right: Optional[BorderSegment] = None
    top: Optional[BorderSegment] = None
    bottom: Optional[BorderSegment] = None
    diagonal: Optional[BorderSegment] = None
    vertical: Optional[BorderSegment] = None
    horizontal: Optional[BorderSegment] = None
    diagonal_up: bool = False
    diagonal_down: bool = False
    outline: bool = False


@dataclass
class CellAlignment:
    horizontal: Optional[HAlign] = None
    vertical: Optional[VAlign] = None
    text_rotation: int = 0
    wrap_text: bool = False
    indent: int = 0
    relative_indent: int = 0
    justify_last_line: bool = False
    shrink_to_fit: bool = False
    reading_order: int = 0


@dataclass
class CellProtection:
    locked: bool = False
    hidden: bool = False


@dataclass
class NamedStyleInfo:
    name: str = ""
    builtin_id: Optional[int] = None


@dataclass
class UnpackedStyle:
    """Non-empty parts of a style, each an independent copy or None."""

    font: Optional[Font] = None
    fill: Optional[Fill] = None
    alignment: Optional[CellAlignment] = None
    number_format: Optional[NumberFormat] = None
    protection: Optional[CellProtection] = None
    border: Optional[Border] = None
    named_info: Optional[NamedStyleInfo] = None


def _full_border() -> Border:
    return Border(**{name: BorderSegment() for name in _SEGMENTS})


def _full_fill() -> Fill:
    return Fill(pattern=PatternFill(), gradient=GradientFill())


@dataclass
class Info:
    """Combined styling information for a cell."""

    number_format: NumberFormat = field(default_factory=NumberFormat)
    font: Font = field(default_factory=Font)
    fill: Fill = field(default_factory=_full_fill)
    border: Border = field(default_factory=_full_border)
    alignment: CellAlignment = field(default_factory=CellAlignment)
    protection: CellProtection = field(default_factory=CellProtection)
    named_info: NamedStyleInfo = field(default_factory=NamedStyleInfo)

    def set(self, *args: Option) -> None:
        """Apply options to this style."""
        for option in args:
            option(self)

    def unpack(self) -> UnpackedStyle:
        """Return copies of the non-empty parts of this style."""
        result = UnpackedStyle()

        if self.named_info != NamedStyleInfo():
            result.named_info = copy.deepcopy(self.named_info)
        if self.alignment != CellAlignment():
            result.alignment = copy.deepcopy(self.alignment)
        if self.font != Font():
            result.font = copy.deepcopy(self.font)
        if self.number_format != NumberFormat():
            result.number_format = copy.deepcopy(self.number_format)
        if self.protection != CellProtection():
            result.protection = copy.deepcopy(self.protection)

        border = copy.deepcopy(self.border)
        for name in _SEGMENTS:
            if getattr(border, name) == BorderSegment():
                setattr(border, name, None)
        if border != Border():
            result.border = border

        fill = Fill()
        if self.fill.pattern is not None and self.fill.pattern != PatternFill():
            fill.pattern = copy.deepcopy(self.fill.pattern)
        if self.fill.gradient is not None and self.fill.gradient != GradientFill():
            fill.gradient = copy.deepcopy(self.fill.gradient)
        if fill != Fill():
            result.fill = fill

        return result

    def to_rich_font(self) -> Optional[Font]:
        """Return a copy of the font for rich text runs, or None if the font is empty."""
        if self.font != Font():
            return copy.deepcopy(self.font)
        return None


def new(*args: Option) -> Info:
    """Create a style with the given options applied."""
    info = Info()
    info.set(*args)
    return info


def named_style(name) -> Option:
    """Option naming the style: a custom name or a built-in NamedStyleType."""

    def apply(info: Info) -> None:
        if isinstance(name, NamedStyleType):
            info.named_info.name = named_style_name(name)
            info.named_info.builtin_id = builtin_named_style_id(name)
        elif isinstance(name, str):
            if not name:
                raise ValueError("you must provide a name for custom named style")
            info.named_info.builtin_id = None
            info.named_info.name = name
        else:
            raise TypeError(
                "unsupported format of named style: a custom name or a built-in type only"
            )

    return apply


def _resolve_number_format(format_id: int, code: str) -> NumberFormat:
    if not code and format_id in _BUILTIN_NUMBER_FORMATS:
        return NumberFormat(format_id, _BUILTIN_NUMBER_FORMATS[format_id])
    if code:
        for builtin_id, builtin_code in _BUILTIN_NUMBER_FORMATS.items():
            if builtin_code == code:
                return NumberFormat(builtin_id, builtin_code)
    return NumberFormat(format_id, code)


def number_format(code: str) -> Option:
    """Option setting a number format by code; built-in codes resolve to their ids."""

    def apply(info: Info) -> None:
        info.number_format = _resolve_number_format(-1, code)

    return apply


def number_format_id(format_id: int) -> Option:
    """Option setting a number format by the id of a built-in or existing format."""

    def apply(info: Info) -> None:
        info.number_format = _resolve_number_format(format_id, "")

    return apply


class AlignmentOptions:
    """Options for cell alignment."""

    def v_align(self, value: VAlign) -> Option:
        def apply(info: Info) -> None:
            info.alignment.vertical = value
        return apply

    def h_align(self, value: HAlign) -> Option:
        def apply(info: Info) -> None:
            info.alignment.horizontal = value
        return apply

    def text_rotation(self, angle: int) -> Option:
        def apply(info: Info) -> None:
            info.alignment.text_rotation = angle
        return apply

    def wrap_text(self, info: Info) -> None:
        info.alignment.wrap_text = True

    def indent(self, value: int) -> Option:
        def apply(info: Info) -> None:
            info.alignment.indent = value
        return apply

    def relative_indent(self, value: int) -> Option:
        def apply(info: Info) -> None:
            info.alignment.relative_indent = value
        return apply

    def justify_last_line(self, info: Info) -> None:
        info.alignment.justify_last_line = True

    def shrink_to_fit(self, info: Info) -> None:
        info.alignment.shrink_to_fit = True

    def reading_order(self, value: int) -> Option:
        def apply(info: Info) -> None:
            info.alignment.reading_order = value
        return apply


def _segment(info: Info, name: str) -> BorderSegment:
    segment = getattr(info.border, name)
    if segment is None:
        segment = BorderSegment()
        setattr(info.border, name, segment)
    return segment


class BorderSegmentOptions:
    """Options for one side of a border."""

    def __init__(self, segment: str) -> None:
        self._segment = segment

    def type(self, value: BorderStyle) -> Option:
        def apply(info: Info) -> None:
            _segment(info, self._segment).type = value
        return apply

    def color(self, rgb: str) -> Option:
        def apply(info: Info) -> None:
            _segment(info, self._segment).color = new_color(rgb)
        return apply


_OUTER_SEGMENTS = ("top", "bottom", "left", "right")


class BorderOptions:
    """Options for cell borders."""

    def __init__(self) -> None:
        self.top = BorderSegmentOptions("top")
        self.bottom = BorderSegmentOptions("bottom")
        self.left = BorderSegmentOptions("left")
        self.right = BorderSegmentOptions("right")
        self.diagonal = BorderSegmentOptions("diagonal")
        self.vertical = BorderSegmentOptions("vertical")
        self.horizontal = BorderSegmentOptions("horizontal")

    def diagonal_up(self, info: Info) -> None:
        info.border.diagonal_up = True

    def diagonal_down(self, info: Info) -> None:
        info.border.diagonal_down = True

    def outline(self, info: Info) -> None:
        info.border.outline = True

    def type(self, value: BorderStyle) -> Option:
        def apply(info: Info) -> None:
            for name in _OUTER_SEGMENTS:
                _segment(info, name).type = value
        return apply

    def color(self, rgb: str) -> Option:
        def apply(info: Info) -> None:
            parsed = new_color(rgb)
            for name in _OUTER_SEGMENTS:
                _segment(info, name).color = parsed
        return apply


def _pattern(info: Info) -> PatternFill:
    if info.fill.pattern is None:
        info.fill.pattern = PatternFill()
    info.fill.gradient = GradientFill()
    return info.fill.pattern


def _gradient(info: Info) -> GradientFill:
    if info.fill.gradient is None:
        info.fill.gradient = GradientFill()
    info.fill.pattern = PatternFill()
    return info.fill.gradient


class PatternOptions:
    """Options for a pattern fill; each one discards any gradient fill."""

    def color(self, rgb: str) -> Option:
        def apply(info: Info) -> None:
            _pattern(info).color = new_color(rgb)
        return apply

    def background(self, rgb: str) -> Option:
        def apply(info: Info) -> None:
            _pattern(info).background = new_color(rgb)
        return apply

    def type(self, value: PatternType) -> Option:
        def apply(info: Info) -> None:
            _pattern(info).type = value
        return apply


class GradientOptions:
    """Options for a gradient fill; each one discards any pattern fill."""

    def type(self, value: GradientType) -> Option:
        def apply(info: Info) -> None:
            _gradient(info).type = value
        return apply

    def degree(self, value: float) -> Option:
        def apply(info: Info) -> None:
            _gradient(info).degree = value
        return apply

    def left(self, value: float) -> Option:
        def apply(info: Info) -> None:
            _gradient(info).left = value
        return apply

    def right(self, value: float) -> Option:
        def apply(info: Info) -> None:
            _gradient(info).right = value
        return apply

    def top(self, value: float) -> Option:
        def apply(info: Info) -> None:
            _gradient(info).top = value
        return apply

    def bottom(self, value: float) -> Option:
        def apply(info: Info) -> None:
            _gradient(info).bottom = value
        return apply

    def stop(self, position: float, rgb: str) -> Option:
        def apply(info: Info) -> None:
            _gradient(info).stop.append(GradientStop(position, new_color(rgb)))
        return apply


class FillOptions:
    """Options for cell fill; shortcuts set the pattern fill."""

    def __init__(self) -> None:
        self.pattern = PatternOptions()
        self.gradient = GradientOptions()

    def color(self, rgb: str) -> Option:
        return self.pattern.color(rgb)

    def background(self, rgb: str) -> Option:
        return self.pattern.background(rgb)

    def type(self, value: PatternType) -> Option:
        return self.pattern.type(value)


class FontOptions:
    """Options for the cell font."""

    def name(self, value: str) -> Option:
        def apply(info: Info) -> None:
            info.font.name = value
        return apply

    def default(self, info: Info) -> None:
        info.font.family = FontFamily.SWISS
        info.font.scheme = FontScheme.MINOR
        info.font.name = "Calibri"
        info.font.size = 11.0

    def bold(self, info: Info) -> None:
        info.font.bold = True

    def italic(self, info: Info) -> None:
        info.font.italic = True

    def strikeout(self, info: Info) -> None:
        info.font.strike = True

    def superscript(self, info: Info) -> None:
        info.font.effect = FontEffect.SUPERSCRIPT

    def subscript(self, info: Info) -> None:
        info.font.effect = FontEffect.SUBSCRIPT

    def shadow(self, info: Info) -> None:
        info.font.shadow = True

    def condense(self, info: Info) -> None:
        info.font.condense = True

    def extend(self, info: Info) -> None:
        info.font.extend = True

    def family(self, value: int) -> Option:
        def apply(info: Info) -> None:
            info.font.family = value
        return apply

    def color(self, rgb: str) -> Option:
        def apply(info: Info) -> None:
            info.font.color = new_color(rgb)
        return apply

    def size(self, value: float) -> Option:
        def apply(info: Info) -> None:
            info.font.size = float(value)
        return apply

    def underline(self, value: UnderlineType) -> Option:
        def apply(info: Info) -> None:
            info.font.underline = value
        return apply

    def scheme(self, value: FontScheme) -> Option:
        def apply(info: Info) -> None:
            info.font.scheme = value
        return apply

    def charset(self, value: int) -> Option:
        def apply(info: Info) -> None:
            if FontCharset.ANSI <= value <= FontCharset.OEM:
                info.font.charset = value
        return apply


class ProtectionOptions:
    """Options for cell protection."""

    def hidden(self, info: Info) -> None:
        info.protection.hidden = True

    def locked(self, info: Info) -> None:
        info.protection.locked = True


alignment = AlignmentOptions()
border = BorderOptions()
fill = FillOptions()
font = FontOptions()
protection = ProtectionOptions()