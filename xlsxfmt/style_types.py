"""Enumerations used by cell styles: alignment, borders, fonts, fills and named styles."""

from __future__ import annotations

from enum import Enum, IntEnum


class _XmlIntEnum(IntEnum):
    """Integer enumeration whose members also carry their spreadsheet XML name.

    Members can be looked up by number or by XML name, e.g. ``HAlign("left")``.
    """

    def __new__(cls, value: int, xml: str):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.xml = xml
        return obj

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.xml == value:
                    return member
        return None


class HAlign(_XmlIntEnum):
    """Horizontal alignment of cell content."""

    GENERAL = 1, "general"
    LEFT = 2, "left"
    CENTER = 3, "center"
    RIGHT = 4, "right"
    FILL = 5, "fill"
    JUSTIFY = 6, "justify"
    CENTER_CONTINUOUS = 7, "centerContinuous"
    DISTRIBUTED = 8, "distributed"


class VAlign(_XmlIntEnum):
    """Vertical alignment of cell content."""

    TOP = 1, "top"
    CENTER = 2, "center"
    BOTTOM = 3, "bottom"
    JUSTIFY = 4, "justify"
    DISTRIBUTED = 5, "distributed"


class BorderStyle(_XmlIntEnum):
    """Line style of a border segment."""

    NONE = 1, "none"
    THIN = 2, "thin"
    MEDIUM = 3, "medium"
    DASHED = 4, "dashed"
    DOTTED = 5, "dotted"
    THICK = 6, "thick"
    DOUBLE = 7, "double"
    HAIR = 8, "hair"
    MEDIUM_DASHED = 9, "mediumDashed"
    DASH_DOT = 10, "dashDot"
    MEDIUM_DASH_DOT = 11, "mediumDashDot"
    DASH_DOT_DOT = 12, "dashDotDot"
    MEDIUM_DASH_DOT_DOT = 13, "mediumDashDotDot"
    SLANT_DASH_DOT = 14, "slantDashDot"


class GradientType(_XmlIntEnum):
    """Kind of gradient fill."""

    LINEAR = 0, "linear"
    PATH = 1, "path"


class PatternType(_XmlIntEnum):
    """Pattern of a pattern fill."""

    NONE = 1, "none"
    SOLID = 2, "solid"
    MEDIUM_GRAY = 3, "mediumGray"
    DARK_GRAY = 4, "darkGray"
    LIGHT_GRAY = 5, "lightGray"
    DARK_HORIZONTAL = 6, "darkHorizontal"
    DARK_VERTICAL = 7, "darkVertical"
    DARK_DOWN = 8, "darkDown"
    DARK_UP = 9, "darkUp"
    DARK_GRID = 10, "darkGrid"
    DARK_TRELLIS = 11, "darkTrellis"
    LIGHT_HORIZONTAL = 12, "lightHorizontal"
    LIGHT_VERTICAL = 13, "lightVertical"
    LIGHT_DOWN = 14, "lightDown"
    LIGHT_UP = 15, "lightUp"
    LIGHT_GRID = 16, "lightGrid"
    LIGHT_TRELLIS = 17, "lightTrellis"
    GRAY125 = 18, "gray125"
    GRAY0625 = 19, "gray0625"


class FontCharset(IntEnum):
    """Character set of a font."""

    ANSI = 0
    DEFAULT = 1
    SYMBOL = 2
    MAC = 77
    SHIFTJIS = 128
    HANGUL = 129
    JOHAB = 130
    GB2312 = 134
    CHINESEBIG5 = 136
    GREEK = 161
    TURKISH = 162
    VIETNAMESE = 163
    HEBREW = 177
    ARABIC = 178
    BALTIC = 186
    RUSSIAN = 204
    THAI = 222
    EASTEUROPE = 238
    OEM = 255


class FontFamily(IntEnum):
    """Font family class."""

    ROMAN = 1
    SWISS = 2
    MODERN = 3
    SCRIPT = 4
    DECORATIVE = 5


class FontScheme(str, Enum):
    """Theme font scheme a font belongs to."""

    NONE = "none"
    MINOR = "minor"
    MAJOR = "major"


class UnderlineType(str, Enum):
    """Underline style of a font."""

    SINGLE = "single"
    DOUBLE = "double"
    SINGLE_ACCOUNTING = "singleAccounting"
    DOUBLE_ACCOUNTING = "doubleAccounting"
    NONE = "none"


_ROW_LEVEL_ID = 1
_COL_LEVEL_ID = 2


class NamedStyleType(IntEnum):
    """Built-in named cell styles, including row/column outline level pseudo styles."""

    NORMAL = 0
    COMMA = 3
    CURRENCY = 4
    PERCENT = 5
    COMMA0 = 6
    CURRENCY0 = 7
    HYPERLINK = 8
    HYPERLINK_FOLLOWED = 9
    NOTE = 10
    WARNING = 11
    TITLE = 15
    HEADING1 = 16
    HEADING2 = 17
    HEADING3 = 18
    HEADING4 = 19
    INPUT = 20
    OUTPUT = 21
    CALCULATION = 22
    CHECK_CELL = 23
    LINKED_CELL = 24
    TOTAL = 25
    GOOD = 26
    BAD = 27
    NEUTRAL = 28
    ACCENT1 = 29
    ACCENT1_20 = 30
    ACCENT1_40 = 31
    ACCENT1_60 = 32
    ACCENT2 = 33
    ACCENT2_20 = 34
    ACCENT2_40 = 35
    ACCENT2_60 = 36
    ACCENT3 = 37
    ACCENT3_20 = 38
    ACCENT3_40 = 39
    ACCENT3_60 = 40
    ACCENT4 = 41
    ACCENT4_20 = 42
    ACCENT4_40 = 43
    ACCENT4_60 = 44
    ACCENT5 = 45
    ACCENT5_20 = 46
    ACCENT5_40 = 47
    ACCENT5_60 = 48
    ACCENT6 = 49
    ACCENT6_20 = 50
    ACCENT6_40 = 51
    ACCENT6_60 = 52
    EXPLANATORY = 53
    ROW_LEVEL1 = 155
    ROW_LEVEL2 = 156
    ROW_LEVEL3 = 157
    ROW_LEVEL4 = 158
    ROW_LEVEL5 = 159
    ROW_LEVEL6 = 160
    ROW_LEVEL7 = 161
    COL_LEVEL1 = 263
    COL_LEVEL2 = 264
    COL_LEVEL3 = 265
    COL_LEVEL4 = 266
    COL_LEVEL5 = 267
    COL_LEVEL6 = 268
    COL_LEVEL7 = 269


_NAMED_STYLE_NAMES: dict[NamedStyleType, str] = {
    NamedStyleType.NORMAL: "Normal",
    NamedStyleType.COMMA: "Comma",
    NamedStyleType.CURRENCY: "Currency",
    NamedStyleType.PERCENT: "Percent",
    NamedStyleType.COMMA0: "Comma[0]",
    NamedStyleType.CURRENCY0: "Currency[0]",
    NamedStyleType.HYPERLINK: "Hyperlink",
    NamedStyleType.HYPERLINK_FOLLOWED: "Followed Hyperlink",
    NamedStyleType.NOTE: "Note",
    NamedStyleType.WARNING: "Warning Text",
    NamedStyleType.TITLE: "Title",
    NamedStyleType.HEADING1: "Heading 1",
    NamedStyleType.HEADING2: "Heading 2",
    NamedStyleType.HEADING3: "Heading 3",
    NamedStyleType.HEADING4: "Heading 4",
    NamedStyleType.INPUT: "Input",
    NamedStyleType.OUTPUT: "Output",
    NamedStyleType.CALCULATION: "Calculation",
    NamedStyleType.CHECK_CELL: "CheckCell",
    NamedStyleType.LINKED_CELL: "LinkedCell",
    NamedStyleType.TOTAL: "Total",
    NamedStyleType.GOOD: "Good",
    NamedStyleType.BAD: "Bad",
    NamedStyleType.NEUTRAL: "Neutral",
    NamedStyleType.EXPLANATORY: "Explanatory Text",
}

for _n in range(1, 7):
    _NAMED_STYLE_NAMES[NamedStyleType[f"ACCENT{_n}"]] = f"Accent{_n}"
    for _pct in (20, 40, 60):
        _NAMED_STYLE_NAMES[NamedStyleType[f"ACCENT{_n}_{_pct}"]] = f"{_pct}% - Accent{_n}"

for _n in range(1, 8):
    _NAMED_STYLE_NAMES[NamedStyleType[f"ROW_LEVEL{_n}"]] = f"RowLevel_{_n}"
    _NAMED_STYLE_NAMES[NamedStyleType[f"COL_LEVEL{_n}"]] = f"ColLevel_{_n}"


def _resolve(style_type) -> NamedStyleType:
    try:
        return NamedStyleType(style_type)
    except ValueError:
        raise ValueError("unknown ID of built-in named style") from None


def named_style_name(style_type) -> str:
    """Return the default display name of a built-in named style."""
    return _NAMED_STYLE_NAMES[_resolve(style_type)]


def builtin_named_style_id(style_type) -> int:
    """Return the builtinId stored in the file for a built-in named style.

    Row and column outline level pseudo styles collapse to their shared ids.
    """
    resolved = _resolve(style_type)
    if NamedStyleType.ROW_LEVEL1 <= resolved <= NamedStyleType.ROW_LEVEL7:
        return _ROW_LEVEL_ID
    if NamedStyleType.COL_LEVEL1 <= resolved <= NamedStyleType.COL_LEVEL7:
        return _COL_LEVEL_ID
    return int(resolved)