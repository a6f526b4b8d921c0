"""Cell styles, conditional formatting rules and column settings for XLSX spreadsheets."""

__version__ = "0.1.0"

__all__ = [
    "style_types",
    "styles",
    "rule",
    "rule_scales",
    "rule_criteria",
    "conditional",
    "columns",
]