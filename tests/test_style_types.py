import pytest

from xlsxfmt.style_types import (
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


def test_xml_name_round_trip():
    for member in HAlign:
        assert HAlign(member.xml) is member
        assert HAlign(int(member)) is member
    for member in VAlign:
        assert VAlign(member.xml) is member
        assert VAlign(int(member)) is member
    for member in BorderStyle:
        assert BorderStyle(member.xml) is member
        assert BorderStyle(int(member)) is member
    for member in GradientType:
        assert GradientType(member.xml) is member
        assert GradientType(int(member)) is member
    for member in PatternType:
        assert PatternType(member.xml) is member
        assert PatternType(int(member)) is member


def test_xml_names_are_unique():
    h_names = [member.xml for member in HAlign]
    v_names = [member.xml for member in VAlign]
    b_names = [member.xml for member in BorderStyle]
    g_names = [member.xml for member in GradientType]
    p_names = [member.xml for member in PatternType]
    assert [HAlign(name).xml for name in h_names] == h_names
    assert len(h_names) == len(set(h_names))
    assert [VAlign(name).xml for name in v_names] == v_names
    assert len(v_names) == len(set(v_names))
    assert [BorderStyle(name).xml for name in b_names] == b_names
    assert len(b_names) == len(set(b_names))
    assert [GradientType(name).xml for name in g_names] == g_names
    assert len(g_names) == len(set(g_names))
    assert [PatternType(name).xml for name in p_names] == p_names
    assert len(p_names) == len(set(p_names))


def test_unknown_xml_name_rejected():
    with pytest.raises(ValueError):
        HAlign("noSuchValue")
    with pytest.raises(ValueError):
        VAlign("noSuchValue")
    with pytest.raises(ValueError):
        BorderStyle("noSuchValue")
    with pytest.raises(ValueError):
        GradientType("noSuchValue")
    with pytest.raises(ValueError):
        PatternType("noSuchValue")


def test_pinned_xml_names():
    assert HAlign.CENTER_CONTINUOUS.xml == "centerContinuous"
    assert VAlign.BOTTOM.xml == "bottom"
    assert BorderStyle.DASH_DOT.xml == "dashDot"
    assert PatternType.DARK_DOWN.xml == "darkDown"
    assert GradientType.PATH.xml == "path"
    assert GradientType("linear") is GradientType.LINEAR


def test_ordering_follows_declaration():
    assert HAlign("general") is list(HAlign)[0]
    assert HAlign("general") is HAlign.GENERAL
    assert BorderStyle("slantDashDot") is list(BorderStyle)[-1]
    assert GradientType("linear") < GradientType("path")


def test_font_charset_values():
    assert FontCharset.ANSI == 0
    assert FontCharset.MAC == 77
    assert FontCharset.RUSSIAN == 204
    assert FontCharset.OEM == 255
    assert FontCharset(204) is FontCharset.RUSSIAN


def test_font_family_and_string_enums():
    assert FontFamily.DECORATIVE == 5
    assert FontScheme("minor") is FontScheme.MINOR
    assert UnderlineType.SINGLE.value == "single"
    assert UnderlineType("doubleAccounting") is UnderlineType.DOUBLE_ACCOUNTING


def test_named_style_names():
    assert named_style_name(NamedStyleType.NORMAL) == "Normal"
    assert named_style_name(NamedStyleType.HYPERLINK) == "Hyperlink"
    assert named_style_name(NamedStyleType.HYPERLINK_FOLLOWED) == "Followed Hyperlink"
    assert named_style_name(NamedStyleType.ACCENT3_40) == "40% - Accent3"
    assert named_style_name(NamedStyleType.ROW_LEVEL4) == "RowLevel_4"
    assert named_style_name(NamedStyleType.COL_LEVEL7) == "ColLevel_7"


def test_every_named_style_has_name():
    names = [named_style_name(member) for member in NamedStyleType]
    assert all(names)
    assert len(names) == len(set(names))


def test_builtin_id_of_regular_style_is_its_value():
    for member in (NamedStyleType.HYPERLINK, NamedStyleType.TITLE, NamedStyleType.EXPLANATORY):
        assert builtin_named_style_id(member) == int(member)


def test_builtin_id_of_level_pseudo_styles_collapses():
    row_ids = {builtin_named_style_id(NamedStyleType[f"ROW_LEVEL{n}"]) for n in range(1, 8)}
    col_ids = {builtin_named_style_id(NamedStyleType[f"COL_LEVEL{n}"]) for n in range(1, 8)}
    assert row_ids == {1}
    assert col_ids == {2}


def test_builtin_id_accepts_plain_int():
    assert builtin_named_style_id(int(NamedStyleType.GOOD)) == int(NamedStyleType.GOOD)


@pytest.mark.parametrize("bad", [1, 2, 12, 999])
def test_unknown_named_style_rejected(bad):
    with pytest.raises(ValueError):
        named_style_name(bad)
    with pytest.raises(ValueError):
        builtin_named_style_id(bad)