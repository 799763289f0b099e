# tests/core/test_lists.py
import pytest

from wordclean.core.services.list_service import (
    convert_online_lists,
    get_list_level,
    is_list_paragraph,
    is_ordered_list,
)


def desktop_item(text, level=1, marker="·", cls="MsoListParagraph"):
    return (f'<p class={cls} style="margin-left:36.0pt;text-indent:-18.0pt;mso-list:l0 level{level} lfo1">'
            f'<span style="mso-list:Ignore">{marker}<span style="font:7.0pt \'Times New Roman\'">'
            f'&nbsp;&nbsp;&nbsp;</span></span>{text}</p>')


def online_item(text, level=1, ordered=False):
    tag = "ol" if ordered else "ul"
    return (f'<div class="ListContainerWrapper SCXW12 BCX0">'
            f'<{tag} class="BulletListStyle1 SCXW12" role="list">'
            f'<li data-leveltext="" data-font="Symbol" data-listid="1" data-aria-level="{level}" '
            f'role="listitem" class="OutlineElement Ltr SCXW12">'
            f'<p class="Paragraph SCXW12" paraid="1"><span class="TextRun SCXW12" lang="EN-US">'
            f'<span class="NormalTextRun SCXW12">{text}</span></span>'
            f'<span class="EOP SCXW12">&nbsp;</span></p></li></{tag}></div>')


# --- Desktop Word ---

def test_converts_bullet_paragraphs(cleaner):
    html = desktop_item("First") + desktop_item("Second")
    assert cleaner.clean(html) == '<ul><li>First</li><li>Second</li></ul>'


def test_converts_numbered_paragraphs(cleaner):
    html = desktop_item("One", marker="1.") + desktop_item("Two", marker="2.")
    assert cleaner.clean(html) == '<ol><li>One</li><li>Two</li></ol>'


def test_nests_by_mso_list_level(cleaner):
    html = desktop_item("Top") + desktop_item("Nested", level=2)
    assert cleaner.clean(html) == '<ul><li>Top<ul><li>Nested</li></ul></li></ul>'


def test_levels_one_one_two(cleaner):
    html = desktop_item("One") + desktop_item("Two") + desktop_item("Three", level=2)
    assert cleaner.clean(html) == '<ul><li>One</li><li>Two<ul><li>Three</li></ul></li></ul>'


def test_marker_glyph_is_removed(cleaner):
    result = cleaner.clean(desktop_item("Item"))
    assert "·" not in result
    assert "mso-list" not in result
    assert "Times New Roman" not in result


def test_whitespace_between_paragraphs_does_not_split_list(cleaner):
    html = desktop_item("First") + "\n" + desktop_item("Second")
    result = cleaner.clean(html)
    assert result.count("<ul>") == 1
    assert result.count("<li>") == 2


def test_paragraph_between_items_splits_lists(cleaner):
    html = desktop_item("A") + "<p>Break</p>" + desktop_item("B")
    assert cleaner.clean(html) == '<ul><li>A</li></ul><p>Break</p><ul><li>B</li></ul>'


def test_keeps_inline_formatting_in_items(cleaner):
    result = cleaner.clean(desktop_item("<b>Bold</b> item"))
    assert result == '<ul><li><b>Bold</b> item</li></ul>'


@pytest.mark.parametrize("marker,ordered", [
    ("1.", True), ("12)", True), ("a.", True), ("a)", True), ("iv.", True), ("iv)", True), ("IV.", True),
    ("·", False), ("o", False), ("§", False),
])
def test_ordered_detection_from_marker(soup_of, marker, ordered):
    soup = soup_of(desktop_item("x", marker=marker))
    assert is_ordered_list(soup.p) is ordered


def test_ordered_detection_from_class(soup_of):
    soup = soup_of(desktop_item("x", marker="·", cls="MsoListNumber"))
    assert is_ordered_list(soup.p) is True
    soup = soup_of(desktop_item("x", marker="1.", cls="MsoListBullet"))
    assert is_ordered_list(soup.p) is False


def test_list_paragraph_detection(soup_of):
    soup = soup_of('<p class="MsoListParagraph">a</p><p style="mso-list: l1 level3 lfo2">b</p><p>c</p>')
    first, second, third = soup.find_all("p")
    assert is_list_paragraph(first)
    assert is_list_paragraph(second)
    assert not is_list_paragraph(third)
    assert get_list_level(first) == 1
    assert get_list_level(second) == 3


# --- Word Online ---

def test_converts_online_bullets(cleaner):
    html = f'<div class="OutlineElement">{online_item("A")}{online_item("B")}</div>'
    assert cleaner.clean(html) == '<ul><li>A</li><li>B</li></ul>'


def test_converts_online_numbered(cleaner):
    html = online_item("A", ordered=True) + online_item("B", ordered=True)
    assert cleaner.clean(html) == '<ol><li>A</li><li>B</li></ol>'


def test_nests_online_items_by_aria_level(cleaner):
    html = online_item("A") + online_item("B", level=2)
    assert cleaner.clean(html) == '<ul><li>A<ul><li>B</li></ul></li></ul>'


def test_online_items_lose_markers_and_attributes(cleaner):
    result = cleaner.clean(online_item("Item&nbsp;"))
    assert "EOP" not in result
    assert "\xa0" not in result
    assert "&nbsp;" not in result
    assert "data-" not in result
    assert "class=" not in result
    assert "<p>" not in result


def test_online_wrappers_merge_across_whitespace(soup_of):
    soup = soup_of(f'<div>{online_item("A")}\n{online_item("B")}</div>')
    convert_online_lists(soup)
    assert len(soup.find_all("ul")) == 1
    assert [li.get_text() for li in soup.find_all("li")] == ["A", "B"]


def test_online_wrapper_without_list_is_left_alone(soup_of):
    soup = soup_of('<div><div class="ListContainerWrapper"><p>orphan</p></div></div>')
    convert_online_lists(soup)
    assert soup.find("ul") is None
    assert soup.find(class_="ListContainerWrapper") is not None


def test_letter_markers_with_parenthesis_give_ordered_list(cleaner):
    html = desktop_item("x", marker="a)") + desktop_item("y", marker="b)")
    assert cleaner.clean(html) == '<ol><li>x</li><li>y</li></ol>'


def test_downlevel_support_lists_markup_is_dropped(cleaner):
    html = ('<p class=MsoListParagraphCxSpFirst style="text-indent:-18.0pt;mso-list:l0 level1 lfo1">'
            '<![if !supportLists]><span style="font-family:Symbol"><span style="mso-list:Ignore">·'
            '<span style="font:7.0pt \'Times New Roman\'">&nbsp;&nbsp;</span></span></span><![endif]>'
            'Alpha<o:p></o:p></p>')
    assert cleaner.clean(html) == '<ul><li>Alpha</li></ul>'
