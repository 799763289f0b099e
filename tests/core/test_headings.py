# tests/core/test_headings.py
import pytest

from wordclean.core.services.heading_service import (
    convert_headings,
    detect_heading_level,
    infer_level_from_font_size,
)


def test_converts_mso_heading1_to_h1(cleaner):
    result = cleaner.clean('<p class="MsoHeading1">Introduction</p>')
    assert result == '<h1>Introduction</h1>'


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
def test_converts_mso_heading_classes(cleaner, n):
    result = cleaner.clean(f'<p class="MsoHeading{n}">Title</p>')
    assert f'<h{n}>' in result


def test_preserves_inline_formatting(cleaner):
    result = cleaner.clean('<p class="MsoHeading1"><strong>Bold</strong> heading</p>')
    assert result == '<h1><strong>Bold</strong> heading</h1>'


def test_leaves_normal_paragraphs(cleaner):
    result = cleaner.clean('<p class="MsoNormal">Normal text</p>')
    assert result == '<p>Normal text</p>'


def test_adjacent_headings_stay_separate(cleaner):
    result = cleaner.clean('<p class="MsoHeading2">A</p><p class="MsoHeading2">B</p>')
    assert result == '<h2>A</h2><h2>B</h2>'


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_converts_role_heading_with_aria_level(cleaner, n):
    result = cleaner.clean(f'<p role="heading" aria-level="{n}">Title</p>')
    assert result == f'<h{n}>Title</h{n}>'


def test_ignores_out_of_range_aria_level(soup_of):
    soup = soup_of('<p role="heading" aria-level="9">Title</p>')
    assert detect_heading_level(soup.p) is None


def test_word_online_heading_with_spans(cleaner):
    html = ('<p class="Paragraph" role="heading" aria-level="1">'
            '<span class="TextRun"><span class="NormalTextRun" data-ccp-parastyle="heading 1">My Heading</span></span>'
            '<span class="EOP">&nbsp;</span></p>')
    assert cleaner.clean(html) == '<h1>My Heading</h1>'


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_parastyle_heading_without_aria_level(cleaner, n):
    html = f'<p><span style="font-size: 14pt;"><span data-ccp-parastyle="heading {n}">Title</span></span></p>'
    assert cleaner.clean(html) == f'<h{n}>Title</h{n}>'


def test_custom_heading_style_uses_font_size(cleaner):
    html = ('<p style="font-weight: bold; color: rgb(46, 117, 182);">'
            '<span style="font-size: 14pt; font-weight: bold;" data-contrast="none">'
            '<span data-ccp-parastyle="heading 20">Custom Heading</span></span>'
            '<span class="EOP">&nbsp;</span></p>')
    assert cleaner.clean(html) == '<h3>Custom Heading</h3>'


@pytest.mark.parametrize("size,level", [
    ("20pt", 1), ("26pt", 1), ("16pt", 2), ("14pt", 3), ("12pt", 4), ("11pt", 5), ("10.5pt", 5),
])
def test_font_size_thresholds(soup_of, size, level):
    soup = soup_of(f'<p><span style="font-size: {size}">x</span></p>')
    assert infer_level_from_font_size(soup.p) == level


def test_font_size_takes_maximum_over_paragraph_and_spans(soup_of):
    soup = soup_of('<p style="font-size:13pt"><span style="font-size: 16pt">a</span>'
                   '<span style="font-size: 9pt">b</span></p>')
    assert infer_level_from_font_size(soup.p) == 2


def test_non_heading_parastyle_is_ignored(soup_of):
    soup = soup_of('<p><span data-ccp-parastyle="Normal" style="font-size: 24pt">Body</span></p>')
    assert detect_heading_level(soup.p) is None


def test_role_wins_over_class(soup_of):
    soup = soup_of('<p class="MsoHeading4" role="heading" aria-level="2">x</p>')
    assert detect_heading_level(soup.p) == 2


def test_convert_headings_stage_keeps_non_headings(soup_of):
    soup = soup_of('<p class="MsoHeading3">T</p><p>body</p>')
    convert_headings(soup)
    assert str(soup) == '<h3>T</h3><p>body</p>'
