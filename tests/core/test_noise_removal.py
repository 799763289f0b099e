# tests/core/test_noise_removal.py
import pytest

from wordclean.core.services.noise_removal_service import has_only_noisy_styles, remove_comments


def test_removes_empty_office_paragraph_markers(cleaner):
    assert cleaner.clean('<p class="MsoNormal">Text<o:p></o:p></p>') == '<p>Text</p>'
    assert cleaner.clean('<p class="MsoNormal">Text<o:p>&nbsp;</o:p></p>') == '<p>Text</p>'


def test_unwraps_office_paragraph_markers_with_text(cleaner):
    assert cleaner.clean('<p>Hello <o:p>world</o:p></p>') == '<p>Hello world</p>'


def test_unwraps_namespaced_elements(cleaner):
    assert cleaner.clean('<p>In <st1:place>Amsterdam</st1:place></p>') == '<p>In Amsterdam</p>'


def test_removes_comments(cleaner):
    assert cleaner.clean('<!--StartFragment--><p>x</p><!--EndFragment-->') == '<p>x</p>'


def test_removes_local_images(cleaner):
    html = '<p><img src="file:///C:/Users/me/AppData/Local/Temp/image001.png">Text</p>'
    assert cleaner.clean(html) == '<p>Text</p>'


@pytest.mark.parametrize("src", [
    "https://example.com/a.png",
    "http://example.com/a.png",
    "data:image/png;base64,iVBORw0KGgo=",
])
def test_keeps_remote_images(cleaner, src):
    html = f'<p><img src="{src}" alt="A" v:shapes="Picture_1"></p>'
    assert cleaner.clean(html) == f'<p><img src="{src}" alt="A"></p>'


def test_removes_mso_styles_from_line_breaks(cleaner):
    html = '<p>a<br style="mso-special-character:line-break">b</p>'
    assert cleaner.clean(html) == '<p>a<br>b</p>'


def test_unwraps_paragraphs_in_table_cells(cleaner):
    html = '<table><tr><td><p>One</p><p>Two</p></td><td><p>Single</p></td></tr></table>'
    assert cleaner.clean(html) == '<table><tr><td>One<br>Two</td><td>Single</td></tr></table>'


def test_unwraps_paragraphs_in_list_items(cleaner):
    assert cleaner.clean('<ul><li><p>x</p></li></ul>') == '<ul><li>x</li></ul>'


def test_unwraps_spans_with_only_mso_styles(cleaner):
    html = '<p><span style="mso-bidi-font-size:11.0pt;font-family:Calibri">text</span></p>'
    assert cleaner.clean(html) == '<p>text</p>'


def test_keeps_spans_with_visual_styles(cleaner):
    html = '<p><span style="color:red;mso-highlight:yellow">text</span></p>'
    assert cleaner.clean(html) == '<p><span style="color:red">text</span></p>'


@pytest.mark.parametrize("style,noisy", [
    ("", True),
    ("mso-fareast-language:EN-US", True),
    ("font-family:Arial; mso-ansi-language:NL", True),
    ("font-weight:bold", False),
    ("mso-x:1; COLOR: blue", False),
])
def test_has_only_noisy_styles(soup_of, style, noisy):
    span = soup_of(f'<span style="{style}">x</span>').span
    assert has_only_noisy_styles(span) is noisy


def test_removes_xml_namespace_declarations(cleaner):
    html = ('<?xml:namespace prefix = o ns = "urn:schemas-microsoft-com:office:office" />'
            '<p class=MsoNormal>Hi<o:p></o:p></p>')
    assert cleaner.clean(html) == '<p>Hi</p>'


def test_downlevel_conditional_keeps_content(cleaner):
    html = '<p class=MsoNormal><![if !vml]><img src="image001.png"><![endif]>x</p>'
    assert cleaner.clean(html) == '<p>x</p>'


def test_remove_comments_drops_processing_instructions(soup_of):
    soup = soup_of('<?xml:namespace prefix = o ns = "urn:x" /><p>Hi<!--note--></p>')
    remove_comments(soup)
    assert str(soup) == '<p>Hi</p>'
