# tests/core/test_structure_flatten.py
from wordclean.core.services.structure_flatten_service import merge_sibling_lists, unwrap_divs


def test_unwraps_nested_divs(soup_of):
    soup = soup_of('<div class="OutlineElement"><div><p>x</p></div><p>y</p></div>')
    unwrap_divs(soup)
    assert str(soup) == '<p>x</p><p>y</p>'


def test_merges_adjacent_lists_of_same_kind(soup_of):
    soup = soup_of('<ul><li>a</li></ul><ul><li>b</li></ul><ul><li>c</li></ul>')
    merge_sibling_lists(soup)
    assert str(soup) == '<ul><li>a</li><li>b</li><li>c</li></ul>'


def test_does_not_merge_different_kinds(soup_of):
    soup = soup_of('<ul><li>a</li></ul><ol><li>b</li></ol>')
    merge_sibling_lists(soup)
    assert str(soup) == '<ul><li>a</li></ul><ol><li>b</li></ol>'


def test_merges_across_whitespace_text(soup_of):
    soup = soup_of('<ol><li>a</li></ol>\n<ol><li>b</li></ol>')
    merge_sibling_lists(soup)
    assert len(soup.find_all("ol")) == 1


def test_paragraph_between_lists_prevents_merge(soup_of):
    soup = soup_of('<ul><li>a</li></ul><p>x</p><ul><li>b</li></ul>')
    merge_sibling_lists(soup)
    assert len(soup.find_all("ul")) == 2


def test_online_document_lists_merge_after_div_unwrap(cleaner):
    html = ('<div class="OutlineElement"><ul><li>one</li></ul></div>'
            '<div class="OutlineElement"><ul><li>two</li></ul></div>')
    assert cleaner.clean(html) == '<ul><li>one</li><li>two</li></ul>'
