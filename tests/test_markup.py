import pytest

from dunstkit.markup import (
    MarkupMode,
    markup_strip,
    markup_strip_a,
    markup_strip_img,
    markup_transform,
)


@pytest.mark.parametrize(
    "given, expected",
    [
        ("&amp;quot;", "&quot;"),
        ("&amp;apos;", "&apos;"),
        ("&amp;lt;", "&lt;"),
        ("&amp;gt;", "&gt;"),
        ("&amp;amp;", "&amp;"),
        (">A <img> <string", ">A  "),
    ],
)
def test_markup_strip(given, expected):
    assert markup_strip(given) == expected


SAMPLE = "<i>foo</i><br>bar\nbaz"


@pytest.mark.parametrize(
    "mode, expected",
    [
        (MarkupMode.NO, "&lt;i&gt;foo&lt;/i&gt;&lt;br&gt;bar\nbaz"),
        (MarkupMode.STRIP, "foo\nbar\nbaz"),
        (MarkupMode.FULL, "<i>foo</i>\nbar\nbaz"),
    ],
)
def test_markup_transform_keep_newline(mode, expected):
    assert markup_transform(SAMPLE, mode, False) == expected


@pytest.mark.parametrize(
    "mode, expected",
    [
        (MarkupMode.NO, "&lt;i&gt;foo&lt;/i&gt;&lt;br&gt;bar baz"),
        (MarkupMode.STRIP, "foo bar baz"),
        (MarkupMode.FULL, "<i>foo</i> bar baz"),
    ],
)
def test_markup_transform_ignore_newline(mode, expected):
    assert markup_transform(SAMPLE, mode, True) == expected


@pytest.mark.parametrize(
    "given, expected",
    [
        ('<img alt="foo bar"><br>bar\nbaz', "foo bar bar baz"),
        ('test <img alt="foo bar"', "test "),
        ('test <img src="nothing.jpg"> image', "test [image] image"),
        ('<a href="asdf">bar</a> baz', "bar baz"),
        ("&#936;", "&#936;"),
        ("&#x3a8; &#x3A8;", "&#x3a8; &#x3A8;"),
        ("&gt; &lt;", "&gt; &lt;"),
        ("&invalid; &#abc; &#xG;", "&amp;invalid; &amp;#abc; &amp;#xG;"),
        ("&; &#; &#x;", "&amp;; &amp;#; &amp;#x;"),
    ],
)
def test_markup_transform_full(given, expected):
    assert markup_transform(given, MarkupMode.FULL, True) == expected


def test_markup_transform_null_mode_raises():
    with pytest.raises(ValueError):
        markup_transform("text", MarkupMode.NULL, False)


@pytest.mark.parametrize(
    "given, expected, urls",
    [
        ('<a href="https://url.com">valid</a> link', "valid link", "[valid] https://url.com"),
        ('<a href="">valid</a> link', "valid link", "[valid] "),
        ("<a>valid</a> link", "valid link", None),
        ('<a href="https://url.com">valid link', "valid link", "[valid link] https://url.com"),
        ('<a href="https://url.com" invalid</a> link', " link", None),
        ("<a invalid</a> link", " link", None),
    ],
)
def test_markup_strip_a(given, expected, urls):
    assert markup_strip_a(given) == (expected, urls)


def test_markup_strip_a_multiple_links():
    text, urls = markup_strip_a('<a href="x">one</a> and <a href="y">[two]</a>')
    assert text == "one and [two]"
    assert urls == "[one] x\n[two] y"


@pytest.mark.parametrize(
    "given, expected, urls",
    [
        ("v <img> img", "v [image] img", None),
        ('v <img alt="valid" alt="invalid"> img', "v valid img", None),
        ('v <img src="url.com"> img', "v [image] img", "[image] url.com"),
        ('v <img alt="valid" src="url.com"> img', "v valid img", "[valid] url.com"),
        ('v <img src="url.com" alt="valid"> img', "v valid img", "[valid] url.com"),
        ('v <img src="url.com" alt="valid" alt="i"> img', "v valid img", "[valid] url.com"),
        ('i <img alt="invalid  src="https://url.com"> img', "i [image] img", "[image] https://url.com"),
        ('i <img alt="broken" src="https://url.com  > img', "i broken img", None),
        ('i <img alt="invalid  src="https://url.com  > img', "i [image] img", None),
        ('i <img src="url.com   alt="broken"> img', "i broken img", None),
        ('i <img src="url.com" alt="invalid > img', "i [image] img", "[image] url.com"),
        ('i <img src="url.com   alt="invalid > img', "i [image] img", None),
        ('i <img src="url.com" alt="invalid" img', "i ", None),
    ],
)
def test_markup_strip_img(given, expected, urls):
    assert markup_strip_img(given) == (expected, urls)


def test_markup_no_quote_roundtrip_through_strip():
    original = "a < b & \"c\" > 'd'"
    quoted = markup_transform(original, MarkupMode.NO, False)
    assert "<" not in quoted and ">" not in quoted
    assert markup_strip(quoted) == original