import pytest

from hclassist.mdplain import clean


@pytest.mark.parametrize(
    "markdown, expected",
    [
        ("", ""),
        ("_foo_", "foo"),
        ("__foo__", "foo"),
        ("foo_bar", "foo_bar"),
        ("*foo*", "foo"),
        ("**foo**", "foo"),
        ("Desc **2**", "Desc 2"),
        ("1 * 3 = 3", "1 * 3 = 3"),
        ("## Header", "Header"),
        ("Header\n====\n\nSome text", "Header\n\nSome text"),
        ("* item 1\n* item 2\n\n\nSome text", "* item 1\n* item 2\n\nSome text"),
    ],
)
def test_clean(markdown, expected):
    assert clean(markdown) == expected


def test_clean_removes_inline_code_ticks():
    assert clean("use `terraform plan` now") == "use terraform plan now"


def test_clean_keeps_link_text():
    assert clean("see [docs](https://example.com/docs)") == "see docs"


def test_clean_keeps_image_alt_text():
    assert clean("![logo](img.png)") == "logo"


def test_clean_removes_html_tags():
    assert clean("<b>bold</b>") == "bold"


def test_clean_is_idempotent_on_plain_text():
    text = "plain words only"
    assert clean(clean(text)) == clean(text) == text