"""Text normalizer unit tests."""

import pytest

from src.scraping.normalize import normalize_text


def test_script_removed_with_content():
    assert normalize_text("<script>x</script><p>Hello</p>") == "Hello"


@pytest.mark.parametrize("raw", ["", None])
def test_empty_input(raw):
    assert normalize_text(raw) == ""


def test_adjacent_elements_do_not_merge():
    html = '<p>Hello</p><script>alert("world");</script><div>Test</div>'
    assert normalize_text(html) == "Hello Test"


def test_style_removed_with_content():
    assert normalize_text("<style>.body { color: red; }</style><span>Styled</span>") == "Styled"


def test_noscript_content_is_kept():
    assert normalize_text("<noscript>JS is off</noscript><p>Content</p>") == "JS is off Content"


def test_tags_removed():
    html = "<h1>Title</h1><p>Paragraph <em>emphasis</em></p><br/><div>Another</div>"
    assert normalize_text(html) == "Title Paragraph emphasis Another"


def test_whitespace_collapsed_and_trimmed():
    assert normalize_text("  Extra   \n\n spaces \t and \r\n newlines  ") == "Extra spaces and newlines"


def test_mixed_content():
    html = """
        <div>
          <h2>Important <style>h2 {font-weight: bold;}</style>Info</h2>
          <p>This is a test.
            <SCRIPT type="text/javascript">
              console.log("test");
            </SCRIPT>
          </p>
          And some   more text.
        </div>
    """
    assert normalize_text(html) == "Important Info This is a test. And some more text."


def test_self_closing_tags():
    html = '<p>Text with a break<br/>and an image<img src="test.jpg" alt="test"/>.</p>'
    assert normalize_text(html) == "Text with a break and an image ."
