from bs4 import BeautifulSoup

from sorg.markdown import render_markdown


def _soup(source):
    return BeautifulSoup(render_markdown(source), "html.parser")


def test_emphasis():
    assert render_markdown("Body *text*") == "<p>Body <em>text</em></p>"


def test_headings_get_automatic_ids():
    heading = _soup("## Hello World").find("h2")
    assert heading["id"] == "hello-world"


def test_bare_urls_are_autolinked():
    link = _soup("See https://example.com/page for more.").find("a")
    assert link is not None
    assert link["href"] == "https://example.com/page"


def test_fenced_code_blocks():
    code = _soup("```ruby\nputs 'hi'\n```").find("code")
    assert "language-ruby" in code.get("class", [])
    assert "puts" in code.get_text()


def test_no_intra_word_emphasis():
    html = render_markdown("a snake_case_name here")
    assert "<em>" not in html
    assert "snake_case_name" in html


def test_tables():
    table = _soup("| a | b |\n|---|---|\n| 1 | 2 |").find("table")
    assert [td.get_text() for td in table.find_all("td")] == ["1", "2"]


def test_strikethrough():
    deleted = _soup("This is ~~gone~~ now.").find("del")
    assert deleted is not None and deleted.get_text() == "gone"


def test_inline_html_passes_through():
    div = _soup('<div class="note">\nraw block\n</div>').find("div", class_="note")
    assert div is not None


def test_smart_punctuation():
    html = render_markdown('He said "hello" -- and left --- quickly...')
    assert '"hello"' not in html
    assert "&ldquo;" in html and "&rdquo;" in html
    assert "&ndash;" in html and "&mdash;" in html
    assert "&hellip;" in html


def test_fractions_are_substituted():
    assert "1/2" not in render_markdown("Add 1/2 cup.")


def test_xhtml_output():
    assert "<br />" in render_markdown("line one  \nline two")
