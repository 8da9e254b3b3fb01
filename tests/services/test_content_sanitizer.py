import pytest

from app.services.content_sanitizer import sanitize_for_display
from app.services.html_rules import PRESENTATION_CLASSES


def test_removes_tracking_images_but_keeps_real_ones():
    html = (
        '<img src="https://medium.com/_/stat?event=post.clientViewed&referrerSource=full_rss" width="1" height="1">'
        '<img src="https://miro.medium.com/max/1024/hero.png" alt="hero">'
    )

    result = sanitize_for_display(html)

    assert "_/stat" not in result
    assert result == '<img src="https://miro.medium.com/max/1024/hero.png" alt="hero" class="blog-image">'


def test_removes_noscript_blocks_across_lines():
    html = '<p>Keep</p><noscript>\n<img src="https://x/y.png">\n</noscript><p>Also</p>'

    result = sanitize_for_display(html)

    assert "noscript" not in result
    assert "x/y.png" not in result
    assert "Keep" in result and "Also" in result


def test_strips_data_attributes():
    html = '<figure data-id="1" data-role=\'hero\' data-flag><p data-x="y">Hi</p></figure>'

    result = sanitize_for_display(html)

    assert "data-" not in result
    assert result.startswith("<figure>")


def test_leaves_data_text_outside_tags():
    result = sanitize_for_display('<code>x data-foo="bar"</code>')
    assert 'data-foo="bar"' in result


def test_keeps_data_text_inside_attribute_values():
    html = '<img alt="raw data-driven chart" data-src="lazy.png" src="https://x/a.png">'

    result = sanitize_for_display(html)

    assert result == '<img alt="raw data-driven chart" src="https://x/a.png" class="blog-image">'


def test_rewrites_protocol_relative_sources():
    result = sanitize_for_display('<img src="//cdn.example.com/a.png">')
    assert 'src="https://cdn.example.com/a.png"' in result


def test_injects_classes_on_bare_tags():
    html = "<h1>T</h1><h2>S</h2><h3>U</h3><p>Body</p><blockquote>Q</blockquote><pre><code>c</code></pre>"

    result = sanitize_for_display(html)

    for tag in ("h1", "h2", "h3", "p", "blockquote", "pre", "code"):
        assert f'<{tag} class="{PRESENTATION_CLASSES[tag]}">' in result


def test_injects_link_class_after_attributes():
    result = sanitize_for_display('<a href="https://example.com">link</a>')
    assert result == f'<a href="https://example.com" class="{PRESENTATION_CLASSES["a"]}">link</a>'


def test_merges_into_existing_class_attribute():
    result = sanitize_for_display('<p class="lead">Hi</p>')
    assert result == f'<p class="lead {PRESENTATION_CLASSES["p"]}">Hi</p>'


def test_keeps_self_closing_img():
    result = sanitize_for_display('<img src="https://x/a.png"/>')
    assert result == '<img src="https://x/a.png" class="blog-image" />'


def test_does_not_confuse_similar_tag_names():
    result = sanitize_for_display("<abbr>HTML</abbr><param>")
    assert result == "<abbr>HTML</abbr><param>"


def test_collapses_whitespace():
    result = sanitize_for_display("  <p>one\n\n   two</p>\t ")
    assert result == f'<p class="{PRESENTATION_CLASSES["p"]}">one two</p>'


@pytest.mark.parametrize(
    "html",
    ["", None, "<p", "<<<>>>", "<img src=>", "</p></div>", '<a href="unterminated>x'],
)
def test_malformed_input_never_raises(html):
    assert isinstance(sanitize_for_display(html), str)
