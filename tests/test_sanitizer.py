import pytest

from metatable.services.sanitizer import Sanitizer, get_sanitizer


def test_strips_script_tags(sanitizer):
    out = sanitizer.sanitize(b"<p>hi</p><script>alert(1)</script>")
    assert b"<script" not in out
    assert b"<p>hi</p>" in out


def test_strips_event_handlers(sanitizer):
    out = sanitizer.sanitize_text('<a href="https://example.com" onclick="evil()">link</a>')
    assert "onclick" not in out
    assert 'href="https://example.com"' in out


def test_strips_javascript_urls(sanitizer):
    out = sanitizer.sanitize_text('<a href="javascript:alert(1)">x</a>')
    assert "javascript" not in out


def test_keeps_metadata_table(sanitizer):
    html = b'<table data="yaml-metadata"><tr><td>name</td><td>x</td></tr></table>'
    out = sanitizer.sanitize(html)
    assert b'data="yaml-metadata"' in out
    assert b"<td>name</td><td>x</td>" in out


def test_escapes_bare_text(sanitizer):
    assert sanitizer.sanitize(b"a < b & c") == b"a &lt; b &amp; c"


def test_empty_input(sanitizer):
    assert sanitizer.sanitize(b"") == b""
    assert sanitizer.sanitize_text("") == ""


@pytest.mark.parametrize("html", [
    b"<p>hi</p><script>alert(1)</script>",
    b'<table data="yaml-metadata"><thead><tr><th>a</th></tr></thead><tbody><tr><td>1</td></tr></table>',
    b'<div style="color:red" onmouseover="x()"><img src="http://x/y.png" onerror="z()"></div>',
    b"plain & <unknown>text</unknown>",
])
def test_idempotent(sanitizer, html):
    once = sanitizer.sanitize(html)
    assert sanitizer.sanitize(once) == once


def test_process_wide_instance_is_shared():
    assert get_sanitizer() is get_sanitizer()
    assert isinstance(get_sanitizer(), Sanitizer)
