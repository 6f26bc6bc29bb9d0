"""
Tests for HTML escaping.
"""

from minitpl.escape import escape_html


def test_escapes_full_character_set():
    assert escape_html("<a>&\"'`=") == "&lt;a&gt;&amp;&quot;&#x27;&#x60;&#x3D;"


def test_safe_text_is_unchanged():
    assert escape_html("plain text 123") == "plain text 123"


def test_single_pass():
    """Entities already present are escaped once, not re-processed."""
    assert escape_html("&amp;") == "&amp;amp;"
