"""
Tests for the tag scanner.
"""

from minitpl.scanner import Tag, find_next_tag, iter_tags


class TestFindNextTag:

    def test_narrow_tag(self):
        tag = find_next_tag("Hello {{ name }}!", 0)
        assert tag == Tag(open=6, close=14, close_len=2, is_triple=False, tag="name")
        assert tag.end == 16

    def test_wide_tag(self):
        tag = find_next_tag("{{{ html }}}", 0)
        assert tag is not None
        assert tag.is_triple
        assert tag.open == 0
        assert tag.close == 9
        assert tag.close_len == 3
        assert tag.end == 12
        assert tag.tag == "html"

    def test_no_opening_delimiter(self):
        assert find_next_tag("plain text } }", 0) is None

    def test_unterminated_tag(self):
        """An opener without a closer is not a tag."""
        assert find_next_tag("a {{ name", 0) is None

    def test_wide_opener_needs_wide_closer(self):
        assert find_next_tag("{{{ x }}", 0) is None

    def test_search_starts_at_offset(self):
        tag = find_next_tag("{{a}}{{b}}", 5)
        assert tag is not None
        assert tag.tag == "b"
        assert tag.open == 5

    def test_block_tag_text_is_trimmed(self):
        tag = find_next_tag("{{  #each items  }}", 0)
        assert tag is not None
        assert tag.tag == "#each items"


def test_iter_tags_walks_whole_source():
    tags = list(iter_tags("{{a}} x {{{b}}} {{#if c}} {{ d"))
    assert [t.tag for t in tags] == ["a", "b", "#if c"]
    assert [t.is_triple for t in tags] == [False, True, False]


def test_iter_tags_empty_source():
    assert list(iter_tags("")) == []
