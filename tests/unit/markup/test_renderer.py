"""Tests for the markdown-like content renderer."""

from medcoders.core.modules.markup.renderer import render_markup


class TestDocument:
    """Tests for a whole document mixing the rules."""

    def test_title_and_inline_markup(self):
        """Test that a header, bold and italic combine as documented."""
        html = render_markup("# Title\n\nSome **bold** and *italic* text.")
        assert html == "<h1>Title</h1><br><p>Some <strong>bold</strong> and <em>italic</em> text.</p>"


class TestHeaders:
    """Tests for header lines."""

    def test_levels(self):
        """Test that one to three hashes map to h1-h3."""
        assert render_markup("# Title") == "<h1>Title</h1>"
        assert render_markup("## Section") == "<h2>Section</h2>"
        assert render_markup("### Detail") == "<h3>Detail</h3>"

    def test_hash_without_space_is_text(self):
        """Test that a hash not followed by a space is not a header."""
        assert render_markup("#hashtag") == "<p>#hashtag</p>"

    def test_header_then_paragraph(self):
        """Test that a header block and a paragraph block are joined with a line break."""
        assert render_markup("# Title\n\nSome text") == "<h1>Title</h1><br><p>Some text</p>"


class TestInline:
    """Tests for bold and italic."""

    def test_bold(self):
        """Test that double asterisks become strong."""
        assert render_markup("Use **modifier 59** here") == "<p>Use <strong>modifier 59</strong> here</p>"

    def test_italic(self):
        """Test that single asterisks become em."""
        assert render_markup("An *important* note") == "<p>An <em>important</em> note</p>"

    def test_bold_before_italic(self):
        """Test that bold is matched before italic."""
        assert render_markup("**bold** and *italic*") == "<p><strong>bold</strong> and <em>italic</em></p>"

    def test_lone_asterisk_passes_through(self):
        """Test that unmatched markup is left as is."""
        assert render_markup("2 * 3") == "<p>2 * 3</p>"


class TestLists:
    """Tests for list items."""

    def test_consecutive_items_share_one_list(self):
        """Test that three bullet lines are wrapped in exactly one ul."""
        html = render_markup("- A\n- B\n- C")
        assert html == "<ul><li>A</li><br><li>B</li><br><li>C</li></ul>"
        assert html.count("<ul>") == 1

    def test_numbered_items_become_unordered(self):
        """Test that numbered lists are rendered as ul too."""
        assert render_markup("1. One\n2. Two") == "<ul><li>One</li><br><li>Two</li></ul>"

    def test_separate_lists(self):
        """Test that lists separated by a paragraph are wrapped separately."""
        html = render_markup("- A\n\nText\n\n- B")
        assert html.count("<ul>") == 2
        assert "Text" in html

    def test_dash_without_space_is_text(self):
        """Test that a dash must be followed by a space."""
        assert render_markup("-not a list") == "<p>-not a list</p>"


class TestParagraphs:
    """Tests for paragraphs and line breaks."""

    def test_single_newline_becomes_br(self):
        """Test that single newlines inside a paragraph become br."""
        assert render_markup("Line one\nLine two") == "<p>Line one<br>Line two</p>"

    def test_paragraph_is_trimmed(self):
        """Test that surrounding spaces are removed from paragraphs."""
        assert render_markup("  padded  ") == "<p>padded</p>"

    def test_empty_input(self):
        """Test that empty content renders to an empty string."""
        assert render_markup("") == ""

    def test_html_passes_through(self):
        """Test that blocks already starting with a tag are not wrapped."""
        assert render_markup('<div class="note">Hi</div>') == '<div class="note">Hi</div>'


class TestNotIdempotent:
    """Rendering rendered output again is not a no-op."""

    def test_second_pass_wraps_list_again(self):
        """Test that re-rendering list output nests another ul."""
        first = render_markup("- A\n- B")
        second = render_markup(first)
        assert first == "<ul><li>A</li><br><li>B</li></ul>"
        assert second == "<ul><ul><li>A</li><br><li>B</li></ul></ul>"
