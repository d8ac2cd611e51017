"""Tests for the CSS scanner."""

import pytest
from ..core.scanner import CssScanner, RegionKind, ScanState, scan
from ..utils.error import MalformedCssError

def kinds(text, **kwargs):
    return [region.kind for region in scan(text, **kwargs)]

class TestRegions:
    """Tests for region boundaries."""

    def test_regions_partition_text(self, sample_css):
        """Joining region texts yields the input."""
        text = sample_css + '/* c */ a { content: "x" } b { background: url( "y.png" ) }'
        regions = scan(text)
        assert ''.join(region.text for region in regions) == text
        for previous, current in zip(regions, regions[1:]):
            assert previous.end == current.start
        assert regions[0].start == 0
        assert regions[-1].end == len(text)

    def test_empty_text(self):
        """Empty text has no regions."""
        assert scan('') == []

    def test_plain_code(self):
        """Text without triggers is a single code region."""
        regions = scan('a { color: red; }')
        assert len(regions) == 1
        assert regions[0].kind is RegionKind.CODE

    def test_comment(self):
        """Comments are delimited by /* and */."""
        regions = scan('a/* x */b')
        assert [r.kind for r in regions] == [RegionKind.CODE, RegionKind.COMMENT, RegionKind.CODE]
        assert regions[1].text == '/* x */'

    def test_strings(self):
        """Single and double quoted strings with escaped quotes."""
        regions = scan('a{content:"say \\"hi\\"";quotes:\'\\\'\'}')
        strings = [r.text for r in regions if r.kind is RegionKind.STRING]
        assert strings == ['"say \\"hi\\""', "'\\''"]

    def test_comment_markers_inside_string(self):
        """Comment openers inside strings do not start comments."""
        assert kinds('a{content:"/* no */"}') == [RegionKind.CODE, RegionKind.STRING, RegionKind.CODE]

    def test_quotes_inside_comment(self):
        """Quotes inside comments do not start strings."""
        assert kinds("/* it's */a") == [RegionKind.COMMENT, RegionKind.CODE]

    def test_unquoted_url(self):
        """Unquoted url() ends at the closing parenthesis."""
        regions = scan('a{background:url(data:image/png;base64,/*x*/AAA)}')
        urls = [r.text for r in regions if r.kind is RegionKind.URL]
        assert urls == ['url(data:image/png;base64,/*x*/AAA)']

    def test_quoted_url(self):
        """A quoted url() argument may contain parentheses."""
        regions = scan('a{background:url( "a(1).png" )}')
        urls = [r.text for r in regions if r.kind is RegionKind.URL]
        assert urls == ['url( "a(1).png" )']

    def test_url_is_case_insensitive(self):
        """URL( starts a url region."""
        assert RegionKind.URL in kinds('a{background:URL(a.png)}')

    def test_url_inside_identifier(self):
        """A function merely ending in url( is code."""
        assert kinds('a{b:myurl(x)}') == [RegionKind.CODE]

    def test_escaped_quote_in_code(self):
        """Escaped quotes in selectors do not start strings."""
        assert kinds('.a\\"b{color:red}') == [RegionKind.CODE]

class TestHackComments:
    """Tests for browser hack detection."""

    def test_mac_ie_hack(self):
        """A comment ending in a backslash and the next comment are hacks."""
        regions = scan('/* \\*/ .a{} /* x */ .b{} /* y */')
        comments = [r.kind for r in regions if r.kind is not RegionKind.CODE]
        assert comments == [RegionKind.HACK_COMMENT, RegionKind.HACK_COMMENT, RegionKind.COMMENT]

    def test_ie7_hack(self):
        """An empty comment after a child combinator is a hack."""
        assert RegionKind.HACK_COMMENT in kinds('html>/**/body{}')
        assert RegionKind.HACK_COMMENT in kinds('html> /**/body{}')

    def test_empty_comment_elsewhere(self):
        """Empty comments are ordinary elsewhere."""
        assert RegionKind.HACK_COMMENT not in kinds('a/**/b{}')

    @pytest.mark.timeout(10)
    def test_many_empty_comments(self):
        """Hack detection does not rescan the text before each comment."""
        regions = scan('html>/**/body{}\n' * 50000)
        assert sum(r.kind is RegionKind.HACK_COMMENT for r in regions) == 50000

class TestStates:
    """Tests for individual transitions."""

    def test_initial_state(self):
        """Scanner starts in the normal state."""
        assert CssScanner('a').state is ScanState.NORMAL

    @pytest.mark.parametrize('text, state', [
        ('/*', ScanState.IN_COMMENT),
        ("'", ScanState.IN_SINGLE_QUOTE_STRING),
        ('"', ScanState.IN_DOUBLE_QUOTE_STRING),
        ('url(', ScanState.IN_URL),
    ])
    def test_normal_transitions(self, text, state):
        """Triggers move the scanner out of the normal state."""
        scanner = CssScanner('a ' + text + 'b')
        scanner._scan_normal()
        assert scanner.state is state
        assert scanner.pos == 2 + len(text)

    def test_comment_returns_to_normal(self):
        """The end of a comment returns to the normal state."""
        scanner = CssScanner('/* x */a')
        scanner._scan_normal()
        scanner._scan_comment()
        assert scanner.state is ScanState.NORMAL
        assert scanner.regions[-1].kind is RegionKind.COMMENT

class TestUnterminated:
    """Tests for unterminated constructs."""

    @pytest.mark.parametrize('text', [
        'a{} /* never closed',
        'a{content:"never closed}',
        "a{content:'never closed}",
        'a{background:url(never closed}',
        'a{background:url("never closed)}',
    ])
    def test_strict_mode_raises(self, text):
        """Strict mode rejects unterminated constructs."""
        with pytest.raises(MalformedCssError):
            scan(text, strict=True)

    def test_recovery_treats_remainder_as_code(self):
        """Lenient mode turns the remainder into code."""
        regions = scan('a{} /* never closed', strict=False)
        assert ''.join(r.text for r in regions) == 'a{} /* never closed'
        assert all(r.kind is RegionKind.CODE for r in regions)
