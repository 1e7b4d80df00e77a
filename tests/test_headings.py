"""Tests for heading structure analysis."""

import pytest

from seo_report.headings import HeadingAnalyzer
from seo_report.markup import SoupMarkup
from seo_report.models import HeadingStatus


def analyze(html):
    return HeadingAnalyzer().analyze(SoupMarkup(html))


class TestHeadingAnalyzer:
    """Test cases for HeadingAnalyzer."""

    def test_well_formed_hierarchy(self):
        """Test every heading is Good when levels are contiguous."""
        findings = analyze("<h1>Title</h1><h2>Section</h2><h3>Detail</h3>")

        assert [f.level for f in findings] == ["H1", "H2", "H3"]
        assert all(f.status == HeadingStatus.GOOD for f in findings)
        assert all(f.message is None for f in findings)

    def test_grouped_by_level(self):
        """Test output is grouped by level, not document order."""
        findings = analyze("<h2>A</h2><h1>B</h1><h2>C</h2>")
        assert [(f.level, f.content) for f in findings] == [("H1", "B"), ("H2", "A"), ("H2", "C")]

    def test_skipped_level(self):
        """Test a heading below a skipped level is a warning."""
        findings = analyze("<h1>Title</h1><h3>Deep</h3>")

        h1, h3 = findings
        assert h1.status == HeadingStatus.GOOD
        assert h3.status == HeadingStatus.WARNING
        assert h3.message == "Skipped H2 in hierarchy"

    def test_skipped_level_names_the_level_above(self):
        """Test the message names the level directly above the gap."""
        findings = analyze("<h1>Title</h1><h2>Section</h2><h5>Tiny</h5>")
        assert findings[-1].message == "Skipped H4 in hierarchy"

    def test_multiple_h1(self):
        """Test every H1 is a warning when there are several."""
        findings = analyze("<h1>One</h1><h1>Two</h1><h2>Sub</h2>")

        h1s = [f for f in findings if f.level == "H1"]
        assert len(h1s) == 2
        assert all(f.status == HeadingStatus.WARNING for f in h1s)
        assert all(f.message == "Multiple H1 headings (should have only one)" for f in h1s)

    def test_empty_heading(self):
        """Test whitespace-only headings are errors."""
        findings = analyze("<h1>Title</h1><h2>   </h2>")

        assert findings[1].status == HeadingStatus.ERROR
        assert findings[1].message == "Empty heading"
        assert findings[1].content == ""

    def test_hierarchy_overrides_empty_error(self):
        """Test the hierarchy pass overwrites earlier statuses."""
        findings = analyze("<h1>Title</h1><h3></h3>")
        assert findings[1].status == HeadingStatus.WARNING
        assert findings[1].message == "Skipped H2 in hierarchy"

    def test_content_is_trimmed(self):
        """Test heading content is whitespace-trimmed."""
        findings = analyze("<h1>\n   Hello <span>world</span>  </h1>")
        assert findings[0].content == "Hello world"

    def test_no_headings(self):
        """Test a page without headings."""
        assert analyze("<p>No headings here</p>") == []

    @pytest.mark.parametrize("level", range(1, 7))
    def test_single_heading_of_any_level(self, level):
        """Test a lone heading never counts as a skipped level."""
        findings = analyze(f"<h{level}>Alone</h{level}>")
        assert findings[0].status == HeadingStatus.GOOD
