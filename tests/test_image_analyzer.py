# tests/test_image_analyzer.py
"""Tests for the image alt text analyzer."""

import pytest

from seo_report.config import AnalysisThresholds
from seo_report.image_analyzer import ImageAnalyzer
from seo_report.markup import SoupMarkup
from seo_report.models import ImageStatus


class TestImageAnalyzer:
    """Test suite for ImageAnalyzer."""

    @pytest.fixture
    def analyzer(self):
        """Create an ImageAnalyzer instance."""
        return ImageAnalyzer()

    def test_analyzer_initialization(self, analyzer):
        """Test analyzer uses default thresholds."""
        assert analyzer.thresholds.generic_alt_min_length == 10

    @pytest.mark.parametrize("alt, expected", [
        ("", ImageStatus.MISSING),
        ("pic", ImageStatus.TOO_GENERIC),
        ("   short   ", ImageStatus.TOO_GENERIC),
        ("Company icon in the header", ImageStatus.TOO_GENERIC),
        ("An image of the office", ImageStatus.TOO_GENERIC),
        ("Red bicycle leaning against a brick wall", ImageStatus.DESCRIPTIVE),
        ("Image of a red bicycle", ImageStatus.DESCRIPTIVE),
    ])
    def test_classify_alt(self, analyzer, alt, expected):
        """Test alt text classification, including case-sensitive generic words."""
        assert analyzer.classify_alt(alt) == expected

    def test_analyze_page(self, analyzer, sample_html):
        """Test findings are produced in document order."""
        findings = analyzer.analyze(SoupMarkup(sample_html))

        assert [f.filename for f in findings] == ["hero.webp", "logo.png"]
        assert findings[0].status == ImageStatus.DESCRIPTIVE
        assert findings[1].status == ImageStatus.MISSING
        assert findings[1].alt_text == ""

    def test_missing_alt_attribute(self, analyzer):
        """Test an image with no alt attribute is Missing."""
        findings = analyzer.analyze(SoupMarkup('<img src="a.png">'))
        assert findings[0].status == ImageStatus.MISSING

    @pytest.mark.parametrize("src, expected", [
        ("https://cdn.example.com/img/photo.jpg", "photo.jpg"),
        ("photo.jpg", "photo.jpg"),
        ("/assets/", "/assets/"),
        ("", ""),
    ])
    def test_filename(self, analyzer, src, expected):
        """Test filename is the last path segment, or src when that is empty."""
        findings = analyzer.analyze(SoupMarkup(f'<img src="{src}" alt="x">'))
        assert findings[0].filename == expected

    def test_custom_min_length(self):
        """Test the generic length threshold is configurable."""
        analyzer = ImageAnalyzer(AnalysisThresholds(generic_alt_min_length=3))
        assert analyzer.classify_alt("pic") == ImageStatus.DESCRIPTIVE

    def test_no_images(self, analyzer):
        """Test a page without images."""
        assert analyzer.analyze(SoupMarkup("<p>text</p>")) == []
