"""Tests for category scoring."""

import pytest

from seo_report.models import (
    HeadingFinding,
    HeadingStatus,
    ImageFinding,
    ImageStatus,
    MetaTagFindings,
    PageSpeedFindings,
)
from seo_report.scoring import Scorer


def heading(level, status=HeadingStatus.GOOD):
    return HeadingFinding(level=level, content="x", status=status)


def image(status):
    return ImageFinding(filename="a.png", alt_text="", status=status)


class TestScorer:
    """Test cases for Scorer."""

    @pytest.fixture
    def scorer(self):
        return Scorer()

    def test_meta_tags_empty_page(self, scorer):
        """Test no title, description, keywords or canonical."""
        assert scorer.meta_tags_score(MetaTagFindings()) == 30

    def test_meta_tags_perfect(self, scorer):
        """Test in-range lengths lose nothing."""
        meta = MetaTagFindings(
            title="t" * 45,
            description="d" * 120,
            keywords=("seo",),
            canonical="https://example.com/",
        )
        assert scorer.meta_tags_score(meta) == 100

    def test_meta_tags_length_penalties(self, scorer):
        """Test short title and long description penalties."""
        meta = MetaTagFindings(
            title="t" * 10,
            description="d" * 200,
            keywords=("seo",),
            canonical="https://example.com/",
        )
        assert scorer.meta_tags_score(meta) == 85

    def test_content_structure_single_h1(self, scorer):
        """Test one H1 and nothing else only loses the few-headings penalty."""
        assert scorer.content_structure_score([heading("H1")]) == 80

    def test_content_structure_no_headings(self, scorer):
        """Test an empty heading list."""
        assert scorer.content_structure_score([]) == 50

    def test_content_structure_warnings_and_errors(self, scorer):
        """Test per-heading penalties and the multiple H1 penalty."""
        headings = [
            heading("H1", HeadingStatus.WARNING),
            heading("H1", HeadingStatus.WARNING),
            heading("H2", HeadingStatus.ERROR),
        ]
        # 100 - 15 - 2*5 - 10
        assert scorer.content_structure_score(headings) == 65

    def test_content_structure_floor(self, scorer):
        """Test the score never drops below zero."""
        headings = [heading("H2", HeadingStatus.ERROR) for _ in range(20)]
        assert scorer.content_structure_score(headings) == 0

    def test_images_empty(self, scorer):
        """Test a page without images gets full marks."""
        assert scorer.image_optimization_score([]) == 100

    def test_images_mixed(self, scorer):
        """Test weighted missing and generic percentages."""
        images = [
            image(ImageStatus.MISSING),
            image(ImageStatus.TOO_GENERIC),
            image(ImageStatus.DESCRIPTIVE),
            image(ImageStatus.DESCRIPTIVE),
        ]
        # 100 - 0.7*25 - 0.3*25 = 75
        assert scorer.image_optimization_score(images) == 75

    def test_images_all_missing(self, scorer):
        """Test every image missing alt text."""
        assert scorer.image_optimization_score([image(ImageStatus.MISSING)] * 3) == 30

    def test_page_speed_is_desktop(self, scorer):
        """Test the page speed category mirrors the desktop estimate."""
        speed = PageSpeedFindings(desktop_speed=64, mobile_speed=45)
        assert scorer.page_speed_score(speed) == 64

    @pytest.mark.parametrize("scores, expected", [
        ((100, 100, 100, 100), 100),
        ((30, 80, 100, 100), 78),
        ((0, 0, 0, 2), 1),
        ((0, 0, 0, 1), 0),
    ])
    def test_overall_score(self, scores, expected):
        """Test the overall score is the rounded mean, halves rounding up."""
        assert Scorer.overall_score(*scores) == expected

    def test_score_all(self, scorer):
        """Test the combined result for a minimal page."""
        scores = scorer.score(
            MetaTagFindings(),
            [heading("H1")],
            [],
            PageSpeedFindings(desktop_speed=100, mobile_speed=70),
        )

        assert scores.meta_tags == 30
        assert scores.content_structure == 80
        assert scores.image_optimization == 100
        assert scores.page_speed == 100
        assert scores.overall == 78
        assert all(0 <= value <= 100 for value in scores.to_dict().values())
