"""Keyword density analysis based on plain frequency counting."""

import logging
import re
from collections import Counter
from typing import List, Optional

from seo_report.config import AnalysisThresholds, default_thresholds
from seo_report.markup import AbstractMarkup
from seo_report.models import KeywordFinding, KeywordStatus
from seo_report.utils import round_to_tenth

logger = logging.getLogger(__name__)

NON_WORD_PATTERN = re.compile(r"[^\w\s]")


class KeywordDensityAnalyzer:
    """Computes the density of the most frequent body-text tokens.

    Density is ``100 * count / total`` where total is the number of tokens
    left after the length filter (duplicates included).
    """

    def __init__(self, thresholds: Optional[AnalysisThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    def analyze(self, document: AbstractMarkup) -> List[KeywordFinding]:
        """Analyze keyword density of the page body.

        Args:
            document: Parsed markup

        Returns:
            Up to ``top_keywords_count`` findings, densest first
        """
        return self.analyze_text(document.body_text())

    def analyze_text(self, text: str) -> List[KeywordFinding]:
        """Analyze keyword density of raw text.

        Args:
            text: Text to tokenize

        Returns:
            Keyword findings sorted by density, descending
        """
        words = self._tokenize(text)
        total_words = len(words)
        if total_words == 0:
            return []

        word_counts = Counter(words)

        # Counter keeps first-seen order; sorted() is stable, so ties stay in that order
        top_words = sorted(
            word_counts.items(), key=lambda item: item[1], reverse=True
        )[:self.thresholds.top_keywords_count]

        findings = []
        for word, count in top_words:
            density = count / total_words * 100
            findings.append(KeywordFinding(
                keyword=word,
                density=round_to_tenth(density),
                status=self.classify_density(density),
            ))

        logger.debug(f"Keyword density: {total_words} qualifying tokens, {len(word_counts)} distinct")
        return findings

    def classify_density(self, density: float) -> KeywordStatus:
        """Classify an unrounded density percentage."""
        if density > self.thresholds.keyword_over_optimized:
            return KeywordStatus.OVER_OPTIMIZED
        if density < self.thresholds.keyword_under_optimized:
            return KeywordStatus.UNDER_OPTIMIZED
        return KeywordStatus.GOOD

    def _tokenize(self, text: str) -> List[str]:
        tokens = (NON_WORD_PATTERN.sub("", token) for token in text.lower().split())
        return [token for token in tokens if len(token) > self.thresholds.keyword_min_length]
