"""Heading structure analysis (H1-H6)."""

import logging
from dataclasses import replace
from typing import List

from seo_report.constants import (
    EMPTY_HEADING_MESSAGE,
    HEADING_LEVELS,
    MULTIPLE_H1_MESSAGE,
    SKIPPED_LEVEL_MESSAGE,
)
from seo_report.markup import AbstractMarkup
from seo_report.models import HeadingFinding, HeadingStatus

logger = logging.getLogger(__name__)


class HeadingAnalyzer:
    """Builds one finding per heading element and flags structural defects.

    Works in two passes. The first visits levels 1 through 6 in order and, for
    each level, every heading of that level in document order, applying the
    per-element rules (empty heading, multiple H1s). The second pass looks at
    the distinct levels present and marks every heading sitting below a
    skipped level as a warning, overwriting whatever the first pass decided.

    Output order is therefore grouped by level: all H1s, then all H2s, and so
    on.
    """

    def analyze(self, document: AbstractMarkup) -> List[HeadingFinding]:
        """Analyze the heading structure of a parsed document.

        Args:
            document: Parsed markup

        Returns:
            Heading findings, grouped by level
        """
        findings = self._check_elements(document)
        findings = self._check_hierarchy(findings)
        return findings

    def _check_elements(self, document: AbstractMarkup) -> List[HeadingFinding]:
        findings: List[HeadingFinding] = []
        h1_count = document.count("h1")

        for level in HEADING_LEVELS:
            for element in document.select(f"h{level}"):
                content = document.text(element).strip()

                if not content:
                    status, message = HeadingStatus.ERROR, EMPTY_HEADING_MESSAGE
                elif level == 1 and h1_count > 1:
                    status, message = HeadingStatus.WARNING, MULTIPLE_H1_MESSAGE
                else:
                    status, message = HeadingStatus.GOOD, None

                findings.append(HeadingFinding(
                    level=f"H{level}",
                    content=content,
                    status=status,
                    message=message,
                ))

        return findings

    def _check_hierarchy(self, findings: List[HeadingFinding]) -> List[HeadingFinding]:
        levels = sorted({finding.depth for finding in findings})

        skipped = {}
        for previous, current in zip(levels, levels[1:]):
            if current > previous + 1:
                skipped[current] = SKIPPED_LEVEL_MESSAGE.format(level=current - 1)

        if skipped:
            logger.debug(f"Heading levels present: {levels}, skipped below: {sorted(skipped)}")

        return [
            replace(finding, status=HeadingStatus.WARNING, message=skipped[finding.depth])
            if finding.depth in skipped else finding
            for finding in findings
        ]
