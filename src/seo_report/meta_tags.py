"""Meta tag extraction: title, description, keywords and canonical URL."""

from seo_report.markup import AbstractMarkup
from seo_report.models import MetaTagFindings


class MetaTagAnalyzer:
    """Extracts the meta tags that feed the meta tag score.

    Absent elements yield empty strings or an empty keyword list; this never
    raises.
    """

    def analyze(self, document: AbstractMarkup) -> MetaTagFindings:
        """Extract meta tag findings from a parsed document.

        Args:
            document: Parsed markup

        Returns:
            MetaTagFindings for the page
        """
        title_tag = document.first("title")
        title = document.text(title_tag) if title_tag is not None else ""

        description_tag = document.first("meta", {"name": "description"})
        description = document.attr(description_tag, "content") if description_tag is not None else ""

        keywords_tag = document.first("meta", {"name": "keywords"})
        keywords_content = document.attr(keywords_tag, "content") if keywords_tag is not None else ""
        keywords = tuple(k.strip() for k in keywords_content.split(",") if k.strip())

        canonical_tag = document.first("link", {"rel": "canonical"})
        canonical = document.attr(canonical_tag, "href") if canonical_tag is not None else ""

        return MetaTagFindings(
            title=title,
            description=description,
            keywords=keywords,
            canonical=canonical,
        )
