"""Report exporters: JSON, CSV, HTML (Jinja2) and PDF (ReportLab)."""

import csv
import io
import json
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Union
from xml.sax.saxutils import escape

from jinja2 import Environment, FileSystemLoader, select_autoescape
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from seo_report.constants import AVERAGE_SCORE_THRESHOLD, GOOD_SCORE_THRESHOLD
from seo_report.models import AnalysisReport

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

EXPORT_FORMATS = ("json", "csv", "html", "pdf")

# CSV section titles, shared with report_parser
CSV_TITLE = "SEO Analysis Report"
CSV_SCORES = "Scores"
CSV_META_TAGS = "Meta Tags"
CSV_HEADINGS = "Heading Structure"
CSV_IMAGES = "Images"
CSV_KEYWORDS = "Keywords"
CSV_URL_ANALYSIS = "URL Analysis"
CSV_PAGE_SPEED = "Page Speed"
CSV_CRITICAL_ISSUES = "Critical Issues"
CSV_MODERATE_ISSUES = "Moderate Issues"
CSV_RECOMMENDATIONS = "SEO Recommendations"
CSV_NONE = "None"

SCORE_LABELS = (
    ("Overall", "overall"),
    ("Meta Tags", "meta_tags"),
    ("Content Structure", "content_structure"),
    ("Image Optimization", "image_optimization"),
    ("Page Speed", "page_speed"),
)

STATUS_COLORS = {
    "good": colors.HexColor("#10b981"),
    "average": colors.HexColor("#f59e0b"),
    "poor": colors.HexColor("#ef4444"),
}


def score_status(score: int) -> str:
    """Band a score as good, average or poor."""
    if score >= GOOD_SCORE_THRESHOLD:
        return "good"
    if score >= AVERAGE_SCORE_THRESHOLD:
        return "average"
    return "poor"


def format_density(density: float) -> str:
    return f"{density:g}%"


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"


class ReportGenerator:
    """Renders an AnalysisReport to the supported export formats.

    Every exporter takes the whole report read-only and reproduces all of its
    fields.
    """

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize report generator.

        Args:
            template_dir: Directory containing Jinja2 templates (defaults to
                the templates shipped with the package)
        """
        template_path = Path(template_dir) if template_dir else TEMPLATE_DIR

        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(["html", "j2"]),
        )
        self.env.filters['score_status'] = score_status
        self.env.filters['density'] = format_density
        self.env.filters['yes_no'] = yes_no

    def to_json(self, report: AnalysisReport, indent: Optional[int] = 2) -> str:
        return json.dumps(report.to_dict(), indent=indent, ensure_ascii=False)

    def to_csv(self, report: AnalysisReport) -> str:
        """Render the sectioned CSV report. Sections are separated by blank rows."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\r\n")
        meta = report.meta_tags

        rows: List[list] = [
            [CSV_TITLE],
            ["Domain", report.domain],
            ["URL", report.url],
            ["Date", report.generated_at],
            [],
            [CSV_SCORES],
            ["Category", "Score", "Maximum"],
        ]
        rows.extend([label, getattr(report.scores, attr), 100] for label, attr in SCORE_LABELS)
        rows.extend([
            [],
            [CSV_META_TAGS],
            ["Title", meta.title],
            ["Length", f"{meta.title_length} characters"],
            ["Description", meta.description],
            ["Length", f"{meta.description_length} characters"],
            ["Keywords", ", ".join(meta.keywords)],
            ["Canonical", meta.canonical],
            [],
            [CSV_HEADINGS],
            ["Type", "Content", "Status"],
        ])
        rows.extend([h.level, h.content, h.status.value] for h in report.headings)
        rows.extend([[], [CSV_IMAGES], ["Image", "Alt Text", "Status"]])
        rows.extend([i.filename, i.alt_text, i.status.value] for i in report.images)
        rows.extend([[], [CSV_KEYWORDS], ["Keyword", "Density", "Status"]])
        rows.extend([k.keyword, format_density(k.density), k.status.value] for k in report.keywords)

        if report.url_analysis:
            url_analysis = report.url_analysis
            rows.extend([
                [],
                [CSV_URL_ANALYSIS],
                ["Length", f"{url_analysis.length} characters"],
                ["Contains Underscores", yes_no(url_analysis.contains_underscores)],
                ["HTTPS Enabled", yes_no(url_analysis.https_enabled)],
                ["Mobile Friendly", yes_no(url_analysis.mobile_friendly)],
                ["WWW Redirect", url_analysis.www_redirect_note],
            ])

        if report.page_speed:
            speed = report.page_speed
            rows.extend([
                [],
                [CSV_PAGE_SPEED],
                ["Desktop Speed", f"{speed.desktop_speed}/100"],
                ["Mobile Speed", f"{speed.mobile_speed}/100"],
                [],
                [CSV_CRITICAL_ISSUES],
            ])
            rows.extend([issue] for issue in speed.critical_issues or (CSV_NONE,))
            rows.extend([[], [CSV_MODERATE_ISSUES]])
            rows.extend([issue] for issue in speed.moderate_issues or (CSV_NONE,))

        rows.extend([[], [CSV_RECOMMENDATIONS], ["Type", "Recommendation"]])
        rows.extend([r.severity.value, r.message] for r in report.recommendations)

        writer.writerows(rows)
        return buffer.getvalue()

    def to_html(self, report: AnalysisReport) -> str:
        template = self.env.get_template('report.html.j2')
        return template.render(report=report, score_labels=SCORE_LABELS)

    def to_pdf(self, report: AnalysisReport) -> bytes:
        """Render an A4 PDF of the report."""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=15 * mm,
            rightMargin=15 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
            title=f"SEO Analysis Report - {report.domain}",
        )
        styles = getSampleStyleSheet()
        elements = []

        def para(text, style="Normal"):
            return Paragraph(escape(str(text)), styles[style])

        def table(header, body, col_widths=None):
            data = [header] + [[para(cell) for cell in row] for row in body]
            t = Table(data, colWidths=col_widths, repeatRows=1)
            t.setStyle(TableStyle([
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#3b82f6")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ]))
            return t

        elements.append(para("SEO Analysis Report", "Title"))
        elements.append(para(f"Domain: {report.domain}"))
        elements.append(para(f"URL: {report.url}"))
        elements.append(para(f"Generated: {report.generated_at}"))
        elements.append(Spacer(1, 6 * mm))

        overall_style = styles["Heading1"].clone(
            "Overall", textColor=STATUS_COLORS[score_status(report.scores.overall)]
        )
        elements.append(para("Overall SEO Score", "Heading2"))
        elements.append(Paragraph(f"{report.scores.overall}/100", overall_style))

        elements.append(para("Score Breakdown", "Heading2"))
        elements.append(table(
            ["Category", "Score", "Status"],
            [
                [label, f"{getattr(report.scores, attr)}/100", score_status(getattr(report.scores, attr)).upper()]
                for label, attr in SCORE_LABELS[1:]
            ],
        ))

        meta = report.meta_tags
        elements.append(para("Meta Tags Analysis", "Heading2"))
        elements.append(table(
            ["Element", "Content"],
            [
                ["Title", f"{meta.title} ({meta.title_length} characters)"],
                ["Description", f"{meta.description} ({meta.description_length} characters)"],
                ["Keywords", ", ".join(meta.keywords) or CSV_NONE],
                ["Canonical", meta.canonical or CSV_NONE],
            ],
            col_widths=[40 * mm, 140 * mm],
        ))

        elements.append(para("Heading Structure", "Heading2"))
        elements.append(table(
            ["Type", "Content", "Status"],
            [[h.level, h.content, h.status.value + (f" - {h.message}" if h.message else "")] for h in report.headings],
            col_widths=[20 * mm, 110 * mm, 50 * mm],
        ))

        elements.append(para("Images", "Heading2"))
        elements.append(table(
            ["Image", "Alt Text", "Status"],
            [[i.filename, i.alt_text, i.status.value] for i in report.images],
            col_widths=[55 * mm, 95 * mm, 30 * mm],
        ))

        elements.append(para("Keywords", "Heading2"))
        elements.append(table(
            ["Keyword", "Density", "Status"],
            [[k.keyword, format_density(k.density), k.status.value] for k in report.keywords],
        ))

        if report.url_analysis:
            url_analysis = report.url_analysis
            elements.append(para("URL Analysis", "Heading2"))
            elements.append(table(
                ["Check", "Result"],
                [
                    ["Length", f"{url_analysis.length} characters"],
                    ["Contains Underscores", yes_no(url_analysis.contains_underscores)],
                    ["HTTPS Enabled", yes_no(url_analysis.https_enabled)],
                    ["Mobile Friendly", yes_no(url_analysis.mobile_friendly)],
                    ["WWW Redirect", url_analysis.www_redirect_note],
                ],
            ))

        if report.page_speed:
            speed = report.page_speed
            elements.append(para("Page Speed", "Heading2"))
            elements.append(table(
                ["Metric", "Value"],
                [
                    ["Desktop Speed", f"{speed.desktop_speed}/100"],
                    ["Mobile Speed", f"{speed.mobile_speed}/100"],
                    ["Critical Issues", "; ".join(speed.critical_issues) or CSV_NONE],
                    ["Moderate Issues", "; ".join(speed.moderate_issues) or CSV_NONE],
                ],
                col_widths=[40 * mm, 140 * mm],
            ))

        elements.append(para("SEO Recommendations", "Heading2"))
        elements.append(table(
            ["Type", "Recommendation"],
            [[r.severity.value.upper(), r.message] for r in report.recommendations],
            col_widths=[30 * mm, 150 * mm],
        ))

        doc.build(elements)
        return buffer.getvalue()

    def render(self, report: AnalysisReport, fmt: str) -> Union[str, bytes]:
        """Render a report in one of EXPORT_FORMATS."""
        renderers = {
            "json": self.to_json,
            "csv": self.to_csv,
            "html": self.to_html,
            "pdf": self.to_pdf,
        }
        if fmt not in renderers:
            raise ValueError(f"Unsupported export format: {fmt}")
        return renderers[fmt](report)

    def write(self, report: AnalysisReport, fmt: str, path: Union[str, Path]) -> Path:
        """Render a report and write it to a file.

        Args:
            report: The report to export
            fmt: One of EXPORT_FORMATS
            path: Destination file

        Returns:
            The path written
        """
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        content = self.render(report, fmt)
        if isinstance(content, bytes):
            output_path.write_bytes(content)
        else:
            # newline="" keeps the CSV \r\n line endings intact
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                f.write(content)

        logger.info(f"Wrote {fmt} report for {report.url} to {output_path}")
        return output_path

    @staticmethod
    def default_filename(report: AnalysisReport, fmt: str) -> str:
        """e.g. SEO_Report_example.com_2026-10-17.csv"""
        return f"SEO_Report_{report.domain}_{date.today().isoformat()}.{fmt}"
