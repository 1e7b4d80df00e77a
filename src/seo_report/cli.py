"""Command-line interface for the SEO report engine."""

import sys
from pathlib import Path
from typing import Optional

from seo_report.analyzer import SEOAnalyzer
from seo_report.config import AnalysisThresholds, Config, settings
from seo_report.exceptions import SEOReportError
from seo_report.logging_config import setup_logging
from seo_report.models import AnalysisReport
from seo_report.report_generator import EXPORT_FORMATS, ReportGenerator
from seo_report.storage import InMemoryReportStore


SEVERITY_ICONS = {
    "critical": "🔴",
    "moderate": "🟠",
    "suggestion": "💡",
}


def print_report(report: AnalysisReport) -> None:
    """Print an analysis report in a formatted way.

    Args:
        report: AnalysisReport object
    """
    scores = report.scores
    print(f"\n{'=' * 60}")
    print(f"SEO Analysis for: {report.url}")
    print(f"Generated: {report.generated_at}")
    print(f"{'=' * 60}")
    print(f"\n📊 Overall Score: {scores.overall}/100")
    print(f"\nCategory Scores:")
    print(f"  • Meta Tags: {scores.meta_tags}/100")
    print(f"  • Content Structure: {scores.content_structure}/100")
    print(f"  • Image Optimization: {scores.image_optimization}/100")
    print(f"  • Page Speed: {scores.page_speed}/100")

    meta = report.meta_tags
    print(f"\n🏷️  Meta Tags:")
    print(f"  • Title ({meta.title_length} chars): {meta.title or '(missing)'}")
    print(f"  • Description ({meta.description_length} chars): {meta.description or '(missing)'}")
    print(f"  • Keywords: {', '.join(meta.keywords) or '(none)'}")
    print(f"  • Canonical: {meta.canonical or '(none)'}")

    if report.headings:
        print(f"\n📑 Headings:")
        for heading in report.headings:
            note = f" - {heading.message}" if heading.message else ""
            print(f"  • {heading.level} [{heading.status.value}] {heading.content}{note}")

    if report.images:
        print(f"\n🖼️  Images:")
        for image in report.images:
            print(f"  • {image.filename} [{image.status.value}] {image.alt_text}")

    if report.keywords:
        print(f"\n🔑 Keywords:")
        for keyword in report.keywords:
            print(f"  • {keyword.keyword}: {keyword.density:g}% ({keyword.status.value})")

    if report.url_analysis:
        url_analysis = report.url_analysis
        print(f"\n🔗 URL:")
        print(f"  • Length: {url_analysis.length} characters")
        print(f"  • Contains underscores: {'Yes' if url_analysis.contains_underscores else 'No'}")
        print(f"  • HTTPS: {'Yes' if url_analysis.https_enabled else 'No'}")

    if report.page_speed:
        speed = report.page_speed
        print(f"\n⚡ Estimated Page Speed: desktop {speed.desktop_speed}/100, mobile {speed.mobile_speed}/100")

    if report.recommendations:
        print(f"\n💡 Recommendations:")
        for rec in report.recommendations:
            icon = SEVERITY_ICONS.get(rec.severity.value, "•")
            print(f"  {icon} [{rec.severity.value}] {rec.message}")

    print(f"\n{'=' * 60}\n")


def _output_path(output_file: str, report_id: int, multiple: bool) -> Path:
    path = Path(output_file)
    if not multiple:
        return path
    return path.with_name(f"{path.stem}_{report_id}{path.suffix}")


def analyze_command(args):
    """Analyze one or more URLs for SEO."""
    config = Config.from_env()
    if args.timeout:
        config.timeout = args.timeout

    thresholds = (
        AnalysisThresholds.from_file(args.thresholds)
        if args.thresholds
        else AnalysisThresholds.from_env()
    )

    analyzer = SEOAnalyzer(config=config, thresholds=thresholds)
    generator = ReportGenerator()
    store = InMemoryReportStore()
    multiple = len(args.urls) > 1
    failures = 0

    try:
        for url in args.urls:
            try:
                report = analyzer.analyze_url(url)
            except SEOReportError as e:
                print(f"Error: {e}", file=sys.stderr)
                failures += 1
                continue

            stored = store.create(report)

            if args.output == "text":
                print_report(report)
            elif args.output_file:
                path = _output_path(args.output_file, stored.id, multiple)
                generator.write(report, args.output, path)
                print(f"Results written to {path}")
            else:
                print(generator.render(report, args.output))
    finally:
        analyzer.crawler.close()

    if args.output == "text" and len(store) > 1:
        print("Summary:")
        for stored in store.all():
            print(f"  #{stored.id} {stored.url}: {stored.overall_score}/100")

    if failures:
        sys.exit(1)


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="SEO Report - Fetch a page and produce a heuristic SEO quality report"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.LOG_LEVEL.upper(),
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help="Write logs to file in addition to console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze one or more URLs for SEO."
    )
    analyze_parser.add_argument(
        "urls", nargs="+", help="URLs to analyze (one or more)"
    )
    analyze_parser.add_argument(
        "--output",
        "-o",
        choices=["text", *EXPORT_FORMATS],
        default="text",
        help="Output format (default: text)",
    )
    analyze_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file (required for pdf; suffixed with the report id for several URLs)",
    )
    analyze_parser.add_argument(
        "--timeout",
        type=int,
        default=None,
        help=f"Request timeout in seconds (default: {settings.REQUEST_TIMEOUT})",
    )
    analyze_parser.add_argument(
        "--thresholds",
        help="JSON file with scoring thresholds",
    )
    analyze_parser.set_defaults(func=analyze_command)

    args = parser.parse_args(argv)

    if args.command == "analyze":
        if args.output == "pdf" and not args.output_file:
            analyze_parser.error("--output pdf requires --output-file")
        if args.output == "text" and args.output_file:
            analyze_parser.error("--output-file requires --output json, csv, html or pdf")

    # Configure logging based on flags
    setup_logging(
        level=args.log_level,
        log_file=getattr(args, 'log_file', None),
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
