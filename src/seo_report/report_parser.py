"""Read exported reports back in.

``load_json`` restores a full AnalysisReport. ``parse_csv`` recovers the
camelCase report dict from the sectioned CSV layout written by
ReportGenerator.to_csv, which is enough to check that scores and finding
counts survive an export.
"""

import csv
import io
import json
from typing import Any, Dict, List

from seo_report.models import AnalysisReport
from seo_report.report_generator import (
    CSV_CRITICAL_ISSUES,
    CSV_HEADINGS,
    CSV_IMAGES,
    CSV_KEYWORDS,
    CSV_META_TAGS,
    CSV_MODERATE_ISSUES,
    CSV_NONE,
    CSV_PAGE_SPEED,
    CSV_RECOMMENDATIONS,
    CSV_SCORES,
    CSV_TITLE,
    CSV_URL_ANALYSIS,
)

SCORE_KEYS = {
    "Overall": "overall",
    "Meta Tags": "metaTags",
    "Content Structure": "contentStructure",
    "Image Optimization": "imageOptimization",
    "Page Speed": "pageSpeed",
}


def load_json(text: str) -> AnalysisReport:
    return AnalysisReport.from_dict(json.loads(text))


def _split_sections(text: str) -> Dict[str, List[List[str]]]:
    """Group CSV rows into sections keyed by their title row."""
    sections: Dict[str, List[List[str]]] = {}
    current: List[List[str]] = []

    for row in csv.reader(io.StringIO(text)):
        if not row:
            if current:
                sections[current[0][0]] = current[1:]
            current = []
            continue
        current.append(row)

    if current:
        sections[current[0][0]] = current[1:]
    return sections


def _leading_int(value: str) -> int:
    """'42 characters' -> 42, '87/100' -> 87."""
    return int(value.split()[0].split("/")[0])


def _issues(rows: List[List[str]]) -> List[str]:
    issues = [row[0] for row in rows]
    return [] if issues == [CSV_NONE] else issues


def parse_csv(text: str) -> Dict[str, Any]:
    """Parse a CSV export back into a report dict.

    Args:
        text: CSV produced by ReportGenerator.to_csv

    Returns:
        Dict with the same top-level keys as AnalysisReport.to_dict
    """
    sections = _split_sections(text)

    header = {row[0]: row[1] if len(row) > 1 else "" for row in sections.get(CSV_TITLE, [])}

    scores = {
        SCORE_KEYS[row[0]]: int(row[1])
        for row in sections.get(CSV_SCORES, [])[1:]
        if row[0] in SCORE_KEYS
    }

    meta_rows = sections.get(CSV_META_TAGS, [])
    meta_tags: Dict[str, Any] = {}
    previous = None
    for row in meta_rows:
        label, value = row[0], row[1] if len(row) > 1 else ""
        if label == "Length" and previous in ("title", "description"):
            meta_tags[f"{previous}Length"] = _leading_int(value)
        elif label == "Keywords":
            meta_tags["keywords"] = [k.strip() for k in value.split(",") if k.strip()]
        else:
            meta_tags[label.lower()] = value
        previous = label.lower()

    headings = [
        {"level": row[0], "content": row[1], "status": row[2]}
        for row in sections.get(CSV_HEADINGS, [])[1:]
    ]
    images = [
        {"filename": row[0], "altText": row[1], "status": row[2]}
        for row in sections.get(CSV_IMAGES, [])[1:]
    ]
    keywords = [
        {"keyword": row[0], "density": float(row[1].rstrip("%")), "status": row[2]}
        for row in sections.get(CSV_KEYWORDS, [])[1:]
    ]

    url_rows = {row[0]: row[1] for row in sections.get(CSV_URL_ANALYSIS, [])}
    url_analysis = None
    if url_rows:
        url_analysis = {
            "length": _leading_int(url_rows["Length"]),
            "containsUnderscores": url_rows["Contains Underscores"] == "Yes",
            "httpsEnabled": url_rows["HTTPS Enabled"] == "Yes",
            "mobileFriendly": url_rows["Mobile Friendly"] == "Yes",
            "wwwRedirectNote": url_rows["WWW Redirect"],
        }

    speed_rows = {row[0]: row[1] for row in sections.get(CSV_PAGE_SPEED, [])}
    page_speed = None
    if speed_rows:
        page_speed = {
            "desktopSpeed": _leading_int(speed_rows["Desktop Speed"]),
            "mobileSpeed": _leading_int(speed_rows["Mobile Speed"]),
            "criticalIssues": _issues(sections.get(CSV_CRITICAL_ISSUES, [])),
            "moderateIssues": _issues(sections.get(CSV_MODERATE_ISSUES, [])),
        }

    recommendations = [
        {"severity": row[0], "message": row[1]}
        for row in sections.get(CSV_RECOMMENDATIONS, [])[1:]
    ]

    return {
        "url": header.get("URL", ""),
        "domain": header.get("Domain", ""),
        "generatedAt": header.get("Date", ""),
        "scores": scores,
        "metaTags": meta_tags,
        "headings": headings,
        "images": images,
        "keywords": keywords,
        "urlAnalysis": url_analysis,
        "pageSpeed": page_speed,
        "recommendations": recommendations,
    }
