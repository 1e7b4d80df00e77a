# src/seo_report/constants.py
"""Centralized constants for the SEO report engine.

Fixed penalties, messages and defaults used across the analyzers. For
user-configurable thresholds, see config.py and AnalysisThresholds.
"""

# =============================================================================
# Fetching
# =============================================================================

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SEOAnalyzer/1.0; +http://seoanalyzer.com)"

ALLOWED_URL_SCHEMES = ("http", "https")


# =============================================================================
# Headings
# =============================================================================

HEADING_LEVELS = range(1, 7)

EMPTY_HEADING_MESSAGE = "Empty heading"
MULTIPLE_H1_MESSAGE = "Multiple H1 headings (should have only one)"
SKIPPED_LEVEL_MESSAGE = "Skipped H{level} in hierarchy"


# =============================================================================
# Images
# =============================================================================

# Case-sensitive substrings that mark an alt text as generic
GENERIC_ALT_WORDS = ("image", "picture", "icon")


# =============================================================================
# URL analysis
# =============================================================================

# Not measured; reported as fixed values
MOBILE_FRIENDLY_PLACEHOLDER = True
WWW_REDIRECT_PLACEHOLDER = "Properly configured"


# =============================================================================
# Page speed issues
# =============================================================================

TOO_MANY_IMAGES_ISSUE = "Too many images (more than {limit})"
RENDER_BLOCKING_JS_ISSUE = "Render-blocking JavaScript ({count} scripts)"
LARGE_HTML_ISSUE = "Large HTML document size"
NO_PRELOAD_ISSUE = "No preloaded resources"
MISSING_VIEWPORT_ISSUE = "Missing viewport meta tag"


# =============================================================================
# Scoring penalties
# =============================================================================

MAX_SCORE = 100
MIN_SCORE = 0

MISSING_TITLE_PENALTY = 30
SHORT_TITLE_PENALTY = 10
LONG_TITLE_PENALTY = 5
MISSING_DESCRIPTION_PENALTY = 25
SHORT_DESCRIPTION_PENALTY = 10
LONG_DESCRIPTION_PENALTY = 5
MISSING_KEYWORDS_PENALTY = 10
MISSING_CANONICAL_PENALTY = 5

MISSING_H1_PENALTY = 30
MULTIPLE_H1_PENALTY = 15
WARNING_HEADING_PENALTY = 5
ERROR_HEADING_PENALTY = 10
FEW_HEADINGS_PENALTY = 20

MISSING_ALT_WEIGHT = 0.7
GENERIC_ALT_WEIGHT = 0.3

# Score bands used by the exporters
GOOD_SCORE_THRESHOLD = 80
AVERAGE_SCORE_THRESHOLD = 50


# =============================================================================
# Recommendations
# =============================================================================

ADD_TITLE_MESSAGE = "Add a title tag to your page"
SHORTEN_TITLE_MESSAGE = "Shorten your title tag to less than {limit} characters (currently {length})"
ADD_DESCRIPTION_MESSAGE = "Add a meta description to your page"
SHORTEN_DESCRIPTION_MESSAGE = "Shorten your meta description to 120-155 characters (currently {length})"
ADD_H1_MESSAGE = "Add an H1 heading to your page"
SINGLE_H1_MESSAGE = "Use only one H1 heading per page"
FIX_HIERARCHY_MESSAGE = "Fix heading hierarchy issues (avoid skipping heading levels)"
GENERIC_ALT_MESSAGE = "Make generic alt texts more descriptive"
REDUCE_DENSITY_MESSAGE = "Reduce keyword density for {keywords}"
IMPROVE_SPEED_MESSAGE = "Improve page loading speed"
SOCIAL_TAGS_SUGGESTION = "Add Open Graph and Twitter Card meta tags for better social sharing"
STRUCTURED_DATA_SUGGESTION = "Implement structured data (Schema.org) to enhance search results appearance"
