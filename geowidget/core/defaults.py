"""
Policy constants shared by the resolvers and the freshness check
"""

# Placeholder for any field that cannot be resolved
SENTINEL = "-"

# Name maps are always read in this locale
DEFAULT_LOCALE = "en"

# Two weeks plus one day
DEFAULT_STALE_THRESHOLD_SECONDS = 604800 * 2 + 86400

HEALTHY_REASON = "Check of databases passed"
STALE_REASON = "Database is stale ({label} build date: {build_date})"
BUILD_DATE_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
