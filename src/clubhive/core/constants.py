"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STORE_NAMESPACE = "clubhive"
PASS_TOKEN_PREFIX = "CLUBHIVE"
REPORT_FILE_SUFFIX = "_report.json"
