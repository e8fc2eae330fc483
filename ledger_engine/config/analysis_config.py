"""
Analysis configuration for ledger summaries.
Contains name extraction thresholds, display settings and dashboard limits.
"""

# Analysis Configuration
ANALYSIS_CONFIG = {
    "names": {
        # Shorter tokens are dropped before a name is formed
        "min_token_length": 2,
        # A lone remaining token is only a name at this length or more
        "min_single_name_length": 3,
        # Leading tokens joined to form the name
        "max_name_words": 2,
    },
    "display": {
        "decimal_places": 2,
    },
    # Spreadsheet rows: first row holds the headers
    "min_grid_rows": 2,
}

# Dashboard Configuration
DASHBOARD_CONFIG = {
    "max_content_length": 50 * 1024 * 1024,  # 50MB
    "allowed_extensions": {"xlsx", "csv"},
    "port": 5001,
}
