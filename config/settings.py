"""
Configuration settings for SportsCatalog.

Centralized constants for the catalog and its logging.
"""

import os

# Rating bounds (inclusive)
MIN_STARS = 0
MAX_STARS = 5

# Rating description: "<stars> : <comment>"
RATING_SEPARATOR = " : "

# Logging
LOG_LEVEL = os.getenv("SPORTS_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
