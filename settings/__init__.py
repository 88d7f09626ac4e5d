"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("SHELF_DB_PATH", "shelf_cache.duckdb")

# Logging
LOG_DIR = Path("logs")

# API
API_BASE_URL = os.getenv("SHELF_API_URL", "https://openlibrary.org")
API_TIMEOUT = int(os.getenv("SHELF_API_TIMEOUT", "30"))
MAX_CONCURRENT = 10

# Covers
COVERS_BASE_URL = os.getenv("SHELF_COVERS_URL", "https://covers.openlibrary.org/b/id")
COVER_TIMEOUT = 6.0
COVER_MIN_BYTES = 500
PLACEHOLDER_COVER = "assets/no-cover.png"

# Prefetch
PREFETCH_GENRES = ("fiction", "fantasy", "romance", "mystery")
PREFETCH_PAGES = 3
PAGE_SIZE = 10
CACHE_TTL_MS = 7 * 24 * 60 * 60 * 1000
DETAIL_CONCURRENCY = 5
DETAILS_PER_PAGE_ESTIMATE = 5

# Display
UNKNOWN_AUTHOR = "Unknown author"
SUBJECTS_LIMIT = 8
