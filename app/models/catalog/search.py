"""Cached search results, keyed by normalized query and page."""

SEARCH_RESULT_DDL = """
CREATE TABLE IF NOT EXISTS cached_search_result (
    query VARCHAR NOT NULL,
    page INTEGER NOT NULL,
    data VARCHAR NOT NULL,
    created_at BIGINT NOT NULL,
    PRIMARY KEY (query, page)
)
"""
