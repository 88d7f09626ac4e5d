"""Cached genre listing page."""

LISTING_PAGE_DDL = """
CREATE TABLE IF NOT EXISTS cached_listing_page (
    genre VARCHAR NOT NULL,
    page INTEGER NOT NULL,
    payload VARCHAR NOT NULL,
    updated_at BIGINT NOT NULL,
    PRIMARY KEY (genre, page)
)
"""
