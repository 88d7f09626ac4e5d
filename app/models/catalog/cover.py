"""Cached cover image (base64 data URL)."""

COVER_DDL = """
CREATE TABLE IF NOT EXISTS cached_cover (
    cover_id BIGINT PRIMARY KEY,
    image_data VARCHAR NOT NULL,
    updated_at BIGINT NOT NULL
)
"""
