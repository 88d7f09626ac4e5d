"""Cached work detail bundle (work + author names + subjects)."""

DETAIL_DDL = """
CREATE TABLE IF NOT EXISTS cached_detail (
    work_key VARCHAR PRIMARY KEY,
    payload VARCHAR NOT NULL,
    updated_at BIGINT NOT NULL
)
"""
