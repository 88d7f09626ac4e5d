"""List membership - one row per (list, work)."""

LIST_ENTRY_DDL = """
CREATE TABLE IF NOT EXISTS list_entry (
    list_id INTEGER NOT NULL,
    work_key VARCHAR NOT NULL,
    title VARCHAR NOT NULL,
    author VARCHAR,
    cover_id BIGINT,
    first_publish_year INTEGER,
    added_at BIGINT NOT NULL,
    PRIMARY KEY (list_id, work_key)
)
"""
