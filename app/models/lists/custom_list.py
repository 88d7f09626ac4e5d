"""User-defined list (collection)."""

CUSTOM_LIST_SEQUENCE = "CREATE SEQUENCE IF NOT EXISTS custom_list_id_seq START 1"

CUSTOM_LIST_DDL = """
CREATE TABLE IF NOT EXISTS custom_list (
    id INTEGER PRIMARY KEY DEFAULT nextval('custom_list_id_seq'),
    name VARCHAR NOT NULL UNIQUE,
    created_at BIGINT NOT NULL
)
"""
