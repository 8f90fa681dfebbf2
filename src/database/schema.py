"""
PostgreSQL schema for accounts and messages
"""

# username carries a UNIQUE constraint so concurrent registrations cannot both insert
ACCOUNT_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS account (
    account_id SERIAL PRIMARY KEY,
    username VARCHAR(255) NOT NULL UNIQUE,
    password VARCHAR(255) NOT NULL
)
"""

MESSAGE_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS message (
    message_id SERIAL PRIMARY KEY,
    posted_by INTEGER NOT NULL REFERENCES account(account_id),
    message_text VARCHAR(255) NOT NULL,
    time_posted_epoch BIGINT
)
"""

MESSAGE_POSTED_BY_INDEX_DDL = """
CREATE INDEX IF NOT EXISTS idx_message_posted_by ON message (posted_by)
"""

SCHEMA_STATEMENTS = [
    ACCOUNT_TABLE_DDL,
    MESSAGE_TABLE_DDL,
    MESSAGE_POSTED_BY_INDEX_DDL,
]
