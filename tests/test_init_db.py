"""
tests.test_init_db

Dialect-specific bootstrap statements, checked without a server.
"""

from __future__ import annotations

from sqlalchemy.dialects import postgresql, sqlite

from cashcard_service.db.init_db import id_sequence_sync_statement


def test_postgres_sequence_is_moved_past_seeded_ids() -> None:
    stmt = id_sequence_sync_statement(postgresql.dialect())
    assert stmt is not None
    sql = str(stmt)
    assert "setval(pg_get_serial_sequence('cash_cards', 'id')" in sql
    assert "SELECT MAX(id) FROM cash_cards" in sql


def test_sqlite_needs_no_sequence_sync() -> None:
    assert id_sequence_sync_statement(sqlite.dialect()) is None
