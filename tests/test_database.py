# /tests/test_database.py

from app.db.database import DatabaseHandle, normalize_database_url


def test_legacy_postgres_scheme_is_rewritten():
    assert normalize_database_url(" postgres://u:p@localhost/db ") == "postgresql://u:p@localhost/db"
    assert normalize_database_url("postgresql://u:p@localhost/db") == "postgresql://u:p@localhost/db"
    assert normalize_database_url("sqlite:///./waitlist.db") == "sqlite:///./waitlist.db"


def test_handle_accepts_legacy_postgres_url():
    handle = DatabaseHandle("postgres://u:p@localhost/db")

    # No connection is attempted until a session is used.
    assert handle.is_configured
    assert handle.database_url == "postgresql://u:p@localhost/db"
    handle.dispose()


def test_unknown_dialect_leaves_handle_unconfigured():
    handle = DatabaseHandle("nosuchdb://somewhere/db")

    assert not handle.is_configured
    assert handle.new_session() is None


def test_empty_url_is_unconfigured():
    assert not DatabaseHandle("").is_configured
    assert not DatabaseHandle(None).is_configured
