"""Pytest configuration and shared fixtures for scopefilter tests."""

import sqlite3

import pytest

from scopefilter.core.config import get_settings
from scopefilter.models.auth import SignedInUser
from scopefilter.services.accept_list import DEFAULT_ACCEPT_LIST, override_accept_list
from scopefilter.services.filter import ScopeFilter

# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
def datasource_db():
    """In-memory database seeded with 10 data sources named ds:1 .. ds:10."""
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE data_source (id INTEGER PRIMARY KEY, uid TEXT, name TEXT)"
    )
    conn.executemany(
        "INSERT INTO data_source (id, uid, name) VALUES (?, ?, ?)",
        [(i, f"uid-{i}", f"ds:{i}") for i in range(1, 11)],
    )
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture
def query_datasources(datasource_db):
    """Run a predicate against the seeded table and return matching names."""

    def _query(predicate):
        sql = "SELECT data_source.name FROM data_source WHERE " + predicate.where
        sql += " ORDER BY data_source.id"
        return [row[0] for row in datasource_db.execute(sql, predicate.args)]

    return _query


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def scope_filter():
    """Provide a scope filter using qmark placeholders, as sqlite expects."""
    return ScopeFilter(paramstyle="qmark")


@pytest.fixture
def restore_accept_list():
    """Restore the accept list after a test mutates it."""
    with override_accept_list(DEFAULT_ACCEPT_LIST):
        yield


# ============================================================================
# User Fixtures
# ============================================================================


@pytest.fixture
def reader_user():
    """User who may read three data sources in org 1 and all of them in org 2."""
    return SignedInUser(
        user_id=42,
        login="reader",
        org_id=1,
        permissions={
            1: {
                "datasources:read": [
                    "datasources:id:3",
                    "datasources:id:7",
                    "datasources:id:8",
                ],
            },
            2: {"datasources:read": ["datasources:*"]},
        },
    )


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear cached settings so environment changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "rbac: Access-control specific tests")
