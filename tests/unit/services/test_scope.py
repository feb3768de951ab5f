"""Unit tests for scope parsing."""

import pytest

from scopefilter.core.exceptions import InvalidAttributeError
from scopefilter.services.scope import (Scope, ScopeAttribute, build_scope,
                                        parse_scope, scope_prefix)


class TestParseScope:
    """Test the scope grammar."""

    def test_exact_scope(self):
        """Test a fully specified scope."""
        scope = parse_scope("datasources:id:3")

        assert scope == Scope("datasources", "id", "3", raw="datasources:id:3")
        assert not scope.is_wildcard
        assert not scope.is_universal

    def test_value_wildcard(self):
        """Test a scope with a wildcard value."""
        scope = parse_scope("datasources:id:*")

        assert scope.prefix == "datasources"
        assert scope.attribute == "id"
        assert scope.value == "*"
        assert scope.is_wildcard

    def test_prefix_wildcard_is_padded(self):
        """Test that prefix:* covers attribute and value."""
        scope = parse_scope("datasources:*")

        assert (scope.prefix, scope.attribute, scope.value) == ("datasources", "*", "*")

    @pytest.mark.parametrize("raw", ["*", "*:*", "*:*:*"])
    def test_universal_forms(self, raw):
        """Test every spelling of the universal scope."""
        scope = parse_scope(raw)

        assert scope is not None
        assert scope.is_universal

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "datasources",
            "datasources:id",
            "datasources:id:3:4",
            "datasources::3",
            ":id:3",
            "datasources:id:",
            "datasources:id:1*",
            "datasources:*:3",
            "*:id:3",
            "data*:id:3",
        ],
    )
    def test_malformed_scopes(self, raw):
        """Test that malformed scopes are rejected without raising."""
        assert parse_scope(raw) is None

    def test_non_string_input(self):
        """Test that non-string input is treated as malformed."""
        assert parse_scope(None) is None
        assert parse_scope(3) is None


class TestScopeMatching:
    """Test wildcard and exact matching against targets."""

    def test_grants_all(self):
        """Test which scopes cover a whole prefix/attribute."""
        assert parse_scope("*").grants_all("datasources", "id")
        assert parse_scope("datasources:*").grants_all("datasources", "id")
        assert parse_scope("datasources:id:*").grants_all("datasources", "id")

        assert not parse_scope("datasources:id:*").grants_all("datasources", "uid")
        assert not parse_scope("dashboards:*").grants_all("datasources", "id")
        assert not parse_scope("datasources:id:3").grants_all("datasources", "id")

    def test_matches_exact_only(self):
        """Test that matches() ignores wildcard scopes."""
        assert parse_scope("datasources:id:3").matches("datasources", "id")
        assert not parse_scope("datasources:id:3").matches("datasources", "uid")
        assert not parse_scope("dashboards:id:3").matches("datasources", "id")
        assert not parse_scope("datasources:id:*").matches("datasources", "id")


class TestScopeAttribute:
    """Test attribute kinds and value coercion."""

    def test_of_accepts_strings(self):
        """Test resolving attributes from strings."""
        assert ScopeAttribute.of("id") is ScopeAttribute.ID
        assert ScopeAttribute.of(ScopeAttribute.UID) is ScopeAttribute.UID

    def test_of_rejects_unknown(self):
        """Test unknown attributes raise."""
        with pytest.raises(InvalidAttributeError):
            ScopeAttribute.of("name")

    def test_id_coercion(self):
        """Test id values become integers."""
        assert ScopeAttribute.ID.coerce("3") == 3
        assert ScopeAttribute.ID.coerce("-1") == -1

        for bad in ["abc", "1*", "", " 3", "3.0"]:
            with pytest.raises(ValueError):
                ScopeAttribute.ID.coerce(bad)

    def test_uid_coercion(self):
        """Test uid values stay strings."""
        assert ScopeAttribute.UID.coerce("P8E80F9AEF21F6940") == "P8E80F9AEF21F6940"

        with pytest.raises(ValueError):
            ScopeAttribute.UID.coerce("abc*")


class TestScopeBuilders:
    """Test scope string helpers."""

    def test_build_scope(self):
        assert build_scope("datasources", "id", 3) == "datasources:id:3"
        assert build_scope("datasources", "*") == "datasources:*"

    def test_scope_prefix(self):
        assert scope_prefix("datasources", ScopeAttribute.UID) == "datasources:uid:"

    def test_built_scopes_parse(self):
        """Test that helper output round-trips through the parser."""
        scope = parse_scope(build_scope("dashboards", "uid", "abc"))
        assert scope.matches("dashboards", "uid")
