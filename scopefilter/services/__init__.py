"""Business logic services package."""

from .accept_list import (DEFAULT_ACCEPT_LIST, allowed_columns,
                          override_accept_list, register_column,
                          validate_column)
from .filter import (ScopeFilter, create_scope_filter, filter_for_user,
                     filter_query)
from .predicate import ALLOW_ALL, DENY_ALL, Predicate, build_predicate
from .resolver import (NO_ACCESS, UNRESTRICTED, AuthorizationResult,
                       Restricted, Unrestricted, intersect, intersect_all,
                       resolve_action)
from .scope import (WILDCARD, Scope, ScopeAttribute, build_scope, parse_scope,
                    scope_prefix)

__all__ = [
    # Engine
    "ScopeFilter",
    "create_scope_filter",
    "filter_query",
    "filter_for_user",
    # Scopes
    "Scope",
    "ScopeAttribute",
    "WILDCARD",
    "parse_scope",
    "build_scope",
    "scope_prefix",
    # Accept list
    "DEFAULT_ACCEPT_LIST",
    "allowed_columns",
    "validate_column",
    "register_column",
    "override_accept_list",
    # Resolution
    "AuthorizationResult",
    "Unrestricted",
    "Restricted",
    "UNRESTRICTED",
    "NO_ACCESS",
    "resolve_action",
    "intersect",
    "intersect_all",
    # Predicates
    "Predicate",
    "ALLOW_ALL",
    "DENY_ALL",
    "build_predicate",
]
