"""Scope-based row filtering for SQL queries."""

from scopefilter.core.exceptions import (InvalidAttributeError,
                                         InvalidColumnError,
                                         MissingPermissionsError,
                                         NoActionsError, ScopeFilterError)
from scopefilter.models.auth import SignedInUser
from scopefilter.services.filter import (ScopeFilter, create_scope_filter,
                                         filter_for_user, filter_query)
from scopefilter.services.predicate import Predicate
from scopefilter.services.scope import ScopeAttribute

__version__ = "0.1.0"

__all__ = [
    "ScopeFilter",
    "create_scope_filter",
    "filter_query",
    "filter_for_user",
    "Predicate",
    "ScopeAttribute",
    "SignedInUser",
    "ScopeFilterError",
    "InvalidColumnError",
    "InvalidAttributeError",
    "NoActionsError",
    "MissingPermissionsError",
]
