"""Scope filter engine: permissions in, SQL predicate out."""

from typing import Optional, Union

from scopefilter.core.config import ParamStyle, Settings, get_settings
from scopefilter.core.exceptions import MissingPermissionsError, NoActionsError
from scopefilter.core.logging import get_logger, log_event
from scopefilter.models.auth import SignedInUser
from scopefilter.services.accept_list import validate_column
from scopefilter.services.predicate import Predicate, build_predicate
from scopefilter.services.resolver import (AuthorizationResult, PermissionSet,
                                           intersect_all, resolve_action)
from scopefilter.services.scope import ScopeAttribute

logger = get_logger(__name__)


class ScopeFilter:
    """Builds row filters from scope-based permissions."""

    def __init__(
        self,
        paramstyle: Union[ParamStyle, str] = ParamStyle.QMARK,
        log_denied: bool = False,
    ):
        self.paramstyle = ParamStyle(paramstyle)
        self.log_denied = log_denied

    def resolve(
        self,
        permissions: Optional[PermissionSet],
        prefix: str,
        attribute: Union[ScopeAttribute, str],
        *actions: str,
    ) -> AuthorizationResult:
        """Resolve what the permissions grant under every one of ``actions``."""
        if not actions:
            raise NoActionsError()

        return intersect_all(
            resolve_action(permissions, action, prefix, attribute)
            for action in actions
        )

    def filter(
        self,
        permissions: Optional[PermissionSet],
        column: str,
        prefix: str,
        attribute: Union[ScopeAttribute, str],
        *actions: str,
    ) -> Predicate:
        """Build a predicate restricting ``column`` to the permitted values.

        Args:
            permissions: Action to scopes mapping for one organization
            column: SQL column holding the attribute, must be accept-listed
            prefix: Scope prefix of the resource, e.g. "datasources"
            attribute: Scope attribute the column holds
            actions: Actions a row must be permitted under, at least one

        Returns:
            Predicate to AND into the query's WHERE clause

        Raises:
            InvalidColumnError: column is not accepted for the attribute
            NoActionsError: no actions were given
        """
        kind = ScopeAttribute.of(attribute)
        validate_column(column, kind)

        result = self.resolve(permissions, prefix, kind, *actions)
        predicate = build_predicate(result, column, self.paramstyle)

        level = "info" if predicate.denies_all and self.log_denied else "debug"
        log_event(
            logger,
            level,
            "filter_resolved",
            column=column,
            prefix=prefix,
            attribute=kind.value,
            actions=list(actions),
            outcome=_outcome(predicate),
            value_count=len(predicate.args),
        )

        return predicate

    def filter_for_user(
        self,
        user: Optional[SignedInUser],
        column: str,
        prefix: str,
        attribute: Union[ScopeAttribute, str],
        *actions: str,
        org_id: Optional[int] = None,
    ) -> Predicate:
        """Build a predicate from a signed-in user's permissions in an org."""
        if user is None:
            raise MissingPermissionsError()

        return self.filter(
            user.permissions_for_org(org_id), column, prefix, attribute, *actions
        )


def _outcome(predicate: Predicate) -> str:
    if predicate.allows_all:
        return "allow_all"
    if predicate.denies_all:
        return "deny_all"
    return "restricted"


def create_scope_filter(settings: Optional[Settings] = None) -> ScopeFilter:
    """Factory function to create a scope filter from settings."""
    settings = settings or get_settings()
    return ScopeFilter(
        paramstyle=settings.sql_paramstyle,
        log_denied=settings.log_denied_filters,
    )


def filter_query(
    permissions: Optional[PermissionSet],
    column: str,
    prefix: str,
    attribute: Union[ScopeAttribute, str],
    *actions: str,
    paramstyle: Optional[Union[ParamStyle, str]] = None,
) -> Predicate:
    """Build a predicate with the configured defaults. See :meth:`ScopeFilter.filter`."""
    engine = create_scope_filter()
    if paramstyle is not None:
        engine.paramstyle = ParamStyle(paramstyle)
    return engine.filter(permissions, column, prefix, attribute, *actions)


def filter_for_user(
    user: Optional[SignedInUser],
    column: str,
    prefix: str,
    attribute: Union[ScopeAttribute, str],
    *actions: str,
    org_id: Optional[int] = None,
) -> Predicate:
    """Build a predicate for a signed-in user with the configured defaults."""
    return create_scope_filter().filter_for_user(
        user, column, prefix, attribute, *actions, org_id=org_id
    )
