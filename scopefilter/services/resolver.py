"""Per-action resolution and cross-action intersection of scope grants."""

from collections.abc import Iterable as IterableABC
from dataclasses import dataclass, field
from typing import (Any, FrozenSet, Iterable, Iterator, Mapping, Optional, Set,
                    Tuple, Union)

from scopefilter.core.exceptions import NoActionsError
from scopefilter.core.logging import get_logger
from scopefilter.services.scope import ScopeAttribute, parse_scope

logger = get_logger(__name__)

PermissionSet = Mapping[str, Iterable[str]]
Value = Union[int, str]


@dataclass(frozen=True)
class Unrestricted:
    """Every row is permitted."""

    @property
    def is_empty(self) -> bool:
        return False


@dataclass(frozen=True)
class Restricted:
    """Only rows whose value is in ``values`` are permitted. Empty means none."""

    values: FrozenSet[Value] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.values


AuthorizationResult = Union[Unrestricted, Restricted]

UNRESTRICTED = Unrestricted()
NO_ACCESS = Restricted(frozenset())


def resolve_action(
    permissions: Optional[PermissionSet],
    action: str,
    prefix: str,
    attribute: Union[ScopeAttribute, str],
) -> AuthorizationResult:
    """Compute what a permission set grants on prefix/attribute for one action.

    A wildcard grant makes the result unrestricted as soon as it is seen.
    Exact grants are collected into a de-duplicated value set. Unparsable
    scopes and scopes for other prefixes or attributes are skipped.
    """
    kind = ScopeAttribute.of(attribute)
    scopes = _scope_entries((permissions or {}).get(action), action)
    if not scopes:
        return NO_ACCESS

    values: Set[Value] = set()
    for entry in scopes:
        scope = parse_scope(entry)
        if scope is None:
            logger.debug(f"Skipping malformed scope {entry!r} for action {action!r}")
            continue

        if scope.grants_all(prefix, kind.value):
            return UNRESTRICTED

        if not scope.matches(prefix, kind.value):
            continue

        try:
            values.add(kind.coerce(scope.value))
        except ValueError as e:
            logger.debug(f"Skipping scope {scope.raw!r} for action {action!r}: {e}")

    return Restricted(frozenset(values))


def _scope_entries(scopes: Any, action: str) -> Tuple[Any, ...]:
    """Normalize an action's granted scopes into a tuple of entries.

    A lone string is one scope, never a sequence of characters. Values that
    are not collections grant nothing.
    """
    if scopes is None:
        return ()
    if isinstance(scopes, str):
        return (scopes,)
    if not isinstance(scopes, IterableABC):
        logger.debug(f"Skipping malformed scope list {scopes!r} for action {action!r}")
        return ()
    return tuple(scopes)


def intersect(left: AuthorizationResult, right: AuthorizationResult) -> AuthorizationResult:
    """Combine two results; a row must be permitted by both."""
    if isinstance(left, Unrestricted):
        return right
    if isinstance(right, Unrestricted):
        return left
    return Restricted(left.values & right.values)


def intersect_all(results: Iterable[AuthorizationResult]) -> AuthorizationResult:
    """Fold results with :func:`intersect`.

    Stops consuming ``results`` once nothing is permitted. Raises
    NoActionsError when there is nothing to fold.
    """
    iterator: Iterator[AuthorizationResult] = iter(results)
    try:
        combined = next(iterator)
    except StopIteration:
        raise NoActionsError() from None

    for result in iterator:
        if combined.is_empty:
            break
        combined = intersect(combined, result)

    return combined
