"""Accept list of SQL column identifiers.

Column identifiers cannot be bound as parameters, so they are interpolated
into generated predicates as text. Only identifiers registered here for the
requested attribute kind may be used.
"""

import threading
from contextlib import contextmanager
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Union

from scopefilter.core.exceptions import InvalidColumnError
from scopefilter.core.logging import get_logger
from scopefilter.services.scope import ScopeAttribute

logger = get_logger(__name__)

DEFAULT_ACCEPT_LIST: Mapping[ScopeAttribute, FrozenSet[str]] = MappingProxyType(
    {
        ScopeAttribute.ID: frozenset(
            {
                "data_source.id",
                "dashboard.id",
                "folder.id",
                "org_user.user_id",
                "role.id",
                "t.id",
                "team.id",
                "u.id",
                '"user"."id"',  # Postgres
                "`user`.`id`",  # MySQL and SQLite
            }
        ),
        ScopeAttribute.UID: frozenset(
            {
                "data_source.uid",
                "dashboard.uid",
                "folder.uid",
                "role.uid",
                "team.uid",
            }
        ),
    }
)

# Readers take the current mapping without locking; writers replace it whole.
_accept_list: Mapping[ScopeAttribute, FrozenSet[str]] = DEFAULT_ACCEPT_LIST
_write_lock = threading.Lock()


def allowed_columns(attribute: Union[ScopeAttribute, str]) -> FrozenSet[str]:
    """Get the columns accepted for an attribute kind."""
    return _accept_list.get(ScopeAttribute.of(attribute), frozenset())


def validate_column(column: str, attribute: Union[ScopeAttribute, str]) -> str:
    """Return column if it is accepted for attribute, else raise InvalidColumnError."""
    kind = ScopeAttribute.of(attribute)
    if column not in _accept_list.get(kind, frozenset()):
        logger.warning(f"Rejected column {column!r} for attribute {kind.value!r}")
        raise InvalidColumnError(column, kind.value)
    return column


def register_column(column: str, attribute: Union[ScopeAttribute, str]) -> None:
    """Add a column to the accept list.

    Intended for application startup, before filters are evaluated.
    """
    global _accept_list
    kind = ScopeAttribute.of(attribute)
    if not column or not column.strip():
        raise ValueError("column must be a non-empty identifier")

    with _write_lock:
        updated: Dict[ScopeAttribute, FrozenSet[str]] = dict(_accept_list)
        updated[kind] = updated.get(kind, frozenset()) | {column}
        _accept_list = MappingProxyType(updated)

    logger.info(f"Registered column {column!r} for attribute {kind.value!r}")


@contextmanager
def override_accept_list(
    columns: Mapping[Union[ScopeAttribute, str], Iterable[str]]
) -> Iterator[None]:
    """Temporarily replace the accept list, restoring the previous one on exit."""
    global _accept_list
    replacement = MappingProxyType(
        {ScopeAttribute.of(kind): frozenset(cols) for kind, cols in columns.items()}
    )

    with _write_lock:
        previous = _accept_list
        _accept_list = replacement
    try:
        yield
    finally:
        with _write_lock:
            _accept_list = previous
