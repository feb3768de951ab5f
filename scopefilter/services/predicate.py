"""SQL predicate generation from authorization results."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from scopefilter.core.config import ParamStyle
from scopefilter.services.resolver import AuthorizationResult, Unrestricted


@dataclass(frozen=True)
class Predicate:
    """Parameterized SQL boolean expression and its bound arguments."""

    where: str
    args: Tuple[Any, ...] = ()

    @property
    def allows_all(self) -> bool:
        return self == ALLOW_ALL

    @property
    def denies_all(self) -> bool:
        return self == DENY_ALL

    def and_where(self, sql: str) -> str:
        """Append this predicate to SQL that already has a WHERE clause."""
        return f"{sql} AND {self.where}"

    def to_dict(self) -> Dict[str, Any]:
        return {"where": self.where, "args": list(self.args)}


ALLOW_ALL = Predicate("1 = 1")
DENY_ALL = Predicate("1 = 0")


def placeholders(count: int, paramstyle: Union[ParamStyle, str] = ParamStyle.QMARK) -> str:
    """Render ``count`` comma-separated placeholders in the given style."""
    style = ParamStyle(paramstyle)
    if style is ParamStyle.QMARK:
        marks = ["?"] * count
    elif style is ParamStyle.FORMAT:
        marks = ["%s"] * count
    else:
        marks = [f":{position}" for position in range(1, count + 1)]
    return ",".join(marks)


def build_predicate(
    result: AuthorizationResult,
    column: str,
    paramstyle: Union[ParamStyle, str] = ParamStyle.QMARK,
) -> Predicate:
    """Turn an authorization result into a predicate on ``column``.

    ``column`` is interpolated verbatim and must already be validated
    against the accept list.
    """
    if isinstance(result, Unrestricted):
        return ALLOW_ALL
    if result.is_empty:
        return DENY_ALL

    values = tuple(sorted(result.values))
    return Predicate(
        where=f"{column} IN ({placeholders(len(values), paramstyle)})",
        args=values,
    )
