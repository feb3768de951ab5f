"""Scope grammar: parsing ``prefix:attribute:value`` strings.

A scope grants access to resources under a prefix. Any trailing segment may
be the wildcard ``*``, which covers every value at and below that point::

    datasources:id:3     exact
    datasources:id:*     every id under datasources
    datasources:*        everything under datasources
    *                    everything, any prefix

Anything that does not fit this grammar is unparsable and never matches.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from scopefilter.core.exceptions import InvalidAttributeError

WILDCARD = "*"
SEPARATOR = ":"
MAX_SEGMENTS = 3

_INTEGER_RE = re.compile(r"-?\d+")


class ScopeAttribute(str, Enum):
    """Attribute kinds a scope can address."""

    ID = "id"
    UID = "uid"

    @classmethod
    def of(cls, attribute: Union["ScopeAttribute", str]) -> "ScopeAttribute":
        """Resolve an attribute given as enum member or string value."""
        if isinstance(attribute, cls):
            return attribute
        try:
            return cls(attribute)
        except ValueError:
            raise InvalidAttributeError(str(attribute)) from None

    def coerce(self, value: str) -> Union[int, str]:
        """Convert a scope value into the bind value for this attribute.

        Raises ValueError when the value does not fit the attribute kind.
        """
        if not value or WILDCARD in value:
            raise ValueError(f"invalid {self.value} value: {value!r}")
        if self is ScopeAttribute.ID:
            if not _INTEGER_RE.fullmatch(value):
                raise ValueError(f"invalid id value: {value!r}")
            return int(value)
        return value


@dataclass(frozen=True)
class Scope:
    """A parsed scope. Wildcard segments hold ``*``."""

    prefix: str
    attribute: str
    value: str
    raw: str = ""

    @property
    def is_universal(self) -> bool:
        return self.prefix == WILDCARD

    @property
    def is_wildcard(self) -> bool:
        return WILDCARD in (self.prefix, self.attribute, self.value)

    def grants_all(self, prefix: str, attribute: str) -> bool:
        """Check if this scope covers every value of prefix/attribute."""
        if self.is_universal:
            return True
        if self.prefix != prefix:
            return False
        if self.attribute == WILDCARD:
            return True
        return self.attribute == attribute and self.value == WILDCARD

    def matches(self, prefix: str, attribute: str) -> bool:
        """Check if this is an exact grant on prefix/attribute."""
        return (
            not self.is_wildcard
            and self.prefix == prefix
            and self.attribute == attribute
        )


def parse_scope(scope: str) -> Optional[Scope]:
    """Parse a scope string, returning None when it is malformed."""
    if not isinstance(scope, str) or not scope:
        return None

    parts = scope.split(SEPARATOR)
    if len(parts) > MAX_SEGMENTS:
        return None

    seen_wildcard = False
    for part in parts:
        if not part:
            return None
        if part == WILDCARD:
            seen_wildcard = True
            continue
        # "1*" style partial wildcards and concrete segments after a wildcard
        if WILDCARD in part or seen_wildcard:
            return None

    if len(parts) < MAX_SEGMENTS:
        # Short forms are only valid when they end in a wildcard
        if parts[-1] != WILDCARD:
            return None
        parts = parts + [WILDCARD] * (MAX_SEGMENTS - len(parts))

    prefix, attribute, value = parts
    return Scope(prefix=prefix, attribute=attribute, value=value, raw=scope)


def build_scope(*parts: str) -> str:
    """Join segments into a scope string."""
    return SEPARATOR.join(str(part) for part in parts)


def scope_prefix(prefix: str, attribute: Union[ScopeAttribute, str]) -> str:
    """Return the ``prefix:attribute:`` stem shared by exact scopes."""
    return build_scope(prefix, ScopeAttribute.of(attribute).value, "")
