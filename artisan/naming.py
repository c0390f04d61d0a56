"""Naming helpers for generated artifacts.

Every generator derives the names it substitutes into templates from the raw
identifier typed on the command line.  The transformations are deliberately
small regex rewrites so the output is predictable:

    title_case("hello world")  -> "Hello World"
    to_camel_case("user_name") -> "userName"
    to_kebab_case("UserName")  -> "user-name"
    to_snake_case("UserName")  -> "user_name"
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict

__all__ = [
    "NamingContext",
    "migration_timestamp",
    "title_case",
    "to_camel_case",
    "to_kebab_case",
    "to_snake_case",
]


# ---------------------------------------------------------------------------
# Case transformations
# ---------------------------------------------------------------------------

_WORD_START = re.compile(r"\b\w", re.ASCII)
_CAMEL_SEPARATOR = re.compile(r"[-_](.)")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_KEBAB_RUNS = re.compile(r"[\s_]+")
_SNAKE_RUNS = re.compile(r"[\s-]+")


def title_case(value: str) -> str:
    """Uppercase the first character of every word in *value*."""
    return _WORD_START.sub(lambda match: match.group(0).upper(), value)


def to_camel_case(value: str) -> str:
    """Drop each ``-``/``_`` separator and uppercase the character after it.

    Characters that do not follow a separator keep their case, so
    ``"UserProfile"`` is returned unchanged.
    """
    return _CAMEL_SEPARATOR.sub(lambda match: match.group(1).upper(), value)


def to_kebab_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    hyphenated = _LOWER_UPPER.sub(r"\1-\2", value)
    return _KEBAB_RUNS.sub("-", hyphenated).lower()


def to_snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    underscored = _LOWER_UPPER.sub(r"\1_\2", value)
    return _SNAKE_RUNS.sub("_", underscored).lower()


def migration_timestamp(now: datetime | None = None) -> str:
    """Return a sortable, second-resolution timestamp for migration files.

    The value is the UTC ISO-8601 form with ``-`` and ``:`` removed and the
    fractional part dropped, e.g. ``20250115T103000``.
    """
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y%m%dT%H%M%S")


# ---------------------------------------------------------------------------
# NamingContext
# ---------------------------------------------------------------------------


class NamingContext(BaseModel):
    """Naming variants derived from a single raw resource name."""

    model_config = ConfigDict(frozen=True)

    raw: str
    class_name: str
    class_name_camel_case: str
    class_name_lower_case: str
    timestamp: str | None = None

    @classmethod
    def from_raw(cls, raw: str, *, timestamp: str | None = None) -> "NamingContext":
        """Build the context for *raw*.

        ``class_name_lower_case`` is a plain lowercase of the input, not a
        kebab or snake form; it is used as the file-name stem.
        """
        return cls(
            raw=raw,
            class_name=title_case(raw),
            class_name_camel_case=to_camel_case(raw),
            class_name_lower_case=raw.lower(),
            timestamp=timestamp,
        )

    def template_context(self) -> dict[str, Any]:
        """Return the variables exposed to artifact templates."""
        context: dict[str, Any] = {
            "className": self.class_name,
            "classNameCamelCase": self.class_name_camel_case,
            "classNameLowerCase": self.class_name_lower_case,
        }
        if self.timestamp is not None:
            context["timestamp"] = self.timestamp
        return context
