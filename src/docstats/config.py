"""Plugin settings read from ``DOCSTATS_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from docstats.runtime.telemetry import ENV_PREFIX


class CountStrategy(str, Enum):
    """How the statistics engine fetches text for word counting."""

    LINES = "lines"
    REGION = "region"


class StatusAlignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class PluginSettings:
    tokenizer: str = "word"
    count_strategy: CountStrategy = CountStrategy.LINES
    status_alignment: StatusAlignment = StatusAlignment.LEFT
    edit_priority: int = 0
    edit_author: str = "docstats"
    edit_after_cursor: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PluginSettings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Unset variables keep the dataclass defaults; malformed values raise
        ``ValueError`` naming the variable.
        """

        if environ is None:
            environ = os.environ

        def lookup(name: str) -> Optional[str]:
            raw = environ.get(f"{ENV_PREFIX}{name}")
            return raw.strip() if raw is not None else None

        defaults = cls()
        return cls(
            tokenizer=_tokenizer("TOKENIZER", lookup("TOKENIZER"), defaults.tokenizer),
            count_strategy=_enum(
                CountStrategy,
                "COUNT_STRATEGY",
                lookup("COUNT_STRATEGY"),
                defaults.count_strategy,
            ),
            status_alignment=_enum(
                StatusAlignment,
                "STATUS_ALIGNMENT",
                lookup("STATUS_ALIGNMENT"),
                defaults.status_alignment,
            ),
            edit_priority=_int(
                "EDIT_PRIORITY", lookup("EDIT_PRIORITY"), defaults.edit_priority
            ),
            edit_author=lookup("EDIT_AUTHOR") or defaults.edit_author,
            edit_after_cursor=_flag(
                "EDIT_AFTER_CURSOR",
                lookup("EDIT_AFTER_CURSOR"),
                defaults.edit_after_cursor,
            ),
        )


def _enum(kind, name: str, raw: Optional[str], default):
    if not raw:
        return default
    try:
        return kind(raw.lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in kind)
        raise ValueError(
            f"{ENV_PREFIX}{name}={raw!r} is not one of: {choices}"
        ) from exc


def _tokenizer(name: str, raw: Optional[str], default: str) -> str:
    # stats imports this module, so the registry is resolved at call time
    from docstats.stats.tokenizer import tokenizer_names

    if not raw:
        return default
    value = raw.lower()
    if value not in tokenizer_names():
        choices = ", ".join(tokenizer_names())
        raise ValueError(f"{ENV_PREFIX}{name}={raw!r} is not one of: {choices}")
    return value


def _int(name: str, raw: Optional[str], default: int) -> int:
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name}={raw!r} is not an integer") from exc


def _flag(name: str, raw: Optional[str], default: bool) -> bool:
    if not raw:
        return default
    value = raw.lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name}={raw!r} is not a boolean flag")


__all__ = ["CountStrategy", "PluginSettings", "StatusAlignment"]
