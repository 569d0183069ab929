from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from uncss.errors import ArgumentError
from uncss.render import RENDERERS

# Legacy option names accepted by ``UncssOptions.from_mapping``.
_ALIASES = {"timeout": "timeout_ms"}


@dataclass(frozen=True)
class UncssOptions:
    compress: bool = False
    ignore: frozenset[str] = frozenset()
    stylesheets: tuple[str, ...] | None = None  # explicit list, skips discovery
    timeout_ms: int = 1000
    renderer: str = "browser"
    max_workers: int = 8

    def __post_init__(self) -> None:
        object.__setattr__(self, "ignore", _string_set("ignore", self.ignore))
        if self.stylesheets is not None:
            object.__setattr__(self, "stylesheets", tuple(_strings("stylesheets", self.stylesheets)))
        if not isinstance(self.timeout_ms, int) or self.timeout_ms < 0:
            raise ArgumentError(f"timeout_ms must be a non-negative integer, got {self.timeout_ms!r}")
        if self.renderer not in RENDERERS:
            raise ArgumentError(
                f"renderer must be one of {', '.join(RENDERERS)}, got {self.renderer!r}"
            )
        if not isinstance(self.max_workers, int) or self.max_workers < 1:
            raise ArgumentError(f"max_workers must be a positive integer, got {self.max_workers!r}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> UncssOptions:
        """Build options from a plain mapping, e.g. ``{"compress": True, "timeout": 500}``."""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ArgumentError(f"Unknown option: {key!r}")
            values[name] = value
        return cls(**values)


def _strings(name: str, values: Iterable[str]) -> list[str]:
    if isinstance(values, str):
        raise ArgumentError(f"{name} must be a sequence of strings, not a single string")
    try:
        result = list(values)
    except TypeError as exc:
        raise ArgumentError(f"{name} must be a sequence of strings, got {values!r}", cause=exc)
    for value in result:
        if not isinstance(value, str):
            raise ArgumentError(f"{name} entries must be strings, got {value!r}")
    return result


def _string_set(name: str, values: Iterable[str]) -> frozenset[str]:
    return frozenset(_strings(name, values))
