# jsxprop_lint/config.py
"""Rule options for the unknown-property check."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Mapping, Optional

from jsxprop_lint.errors import ConfigurationError

KNOWN_OPTIONS: FrozenSet[str] = frozenset({"ignore"})


@dataclass(frozen=True)
class RuleOptions:
    """
    Fixed-shape rule configuration.

    Attributes
    ----------
    ignore : Literal attribute names that are always accepted
    """
    ignore: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_ignore(cls, names: Optional[Iterable[str]]) -> RuleOptions:
        if names is None:
            return cls()
        if isinstance(names, str):
            raise ConfigurationError(
                "'ignore' must be a list of attribute names, not a string",
                detail={"ignore": names},
            )
        checked = []
        for name in names:
            if not isinstance(name, str) or not name:
                raise ConfigurationError(
                    f"'ignore' entries must be non-empty strings, got {name!r}",
                    detail={"entry": repr(name)},
                )
            checked.append(name)
        return cls(ignore=frozenset(checked))

    @classmethod
    def from_options(cls, raw: Any = None) -> RuleOptions:
        """
        Build options from what a host configuration hands over.

        Accepts ``None``, a mapping such as ``{"ignore": ["class"]}``, or
        the list form ``[{"ignore": ["class"]}]`` used by rule configs.
        Unknown keys are rejected.
        """
        if raw is None:
            return cls()
        if isinstance(raw, (list, tuple)):
            if not raw:
                return cls()
            if len(raw) > 1:
                raise ConfigurationError(
                    f"expected at most one options object, got {len(raw)}",
                    detail={"count": len(raw)},
                )
            raw = raw[0]
        if not isinstance(raw, Mapping):
            raise ConfigurationError(
                f"options must be a mapping, got {type(raw).__name__}",
            )
        unknown = sorted(set(raw) - KNOWN_OPTIONS)
        if unknown:
            raise ConfigurationError(
                f"unknown option(s): {', '.join(map(str, unknown))}",
                detail={"unknown": unknown},
            )
        return cls.from_ignore(raw.get("ignore"))

    def is_ignored(self, name: str) -> bool:
        return name in self.ignore

    def to_dict(self) -> dict:
        return {"ignore": sorted(self.ignore)}


DEFAULT_OPTIONS = RuleOptions()

__all__ = ["RuleOptions", "DEFAULT_OPTIONS", "KNOWN_OPTIONS"]
