"""Application feature flags – FeatureDefinition value object."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Callable

Rule = Callable[..., Any]


def feature_key(name: str | enum.Enum) -> str:
    """Return the canonical string key for a flag name."""
    if isinstance(name, enum.Enum):
        return str(name.value)
    return str(name)


@dataclasses.dataclass(frozen=True)
class FeatureDefinition:
    """Declared default of a feature flag: a fixed boolean or a rule.

    Build one with :meth:`fixed` or :meth:`rule` rather than the constructor::

        FeatureDefinition.fixed("beta")                            # False
        FeatureDefinition.fixed("beta", True)
        FeatureDefinition.rule("colorway", lambda v: v == "dark")
    """

    name: str
    default: bool = False
    fn: Rule | None = None
    description: str = ""

    @classmethod
    def fixed(cls, name: str | enum.Enum, default: Any = False, description: str = "") -> "FeatureDefinition":
        return cls(name=feature_key(name), default=bool(default), description=description)

    @classmethod
    def rule(cls, name: str | enum.Enum, fn: Rule, description: str = "") -> "FeatureDefinition":
        if not callable(fn):
            raise TypeError(f"Rule for feature '{feature_key(name)}' must be callable")
        return cls(name=feature_key(name), fn=fn, description=description)

    @property
    def is_rule(self) -> bool:
        return self.fn is not None

    def evaluate(self, *args: Any) -> bool:
        """Return the declared value; rules are called with *args* and coerced."""
        if self.fn is None:
            return self.default
        return bool(self.fn(*args))


__all__ = ["FeatureDefinition", "Rule", "feature_key"]
