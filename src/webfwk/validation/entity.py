"""Entity: field values with rules attached through ``Annotated`` metadata."""

from __future__ import annotations

import copy
from typing import Annotated, Any, ClassVar, get_args, get_origin, get_type_hints

from webfwk.validation.rules import Rule
from webfwk.validation.ruleset import Ruleset

_RULESETS: dict[type, dict[str, Ruleset]] = {}


def _snapshot(values: dict[str, Any]) -> dict[str, Any]:
    """Copy containers by value; other objects are kept by reference."""
    return {
        name: copy.deepcopy(value) if isinstance(value, (list, dict, set, tuple)) else value
        for name, value in values.items()
    }


def _same(a: Any, b: Any) -> bool:
    """Equal in value and type, so 1, 1.0 and True count as different."""
    return type(a) is type(b) and a == b


def _field_rules(hint: Any) -> list[Rule]:
    if get_origin(hint) is not Annotated:
        return []
    return [meta for meta in get_args(hint)[1:] if isinstance(meta, Rule)]


def entity_rulesets(cls: type[Entity]) -> dict[str, Ruleset]:
    """Build (once per class) a ruleset for every public field of ``cls``."""
    cached = _RULESETS.get(cls)
    if cached is not None:
        return cached

    rulesets: dict[str, Ruleset] = {}
    for name, hint in get_type_hints(cls, include_extras=True).items():
        if name.startswith("_") or get_origin(hint) is ClassVar:
            continue
        rulesets[name] = Ruleset().add_rule(*_field_rules(hint))

    _RULESETS[cls] = rulesets
    return rulesets


class Entity:
    """Record whose public annotated attributes are validated field by field.

    Example::

        class Account(Entity):
            login: Annotated[str, Length(8, 16)] = ""

    Assigning to a name that is not a field is ignored.
    """

    def __init__(self, **values: Any) -> None:
        object.__setattr__(self, "_errors", {})
        for name in self.field_names():
            default = getattr(type(self), name, None)
            object.__setattr__(self, name, copy.copy(default))
        for name, value in values.items():
            setattr(self, name, value)
        object.__setattr__(self, "_cache", _snapshot(self.to_dict()))

    @classmethod
    def field_names(cls) -> list[str]:
        return list(entity_rulesets(cls))

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or name in entity_rulesets(type(self)):
            object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({fields})"

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.field_names()}

    def cache(self) -> None:
        """Set the current values as the reference state."""
        object.__setattr__(self, "_cache", _snapshot(self.to_dict()))

    def get_entries(self) -> dict[str, Any]:
        """Fields whose values differ from the cached state."""
        cached: dict[str, Any] = self._cache
        return {
            name: value
            for name, value in self.to_dict().items()
            if name not in cached or not _same(cached[name], value)
        }

    def validate(self) -> bool:
        errors: dict[str, list[Rule]] = {}
        rulesets = entity_rulesets(type(self))
        for name, value in self.to_dict().items():
            result = rulesets[name].check(value)
            if not result.valid:
                errors[name] = list(result.errors)
        object.__setattr__(self, "_errors", errors)
        return not errors

    def get_errors(self, name: str) -> list[Rule]:
        return list(self._errors.get(name, []))

    def has_errors(self, name: str | None = None) -> bool:
        if name is None:
            return bool(self._errors)
        return bool(self._errors.get(name))
