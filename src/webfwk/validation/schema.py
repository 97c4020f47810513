"""SchemaValidator: apply a SchemaSpec to mapping payloads."""

from __future__ import annotations

from collections.abc import Mapping

from webfwk.validation.models import SchemaSpec, ValidationReport, describe_rule
from webfwk.validation.ruleset import Ruleset


class UnknownSchemaError(KeyError):
    """Raised when a schema name is not configured."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Schema '{self.name}' not found"


class SchemaValidator:
    def __init__(self, spec: SchemaSpec) -> None:
        self.spec = spec
        self._rulesets: dict[str, Ruleset] = {
            field: Ruleset().add_rule(*(s.build() for s in specs))
            for field, specs in spec.rules.items()
        }

    @property
    def name(self) -> str:
        return self.spec.name

    def ruleset(self, field: str) -> Ruleset | None:
        return self._rulesets.get(field)

    def validate(self, payload: Mapping[str, object]) -> ValidationReport:
        """Check each declared field; missing fields are validated as None."""
        errors: dict[str, list[dict[str, object]]] = {}
        for field, ruleset in self._rulesets.items():
            result = ruleset.check(payload.get(field))
            if not result.valid:
                errors[field] = [describe_rule(rule) for rule in result.errors]
        return ValidationReport(schema_name=self.name, valid=not errors, errors=errors)


def build_validators(specs: Mapping[str, SchemaSpec]) -> dict[str, SchemaValidator]:
    return {name: SchemaValidator(spec) for name, spec in specs.items()}


def get_validator(validators: Mapping[str, SchemaValidator], name: str) -> SchemaValidator:
    validator = validators.get(name)
    if validator is None:
        raise UnknownSchemaError(name)
    return validator
