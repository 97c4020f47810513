"""Validation: rules, rulesets, entities and declarative schemas."""

from webfwk.validation.config import ValidationConfig, load_validation_config
from webfwk.validation.entity import Entity
from webfwk.validation.models import (
    ContainsSpec,
    LengthSpec,
    RegexSpec,
    RuleSpec,
    SchemaSpec,
    ValidationReport,
    describe_rule,
)
from webfwk.validation.rules import Contains, Length, Regex, Rule
from webfwk.validation.ruleset import Ruleset, RulesetResult
from webfwk.validation.schema import (
    SchemaValidator,
    UnknownSchemaError,
    build_validators,
    get_validator,
)

__all__ = [
    "Contains",
    "ContainsSpec",
    "Entity",
    "Length",
    "LengthSpec",
    "Regex",
    "RegexSpec",
    "Rule",
    "RuleSpec",
    "Ruleset",
    "RulesetResult",
    "SchemaSpec",
    "SchemaValidator",
    "UnknownSchemaError",
    "ValidationConfig",
    "ValidationReport",
    "build_validators",
    "describe_rule",
    "get_validator",
    "load_validation_config",
]
