"""Pydantic models for declarative rules, schemas and validation reports."""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

from webfwk.validation.rules import Contains, Length, Regex, Rule


class LengthSpec(BaseModel):
    type: Literal["length"] = "length"
    minimum: int = Field(default=0, ge=0)
    maximum: int | None = Field(default=None, ge=0)

    def build(self) -> Length:
        return Length(self.minimum, self.maximum)


class RegexSpec(BaseModel):
    type: Literal["regex"] = "regex"
    pattern: str

    @field_validator("pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid pattern {value!r}: {e}") from e
        return value

    def build(self) -> Regex:
        return Regex(self.pattern)


class ContainsSpec(BaseModel):
    type: Literal["contains"] = "contains"
    needles: list[str] = Field(default_factory=list)

    def build(self) -> Contains:
        return Contains(*self.needles)


RuleSpec = Annotated[LengthSpec | RegexSpec | ContainsSpec, Field(discriminator="type")]


def describe_rule(rule: Rule) -> dict[str, Any]:
    """JSON-ready description of a rule, used when rendering errors."""
    if isinstance(rule, Length):
        return LengthSpec.model_construct(minimum=rule.minimum, maximum=rule.maximum).model_dump()
    if isinstance(rule, Regex):
        return RegexSpec.model_construct(pattern=rule.pattern).model_dump()
    if isinstance(rule, Contains):
        return ContainsSpec.model_construct(needles=list(rule.needles)).model_dump()
    return {"type": type(rule).__name__}


class SchemaSpec(BaseModel):
    """Named set of per-field rule lists."""

    name: str
    rules: dict[str, list[RuleSpec]] = Field(default_factory=dict)


class ValidationReport(BaseModel):
    schema_name: str
    valid: bool
    errors: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)
