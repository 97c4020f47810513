"""Ruleset: ordered rule registry with per-rule error accumulation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Self

from webfwk.validation.rules import Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RulesetResult:
    """Outcome of evaluating one value against a ruleset."""

    errors: tuple[Rule, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    def __bool__(self) -> bool:
        return self.valid


class Ruleset:
    """Stores rules and validates values with all of them."""

    def __init__(self) -> None:
        self._rules: list[Rule] = []
        self._errors: list[Rule] = []

    def add_rule(self, *rules: Rule) -> Self:
        """Append rules in the order given."""
        self._rules.extend(rules)
        return self

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def get_errors(self) -> list[Rule]:
        """Rules that rejected the value in the last ``validate`` call."""
        return list(self._errors)

    def check(self, value: object) -> RulesetResult:
        """Evaluate every rule against ``value`` without touching stored errors.

        All rules run even after a rejection. Exceptions raised by a rule
        propagate unchanged.
        """
        rejected = [rule for rule in self._rules if not rule.validate(value)]
        if rejected:
            logger.debug("Value rejected by %d of %d rules", len(rejected), len(self._rules))
        return RulesetResult(errors=tuple(rejected))

    def validate(self, value: object) -> bool:
        """Validate a value with all registered rules."""
        self._errors = []
        result = self.check(value)
        self._errors = list(result.errors)
        return result.valid
