"""Shared fixtures for webfwk tests."""

import json
from pathlib import Path

import pytest


class StubRule:
    """Rule with a fixed verdict that counts its calls."""

    def __init__(self, accepts: bool, label: str = "") -> None:
        self.accepts = accepts
        self.label = label
        self.calls: list[object] = []

    def validate(self, value: object) -> bool:
        self.calls.append(value)
        return self.accepts

    def __repr__(self) -> str:
        return f"StubRule({self.label or self.accepts!r})"


class ExplodingRule:
    """Rule whose evaluation fails for reasons unrelated to the value."""

    def validate(self, value: object) -> bool:
        raise RuntimeError("rule misconfigured")


NON_SCALAR_VALUES: list[object] = [
    None,
    [],
    [[]],
    [1, 2],
    ["a", "b", "c"],
    [None, "a", 1.23, []],
    {},
    {"a": 1},
    object(),
    lambda: None,
    b"bytes",
]


def _signup_config() -> dict:
    return {
        "port": 9000,
        "validation": {
            "log_rejections": True,
            "schemas": {
                "signup": {
                    "login": [{"type": "length", "minimum": 8, "maximum": 16}],
                    "password": [
                        {"type": "length", "minimum": 16, "maximum": 24},
                        {"type": "regex", "pattern": "[A-Z]+"},
                        {"type": "regex", "pattern": "\\d+"},
                    ],
                },
                "contact": {
                    "email": [{"type": "contains", "needles": ["@"]}],
                },
            },
        },
    }


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """.webfwk.json with two schemas."""
    path = tmp_path / ".webfwk.json"
    path.write_text(json.dumps(_signup_config()))
    return path


@pytest.fixture
def make_rule():
    """Factory for StubRule instances."""
    return StubRule


@pytest.fixture
def exploding_rule() -> ExplodingRule:
    return ExplodingRule()


@pytest.fixture(params=NON_SCALAR_VALUES, ids=lambda v: type(v).__name__)
def non_scalar(request: pytest.FixtureRequest) -> object:
    """Each value the built-in rules must reject regardless of configuration."""
    return request.param
